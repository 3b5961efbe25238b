"""Shared test fixtures for mdscripts tests."""

import pytest


@pytest.fixture
def sample_markdown():
    """Return a scripts document with nested headings, env tables and code."""
    return """Intro text before any heading.

| key | value |
| --- | ----- |
| IGNORED | yes |

# Project

Project tasks.

| Key | Value |
| --- | ----- |
| A | 1 |
| STAGE | dev |

## Build

Build the project.
Second line of the description.

```sh
echo "building $STAGE"
```

Not a description.

### Test

Run the tests.

| value | key |
| ----- | --- |
| 2 | A |
| 3 | B |

```sh
echo "test A=$A B=$B"
```

```python
import sys
print(sys.argv[1:])
```

## Deploy

```cobol
DISPLAY 'HELLO'.
```

## Notes

| name | description |
| ---- | ----------- |
| foo | bar |

- item

  ```bash
  echo nested
  ```

# Other

```js
console.log("hi")
```
"""


@pytest.fixture
def scripts_file(tmp_path):
    """Write markdown to a file and return its path."""
    def write(content: str, name: str = "scripts.md"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return write
