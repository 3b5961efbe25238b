"""Tests for document discovery."""

import os

import pytest

from mdscripts.errors import DocumentNotFound
from mdscripts.locator import candidate_names, find_doc, resolve_document


@pytest.fixture
def nested(tmp_path):
    """A project directory with a three-level deep working directory."""
    project = tmp_path / "project"
    deep = project / "a" / "b" / "c"
    deep.mkdir(parents=True)
    return project, deep


class TestCandidateNames:
    def test_default_program(self):
        assert candidate_names() == ["scripts.md", ".scripts.md", "README.md"]

    def test_custom_program(self):
        assert candidate_names("tasks") == ["tasks.md", ".tasks.md", "README.md"]


class TestFindDoc:
    def test_readme_three_levels_up(self, nested):
        project, deep = nested
        (project / "README.md").write_text("# Readme\n")
        assert find_doc(deep) == project / "README.md"

    def test_priority_within_directory(self, tmp_path):
        for name in ("README.md", ".scripts.md", "scripts.md"):
            (tmp_path / name).write_text("# x\n")
        assert find_doc(tmp_path) == tmp_path / "scripts.md"

        (tmp_path / "scripts.md").unlink()
        assert find_doc(tmp_path) == tmp_path / ".scripts.md"

    def test_closer_directory_wins(self, nested):
        project, deep = nested
        (project / "scripts.md").write_text("# far\n")
        (deep.parent / "README.md").write_text("# near\n")
        assert find_doc(deep) == deep.parent / "README.md"

    def test_program_name(self, tmp_path):
        (tmp_path / "tasks.md").write_text("# x\n")
        (tmp_path / "scripts.md").write_text("# x\n")
        assert find_doc(tmp_path, program="tasks") == tmp_path / "tasks.md"

    def test_directory_named_like_doc_skipped(self, nested):
        project, deep = nested
        (deep / "scripts.md").mkdir()
        (project / "README.md").write_text("# x\n")
        assert find_doc(deep) == project / "README.md"

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    def test_symlink_to_file(self, tmp_path):
        target = tmp_path / "real.md"
        target.write_text("# x\n")
        link = tmp_path / "scripts.md"
        link.symlink_to(target)
        assert find_doc(tmp_path) == link

    def test_not_found(self, tmp_path, monkeypatch):
        # README.md may exist somewhere above tmp_path
        monkeypatch.setattr(
            "mdscripts.locator.candidate_names",
            lambda program: [f"{program}.md", f".{program}.md"],
        )
        with pytest.raises(DocumentNotFound):
            find_doc(tmp_path, program="mdscripts-test-no-such-program")

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "scripts.md").write_text("# x\n")
        monkeypatch.chdir(tmp_path)
        assert find_doc() == tmp_path / "scripts.md"


class TestResolveDocument:
    def test_explicit_file(self, tmp_path):
        path = tmp_path / "other.md"
        path.write_text("# x\n")
        assert resolve_document(str(path)) == path

    def test_explicit_missing(self, tmp_path):
        with pytest.raises(DocumentNotFound):
            resolve_document(str(tmp_path / "missing.md"))

    def test_environment_md_file_ignored(self, tmp_path, monkeypatch):
        outer = tmp_path / "outer.md"
        outer.write_text("# Outer\n")
        local = tmp_path / "project"
        local.mkdir()
        (local / "scripts.md").write_text("# Build\n")
        monkeypatch.setenv("MD_FILE", str(outer))
        assert resolve_document(cwd=local) == local / "scripts.md"

    def test_discovery(self, tmp_path):
        (tmp_path / "scripts.md").write_text("# x\n")
        assert resolve_document(cwd=tmp_path) == tmp_path / "scripts.md"
