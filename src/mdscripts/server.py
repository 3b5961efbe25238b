"""MCP Server for listing and running markdown scripts."""

import asyncio
import json
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .tools.list_headings import list_headings as do_list_headings
from .tools.get_heading import get_heading as do_get_heading
from .tools.run_heading import run_heading as do_run_heading


# Create MCP server
server = Server("mdscripts")

_FILE_PROPERTY = {
    "type": "string",
    "description": "Markdown file path (defaults to the nearest scripts.md, .scripts.md or README.md)",
}

_ALL_LANGUAGES_PROPERTY = {
    "type": "boolean",
    "description": "Keep code blocks whose language has no known interpreter",
    "default": False,
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="list_headings",
            description="""List the headings of a markdown scripts document as a tree.

Each heading reports its description, the languages of its runnable code
blocks and its key/value env table. Use this to discover what can be run.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "file": _FILE_PROPERTY,
                    "all_languages": _ALL_LANGUAGES_PROPERTY,
                },
            },
        ),
        Tool(
            name="get_heading",
            description="""Get one heading's code blocks, inherited env and raw markdown.

Heading lookup is case-insensitive. Nothing is executed.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "heading": {
                        "type": "string",
                        "description": "Heading text to look up",
                    },
                    "file": _FILE_PROPERTY,
                    "all_languages": _ALL_LANGUAGES_PROPERTY,
                },
                "required": ["heading"],
            },
        ),
        Tool(
            name="run_heading",
            description="""Run the code blocks under a heading and return their output.

Blocks run in document order with the heading's env table merged over its
ancestors'. Execution stops at the first failing block.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "heading": {
                        "type": "string",
                        "description": "Heading text to run",
                    },
                    "args": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Arguments passed to every code block",
                    },
                    "file": _FILE_PROPERTY,
                    "all_languages": _ALL_LANGUAGES_PROPERTY,
                },
                "required": ["heading"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "list_headings":
            result = do_list_headings(
                file=arguments.get("file"),
                all_languages=arguments.get("all_languages", False),
            )
        elif name == "get_heading":
            result = do_get_heading(
                heading=arguments["heading"],
                file=arguments.get("file"),
                all_languages=arguments.get("all_languages", False),
            )
        elif name == "run_heading":
            result = await asyncio.to_thread(
                do_run_heading,
                heading=arguments["heading"],
                args=arguments.get("args"),
                file=arguments.get("file"),
                all_languages=arguments.get("all_languages", False),
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        error_result = {"error": str(e)}
        return [TextContent(type="text", text=json.dumps(error_result, indent=2))]


async def run_server():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main():
    """Entry point for the MCP server."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
