# tools package for the BuildBear MCP server
# Each module exposes `get_tools() -> dict[str, dict]` mapping a tool name to {"func", "title", "description"}.
# The server imports every non-underscore module here and registers the returned callables as MCP tools.
__all__ = []
