from core.logging_config import setup_logging, get_logger
from core.resources import load_resource_files, set_resource_map
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.resources import TextResource
from pathlib import Path
from importlib import import_module
import pkgutil
import sys
from typing import Dict, List, Tuple

SERVER_NAME = "buildbear"
TOOLS_PACKAGE = "tools"

logger = get_logger()

###################################################### MCP Resources ######################################################


def load_resources() -> Tuple[List[Tuple[Path, str]], Dict[str, str]]:
    """Read resources/ and publish the name -> content map for the tools."""
    logger.info("Loading MCP resources...")
    resource_files = load_resource_files()
    resource_map = {file_path.stem.lower(): content for file_path, content in resource_files}
    set_resource_map(resource_map)
    logger.info(f"Total resources discovered: {len(resource_files)}, resource names: {list(resource_map.keys())}")
    return resource_files, resource_map


def register_resources(mcp: FastMCP, resource_files: List[Tuple[Path, str]]) -> int:
    count = 0
    for file_path, content in resource_files:
        try:
            resource = TextResource(
                uri=f"resource://{file_path.stem.replace(' ', '_')}",
                name=file_path.stem,
                text=content,
                description=f"Contents of {file_path.name}",
                mime_type="text/markdown",
            )
            mcp.add_resource(resource)
            count += 1
        except Exception:
            logger.exception(f"Failed to add resource {file_path}")
    logger.info(f"Total resources loaded into MCP: {count}")
    return count


###################################################### MCP Tools ######################################################


def register_tools(mcp: FastMCP) -> List[str]:
    """Import every module of the tools package and register what its get_tools() returns."""
    logger.info("Loading MCP tools...")
    tools_path = Path(__file__).resolve().parent / TOOLS_PACKAGE
    registered_tool_names: List[str] = []

    for _, name, _ in pkgutil.iter_modules([str(tools_path)]):
        if name.startswith("_"):
            continue
        module_name = f"{TOOLS_PACKAGE}.{name}"
        try:
            mod = import_module(module_name)
        except Exception:
            logger.exception(f"Failed to load tools from module {module_name}")
            continue
        if not hasattr(mod, "get_tools"):
            continue
        logger.info(f"Imported tools module: {module_name}")

        for tool_name, meta in mod.get_tools().items():
            func = meta.get("func") if isinstance(meta, dict) else meta
            if not callable(func):
                logger.warning(f"Tool {tool_name} in {module_name} did not provide a callable; skipping")
                continue
            title = meta.get("title") if isinstance(meta, dict) else None
            description = meta.get("description") if isinstance(meta, dict) else None
            try:
                mcp.add_tool(func, name=tool_name, title=title, description=description)
                logger.info(f"Added tool: {tool_name} (title={title}) from {module_name}")
                registered_tool_names.append(tool_name)
            except Exception:
                logger.exception(f"Failed to register tool {tool_name} from {module_name}")

    logger.info(f"Total tools registered: {len(registered_tool_names)} , tool names: {registered_tool_names}")
    return registered_tool_names


def create_server() -> FastMCP:
    logger.info("MCP server bootstrap starting.")
    resource_files, resource_map = load_resources()

    # assistant_instructions.md doubles as the server-level instructions
    mcp = FastMCP(SERVER_NAME, instructions=resource_map.get("assistant_instructions"))
    logger.info("MCP server instance created with instructions: %s", "assistant_instructions" in resource_map)

    register_resources(mcp, resource_files)
    register_tools(mcp)
    return mcp


###################################################### Startup ######################################################


def main() -> None:
    setup_logging()
    try:
        mcp = create_server()
        logger.info("BuildBear MCP Server running on stdio")
        mcp.run(transport="stdio")
        logger.info("MCP server shut down.")
    except Exception:
        logger.exception("Fatal error in main()")
        print("Unhandled exception occurred. See logs/ for details.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
