from typing import Any
from core.resources import get_resource_map  # type: ignore

INSTRUCTIONS_KEY = "assistant_instructions"


async def get_instructions() -> str:
    """Return the assistant instructions resource (resources/assistant_instructions.md) verbatim."""
    content = get_resource_map().get(INSTRUCTIONS_KEY)
    if content:
        return content
    return "No assistant instructions resource found."


def get_tools() -> dict[str, Any]:
    return {
        "get_instructions": {
            "func": get_instructions,
            "title": "Read assistant instructions",
            "description": "Read how to use the BuildBear tools (sandbox lifecycle, explorer queries) before calling them.",
        }
    }
