from typing import Any
from core.resources import get_resource_map  # type: ignore


async def list_resources() -> str:
    names = sorted(get_resource_map().keys())
    return "\n".join(names) if names else "No resources available."


async def read_resource(resource_name: str) -> str:
    """Return the content of a resource given its name or part of it.

    Lookup order: exact name, then substring match either way, then all words present.
    """
    resource_map = get_resource_map()
    q = (resource_name or "").strip().lower().replace(" ", "_")
    if not q:
        return "Please provide a resource name to read. Use list_resources to see available resources."

    if q in resource_map:
        return resource_map[q]

    matches = [name for name in resource_map if q in name or name in q]
    if not matches:
        words = [w for w in q.replace("_", " ").split() if w]
        matches = [name for name in resource_map if all(w in name for w in words)]

    if len(matches) == 1:
        return resource_map[matches[0]]
    if len(matches) > 1:
        return "Multiple resources match your query:\n" + "\n".join(sorted(matches))
    return f"No resource found matching '{resource_name}'. Use list_resources to see available resources."


def get_tools() -> dict[str, Any]:
    return {
        "list_resources": {"func": list_resources, "title": "List resources", "description": "Return a newline-separated list of available resource names."},
        "read_resource": {"func": read_resource, "title": "Read resource", "description": "Return the content of a resource given a name or partial name."},
    }
