import json
from typing import Any


def to_pretty_json(value: Any) -> str:
    """Indent JSON-compatible values by two spaces; strings pass through untouched."""
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def is_empty_response(response: Any) -> bool:
    """A request helper result that a tool must report as a failure."""
    return response is None or (isinstance(response, str) and not response.strip())
