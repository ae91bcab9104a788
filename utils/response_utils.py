from __future__ import annotations

import json
from typing import Any


def robust_parse_text(text: str) -> Any:
    """Decode a body labelled application/json that `response.json()` rejected.

    Keeps the leading JSON value when extra data follows it; otherwise returns `text` unchanged.
    """
    try:
        obj, _ = json.JSONDecoder().raw_decode(text.strip())
        return obj
    except ValueError:
        return text
