"""The single HTTP entry point for every BuildBear tool.

Attaches the auth headers, performs one request and negotiates the body:
JSON when the server says so, text otherwise. Any failure is logged and
reported as `None` so tools can answer with their fixed failure message.
"""
from __future__ import annotations

from typing import Any, Literal
import logging

import httpx

from core.config import get_api_key, get_config  # type: ignore
from utils.response_utils import robust_parse_text

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "bb-mcp/1.0"
DEFAULT_TIMEOUT = 30.0

HttpMethod = Literal["GET", "POST", "DELETE"]


def build_headers(api_key: str) -> dict[str, str]:
    cfg = get_config() or {}
    return {
        "User-Agent": cfg.get("user_agent") or DEFAULT_USER_AGENT,
        "Accept": "application/json",
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


async def make_bb_request(
    url: str,
    method: HttpMethod = "GET",
    params: dict[str, Any] | None = None,
    query: dict[str, Any] | None = None,
) -> Any | None:
    """Call the BuildBear API and return the decoded body, or None on failure.

    Args:
        url: Absolute endpoint URL (see `utils.get_endpoint`).
        method: GET, POST or DELETE.
        params: JSON body for POST requests. `None` values are dropped.
        query: Query-string parameters.
    """
    api_key = get_api_key()
    if not api_key:
        logger.error("BUILDBEAR_API_KEY is not set; refusing to call %s", url)
        return None

    body = None
    if method == "POST":
        body = {k: v for k, v in (params or {}).items() if v is not None}

    cfg = get_config() or {}
    timeout = float(cfg.get("request_timeout") or DEFAULT_TIMEOUT)

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.request(
                method,
                url,
                headers=build_headers(api_key),
                params=query,
                json=body,
            )
            resp.raise_for_status()
    except Exception as e:
        # bad URLs and unencodable headers fail before any HTTPError can be raised
        logger.exception(f"Error making BuildBear request {method} {url}: {e}")
        return None

    content_type = resp.headers.get("content-type", "")
    if "application/json" not in content_type:
        return resp.text

    try:
        return resp.json()
    except ValueError as e:
        logger.warning(
            f"Failed to decode JSON from {url}: {e}; returning leading JSON value or raw text"
        )
        return robust_parse_text(resp.text)
