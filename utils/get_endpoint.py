from core.config import get_config  # type: ignore
import sys


def get_endpoint(key: str, **path_params: str) -> str:
    """Build the full BuildBear URL for the path registered under `key` in config.yaml.

    Path templates may carry placeholders such as `{sandbox_id}`; they are filled from `path_params`.
    """
    _cfg = get_config() or {}
    base_url = str(_cfg.get("buildbear_api_url") or "").rstrip("/")
    if not base_url:
        sys.exit("Error: 'buildbear_api_url' must be set in config.yaml")

    path = (_cfg.get("api_paths") or {}).get(key)
    if not path:
        sys.exit(f"Error: Missing API path for key '{key}' in config.yaml under 'api_paths'")

    try:
        path = path.format(**path_params)
    except KeyError as e:
        sys.exit(f"Error: API path '{key}' needs a value for {e}")

    return f"{base_url}/{path.lstrip('/')}"
