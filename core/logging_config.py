from pathlib import Path
import logging
import sys
from typing import Optional
from datetime import datetime


def _resolve_level(level: Optional[str | int]) -> int:
    if level is None:
        try:
            from core.config import get_config  # type: ignore

            level = (get_config() or {}).get("log_level", "INFO")
        except OSError:
            level = "INFO"
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    logs_dir: Optional[str | Path] = None,
    log_file_name: str = "server.log",
    level: Optional[str | int] = None,
) -> logging.Logger:
    """Configure root logging to stderr and a timestamped file under `logs_dir`.

    stdout is reserved for the MCP stdio transport, so nothing is ever logged there.
    Idempotent: calling multiple times won't add duplicate handlers.
    """
    if logs_dir is None:
        logs_dir = Path(__file__).resolve().parent.parent / "logs"
    else:
        logs_dir = Path(logs_dir)

    log_level = _resolve_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    # One file handler per process; later calls reuse it instead of opening another timestamped file
    if not any(isinstance(h, logging.FileHandler) for h in root_logger.handlers):
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base = Path(log_file_name).stem
        ext = Path(log_file_name).suffix or ".log"
        log_file = logs_dir / f"{base}_{timestamp}{ext}"
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(formatter)
            fh.setLevel(log_level)
            root_logger.addHandler(fh)
        except OSError:
            # read-only install: stderr only
            pass

    stream_stderr_exists = any(
        type(h) is logging.StreamHandler and getattr(h, "stream", None) is sys.stderr
        for h in root_logger.handlers
    )
    if not stream_stderr_exists:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(formatter)
        sh.setLevel(log_level)
        root_logger.addHandler(sh)

    return logging.getLogger("buildbear_mcp")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Helper to get a logger by name; falls back to the server logger."""
    return logging.getLogger(name) if name else logging.getLogger("buildbear_mcp")
