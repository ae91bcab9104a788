"""Module that holds the server's resource map as a module-global.

Tools read it through `get_resource_map()`. The server fills it during startup
with the markdown files found under `resources/` (stem lowercased -> content).
"""
from pathlib import Path
from typing import Dict, List, Tuple
import logging

RESOURCES_DIR = (Path(__file__).resolve().parent.parent / "resources").resolve()

resource_map: Dict[str, str] = {}


def load_resource_files(resources_dir: Path = RESOURCES_DIR) -> List[Tuple[Path, str]]:
    """Read every file in `resources_dir`, sorted by name. Missing directory -> empty list."""
    if not resources_dir.is_dir():
        logging.getLogger(__name__).warning(f"Resources directory not found: {resources_dir}")
        return []
    return [
        (file_path, file_path.read_text(encoding="utf-8"))
        for file_path in sorted(resources_dir.iterdir())
        if file_path.is_file()
    ]


def set_resource_map(mapping: Dict[str, str]) -> None:
    global resource_map
    resource_map = mapping


def get_resource_map() -> Dict[str, str]:
    return resource_map
