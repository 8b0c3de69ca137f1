"""File I/O and path utilities."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

PRESENTATION_SUFFIXES = (".pptx", ".potx", ".pptm")


def ensure_directory(path: str | Path) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_json(data: Any, path: str | Path, indent: int = 2) -> None:
    """Save data to a JSON file."""
    path = Path(path)
    ensure_directory(path.parent)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False, default=str)


def find_pptx_files(directory: str | Path) -> list[Path]:
    """Recursively find all presentation files in a directory."""
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    files = sorted(f for f in directory.rglob("*") if f.suffix.lower() in PRESENTATION_SUFFIXES)
    # Exclude temp/hidden files
    files = [f for f in files if not f.name.startswith(("~", "."))]
    logger.debug(f"Found {len(files)} presentation files in {directory}")
    return files
