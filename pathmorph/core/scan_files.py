"""
scan_files.py - File Scanning Module

Provides non-recursive file listing and input flattening
"""

import os
from pathlib import Path
from typing import Any, Iterable, List, Union

PathLike = Union[str, os.PathLike]


def list_files(*directories: PathLike) -> List[Path]:
    """
    List regular files directly inside one or more directories (non-recursive)

    Args:
        directories: Directories to list, `~` is expanded

    Returns:
        File paths, sorted by path for a stable processing order
    """
    results: List[Path] = []

    for directory in directories:
        directory = Path(directory).expanduser()
        if not directory.is_dir():
            raise ValueError(f"Directory does not exist: {directory}")

        for item in directory.iterdir():
            # Only process files, not directories
            if item.is_file():
                results.append(item)

    return sort_by_path(results)


def sort_by_path(paths: Iterable[Path]) -> List[Path]:
    """Sort by path (for ensuring stable processing order)"""
    return sorted(paths, key=lambda p: str(p).lower())


def flatten_paths(items: Any) -> List[Path]:
    """
    Flatten an arbitrarily nested collection of paths

    Strings and path objects are leaves; anything else iterable is descended into.
    """
    if isinstance(items, (str, os.PathLike)):
        return [Path(items)]

    flat: List[Path] = []
    for item in items:
        flat.extend(flatten_paths(item))
    return flat
