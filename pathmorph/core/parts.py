"""
parts.py - Path Part Accessors

Reads and rebuilds one part of a path:

    /home/user/Downloads/name.png
    -----------------------------  PATH
    --------------------           PARENT
                         --------  FILE
                         ----      NAME
                             ----  EXT
"""

from enum import Enum
from pathlib import Path
from typing import Tuple, Union

EXT_SEP = "."


class Part(Enum):
    """Path part enumeration"""
    PATH = "path"
    PARENT = "parent"
    FILE = "file"
    NAME = "name"
    EXT = "ext"


def split_ext(file_name: str) -> Tuple[str, str]:
    """
    Split a file name into stem and extension (extension keeps its dot)

    A leading dot (hidden file) or a trailing dot does not start an extension.
    """
    index = file_name.rfind(EXT_SEP)
    if index <= 0 or index == len(file_name) - 1:
        return file_name, ""
    return file_name[:index], file_name[index:]


def extension(path: Path) -> str:
    """Extension of path including the dot, or empty string"""
    return split_ext(Path(path).name)[1]


def normalize_ext(value: str) -> str:
    """Ensure a non-empty extension starts with exactly one separator"""
    if not value:
        return ""
    return value if value.startswith(EXT_SEP) else EXT_SEP + value


def get_part(part: Part, path: Union[str, Path]) -> str:
    """Get part of path as a string"""
    path = Path(path)
    if part is Part.PATH:
        return str(path)
    if part is Part.PARENT:
        return str(path.parent)
    if part is Part.FILE:
        return path.name
    if part is Part.NAME:
        return split_ext(path.name)[0]
    if part is Part.EXT:
        return split_ext(path.name)[1]
    raise ValueError(f"Unknown part: {part}")


def set_part(part: Part, path: Union[str, Path], value: str) -> Path:
    """Return a new path with part replaced by value, other parts unchanged"""
    path = Path(path)
    value = str(value)
    if part is Part.PATH:
        return Path(value)
    if part is Part.PARENT:
        return Path(value) / path.name
    if part is Part.FILE:
        return path.parent / value
    if part is Part.NAME:
        return path.parent / (value + extension(path))
    if part is Part.EXT:
        return path.parent / (split_ext(path.name)[0] + normalize_ext(value))
    raise ValueError(f"Unknown part: {part}")
