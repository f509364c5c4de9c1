"""
discriminator.py - Bracketed Number Suffixes

`photo(2).jpg` carries the discriminator `(2)`. Planning strips it so duplicates
collapse back onto their base name; applying adds the next free one back.
"""

import re
from pathlib import Path
from typing import Union

from .parts import split_ext

DISCRIMINATOR_RE = re.compile(r"\(\d+\)$")


def strip_discriminator(path: Union[str, Path]) -> Path:
    """If a file is called `foo(1).txt', remove the `(1)' bit if it exists."""
    path = Path(path)
    stem, ext = split_ext(path.name)
    stripped = DISCRIMINATOR_RE.sub("", stem)
    if stripped == stem:
        return path
    return path.parent / (stripped + ext)


def add_discriminator(path: Union[str, Path], number: int) -> Path:
    """`dir/foo.txt` -> `dir/foo(number).txt`"""
    path = Path(path)
    stem, ext = split_ext(path.name)
    return path.parent / f"{stem}({number}){ext}"
