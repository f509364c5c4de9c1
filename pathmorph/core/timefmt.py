"""
timefmt.py - Modification Time Formatting

`%t` in a format template is followed by one conversion letter:

    %tY 2024   %tm 03   %td 09   %tH 14   %tM 05   %tS 07
    %tF 2024-03-09   %tT 14:05:07   %tQ milliseconds since epoch

Chained conversions build a composite stamp, e.g. `%tFT%tH:%tM:%tS`.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Union

from .errors import BadFormatCharacter


def _strf(pattern: str) -> Callable[[datetime], str]:
    return lambda dt: dt.strftime(pattern)


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


CONVERSIONS: Dict[str, Callable[[datetime], str]] = {
    # Time
    "H": _strf("%H"),
    "I": lambda dt: f"{_hour12(dt):02d}",
    "k": lambda dt: str(dt.hour),
    "l": lambda dt: str(_hour12(dt)),
    "M": _strf("%M"),
    "S": _strf("%S"),
    "L": lambda dt: f"{dt.microsecond // 1000:03d}",
    "N": lambda dt: f"{dt.microsecond * 1000:09d}",
    "p": lambda dt: "am" if dt.hour < 12 else "pm",
    "z": _strf("%z"),
    "Z": _strf("%Z"),
    "s": lambda dt: str(int(dt.timestamp())),
    "Q": lambda dt: str(int(dt.timestamp() * 1000)),
    # Date
    "B": _strf("%B"),
    "b": _strf("%b"),
    "h": _strf("%b"),
    "A": _strf("%A"),
    "a": _strf("%a"),
    "C": lambda dt: f"{dt.year // 100:02d}",
    "Y": lambda dt: f"{dt.year:04d}",
    "y": _strf("%y"),
    "j": _strf("%j"),
    "m": _strf("%m"),
    "d": _strf("%d"),
    "e": lambda dt: str(dt.day),
    # Composites
    "R": _strf("%H:%M"),
    "T": _strf("%H:%M:%S"),
    "r": lambda dt: f"{_hour12(dt):02d}:{dt:%M:%S} {'AM' if dt.hour < 12 else 'PM'}",
    "D": _strf("%m/%d/%y"),
    "F": _strf("%Y-%m-%d"),
    "c": _strf("%a %b %d %H:%M:%S %Z %Y"),
}


def last_modified(path: Union[str, Path]) -> datetime:
    """Last-modified instant of path, in local time"""
    return datetime.fromtimestamp(os.stat(path).st_mtime).astimezone()


def format_time(conversion: str, when: datetime) -> str:
    """Render one `%t` conversion letter"""
    try:
        func = CONVERSIONS[conversion]
    except KeyError:
        raise BadFormatCharacter("t" + conversion) from None
    return func(when)
