"""
text_match.py - Text Matching Tools

Provides regex matching and replacement on path parts
"""

import re
from typing import Callable, Optional, Tuple, Union

PatternLike = Union[str, re.Pattern]


def compile_pattern(pattern: PatternLike) -> re.Pattern:
    """Compile pattern unless it already is a compiled regex"""
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def match_groups(text: str, pattern: PatternLike) -> Optional[Tuple[Optional[str], ...]]:
    """
    Find the first match of pattern in text

    Returns:
        (whole match, group 1, group 2, ...) or None if nothing matched
    """
    m = compile_pattern(pattern).search(text)
    if m is None:
        return None
    return (m.group(0),) + m.groups()


def replace_text(text: str, pattern: PatternLike, new: Union[str, Callable[[], str]]) -> str:
    """
    Replace every match of pattern in text

    Args:
        text: Original text
        pattern: Regex (string or compiled)
        new: Replacement using re back-references (\\1, \\g<name>), or a
            zero-argument function whose result is inserted literally

    Returns:
        Replaced text (unchanged when nothing matches)
    """
    regex = compile_pattern(pattern)
    if callable(new):
        literal = new()
        return regex.sub(lambda m: literal, text)
    return regex.sub(new, text)
