"""
stages.py - Pipeline Stages

Each stage maps one Change to one Change and only ever rewrites the proposed
side. Stages run left to right; each sees what earlier ones produced.

    rename(list_files("~/Downloads"),
           format_("file", r"^[^.]+$", "%n%g"),          # add a missing extension
           replace("ext", r"^\\.(jpeg|jfif)$", ".jpg"),   # canonical jpg
           substitute("ext", r"^\\.pdf$", str(Path.home() / "Documents"), put="parent"),
           format_("name", r"^image", "%tFT%tH-%tM-%tS"))
"""

from functools import reduce
from typing import Any, Callable, Optional, Union

from .access import Key, read, write
from .config import EngineConfig
from .format_lang import render
from .models_fs import Change
from .text_match import PatternLike, compile_pattern, match_groups, replace_text

Stage = Callable[[Change], Change]
NewValue = Union[str, Callable[[Change], str]]


def _value_for(value: NewValue, change: Change) -> str:
    return value(change) if callable(value) else value


def set_(
    predicate: Callable[[Any], Any],
    value: NewValue,
    get: Optional[Key] = None,
    put: Optional[Key] = None
) -> Stage:
    """
    Set put to value if predicate holds

    Without `get`, predicate is applied to the whole change and `put`
    defaults to the full path. With `get`, predicate is applied to that part
    and `put` defaults to `get`.

    If value is a function, it takes the whole change and returns a string.
    """
    if get is None:
        target = put if put is not None else "path"

        def stage(c: Change) -> Change:
            if predicate(c):
                return write(target, c, _value_for(value, c))
            return c
    else:
        target = put if put is not None else get

        def stage(c: Change) -> Change:
            if predicate(read(get, c)):
                return write(target, c, _value_for(value, c))
            return c

    return stage


def substitute(
    get: Key,
    pattern: PatternLike,
    value: NewValue,
    put: Optional[Key] = None
) -> Stage:
    """
    Set put (default get) to value if get matches pattern

    If value is a function, it takes the whole change and returns a string.
    """
    regex = compile_pattern(pattern)
    return set_(lambda s: regex.search(s) is not None, value, get=get, put=put)


def replace(key: Key, pattern: PatternLike, value: NewValue) -> Stage:
    """
    Replace every match of pattern in the part named by key

    A string value may use back-references (\\1). A function value takes the
    whole change; its result is used literally for every match.
    """
    regex = compile_pattern(pattern)

    def stage(c: Change) -> Change:
        if callable(value):
            new = lambda: value(c)
        else:
            new = value
        return write(key, c, lambda s: replace_text(s, regex, new))

    return stage


def format_(
    get: Key,
    pattern: PatternLike,
    template: str,
    put: Optional[Key] = None,
    config: Optional[EngineConfig] = None
) -> Stage:
    """Set put (default get) to the rendered template if get matches pattern"""
    regex = compile_pattern(pattern)
    target = put if put is not None else get
    config = config if config is not None else EngineConfig()

    def stage(c: Change) -> Change:
        groups = match_groups(read(get, c), regex)
        if groups is None:
            return c
        return write(target, c, render(template, groups, c, config))

    return stage


def compose(*stages: Stage) -> Stage:
    """Chain stages left to right into one"""
    return lambda c: reduce(lambda acc, stage: stage(acc), stages, c)
