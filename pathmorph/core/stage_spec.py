"""
stage_spec.py - Stage Descriptions

Front ends describe stages as plain strings (kind, key, pattern, value) and
turn them into callables here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .access import resolve_key
from .config import EngineConfig
from .stages import Stage, format_, replace, set_, substitute
from .text_match import compile_pattern


class StageKind(Enum):
    """Stage kind enumeration"""
    SET = "set"                 # Unconditional write
    SUBSTITUTE = "substitute"   # Write when pattern found
    REPLACE = "replace"         # Rewrite every match
    FORMAT = "format"           # Render template when pattern found


@dataclass
class StageSpec:
    """One stage as entered by the user"""
    kind: StageKind
    get: str                        # Key read (and written, unless put is set)
    value: str                      # Literal value, replacement or template
    pattern: str = ""               # Regex (unused by SET)
    put: Optional[str] = None       # Key written

    def describe(self) -> str:
        key = self.get if self.put is None else f"{self.get}:{self.put}"
        if self.kind is StageKind.SET:
            return f"{self.kind.value} {key} {self.value!r}"
        return f"{self.kind.value} {key} /{self.pattern}/ {self.value!r}"


def parse_key_pair(text: str) -> Tuple[str, Optional[str]]:
    """
    Parse `get` or `get:put`

    Raises:
        UnknownKey: either key is invalid
    """
    get, sep, put = text.partition(":")
    get = get.strip()
    put = put.strip() if sep else None
    resolve_key(get)
    if put:
        resolve_key(put)
    return get, put or None


def build_stage(spec: StageSpec, config: Optional[EngineConfig] = None) -> Stage:
    """
    Turn a stage description into a stage

    Raises:
        UnknownKey: bad key
        re.error: bad pattern
    """
    resolve_key(spec.get)
    if spec.put:
        resolve_key(spec.put)

    if spec.kind is StageKind.SET:
        return set_(lambda _: True, spec.value, get=spec.get, put=spec.put)

    regex = compile_pattern(spec.pattern)
    if spec.kind is StageKind.SUBSTITUTE:
        return substitute(spec.get, regex, spec.value, put=spec.put)
    if spec.kind is StageKind.REPLACE:
        if spec.put and spec.put != spec.get:
            raise ValueError("replace rewrites the part it reads; it takes no separate put key")
        return replace(spec.get, regex, spec.value)
    if spec.kind is StageKind.FORMAT:
        return format_(spec.get, regex, spec.value, put=spec.put, config=config)
    raise ValueError(f"Unknown stage kind: {spec.kind}")
