"""
access.py - Change Accessor

Keys name a side and a part: `old-name`, `new-ext`, `parent`, ... Unqualified
keys mean the proposed side. Reads may come from either side; writes always
land on the proposed side, so a stage can read `old-name` and write a derived
value into the new name without touching the original.
"""

from typing import Callable, Dict, Tuple, Union

from .errors import UnknownKey
from .models_fs import Change, Side
from .parts import Part, get_part, set_part

Key = Union[str, Part]
Value = Union[str, Callable[[str], str]]

READERS: Dict[Side, Callable[[Change], object]] = {
    Side.OLD: lambda c: c.old,
    Side.NEW: lambda c: c.new,
}

_MISSING = object()


def resolve_key(key: Key) -> Tuple[Side, Part]:
    """Split a key into (side, part)"""
    if isinstance(key, Part):
        return Side.NEW, key
    if not isinstance(key, str):
        raise UnknownKey(key)

    normalized = key.strip().lower().lstrip(":").replace("_", "-")
    side = Side.NEW
    side_name, sep, part_name = normalized.partition("-")
    if sep:
        try:
            side = Side(side_name)
        except ValueError:
            raise UnknownKey(key) from None
    else:
        part_name = normalized

    try:
        return side, Part(part_name)
    except ValueError:
        raise UnknownKey(key) from None


def read(key: Key, change: Change) -> str:
    """Get part of the side named by key"""
    side, part = resolve_key(key)
    return get_part(part, READERS[side](change))


def write(key: Key, change: Change, value: Value) -> Change:
    """
    Set the part named by key on the proposed side

    Args:
        key: Access key; its side only matters for what a callable receives
        change: Change to update
        value: Literal string, or function of the value read via key

    Returns:
        New change with only `new` updated
    """
    side, part = resolve_key(key)
    if callable(value):
        value = value(get_part(part, READERS[side](change)))
    return change.with_new(set_part(part, change.new, value))


def access(key: Key, change: Change, value=_MISSING):
    """Read a part of the change, or update it if value is supplied"""
    if value is _MISSING:
        return read(key, change)
    return write(key, change, value)
