"""
format_lang.py - Format Template Interpreter

A template is copied to the output character by character; `%` starts a
directive whose handler is looked up in a DirectiveTable:

    %%      literal %
    %e      extension of the proposed path (with dot)
    %n      name (stem) of the proposed path
    %g      extension guessed from the original file's contents
    %x      checksum of the original file (EngineConfig.hash_algorithm)
    %t<c>   original file's modification time, conversion <c> (see timefmt)
    %0-%9   capture groups of the match that triggered the format
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Sequence, TYPE_CHECKING

from .hashing import checksum
from .errors import BadFormatCharacter, IncompleteFormat, MissingCaptureGroup
from .parts import Part, extension, get_part
from .sniff import guess_ext
from .timefmt import format_time, last_modified

if TYPE_CHECKING:
    from .config import EngineConfig
    from .models_fs import Change

DIRECTIVE_CHAR = "%"


@dataclass
class FormatContext:
    """Everything a directive handler may read"""
    template: str
    groups: Sequence[Optional[str]]     # groups[0] is the whole match
    change: "Change"
    config: "EngineConfig"


# handler(out, rest, ctx) appends to out and returns how many characters of
# rest (the template after the directive character) it consumed
Directive = Callable[[List[str], str, FormatContext], int]


class DirectiveTable:
    """Mapping of directive characters to handlers"""

    def __init__(self, handlers: Optional[Dict[str, Directive]] = None):
        self._handlers: Dict[str, Directive] = {}
        for char, handler in (handlers or {}).items():
            self.register(char, handler)

    def register(self, char: str, handler: Directive) -> None:
        """Add or replace the handler for char"""
        if len(char) != 1:
            raise ValueError(f"Directive must be a single character: {char!r}")
        self._handlers[char] = handler

    def unregister(self, char: str) -> None:
        """Remove the handler for char"""
        self._handlers.pop(char, None)

    def get(self, char: str) -> Optional[Directive]:
        return self._handlers.get(char)

    def copy(self) -> "DirectiveTable":
        return DirectiveTable(dict(self._handlers))

    def __contains__(self, char: object) -> bool:
        return char in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._handlers))

    def __len__(self) -> int:
        return len(self._handlers)


def literal(text: str) -> Directive:
    def handler(out: List[str], rest: str, ctx: FormatContext) -> int:
        out.append(text)
        return 0
    return handler


def from_change(func: Callable[[FormatContext], str]) -> Directive:
    """Handler that appends func(ctx) and consumes nothing more"""
    def handler(out: List[str], rest: str, ctx: FormatContext) -> int:
        out.append(func(ctx))
        return 0
    return handler


def group(index: int) -> Directive:
    def handler(out: List[str], rest: str, ctx: FormatContext) -> int:
        if index >= len(ctx.groups):
            raise MissingCaptureGroup(index, len(ctx.groups))
        out.append(ctx.groups[index] or "")
        return 0
    return handler


def mtime(out: List[str], rest: str, ctx: FormatContext) -> int:
    """`%t` takes the next template character as its conversion"""
    if not rest:
        raise IncompleteFormat(ctx.template)
    out.append(format_time(rest[0], last_modified(ctx.change.old)))
    return 1


def default_directives() -> DirectiveTable:
    """Build the default directive table"""
    table = DirectiveTable({
        "%": literal("%"),
        "e": from_change(lambda ctx: extension(ctx.change.new)),
        "n": from_change(lambda ctx: get_part(Part.NAME, ctx.change.new)),
        "g": from_change(lambda ctx: guess_ext(ctx.change.old, ctx.config)),
        "x": from_change(lambda ctx: checksum(ctx.change.old, config=ctx.config)),
        "t": mtime,
    })
    for i in range(10):
        table.register(str(i), group(i))
    return table


def render(
    template: str,
    groups: Sequence[Optional[str]],
    change: "Change",
    config: Optional["EngineConfig"] = None
) -> str:
    """
    Expand a format template

    Args:
        template: Template string
        groups: Match groups, whole match first
        change: Change being formatted
        config: Engine configuration (directive table, checksum algorithm, ...)

    Returns:
        Rendered string
    """
    if config is None:
        from .config import EngineConfig
        config = EngineConfig()

    ctx = FormatContext(template=template, groups=groups, change=change, config=config)
    out: List[str] = []
    i = 0
    n = len(template)

    while i < n:
        ch = template[i]
        if ch != DIRECTIVE_CHAR:
            out.append(ch)
            i += 1
            continue

        if i + 1 >= n:
            raise IncompleteFormat(template)

        directive = template[i + 1]
        handler = config.directives.get(directive)
        if handler is None:
            raise BadFormatCharacter(directive, template)

        i += 2
        i += handler(out, template[i:], ctx)

    return "".join(out)
