"""
core - Rename Engine Core Module

Provides path part access, pipeline stages, the format template interpreter,
plan generation and collision-safe execution.
"""

from .errors import (
    RenameError,
    UnknownKey,
    FormatError,
    IncompleteFormat,
    BadFormatCharacter,
    MissingCaptureGroup,
    UnsupportedAlgorithm,
    ExternalToolFailure,
    OverwriteAttempted,
)

from .parts import (
    Part,
    get_part,
    set_part,
    split_ext,
    extension,
)

from .discriminator import (
    strip_discriminator,
    add_discriminator,
)

from .format_lang import (
    DirectiveTable,
    FormatContext,
    default_directives,
    render,
)

from .config import EngineConfig

from .models_fs import (
    Side,
    Change,
    RenameOptions,
)

from .access import (
    resolve_key,
    read,
    write,
    access,
)

from .hashing import checksum
from .sniff import guess_ext
from .timefmt import format_time, last_modified

from .stages import (
    Stage,
    set_,
    substitute,
    replace,
    format_,
    compose,
)

from .scan_files import (
    list_files,
    flatten_paths,
)

from .plan_rename import (
    transform,
    find_collisions,
)

from .exec_rename import (
    move_no_replace,
    safely_rename,
    execute_plan,
    rename,
    save_rename_log,
)

from .report import (
    format_change,
    print_change,
)

from .stage_spec import (
    StageKind,
    StageSpec,
    parse_key_pair,
    build_stage,
)

__all__ = [
    # Errors
    "RenameError",
    "UnknownKey",
    "FormatError",
    "IncompleteFormat",
    "BadFormatCharacter",
    "MissingCaptureGroup",
    "UnsupportedAlgorithm",
    "ExternalToolFailure",
    "OverwriteAttempted",

    # Data models
    "Part",
    "Side",
    "Change",
    "RenameOptions",
    "EngineConfig",

    # Path parts
    "get_part",
    "set_part",
    "split_ext",
    "extension",
    "strip_discriminator",
    "add_discriminator",

    # Change access
    "resolve_key",
    "read",
    "write",
    "access",

    # Formatting
    "DirectiveTable",
    "FormatContext",
    "default_directives",
    "render",
    "checksum",
    "guess_ext",
    "format_time",
    "last_modified",

    # Stages
    "Stage",
    "set_",
    "substitute",
    "replace",
    "format_",
    "compose",
    "StageKind",
    "StageSpec",
    "parse_key_pair",
    "build_stage",

    # Scanning
    "list_files",
    "flatten_paths",

    # Planning
    "transform",
    "find_collisions",

    # Execution
    "move_no_replace",
    "safely_rename",
    "execute_plan",
    "rename",
    "save_rename_log",
    "format_change",
    "print_change",
]
