"""
errors.py - Exception Types

All engine failures derive from RenameError so front ends can catch them in one place.
"""

from typing import Optional


class RenameError(Exception):
    """Base class for rename engine errors"""


class UnknownKey(RenameError, KeyError):
    """Accessor key outside the {old,new}-{path,parent,file,name,ext} space"""

    def __init__(self, key):
        super().__init__(f"Unknown change key: {key!r}")
        self.key = key

    def __str__(self) -> str:
        return self.args[0]


class FormatError(RenameError):
    """Base class for format template errors"""


class IncompleteFormat(FormatError):
    """Template ends with an unconsumed directive"""

    def __init__(self, template: str):
        super().__init__(f"Incomplete format string `{template}'")
        self.template = template


class BadFormatCharacter(FormatError):
    """Directive character has no handler"""

    def __init__(self, char: str, template: Optional[str] = None):
        super().__init__(f"Bad format character `{char}'")
        self.char = char
        self.template = template


class MissingCaptureGroup(FormatError):
    """Directive refers to a group the pattern does not have"""

    def __init__(self, index: int, available: int):
        super().__init__(
            f"Capture group {index} referenced but the match only has groups 0-{available - 1}"
        )
        self.index = index


class UnsupportedAlgorithm(RenameError, ValueError):
    """Checksum algorithm is unknown or not provided by this Python build"""

    def __init__(self, algorithm: str):
        super().__init__(f"Unsupported checksum algorithm: {algorithm}")
        self.algorithm = algorithm


class ExternalToolFailure(RenameError):
    """External program exited with an error"""

    def __init__(self, command: str, returncode: int, stderr: str):
        super().__init__(
            f"exit code `{command}' not 0 ({returncode}). With error output `{stderr.strip()}'"
        )
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class OverwriteAttempted(RenameError, FileExistsError):
    """Move target appeared between the existence check and the move"""

    def __init__(self, src, dst):
        super().__init__(f"Refusing to overwrite existing file: {dst} (moving {src})")
        self.src = src
        self.dst = dst
