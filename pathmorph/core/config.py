"""
config.py - Engine Configuration

Values that used to be process-wide defaults, passed explicitly instead.
"""

from dataclasses import dataclass, field

from .format_lang import DirectiveTable, default_directives

DEFAULT_HASH_ALGORITHM = "SHA-256"
DEFAULT_FALLBACK_EXTENSION = ".mp4"   # used when `file` answers "???"
DEFAULT_SNIFF_COMMAND = "file"


@dataclass
class EngineConfig:
    """Engine configuration"""
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    fallback_extension: str = DEFAULT_FALLBACK_EXTENSION
    sniff_command: str = DEFAULT_SNIFF_COMMAND
    directives: DirectiveTable = field(default_factory=default_directives)
