"""
models_fs.py - Core Data Structure Definitions

Contains:
- Side: which half of a change a key reads from
- Change: original path paired with its proposed path
- RenameOptions: pipeline run options
"""

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Union

from .discriminator import strip_discriminator


class Side(Enum):
    """Change side enumeration"""
    OLD = "old"     # Original path, never written
    NEW = "new"     # Proposed path


@dataclass(frozen=True)
class Change:
    """Single proposed rename"""
    old: Path                       # Original path
    new: Path                       # Proposed path

    @classmethod
    def from_path(cls, p: Union[str, Path]) -> "Change":
        """Create the default change for a discovered file"""
        p = Path(p)
        return cls(old=p, new=strip_discriminator(p))

    @property
    def is_noop(self) -> bool:
        """Whether source and destination are the same"""
        return self.old == self.new

    @property
    def is_case_only_change(self) -> bool:
        """Whether it's only a case change"""
        return (self.old.parent == self.new.parent and
                self.old.name.lower() == self.new.name.lower() and
                self.old.name != self.new.name)

    def with_new(self, new: Union[str, Path]) -> "Change":
        """Copy of this change with a different proposed path"""
        return replace(self, new=Path(new))


@dataclass
class RenameOptions:
    """Rename options configuration"""
    report: bool = True             # Print each change as it is made
    dry_run: bool = False           # Preview only, do not actually execute
