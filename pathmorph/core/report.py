"""
report.py - Change Reporting
"""

import os
import sys
from pathlib import Path
from typing import Optional, TextIO

from .models_fs import Change


def relative_to_cwd(path: Path) -> str:
    """Path relative to the current working directory"""
    return os.path.relpath(os.path.abspath(path), os.getcwd())


def format_change(change: Change) -> str:
    """`old →<tab>new`, both relative to the working directory"""
    return f"{relative_to_cwd(change.old):<25} →\t{relative_to_cwd(change.new)}"


def print_change(change: Change, stream: Optional[TextIO] = None) -> Change:
    """Print a change and hand it back"""
    print(format_change(change), file=stream or sys.stdout)
    return change
