"""
cli - Command Line Interface for pathmorph
"""

from .cli_entry import main

__all__ = ["main"]
