"""
gui - PySide6 front end for pathmorph
"""

from .gui_entry import main

__all__ = ["main"]
