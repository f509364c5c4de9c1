"""
pathmorph - Declarative bulk rename engine

    from pathmorph import RenameOptions, rename, list_files, replace, format_

    rename(list_files("~/Downloads"),
           replace("ext", r"^\\.jpeg$", ".jpg"),
           format_("name", r"^image", "%x"),
           options=RenameOptions(dry_run=True))
"""

from .core import *  # noqa: F401,F403
from .core import __all__

__version__ = "0.1.0"
