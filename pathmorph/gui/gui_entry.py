"""
gui_entry.py - GUI Entry

Launch the PySide6 window, optionally scanning a directory given on the command line
"""

import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from .gui_mainwindow import MainWindow


def main(argv: Optional[List[str]] = None) -> int:
    """
    GUI main entry

    Args:
        argv: Arguments after the program name; the first non-option one is
            the directory to open
    """
    if argv is None:
        argv = sys.argv[1:]
    directories = [a for a in argv if not a.startswith("-")]

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication([sys.argv[0], *argv])
    app.setApplicationName("pathmorph")
    app.setApplicationVersion("0.1.0")
    app.setStyle("Fusion")

    window = MainWindow(directories[0] if directories else None)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
