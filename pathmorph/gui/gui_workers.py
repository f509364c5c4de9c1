"""
gui_workers.py - GUI Worker Threads

Provides background execution of long tasks to avoid blocking UI
"""

import re
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QThread, Signal, QObject

from ..core import (
    Change, EngineConfig, RenameError, RenameOptions, StageSpec,
    build_stage, execute_plan, list_files, transform
)


class ScanWorker(QThread):
    """File listing worker thread"""

    # Signals
    finished = Signal(list)         # Complete, returns path list
    error = Signal(str)             # Error message

    def __init__(self, directory: Path, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.directory = directory

    def run(self):
        try:
            self.finished.emit(list_files(self.directory))
        except (ValueError, OSError) as e:
            self.error.emit(str(e))


class PlanWorker(QThread):
    """Rename plan generation worker thread"""

    # Signals
    progress = Signal(str)              # Progress message
    finished = Signal(object)           # List[Change]
    error = Signal(str)                 # Error message

    def __init__(
        self,
        files: List[Path],
        specs: List[StageSpec],
        config: Optional[EngineConfig] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.files = files
        self.specs = specs
        self.config = config or EngineConfig()

    def run(self):
        try:
            self.progress.emit("Generating rename plan...")
            stages = [build_stage(spec, self.config) for spec in self.specs]
            self.finished.emit(transform(self.files, *stages))
        except (RenameError, ValueError, re.error, OSError) as e:
            self.error.emit(str(e))


class RenameWorker(QThread):
    """Rename execution worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # List[Change]
    error = Signal(str)                 # Error message

    def __init__(
        self,
        changes: List[Change],
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.changes = changes

    def run(self):
        try:
            def progress_callback(current: int, total: int, msg: str):
                self.progress.emit(current, total, msg)

            results = execute_plan(
                self.changes,
                RenameOptions(report=False),
                progress_callback=progress_callback,
            )
            self.finished.emit(results)
        except (RenameError, OSError) as e:
            self.error.emit(str(e))
