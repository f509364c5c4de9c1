"""
gui_mainwindow.py - GUI Main Window

One window: pick a directory, list stages, preview the plan, execute it.
"""

from pathlib import Path
from typing import List, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QComboBox, QTableWidget,
    QTableWidgetItem, QProgressBar, QFileDialog, QMessageBox,
    QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from ..core import (
    Change, EngineConfig, RenameError, StageKind, StageSpec,
    find_collisions, parse_key_pair
)
from ..core.hashing import ALGORITHMS
from ..core.config import DEFAULT_FALLBACK_EXTENSION, DEFAULT_HASH_ALGORITHM
from .gui_workers import ScanWorker, PlanWorker, RenameWorker

STAGE_COLUMNS = ["Stage", "Key (get[:put])", "Pattern", "Value / Template"]


class RenameWidget(QWidget):
    """Stage pipeline editor with plan preview"""

    def __init__(self, directory: Optional[str] = None, parent=None):
        super().__init__(parent)
        self.files: List[Path] = []
        self.plan: List[Change] = []
        self.scan_worker: Optional[ScanWorker] = None
        self.plan_worker: Optional[PlanWorker] = None
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()

        if directory:
            self.dir_edit.setText(directory)
            self._do_scan()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Directory group
        dir_group = QGroupBox("Directory")
        dir_layout = QGridLayout(dir_group)

        dir_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select directory (non-recursive)...")
        dir_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        dir_layout.addWidget(self.browse_btn, 0, 2)

        self.scan_btn = QPushButton("Scan")
        self.scan_btn.clicked.connect(self._do_scan)
        dir_layout.addWidget(self.scan_btn, 1, 0, 1, 3)

        layout.addWidget(dir_group)

        # Stages group
        stage_group = QGroupBox("Stages (applied top to bottom)")
        stage_layout = QVBoxLayout(stage_group)

        self.stage_table = QTableWidget(0, len(STAGE_COLUMNS))
        self.stage_table.setHorizontalHeaderLabels(STAGE_COLUMNS)
        header = self.stage_table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.ResizeToContents)
        for col in range(1, len(STAGE_COLUMNS)):
            header.setSectionResizeMode(col, QHeaderView.ResizeMode.Stretch)
        stage_layout.addWidget(self.stage_table)

        buttons = QHBoxLayout()
        self.add_stage_btn = QPushButton("Add Stage")
        self.add_stage_btn.clicked.connect(self._add_stage_row)
        self.remove_stage_btn = QPushButton("Remove Stage")
        self.remove_stage_btn.clicked.connect(self._remove_stage_row)
        buttons.addWidget(self.add_stage_btn)
        buttons.addWidget(self.remove_stage_btn)
        buttons.addStretch()

        buttons.addWidget(QLabel("Checksum:"))
        self.hash_combo = QComboBox()
        self.hash_combo.addItems(list(ALGORITHMS))
        self.hash_combo.setCurrentText(DEFAULT_HASH_ALGORITHM)
        buttons.addWidget(self.hash_combo)

        buttons.addWidget(QLabel("Unknown type ext:"))
        self.fallback_edit = QLineEdit(DEFAULT_FALLBACK_EXTENSION)
        self.fallback_edit.setMaximumWidth(80)
        buttons.addWidget(self.fallback_edit)
        stage_layout.addLayout(buttons)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        self.preview_btn.setEnabled(False)
        stage_layout.addWidget(self.preview_btn)

        layout.addWidget(stage_group)
        self._add_stage_row()

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status", "New Directory"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(3, QHeaderView.ResizeMode.Stretch)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _add_stage_row(self):
        row = self.stage_table.rowCount()
        self.stage_table.insertRow(row)
        kind_combo = QComboBox()
        kind_combo.addItems([kind.value for kind in StageKind])
        kind_combo.setCurrentText(StageKind.REPLACE.value)
        self.stage_table.setCellWidget(row, 0, kind_combo)
        self.stage_table.setItem(row, 1, QTableWidgetItem("name"))
        self.stage_table.setItem(row, 2, QTableWidgetItem(""))
        self.stage_table.setItem(row, 3, QTableWidgetItem(""))

    def _remove_stage_row(self):
        row = self.stage_table.currentRow()
        if row < 0:
            row = self.stage_table.rowCount() - 1
        if row >= 0:
            self.stage_table.removeRow(row)

    def _cell_text(self, row: int, col: int) -> str:
        item = self.stage_table.item(row, col)
        return item.text() if item else ""

    def _stage_specs(self) -> List[StageSpec]:
        """Read the stage table into stage descriptions"""
        specs = []
        for row in range(self.stage_table.rowCount()):
            kind = StageKind(self.stage_table.cellWidget(row, 0).currentText())
            get, put = parse_key_pair(self._cell_text(row, 1))
            specs.append(StageSpec(
                kind=kind,
                get=get,
                put=put,
                pattern=self._cell_text(row, 2),
                value=self._cell_text(row, 3),
            ))
        return specs

    def _config(self) -> EngineConfig:
        return EngineConfig(
            hash_algorithm=self.hash_combo.currentText(),
            fallback_extension=self.fallback_edit.text().strip(),
        )

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def _do_scan(self):
        """Execute scan"""
        directory = self.dir_edit.text().strip()
        if not directory:
            QMessageBox.warning(self, "Warning", "Please select a directory first")
            return

        path = Path(directory).expanduser()
        if not path.is_dir():
            QMessageBox.warning(self, "Warning", f"Directory does not exist: {directory}")
            return

        self.scan_btn.setEnabled(False)
        self.scan_btn.setText("Scanning...")
        self.preview_btn.setEnabled(False)
        self.execute_btn.setEnabled(False)

        self.scan_worker = ScanWorker(path)
        self.scan_worker.finished.connect(self._on_scan_finished)
        self.scan_worker.error.connect(self._on_scan_error)
        self.scan_worker.start()

    @Slot(list)
    def _on_scan_finished(self, files: List[Path]):
        """Scan complete"""
        self.files = files
        self.plan = []
        self.scan_btn.setEnabled(True)
        self.scan_btn.setText("Scan")

        self.table.setRowCount(len(files))
        for i, f in enumerate(files):
            self.table.setItem(i, 0, QTableWidgetItem(f.name))
            self.table.setItem(i, 1, QTableWidgetItem(""))
            self.table.setItem(i, 2, QTableWidgetItem(""))
            self.table.setItem(i, 3, QTableWidgetItem(""))

        if files:
            self.preview_btn.setEnabled(True)
            self.status_label.setText(f"Found {len(files)} files")
        else:
            self.status_label.setText("No files found")

    @Slot(str)
    def _on_scan_error(self, error: str):
        """Scan error"""
        self.scan_btn.setEnabled(True)
        self.scan_btn.setText("Scan")
        QMessageBox.critical(self, "Error", f"Scan failed: {error}")

    def _do_preview(self):
        """Generate preview"""
        try:
            specs = self._stage_specs()
        except RenameError as e:
            QMessageBox.warning(self, "Warning", str(e))
            return

        if not specs:
            QMessageBox.warning(self, "Warning", "Please add at least one stage")
            return

        self.preview_btn.setEnabled(False)
        self.preview_btn.setText("Generating...")
        self.execute_btn.setEnabled(False)

        self.plan_worker = PlanWorker(self.files, specs, self._config())
        self.plan_worker.progress.connect(self.status_label.setText)
        self.plan_worker.finished.connect(self._on_plan_finished)
        self.plan_worker.error.connect(self._on_plan_error)
        self.plan_worker.start()

    @Slot(object)
    def _on_plan_finished(self, plan: List[Change]):
        """Plan generation complete"""
        self.plan = plan
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")

        collisions = find_collisions(plan)
        change_map = {c.old: c for c in plan}

        for i, f in enumerate(self.files):
            change = change_map.get(f)
            if change is None:
                self.table.setItem(i, 1, QTableWidgetItem(f.name))
                status_item = QTableWidgetItem("No Change")
                status_item.setForeground(QColor(150, 150, 150))
                self.table.setItem(i, 2, status_item)
                self.table.setItem(i, 3, QTableWidgetItem(""))
                continue

            new_name_item = QTableWidgetItem(change.new.name)
            if change.new in collisions:
                new_name_item.setBackground(QColor(255, 255, 200))
                status_item = QTableWidgetItem("Will Be Numbered")
                status_item.setForeground(QColor(200, 150, 0))
            else:
                status_item = QTableWidgetItem("Will Rename")
                status_item.setForeground(QColor(0, 150, 0))

            self.table.setItem(i, 1, new_name_item)
            self.table.setItem(i, 2, status_item)
            parent = change.new.parent
            self.table.setItem(i, 3, QTableWidgetItem("" if parent == f.parent else str(parent)))

        if plan:
            self.execute_btn.setEnabled(True)
            self.status_label.setText(
                f"Will perform {len(plan)} rename operations (names to be numbered: {len(collisions)})"
            )
        else:
            self.status_label.setText("No files need renaming")

    @Slot(str)
    def _on_plan_error(self, error: str):
        """Plan generation error"""
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")
        QMessageBox.critical(self, "Error", f"Failed to generate preview: {error}")

    def _do_execute(self):
        """Execute rename"""
        if not self.plan:
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to execute {len(self.plan)} rename operations?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Executing...")
        self.preview_btn.setEnabled(False)
        self.scan_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, len(self.plan))

        self.rename_worker = RenameWorker(self.plan)
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_rename_error)
        self.rename_worker.start()

    @Slot(int, int, str)
    def _on_rename_progress(self, current: int, total: int, msg: str):
        """Execution progress update"""
        self.progress_bar.setValue(current)
        self.status_label.setText(msg)

    @Slot(object)
    def _on_rename_finished(self, results: List[Change]):
        """Execution complete"""
        self.execute_btn.setText("Execute Rename")
        self.scan_btn.setEnabled(True)
        self.progress_bar.setVisible(False)

        renumbered = [c for c, planned in zip(results, self.plan) if c.new != planned.new]
        msg = f"Rename complete!\n\nRenamed: {len(results)}\nNumbered to avoid overwriting: {len(renumbered)}"
        QMessageBox.information(self, "Complete", msg)

        self.files = []
        self.plan = []
        self.table.setRowCount(0)
        self.status_label.setText("Complete")

    @Slot(str)
    def _on_rename_error(self, error: str):
        """Execution error"""
        self.execute_btn.setText("Execute Rename")
        self.scan_btn.setEnabled(True)
        self.progress_bar.setVisible(False)
        self.plan = []
        QMessageBox.critical(
            self, "Error",
            f"Execution stopped: {error}\n\nFiles renamed before the error keep their new names. Scan again to continue."
        )


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self, directory: Optional[str] = None):
        super().__init__()
        self.setWindowTitle("pathmorph")
        self.setMinimumSize(900, 650)

        self.rename_widget = RenameWidget(directory)
        self.setCentralWidget(self.rename_widget)

        # Status bar
        self.statusBar().showMessage("Ready")
