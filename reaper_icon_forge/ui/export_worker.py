"""
Background export for the Qt front end.
"""

from typing import Optional

from PyQt6.QtCore import QThread, pyqtSignal

from reaper_icon_forge.core.exporter import ExportPhase, ExportResult, IconExporter
from reaper_icon_forge.core.models import ExportRequest


class ExportWorker(QThread):
    """Runs one export off the GUI thread."""

    progress = pyqtSignal(int)
    export_finished = pyqtSignal(bool, str)

    def __init__(self, request: ExportRequest, parent=None):
        super().__init__(parent)
        self.request = request
        self.result: Optional[ExportResult] = None
        self.error: Optional[Exception] = None

    def _on_progress(self, phase: ExportPhase, done: int, total: int):
        if phase is ExportPhase.WRITING and total:
            self.progress.emit(int(done * 100 / total))
        elif phase is ExportPhase.DONE:
            self.progress.emit(100)

    def run(self):
        """Export in background; the outcome arrives via export_finished."""
        try:
            self.result = IconExporter.export(self.request, progress=self._on_progress)
        except Exception as e:
            self.error = e
            self.export_finished.emit(False, str(e))
            return

        self.export_finished.emit(True, str(self.request.destination))
