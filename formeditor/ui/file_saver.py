"""Dialog-backed file saver for exported forms."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import QFileDialog, QMessageBox, QWidget

from formeditor.export.saver import DirectorySaver, ExportError


class DialogFileSaver:
    def __init__(self, parent: QWidget) -> None:
        self._parent = parent
        self.last_path: Path | None = None

    def save(self, content: str, filename: str, mime_type: str) -> None:
        self.last_path = None
        output_path, _ = QFileDialog.getSaveFileName(
            self._parent,
            "Save JSON",
            str(Path.home() / filename),
            "JSON Files (*.json)",
        )
        if not output_path:
            return

        target = Path(output_path)
        try:
            DirectorySaver(target.parent).save(content, target.name, mime_type)
        except ExportError as exc:
            QMessageBox.critical(self._parent, "Save Failed", str(exc))
            return
        self.last_path = target
