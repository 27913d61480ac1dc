"""Export of the projected form to a file-save collaborator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from formeditor.export.projector import project
from formeditor.model.form import Form

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "anfrage.json"
EXPORT_MIME_TYPE = "application/json"


class ExportError(RuntimeError):
    """Raised when the exported document cannot be written."""


class FileSaver(Protocol):
    def save(self, content: str, filename: str, mime_type: str) -> None: ...


class DirectorySaver:
    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def save(self, content: str, filename: str, mime_type: str) -> None:
        del mime_type
        target = self.directory / filename
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ExportError(f"Failed to write export: {target}") from exc
        logger.info("Exported form to %s", target)


def export_form(form: Form, saver: FileSaver) -> None:
    saver.save(project(form), EXPORT_FILENAME, EXPORT_MIME_TYPE)
