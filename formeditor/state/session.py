"""In-memory editing session holding the current form snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from formeditor.export.projector import project
from formeditor.model.form import Form


@dataclass(slots=True)
class EditorSession:
    form: Form = field(default_factory=Form)
    preview: str = ""

    def __post_init__(self) -> None:
        self.preview = project(self.form)

    def apply(self, mutator: Callable[..., Form], *args: Any) -> Form:
        self.form = mutator(self.form, *args)
        self.preview = project(self.form)
        return self.form
