"""Form and step snapshot models."""

from __future__ import annotations

from dataclasses import dataclass

from formeditor.model.item import Item


@dataclass(frozen=True, slots=True)
class Step:
    title: str = ""
    order: int = 1
    items: tuple[Item, ...] = ()
    required: bool | None = None
    next_button: str | None = None


@dataclass(frozen=True, slots=True)
class Form:
    id: int = 1
    name: str = ""
    service_id: int = 1
    default_image: str = ""
    steps: tuple[Step, ...] = ()

    @property
    def step_count(self) -> int:
        return len(self.steps)
