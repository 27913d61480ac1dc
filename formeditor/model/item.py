"""Step item model definitions."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Iterable, Union


class ItemType(str, Enum):
    TEXT_HINT = "TEXT_HINT"
    INPUT_PLZ = "INPUT_PLZ"
    RADIO = "RADIO"
    INPUT_TEXT = "INPUT_TEXT"
    INPUT_NUMBER = "INPUT_NUMBER"

    @property
    def label(self) -> str:
        return ITEM_TYPE_LABELS[self]


ITEM_TYPE_LABELS: dict[ItemType, str] = {
    ItemType.TEXT_HINT: "Hinweistext",
    ItemType.INPUT_PLZ: "Postleitzahl Eingabe",
    ItemType.RADIO: "Radio Button",
    ItemType.INPUT_TEXT: "Text Eingabe",
    ItemType.INPUT_NUMBER: "Nummer Eingabe",
}

PLZ_DEFAULT = "Postleitzahl"


def _exported_as(name: str) -> Any:
    return field(default=None, metadata={"key": name})


@dataclass(frozen=True, slots=True)
class TextHint:
    type: ClassVar[ItemType] = ItemType.TEXT_HINT

    text: str = ""
    headline: str = ""


@dataclass(frozen=True, slots=True)
class PlzInput:
    type: ClassVar[ItemType] = ItemType.INPUT_PLZ

    name: str = PLZ_DEFAULT
    label: str = ""
    required: bool = True
    placeholder: str = PLZ_DEFAULT


@dataclass(frozen=True, slots=True)
class RadioItem:
    type: ClassVar[ItemType] = ItemType.RADIO

    group: str = ""
    label: str = ""
    icon_path: str | None = _exported_as("iconPath")


@dataclass(frozen=True, slots=True)
class TextInput:
    type: ClassVar[ItemType] = ItemType.INPUT_TEXT

    name: str = ""
    label: str = ""
    required: bool = False
    placeholder: str = ""


@dataclass(frozen=True, slots=True)
class NumberInput:
    type: ClassVar[ItemType] = ItemType.INPUT_NUMBER

    name: str = ""
    label: str = ""
    required: bool = False
    placeholder: str = ""


@dataclass(frozen=True, slots=True)
class UnknownItem:
    """Item whose type tag is not one of the known kinds; carries no fields."""

    type: str


Item = Union[TextHint, PlzInput, RadioItem, TextInput, NumberInput, UnknownItem]


def type_tag(item: Item) -> str:
    if isinstance(item, UnknownItem):
        return item.type
    return item.type.value


def item_keys(item: Item) -> dict[str, str]:
    """Map exported key names to attribute names, in declaration order."""
    if isinstance(item, UnknownItem):
        return {}
    return {f.metadata.get("key", f.name): f.name for f in fields(item)}


def item_to_dict(item: Item) -> dict[str, Any]:
    data: dict[str, Any] = {"type": type_tag(item)}
    for key, attr in item_keys(item).items():
        value = getattr(item, attr)
        if value is None:
            continue
        data[key] = value
    return data


def first_radio_group(items: Iterable[Item]) -> str:
    for item in items:
        if isinstance(item, RadioItem):
            return item.group or ""
    return ""


def default_item(item_type: ItemType | str, siblings: Iterable[Item] = ()) -> Item:
    try:
        kind = ItemType(item_type)
    except ValueError:
        return UnknownItem(type=str(item_type))

    match kind:
        case ItemType.TEXT_HINT:
            return TextHint()
        case ItemType.INPUT_PLZ:
            return PlzInput()
        case ItemType.RADIO:
            return RadioItem(group=first_radio_group(siblings))
        case ItemType.INPUT_TEXT:
            return TextInput()
        case ItemType.INPUT_NUMBER:
            return NumberInput()
