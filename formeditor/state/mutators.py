"""Pure edit operations on form snapshots.

Every function takes a snapshot and returns a new one. User input is
normalized rather than rejected: numbers that cannot be parsed fall back to
``1`` and edits aimed at a missing step/item or an unknown field return the
snapshot unchanged.

Items of an unknown type carry only their ``type`` tag and cannot be edited;
``set_item_field`` also ignores fields the item's kind does not declare.
"""

from __future__ import annotations

from dataclasses import replace
import logging
import re
from typing import Any, Callable

from formeditor.model.form import Form, Step
from formeditor.model.item import (
    Item,
    ItemType,
    RadioItem,
    TextHint,
    default_item,
    item_keys,
)

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*(?P<sign>[+-]?)(?:0[xX](?P<hex>[0-9a-fA-F]+)|(?P<dec>[0-9]+))")

BASIC_FIELDS = {"id": "id", "name": "name", "serviceId": "service_id", "defaultImage": "default_image"}
STEP_FIELDS = {"title": "title", "order": "order", "required": "required", "nextButton": "next_button"}


def parse_int_or_one(raw_value: Any) -> int:
    """Parse the leading ASCII decimal or ``0x`` hex integer; missing or zero gives 1."""
    if isinstance(raw_value, bool):
        raw_value = int(raw_value)
    if isinstance(raw_value, int):
        return raw_value or 1
    match = _LEADING_INT.match(str(raw_value or ""))
    if match is None:
        return 1
    if match["hex"] is not None:
        value = int(match["hex"], 16)
    else:
        value = int(match["dec"])
    if match["sign"] == "-":
        value = -value
    return value or 1


def parse_flag(raw_value: Any) -> bool:
    if isinstance(raw_value, bool):
        return raw_value
    return raw_value == "true"


def set_basic_field(form: Form, field: str, raw_value: Any) -> Form:
    attr = BASIC_FIELDS.get(field)
    if attr is None:
        logger.debug("Ignoring unknown form field %r", field)
        return form
    if attr in ("id", "service_id"):
        return replace(form, **{attr: parse_int_or_one(raw_value)})
    return replace(form, **{attr: raw_value})


def add_step(form: Form) -> Form:
    step = Step(title="", order=form.step_count + 1, items=(), required=False)
    return replace(form, steps=form.steps + (step,))


def remove_step(form: Form, index: int) -> Form:
    if not _in_range(form.steps, index):
        return form
    return replace(form, steps=form.steps[:index] + form.steps[index + 1 :])


def set_step_field(form: Form, index: int, field: str, raw_value: Any) -> Form:
    attr = STEP_FIELDS.get(field)
    if attr is None:
        logger.debug("Ignoring unknown step field %r", field)
        return form
    if attr == "order":
        value = parse_int_or_one(raw_value)
    elif attr == "required":
        value = parse_flag(raw_value)
    else:
        value = raw_value
    return _update_step(form, index, lambda step: replace(step, **{attr: value}))


def add_item(form: Form, step_index: int) -> Form:
    return _update_step(form, step_index, lambda step: replace(step, items=step.items + (TextHint(),)))


def remove_item(form: Form, step_index: int, item_index: int) -> Form:
    def drop(step: Step) -> Step:
        if not _in_range(step.items, item_index):
            return step
        return replace(step, items=step.items[:item_index] + step.items[item_index + 1 :])

    return _update_step(form, step_index, drop)


def set_item_type(form: Form, step_index: int, item_index: int, new_type: ItemType | str) -> Form:
    def reset(step: Step) -> Step:
        if not _in_range(step.items, item_index):
            return step
        siblings = step.items[:item_index] + step.items[item_index + 1 :]
        return _replace_item(step, item_index, default_item(new_type, siblings))

    return _update_step(form, step_index, reset)


def set_item_field(form: Form, step_index: int, item_index: int, field: str, raw_value: Any) -> Form:
    def patch(step: Step) -> Step:
        if not _in_range(step.items, item_index):
            return step
        item = step.items[item_index]
        attr = item_keys(item).get(field)
        if attr is None:
            logger.debug("Ignoring field %r on %s item", field, type(item).__name__)
            return step
        value = parse_flag(raw_value) if field == "required" else raw_value
        return _replace_item(step, item_index, replace(item, **{attr: value}))

    return _update_step(form, step_index, patch)


def set_radio_group(form: Form, step_index: int, item_index: int, group: str) -> Form:
    """Set ``group`` on a radio item and on every other radio item of its step."""

    def regroup(step: Step) -> Step:
        if not _in_range(step.items, item_index):
            return step
        if not isinstance(step.items[item_index], RadioItem):
            return step
        items = tuple(
            replace(item, group=group) if isinstance(item, RadioItem) else item
            for item in step.items
        )
        return replace(step, items=items)

    return _update_step(form, step_index, regroup)


def _in_range(values: tuple, index: int) -> bool:
    return 0 <= index < len(values)


def _update_step(form: Form, index: int, change: Callable[[Step], Step]) -> Form:
    if not _in_range(form.steps, index):
        logger.debug("Ignoring edit for missing step %s", index)
        return form
    steps = list(form.steps)
    steps[index] = change(steps[index])
    return replace(form, steps=tuple(steps))


def _replace_item(step: Step, index: int, item: Item) -> Step:
    items = list(step.items)
    items[index] = item
    return replace(step, items=tuple(items))
