import json
import random

import pytest

from formeditor.export.projector import project, project_dict
from formeditor.model.form import Form, Step
from formeditor.model.item import ItemType
from formeditor.state import mutators


def _sample_form():
    form = Form()
    form = mutators.set_basic_field(form, "name", "Heizungsanfrage")
    form = mutators.set_basic_field(form, "serviceId", "3")
    form = mutators.add_step(form)
    form = mutators.add_item(form, 0)
    form = mutators.set_item_type(form, 0, 0, ItemType.INPUT_PLZ)
    form = mutators.add_step(form)
    form = mutators.set_step_field(form, 1, "nextButton", "Weiter")
    return form


def test_empty_form_projection():
    assert project(Form()) == (
        "{\n"
        '  "id": 1,\n'
        '  "name": "",\n'
        '  "serviceId": 1,\n'
        '  "steps": [],\n'
        '  "defaultImage": ""\n'
        "}"
    )


def test_top_level_key_order_survives_round_trip():
    parsed = json.loads(project(_sample_form()))
    assert list(parsed) == ["id", "name", "serviceId", "steps", "defaultImage"]
    assert parsed["serviceId"] == 3


def test_step_key_order_and_optional_keys():
    steps = project_dict(_sample_form())["steps"]
    assert list(steps[0]) == ["items", "order", "title", "required"]
    assert steps[0]["required"] is False
    assert list(steps[1]) == ["items", "order", "title", "required", "nextButton"]
    assert steps[1]["nextButton"] == "Weiter"


def test_unset_required_and_empty_next_button_are_omitted():
    form = Form(steps=(Step(title="Start", order=1, next_button=""),))
    assert list(project_dict(form)["steps"][0]) == ["items", "order", "title"]


def test_items_emitted_with_all_fields():
    item = project_dict(_sample_form())["steps"][0]["items"][0]
    assert item == {
        "type": "INPUT_PLZ",
        "name": "Postleitzahl",
        "label": "",
        "required": True,
        "placeholder": "Postleitzahl",
    }


def test_non_ascii_is_kept_and_indent_is_two_spaces():
    form = mutators.set_basic_field(Form(), "name", "Küche")
    text = project(form)
    assert '"name": "Küche"' in text
    assert '\n  "id": 1,' in text


def test_projection_is_idempotent():
    form = _sample_form()
    assert project(form) == project(form)


def _index(rng):
    return rng.randint(-1, 3)


def _edit_basic(form, rng):
    field = rng.choice(["id", "serviceId", "name", "defaultImage", "colour"])
    return mutators.set_basic_field(form, field, rng.choice(["7", "abc", "", 'Bad "Ü"\n']))


def _edit_step(form, rng):
    field = rng.choice(["title", "order", "required", "nextButton", "colour"])
    return mutators.set_step_field(form, _index(rng), field, rng.choice(["true", "false", "", "2", "Weiter"]))


def _edit_item_type(form, rng):
    return mutators.set_item_type(form, _index(rng), _index(rng), rng.choice([*ItemType, "SLIDER"]))


def _edit_item_field(form, rng):
    field = rng.choice(["label", "group", "required", "iconPath", "text", "colour"])
    return mutators.set_item_field(form, _index(rng), _index(rng), field, rng.choice(["true", "g1", ""]))


EDITS = [
    lambda form, rng: mutators.add_step(form),
    lambda form, rng: mutators.remove_step(form, _index(rng)),
    lambda form, rng: mutators.add_item(form, _index(rng)),
    lambda form, rng: mutators.remove_item(form, _index(rng), _index(rng)),
    lambda form, rng: mutators.set_radio_group(form, _index(rng), _index(rng), rng.choice(["g1", "g2", ""])),
    _edit_basic,
    _edit_step,
    _edit_item_type,
    _edit_item_field,
]


@pytest.mark.parametrize("seed", range(25))
def test_projection_shape_holds_for_mutation_sequences(seed):
    rng = random.Random(seed)
    form = Form()
    for _ in range(60):
        form = rng.choice(EDITS)(form, rng)
        text = project(form)
        assert project(form) == text
        parsed = json.loads(text)
        assert list(parsed) == ["id", "name", "serviceId", "steps", "defaultImage"]
        for step, exported in zip(form.steps, parsed["steps"]):
            keys = ["items", "order", "title"]
            if step.required is not None:
                keys.append("required")
            if step.next_button:
                keys.append("nextButton")
            assert list(exported) == keys
            assert all(list(item)[0] == "type" for item in exported["items"])
