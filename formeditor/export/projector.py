"""Projection of a form snapshot into the exported JSON document."""

from __future__ import annotations

import json
from typing import Any

from formeditor.model.form import Form, Step
from formeditor.model.item import item_to_dict

JSON_INDENT = 2


def project_dict(form: Form) -> dict[str, Any]:
    return {
        "id": form.id,
        "name": form.name,
        "serviceId": form.service_id,
        "steps": [_step_to_dict(step) for step in form.steps],
        "defaultImage": form.default_image,
    }


def project(form: Form) -> str:
    return json.dumps(project_dict(form), indent=JSON_INDENT, ensure_ascii=False)


def _step_to_dict(step: Step) -> dict[str, Any]:
    data: dict[str, Any] = {
        "items": [item_to_dict(item) for item in step.items],
        "order": step.order,
        "title": step.title,
    }
    # False is a set value; only None means the flag was never set.
    if step.required is not None:
        data["required"] = step.required
    if step.next_button:
        data["nextButton"] = step.next_button
    return data
