import json
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

pytest.importorskip("PySide6")

from PySide6.QtTest import QTest  # noqa: E402
from PySide6.QtWidgets import QApplication, QLineEdit  # noqa: E402

from formeditor.model.item import ItemType  # noqa: E402
from formeditor.state import mutators  # noqa: E402
from formeditor.ui.main_window import MainWindow  # noqa: E402


class RecordingSaver:
    def __init__(self):
        self.calls = []
        self.last_path = None

    def save(self, content, filename, mime_type):
        self.calls.append((content, filename, mime_type))


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


def _window_with_radios(count):
    window = MainWindow()
    window.add_step()
    for index in range(count):
        window._edit(mutators.add_item, 0)
        window._edit(mutators.set_item_type, 0, index, ItemType.RADIO)
    window._rebuild_steps()
    window._saver = RecordingSaver()
    window.show()
    return window


def test_group_typed_without_leaving_field_is_exported(qapp):
    window = _window_with_radios(1)
    (group_edit,) = window.findChildren(QLineEdit, "radio_group")
    group_edit.setFocus()
    QTest.keyClicks(group_edit, "heizung")

    assert '"group": "heizung"' in window.preview.toPlainText()
    window.export_json()

    content, filename, mime_type = window._saver.calls[0]
    item = json.loads(content)["steps"][0]["items"][0]
    assert item["group"] == "heizung"
    assert (filename, mime_type) == ("anfrage.json", "application/json")


def test_group_typed_updates_sibling_radios(qapp):
    window = _window_with_radios(2)
    first, second = window.findChildren(QLineEdit, "radio_group")
    QTest.keyClicks(second, "dach")

    assert first.text() == "dach"
    assert [item.group for item in window.form.steps[0].items] == ["dach", "dach"]
