"""Editor widgets for a single step and its items."""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QFrame,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from formeditor.model.form import Step
from formeditor.model.item import (
    Item,
    ItemType,
    NumberInput,
    PlzInput,
    RadioItem,
    TextHint,
    TextInput,
    UnknownItem,
    type_tag,
)

FLAG_CHOICES = (("false", "Nein"), ("true", "Ja"))
REQUIRED_CHOICES = (("false", "Optional"), ("true", "Required"))


def _flag_combo(choices: tuple[tuple[str, str], ...], value: bool | None) -> QComboBox:
    combo = QComboBox()
    for data, text in choices:
        combo.addItem(text, data)
    combo.setCurrentIndex(1 if value else 0)
    return combo


class ItemEditor(QFrame):
    type_changed = Signal(str)
    field_changed = Signal(str, object)
    group_changed = Signal(str)
    remove_requested = Signal()

    def __init__(self, item: Item) -> None:
        super().__init__()
        self.setFrameShape(QFrame.Shape.StyledPanel)

        self.type_combo = QComboBox()
        for item_type in ItemType:
            self.type_combo.addItem(item_type.label, item_type.value)
        current = self.type_combo.findData(type_tag(item))
        if current < 0:
            self.type_combo.addItem(type_tag(item), type_tag(item))
            current = self.type_combo.count() - 1
        self.type_combo.setCurrentIndex(current)
        self.type_combo.currentIndexChanged.connect(
            lambda index: self.type_changed.emit(self.type_combo.itemData(index))
        )

        remove_button = QPushButton("Entfernen")
        remove_button.clicked.connect(self.remove_requested.emit)

        header = QHBoxLayout()
        header.addWidget(self.type_combo, 1)
        header.addWidget(remove_button)

        self.group_edit: QLineEdit | None = None
        self._fields = QFormLayout()
        layout = QVBoxLayout(self)
        layout.addLayout(header)
        layout.addLayout(self._fields)

        self._build_fields(item)

    def _build_fields(self, item: Item) -> None:
        match item:
            case TextHint():
                self._add_text("Überschrift", "headline", item.headline)
                self._add_text("Text", "text", item.text)
            case PlzInput() | TextInput() | NumberInput():
                self._add_text("Name", "name", item.name)
                self._add_text("Placeholder", "placeholder", item.placeholder)
                self._add_text("Label", "label", item.label)
                combo = _flag_combo(REQUIRED_CHOICES, item.required)
                combo.currentIndexChanged.connect(
                    lambda index: self.field_changed.emit("required", combo.itemData(index))
                )
                self._fields.addRow("Pflichtfeld", combo)
            case RadioItem():
                self._add_text("Label", "label", item.label)
                self.group_edit = QLineEdit(item.group)
                self.group_edit.setObjectName("radio_group")
                self.group_edit.setPlaceholderText("Group")
                self.group_edit.textEdited.connect(self.group_changed.emit)
                self._fields.addRow("Gruppe", self.group_edit)
                self._add_text("Icon", "iconPath", item.icon_path or "", placeholder="Icon Path URL")
            case UnknownItem():
                self._fields.addRow(QLabel(f"Unbekannter Typ: {item.type}"))

    def _add_text(self, label: str, key: str, value: str, placeholder: str | None = None) -> None:
        edit = QLineEdit(value)
        edit.setPlaceholderText(placeholder or label)
        edit.textEdited.connect(lambda text: self.field_changed.emit(key, text))
        self._fields.addRow(label, edit)


class StepEditor(QGroupBox):
    field_changed = Signal(str, object)
    remove_requested = Signal()
    item_added = Signal()
    item_removed = Signal(int)
    item_type_changed = Signal(int, str)
    item_field_changed = Signal(int, str, object)
    radio_group_changed = Signal(int, str)

    def __init__(self, position: int, step: Step) -> None:
        super().__init__(f"Schritt {position + 1}")

        title_edit = QLineEdit(step.title)
        title_edit.textEdited.connect(lambda text: self.field_changed.emit("title", text))

        order_spin = QSpinBox()
        order_spin.setRange(-999_999, 999_999)
        order_spin.setValue(step.order)
        order_spin.valueChanged.connect(lambda value: self.field_changed.emit("order", str(value)))

        required_combo = _flag_combo(FLAG_CHOICES, step.required)
        required_combo.currentIndexChanged.connect(
            lambda index: self.field_changed.emit("required", required_combo.itemData(index))
        )

        next_edit = QLineEdit(step.next_button or "")
        next_edit.setPlaceholderText("Optional (z.B. 'Weiter')")
        next_edit.textEdited.connect(lambda text: self.field_changed.emit("nextButton", text))

        form = QFormLayout()
        form.addRow("Titel", title_edit)
        form.addRow("Reihenfolge", order_spin)
        form.addRow("Required", required_combo)
        form.addRow("Next Button", next_edit)

        remove_button = QPushButton("Schritt entfernen")
        remove_button.clicked.connect(self.remove_requested.emit)
        add_item_button = QPushButton("Item hinzufügen")
        add_item_button.clicked.connect(self.item_added.emit)

        buttons = QHBoxLayout()
        buttons.addWidget(add_item_button)
        buttons.addStretch(1)
        buttons.addWidget(remove_button)

        self._item_editors: list[ItemEditor] = []
        items = QWidget()
        items_layout = QVBoxLayout(items)
        items_layout.setContentsMargins(0, 0, 0, 0)
        for index, item in enumerate(step.items):
            editor = self._item_editor(index, item)
            self._item_editors.append(editor)
            items_layout.addWidget(editor)

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(QLabel("Items"))
        layout.addWidget(items)
        layout.addLayout(buttons)

    def _item_editor(self, index: int, item: Item) -> ItemEditor:
        editor = ItemEditor(item)
        editor.type_changed.connect(lambda value: self.item_type_changed.emit(index, value))
        editor.field_changed.connect(lambda key, value: self.item_field_changed.emit(index, key, value))
        editor.group_changed.connect(lambda group: self._on_group_changed(index, group))
        editor.remove_requested.connect(lambda: self.item_removed.emit(index))
        return editor

    def _on_group_changed(self, index: int, group: str) -> None:
        # setText does not emit textEdited, so siblings do not re-enter here.
        for position, editor in enumerate(self._item_editors):
            if position != index and editor.group_edit is not None:
                editor.group_edit.setText(group)
        self.radio_group_changed.emit(index, group)
