"""Main application window for editing a request form and exporting its JSON."""

from __future__ import annotations

from typing import Any, Callable

from PySide6.QtGui import QAction, QFontDatabase
from PySide6.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QLineEdit,
    QMainWindow,
    QPlainTextEdit,
    QScrollArea,
    QSpinBox,
    QSplitter,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from formeditor.export.saver import export_form
from formeditor.model.form import Form, Step
from formeditor.state import mutators
from formeditor.state.session import EditorSession
from formeditor.ui.file_saver import DialogFileSaver
from formeditor.ui.step_editor import StepEditor

WINDOW_TITLE = "JSON Generator für Anfragen"


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1300, 850)

        self._session = EditorSession()
        self._saver = DialogFileSaver(self)

        self.preview = QPlainTextEdit()
        self.preview.setReadOnly(True)
        self.preview.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))

        self._steps_layout = QVBoxLayout()
        editor = QWidget()
        editor_layout = QVBoxLayout(editor)
        editor_layout.addWidget(self._build_basic_info())
        editor_layout.addLayout(self._steps_layout)
        editor_layout.addStretch(1)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setWidget(editor)

        splitter = QSplitter()
        splitter.addWidget(self.scroll_area)
        splitter.addWidget(self.preview)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        self.setCentralWidget(splitter)

        self._build_toolbar()
        self._rebuild_steps()
        self._refresh_preview()
        self.statusBar().showMessage("Ready")

    @property
    def form(self) -> Form:
        return self._session.form

    def _build_toolbar(self) -> None:
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        add_step_action = QAction("Schritt hinzufügen", self)
        add_step_action.triggered.connect(self.add_step)
        toolbar.addAction(add_step_action)

        toolbar.addSeparator()

        export_action = QAction("JSON herunterladen", self)
        export_action.setShortcut("Ctrl+S")
        export_action.triggered.connect(self.export_json)
        toolbar.addAction(export_action)

    def _build_basic_info(self) -> QGroupBox:
        box = QGroupBox("Grundinformationen")
        layout = QFormLayout(box)

        id_spin = QSpinBox()
        id_spin.setRange(1, 999_999)
        id_spin.setValue(self.form.id)
        id_spin.valueChanged.connect(lambda value: self._edit(mutators.set_basic_field, "id", str(value)))
        layout.addRow("ID", id_spin)

        service_spin = QSpinBox()
        service_spin.setRange(1, 999_999)
        service_spin.setValue(self.form.service_id)
        service_spin.valueChanged.connect(
            lambda value: self._edit(mutators.set_basic_field, "serviceId", str(value))
        )
        layout.addRow("Service ID", service_spin)

        name_edit = QLineEdit(self.form.name)
        name_edit.textEdited.connect(lambda text: self._edit(mutators.set_basic_field, "name", text))
        layout.addRow("Name", name_edit)

        image_edit = QLineEdit(self.form.default_image)
        image_edit.setPlaceholderText("https://...")
        image_edit.textEdited.connect(
            lambda text: self._edit(mutators.set_basic_field, "defaultImage", text)
        )
        layout.addRow("Default Image URL", image_edit)
        return box

    def add_step(self) -> None:
        self._edit(mutators.add_step, rebuild=True)
        self.statusBar().showMessage(f"{self.form.step_count} step(s)")

    def export_json(self) -> None:
        export_form(self.form, self._saver)
        if self._saver.last_path is not None:
            self.statusBar().showMessage(f"Saved: {self._saver.last_path}")

    def _edit(self, mutator: Callable[..., Form], *args: Any, rebuild: bool = False) -> None:
        self._session.apply(mutator, *args)
        if rebuild:
            self._rebuild_steps()
        self._refresh_preview()

    def _refresh_preview(self) -> None:
        scroll = self.preview.verticalScrollBar().value()
        self.preview.setPlainText(self._session.preview)
        self.preview.verticalScrollBar().setValue(scroll)

    def _rebuild_steps(self) -> None:
        while self._steps_layout.count():
            widget = self._steps_layout.takeAt(0).widget()
            if widget is not None:
                widget.deleteLater()

        for index, step in enumerate(self.form.steps):
            self._steps_layout.addWidget(self._step_editor(index, step))

    def _step_editor(self, index: int, step: Step) -> StepEditor:
        editor = StepEditor(index, step)
        editor.field_changed.connect(
            lambda key, value: self._edit(mutators.set_step_field, index, key, value)
        )
        editor.remove_requested.connect(
            lambda: self._edit(mutators.remove_step, index, rebuild=True)
        )
        editor.item_added.connect(lambda: self._edit(mutators.add_item, index, rebuild=True))
        editor.item_removed.connect(
            lambda item_index: self._edit(mutators.remove_item, index, item_index, rebuild=True)
        )
        editor.item_type_changed.connect(
            lambda item_index, value: self._edit(
                mutators.set_item_type, index, item_index, value, rebuild=True
            )
        )
        editor.item_field_changed.connect(
            lambda item_index, key, value: self._edit(
                mutators.set_item_field, index, item_index, key, value
            )
        )
        editor.radio_group_changed.connect(
            lambda item_index, group: self._edit(
                mutators.set_radio_group, index, item_index, group
            )
        )
        return editor
