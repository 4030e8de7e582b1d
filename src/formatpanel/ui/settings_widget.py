from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QAbstractButton, QComboBox, QLineEdit, QSpinBox, QWidget

from ..logging_utils import get_logger

_LOGGER = get_logger(__name__)


class SettingsWidget(QWidget):
    """Base class for one page of the preferences dialog.

    Subclasses implement ``do_load`` and ``do_save`` and register their input
    controls with ``watch_controls`` so user edits raise ``settings_changed``.
    Changes made while loading are not reported.
    """

    settings_changed = Signal()

    def __init__(self, name: str, group: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._name = name
        self._group = group
        self._loading = False
        self._settings_changed = False

    def name(self) -> str:
        return self._name

    def group(self) -> str:
        return self._group

    def is_settings_changed(self) -> bool:
        return self._settings_changed

    def load(self) -> None:
        _LOGGER.debug("Loading settings page %s/%s", self._group, self._name)
        self._loading = True
        try:
            self.do_load()
        finally:
            self._loading = False
        self._settings_changed = False

    def save(self) -> None:
        _LOGGER.debug("Saving settings page %s/%s", self._group, self._name)
        self.do_save()
        self._settings_changed = False

    def do_load(self) -> None:
        raise NotImplementedError

    def do_save(self) -> None:
        raise NotImplementedError

    def watch_controls(self, *controls: QWidget) -> None:
        for control in controls:
            if isinstance(control, QComboBox):
                control.currentIndexChanged.connect(self._on_control_changed)
            elif isinstance(control, QSpinBox):
                control.valueChanged.connect(self._on_control_changed)
            elif isinstance(control, QAbstractButton):
                control.toggled.connect(self._on_control_changed)
            elif isinstance(control, QLineEdit):
                control.textChanged.connect(self._on_control_changed)
            else:
                raise TypeError(f"Unsupported settings control: {type(control).__name__}")

    def _on_control_changed(self, *_args) -> None:
        if self._loading:
            return
        self._settings_changed = True
        self.settings_changed.emit()
