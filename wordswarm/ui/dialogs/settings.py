from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Final, cast

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QLabel,
    QLineEdit,
    QSpinBox,
    QVBoxLayout,
)

from wordswarm.settings import DEBOUNCE_MS_KEY, DICTIONARY_PATH_KEY, PAUSE_MS_KEY

if TYPE_CHECKING:
    from wordswarm.ui.main_window import MainWindow


class SettingsDialog:
    """
    Preferences dialog for timing and the dictionary.
    """

    #: Dialog width
    DIALOG_WIDTH: Final[int] = 400
    #: Dialog height
    DIALOG_HEIGHT: Final[int] = 200

    def __init__(self, main_window: "MainWindow") -> None:
        """
        Initialize settings dialog.
        """
        self.main_window = main_window
        self.settings = QSettings()

    def get_int_value(self, key: str, default: int) -> int:
        """
        Get the value of a setting key that has an integer value.

        Args:
            key: Key for the settings value
            default: Default value for the setting

        Returns:
            Value for the setting

        """
        value = cast("int", self.settings.value(key, default, type=int))
        return int(value) if value is not None else default

    def get_str_value(self, key: str, default: str) -> str:
        """
        Get the value of a setting key that has a string value.

        Args:
            key: Key for the settings value
            default: Default value for the setting

        Returns:
            Value for the setting

        """
        value = cast("str", self.settings.value(key, default, type=str))
        return value if value is not None else default

    def build(self) -> None:
        """
        Build the settings dialog.
        """
        current = self.main_window.settings
        self.create_layout()
        pause_ms = self.get_int_value(PAUSE_MS_KEY, current.pause_ms)
        self.pause_spin = self.add_spin_box(
            "Pause that starts a new word (ms):", 200, 10000, pause_ms
        )
        debounce_ms = self.get_int_value(DEBOUNCE_MS_KEY, current.debounce_ms)
        self.debounce_spin = self.add_spin_box(
            "Delay before a word is checked (ms):", 200, 10000, debounce_ms
        )
        path = self.get_str_value(
            DICTIONARY_PATH_KEY, str(current.dictionary_path or "")
        )
        self.dictionary_edit = self.add_line_edit(
            "Dictionary file (blank for the bundled one):", path
        )
        self.button_box = self.add_button_box()

    def create_layout(self) -> None:
        """
        Create a layout for the settings dialog.
        """
        self.dialog = QDialog(self.main_window)
        self.dialog.setWindowTitle("Preferences")
        self.dialog.setMinimumSize(self.DIALOG_WIDTH, self.DIALOG_HEIGHT)
        self.layout = QVBoxLayout(self.dialog)

    def add_spin_box(
        self, label: str, minimum: int, maximum: int, value: int
    ) -> QSpinBox:
        """
        Create a spin box for a settings key that has an integer value.

        Args:
            label: Label for the spin box
            minimum: Minimum value for the spin box
            maximum: Maximum value for the spin box
            value: Value for the spin box

        Returns:
            Spin box widget

        """
        spin_box = QSpinBox(self.dialog)
        spin_box.setMinimum(minimum)
        spin_box.setMaximum(maximum)
        spin_box.setValue(value)
        self.layout.addWidget(QLabel(label))
        self.layout.addWidget(spin_box)
        return spin_box

    def add_line_edit(self, label: str, value: str) -> QLineEdit:
        """
        Create a line edit for a settings key that has a string value.

        Args:
            label: Label for the line edit
            value: Value for the line edit

        Returns:
            Line edit widget

        """
        line_edit = QLineEdit(self.dialog)
        line_edit.setText(value)
        self.layout.addWidget(QLabel(label))
        self.layout.addWidget(line_edit)
        return line_edit

    def add_button_box(self) -> QDialogButtonBox:
        """
        Add the button box to the dialog.  The button box will be used to accept
        or cancel the dialog.

        Returns:
            Button box widget

        """
        self.button_box = QDialogButtonBox(self.dialog)
        self.button_box.addButton(QDialogButtonBox.StandardButton.Ok)
        self.button_box.addButton(QDialogButtonBox.StandardButton.Cancel)
        self.button_box.accepted.connect(self.save_settings)
        self.button_box.rejected.connect(self.dialog.reject)
        self.layout.addWidget(self.button_box)
        return self.button_box

    def save_settings(self) -> None:
        """
        Save settings to QSettings and apply them to the running composer.
        """
        path = self.dictionary_edit.text().strip()
        self.settings.setValue(PAUSE_MS_KEY, self.pause_spin.value())
        self.settings.setValue(DEBOUNCE_MS_KEY, self.debounce_spin.value())
        self.settings.setValue(DICTIONARY_PATH_KEY, path)
        self.main_window.apply_settings(
            replace(
                self.main_window.settings,
                pause_ms=self.pause_spin.value(),
                debounce_ms=self.debounce_spin.value(),
                dictionary_path=Path(path) if path else None,
            )
        )
        self.dialog.accept()

    def execute(self) -> None:
        """
        Build and show the dialog.
        """
        self.build()
        self.dialog.exec()
