"""Unit tests for SettingsDialog."""

import pytest
from PySide6.QtCore import QSettings

from wordswarm.settings import DEBOUNCE_MS_KEY, PAUSE_MS_KEY, ComposerSettings
from wordswarm.ui.dialogs.settings import SettingsDialog
from wordswarm.ui.main_window import MainWindow


@pytest.fixture
def isolated_settings(tmp_path):
    """Point the default QSettings at a temporary INI file."""
    default_format = QSettings.defaultFormat()
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)
    QSettings.setPath(
        QSettings.Format.IniFormat, QSettings.Scope.UserScope, str(tmp_path)
    )
    yield
    QSettings.setDefaultFormat(default_format)


@pytest.fixture
def main_window(qtbot, isolated_settings):
    window = MainWindow(settings=ComposerSettings(seed=1))
    qtbot.addWidget(window)
    return window


class TestSettingsDialog:
    """Test cases for SettingsDialog."""

    def test_settings_dialog_initializes(self, main_window):
        """Test SettingsDialog initializes correctly."""
        dialog = SettingsDialog(main_window)

        assert dialog.main_window == main_window

    def test_settings_dialog_builds(self, main_window):
        """Test SettingsDialog builds correctly."""
        dialog = SettingsDialog(main_window)
        dialog.build()

        assert dialog.dialog is not None
        assert dialog.dialog.windowTitle() == "Preferences"
        assert dialog.pause_spin.value() == 1500
        assert dialog.debounce_spin.value() == 1500
        assert dialog.dictionary_edit.text() == ""

    def test_save_settings(self, main_window):
        """Test saving stores the values and applies them."""
        dialog = SettingsDialog(main_window)
        dialog.build()
        dialog.pause_spin.setValue(800)
        dialog.debounce_spin.setValue(600)
        dialog.save_settings()

        assert main_window.settings.pause_ms == 800
        assert main_window.composer.scheduler.debounce_ms == 600
        assert main_window.settings.dictionary_path is None
        stored = QSettings()
        assert int(stored.value(PAUSE_MS_KEY)) == 800
        assert int(stored.value(DEBOUNCE_MS_KEY)) == 600
