"""Unit tests for MainWindow."""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from wordswarm.settings import ComposerSettings
from wordswarm.ui.main_window import MainWindow


@pytest.fixture
def main_window(qtbot, monkeypatch):
    window = MainWindow(settings=ComposerSettings(seed=1))
    qtbot.addWidget(window)
    monkeypatch.setattr(window.dictionary_loader, "load_async", MagicMock())
    yield window
    window.canvas.stop()


class TestMainWindow:
    """Test cases for MainWindow."""

    def test_main_window_initializes(self, main_window):
        assert main_window.windowTitle() == "Word Swarm"
        assert main_window.centralWidget() is main_window.canvas
        assert main_window.canvas.composer is main_window.composer

    def test_main_window_has_game_menu(self, main_window):
        titles = [action.text() for action in main_window.menuBar().actions()]
        assert titles == ["&Game"]
        menu = main_window.menuBar().actions()[0].menu()
        labels = [action.text() for action in menu.actions() if not action.isSeparator()]
        assert labels == ["&Clear", "Toggle &Instructions", "&Preferences..."]

    def test_start(self, main_window):
        main_window.start()
        main_window.dictionary_loader.load_async.assert_called_once_with(None)
        assert main_window.canvas.frame_timer.isActive()

    def test_dictionary_loaded(self, main_window):
        main_window.on_dictionary_loaded({"cat", "act"})
        assert main_window.composer.dictionary == frozenset({"cat", "act"})
        assert "2 words" in main_window.statusBar().currentMessage()

    def test_word_announcements(self, main_window, token_factory):
        tokens = [token_factory(letter=letter) for letter in "act"]
        main_window.on_word_recognized("act", tokens, "anagram")
        assert main_window.statusBar().currentMessage() == "Anagram: act (from act)"
        main_window.on_word_recognized("cat", tokens, "exact")
        assert main_window.statusBar().currentMessage() == "Word: cat"

    def test_recognized_word_is_announced(self, main_window):
        main_window.on_dictionary_loaded({"cat"})
        for letter in "cat":
            main_window.composer.add_letter(letter)
        main_window.composer.scheduler.check_now()
        assert main_window.statusBar().currentMessage() == "Word: cat"

    def test_clear(self, main_window):
        main_window.composer.add_letter("a")
        main_window.clear()
        assert main_window.composer.tokens == []

    def test_apply_settings(self, main_window):
        settings = replace(main_window.settings, pause_ms=700, debounce_ms=300)
        main_window.apply_settings(settings)
        assert main_window.composer.settings.pause_ms == 700
        assert main_window.composer.scheduler.debounce_ms == 300
        main_window.dictionary_loader.load_async.assert_not_called()

    def test_apply_settings_reloads_dictionary(self, main_window, tmp_path):
        path = tmp_path / "words.txt"
        main_window.apply_settings(replace(main_window.settings, dictionary_path=path))
        main_window.dictionary_loader.load_async.assert_called_once_with(path)
