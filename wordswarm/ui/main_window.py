"""Main application window."""

from PySide6.QtCore import QSettings
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QApplication, QMainWindow

from wordswarm.composer import Composer
from wordswarm.models.token import Token
from wordswarm.services.dictionary import DictionaryLoader
from wordswarm.settings import ComposerSettings
from wordswarm.ui.canvas import ComposerCanvas
from wordswarm.ui.dialogs.settings import SettingsDialog


class MainMenu:
    """Main application menu."""

    def __init__(self, main_window: "MainWindow") -> None:
        """
        Initialize main menu.

        Args:
            main_window: Main window instance

        """
        #: Main window instance
        self.main_window = main_window
        #: Menu bar
        self.menu = self.main_window.menuBar()

    def add_game_menu(self) -> None:
        """
        Create game menu.

        This means adding a "Game" menu to :attr:`self.menu`, the main menu bar,
        with the following actions:

        - Clear
        - Toggle Instructions
        - Preferences...

        """
        game_menu = self.menu.addMenu("&Game")

        clear_action = QAction("&Clear", game_menu)
        clear_action.setShortcut(QKeySequence("Ctrl+L"))
        clear_action.triggered.connect(self.main_window.clear)
        game_menu.addAction(clear_action)

        toggle_action = QAction("Toggle &Instructions", game_menu)
        toggle_action.setShortcut(QKeySequence("F1"))
        toggle_action.triggered.connect(self.main_window.canvas.instructions.toggle)
        game_menu.addAction(toggle_action)

        game_menu.addSeparator()

        preferences_action = QAction("&Preferences...", game_menu)
        preferences_action.setShortcut(QKeySequence.StandardKey.Preferences)
        preferences_action.triggered.connect(self.main_window.show_settings)
        game_menu.addAction(preferences_action)

    def build(self) -> None:
        """Build the main menu."""
        self.add_game_menu()


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, settings: ComposerSettings | None = None) -> None:
        super().__init__()
        #: Tuning constants
        self.settings = settings or ComposerSettings.from_qsettings(QSettings())
        #: The composer
        self.composer = Composer(settings=self.settings, parent=self)
        #: Background dictionary loader
        self.dictionary_loader = DictionaryLoader(parent=self)
        self.dictionary_loader.loaded.connect(self.on_dictionary_loaded)
        #: The canvas
        self.canvas = ComposerCanvas(self.composer, self)

        self.build()

    def _setup_main_window(self) -> None:
        """
        Set up the main window.
        """
        self.setWindowTitle("Word Swarm")
        app = QApplication.instance()
        if isinstance(app, QApplication) and not app.windowIcon().isNull():
            self.setWindowIcon(app.windowIcon())
        self.setGeometry(100, 100, 1200, 800)
        self.setCentralWidget(self.canvas)
        self.composer.word_recognized.connect(self.on_word_recognized)
        self.show_message("Loading dictionary...")

    def _setup_main_menu(self) -> None:
        """Set up the main menu."""
        menu = MainMenu(self)
        menu.build()

    def build(self) -> None:
        """
        Build the main window.

        - Setup the main window.
        - Setup the main menu.

        """
        self._setup_main_window()
        self._setup_main_menu()

    def start(self) -> None:
        """
        Start loading the dictionary and animating.
        """
        self.dictionary_loader.load_async(self.settings.dictionary_path)
        self.canvas.start()
        self.canvas.setFocus()

    def clear(self) -> None:
        """Clear the canvas."""
        self.composer.reset()
        self.canvas.update()
        self.canvas.setFocus()

    def on_dictionary_loaded(self, words: set[str]) -> None:
        """
        Hand a freshly loaded word list to the composer.

        Args:
            words: The word list

        """
        self.composer.set_dictionary(words)
        self.show_message(f"Dictionary loaded with {len(words)} words", duration=3000)

    def on_word_recognized(self, word: str, tokens: list[Token], kind: str) -> None:
        """
        Announce a recognized word in the status bar.

        Args:
            word: The word
            tokens: Its tokens
            kind: ``"exact"`` or ``"anagram"``

        """
        if kind == "anagram":
            letters = "".join(sorted(token.letter for token in tokens))
            self.show_message(f"Anagram: {word} (from {letters})")
        else:
            self.show_message(f"Word: {word}")

    def show_settings(self) -> None:
        """Show the preferences dialog."""
        dialog = SettingsDialog(self)
        dialog.execute()

    def apply_settings(self, settings: ComposerSettings) -> None:
        """
        Apply changed preferences to the running composer, reloading the
        dictionary if its path changed.

        Args:
            settings: The new settings

        """
        reload_dictionary = settings.dictionary_path != self.settings.dictionary_path
        self.settings = settings
        self.composer.settings = settings
        self.composer.scheduler.debounce_ms = settings.debounce_ms
        if reload_dictionary:
            self.dictionary_loader.load_async(settings.dictionary_path)

    def show_message(self, message: str, duration: int = 2000) -> None:
        """
        Show a message in the status bar.

        Args:
            message: Message to show

        Keyword Args:
            duration: Duration of the message in milliseconds (default: 2000)

        """
        self.statusBar().showMessage(message, duration)
