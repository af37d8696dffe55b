"""Word list loading."""

from pathlib import Path
from typing import Final

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

from wordswarm.exc import DictionaryLoadFailed
from wordswarm.services.logs import get_logger
from wordswarm.utils import get_resource_path

logger = get_logger(__name__)

#: Words that are always available, and the whole dictionary if the word list
#: cannot be read.
FALLBACK_WORDS: Final[tuple[str, ...]] = (
    "hello",
    "world",
    "test",
    "word",
    "cool",
    "fun",
    "play",
    "game",
)


def get_default_dictionary_path() -> Path:
    """
    Get the path of the bundled word list.

    Returns:
        Path to ``assets/dictionary.txt``

    """
    return get_resource_path("assets/dictionary.txt")


def read_words(path: Path) -> set[str]:
    """
    Read a newline-separated word list.

    Words are stripped and lowercased and blank lines are dropped.

    Args:
        path: The word list

    Raises:
        DictionaryLoadFailed: The file could not be read or decoded

    Returns:
        The set of words

    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadFailed(e, path) from e
    words = {line.strip().lower() for line in text.splitlines()}
    words.discard("")
    return words


def load_dictionary(path: Path | None = None) -> set[str]:
    """
    Load a word list, always including :data:`FALLBACK_WORDS`.

    If the file cannot be read, the error is logged and only the fallback
    words are returned.

    Keyword Args:
        path: The word list; the bundled one if ``None``

    Returns:
        The set of words

    """
    path = path or get_default_dictionary_path()
    try:
        words = read_words(path)
    except DictionaryLoadFailed as e:
        logger.warning("dictionary.fallback", path=str(path), error=str(e.error))
        return set(FALLBACK_WORDS)
    words.update(FALLBACK_WORDS)
    logger.info("dictionary.loaded", path=str(path), size=len(words))
    return words


class _LoadSignals(QObject):
    """Signals of a background load; :class:`QRunnable` cannot have its own."""

    finished = Signal(object)


class _LoadTask(QRunnable):
    """Runs :func:`load_dictionary` on a pool thread."""

    def __init__(self, path: Path | None, signals: _LoadSignals) -> None:
        super().__init__()
        self.path = path
        self.signals = signals

    def run(self) -> None:
        self.signals.finished.emit(load_dictionary(self.path))


class DictionaryLoader(QObject):
    """
    Loads a word list in the background.

    Connect to :attr:`loaded` and call :meth:`load_async`; the word set is
    delivered on the thread that owns the loader.

    Keyword Args:
        pool: Thread pool to load on; the global one if ``None``

    """

    #: Emitted with the loaded ``set[str]``.
    loaded = Signal(object)

    def __init__(
        self, pool: QThreadPool | None = None, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        #: The thread pool loads run on.
        self.pool = pool or QThreadPool.globalInstance()
        #: Signals of the running loads, kept alive until they report.
        self._running: set[_LoadSignals] = set()

    def load(self, path: Path | None = None) -> set[str]:
        """
        Load synchronously and emit :attr:`loaded`.

        Keyword Args:
            path: The word list; the bundled one if ``None``

        Returns:
            The set of words

        """
        words = load_dictionary(path)
        self.loaded.emit(words)
        return words

    def load_async(self, path: Path | None = None) -> None:
        """
        Start loading on the thread pool.

        Keyword Args:
            path: The word list; the bundled one if ``None``

        """
        signals = _LoadSignals()
        signals.finished.connect(self._on_finished)
        self._running.add(signals)
        self.pool.start(_LoadTask(path, signals))

    def _on_finished(self, words: set[str]) -> None:
        self._running.discard(self.sender())  # type: ignore[arg-type]
        self.loaded.emit(words)
