"""Tuning constants for the composer, with ``QSettings`` overrides."""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Final, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

#: Environment variable that overrides the dictionary path.
DICTIONARY_ENV_VAR: Final[str] = "WORDSWARM_DICTIONARY"
#: QSettings key for the pause that starts a new sequence.
PAUSE_MS_KEY: Final[str] = "composer/pause_ms"
#: QSettings key for the word-check debounce delay.
DEBOUNCE_MS_KEY: Final[str] = "composer/debounce_ms"
#: QSettings key for the random seed.
SEED_KEY: Final[str] = "composer/seed"
#: QSettings key for the dictionary file.
DICTIONARY_PATH_KEY: Final[str] = "dictionary/path"


@dataclass(frozen=True)
class ComposerSettings:
    """
    Timing, matching and placement constants used by the composer.

    All distances are in canvas units (pixels), all times in milliseconds.
    """

    #: A gap between keystrokes longer than this starts a new sequence.
    pause_ms: int = 1500
    #: Quiet period after the last keystroke before the sequence is checked.
    debounce_ms: int = 1500
    #: Shortest sequence that can be a word.
    min_word_length: int = 3
    #: Maximum number of anagram candidates returned.
    max_anagrams: int = 5
    #: Letter counts up to this use the sorted-key lookup, above it the
    #: multiset subset scan.
    lookup_letter_limit: int = 7
    #: Placement attempts before falling back to the upper half of the canvas.
    placement_attempts: int = 10
    #: Maximum offset of a letter from the previous letter of its sequence.
    placement_jitter: float = 25.0
    #: Margin kept between new letters and the exclusion region.
    exclusion_buffer: float = 15.0
    #: Seed for the composer's random generator, ``None`` for entropy.
    seed: int | None = None
    #: Word list to load, ``None`` for the bundled one.
    dictionary_path: Path | None = None

    @property
    def pause_seconds(self) -> float:
        """The sequence pause threshold in seconds."""
        return self.pause_ms / 1000.0

    @classmethod
    def from_qsettings(cls, settings: "QSettings") -> "ComposerSettings":
        """
        Build settings from stored preferences.

        Keys that are not stored keep their defaults.  The
        ``WORDSWARM_DICTIONARY`` environment variable wins over the stored
        dictionary path.

        Args:
            settings: The settings store to read

        Returns:
            A new :class:`ComposerSettings`

        """
        defaults = cls()
        pause_ms = cast("int", settings.value(PAUSE_MS_KEY, defaults.pause_ms, type=int))
        debounce_ms = cast(
            "int", settings.value(DEBOUNCE_MS_KEY, defaults.debounce_ms, type=int)
        )
        seed_value = settings.value(SEED_KEY, None)
        seed = int(seed_value) if seed_value not in (None, "") else None
        path_value = os.environ.get(DICTIONARY_ENV_VAR) or settings.value(
            DICTIONARY_PATH_KEY, "", type=str
        )
        dictionary_path = Path(cast("str", path_value)) if path_value else None
        return replace(
            defaults,
            pause_ms=int(pause_ms),
            debounce_ms=int(debounce_ms),
            seed=seed,
            dictionary_path=dictionary_path,
        )
