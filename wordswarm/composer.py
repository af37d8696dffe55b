"""The composer: typed letters in, drifting tokens and recognized words out."""

import random
import time
from collections.abc import Callable, Iterable

from PySide6.QtCore import QObject, Signal

from wordswarm.exc import InvalidLetter
from wordswarm.models.board import Board
from wordswarm.models.region import Region
from wordswarm.models.sequence import Sequence, SequenceStatus
from wordswarm.models.token import Token
from wordswarm.services.debounce import WordCheckScheduler
from wordswarm.services.logs import get_logger
from wordswarm.services.matcher import WordMatcher
from wordswarm.services.physics import PhysicsEngine
from wordswarm.services.recognizer import SequenceRecognizer
from wordswarm.settings import ComposerSettings

logger = get_logger(__name__)


class Composer(QObject):
    """
    Owns the live tokens and turns keystrokes into sequences, sequences into
    words and frames into motion.

    The host calls :meth:`add_letter` for each keystroke, :meth:`tick` once
    per animation frame and :meth:`reset` to start over.  Everything else is
    reported through the signals.

    Keyword Args:
        width: Canvas width
        height: Canvas height
        settings: Tuning constants
        clock: Monotonic clock in seconds, used to detect typing pauses
        region_provider: Called every frame for the current exclusion region,
            or ``None`` when there is none

    """

    #: Emitted with the ID of a newly started sequence.
    sequence_started = Signal(int)
    #: Emitted with the word, its tokens and ``"exact"`` or ``"anagram"``.
    word_recognized = Signal(str, list, str)
    #: Emitted with the tokens of a sequence that is not a word.
    sequence_invalid = Signal(list)
    #: Emitted with the ``(sequence_id, letter_index)`` keys of deleted tokens.
    tokens_removed = Signal(list)

    def __init__(  # noqa: PLR0913
        self,
        width: float = 800.0,
        height: float = 600.0,
        settings: ComposerSettings | None = None,
        clock: Callable[[], float] | None = None,
        region_provider: Callable[[], Region | None] | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        #: Tuning constants.
        self.settings = settings or ComposerSettings()
        #: Canvas width.
        self.width = float(width)
        #: Canvas height.
        self.height = float(height)
        #: Monotonic clock in seconds.
        self.clock = clock or time.monotonic
        #: Source of the exclusion region.
        self.region_provider = region_provider
        #: The exclusion region as of the last refresh.
        self.exclusion_region: Region | None = None
        #: Random generator for placement, sizes and layout.
        self.rng = random.Random(self.settings.seed)  # noqa: S311
        #: The live state.
        self.board = Board()
        #: Dictionary lookups.
        self.matcher = WordMatcher(
            recognized_words=self.board.recognized_words,
            min_length=self.settings.min_word_length,
            max_results=self.settings.max_anagrams,
            lookup_limit=self.settings.lookup_letter_limit,
        )
        #: Frame physics.
        self.physics = PhysicsEngine(self.board.connections)
        #: Sequence classification.
        self.recognizer = SequenceRecognizer(
            self.board,
            self.matcher,
            rng=self.rng,
            min_length=self.settings.min_word_length,
            parent=self,
        )
        self.recognizer.word_recognized.connect(self.word_recognized)
        self.recognizer.sequence_invalid.connect(self.sequence_invalid)
        #: The debounce timer for word checks.
        self.scheduler = WordCheckScheduler(
            self.evaluate, debounce_ms=self.settings.debounce_ms, parent=self
        )
        #: The sequence receiving new letters, if any.
        self.current_sequence: Sequence | None = None
        #: Index the next letter of the current sequence gets.
        self.current_letter_index = 0
        #: Letters typed into the current sequence.
        self.current_word = ""
        #: ID of the most recently started sequence.
        self._sequence_counter = 0
        #: Clock reading of the last accepted letter.
        self._last_typed: float | None = None

    @property
    def tokens(self) -> list[Token]:
        """The live tokens."""
        return self.board.tokens

    @property
    def recognized_words(self) -> list[str]:
        """Words accepted this session, in order."""
        return self.board.recognized_words

    @property
    def dictionary(self) -> frozenset[str]:
        return self.matcher.dictionary

    def set_dictionary(self, words: Iterable[str]) -> None:
        """
        Replace the dictionary, typically once the background load finishes.

        Args:
            words: The word list

        """
        self.matcher.set_dictionary(words)
        logger.info("composer.dictionary.set", size=len(self.matcher.dictionary))

    def resize(self, width: float, height: float) -> None:
        """
        Set the canvas size.

        Args:
            width: Canvas width
            height: Canvas height

        """
        self.width = float(width)
        self.height = float(height)

    def refresh_exclusion_region(self) -> Region | None:
        """
        Ask the region provider for the current exclusion region.

        Returns:
            The region, or ``None`` if there is none

        """
        self.exclusion_region = self.region_provider() if self.region_provider else None
        return self.exclusion_region

    def add_letter(self, letter: str) -> Token:
        """
        Accept a keystroke.

        A new sequence is started when there is no current sequence, when the
        current one has already been classified, or when the pause since the
        last letter is longer than the pause threshold.  In the last case the
        previous sequence is checked right away if its check is still pending.
        The word check is then (re)scheduled for the current sequence.

        Args:
            letter: A single character

        Raises:
            InvalidLetter: ``letter`` is not a single character

        Returns:
            The new token

        """
        if len(letter) != 1:
            raise InvalidLetter(letter)
        letter = letter.lower()
        now = self.clock()
        paused = (
            self._last_typed is not None
            and now - self._last_typed > self.settings.pause_seconds
        )
        current = self.current_sequence
        if (
            current is None
            or not current.is_pending
            or (paused and current.tokens)
        ):
            if current is not None and self.scheduler.pending_sequence_id == current.id:
                self.scheduler.check_now()
            # A recognized word already started a fresh sequence
            if self.current_sequence is None or self.current_sequence is current:
                current = self._begin_sequence()
            else:
                current = self.current_sequence
        self._last_typed = now

        self.refresh_exclusion_region()
        x, y = self._place()
        token = Token.create(
            letter, x, y, current.id, self.current_letter_index, self.rng
        )
        self.board.add_token(token)
        self.current_word += letter
        self.current_letter_index += 1
        self.scheduler.trigger(current.id)
        return token

    def _begin_sequence(self) -> Sequence:
        self._sequence_counter += 1
        self.current_sequence = self.board.new_sequence(self._sequence_counter)
        self.current_letter_index = 0
        self.current_word = ""
        logger.debug("sequence.started", sequence_id=self._sequence_counter)
        self.sequence_started.emit(self._sequence_counter)
        return self.current_sequence

    def _place(self) -> tuple[float, float]:
        """
        Pick a spot for the next letter.

        The first letter of a sequence goes anywhere on the canvas; later
        letters go near the previous letter.  Spots inside the exclusion
        region are rejected; after too many rejections the letter goes
        somewhere in the upper half of the canvas.

        Returns:
            The ``(x, y)`` position

        """
        previous = self._previous_token()
        jitter = self.settings.placement_jitter
        region = self.exclusion_region
        for _ in range(self.settings.placement_attempts):
            if previous is None:
                x = self.rng.random() * self.width
                y = self.rng.random() * self.height
            else:
                x = previous.x + (self.rng.random() - 0.5) * 2 * jitter
                y = previous.y + (self.rng.random() - 0.5) * 2 * jitter
            if region is None or not region.contains(
                x, y, self.settings.exclusion_buffer
            ):
                return x, y
        return self.rng.random() * self.width, self.rng.random() * (self.height / 2)

    def _previous_token(self) -> Token | None:
        if self.current_sequence is None or self.current_letter_index == 0:
            return None
        wanted = (self.current_sequence.id, self.current_letter_index - 1)
        for token in self.board.tokens:
            if token.key == wanted:
                return token
        return None

    def evaluate(self, sequence_id: int) -> SequenceStatus | None:
        """
        Classify a sequence; called by the debounce timer.

        When the current sequence is recognized as a word, a fresh sequence is
        started for the letters that follow.

        Args:
            sequence_id: The sequence to classify

        Returns:
            The new status, or ``None`` if the sequence is gone or was already
            classified

        """
        status = self.recognizer.evaluate(sequence_id)
        if (
            status in (SequenceStatus.VALID, SequenceStatus.ANAGRAM)
            and self.current_sequence is not None
            and self.current_sequence.id == sequence_id
        ):
            self._begin_sequence()
        return status

    def tick(self, dt: float) -> None:
        """
        Advance one animation frame.

        Refreshes the exclusion region, moves every token, advances the
        removal collapses and deletes the tokens they have consumed.

        Args:
            dt: Seconds since the previous frame

        """
        region = self.refresh_exclusion_region()
        self.physics.update(self.board.tokens, (self.width, self.height), region, dt)

        doomed: list[Token] = []
        for collapse in list(self.board.collapses):
            swallowed = self.board.tokens_by_uid(collapse.token_uids)
            self.physics.advance_collapse(collapse, swallowed)
            if collapse.finished:
                self.board.collapses.remove(collapse)
                doomed.extend(swallowed)
        doomed.extend(
            token
            for token in self.board.tokens
            if token.to_be_removed and token not in doomed
        )
        if doomed:
            removed = self.board.remove(doomed)
            logger.debug("tokens.removed", count=len(removed))
            self.tokens_removed.emit(removed)

    def push_away(self, x: float, y: float) -> None:
        """
        Shove tokens near a point, as when the pointer is dragged over them.

        Args:
            x: Horizontal position of the pointer
            y: Vertical position of the pointer

        """
        self.physics.push_away(self.board.tokens, x, y)

    def recent_words(self, limit: int = 10) -> list[str]:
        """
        Get the most recently recognized words, oldest first.

        Keyword Args:
            limit: How many words to return

        Returns:
            List of words

        """
        if limit <= 0:
            return []
        return self.board.recognized_words[-limit:]

    def reset(self) -> None:
        """
        Clear every token, sequence and recognized word and cancel the pending
        word check.
        """
        self.scheduler.cancel()
        self.board.clear()
        self.current_sequence = None
        self.current_letter_index = 0
        self.current_word = ""
        self._sequence_counter = 0
        self._last_typed = None
        logger.info("composer.reset")
