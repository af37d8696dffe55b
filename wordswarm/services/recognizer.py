"""Classification of typed sequences."""

import math
import random
from collections import defaultdict
from enum import StrEnum
from typing import Final

from PySide6.QtCore import QObject, Signal

from wordswarm.models.board import Board
from wordswarm.models.collapse import Collapse
from wordswarm.models.sequence import Sequence, SequenceStatus
from wordswarm.models.token import Token
from wordswarm.services.logs import get_logger
from wordswarm.services.matcher import WordMatcher

logger = get_logger(__name__)

#: Letter spacing of a formed word, as a fraction of the average token size.
WORD_SPACING: Final[float] = 0.8
#: Chance that a formed word is laid out nearly horizontally.
HORIZONTAL_CHANCE: Final[float] = 0.9
#: Largest tilt, in radians, of a nearly horizontal word.
MAX_TILT: Final[float] = 0.1
#: Outward kick given to letters when their word forms.
POP_SPEED: Final[float] = 3.0
#: Range of the random kick given to letters moved by a rearrangement.
REARRANGE_KICK: Final[float] = 5.0


class MatchKind(StrEnum):
    """How a sequence was matched."""

    EXACT = "exact"
    ANAGRAM = "anagram"


class SequenceRecognizer(QObject):
    """
    Classifies a sequence once typing has paused and applies the outcome to
    its tokens.

    - An exact dictionary word becomes ``VALID``.
    - Letters that can be rearranged into a word become ``ANAGRAM``; the
      tokens are re-indexed into the word's letter order and any letters the
      word does not use follow it.
    - Anything else, including anything shorter than the minimum word
      length, becomes ``INVALID`` and its tokens are handed to a removal
      collapse.

    Recognized tokens are laid out on a line and linked together.

    Args:
        board: The live state
        matcher: Dictionary lookups

    Keyword Args:
        rng: Random generator for layout and kicks
        min_length: Shortest sequence that can be a word

    """

    #: Emitted with the word, its tokens in letter order and the
    #: :class:`MatchKind` value.
    word_recognized = Signal(str, list, str)
    #: Emitted with the tokens of an invalid sequence.
    sequence_invalid = Signal(list)

    def __init__(
        self,
        board: Board,
        matcher: WordMatcher,
        rng: random.Random | None = None,
        min_length: int = 3,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        #: The live state.
        self.board = board
        #: Dictionary lookups.
        self.matcher = matcher
        #: Random generator for layout and kicks.
        self.rng = rng or random.Random()  # noqa: S311
        #: Shortest sequence that can be a word.
        self.min_length = min_length

    def evaluate(self, sequence_id: int) -> SequenceStatus | None:
        """
        Classify a sequence from its live tokens.

        Does nothing when the sequence is gone (for example after a reset),
        has no live tokens, or was already classified.

        Args:
            sequence_id: The sequence to classify

        Returns:
            The new status, or ``None`` if nothing was done

        """
        sequence = self.board.sequences.get(sequence_id)
        tokens = self.board.tokens_for(sequence_id)
        if sequence is None or not tokens or not sequence.is_pending:
            logger.debug("sequence.check.skipped", sequence_id=sequence_id)
            return None

        word = "".join(token.letter for token in tokens)
        if len(word) < self.min_length:
            self._reject(sequence, tokens, word, reason="too_short")
        elif self.matcher.is_exact_word(word):
            self._accept(sequence, tokens, word, MatchKind.EXACT)
        else:
            anagrams = self.matcher.find_anagrams([token.letter for token in tokens])
            if anagrams:
                anagram = anagrams[0]
                word_tokens, leftovers = self.rearrange(tokens, anagram)
                sequence.sort()
                logger.info(
                    "anagram.found",
                    sequence_id=sequence_id,
                    letters=word,
                    anagram=anagram,
                    candidates=anagrams,
                )
                self._accept(
                    sequence, word_tokens + leftovers, anagram, MatchKind.ANAGRAM
                )
            else:
                self._reject(sequence, tokens, word, reason="no_match")
        return sequence.status

    def rearrange(self, tokens: list[Token], word: str) -> tuple[list[Token], list[Token]]:
        """
        Re-index tokens so that they spell ``word``.

        Tokens with the same letter are interchangeable; for each letter of
        the word the last unused token with that letter is taken.  Tokens the
        word does not use keep their relative order after the word.

        Args:
            tokens: The sequence's tokens in their current order
            word: The word to spell

        Returns:
            The tokens spelling the word, in word order, and the unused tokens

        """
        pools: defaultdict[str, list[Token]] = defaultdict(list)
        for token in tokens:
            pools[token.letter].append(token)

        word_tokens: list[Token] = []
        for index, letter in enumerate(word):
            pool = pools.get(letter)
            if not pool:
                continue
            token = pool.pop()
            token.rearranged = True
            self._reindex(token, index)
            word_tokens.append(token)

        used = set(word_tokens)
        leftovers = [token for token in tokens if token not in used]
        for offset, token in enumerate(leftovers):
            self._reindex(token, len(word) + offset)
        return word_tokens, leftovers

    def _reindex(self, token: Token, index: int) -> None:
        if token.letter_index != index:
            token.vx += (self.rng.random() - 0.5) * REARRANGE_KICK
            token.vy += (self.rng.random() - 0.5) * REARRANGE_KICK
        token.letter_index = index

    def form_word(self, tokens: list[Token]) -> None:
        """
        Give each token of a recognized word its slot on a line through the
        word's centroid, kick the letters outwards and link consecutive
        letters.

        Args:
            tokens: The word's tokens in letter order

        """
        count = len(tokens)
        spacing = sum(token.size for token in tokens) / count * WORD_SPACING
        center_x = sum(token.x for token in tokens) / count
        center_y = sum(token.y for token in tokens) / count
        if self.rng.random() < HORIZONTAL_CHANCE:
            angle = self.rng.uniform(-MAX_TILT, MAX_TILT)
        else:
            angle = self.rng.random() * math.tau

        for index, token in enumerate(tokens):
            offset = index - (count - 1) / 2
            token.join_word(
                center_x + math.cos(angle) * offset * spacing,
                center_y + math.sin(angle) * offset * spacing,
            )
            push = math.atan2(token.y - center_y, token.x - center_x)
            token.vx += math.cos(push) * POP_SPEED
            token.vy += math.sin(push) * POP_SPEED
            if index > 0:
                self.board.connections.connect(tokens[index - 1], token)

    def _accept(
        self, sequence: Sequence, tokens: list[Token], word: str, kind: MatchKind
    ) -> None:
        sequence.status = (
            SequenceStatus.VALID if kind is MatchKind.EXACT else SequenceStatus.ANAGRAM
        )
        sequence.matched_word = word
        self.board.recognized_words.append(word)
        self.form_word(tokens)
        logger.info(
            "word.recognized", sequence_id=sequence.id, word=word, kind=kind.value
        )
        self.word_recognized.emit(word, tokens, kind.value)

    def _reject(
        self, sequence: Sequence, tokens: list[Token], word: str, reason: str
    ) -> None:
        sequence.status = SequenceStatus.INVALID
        self._collapse(tokens)
        logger.info(
            "sequence.invalid", sequence_id=sequence.id, word=word, reason=reason
        )
        self.sequence_invalid.emit(tokens)

    def _collapse(self, tokens: list[Token]) -> None:
        for token in tokens:
            token.mark_invalid()
        self.board.collapses.append(Collapse.around(tokens))
