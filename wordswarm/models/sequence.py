"""Sequence model."""

from dataclasses import dataclass, field
from enum import Enum

from wordswarm.models.token import Token


class SequenceStatus(Enum):
    """Classification outcome of a sequence."""

    PENDING = "pending"
    VALID = "valid"
    ANAGRAM = "anagram"
    INVALID = "invalid"


@dataclass(eq=False)
class Sequence:
    """
    A run of tokens typed without a long pause.

    A sequence owns its tokens positionally: :attr:`tokens` is kept in
    ``letter_index`` order.
    """

    #: Monotonically increasing sequence ID.
    id: int
    #: Member tokens in letter order.
    tokens: list[Token] = field(default_factory=list)
    #: Classification outcome.
    status: SequenceStatus = SequenceStatus.PENDING
    #: The dictionary word the sequence was matched to, if any.
    matched_word: str | None = None

    @property
    def word(self) -> str:
        """The letters of the sequence, concatenated in order."""
        return "".join(token.letter for token in self.tokens)

    @property
    def is_pending(self) -> bool:
        return self.status is SequenceStatus.PENDING

    def append(self, token: Token) -> None:
        """
        Add a newly typed token at the end of the sequence.

        Args:
            token: The token to add

        """
        self.tokens.append(token)

    def sort(self) -> None:
        """Re-sort the tokens by their current ``letter_index``."""
        self.tokens.sort(key=lambda token: token.letter_index)

    def discard(self, tokens: set[Token]) -> None:
        """
        Forget tokens that left the live set.

        Args:
            tokens: The removed tokens

        """
        self.tokens = [token for token in self.tokens if token not in tokens]
