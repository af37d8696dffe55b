"""Token model."""

import itertools
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Final

#: Source of stable token identities.
_UIDS: Final = itertools.count(1)


class TokenStatus(Enum):
    """Where a token is in its life."""

    #: Drifting, not yet classified.
    FREE = "free"
    #: Part of a recognized word, moving to its slot in the word.
    CONVERGING = "converging"
    #: Part of a recognized word, settled in its slot.
    WORD = "word"
    #: Part of an invalid sequence, being pulled into a collapse.
    REMOVING = "removing"


@dataclass(eq=False)
class Token:
    """
    One typed letter on the canvas.

    A token is identified within the live set by :attr:`key`, the pair
    ``(sequence_id, letter_index)``.  Because ``letter_index`` changes when a
    sequence is rearranged into an anagram, :attr:`uid` is kept as a stable
    identity for the connection graph.
    """

    #: Smallest base size of a new token.
    MIN_SIZE: ClassVar[float] = 24.0
    #: Random extra base size of a new token.
    SIZE_VARIATION: ClassVar[float] = 8.0
    #: Range of the random initial velocity on each axis.
    INITIAL_SPEED: ClassVar[float] = 1.0

    #: The lowercase letter.
    letter: str
    #: Horizontal position.
    x: float
    #: Vertical position.
    y: float
    #: The sequence this token was typed in.
    sequence_id: int
    #: Position of the token within its sequence.
    letter_index: int = 0
    #: Horizontal velocity, units per frame.
    vx: float = 0.0
    #: Vertical velocity, units per frame.
    vy: float = 0.0
    #: Unmodulated size.
    base_size: float = MIN_SIZE
    #: Current size; defaults to :attr:`base_size`.
    size: float = -1.0
    #: Lifecycle status.
    status: TokenStatus = TokenStatus.FREE
    #: Whether this token was matched to a letter of an anagram.
    rearranged: bool = False
    #: Slot the token converges to when part of a word.
    target: tuple[float, float] | None = None
    #: Whether the removal collapse has consumed this token.
    to_be_removed: bool = False
    #: Phase of the size pulse of word tokens.
    pulse_phase: float = 0.0
    #: Seconds since creation.
    lifespan: float = 0.0
    #: Stable identity.
    uid: int = field(default_factory=lambda: next(_UIDS))

    def __post_init__(self) -> None:
        if self.size < 0:
            self.size = self.base_size

    @classmethod
    def create(
        cls,
        letter: str,
        x: float,
        y: float,
        sequence_id: int,
        letter_index: int,
        rng: random.Random,
    ) -> "Token":
        """
        Create a freshly typed token with a random size and a small random
        velocity.

        Args:
            letter: The letter
            x: Horizontal position
            y: Vertical position
            sequence_id: The sequence the letter was typed in
            letter_index: Position within the sequence
            rng: Random generator to draw size and velocity from

        Returns:
            A new :class:`Token`

        """
        return cls(
            letter=letter,
            x=x,
            y=y,
            sequence_id=sequence_id,
            letter_index=letter_index,
            vx=(rng.random() - 0.5) * cls.INITIAL_SPEED,
            vy=(rng.random() - 0.5) * cls.INITIAL_SPEED,
            base_size=cls.MIN_SIZE + rng.random() * cls.SIZE_VARIATION,
        )

    @property
    def key(self) -> tuple[int, int]:
        """The ``(sequence_id, letter_index)`` identity."""
        return (self.sequence_id, self.letter_index)

    @property
    def is_part_of_word(self) -> bool:
        return self.status in (TokenStatus.CONVERGING, TokenStatus.WORD)

    @property
    def invalid(self) -> bool:
        return self.status is TokenStatus.REMOVING

    @property
    def has_target(self) -> bool:
        return self.target is not None

    def join_word(self, target_x: float, target_y: float) -> None:
        """
        Make this token part of a word and send it to its slot.

        Args:
            target_x: Horizontal position of the slot
            target_y: Vertical position of the slot

        """
        self.target = (target_x, target_y)
        self.status = TokenStatus.CONVERGING

    def settle(self) -> None:
        """Mark a converging token as having reached its slot."""
        if self.status is TokenStatus.CONVERGING:
            self.status = TokenStatus.WORD

    def mark_invalid(self) -> None:
        """Hand this token over to the removal collapse."""
        self.target = None
        self.status = TokenStatus.REMOVING
