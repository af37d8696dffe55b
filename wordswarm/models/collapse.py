"""Removal collapse of an invalid sequence."""

from dataclasses import dataclass
from typing import ClassVar

from wordswarm.models.token import Token


@dataclass(eq=False)
class Collapse:
    """
    A shrinking sink that swallows the tokens of an invalid sequence.

    For :attr:`GROW_FRAMES` frames the sink grows and pulls its tokens gently,
    then it shrinks over the remaining frames while pulling hard.  When
    :attr:`finished` is true every token still tracked must be deleted from the
    live set.
    """

    #: Frames spent growing.
    GROW_FRAMES: ClassVar[int] = 30
    #: Total frames of the collapse.
    MAX_FRAMES: ClassVar[int] = 80
    #: Radius at the first frame.
    START_RADIUS: ClassVar[float] = 5.0

    #: Horizontal centre.
    x: float
    #: Vertical centre.
    y: float
    #: Uids of the tokens being swallowed.
    token_uids: frozenset[int]
    #: Largest radius, reached at the end of the growing phase.
    max_radius: float
    #: Frames elapsed.
    frame: int = 0
    #: Current radius.
    radius: float = START_RADIUS
    #: Current opacity, 0 to 1.
    alpha: float = 0.0

    @classmethod
    def around(cls, tokens: list[Token]) -> "Collapse":
        """
        Create a collapse at the centroid of ``tokens``.

        Args:
            tokens: The tokens to swallow; must not be empty

        Returns:
            A new :class:`Collapse`

        """
        x = sum(token.x for token in tokens) / len(tokens)
        y = sum(token.y for token in tokens) / len(tokens)
        return cls(
            x=x,
            y=y,
            token_uids=frozenset(token.uid for token in tokens),
            max_radius=max(40.0, len(tokens) * 3.0),
        )

    @property
    def growing(self) -> bool:
        return self.frame <= self.GROW_FRAMES

    @property
    def progress(self) -> float:
        """Progress through the shrinking phase, 0 to 1."""
        shrink_frames = self.MAX_FRAMES - self.GROW_FRAMES
        return min(1.0, max(0.0, (self.frame - self.GROW_FRAMES) / shrink_frames))

    @property
    def finished(self) -> bool:
        return self.frame >= self.MAX_FRAMES

    def advance(self) -> None:
        """Step one frame and update radius and opacity."""
        self.frame += 1
        if self.growing:
            self.radius = self.START_RADIUS + (self.max_radius - self.START_RADIUS) * (
                self.frame / self.GROW_FRAMES
            )
            self.alpha = min(1.0, self.frame / 15)
        else:
            self.radius = self.max_radius * (1 - self.progress)
