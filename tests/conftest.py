"""Shared pytest fixtures and test helpers for Word Swarm tests."""

import os

# Run Qt without a display; must be set before any Qt imports
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from wordswarm.composer import Composer
from wordswarm.models.token import Token
from wordswarm.settings import ComposerSettings


class FakeClock:
    """Monotonic clock the tests advance by hand."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class Typist:
    """Types letters into a composer with controlled gaps."""

    def __init__(self, composer: Composer, clock: FakeClock) -> None:
        self.composer = composer
        self.clock = clock

    def type(self, letters: str, gap: float = 0.1) -> list[Token]:
        """Type ``letters`` with ``gap`` seconds between keystrokes."""
        tokens = []
        for letter in letters:
            tokens.append(self.composer.add_letter(letter))
            self.clock.advance(gap)
        return tokens

    def pause(self) -> None:
        """Let the debounce window elapse."""
        self.clock.advance(self.composer.settings.pause_seconds + 0.5)
        self.composer.scheduler.check_now()

    def type_word(self, letters: str) -> list[Token]:
        """Type ``letters`` and then stop typing."""
        tokens = self.type(letters)
        self.pause()
        return tokens


@pytest.fixture
def clock():
    """A hand-driven clock."""
    return FakeClock()


@pytest.fixture
def composer(qapp, clock):
    """A composer on an 800x600 canvas with a seeded random generator."""
    composer = Composer(
        width=800,
        height=600,
        settings=ComposerSettings(seed=1234),
        clock=clock,
    )
    yield composer
    composer.reset()


@pytest.fixture
def typist(composer, clock):
    """Types into :func:`composer`."""
    return Typist(composer, clock)


def make_token(letter="a", x=100.0, y=100.0, sequence_id=1, letter_index=0, **kwargs):
    """Build a token with a fixed size and no velocity."""
    kwargs.setdefault("base_size", 20.0)
    return Token(
        letter=letter,
        x=x,
        y=y,
        sequence_id=sequence_id,
        letter_index=letter_index,
        **kwargs,
    )


@pytest.fixture
def token_factory():
    """The :func:`make_token` helper."""
    return make_token
