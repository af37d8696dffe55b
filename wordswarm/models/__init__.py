"""Data models for Word Swarm."""

from wordswarm.models.board import Board
from wordswarm.models.collapse import Collapse
from wordswarm.models.connections import ConnectionGraph
from wordswarm.models.region import Region
from wordswarm.models.sequence import Sequence, SequenceStatus
from wordswarm.models.token import Token, TokenStatus

__all__ = [
    "Board",
    "Collapse",
    "ConnectionGraph",
    "Region",
    "Sequence",
    "SequenceStatus",
    "Token",
    "TokenStatus",
]
