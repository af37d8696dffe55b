"""Services package initialization."""

from wordswarm.services.debounce import WordCheckScheduler
from wordswarm.services.dictionary import DictionaryLoader, load_dictionary
from wordswarm.services.matcher import WordMatcher
from wordswarm.services.physics import PhysicsEngine
from wordswarm.services.recognizer import MatchKind, SequenceRecognizer

__all__ = [
    "DictionaryLoader",
    "MatchKind",
    "PhysicsEngine",
    "SequenceRecognizer",
    "WordCheckScheduler",
    "WordMatcher",
    "load_dictionary",
]
