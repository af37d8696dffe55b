"""Dictionary lookups for typed sequences."""

import string
from collections import Counter, defaultdict
from collections.abc import Iterable


class WordMatcher:
    """
    Decides whether typed letters are a dictionary word, or can be rearranged
    into one.

    The dictionary may be swapped at any time with :meth:`set_dictionary`
    (it is loaded in the background); until then every lookup is a miss.
    Words in ``recognized_words`` are never matched again.

    Keyword Args:
        dictionary: Initial word list
        recognized_words: The session's log of accepted words, shared with
            the caller
        min_length: Shortest matchable word
        max_results: Most anagram candidates returned
        lookup_limit: Letter counts up to this use the sorted-key lookup

    """

    def __init__(
        self,
        dictionary: Iterable[str] | None = None,
        recognized_words: list[str] | None = None,
        min_length: int = 3,
        max_results: int = 5,
        lookup_limit: int = 7,
    ) -> None:
        #: Lowercase words.
        self.dictionary: frozenset[str] = frozenset()
        #: Words accepted this session.
        self.recognized_words = recognized_words if recognized_words is not None else []
        #: Shortest matchable word.
        self.min_length = min_length
        #: Most anagram candidates returned.
        self.max_results = max_results
        #: Letter counts up to this use the sorted-key lookup.
        self.lookup_limit = lookup_limit
        #: Words grouped by their sorted letters.
        self._by_key: dict[str, list[str]] = {}
        if dictionary is not None:
            self.set_dictionary(dictionary)

    @staticmethod
    def sorted_key(letters: Iterable[str]) -> str:
        """
        Get the sorted-letter key shared by all anagrams of ``letters``.

        Args:
            letters: Letters or a word

        Returns:
            The letters sorted and joined

        """
        return "".join(sorted(letters))

    @property
    def is_ready(self) -> bool:
        return bool(self.dictionary)

    def set_dictionary(self, words: Iterable[str]) -> None:
        """
        Replace the dictionary.

        Words are stripped and lowercased; blanks are dropped.

        Args:
            words: The new word list

        """
        cleaned = {word.strip().lower() for word in words}
        cleaned.discard("")
        self.dictionary = frozenset(cleaned)
        by_key: defaultdict[str, list[str]] = defaultdict(list)
        for word in sorted(self.dictionary):
            by_key[self.sorted_key(word)].append(word)
        self._by_key = dict(by_key)

    def is_exact_word(self, word: str) -> bool:
        """
        Whether ``word`` is an unused dictionary word.

        Args:
            word: The typed letters

        Returns:
            True if ``word`` is long enough, in the dictionary and not yet
            recognized

        """
        word = word.lower()
        return (
            len(word) >= self.min_length
            and word in self.dictionary
            and word not in self.recognized_words
        )

    def find_anagrams(self, letters: Iterable[str]) -> list[str]:
        """
        Find unused dictionary words the letters can be rearranged into,
        best first.

        Anything that is not an ASCII letter is ignored.  Up to
        :attr:`lookup_limit` letters, only words using exactly all of the
        letters are found; above it, any word using a sub-multiset of the
        letters is found and longer words rank first.

        Args:
            letters: The typed letters, in order

        Returns:
            At most :attr:`max_results` words

        """
        cleaned = [
            letter.lower()
            for letter in letters
            if len(letter) == 1 and letter in string.ascii_letters
        ]
        if len(cleaned) < self.min_length or not self.is_ready:
            return []
        if len(cleaned) <= self.lookup_limit:
            return self._find_by_lookup(cleaned)
        return self._find_by_subset(cleaned)

    def _find_by_lookup(self, letters: list[str]) -> list[str]:
        """
        Find words whose sorted letters equal the sorted input.

        Args:
            letters: Cleaned lowercase letters

        Returns:
            Matching words in alphabetical order

        """
        candidates = self._by_key.get(self.sorted_key(letters), [])
        results = [word for word in candidates if word not in self.recognized_words]
        return results[: self.max_results]

    def _find_by_subset(self, letters: list[str]) -> list[str]:
        """
        Find words that use no letter more often than the input has it.

        Args:
            letters: Cleaned lowercase letters

        Returns:
            Matching words, longest first, ties in alphabetical order

        """
        available = Counter(letters)
        candidates = []
        for word in self.dictionary:
            if not self.min_length <= len(word) <= len(letters):
                continue
            if word in self.recognized_words:
                continue
            needed = Counter(word)
            if all(available[char] >= count for char, count in needed.items()):
                candidates.append(word)
        candidates.sort(key=lambda word: (-len(word), word))
        return candidates[: self.max_results]
