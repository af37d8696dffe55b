"""Unit tests for WordMatcher."""

import pytest

from wordswarm.services.matcher import WordMatcher


@pytest.fixture
def recognized():
    return []


@pytest.fixture
def matcher(recognized):
    return WordMatcher(
        dictionary=["cat", "act", "tac", "at", "tax", "att", "taxes", "relax"],
        recognized_words=recognized,
    )


class TestExactWord:
    """Test cases for WordMatcher.is_exact_word."""

    def test_dictionary_word(self, matcher):
        assert matcher.is_exact_word("cat")

    def test_case_insensitive(self, matcher):
        assert matcher.is_exact_word("CAT")

    def test_unknown_word(self, matcher):
        assert not matcher.is_exact_word("dog")

    def test_too_short(self, matcher):
        assert not matcher.is_exact_word("at")

    def test_recognized_word_excluded(self, matcher, recognized):
        recognized.append("cat")
        assert not matcher.is_exact_word("cat")

    def test_empty_dictionary(self):
        matcher = WordMatcher()
        assert not matcher.is_ready
        assert not matcher.is_exact_word("cat")


class TestSetDictionary:
    """Test cases for WordMatcher.set_dictionary."""

    def test_words_cleaned(self):
        matcher = WordMatcher()
        matcher.set_dictionary([" Cat\n", "", "   ", "DOG"])
        assert matcher.dictionary == {"cat", "dog"}
        assert matcher.is_ready

    def test_replaces_previous_dictionary(self, matcher):
        matcher.set_dictionary(["dog"])
        assert not matcher.is_exact_word("cat")
        assert matcher.find_anagrams(list("tac")) == []
        assert matcher.find_anagrams(list("god")) == ["dog"]


class TestFindAnagrams:
    """Test cases for WordMatcher.find_anagrams."""

    def test_full_length_anagrams_alphabetical(self, matcher):
        assert matcher.find_anagrams(list("cat")) == ["act", "cat", "tac"]

    def test_recognized_words_excluded(self, matcher, recognized):
        recognized.extend(["act", "tac"])
        assert matcher.find_anagrams(list("tca")) == ["cat"]

    def test_respects_letter_multiplicity(self, matcher):
        # "att" needs two t's
        assert matcher.find_anagrams(list("aat")) == []
        assert matcher.find_anagrams(list("tat")) == ["att"]

    def test_small_sets_do_not_match_sub_words(self, matcher):
        # "cat" would use only some of these letters
        assert matcher.find_anagrams(list("cats")) == []

    def test_non_letters_filtered(self, matcher):
        assert matcher.find_anagrams(["c", "_", "a", "1", "t"]) == ["act", "cat", "tac"]

    def test_uppercase_letters(self, matcher):
        assert matcher.find_anagrams(list("TAC")) == ["act", "cat", "tac"]

    def test_fewer_than_three_letters(self, matcher):
        assert matcher.find_anagrams(list("at")) == []
        assert matcher.find_anagrams(["a", "t", "_"]) == []

    def test_empty_dictionary(self):
        assert WordMatcher().find_anagrams(list("cat")) == []

    def test_subset_scan_for_long_inputs(self, matcher):
        # Eight letters: any word using a sub-multiset, longest first
        result = matcher.find_anagrams(list("taxesrlc"))
        assert result == ["relax", "taxes", "act", "cat", "tac"]

    def test_subset_scan_respects_multiplicity(self, matcher):
        result = matcher.find_anagrams(list("aatxxxxx"))
        assert "tax" in result
        assert "att" not in result

    def test_subset_scan_excludes_recognized(self, matcher, recognized):
        recognized.append("taxes")
        assert "taxes" not in matcher.find_anagrams(list("taxesrlc"))

    def test_result_limit(self):
        words = ["abc", "acb", "bac", "bca", "cab", "cba"]
        matcher = WordMatcher(dictionary=words, max_results=5)
        assert matcher.find_anagrams(list("abc")) == words[:5]

    def test_lookup_limit_is_configurable(self):
        matcher = WordMatcher(dictionary=["cat"], lookup_limit=3)
        assert matcher.find_anagrams(list("cats")) == ["cat"]

    def test_sorted_key(self):
        assert WordMatcher.sorted_key("tac") == "act"
