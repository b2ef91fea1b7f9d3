"""Tests for sentence_frequency.tokenizer module."""

from __future__ import annotations

from python_pkg.sentence_frequency.tokenizer import (
    extract_words,
    is_word_char,
    normalize_word,
    split_words,
)


class TestIsWordChar:
    """Tests for is_word_char function."""

    def test_letters_and_digits(self) -> None:
        """Test that letters and digits are word characters."""
        assert is_word_char("a")
        assert is_word_char("Z")
        assert is_word_char("7")
        assert is_word_char("ż")

    def test_apostrophe(self) -> None:
        """Test that the apostrophe is a word character."""
        assert is_word_char("'")

    def test_separators(self) -> None:
        """Test that whitespace and punctuation are not word characters."""
        for ch in " \t\n.,!?-;:\"()’":
            assert not is_word_char(ch)


class TestSplitWords:
    """Tests for split_words function."""

    def test_keeps_order_and_case(self) -> None:
        """Test that words keep their casing and order."""
        assert split_words("Hello, World hello!") == ["Hello", "World", "hello"]

    def test_hyphen_splits(self) -> None:
        """Test that hyphens separate words."""
        assert split_words("quick-jived") == ["quick", "jived"]

    def test_trailing_word_flushed(self) -> None:
        """Test that a word at the end of the string is emitted."""
        assert split_words("no terminator") == ["no", "terminator"]


class TestNormalizeWord:
    """Tests for normalize_word function."""

    def test_lowercases(self) -> None:
        """Test plain lowercasing."""
        assert normalize_word("HeLLo") == "hello"

    def test_keeps_length_for_dotted_capital_i(self) -> None:
        """Test that a dotted capital I lowercases to a single i."""
        assert normalize_word("İstanbul") == "istanbul"
        assert len(normalize_word("İİ")) == 2


class TestExtractWords:
    """Tests for extract_words function."""

    def test_case_insensitive(self) -> None:
        """Test that words differing only in case collapse."""
        assert extract_words("Fox fox FOX.") == {"fox"}

    def test_apostrophe_kept(self) -> None:
        """Test that contractions stay one word."""
        assert extract_words("Don't stop, it's fine.") == {"don't", "stop", "it's", "fine"}

    def test_digits_are_words(self) -> None:
        """Test that numbers count as words."""
        assert extract_words("There are 123 apples") == {"there", "are", "123", "apples"}

    def test_empty_sentence(self) -> None:
        """Test that an empty sentence yields an empty set."""
        assert extract_words("") == set()

    def test_only_punctuation(self) -> None:
        """Test that punctuation-only input yields no words."""
        assert extract_words("!@#$%^&*()") == set()

    def test_dotted_capital_i(self) -> None:
        """Test that words with a dotted capital I match their lowercase form."""
        assert extract_words("İstanbul istanbul.") == {"istanbul"}

    def test_unicode_words(self) -> None:
        """Test extraction of unicode words."""
        assert extract_words("Zażółć gęślą jaźń") == {"zażółć", "gęślą", "jaźń"}

    def test_idempotent_on_own_output(self) -> None:
        """Test that re-extracting from the joined output gives the same set."""
        words = extract_words("The quick, brown fox; the QUICK dog's bone!")
        assert extract_words(" ".join(words)) == words
