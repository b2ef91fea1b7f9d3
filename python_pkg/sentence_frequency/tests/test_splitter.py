"""Tests for sentence_frequency.splitter module."""

from __future__ import annotations

import pytest

from python_pkg.sentence_frequency.config import STRING_CONFIG
from python_pkg.sentence_frequency.errors import (
    AnalysisError,
    InvalidInputError,
    NoSentencesFoundError,
)
from python_pkg.sentence_frequency.splitter import split_sentences, validate_text


class TestValidateText:
    """Tests for validate_text function."""

    def test_returns_text(self) -> None:
        """Test that valid text is returned unchanged."""
        assert validate_text("abc", max_length=3) == "abc"

    def test_none_rejected(self) -> None:
        """Test that None is rejected."""
        with pytest.raises(InvalidInputError):
            validate_text(None, max_length=10)

    def test_non_string_rejected(self) -> None:
        """Test that non-string input is rejected."""
        with pytest.raises(InvalidInputError, match="string"):
            validate_text(42, max_length=10)

    def test_empty_rejected(self) -> None:
        """Test that empty text is rejected."""
        with pytest.raises(InvalidInputError, match="empty"):
            validate_text("", max_length=10)

    def test_too_long_rejected(self) -> None:
        """Test that text above the limit is rejected."""
        with pytest.raises(InvalidInputError, match="too long"):
            validate_text("abcd", max_length=3)

    def test_no_limit(self) -> None:
        """Test that None skips the length check."""
        assert validate_text("x" * 100, max_length=None) == "x" * 100


class TestSplitSentences:
    """Tests for split_sentences function."""

    def test_basic_split(self) -> None:
        """Test splitting on all three terminators."""
        result = split_sentences("One. Two! Three?")
        assert result == ["One.", "Two!", "Three?"]

    def test_trailing_text_without_terminator(self) -> None:
        """Test that a trailing fragment becomes the last sentence."""
        result = split_sentences("First one.  and the rest  ")
        assert result == ["First one.", "and the rest"]

    def test_no_terminator_single_sentence(self) -> None:
        """Test that text without terminators is one trimmed sentence."""
        assert split_sentences("  just-some_words  ") == ["just-some_words"]

    def test_consecutive_terminators_kept(self) -> None:
        """Test that each extra terminator becomes its own sentence."""
        assert split_sentences("Wait... What?!") == ["Wait.", ".", ".", "What?", "!"]

    def test_ellipsis_shifts_indices(self) -> None:
        """Test that the dots of an ellipsis occupy sentence positions."""
        assert split_sentences("Hello... world.") == ["Hello.", ".", ".", "world."]

    def test_newlines_trimmed(self) -> None:
        """Test that surrounding newlines are trimmed."""
        assert split_sentences("A b.\n\nC d.\n") == ["A b.", "C d."]

    def test_only_whitespace_and_terminators(self) -> None:
        """Test that text without content raises NoSentencesFoundError."""
        for text in ("   ", ". . !", "?!.", "\n\t"):
            with pytest.raises(NoSentencesFoundError):
                split_sentences(text)

    def test_empty_text(self) -> None:
        """Test that empty text raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            split_sentences("")

    def test_length_limit_from_config(self) -> None:
        """Test that the configured maximum is enforced."""
        config = STRING_CONFIG._replace(max_length=5)
        assert split_sentences("Hi. A", config=config) == ["Hi.", "A"]
        with pytest.raises(InvalidInputError):
            split_sentences("Hello.", config=config)

    def test_default_limit(self) -> None:
        """Test the default 10,000 character limit."""
        split_sentences("a" * 10_000)
        with pytest.raises(InvalidInputError):
            split_sentences("a" * 10_001)

    def test_custom_terminators(self) -> None:
        """Test that terminators come from the config."""
        config = STRING_CONFIG._replace(terminators=";")
        assert split_sentences("a. b; c", config=config) == ["a. b;", "c"]

    def test_errors_are_value_errors(self) -> None:
        """Test that analysis errors can be caught as ValueError."""
        assert issubclass(AnalysisError, ValueError)
        with pytest.raises(ValueError, match="No sentences"):
            split_sentences("...")
