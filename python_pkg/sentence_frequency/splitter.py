"""Sentence splitting on terminator characters."""

from __future__ import annotations

import logging

from python_pkg.sentence_frequency.config import STRING_CONFIG, AnalyzerConfig
from python_pkg.sentence_frequency.errors import (
    InvalidInputError,
    NoSentencesFoundError,
)

_logger = logging.getLogger(__name__)


def _has_content(sentence: str, terminators: str) -> bool:
    """Check for any character other than whitespace and terminators."""
    return any(not ch.isspace() and ch not in terminators for ch in sentence)


def validate_text(text: object, *, max_length: int | None) -> str:
    """Check that the input is a non-empty string within the length limit.

    Args:
        text: The candidate input.
        max_length: Maximum accepted number of characters, or None to
            skip the length check.

    Returns:
        The text unchanged.

    Raises:
        InvalidInputError: If the text is None, not a string, empty, or
            longer than max_length.
    """
    if text is None:
        msg = "Text cannot be None."
        raise InvalidInputError(msg)
    if not isinstance(text, str):
        msg = f"Text must be a string, got {type(text).__name__}."
        raise InvalidInputError(msg)
    if not text:
        msg = "Text is empty."
        raise InvalidInputError(msg)
    if max_length is not None and len(text) > max_length:
        msg = f"Input text is too long ({len(text)} > {max_length} characters)."
        raise InvalidInputError(msg)
    return text


def split_sentences(text: str, *, config: AnalyzerConfig = STRING_CONFIG) -> list[str]:
    """Split text into trimmed, non-empty sentences.

    Each sentence ends at (and includes) a terminator character. Trailing
    text without a terminator becomes the last sentence. Pieces made only of
    terminators (the extra dots of "...") are kept as sentences, so indices
    follow the structure of the input.

    Args:
        text: The raw input text.
        config: Supplies the terminator set and length limit.

    Returns:
        Sentences in input order.

    Raises:
        InvalidInputError: If the text fails validation.
        NoSentencesFoundError: If the text holds nothing but whitespace and
            terminators.
    """
    validate_text(text, max_length=config.max_length)

    sentences: list[str] = []
    buffer: list[str] = []

    for ch in text:
        buffer.append(ch)
        if ch in config.terminators:
            sentence = "".join(buffer).strip()
            if sentence:
                sentences.append(sentence)
            buffer.clear()

    remainder = "".join(buffer).strip()
    if remainder:
        sentences.append(remainder)

    if not any(_has_content(sentence, config.terminators) for sentence in sentences):
        msg = "No sentences detected in the text."
        raise NoSentencesFoundError(msg)

    _logger.debug("Split %d characters into %d sentences", len(text), len(sentences))
    return sentences
