"""Structural text model - sentences made of Word and Punctuation tokens.

Text is parsed into a Text of Sentences, each an ordered tuple of tokens.
A token is either a Word (letters, digits, apostrophes; original casing
kept for display) or a single Punctuation character. Whitespace is not
stored; rendering puts single spaces back in front of words.

Usage:
    result, rendered = parse_and_analyze("Hello ,\tworld.  Bye!")
    print(rendered)  # ['Hello, world.', 'Bye!']
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import re
from typing import TYPE_CHECKING

from python_pkg.sentence_frequency.aggregator import (
    AnalysisResult,
    build_result,
    index_words,
)
from python_pkg.sentence_frequency.config import (
    OPENING_PUNCTUATION,
    STRUCTURAL_CONFIG,
    AnalyzerConfig,
)
from python_pkg.sentence_frequency.splitter import split_sentences, validate_text
from python_pkg.sentence_frequency.tokenizer import is_word_char, normalize_word

if TYPE_CHECKING:
    from collections.abc import Iterator

_logger = logging.getLogger(__name__)

# Only spaces and tabs; newlines are left alone
_SPACE_RUN_RE = re.compile(r"[ \t]+")


@dataclass(frozen=True, eq=False)
class Word:
    """A word token. Equality ignores case."""

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            msg = "Word must have at least one character."
            raise ValueError(msg)

    @property
    def letters(self) -> tuple[str, ...]:
        """Characters of the word in order."""
        return tuple(self.text)

    @property
    def normalized(self) -> str:
        """Lowercase comparison key."""
        return normalize_word(self.text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.normalized == other.normalized

    def __hash__(self) -> int:
        return hash(self.normalized)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Punctuation:
    """A single punctuation character."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            msg = f"Punctuation must be a single character, got {self.char!r}."
            raise ValueError(msg)

    def is_opening(self, opening_punctuation: str = OPENING_PUNCTUATION) -> bool:
        """Check whether this mark opens a group (bracket or quote)."""
        return self.char in opening_punctuation

    def __str__(self) -> str:
        return self.char


Token = Word | Punctuation


@dataclass(frozen=True)
class Sentence:
    """An ordered run of tokens."""

    tokens: tuple[Token, ...]
    raw: str = field(default="", compare=False)

    def words(self) -> list[Word]:
        """Word tokens in order, duplicates included."""
        return [token for token in self.tokens if isinstance(token, Word)]

    def unique_words(self) -> set[str]:
        """Distinct normalized words."""
        return {word.normalized for word in self.words()}

    def render(self, opening_punctuation: str = OPENING_PUNCTUATION) -> str:
        """Rebuild a readable string from the tokens.

        A space goes in front of every word except the first one and one
        that directly follows an opening mark. Punctuation is attached to
        the preceding token.

        Args:
            opening_punctuation: Marks that suppress the following space.

        Returns:
            The rendered sentence.
        """
        parts: list[str] = []
        previous: Token | None = None
        for token in self.tokens:
            if (
                previous is not None
                and isinstance(token, Word)
                and not (
                    isinstance(previous, Punctuation)
                    and previous.is_opening(opening_punctuation)
                )
            ):
                parts.append(" ")
            parts.append(str(token))
            previous = token
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.tokens)


@dataclass(frozen=True)
class Text:
    """An ordered collection of sentences."""

    sentences: tuple[Sentence, ...]

    def word_index(self) -> dict[str, set[int]]:
        """Map normalized words to the indices of sentences containing them."""
        return index_words(sentence.unique_words() for sentence in self.sentences)

    def render(self, opening_punctuation: str = OPENING_PUNCTUATION) -> list[str]:
        """Render every sentence."""
        return [sentence.render(opening_punctuation) for sentence in self.sentences]

    def __iter__(self) -> Iterator[Sentence]:
        return iter(self.sentences)

    def __len__(self) -> int:
        return len(self.sentences)


def normalize_whitespace(text: str) -> str:
    """Collapse every run of spaces and tabs into one space."""
    return _SPACE_RUN_RE.sub(" ", text)


def tokenize_sentence(raw_sentence: str) -> Sentence | None:
    """Turn one sentence string into Word and Punctuation tokens.

    Args:
        raw_sentence: A single sentence (already trimmed).

    Returns:
        The Sentence, or None if it holds no tokens at all.
    """
    tokens: list[Token] = []
    current: list[str] = []

    for ch in raw_sentence:
        if is_word_char(ch):
            current.append(ch)
            continue
        if current:
            tokens.append(Word("".join(current)))
            current.clear()
        if not ch.isspace():
            tokens.append(Punctuation(ch))

    if current:
        tokens.append(Word("".join(current)))

    if not tokens:
        return None
    return Sentence(tokens=tuple(tokens), raw=raw_sentence)


def parse_text(
    normalized_text: str,
    *,
    config: AnalyzerConfig = STRUCTURAL_CONFIG,
) -> Text:
    """Parse text into a Text of tokenized sentences.

    Sentence boundaries come from split_sentences, so they match the
    string analysis exactly.

    Args:
        normalized_text: Text whose whitespace was already normalized.
        config: Length limit and terminator set to use.

    Returns:
        The parsed Text.

    Raises:
        InvalidInputError: If the text is empty or too long.
        NoSentencesFoundError: If the text contains no sentences.
    """
    sentences: list[Sentence] = []
    for raw_sentence in split_sentences(normalized_text, config=config):
        sentence = tokenize_sentence(raw_sentence)
        if sentence is not None:
            sentences.append(sentence)
    return Text(sentences=tuple(sentences))


def parse_and_analyze(
    raw_text: str,
    *,
    config: AnalyzerConfig = STRUCTURAL_CONFIG,
) -> tuple[AnalysisResult, list[str]]:
    """Normalize, parse and analyze a text, also rendering each sentence.

    The length limit applies to the normalized text.

    Args:
        raw_text: The text to analyze.
        config: Settings for the structural analysis.

    Returns:
        Tuple of (AnalysisResult, rendered sentences in order).

    Raises:
        InvalidInputError: If the text is None, empty, or too long.
        NoSentencesFoundError: If the text contains no sentences.
    """
    validate_text(raw_text, max_length=None)
    normalized = (
        normalize_whitespace(raw_text) if config.normalize_whitespace else raw_text
    )
    if len(normalized) != len(raw_text):
        _logger.debug(
            "Normalized whitespace: %d -> %d characters",
            len(raw_text),
            len(normalized),
        )

    text = parse_text(normalized, config=config)
    result = build_result(
        [sentence.raw for sentence in text.sentences],
        text.word_index(),
    )
    return result, text.render(config.opening_punctuation)
