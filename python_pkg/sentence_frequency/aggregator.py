"""Frequency aggregation - which word occurs in the most sentences.

For every normalized word the aggregator records the set of sentence
indices (0-based) containing it, then reports the largest set size and
every word reaching it. Ties are reported together; sorting is only used
for display.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, NamedTuple

from python_pkg.sentence_frequency.config import STRING_CONFIG, AnalyzerConfig
from python_pkg.sentence_frequency.splitter import split_sentences
from python_pkg.sentence_frequency.tokenizer import extract_words, normalize_word

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

_logger = logging.getLogger(__name__)


class AnalysisResult(NamedTuple):
    """Outcome of a single analysis call."""

    sentences: tuple[str, ...]
    word_index: Mapping[str, frozenset[int]]
    max_count: int
    top_words: frozenset[str]

    @property
    def sentence_count(self) -> int:
        """Number of sentences detected."""
        return len(self.sentences)

    def sorted_top_words(self) -> list[str]:
        """Top words in lexicographic order."""
        return sorted(self.top_words)

    def sentences_for(self, word: str) -> list[int]:
        """Get the sorted sentence indices containing a word.

        Args:
            word: The word to look up (any casing).

        Returns:
            Sorted indices, or an empty list for an unknown word.
        """
        return sorted(self.word_index.get(normalize_word(word), frozenset()))


def index_words(word_sets: Iterable[Iterable[str]]) -> dict[str, set[int]]:
    """Map each word to the indices of the sentences containing it.

    Args:
        word_sets: Per-sentence collections of normalized words, in
            sentence order.

    Returns:
        Dictionary of word -> set of sentence indices.
    """
    word_index: dict[str, set[int]] = {}
    for sentence_idx, words in enumerate(word_sets):
        for word in words:
            word_index.setdefault(word, set()).add(sentence_idx)
    return word_index


def find_max_words(word_index: Mapping[str, Iterable[int]]) -> tuple[int, frozenset[str]]:
    """Find the largest index-set size and the words that reach it.

    Args:
        word_index: Mapping of word -> sentence indices.

    Returns:
        Tuple of (max count, words with that count). The count is 0 and
        the set empty when the mapping is empty.
    """
    sizes = {word: len(set(indices)) for word, indices in word_index.items()}
    if not sizes:
        return 0, frozenset()

    max_count = max(sizes.values())
    top_words = frozenset(word for word, size in sizes.items() if size == max_count)
    return max_count, top_words


def build_result(
    sentences: Sequence[str],
    word_index: Mapping[str, Iterable[int]],
) -> AnalysisResult:
    """Freeze sentences and index into an immutable AnalysisResult."""
    frozen_index = {word: frozenset(indices) for word, indices in word_index.items()}
    max_count, top_words = find_max_words(frozen_index)
    _logger.debug(
        "Indexed %d unique words over %d sentences; max count %d shared by %d word(s)",
        len(frozen_index),
        len(sentences),
        max_count,
        len(top_words),
    )
    return AnalysisResult(
        sentences=tuple(sentences),
        word_index=MappingProxyType(frozen_index),
        max_count=max_count,
        top_words=top_words,
    )


def aggregate(sentences: Sequence[str]) -> AnalysisResult:
    """Aggregate word occurrences over already split sentences.

    Args:
        sentences: Sentence strings in order.

    Returns:
        AnalysisResult for these sentences.
    """
    word_index = index_words(extract_words(sentence) for sentence in sentences)
    return build_result(sentences, word_index)


def analyze(raw_text: str, *, config: AnalyzerConfig = STRING_CONFIG) -> AnalysisResult:
    """Split, tokenize and aggregate a text.

    Args:
        raw_text: The text to analyze.
        config: Length limit and terminator set to use.

    Returns:
        AnalysisResult for the text.

    Raises:
        InvalidInputError: If the text is None, empty, or too long.
        NoSentencesFoundError: If the text contains no sentences.
    """
    sentences = split_sentences(raw_text, config=config)
    return aggregate(sentences)
