"""Word extraction for single sentences.

A word is a maximal run of letters, digits and apostrophes. Everything
else separates words. Words are lowercased so comparison is
case-insensitive.
"""

from __future__ import annotations

APOSTROPHE = "'"


def is_word_char(ch: str) -> bool:
    """Check whether a character belongs to a word.

    Args:
        ch: A single character.

    Returns:
        True for letters, decimal digits and the apostrophe.
    """
    return ch.isalpha() or ch.isdecimal() or ch == APOSTROPHE


def normalize_word(word: str) -> str:
    """Lowercase a word one character at a time.

    Each character maps to exactly one character, so the key keeps the
    word's length. str.lower() would turn "İ" into "i" plus a combining
    dot; this keeps only the "i".

    Args:
        word: The word as written.

    Returns:
        The comparison key.
    """
    return "".join(ch.lower()[0] for ch in word)


def split_words(sentence: str) -> list[str]:
    """Split a sentence into words, keeping their original casing and order.

    Args:
        sentence: The sentence text (may be empty).

    Returns:
        List of words in order of appearance, duplicates included.
    """
    words: list[str] = []
    current: list[str] = []

    for ch in sentence:
        if is_word_char(ch):
            current.append(ch)
        elif current:
            words.append("".join(current))
            current.clear()

    if current:
        words.append("".join(current))

    return words


def extract_words(sentence: str) -> set[str]:
    """Extract the distinct normalized words of a sentence.

    Args:
        sentence: The sentence text (may be empty).

    Returns:
        Set of lowercased words; empty if the sentence has no words.
    """
    if not sentence:
        return set()
    return {normalize_word(word) for word in split_words(sentence)}
