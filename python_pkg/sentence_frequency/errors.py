"""Exceptions raised by the sentence frequency analyzer."""

from __future__ import annotations


class AnalysisError(ValueError):
    """Base class for recoverable analysis failures."""


class InvalidInputError(AnalysisError):
    """Raised when the input text is missing, empty, or too long."""


class NoSentencesFoundError(AnalysisError):
    """Raised when the text contains no sentence with visible content."""
