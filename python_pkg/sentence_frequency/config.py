"""Configuration for the sentence frequency analyzer.

Two presets exist: the plain string analysis accepts up to 10,000
characters, the structural (token model) analysis up to 20,000 characters
and collapses runs of spaces and tabs first.

The maximum length can be overridden with the SENTENCE_FREQ_MAX_LENGTH
environment variable.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Mapping

SENTENCE_TERMINATORS = ".!?"
OPENING_PUNCTUATION = "([{\"'`“«"
STRING_MAX_LENGTH = 10_000
STRUCTURAL_MAX_LENGTH = 20_000

MAX_LENGTH_ENV_VAR = "SENTENCE_FREQ_MAX_LENGTH"


class AnalyzerConfig(NamedTuple):
    """Settings shared by the splitter, tokenizer and renderer."""

    max_length: int
    terminators: str = SENTENCE_TERMINATORS
    opening_punctuation: str = OPENING_PUNCTUATION
    normalize_whitespace: bool = False


STRING_CONFIG = AnalyzerConfig(max_length=STRING_MAX_LENGTH)
STRUCTURAL_CONFIG = AnalyzerConfig(
    max_length=STRUCTURAL_MAX_LENGTH,
    normalize_whitespace=True,
)


def load_config(
    *,
    structural: bool = False,
    environ: Mapping[str, str] | None = None,
) -> AnalyzerConfig:
    """Get the preset for a variant, applying environment overrides.

    Args:
        structural: If True, start from the structural preset.
        environ: Environment mapping (defaults to os.environ).

    Returns:
        The resulting configuration.

    Raises:
        ValueError: If the override is not a positive integer.
    """
    config = STRUCTURAL_CONFIG if structural else STRING_CONFIG
    env = os.environ if environ is None else environ

    raw_value = env.get(MAX_LENGTH_ENV_VAR)
    if raw_value is None or not raw_value.strip():
        return config

    try:
        max_length = int(raw_value)
    except ValueError:
        msg = f"{MAX_LENGTH_ENV_VAR} must be an integer, got {raw_value!r}"
        raise ValueError(msg) from None
    if max_length <= 0:
        msg = f"{MAX_LENGTH_ENV_VAR} must be positive, got {max_length}"
        raise ValueError(msg)

    return config._replace(max_length=max_length)
