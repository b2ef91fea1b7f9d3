"""Sentence frequency analyzer package.

This package finds the word(s) shared by the largest number of sentences:
1. Splitting text into sentences (splitter module)
2. Extracting unique normalized words per sentence (tokenizer module)
3. Aggregating word -> sentence indices (aggregator module)
4. Parsing text into Word/Punctuation tokens for display (structure module)

Example usage:
    from python_pkg.sentence_frequency.aggregator import analyze

    result = analyze("The fox runs. The fox jumps. A dog barks.")
    print(result.max_count)  # 2
    print(result.sorted_top_words())  # ['fox', 'the']
"""

from __future__ import annotations
