#!/usr/bin/env python3
"""Sentence frequency analyzer - finds the word(s) shared by the most sentences.

Usage:
    # From raw text
    python -m python_pkg.sentence_frequency.analyzer --text "The fox runs. The fox jumps."

    # From a single file
    python -m python_pkg.sentence_frequency.analyzer --file path/to/file.txt

    # From multiple files
    python -m python_pkg.sentence_frequency.analyzer --files file1.txt file2.txt

    # Structural mode (collapses spaces/tabs and prints the parsed sentences)
    python -m python_pkg.sentence_frequency.analyzer --file text.txt --structural

    # Interactive session (no input option given)
    python -m python_pkg.sentence_frequency.analyzer
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import TYPE_CHECKING, TextIO

from python_pkg.sentence_frequency.aggregator import AnalysisResult, analyze
from python_pkg.sentence_frequency.config import AnalyzerConfig, load_config
from python_pkg.sentence_frequency.errors import AnalysisError
from python_pkg.sentence_frequency.structure import parse_and_analyze

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

_logger = logging.getLogger(__name__)

SAMPLE_TEXT = (
    "The quick, brown fox jumps over a lazy dog. DJs flock by when MTV ax quiz prog. "
    "Junk MTV quiz graced by fox whelps. Bawds jog, flick quartz, vex nymphs. Waltz, "
    "bad nymph, for quick jigs vex! Fox nymphs grab quick-jived waltz. Brick quiz "
    "whangs jumpy veldt fox. Bright vixens jump; dozy fowl quack. Quick wafting "
    "zephyrs vex bold Jim. Quick zephyrs blow, vexing daft Jim. Sex-charged fop blew "
    "my junk TV quiz. How quickly daft jumping zebras vex. Two driven jocks help fax "
    "my big quiz. Quick, Baz, get my woven flax jodhpurs! \"Now fax quiz Jack!\" my "
    "brave ghost pled. Five quacking zephyrs jolt my wax bed. Flummoxed by job, "
    "kvetching W. zaps Iraq. Cozy sphinx waves quart jug of bad milk. A very bad "
    "quack might jinx zippy fowls. Few quips galvanized the mock jury box. Quick "
    "brown dogs jump over the lazy fox. The jay, pig, fox, zebra, and my wolves "
    "quack! Blowzy red vixens fight for a quick jump. Joaquin Phoenix was gazed by "
    "MTV for luck. A wizard’s job is to vex chumps quickly in fog. Watch "
    "\"Jeopardy!\", Alex fun TV quiz game. Woven silk pyjamas exchanged for blue quartz."
)

EXIT_ANSWERS = ("y", "n")


def read_file(filepath: str | Path) -> str:
    """Read text content from a file.

    Args:
        filepath: Path to the file to read.

    Returns:
        The text content of the file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        UnicodeDecodeError: If the file can't be decoded as UTF-8.
    """
    path = Path(filepath)
    return path.read_text(encoding="utf-8")


def read_files(filepaths: Sequence[str | Path]) -> str:
    """Read and concatenate text content from multiple files."""
    return "\n".join(read_file(filepath) for filepath in filepaths)


def format_results(
    result: AnalysisResult,
    *,
    rendered: Sequence[str] | None = None,
) -> str:
    """Format an analysis result as a human-readable report.

    Args:
        result: The analysis to report.
        rendered: Rendered sentences to list after the summary, if any.

    Returns:
        Multi-line report string.
    """
    lines = [
        f"Total sentences detected: {result.sentence_count}",
        f"Maximum number of sentences containing the same word: {result.max_count}",
    ]

    if result.max_count > 0:
        lines.append(f"Word(s) that appear in {result.max_count} sentence(s):")
        for word in result.sorted_top_words():
            indices = ", ".join(str(idx) for idx in result.sentences_for(word))
            lines.append(f" - {word} (appears in sentences: {indices})")
    else:
        lines.append("No words found in sentences.")

    if rendered is not None:
        lines.append("")
        lines.append("Parsed structure (sentences):")
        lines.extend(f"[{idx}] {sentence}" for idx, sentence in enumerate(rendered))

    return "\n".join(lines)


def analyze_and_format(text: str, *, config: AnalyzerConfig, structural: bool) -> str:
    """Run the chosen analysis and return the formatted report.

    Raises:
        AnalysisError: If the text is rejected.
    """
    if structural:
        result, rendered = parse_and_analyze(text, config=config)
        return format_results(result, rendered=rendered)
    return format_results(analyze(text, config=config))


def _ask_exit(input_func: Callable[[str], str]) -> bool:
    """Ask until the answer is y or n; True means exit."""
    while True:
        choice = input_func("\nDo you want to exit? (y/n): ").strip().lower()
        if choice in EXIT_ANSWERS:
            return choice == "y"


def run_interactive(
    *,
    config: AnalyzerConfig,
    structural: bool = False,
    input_func: Callable[[str], str] | None = None,
    output: TextIO | None = None,
    error_output: TextIO | None = None,
) -> int:
    """Prompt for texts and report on each until the user chooses to exit.

    Blank input falls back to SAMPLE_TEXT. Input errors are reported and
    the session continues. End of input ends the session.

    Args:
        config: Settings for the analysis.
        structural: If True, use the structural analysis.
        input_func: Prompt function (defaults to builtin input).
        output: Stream for reports (defaults to sys.stdout).
        error_output: Stream for input errors (defaults to sys.stderr).

    Returns:
        Exit code (always 0).
    """
    prompt = input if input_func is None else input_func
    out = sys.stdout if output is None else output
    err = sys.stderr if error_output is None else error_output
    out.write("You can paste a multi-sentence text or press Enter to use the sample text.\n")

    try:
        while True:
            line = prompt("\nEnter your text (or press Enter for sample): ")
            if not line.strip():
                text = SAMPLE_TEXT
                out.write(f"\nUsing sample text:\n{text}\n")
            else:
                text = line

            try:
                report = analyze_and_format(text, config=config, structural=structural)
            except AnalysisError as e:
                err.write(f"Input error: {e}\n")
            else:
                out.write(f"\n{report}\n")

            if _ask_exit(prompt):
                out.write("Program finished.\n")
                return 0
            out.write("Repeating the program...\n")
    except EOFError:
        _logger.debug("End of input, leaving interactive session")
        out.write("\n")
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the sentence frequency analyzer.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = argparse.ArgumentParser(
        description="Find the word(s) occurring in the largest number of sentences.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument(
        "--text",
        "-t",
        type=str,
        help="Raw text to analyze",
    )
    input_group.add_argument(
        "--file",
        "-f",
        type=str,
        help="Path to a file to analyze",
    )
    input_group.add_argument(
        "--files",
        "-F",
        nargs="+",
        type=str,
        help="Paths to multiple files to analyze",
    )

    parser.add_argument(
        "--structural",
        "-s",
        action="store_true",
        help="Parse into word/punctuation tokens and print the parsed sentences",
    )
    parser.add_argument(
        "--max-length",
        "-m",
        type=int,
        default=None,
        help="Maximum accepted text length (default: 10000, or 20000 with --structural)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output file path (default: print to stdout)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = load_config(structural=args.structural)
        if args.max_length is not None:
            if args.max_length <= 0:
                msg = f"--max-length must be positive, got {args.max_length}"
                raise ValueError(msg)
            config = config._replace(max_length=args.max_length)
        _logger.info("Using maximum text length %d", config.max_length)

        if args.text is not None:
            text = args.text
        elif args.file:
            text = read_file(args.file)
        elif args.files:
            text = read_files(args.files)
        else:
            return run_interactive(config=config, structural=args.structural)

        result = analyze_and_format(text, config=config, structural=args.structural)

        if args.output:
            Path(args.output).write_text(result, encoding="utf-8")
            print(f"Output written to {args.output}")  # noqa: T201
        else:
            print(result)  # noqa: T201

    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)  # noqa: T201
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: Could not decode file as UTF-8 - {e}", file=sys.stderr)  # noqa: T201
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)  # noqa: T201
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
