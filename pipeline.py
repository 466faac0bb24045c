"""
LyricSlice Analysis Pipeline

Lyrics in, reports and remixes out:
    lyrics text → line split → syllable counts / rhyme labels → reports
    lyrics text → line shuffle → remixes → (optional) text export

Usage:
    from pipeline import analyze_lyrics
    result = analyze_lyrics("cat\\nhat\\nbat")
    print(result.rhyme_report)

Command line:
    python pipeline.py analyze song.txt
    python pipeline.py remix song.txt --count 5 --download
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from analysis.report import format_rhyme_report, format_syllable_report
from analysis.rhyme_detector import RhymeDetector
from analysis.syllables import analyze_syllables, split_lines
from config.settings import (
    DEFAULT_NUM_REMIXES,
    NO_LYRICS_MESSAGE,
    validate_config,
    validate_lyrics,
)
from exceptions import AnalysisError, InvalidInputError, LyricSliceError, ValidationError
from models import LyricAnalysis
from remix.saved import export_text
from remix.shuffle import generate_remixes
from utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def analyze_lyrics(lyrics) -> LyricAnalysis:
    """
    Syllable and rhyme reports for a block of lyrics.

    Args:
        lyrics: Raw multi-line lyric text

    Returns:
        LyricAnalysis with syllable_report and rhyme_report. Empty or
        whitespace-only lyrics give "No lyrics provided." for both.

    Raises:
        AnalysisError: input is not a string, or analysis failed. The
            original exception is chained as __cause__.
    """
    try:
        if not isinstance(lyrics, str):
            raise InvalidInputError("Invalid lyrics input: lyrics must be a string")

        lines = split_lines(lyrics)
        if not lines:
            return LyricAnalysis(
                syllable_report=NO_LYRICS_MESSAGE,
                rhyme_report=NO_LYRICS_MESSAGE,
            )

        summary = analyze_syllables(lines)
        scheme = RhymeDetector().analyze(lines)

        logger.debug(
            f"Analyzed {summary.total_lines} lines, "
            f"{summary.total_syllables} syllables, scheme {scheme.pattern}"
        )

        return LyricAnalysis(
            syllable_report=format_syllable_report(summary),
            rhyme_report=format_rhyme_report(scheme),
        )
    except Exception as error:
        logger.error(f"Error in analyze_lyrics: {error}")
        raise AnalysisError(f"Analysis failed: {error}") from error


def remix_lyrics(lyrics: str, num_remixes: int = DEFAULT_NUM_REMIXES,
                 seed: Optional[int] = None) -> list:
    """Shuffled variants of the lyrics, one string per remix."""
    remixes = generate_remixes(lyrics, num_remixes=num_remixes, seed=seed)
    logger.debug(f"Generated {len(remixes)} remixes")
    return remixes


def print_analysis_summary(analysis: LyricAnalysis):
    """Pretty print both reports"""
    print("=" * 60)
    print("SYLLABLES")
    print("=" * 60)
    print(analysis.syllable_report)
    print()
    print("=" * 60)
    print("RHYMES")
    print("=" * 60)
    print(analysis.rhyme_report)


def read_lyrics(source: str) -> str:
    """Lyrics from a file path, or stdin for '-'"""
    try:
        if source == "-":
            return sys.stdin.read()
        # utf-8-sig drops a leading byte-order mark
        with open(source, "r", encoding="utf-8-sig") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ValidationError("Lyrics file is not valid UTF-8 text.") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lyricslice",
        description="Syllable counts, rhyme schemes and shuffled remixes for song lyrics",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", type=Path, default=None, metavar="PATH",
                        help="Also write log messages to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Syllable and rhyme breakdown")
    analyze_parser.add_argument("source", nargs="?", default="-",
                                help="Lyrics file (default: stdin)")

    remix_parser = subparsers.add_parser("remix", help="Shuffle lines into remixes")
    remix_parser.add_argument("source", nargs="?", default="-",
                              help="Lyrics file (default: stdin)")
    remix_parser.add_argument("--count", "-n", type=int, default=DEFAULT_NUM_REMIXES,
                              help=f"Number of remixes (default: {DEFAULT_NUM_REMIXES})")
    remix_parser.add_argument("--seed", type=int, default=None,
                              help="Random seed for reproducible remixes")
    remix_parser.add_argument("--download", "-d", nargs="?", const="", default=None,
                              metavar="PATH",
                              help="Write the first remix to a text file")

    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup_logging("DEBUG" if args.verbose else "WARNING",
                      log_file=args.log_file, verbose=args.verbose)
        validate_config()
        lyrics = validate_lyrics(read_lyrics(args.source))

        if args.command == "analyze":
            print_analysis_summary(analyze_lyrics(lyrics))
            return 0

        remixes = remix_lyrics(lyrics, num_remixes=args.count, seed=args.seed)
        for i, remix in enumerate(remixes, 1):
            print(f"--- Remix {i} ---")
            print(remix)
            print()

        if args.download is not None and remixes:
            path = export_text(remixes[0], Path(args.download) if args.download else None)
            print(f"Remix saved to: {path}")

        return 0
    except (LyricSliceError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
