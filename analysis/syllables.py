"""
syllables.py - Heuristic syllable estimation

Counts vowel runs rather than looking words up in a pronouncing
dictionary:
- Consecutive vowels (a, e, i, o, u, y) count as one syllable
- A trailing silent 'e' is dropped when the word has other vowels
- Any word with letters is at least one syllable
"""

import re

import numpy as np

from config.settings import DEFAULT_PROFILE, AnalyzerProfile
from models import SyllableRecord, SyllableSummary


_NON_LETTERS = re.compile(r"[^a-z]")

# Line and word breaks: ASCII controls \t-\r, space, Unicode space separators,
# line/paragraph separators and the byte-order mark. Not \x1c-\x1f or \x85.
WHITESPACE = (
    "\t\n\x0b\x0c\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WORD_BREAK = re.compile("[" + re.escape(WHITESPACE) + "]+")


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def split_words(line: str) -> list:
    """Whitespace-separated tokens, empty tokens dropped"""
    return [word for word in _WORD_BREAK.split(line) if word]


def _vowel_runs(profile: AnalyzerProfile) -> re.Pattern:
    return re.compile(f"[{profile.vowels}]+")


_VOWEL_RUNS = _vowel_runs(DEFAULT_PROFILE)


def clean_word(word: str) -> str:
    """Lowercase and keep only a-z"""
    return _NON_LETTERS.sub("", word.lower())


def count_syllables(word: str, profile: AnalyzerProfile = DEFAULT_PROFILE) -> int:
    """
    Estimate syllables in a single word.

    Example:
        count_syllables("hello") -> 2
        count_syllables("there") -> 1    (silent e)
        count_syllables("rhythm") -> 1
        count_syllables("!!!") -> 0
    """
    if not word:
        return 0

    cleaned = clean_word(word)
    if not cleaned:
        return 0

    runs = _VOWEL_RUNS if profile is DEFAULT_PROFILE else _vowel_runs(profile)
    count = len(runs.findall(cleaned))

    if cleaned.endswith(profile.silent_ending) and count > 1:
        count -= 1

    # No vowels at all ("hmm", "shh")
    if count == 0:
        count = 1

    return max(1, count)


def count_line_syllables(line: str, profile: AnalyzerProfile = DEFAULT_PROFILE) -> int:
    """Sum of word estimates over whitespace-separated tokens"""
    return sum(count_syllables(word, profile) for word in split_words(line))


def split_lines(lyrics: str) -> list:
    """Trimmed, non-empty lines in their original order"""
    stripped = (trim(line) for line in lyrics.split("\n"))
    return [line for line in stripped if line]


def analyze_syllables(lines: list, profile: AnalyzerProfile = DEFAULT_PROFILE) -> SyllableSummary:
    """Build one record per line plus totals. `lines` must be non-empty."""
    records = [
        SyllableRecord(line=i + 1, text=line, syllables=count_line_syllables(line, profile))
        for i, line in enumerate(lines)
    ]

    counts = np.array([r.syllables for r in records], dtype=np.int64)
    total = int(counts.sum())

    return SyllableSummary(
        records=records,
        total_lines=len(records),
        total_syllables=total,
        average=total / len(records),
        minimum=int(counts.min()),
        maximum=int(counts.max()),
    )
