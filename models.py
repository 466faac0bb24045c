"""
LyricSlice - Data Models

Design principles:
- One record per non-empty line, numbered from 1
- Rhyme labels assigned in first-seen order ('A'..'Z', 'AA', ...)
- Label counter and word memo travel together as explicit state
- Results are plain strings so any front end can show them as-is
"""

from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# SYLLABLES
# =============================================================================

@dataclass
class SyllableRecord:
    """Syllable estimate for one line"""
    line: int                 # 1-based position among non-empty lines
    text: str                 # Trimmed line text
    syllables: int            # 0 only for lines with no letters ("!!!")

    @property
    def is_plural(self) -> bool:
        return self.syllables != 1


@dataclass
class SyllableSummary:
    """Totals across all lines"""
    records: list
    total_lines: int = 0
    total_syllables: int = 0
    average: float = 0.0
    minimum: int = 0
    maximum: int = 0


# =============================================================================
# RHYME - LABELS, GROUPS, SCHEME
# =============================================================================

@dataclass
class LabelState:
    """
    The label counter threaded through one rhyme pass.

    `next_label` is the label the next new group receives; `memo` maps
    every ending word seen so far to the label it was given.
    """
    next_label: str = "A"
    memo: dict = field(default_factory=dict)


@dataclass
class RhymeGroup:
    """Lines sharing one rhyme label"""
    label: str
    lines: list = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.lines)

    @property
    def is_pattern(self) -> bool:
        return self.size >= 2


@dataclass
class RhymeScheme:
    """Complete rhyme analysis"""
    lines: list                   # Trimmed line texts
    ending_words: list            # Cleaned ending word per line ('' if none)
    labels: list                  # One label per line ('-' if no ending word)
    groups: list = field(default_factory=list)

    @property
    def pattern(self) -> str:
        return " ".join(self.labels)

    @property
    def patterns(self) -> list:
        """Groups with at least two lines, largest first"""
        found = [g for g in self.groups if g.is_pattern]
        # sorted() is stable, so ties keep first-seen label order
        return sorted(found, key=lambda g: g.size, reverse=True)


# =============================================================================
# RESULTS
# =============================================================================

@dataclass
class LyricAnalysis:
    """The two human-readable reports returned by the analyzer"""
    syllable_report: str
    rhyme_report: str

    def to_dict(self) -> dict:
        return {
            "syllableAnalysis": self.syllable_report,
            "rhymeAnalysis": self.rhyme_report,
        }


@dataclass
class SavedLyric:
    """A remix kept for the current session"""
    id: str
    text: str
    edited_text: Optional[str] = None

    @property
    def current_text(self) -> str:
        return self.edited_text if self.edited_text is not None else self.text
