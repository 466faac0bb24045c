"""
rhyme_detector.py - Spelling-based Rhyme Scheme Detection

Labels each line by the rhyme group of its ending word.

Handles:
- Suffix rhymes (cat/hat, near/dear)
- Repeated ending words (same word -> same label)
- Lines with no usable ending word ('-')
- Long songs (labels continue past 'Z' as 'AA', 'AB', ...)

Matching is first-match-wins: a line takes the label of the EARLIEST
previous line it rhymes with, not the best one. Scanning every earlier
line makes a pass O(n^2) in line count.
"""

import re
from collections import OrderedDict

from analysis.syllables import split_words
from config.settings import DEFAULT_PROFILE, AnalyzerProfile
from models import LabelState, RhymeGroup, RhymeScheme


# ASCII word characters, matching [A-Za-z0-9_]
_NON_WORD = re.compile(r"[^\w]", re.ASCII)


# =============================================================================
# WORD-LEVEL HELPERS
# =============================================================================

def get_ending_word(line: str) -> str:
    """Last whitespace token, lowercased, non-word characters removed"""
    words = split_words(line)
    if not words:
        return ""
    return _NON_WORD.sub("", words[-1].lower())


def words_rhyme(word1: str, word2: str, profile: AnalyzerProfile = DEFAULT_PROFILE) -> bool:
    """
    True if the two words share a 4, 3 or 2 character ending.

    Identical words never rhyme here; repeats are caught by the
    label memo instead.
    """
    if not word1 or not word2 or word1 == word2:
        return False

    for length in profile.rhyme_suffix_lengths:
        ending1 = word1[-length:]
        ending2 = word2[-length:]
        if ending1 == ending2 and len(ending1) >= profile.min_rhyme_suffix:
            return True

    return False


def next_label(label: str) -> str:
    """
    Advance a rhyme label.

    'A' -> 'B', 'Z' -> 'AA', 'AA' -> 'AB', 'AZ' -> 'AAA'
    """
    if label == "Z":
        return "AA"
    if len(label) == 1:
        return chr(ord(label) + 1)
    if label[-1] == "Z":
        return label[:-1] + "AA"
    return label[:-1] + chr(ord(label[-1]) + 1)


# =============================================================================
# CORE RHYME DETECTOR
# =============================================================================

class RhymeDetector:
    """
    Assigns rhyme labels to lines.

    Usage:
        detector = RhymeDetector()
        scheme = detector.analyze(["cat", "hat", "bat"])
        scheme.pattern -> "A A A"
    """

    def __init__(self, profile: AnalyzerProfile = DEFAULT_PROFILE):
        self.profile = profile

    def analyze(self, lines: list) -> RhymeScheme:
        """Label every line in a single pass, then group the labels."""
        ending_words = [get_ending_word(line) for line in lines]
        state = LabelState(next_label=self.profile.first_label)
        labels = []

        for index, word in enumerate(ending_words):
            labels.append(self._assign_label(word, ending_words[:index], labels, state))

        groups = self._build_groups(labels)

        return RhymeScheme(
            lines=list(lines),
            ending_words=ending_words,
            labels=labels,
            groups=groups,
        )

    def _assign_label(self, word: str, previous_words: list, previous_labels: list,
                      state: LabelState) -> str:
        """Label for one ending word given only the lines before it"""
        if not word:
            return self.profile.no_label

        for prev_word, prev_label in zip(previous_words, previous_labels):
            if prev_word and words_rhyme(word, prev_word, self.profile):
                state.memo[word] = prev_label
                return prev_label

        if word in state.memo:
            return state.memo[word]

        label = state.next_label
        state.memo[word] = label
        state.next_label = next_label(label)
        return label

    def _build_groups(self, labels: list) -> list:
        """Line numbers per label, in first-seen label order"""
        groups = OrderedDict()

        for index, label in enumerate(labels):
            if label == self.profile.no_label:
                continue
            if label not in groups:
                groups[label] = RhymeGroup(label=label)
            groups[label].lines.append(index + 1)

        return list(groups.values())


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def detect_rhymes(lines: list) -> dict:
    """Simple interface for rhyme detection."""
    scheme = RhymeDetector().analyze(lines)

    return {
        "pattern": scheme.pattern,
        "labels": scheme.labels,
        "ending_words": scheme.ending_words,
        "groups": [
            {
                "label": g.label,
                "lines": g.lines,
                "size": g.size,
            }
            for g in scheme.patterns
        ],
    }
