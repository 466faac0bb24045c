"""
shuffle.py - Line-shuffle remixes

A remix keeps every non-blank line exactly as written (indentation
included) and reorders them with a Fisher-Yates shuffle.
"""

from typing import Optional

import numpy as np

from analysis.syllables import trim
from config.settings import DEFAULT_NUM_REMIXES
from exceptions import ValidationError


def _remix_lines(lyrics: str) -> list:
    return [line for line in lyrics.split("\n") if trim(line) != ""]


def fisher_yates(items: list, rng: np.random.Generator) -> list:
    """Shuffled copy of `items`; the input list is left untouched"""
    shuffled = list(items)
    for j in range(len(shuffled) - 1, 0, -1):
        k = int(rng.integers(0, j + 1))
        shuffled[j], shuffled[k] = shuffled[k], shuffled[j]
    return shuffled


def shuffle_lines(lyrics: str, rng: Optional[np.random.Generator] = None) -> Optional[str]:
    """
    One remix of the lyrics, or None when there are no non-blank lines.

    Example:
        shuffle_lines("a\\n\\nb\\nc") -> "c\\na\\nb"   (some permutation)
    """
    lines = _remix_lines(lyrics)
    if not lines:
        return None

    if rng is None:
        rng = np.random.default_rng()

    return "\n".join(fisher_yates(lines, rng))


def generate_remixes(lyrics: str, num_remixes: int = DEFAULT_NUM_REMIXES,
                     seed: Optional[int] = None) -> list:
    """
    Several independent remixes drawn from one generator.

    Pass `seed` for reproducible output.
    """
    if num_remixes < 1:
        raise ValidationError("Number of remixes must be at least 1.")

    rng = np.random.default_rng(seed)
    remixes = []

    for _ in range(num_remixes):
        remix = shuffle_lines(lyrics, rng)
        if remix is None:
            return []
        remixes.append(remix)

    return remixes
