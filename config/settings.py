"""
Configuration settings for LyricSlice.

Limits mirror the lyric input form:
- 20 characters minimum, 4000 maximum
- Three remixes per request unless asked otherwise

Environment variables override the defaults at import time.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from exceptions import ConfigError, ValidationError


# =============================================================================
# INPUT LIMITS
# =============================================================================

MIN_LYRICS_CHARS = int(os.getenv("LYRICSLICE_MIN_CHARS", "20"))
MAX_LYRICS_CHARS = int(os.getenv("LYRICSLICE_MAX_CHARS", "4000"))

MIN_LENGTH_MESSAGE = f"Please enter at least {MIN_LYRICS_CHARS} characters of lyrics."
MAX_LENGTH_MESSAGE = f"Lyrics cannot exceed {MAX_LYRICS_CHARS} characters."


# =============================================================================
# REMIX / EXPORT
# =============================================================================

DEFAULT_NUM_REMIXES = int(os.getenv("LYRICSLICE_NUM_REMIXES", "3"))
DOWNLOAD_FILENAME = "lyricslice-remix.txt"


# =============================================================================
# ANALYZER PROFILE
# =============================================================================

NO_LYRICS_MESSAGE = "No lyrics provided."


@dataclass(frozen=True)
class AnalyzerProfile:
    """Constants driving the heuristic analyzer"""
    vowels: str = "aeiouy"
    silent_ending: str = "e"

    # Suffix lengths tried when comparing ending words, in order
    rhyme_suffix_lengths: tuple = (4, 3, 2)
    min_rhyme_suffix: int = 2

    # Display
    preview_chars: int = 50
    no_label: str = "-"
    first_label: str = "A"


DEFAULT_PROFILE = AnalyzerProfile()


# =============================================================================
# VALIDATION
# =============================================================================

def validate_config() -> None:
    """Validate configuration values."""
    if MIN_LYRICS_CHARS < 0 or MAX_LYRICS_CHARS < MIN_LYRICS_CHARS:
        raise ConfigError("Invalid lyrics length limits")

    if DEFAULT_NUM_REMIXES < 1:
        raise ConfigError("Invalid default remix count")

    profile = DEFAULT_PROFILE
    if profile.min_rhyme_suffix < 1 or min(profile.rhyme_suffix_lengths) < profile.min_rhyme_suffix:
        raise ConfigError("Invalid rhyme suffix lengths")


def validate_lyrics(lyrics) -> str:
    """
    Check lyrics against the input form limits.

    The analyzer itself accepts any string; this is applied at the
    command-line boundary before analysis or remixing.
    """
    if not isinstance(lyrics, str):
        raise ValidationError("Lyrics must be text.")
    if len(lyrics) < MIN_LYRICS_CHARS:
        raise ValidationError(MIN_LENGTH_MESSAGE)
    if len(lyrics) > MAX_LYRICS_CHARS:
        raise ValidationError(MAX_LENGTH_MESSAGE)
    return lyrics


def get_output_dir() -> Path:
    """Get export directory from environment or default."""
    output_dir = os.getenv("LYRICSLICE_OUTPUT_DIR")
    if output_dir:
        return Path(output_dir)
    return Path.cwd()
