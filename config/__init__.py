"""Configuration module for LyricSlice."""
from .settings import (
    AnalyzerProfile,
    DEFAULT_PROFILE,
    validate_config,
    validate_lyrics,
    get_output_dir,
)
