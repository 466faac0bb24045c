"""Custom exceptions for LyricSlice."""


class LyricSliceError(Exception):
    """Base exception for LyricSlice."""
    pass


class InvalidInputError(LyricSliceError):
    """Lyrics input is not a string."""
    pass


class AnalysisError(LyricSliceError):
    """Lyric analysis failed. Wraps the underlying cause."""
    pass


class ValidationError(LyricSliceError):
    """Invalid input parameters."""
    pass


class ConfigError(LyricSliceError):
    """Invalid configuration values."""
    pass


class LyricsNotFoundError(LyricSliceError):
    """No saved lyric with the requested id."""
    pass
