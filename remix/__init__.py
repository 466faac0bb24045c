"""Remix module: line shuffles, saved remixes, export."""
from .shuffle import shuffle_lines, generate_remixes, fisher_yates
from .saved import SavedLyrics, export_text
