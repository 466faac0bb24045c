"""Shared helpers."""
from .logging import setup_logging, get_logger
