"""
saved.py - Session-only saved remixes and text export

Saved lyrics live in memory for the lifetime of the collection; nothing
is written to disk except through export_text().
"""

import time
from pathlib import Path
from typing import Iterator, Optional

from config.settings import DOWNLOAD_FILENAME, get_output_dir
from exceptions import LyricsNotFoundError
from models import SavedLyric
from utils.logging import get_logger

logger = get_logger(__name__)


class SavedLyrics:
    """
    Ordered in-memory collection of saved remixes.

    Usage:
        saved = SavedLyrics()
        entry = saved.save(remix)
        saved.edit(entry.id, "new text")
        saved.remove(entry.id)
    """

    def __init__(self):
        self._items = {}

    def _new_id(self) -> str:
        # Millisecond timestamp, bumped when two saves land in the same ms
        stamp = int(time.time() * 1000)
        while str(stamp) in self._items:
            stamp += 1
        return str(stamp)

    def save(self, text: str) -> SavedLyric:
        entry = SavedLyric(id=self._new_id(), text=text)
        self._items[entry.id] = entry
        logger.debug(f"Saved lyric {entry.id} ({len(text)} chars)")
        return entry

    def get(self, lyric_id: str) -> SavedLyric:
        try:
            return self._items[lyric_id]
        except KeyError:
            raise LyricsNotFoundError(f"No saved lyric with id {lyric_id}") from None

    def edit(self, lyric_id: str, text: str) -> SavedLyric:
        entry = self.get(lyric_id)
        entry.edited_text = text
        return entry

    def remove(self, lyric_id: str) -> SavedLyric:
        entry = self.get(lyric_id)
        del self._items[lyric_id]
        logger.debug(f"Removed saved lyric {lyric_id}")
        return entry

    def clear(self):
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[SavedLyric]:
        return iter(list(self._items.values()))

    def __contains__(self, lyric_id) -> bool:
        return lyric_id in self._items


def export_text(text: str, path: Optional[Path] = None) -> Path:
    """
    Write lyrics to a UTF-8 text file.

    Defaults to lyricslice-remix.txt in the configured output directory.
    """
    if path is None:
        path = get_output_dir() / DOWNLOAD_FILENAME
    path = Path(path)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)

    logger.info(f"Wrote {len(text)} chars to {path}")
    return path
