#!/usr/bin/env python3

"""Sequential line reader with byte-position progress."""

from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

_BOM = "\ufeff"


class LineSource:
    """Yield trimmed text lines from a binary stream.

    The consumed byte count is tracked so that callers can derive a
    progress percentage without relying on ``tell()`` during iteration.
    """

    def __init__(self, stream: BinaryIO, total_size: int, encoding: str = "utf-8"):
        """
        Args:
            stream: Binary stream opened for reading
            total_size: Size of the input in bytes (0 if unknown)
            encoding: Text encoding; undecodable bytes are replaced
        """
        self.stream = stream
        self.total_size = total_size
        self.encoding = encoding
        self.position = 0
        self.line_number = 0

    @classmethod
    def size_of(cls, path: Path) -> int:
        try:
            return path.stat().st_size
        except OSError:
            return 0

    @property
    def percent(self) -> int:
        """Percentage of input consumed, or -1 if the size is unknown."""
        if self.total_size <= 0:
            return -1
        return min(100, max(0, self.position * 100 // self.total_size))

    def __iter__(self) -> Iterator[str]:
        for raw in self.stream:
            self.position += len(raw)
            self.line_number += 1
            text = raw.decode(self.encoding, errors="replace")
            if self.line_number == 1 and text.startswith(_BOM):
                text = text[len(_BOM):]
            yield text.strip()
