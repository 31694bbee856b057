#!/usr/bin/env python3

"""Image (assembly) table mapping TypeDefIndex ranges to assemblies."""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class ImageMapEntry:
    """One ``// Image N: <assembly> - <base>`` header record."""

    base_index: int
    assembly: str


class ImageTable:
    """Append-only table of image entries in declaration order."""

    def __init__(self) -> None:
        self._entries: list[ImageMapEntry] = []

    def add(self, entry: ImageMapEntry) -> None:
        self._entries.append(entry)

    def resolve(self, type_def_index: int) -> str:
        """Return the assembly owning ``type_def_index``.

        The owner is the entry with the greatest base index that is not
        greater than ``type_def_index``. Unknown (negative) indices and
        indices preceding every entry resolve to an empty string.

        Args:
            type_def_index: TypeDefIndex of a type declaration

        Returns:
            Assembly name or ""
        """
        if type_def_index < 0:
            return ""

        best: ImageMapEntry | None = None
        for entry in self._entries:
            if entry.base_index <= type_def_index and (
                best is None or entry.base_index >= best.base_index
            ):
                best = entry
        return best.assembly if best is not None else ""

    def __iter__(self) -> Iterator[ImageMapEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
