#!/usr/bin/env python3

"""Diff two catalogs by structural member key."""

from dataclasses import dataclass, field
from enum import Enum
from multiprocessing import Pool
from pathlib import Path

from ...models.catalog import Catalog, MemberKind, format_hex
from ....infrastructure.logging import get_logger, log_timing
from ..parsing import DumpCsParser
from .signature_normalizer import member_key

logger = get_logger(__name__)


class DiffStatus(Enum):
    ADDED = "Added"
    REMOVED = "Removed"
    CHANGED = "Changed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DiffEntry:
    """One reported difference between two catalogs."""

    status: DiffStatus
    key: str
    kind: MemberKind
    item: str
    old_offset: int | None = None
    new_offset: int | None = None

    def format_offsets(self) -> tuple[str, str]:
        old = format_hex(self.old_offset) if self.old_offset is not None else ""
        new = format_hex(self.new_offset) if self.new_offset is not None else ""
        return old, new


@dataclass
class CatalogDiff:
    """Result of comparing an old catalog against a new one."""

    entries: list[DiffEntry] = field(default_factory=list)

    def count(self, status: DiffStatus) -> int:
        return sum(1 for e in self.entries if e.status == status)

    @property
    def added(self) -> int:
        return self.count(DiffStatus.ADDED)

    @property
    def removed(self) -> int:
        return self.count(DiffStatus.REMOVED)

    @property
    def changed(self) -> int:
        return self.count(DiffStatus.CHANGED)

    def filter(self, text: str = "", statuses: set[DiffStatus] | None = None) -> list[DiffEntry]:
        """Entries whose status is allowed and whose item contains ``text``."""
        needle = text.strip().lower()
        return [
            e
            for e in self.entries
            if (statuses is None or e.status in statuses) and needle in e.item.lower()
        ]

    def summary(self) -> str:
        return f"{self.changed} changed, {self.added} added, {self.removed} removed"


@dataclass(frozen=True)
class _KeyedMember:
    kind: MemberKind
    offset: int
    item: str


def _index(catalog: Catalog) -> dict[str, _KeyedMember]:
    # Later duplicates replace earlier ones; dict keeps first insertion order
    index: dict[str, _KeyedMember] = {}
    for type_info in catalog:
        for member in type_info.members:
            index[member_key(type_info, member)] = _KeyedMember(
                kind=member.kind,
                offset=member.offset,
                item=f"{type_info.full_name}  {member.kind.label}  {member.signature}",
            )
    return index


class CatalogDiffer:
    """Compares catalogs member by member."""

    @log_timing
    def diff(self, old: Catalog, new: Catalog) -> CatalogDiff:
        """Compare ``old`` against ``new``.

        Members present only in ``old`` are Removed, only in ``new`` are
        Added, and members in both whose offset differs are Changed.
        """
        old_index = _index(old)
        new_index = _index(new)
        result = CatalogDiff()

        for key, before in old_index.items():
            after = new_index.get(key)
            if after is None:
                result.entries.append(
                    DiffEntry(DiffStatus.REMOVED, key, before.kind, before.item, old_offset=before.offset)
                )
            elif after.offset != before.offset:
                result.entries.append(
                    DiffEntry(
                        DiffStatus.CHANGED,
                        key,
                        before.kind,
                        before.item,
                        old_offset=before.offset,
                        new_offset=after.offset,
                    )
                )

        for key, after in new_index.items():
            if key not in old_index:
                result.entries.append(
                    DiffEntry(DiffStatus.ADDED, key, after.kind, after.item, new_offset=after.offset)
                )

        logger.info(f"Diff: {result.summary()}")
        return result


def _parse_worker(path: str) -> Catalog:
    """Worker function for parallel parsing (each process owns its parse state)."""
    return DumpCsParser().parse(path)


def compare_files(
    old_path: str | Path, new_path: str | Path, parallel: bool = False
) -> CatalogDiff:
    """Parse two dump files and diff them.

    Args:
        old_path: Baseline dump
        new_path: Dump to compare against the baseline
        parallel: Parse both files concurrently in a two-process pool

    Returns:
        CatalogDiff of old vs new
    """
    paths = [str(old_path), str(new_path)]
    if parallel:
        logger.info("Parsing compare inputs in parallel using 2 workers...")
        with Pool(2) as pool:
            old, new = pool.map(_parse_worker, paths)
    else:
        old, new = (_parse_worker(p) for p in paths)

    return CatalogDiffer().diff(old, new)
