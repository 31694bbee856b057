#!/usr/bin/env python3

"""Catalog of parsed types."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .type_info import TypeInfo


@dataclass
class Catalog:
    """Ordered result of a dump parse, one TypeInfo per declaration."""

    types: list[TypeInfo] = field(default_factory=list)
    source_path: Path | None = None

    def __iter__(self) -> Iterator[TypeInfo]:
        return iter(self.types)

    def __len__(self) -> int:
        return len(self.types)

    def __getitem__(self, index: int) -> TypeInfo:
        return self.types[index]

    @property
    def member_count(self) -> int:
        return sum(len(t.members) for t in self.types)

    def namespaces(self) -> list[str]:
        """Distinct namespace labels, sorted."""
        return sorted({t.namespace for t in self.types})

    def assemblies(self) -> list[str]:
        """Distinct non-empty assembly names, sorted."""
        return sorted({t.assembly for t in self.types if t.assembly})

    def find_types(self, name: str, namespace: str | None = None) -> list[TypeInfo]:
        """Find types by exact name, optionally restricted to a namespace."""
        return [
            t
            for t in self.types
            if t.name == name and (namespace is None or t.namespace == namespace)
        ]
