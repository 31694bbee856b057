#!/usr/bin/env python3

"""Explicit state threaded through line processing."""

from dataclasses import dataclass, field

from ...models.catalog import NAMESPACE_SENTINEL, ImageTable, TypeInfo
from .line_classifiers import MetadataMatch, Section


@dataclass
class PendingMetadata:
    """Native addresses collected from comments preceding a method line."""

    rva: int = 0
    offset: int = 0
    va: int = 0
    has_pending: bool = False

    def merge(self, match: MetadataMatch) -> None:
        """Overwrite the keys present in ``match`` (last value wins)."""
        if match.rva is not None:
            self.rva = match.rva
        if match.offset is not None:
            self.offset = match.offset
        if match.va is not None:
            self.va = match.va
        self.has_pending = True

    def clear(self) -> None:
        self.rva = self.offset = self.va = 0
        self.has_pending = False


@dataclass
class ParserState:
    """Everything one parse invocation mutates."""

    namespace: str = NAMESPACE_SENTINEL
    current_type: TypeInfo | None = None
    section: Section | None = None
    pending: PendingMetadata = field(default_factory=PendingMetadata)
    in_block_comment: bool = False
    images: ImageTable = field(default_factory=ImageTable)
    types: list[TypeInfo] = field(default_factory=list)

    def begin_type(self, type_info: TypeInfo) -> None:
        self.types.append(type_info)
        self.current_type = type_info
        self.begin_section(None)

    def begin_section(self, section: Section | None) -> None:
        self.section = section
        self.pending.clear()
        self.in_block_comment = False
