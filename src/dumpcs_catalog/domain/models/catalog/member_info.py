#!/usr/bin/env python3

"""Member information model for dump.cs parsing."""

from dataclasses import dataclass
from enum import Enum


class MemberKind(Enum):
    """Kinds of members recognized in a dump."""

    METHOD = "method"
    CONSTRUCTOR = "ctor"
    FIELD = "field"
    PROPERTY = "property"
    EVENT = "event"
    ENUM_VALUE = "enum"

    @property
    def label(self) -> str:
        """Return the display label used in reports and diff keys."""
        return _LABELS[self]

    @classmethod
    def from_key(cls, key: str) -> "MemberKind":
        """Look up a kind by its group key or label (case-insensitive)."""
        lowered = key.strip().lower()
        for kind in cls:
            if lowered in (kind.value, kind.label.lower()):
                return kind
        raise ValueError(f"Unknown member kind: {key}")

    def __str__(self) -> str:
        return self.label


_LABELS = {
    MemberKind.METHOD: "Method",
    MemberKind.CONSTRUCTOR: "Ctor",
    MemberKind.FIELD: "Field",
    MemberKind.PROPERTY: "Property",
    MemberKind.EVENT: "Event",
    MemberKind.ENUM_VALUE: "Enum",
}

# Kinds whose members come from the Methods section and carry native code
CODE_MEMBER_KINDS = frozenset(
    {MemberKind.METHOD, MemberKind.CONSTRUCTOR, MemberKind.PROPERTY, MemberKind.EVENT}
)


def format_hex(value: int) -> str:
    """Format an address as a lowercase 0x-prefixed hex string."""
    return f"0x{value:x}"


@dataclass(frozen=True)
class MemberInfo:
    """Information about a single type member.

    Address fields default to 0, which means "not present" rather than a
    valid zero address.
    """

    kind: MemberKind
    name: str
    signature: str
    param_count: int = 0
    rva: int = 0
    offset: int = 0
    va: int = 0

    @property
    def has_native_code(self) -> bool:
        """Whether the member was recorded with an RVA."""
        return self.rva != 0

    def details(self) -> str:
        """Human-readable signature plus address information."""
        if self.kind in CODE_MEMBER_KINDS and (self.rva or self.offset or self.va):
            return (
                f"{self.signature}\n"
                f"RVA: {format_hex(self.rva)}  Offset: {format_hex(self.offset)}  "
                f"VA: {format_hex(self.va)}"
            )
        if self.offset:
            return f"{self.signature}\nOffset: {format_hex(self.offset)}"
        return self.signature
