#!/usr/bin/env python3

"""Line classifiers for dump.cs text.

Each classifier is a pure function from a trimmed line to an optional
structured match. Classifiers never raise for malformed input.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

T = TypeVar("T")

# A classifier maps a line to a match or None
LineClassifier = Callable[[str], T | None]

MAX_U64 = 0xFFFFFFFFFFFFFFFF

_IMAGE_RE = re.compile(r"//\s*Image\s+\d+\s*:\s*(?P<assembly>.+?)\s*-\s*(?P<base>\d+)\s*$")
_NAMESPACE_RE = re.compile(r"//\s*Namespace:(?P<namespace>.*)$")
_TYPE_RE = re.compile(
    r"(?<![\w])(?P<keyword>class|struct|enum|interface)\s+"
    r"(?P<name>[^\s:{<]*(?:<[^>]*>[^\s:{<]*)*)"
)
_TYPE_DEF_INDEX_RE = re.compile(r"TypeDefIndex:\s*(?P<index>\d+)")
_RVA_RE = re.compile(r"(?<![A-Za-z])RVA:\s*0x(?P<hex>[0-9A-Fa-f]+)")
_OFFSET_RE = re.compile(r"(?<![A-Za-z])Offset:\s*0x(?P<hex>[0-9A-Fa-f]+)")
_VA_RE = re.compile(r"(?<![A-Za-z])VA:\s*0x(?P<hex>[0-9A-Fa-f]+)")
_INLINE_HEX_RE = re.compile(r"0x(?P<hex>[0-9A-Fa-f]+)")
_METADATA_KEYS = ("RVA:", "Offset:", "VA:")


class Section(Enum):
    """Member sections introduced by ``// <Name>`` comment lines."""

    METHODS = "Methods"
    FIELDS = "Fields"
    PROPERTIES = "Properties"
    EVENTS = "Events"


_SECTIONS = {s.value: s for s in Section}


@dataclass(frozen=True)
class ImageMatch:
    assembly: str
    base_index: int


@dataclass(frozen=True)
class TypeDeclaration:
    keyword: str
    name: str
    type_def_index: int | None = None

    @property
    def is_enum(self) -> bool:
        return self.keyword == "enum"


@dataclass(frozen=True)
class MetadataMatch:
    """Addresses found on a metadata comment line; None means key absent."""

    rva: int | None = None
    offset: int | None = None
    va: int | None = None


def parse_hex(digits: str) -> int | None:
    """Parse hex digits as an unsigned 64-bit value; wider values are rejected."""
    value = int(digits, 16)
    return value if value <= MAX_U64 else None


def is_comment(line: str) -> bool:
    return line.startswith("//")


def is_structural(line: str) -> bool:
    """Blank lines and lone braces carry no member information."""
    return line in ("", "{", "}")


def is_attribute(line: str) -> bool:
    """``[Attribute]`` lines, with or without a trailing ``//`` comment."""
    if not line.startswith("["):
        return False
    return line.endswith("]") or strip_inline_comment(line).endswith("]")


def match_image(line: str) -> ImageMatch | None:
    """Recognize ``// Image <N>: <assembly> - <base>``."""
    m = _IMAGE_RE.match(line)
    if not m:
        return None
    assembly = m.group("assembly").strip()
    if not assembly:
        return None
    return ImageMatch(assembly=assembly, base_index=int(m.group("base")))


def match_namespace(line: str) -> str | None:
    """Recognize ``// Namespace: <text>``; empty text maps to ``"-"``."""
    m = _NAMESPACE_RE.match(line)
    if not m:
        return None
    return m.group("namespace").strip() or "-"


def match_type_declaration(line: str) -> TypeDeclaration | None:
    """Recognize a class/struct/enum/interface declaration.

    When several keywords appear on one line the first one followed by a
    name wins.
    """
    m = next((m for m in _TYPE_RE.finditer(line) if m.group("name")), None)
    if m is None:
        return None

    type_def_index = None
    idx = _TYPE_DEF_INDEX_RE.search(line)
    if idx:
        type_def_index = int(idx.group("index"))

    return TypeDeclaration(
        keyword=m.group("keyword"),
        name=m.group("name"),
        type_def_index=type_def_index,
    )


def match_section(line: str) -> Section | None:
    """Recognize the exact section header comments."""
    if not is_comment(line):
        return None
    return _SECTIONS.get(line[2:].strip())


def match_metadata(line: str) -> MetadataMatch | None:
    """Recognize a ``// RVA: 0x.. Offset: 0x.. VA: 0x..`` comment (any subset)."""
    if not is_comment(line) or not any(key in line for key in _METADATA_KEYS):
        return None

    def _find(pattern: re.Pattern[str]) -> int | None:
        m = pattern.search(line)
        if not m:
            return None
        # Values wider than 64 bits count as 0, not as a missing key
        value = parse_hex(m.group("hex"))
        return 0 if value is None else value

    return MetadataMatch(rva=_find(_RVA_RE), offset=_find(_OFFSET_RE), va=_find(_VA_RE))


def find_inline_hex(line: str) -> int | None:
    """Return the first ``0x<hex>`` literal in the line, if any."""
    m = _INLINE_HEX_RE.search(line)
    return parse_hex(m.group("hex")) if m else None


def strip_inline_comment(line: str) -> str:
    pos = line.find("//")
    if pos < 0:
        return line.strip()
    return line[:pos].strip()
