#!/usr/bin/env python3

"""Member extractors for the Methods, Fields, Properties and Events sections.

Each extractor turns one trimmed line (plus the current parser state) into
zero or one MemberInfo. Lines that do not fit the expected shape are dropped.
"""

import re

from ...models.catalog import MemberInfo, MemberKind
from .line_classifiers import (
    Section,
    find_inline_hex,
    is_attribute,
    is_comment,
    is_structural,
    match_metadata,
    strip_inline_comment,
)
from .parser_state import ParserState

MODIFIER_KEYWORDS = frozenset(
    {
        "public",
        "private",
        "protected",
        "internal",
        "static",
        "virtual",
        "override",
        "abstract",
        "sealed",
        "extern",
        "readonly",
        "const",
        "volatile",
        "unsafe",
        "new",
        "partial",
        "async",
        "ref",
        "out",
        "in",
    }
)

CONSTRUCTOR_NAMES = (".ctor", ".cctor")

_SECTION_KINDS = {
    Section.FIELDS: MemberKind.FIELD,
    Section.PROPERTIES: MemberKind.PROPERTY,
    Section.EVENTS: MemberKind.EVENT,
}

_OPENERS = {"<": ">", "[": "]", "(": ")"}
_CLOSERS = frozenset(_OPENERS.values())

_MEMBER_NAME_RE = re.compile(r"^[\w.`<>,\[\]]+$")
_TRAILING_IDENT_RE = re.compile(r"\w+$")
_DECLARED_NAME_RE = re.compile(r"([A-Za-z_]\w*)\s*(?:;|=|\{)")


def _is_skippable(line: str) -> bool:
    return is_structural(line) or is_comment(line) or is_attribute(line)


def count_parameters(params: str) -> int:
    """Count parameters in a parameter list.

    Commas nested inside generic arguments, array ranks, parentheses or
    string literals are not separators. An empty list has zero parameters.

    >>> count_parameters("int a, string b")
    2
    >>> count_parameters("Dictionary<int,string> m")
    1
    """
    if not params.strip():
        return 0

    count = 1
    depth = 0
    quote: str | None = None
    prev = ""
    for ch in params:
        if quote:
            if ch == quote and prev != "\\":
                quote = None
        elif ch in ('"', "'"):
            quote = ch
        elif ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            count += 1
        prev = ch
    return count


def split_top_level(text: str) -> list[str]:
    """Split on whitespace outside of ``<>`` and ``[]`` nesting."""
    tokens: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in text:
        if ch in "<[":
            depth += 1
        elif ch in ">]":
            depth = max(0, depth - 1)

        if ch.isspace() and depth == 0:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens


def _split_parameters(line: str) -> tuple[str, str] | None:
    """Return (text before the first '(', text up to its matching ')')."""
    start = line.find("(")
    if start < 0:
        return None

    depth = 0
    for pos in range(start, len(line)):
        ch = line[pos]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return line[:start], line[start + 1 : pos]
    return None


def _classify_method(name: str, type_name: str, base_name: str) -> tuple[MemberKind, str]:
    if name in CONSTRUCTOR_NAMES:
        return MemberKind.CONSTRUCTOR, name
    if name in (type_name, base_name):
        return MemberKind.CONSTRUCTOR, ".ctor"
    if name.startswith(("get_", "set_")):
        return MemberKind.PROPERTY, name
    if name.startswith(("add_", "remove_")):
        return MemberKind.EVENT, name
    return MemberKind.METHOD, name


def parse_method_declaration(
    line: str, type_name: str, base_name: str | None = None
) -> MemberInfo | None:
    """Parse a method declaration line into a member without addresses.

    Args:
        line: Trimmed declaration, e.g. ``public void Bar(int a) { }``
        type_name: Name of the enclosing type (constructor detection)
        base_name: Enclosing type name without generic parameters

    Returns:
        MemberInfo, or None if the line is not a declaration
    """
    parts = _split_parameters(line)
    if parts is None:
        return None
    head, params = parts
    params = params.strip()

    tokens = split_top_level(head)
    modifiers: list[str] = []
    while tokens and tokens[0] in MODIFIER_KEYWORDS:
        modifiers.append(tokens.pop(0))
    if not tokens:
        return None

    name = tokens[-1]
    if not _MEMBER_NAME_RE.match(name):
        return None
    return_type = tokens[-2] if len(tokens) >= 2 else ""

    kind, name = _classify_method(name, type_name, base_name or type_name)
    if kind == MemberKind.CONSTRUCTOR:
        return_type = ""

    signature = " ".join([*modifiers, *([return_type] if return_type else []), f"{name}({params})"])
    return MemberInfo(
        kind=kind,
        name=name,
        signature=signature,
        param_count=count_parameters(params),
    )


def extract_method_member(state: ParserState, line: str) -> MemberInfo | None:
    """Handle one line of a Methods section.

    Metadata comments accumulate into the pending buffer; a declaration is
    only turned into a member when metadata is pending.
    """
    if state.in_block_comment:
        if "*/" in line:
            state.in_block_comment = False
        return None
    if line.startswith("/*"):
        state.in_block_comment = "*/" not in line
        return None

    metadata = match_metadata(line)
    if metadata is not None:
        state.pending.merge(metadata)
        return None

    if _is_skippable(line) or not state.pending.has_pending or state.current_type is None:
        return None

    current = state.current_type
    member = parse_method_declaration(line, current.name, current.base_name)
    if member is None:
        return None

    pending = state.pending
    member = MemberInfo(
        kind=member.kind,
        name=member.name,
        signature=member.signature,
        param_count=member.param_count,
        rva=pending.rva,
        offset=pending.offset or pending.rva,
        va=pending.va,
    )
    pending.clear()
    return member


def extract_enum_member(line: str) -> MemberInfo | None:
    """Handle one line of an enum's Fields section."""
    if _is_skippable(line):
        return None

    if "value__" in line:
        return MemberInfo(
            kind=MemberKind.FIELD,
            name="value__",
            signature=strip_inline_comment(line),
            offset=find_inline_hex(line) or 0,
        )

    text = strip_inline_comment(line)
    eq = text.find("=")
    if eq < 0:
        return None

    before = text[:eq].rstrip()
    m = _TRAILING_IDENT_RE.search(before)
    if not m or not before[: m.start()].strip():
        return None
    name = m.group(0)

    rest = text[eq + 1 :]
    semi = rest.find(";")
    value = (rest[:semi] if semi >= 0 else rest).strip()
    if not value:
        return None

    return MemberInfo(kind=MemberKind.ENUM_VALUE, name=name, signature=f"{name} = {value}")


def declared_name(signature: str) -> str:
    """Best-effort member name: the identifier before ``;``, ``=`` or ``{``."""
    m = _DECLARED_NAME_RE.search(signature)
    return m.group(1) if m else ""


def extract_plain_member(line: str, section: Section) -> MemberInfo | None:
    """Handle one line of a Fields/Properties/Events section of a non-enum type."""
    kind = _SECTION_KINDS.get(section)
    if kind is None or _is_skippable(line):
        return None

    signature = strip_inline_comment(line)
    if not signature:
        return None

    return MemberInfo(
        kind=kind,
        name=declared_name(signature),
        signature=signature,
        offset=find_inline_hex(line) or 0,
    )
