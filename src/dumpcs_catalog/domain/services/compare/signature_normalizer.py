#!/usr/bin/env python3

"""Signature normalization for structural comparison of catalogs."""

import re

from ...models.catalog import CODE_MEMBER_KINDS, MemberInfo, MemberKind, TypeInfo
from ..parsing.member_extractors import MODIFIER_KEYWORDS

_MODIFIERS_RE = re.compile(
    r"^(?:(?:" + "|".join(sorted(MODIFIER_KEYWORDS)) + r")\s+)+"
)
_FIELD_NAME_RE = re.compile(r"\b([A-Za-z_][A-Za-z0-9_]*)\b\s*(?:;|=)")


def collapse_generics(text: str) -> str:
    """Replace every outermost generic argument list with ``<>``."""
    out: list[str] = []
    depth = 0
    for ch in text:
        if ch == "<":
            if depth == 0:
                out.append("<>")
            depth += 1
        elif ch == ">" and depth > 0:
            depth -= 1
        elif depth == 0:
            out.append(ch)
    return "".join(out)


def _drop_return_type(text: str) -> str:
    head, paren, tail = text.partition("(")
    tokens = head.split()
    if len(tokens) > 1:
        head = " ".join(tokens[1:])
    return head.strip() + paren + tail


def normalize_signature(member: MemberInfo) -> str:
    """Reduce a member signature to the part that identifies it across dumps.

    Modifiers and generic arguments are dropped so that visibility changes or
    generic instantiation noise do not show up as removed/added pairs.
    """
    text = member.signature.strip()
    text = _MODIFIERS_RE.sub("", text)
    text = collapse_generics(text)

    if member.kind in CODE_MEMBER_KINDS:
        text = _drop_return_type(text)
        if not text.endswith(")"):
            text += "()"
        return text

    if member.kind == MemberKind.ENUM_VALUE:
        return member.name

    m = _FIELD_NAME_RE.search(text)
    if m:
        return m.group(1)
    return text


def member_key(type_info: TypeInfo, member: MemberInfo) -> str:
    """Structural key: assembly, qualified type, kind and normalized signature."""
    return "|".join(
        (type_info.assembly, type_info.full_name, member.kind.label, normalize_signature(member))
    )
