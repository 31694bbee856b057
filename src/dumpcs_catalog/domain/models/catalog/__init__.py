#!/usr/bin/env python3

"""Catalog domain models."""

from .catalog import Catalog
from .image_map import ImageMapEntry, ImageTable
from .member_info import CODE_MEMBER_KINDS, MemberInfo, MemberKind, format_hex
from .type_info import NAMESPACE_SENTINEL, UNKNOWN_TYPE_DEF_INDEX, TypeInfo

__all__ = [
    "CODE_MEMBER_KINDS",
    "Catalog",
    "ImageMapEntry",
    "ImageTable",
    "MemberInfo",
    "MemberKind",
    "NAMESPACE_SENTINEL",
    "TypeInfo",
    "UNKNOWN_TYPE_DEF_INDEX",
    "format_hex",
]
