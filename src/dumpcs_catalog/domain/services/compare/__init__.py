#!/usr/bin/env python3

"""Catalog comparison services."""

from .catalog_differ import CatalogDiff, CatalogDiffer, DiffEntry, DiffStatus, compare_files
from .signature_normalizer import collapse_generics, member_key, normalize_signature

__all__ = [
    "CatalogDiff",
    "CatalogDiffer",
    "DiffEntry",
    "DiffStatus",
    "collapse_generics",
    "compare_files",
    "member_key",
    "normalize_signature",
]
