#!/usr/bin/env python3

"""Catalog search services."""

from .search_index import FILTER_KEYS, EntryKind, SearchEntry, SearchIndex

__all__ = [
    "EntryKind",
    "FILTER_KEYS",
    "SearchEntry",
    "SearchIndex",
]
