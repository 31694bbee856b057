#!/usr/bin/env python3

"""Domain services for parsing, comparing, searching and exporting catalogs."""

from . import parsing
from . import compare, export, search

__all__ = [
    "compare",
    "export",
    "parsing",
    "search",
]
