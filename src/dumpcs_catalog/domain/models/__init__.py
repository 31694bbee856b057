#!/usr/bin/env python3

"""Domain models for the dump catalog."""

from . import catalog

__all__ = [
    "catalog",
]
