#!/usr/bin/env python3

"""Application layer orchestrating the domain services."""

from .catalog_service import CatalogService

__all__ = ["CatalogService"]
