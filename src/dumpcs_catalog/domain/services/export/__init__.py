#!/usr/bin/env python3

"""Catalog export services."""

from .catalog_exporter import CSV_COLUMNS, catalog_to_dict, export_csv, export_json

__all__ = [
    "CSV_COLUMNS",
    "catalog_to_dict",
    "export_csv",
    "export_json",
]
