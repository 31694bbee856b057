"""Test suite for the dump.cs catalog tool.

Test Structure:
- domain/models/: Catalog model tests
- domain/services/parsing/: Line classifiers, extractors and the dump parser
- domain/services/compare/: Signature normalization and catalog diffing
- domain/services/search/: Search index tests
- domain/services/export/: JSON and CSV export
- infrastructure/: Configuration, progress tracking and native image mapping
- application/: Catalog service and command line

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run full-file parsing tests only
"""
