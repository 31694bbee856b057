"""Catalog comparison tests."""
