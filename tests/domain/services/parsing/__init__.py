"""Dump parser tests."""
