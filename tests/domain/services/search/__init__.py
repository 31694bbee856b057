"""Search index tests."""
