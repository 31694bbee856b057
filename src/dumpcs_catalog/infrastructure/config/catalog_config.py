#!/usr/bin/env python3

"""Tunables for parsing, search and compare."""

import os

# Default configuration values
DEFAULT_CONFIG = {
    # Lines between progress callback emissions
    "PROGRESS_INTERVAL": 200,

    # Maximum number of search results printed by the CLI
    "SEARCH_RESULT_LIMIT": 50,

    # Dump text decoding (undecodable bytes are replaced)
    "FILE_ENCODING": "utf-8",

    # Parse both compare inputs in a process pool
    "PARALLEL_COMPARE": False,
}


def get_config() -> dict:
    """Get configuration with environment variable overrides.

    Each key can be overridden with a ``DUMPCS_<KEY>`` environment variable.
    Values that fail to convert keep their default.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"DUMPCS_{key}")
        if env_value is None:
            continue

        # bool before int: bool is a subclass of int
        if isinstance(config[key], bool):
            config[key] = env_value.lower() in ("true", "1", "yes", "on")
        elif isinstance(config[key], int):
            try:
                config[key] = int(env_value)
            except ValueError:
                pass
        else:
            config[key] = env_value

    return config
