"""Infrastructure configuration module."""

from .application_config import Config
from .catalog_config import DEFAULT_CONFIG, get_config

__all__ = ["Config", "DEFAULT_CONFIG", "get_config"]
