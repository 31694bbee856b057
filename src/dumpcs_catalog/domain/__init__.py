#!/usr/bin/env python3

"""Domain layer containing parsing logic and models."""

from . import models, services

__all__ = [
    "models",
    "services",
]
