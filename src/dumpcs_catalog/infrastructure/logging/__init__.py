#!/usr/bin/env python3

"""Logging infrastructure for the application."""

from .logger_setup import LoggerSetup
from .progress_tracker import ProgressCallback, ProgressTracker
from .utils import get_logger, log_timing

__all__ = [
    "LoggerSetup",
    "ProgressCallback",
    "ProgressTracker",
    "get_logger",
    "log_timing",
]
