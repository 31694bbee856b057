#!/usr/bin/env python3

"""Tests for ProgressTracker."""

import logging
from unittest.mock import Mock

import pytest

from dumpcs_catalog.infrastructure.logging import ProgressTracker


@pytest.fixture
def logger() -> Mock:
    return Mock(spec=logging.Logger)


@pytest.mark.unit
def test_emits_every_interval(logger: Mock) -> None:
    calls: list[int] = []
    tracker = ProgressTracker(logger, calls.append, interval=3)
    for percent in range(1, 8):
        tracker.count_line(percent * 10)
    assert calls == [30, 60]
    assert tracker.line_count == 7


@pytest.mark.unit
def test_unknown_percent_is_not_emitted(logger: Mock) -> None:
    calls: list[int] = []
    tracker = ProgressTracker(logger, calls.append, interval=1)
    tracker.count_line(-1)
    assert calls == []


@pytest.mark.unit
def test_percent_is_clamped(logger: Mock) -> None:
    calls: list[int] = []
    tracker = ProgressTracker(logger, calls.append, interval=1)
    tracker.count_line(150)
    assert calls == [100]


@pytest.mark.unit
def test_finish_emits_once(logger: Mock) -> None:
    calls: list[int] = []
    tracker = ProgressTracker(logger, calls.append)
    tracker.finish()
    tracker.finish()
    assert calls == [100]
    assert tracker.last_percent == 100


@pytest.mark.unit
def test_without_callback(logger: Mock) -> None:
    tracker = ProgressTracker(logger, interval=1)
    tracker.count_line(50)
    tracker.finish()
    assert tracker.last_percent == 100


@pytest.mark.unit
def test_report_summary(logger: Mock) -> None:
    tracker = ProgressTracker(logger)
    tracker.count_line(0)
    tracker.count_type()
    tracker.count_member()
    tracker.count_member()
    tracker.report_summary()

    message = logger.info.call_args[0][0]
    assert "1 lines, 1 types, 2 members" in message


@pytest.mark.unit
def test_track_operation_context(logger: Mock) -> None:
    tracker = ProgressTracker(logger)
    assert tracker.get_current_context() == "idle"

    with tracker.track_operation("load"):
        with tracker.track_operation("parse"):
            assert tracker.get_current_context() == "load → parse"

    assert tracker.get_current_context() == "idle"


@pytest.mark.unit
def test_track_operation_logs_failure(logger: Mock) -> None:
    tracker = ProgressTracker(logger)
    with pytest.raises(RuntimeError):
        with tracker.track_operation("export"):
            raise RuntimeError("disk full")

    assert "Failed operation: export" in logger.error.call_args[0][0]
    assert tracker.get_current_context() == "idle"
