#!/usr/bin/env python3

"""Progress tracking for dump parsing operations."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from time import time

ProgressCallback = Callable[[int], None]


class ProgressTracker:
    """
    Track and report parsing progress with summary statistics.

    Counts processed lines, types and members for one parse, forwards
    percentage updates to an optional per-invocation callback at a fixed
    line cadence, and guarantees a single terminal 100% emission.
    """

    def __init__(
        self,
        logger: logging.Logger,
        callback: ProgressCallback | None = None,
        interval: int = 200,
    ):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
            callback: Receives integer percentages in [0, 100]
            interval: Number of lines between percentage emissions
        """
        self.logger = logger
        self.callback = callback
        self.interval = max(1, interval)
        self.start_time = time()
        self.line_count = 0
        self.type_count = 0
        self.member_count = 0
        self.last_percent = 0
        self.finished = False
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = time()
        self.operation_stack.append((operation_name, start_time))

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.error(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise
        finally:
            self.operation_stack.pop()

    def count_line(self, percent: int) -> None:
        """Record one processed line; emits progress every ``interval`` lines.

        Args:
            percent: Current byte-position percentage, or a negative value
                when the total size is unknown (nothing is emitted then)
        """
        self.line_count += 1
        if self.line_count % self.interval == 0 and percent >= 0:
            self._emit(min(max(percent, 0), 100))

    def count_type(self) -> None:
        self.type_count += 1

    def count_member(self) -> None:
        self.member_count += 1

    def finish(self) -> None:
        """Emit the terminal 100% update exactly once."""
        if self.finished:
            return
        self.finished = True
        self._emit(100)

    def _emit(self, percent: int) -> None:
        self.last_percent = percent
        if self.callback is not None:
            self.callback(percent)

    def report_summary(self) -> None:
        """Report final processing statistics."""
        total_time = time() - self.start_time
        line_rate = self.line_count / total_time if total_time > 0 else 0

        self.logger.info(
            f"Processing complete: {self.line_count} lines, {self.type_count} types, "
            f"{self.member_count} members in {total_time:.2f}s "
            f"({line_rate:.0f} lines/s)"
        )

    def get_current_context(self) -> str:
        """
        Get current operation context for logging.

        Returns:
            String describing current operation stack
        """
        if not self.operation_stack:
            return "idle"

        return " → ".join(op[0] for op in self.operation_stack)
