"""Bounded history of recent diagnostic reports."""

import threading
from collections import deque

from view_binding.models.diagnostics import BindingReport

DEFAULT_CAPACITY = 50


class DiagnosticHistory:
    """Fixed-capacity, oldest-first history of binding reports.

    Construct one instance and hand it to every writer and reader; both
    operations serialize on a single lock.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._reports: deque[BindingReport] = deque()
        self._lock = threading.Lock()

    def add_report(self, report: BindingReport) -> None:
        """Append a report, evicting the oldest beyond capacity."""
        with self._lock:
            self._reports.append(report)
            while len(self._reports) > self.capacity:
                self._reports.popleft()

    def recent_reports(self) -> list[BindingReport]:
        """Snapshot of the retained reports, oldest first."""
        with self._lock:
            return list(self._reports)

    def __len__(self) -> int:
        with self._lock:
            return len(self._reports)
