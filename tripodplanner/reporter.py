"""Improvement reporters — observers the optimizer calls on each new best."""
import sys
from typing import Callable, Optional, TextIO

from tripodplanner.models import PlannerConfig, Report

ReporterFn = Callable[[Report], None]


class ConsoleReporter:
    """Writes each report to a text stream and flushes immediately.

    The last block printed before the process exits is the best answer found,
    even when the run is interrupted. With a config, item lines also show the
    item label, its category and the features it supplies.
    """

    def __init__(self, stream: Optional[TextIO] = None,
                 config: Optional[PlannerConfig] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.config = config

    def __call__(self, report: Report) -> None:
        lines = [
            f"==[ New best assignment: {report.priority_count}/{report.feature_count}"
            f"/{report.cost} {report.bitset()} ]=="
        ]
        for idx in report.used_items:
            lines.append(f"Use item: #{idx:02d}{self._describe(idx)}")
        self.stream.write("\n".join(lines) + "\n")
        self.stream.flush()

    def _describe(self, idx: int) -> str:
        if self.config is None:
            return ""
        item = self.config.items[idx]
        names = ", ".join(self.config.feature_name(f) for f in item.feature_ids)
        label = f" {item.label}" if item.label else ""
        return f"{label} [{self.config.category_name(item.category)}] {names}".rstrip()


class CollectingReporter:
    """Keeps every report in memory (library use and tests)."""

    def __init__(self):
        self.reports: list[Report] = []

    def __call__(self, report: Report) -> None:
        self.reports.append(report)

    @property
    def last(self) -> Optional[Report]:
        return self.reports[-1] if self.reports else None
