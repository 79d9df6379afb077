"""Report sinks."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class ReportSink(Protocol):
    """Destination for a rendered report."""

    @property
    def location(self) -> str:
        """Human readable name of the destination."""

    def write(self, text: str) -> None:
        """Replace the destination's contents with ``text``."""


@dataclass
class FileReportSink:
    """Write reports to a file on disk, overwriting earlier reports."""

    path: Path

    @property
    def location(self) -> str:
        return str(self.path)

    def write(self, text: str) -> None:
        with self.path.open("w", encoding="utf-8") as handle:
            handle.write(text)
