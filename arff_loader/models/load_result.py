from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

"""Load result models: per-file statistics and the aggregate for one CLI run."""

__all__ = [
    "FileStatus",
    "FileStat",
    "LoadResult",
]


class FileStatus(Enum):
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class FileStat:
    """Outcome of loading a single ARFF file."""
    file_name: str
    status: FileStatus
    relation_name: str | None = None  # None when the header itself failed
    rows: int = 0
    columns: int = 0
    elapsed_seconds: float = 0.0
    error: str | None = None


@dataclass(frozen=True)
class LoadResult:
    """Aggregated results used for the SUMMARY line and the exit code."""
    success_files: int
    failed_files: int
    total_rows: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    throughput_rows_per_sec: float
    file_stats: list[FileStat] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return self.success_files + self.failed_files

    @classmethod
    def from_stats(cls, stats: list[FileStat], start_time: datetime, end_time: datetime) -> LoadResult:
        elapsed = (end_time - start_time).total_seconds()
        total_rows = sum(s.rows for s in stats if s.status is FileStatus.SUCCESS)
        return cls(
            success_files=sum(1 for s in stats if s.status is FileStatus.SUCCESS),
            failed_files=sum(1 for s in stats if s.status is FileStatus.FAILED),
            total_rows=total_rows,
            start_time=start_time,
            end_time=end_time,
            elapsed_seconds=elapsed,
            throughput_rows_per_sec=total_rows / elapsed if elapsed > 0 else 0.0,
            file_stats=list(stats),
        )
