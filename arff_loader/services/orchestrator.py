from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

from ..arff.errors import ArffError
from ..arff.reader import load
from ..logging.error_log import ErrorLogBuffer
from ..models.dataset import Batch
from ..models.error_record import ErrorRecord
from ..models.load_result import FileStat, FileStatus, LoadResult
from .progress import ProgressTracker

"""Loads every requested ARFF file and aggregates the outcome.

Each file is loaded on its own and all-or-nothing: a failure in one file is
recorded (log line + error record) and the run continues with the next one.
In streaming mode the rows are still pulled to the end so that every data line
gets parsed and counted.
"""

__all__ = [
    "ProcessingError",
    "resolve_files",
    "load_file",
    "load_all",
]

logger = logging.getLogger(__name__)


class ProcessingError(Exception):
    """Fatal problem that prevents the run from starting."""


def resolve_files(cli_files: Iterable[str], config_files: Iterable[str] | None) -> list[Path]:
    """Files given on the command line win over the config's ``files``.

    Raises:
        ProcessingError: If neither source names any file.
    """
    files = [Path(f) for f in cli_files]
    if not files and config_files:
        files = [Path(f) for f in config_files]
    if not files:
        raise ProcessingError("no ARFF files to load")
    return files


def load_file(path: Path, batch: bool, encoding: str) -> FileStat:
    """Load one file fully and return its statistics.

    Raises:
        ArffError, OSError, UnicodeDecodeError: Propagated from the loader.
    """
    start = time.perf_counter()
    dataset = load(path, batch=batch, encoding=encoding)
    if isinstance(dataset, Batch):
        rows = dataset.num_rows
    else:
        with dataset:
            rows = sum(1 for _ in dataset.rows())
    return FileStat(
        file_name=str(path),
        status=FileStatus.SUCCESS,
        relation_name=dataset.relation_name,
        rows=rows,
        columns=dataset.num_columns,
        elapsed_seconds=time.perf_counter() - start,
    )


def load_all(
    paths: list[Path],
    *,
    batch: bool = True,
    encoding: str = "utf-8",
    error_log: ErrorLogBuffer | None = None,
) -> LoadResult:
    """Load each path in turn.

    Args:
        paths: ARFF files, processed in order.
        batch: Materialize each file as a Batch (else stream it).
        encoding: Text encoding of the files.
        error_log: Buffer receiving one ErrorRecord per failed file; flushed
            at the end of the run.

    Returns:
        LoadResult with per-file stats.
    """
    start_time = datetime.now(timezone.utc)
    stats: list[FileStat] = []

    with ProgressTracker(len(paths)) as progress:
        for path in paths:
            progress.start_file(path)
            file_start = time.perf_counter()
            try:
                stat = load_file(path, batch=batch, encoding=encoding)
            except (ArffError, OSError, UnicodeDecodeError) as e:
                logger.error(f"{path}: {e}")
                if error_log is not None:
                    error_log.append(ErrorRecord.from_exception(str(path), e))
                stat = FileStat(
                    file_name=str(path),
                    status=FileStatus.FAILED,
                    elapsed_seconds=time.perf_counter() - file_start,
                    error=str(e),
                )
                progress.finish_file(success=False)
            else:
                logger.info(
                    f"{path}: relation={stat.relation_name} rows={stat.rows} columns={stat.columns}"
                )
                progress.finish_file(success=True, rows=stat.rows)
            stats.append(stat)

    if error_log is not None:
        written = error_log.flush()
        if written is not None:
            logger.info(f"error log written: {written}")

    return LoadResult.from_stats(stats, start_time, datetime.now(timezone.utc))
