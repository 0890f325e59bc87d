from __future__ import annotations

import logging
from pathlib import Path

from ..models.dataset import Batch, Stream
from ..models.headers import Headers
from ..models.row import Row
from .errors import ArffError
from .grammar import parse_attribute_section, parse_relation_section
from .lines import LineSource, is_comment_line, is_whitespace_only
from .materialize import parse_data_line

"""ARFF loader entry points.

``load`` reads the header sections eagerly, then returns either a Stream that
parses one data line per pull, or a Batch that has already drained every row.
Parsing is all-or-nothing: any ArffError aborts the load, closes the file and
propagates to the caller.
"""

__all__ = [
    "RowIterator",
    "read_header",
    "load",
    "load_lines",
]

logger = logging.getLogger(__name__)


class RowIterator:
    """Pulls data lines from a line source and turns each into a Row.

    Blank and comment lines are skipped. The line source is closed once it is
    exhausted or a line fails to parse; errors get the failing line number.
    """

    def __init__(self, lines: LineSource, headers: Headers) -> None:
        self._lines = lines
        self._headers = headers
        self.rows_produced = 0
        self._finished = False

    def __iter__(self) -> RowIterator:
        return self

    def __next__(self) -> Row:
        try:
            for line in self._lines:
                if is_whitespace_only(line) or is_comment_line(line):
                    continue
                row = parse_data_line(line, self._headers)
                self.rows_produced += 1
                return row
        except ArffError as e:
            e.line_number = self._lines.line_number
            self.close()
            raise
        except BaseException:
            # decode errors etc. の場合もファイルは閉じる
            self.close()
            raise
        if not self._finished:
            self._finished = True
            logger.debug("%s: %d rows read", self._lines.name, self.rows_produced)
        raise StopIteration

    def close(self) -> None:
        self._lines.close()


def read_header(lines: LineSource) -> tuple[str, Headers]:
    """Parse the @relation and @attribute sections, stopping after @data."""
    relation_name = parse_relation_section(lines)
    logger.debug("relation %r found at line %d", relation_name, lines.line_number)
    attributes = parse_attribute_section(lines)
    return relation_name, Headers(attributes)


def load_lines(lines: LineSource, batch: bool = False) -> Stream | Batch:
    """Load ARFF content from an already-open line source.

    Args:
        lines: Source of the file's lines; owned (and closed) by the loader.
        batch: Read every row now and return a Batch instead of a Stream.

    Raises:
        ArffError: Any parse error, with ``line_number`` set where known.
    """
    try:
        relation_name, headers = read_header(lines)
    except ArffError as e:
        if e.line_number is None:
            e.line_number = lines.line_number
        lines.close()
        raise
    except BaseException:
        lines.close()
        raise

    rows = RowIterator(lines, headers)
    if batch:
        dataset = Batch(relation_name, headers, rows)
        logger.debug(
            "%s: batch of %d rows x %d columns", lines.name, dataset.num_rows, dataset.num_columns
        )
        return dataset
    return Stream(relation_name, headers, rows)


def load(filename: Path | str, batch: bool = False, encoding: str = "utf-8") -> Stream | Batch:
    """Return a Stream (or, with ``batch=True``, a Batch) over an ARFF file.

    Raises:
        OSError: The file can't be opened.
        ArffError: The file isn't valid ARFF (see ``arff_loader.arff.errors``).
    """
    return load_lines(LineSource.open(filename, encoding=encoding), batch=batch)
