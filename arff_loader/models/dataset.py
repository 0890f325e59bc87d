from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import Any

import pandas as pd

from .headers import Headers, Representation
from .row import Row
from .types import Numeric, RepresentationKind

"""Stream and Batch containers returned by the ARFF loader.

Stream: relation name + headers + a single-pass lazy row iterator. Each pull
parses one more data line; consuming it exhausts (and closes) the file.
Concurrent consumers of one Stream are not supported.

Batch: the same rows drained eagerly into a list at construction, then
indexable and re-iterable any number of times.
"""

__all__ = [
    "Stream",
    "Batch",
]


class Stream:
    """Lazy, forward-only sequence of rows over one relation."""

    def __init__(self, relation_name: str, headers: Headers, rows: Iterator[Row]) -> None:
        self.relation_name = relation_name
        self.headers = headers
        self._rows = rows

    @property
    def num_columns(self) -> int:
        return len(self.headers)

    def rows(self) -> Iterator[Row]:
        return self._rows

    def __iter__(self) -> Iterator[Row]:
        return self._rows

    def close(self) -> None:
        """Release the underlying file without consuming the remaining rows."""
        close = getattr(self._rows, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Stream:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Stream(relation={self.relation_name!r}, columns={self.num_columns})"


class Batch:
    """Eagerly materialized, randomly indexable collection of rows."""

    def __init__(self, relation_name: str, headers: Headers, rows: Iterable[Row]) -> None:
        self.relation_name = relation_name
        self.headers = headers
        # 構築時に全行を読み切る (途中失敗時は例外がそのまま伝播し Batch は作られない)
        self._rows: list[Row] = list(rows)

    @classmethod
    def from_stream(cls, stream: Stream) -> Batch:
        return cls(stream.relation_name, stream.headers, stream.rows())

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    @property
    def num_columns(self) -> int:
        return len(self.headers)

    def __len__(self) -> int:
        return len(self._rows)

    def get_row(self, row_index: int) -> Row:
        if not -len(self._rows) <= row_index < len(self._rows):
            raise IndexError(f"row index {row_index} out of range for {len(self._rows)} rows")
        return self._rows[row_index]

    def __getitem__(self, row_index: int) -> Row:
        return self.get_row(row_index)

    def get_value(self, representation: Representation, row_index: int) -> Any:
        # ownership is checked by the row itself
        return self.get_row(row_index).get_value(representation)

    def get_column(self, representation: Representation) -> list[Any]:
        """All values of one representation in row order (``None`` if missing)."""
        self.headers.ensure_ownership(representation)
        return [
            None if row.is_missing(representation) else row.get_value(representation)
            for row in self._rows
        ]

    def rows(self) -> Iterator[Row]:
        return iter(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def to_dataframe(self, kind: RepresentationKind = RepresentationKind.LABEL) -> pd.DataFrame:
        """Convert to a DataFrame, one column per attribute.

        Numeric columns are float (NaN when missing); nominal columns hold the
        requested representation (``None`` when missing).
        """
        records: list[list[Any]] = []
        for row in self._rows:
            record = []
            for header, value in zip(self.headers, row.values(kind)):
                if isinstance(header.type, Numeric):
                    record.append(math.nan if value is None else value)
                else:
                    record.append(value)
            records.append(record)
        return pd.DataFrame.from_records(records, columns=self.headers.names)

    def __repr__(self) -> str:
        return (
            f"Batch(relation={self.relation_name!r}, rows={self.num_rows}, "
            f"columns={self.num_columns})"
        )
