from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..arff.errors import MissingValueError
from .headers import Headers, Representation
from .types import RepresentationKind

"""Row model: one parsed data line with every representation pre-computed."""

__all__ = [
    "Row",
]


@dataclass(frozen=True)
class Row:
    """Immutable row of materialized values.

    ``slots[column]`` holds one value per representation kind supported by
    that column's type, in ``type.representation_kinds`` order. ``None`` marks
    a missing value.
    """

    headers: Headers
    slots: tuple[tuple[Any, ...], ...]

    def __post_init__(self) -> None:
        if len(self.slots) != len(self.headers):
            raise ValueError(
                f"row has {len(self.slots)} columns but headers define {len(self.headers)}"
            )
        for header, slot in zip(self.headers, self.slots):
            if len(slot) != len(header.type.representation_kinds):
                raise ValueError(f"incomplete values for attribute '{header.name}'")

    @property
    def representation_count(self) -> int:
        return sum(len(slot) for slot in self.slots)

    def _slot_value(self, representation: Representation) -> Any:
        header = self.headers.ensure_ownership(representation)
        position = header.type.representation_kinds.index(representation.kind)
        return self.slots[representation.column][position]

    def is_missing(self, representation: Representation) -> bool:
        return self._slot_value(representation) is None

    def get_value(self, representation: Representation) -> Any:
        """Return the value stored for ``representation``.

        Raises:
            ForeignRepresentationError: If the representation belongs to another
                header set.
            MissingValueError: If the value is missing in this row.
        """
        value = self._slot_value(representation)
        if value is None:
            raise MissingValueError(self.headers[representation.column].name)
        return value

    def values(self, kind: RepresentationKind = RepresentationKind.CANONICAL) -> list[Any]:
        """Per-column values in ``kind`` (CANONICAL for columns lacking it).

        Missing values are returned as ``None`` rather than raising.
        """
        out: list[Any] = []
        for header, slot in zip(self.headers, self.slots):
            kinds = header.type.representation_kinds
            position = kinds.index(kind) if kind in kinds else 0
            out.append(slot[position])
        return out
