from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import overload

from ..arff.errors import ForeignRepresentationError, UnsupportedRepresentationError
from .types import AttributeType, RepresentationKind

"""Column headers and representation handles.

Each ``Headers`` set is frozen at construction and stamped with an opaque,
process-unique owner token. Representations carry that token, so a row can
check that a representation was handed out by its own header set without
comparing mutable objects.
"""

__all__ = [
    "Representation",
    "Header",
    "Headers",
]

_owner_tokens = itertools.count(1)


@dataclass(frozen=True)
class Representation:
    """Address of one encoding of one column: (owner token, column, kind)."""

    owner: int
    column: int
    kind: RepresentationKind


@dataclass(frozen=True)
class Header:
    name: str
    type: AttributeType
    index: int
    owner: int = field(repr=False, compare=False)

    @property
    def representations(self) -> tuple[Representation, ...]:
        return tuple(self.representation(kind) for kind in self.type.representation_kinds)

    @property
    def canonical(self) -> Representation:
        return self.representation(RepresentationKind.CANONICAL)

    # nominal only; numeric headers raise UnsupportedRepresentationError
    @property
    def label(self) -> Representation:
        return self.representation(RepresentationKind.LABEL)

    @property
    def index_rep(self) -> Representation:
        return self.representation(RepresentationKind.INDEX)

    @property
    def entropic(self) -> Representation:
        return self.representation(RepresentationKind.ENTROPIC)

    def representation(self, kind: RepresentationKind) -> Representation:
        if kind not in self.type.representation_kinds:
            raise UnsupportedRepresentationError(
                f"attribute '{self.name}' of type {self.type} has no {kind.value} representation"
            )
        return Representation(self.owner, self.index, kind)


class Headers(Sequence[Header]):
    """Ordered, immutable list of attribute headers for one relation.

    Names are not required to be unique.
    """

    def __init__(self, attributes: Iterable[tuple[str, AttributeType]]) -> None:
        self._token = next(_owner_tokens)
        self._headers = tuple(
            Header(name=name, type=attr_type, index=i, owner=self._token)
            for i, (name, attr_type) in enumerate(attributes)
        )

    @property
    def token(self) -> int:
        return self._token

    @property
    def names(self) -> list[str]:
        return [h.name for h in self._headers]

    @property
    def representation_count(self) -> int:
        """Total number of representation slots a row over these headers holds."""
        return sum(len(h.type.representation_kinds) for h in self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    @overload
    def __getitem__(self, index: int) -> Header: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Header]: ...

    def __getitem__(self, index: int | slice) -> Header | Sequence[Header]:
        return self._headers[index]

    def __iter__(self) -> Iterator[Header]:
        return iter(self._headers)

    def __repr__(self) -> str:
        return f"Headers({', '.join(f'{h.name}:{h.type}' for h in self._headers)})"

    def owns(self, representation: Representation) -> bool:
        return (
            representation.owner == self._token
            and 0 <= representation.column < len(self._headers)
        )

    def ensure_ownership(self, representation: Representation) -> Header:
        """Return the header ``representation`` belongs to.

        Raises:
            ForeignRepresentationError: If the representation was created by a
                different header set.
        """
        if not self.owns(representation):
            raise ForeignRepresentationError(
                f"representation {representation} does not belong to these headers"
            )
        return self._headers[representation.column]
