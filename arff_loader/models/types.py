from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

"""Attribute types and the value representations each type supports.

A Numeric attribute has a single CANONICAL representation (float).
A Nominal attribute has four, all derived from the label:

- CANONICAL: one-hot tuple of 0/1 with one entry per declared class
- LABEL: the class label as written in the file
- INDEX: zero-based position of the label in the declaration
- ENTROPIC: the same position as an unbounded int (for counting / statistics)
"""

__all__ = [
    "RepresentationKind",
    "Numeric",
    "Nominal",
    "AttributeType",
]


class RepresentationKind(Enum):
    CANONICAL = "canonical"
    LABEL = "label"
    INDEX = "index"
    ENTROPIC = "entropic"


@dataclass(frozen=True)
class Numeric:
    """numeric / integer / real attribute (all read as float)."""

    representation_kinds: ClassVar[tuple[RepresentationKind, ...]] = (
        RepresentationKind.CANONICAL,
    )

    def __str__(self) -> str:
        return "numeric"


@dataclass(frozen=True)
class Nominal:
    """Categorical attribute with a fixed, ordered list of class labels.

    Duplicate labels are kept as declared; ``index_of`` resolves to the first
    matching position.
    """

    classes: tuple[str, ...]

    representation_kinds: ClassVar[tuple[RepresentationKind, ...]] = (
        RepresentationKind.CANONICAL,
        RepresentationKind.LABEL,
        RepresentationKind.INDEX,
        RepresentationKind.ENTROPIC,
    )

    def __post_init__(self) -> None:
        # list で渡されても tuple に揃える (frozen なので object.__setattr__)
        object.__setattr__(self, "classes", tuple(self.classes))
        if not self.classes:
            raise ValueError("nominal attribute needs at least one class")

    @property
    def num_classes(self) -> int:
        return len(self.classes)

    def index_of(self, label: str) -> int | None:
        try:
            return self.classes.index(label)
        except ValueError:
            return None

    def one_hot(self, index: int) -> tuple[int, ...]:
        if not 0 <= index < len(self.classes):
            raise IndexError(f"class index {index} out of range for {len(self.classes)} classes")
        return tuple(1 if i == index else 0 for i in range(len(self.classes)))

    def __str__(self) -> str:
        return "{" + ",".join(self.classes) + "}"


AttributeType = Union[Numeric, Nominal]
