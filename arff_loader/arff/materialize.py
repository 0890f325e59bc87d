from __future__ import annotations

import re
from typing import Any

from ..models.headers import Header, Headers
from ..models.row import Row
from ..models.types import Nominal, Numeric
from .constants import MISSING_VALUE_SYMBOL
from .errors import InvalidValueError, UnsupportedAttributeTypeError
from .splitter import split_values

"""Conversion of raw data tokens into typed representation slots.

Only the nominal label is ever read from the file; the one-hot vector, the
index and the entropic value are always computed from it.
"""

__all__ = [
    "materialize_value",
    "parse_data_line",
]

# [+-] digits [. digits] [e[+-]digits]  (also ".5" and "5.")
NUMERIC_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _materialize_numeric(token: str, header: Header) -> tuple[Any, ...]:
    """Read a numeric cell as a float.

    Raises:
        InvalidValueError: The token is not a decimal literal, or it is a
            well-formed literal that overflows to infinity (``1e999``).
    """
    if token == MISSING_VALUE_SYMBOL:
        return (None,)
    if NUMERIC_LITERAL.fullmatch(token) is None:
        raise InvalidValueError(token, header.name, "not a number")
    value = float(token)
    if value in (float("inf"), float("-inf")):
        raise InvalidValueError(token, header.name, "number out of range")
    return (value,)


def _materialize_nominal(token: str, header: Header, attribute_type: Nominal) -> tuple[Any, ...]:
    if token == MISSING_VALUE_SYMBOL:
        return (None, None, None, None)
    index = attribute_type.index_of(token)
    if index is None:
        raise InvalidValueError(
            token, header.name, f"not one of the declared classes {list(attribute_type.classes)}"
        )
    # CANONICAL, LABEL, INDEX, ENTROPIC の順
    return (attribute_type.one_hot(index), token, index, int(index))


def materialize_value(token: str, header: Header) -> tuple[Any, ...]:
    """Compute every representation of ``token`` for ``header``'s type.

    Returns:
        Values in ``header.type.representation_kinds`` order; ``None`` for
        a missing value.

    Raises:
        InvalidValueError: The token isn't valid for the attribute type.
        UnsupportedAttributeTypeError: The header has a type this loader
            can't materialize.
    """
    attribute_type = header.type
    if isinstance(attribute_type, Numeric):
        return _materialize_numeric(token, header)
    if isinstance(attribute_type, Nominal):
        return _materialize_nominal(token, header, attribute_type)
    raise UnsupportedAttributeTypeError(str(attribute_type))


def parse_data_line(line: str, headers: Headers) -> Row:
    """Parse one @data line into a Row over ``headers``."""
    values = split_values(line, len(headers))
    return Row(
        headers=headers,
        slots=tuple(materialize_value(value, header) for header, value in zip(headers, values)),
    )
