from __future__ import annotations

from .constants import DATA_DELIMITERS, QUOTES
from .errors import DataSizeMismatchError, UnrecognisedContentError

"""Splitting of @data lines into raw value tokens.

Values are separated by a tab or a comma. A value may be wrapped in single or
double quotes, in which case its interior is taken verbatim (delimiters
included). Unquoted values are right-trimmed. The line has to hold exactly the
declared number of values: too few, too many, a trailing delimiter or an
unterminated quote all raise DataSizeMismatchError; non-space text between a
closing quote and the next delimiter raises UnrecognisedContentError.
"""

__all__ = [
    "split_values",
]


def split_values(line: str, num_attributes: int) -> list[str]:
    """Split one data line into ``num_attributes`` raw values.

    Examples:
        >>> split_values('1, "a, b",x', 3)
        ['1', 'a, b', 'x']
    """
    length = len(line)
    pos = 0
    values: list[str] = []
    for _ in range(num_attributes):
        while pos < length and line[pos] == " ":
            pos += 1
        if pos >= length:
            # 値が足りない
            raise DataSizeMismatchError(num_attributes, line)

        quote = line[pos]
        if quote in QUOTES:
            start = pos + 1
            end = line.find(quote, start)
            if end == -1:
                raise DataSizeMismatchError(num_attributes, line)
            value = line[start:end]
            pos = end + 1
            while pos < length and line[pos] == " ":
                pos += 1
            if pos < length and line[pos] not in DATA_DELIMITERS:
                raise UnrecognisedContentError(line[pos:], line)
        else:
            start = pos
            while pos < length and line[pos] not in DATA_DELIMITERS:
                pos += 1
            value = line[start:pos].rstrip()

        values.append(value)
        # step over the delimiter (or past the end of the line)
        pos += 1

    # The final value must have been terminated by the end of the line, not a
    # delimiter; anything after it is an extra value.
    if pos != length + 1:
        raise DataSizeMismatchError(num_attributes, line)
    return values
