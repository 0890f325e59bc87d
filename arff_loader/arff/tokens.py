from __future__ import annotations

import re
from functools import lru_cache

from .constants import (
    COMMENT_SYMBOL,
    DATE_ATTRIBUTE_KEYWORD,
    INTEGER_ATTRIBUTE_KEYWORD,
    MISSING_VALUE_SYMBOL,
    NUMERIC_ATTRIBUTE_KEYWORD,
    REAL_ATTRIBUTE_KEYWORD,
    RELATIONAL_ATTRIBUTE_KEYWORD,
    STRING_ATTRIBUTE_KEYWORD,
)

"""Pattern-based token extraction for ARFF header lines.

Tokens are matched at the start of a line (after optional leading whitespace)
with one of the grammars below. Quoted tokens are returned with their quotes;
``remove_quotes`` strips them afterwards.
"""

__all__ = [
    "NAME_PATTERN",
    "NOMINAL_VALUE_PATTERN",
    "ATTRIBUTE_TYPE_PATTERN",
    "split_pattern_from_line_start",
    "remove_quotes",
    "quoted",
]

# Optionally-quoted name. Only unquoted names are barred from starting with a
# reserved symbol; inside quotes anything goes.
NAME_PATTERN = r"""(?P<quote>['"])?((?<=['"]).+?(?P=quote)|(?![{},%])\S+)"""

# Nominal class label; unquoted labels also stop at ',' and '}'
NOMINAL_VALUE_PATTERN = r"""(?P<quote>['"])?((?<=['"]).+?(?P=quote)|(?![{},%])[^\s,}]+)"""

_TYPE_KEYWORDS = (
    NUMERIC_ATTRIBUTE_KEYWORD,
    INTEGER_ATTRIBUTE_KEYWORD,
    REAL_ATTRIBUTE_KEYWORD,
    STRING_ATTRIBUTE_KEYWORD,
    DATE_ATTRIBUTE_KEYWORD,
    RELATIONAL_ATTRIBUTE_KEYWORD,
)

# Type keyword or a whole brace-delimited class list. The list ends at the
# first '}' outside a quoted label.
_CLASS_LIST_PATTERN = r"""\{(?:'[^']*'|"[^"]*"|[^}])*?\}"""
ATTRIBUTE_TYPE_PATTERN = "(" + "|".join(_TYPE_KEYWORDS) + "|" + _CLASS_LIST_PATTERN + ")"


@lru_cache(maxsize=None)
def _compile(pattern: str, case_insensitive: bool) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE if case_insensitive else 0)


def split_pattern_from_line_start(
    line: str,
    pattern: str,
    ignore_leading_whitespace: bool = True,
    case_insensitive: bool = True,
) -> tuple[str | None, str]:
    """Consume the portion of ``line`` at its start that matches ``pattern``.

    Args:
        line: The text to scan.
        pattern: The token grammar to match.
        ignore_leading_whitespace: Strip leading whitespace before matching.
        case_insensitive: Ignore case when matching.

    Returns:
        ``(token, remainder)`` where token is the matched text (quotes
        included), or ``(None, line)`` when nothing matched.
    """
    text = line.lstrip() if ignore_leading_whitespace else line
    match = _compile(pattern, case_insensitive).match(text)
    if match is None or match.end() == 0:
        return None, line
    return text[: match.end()], text[match.end():]


def remove_quotes(token: str) -> str:
    """Strip one pair of matching quotes wrapping the whole token, if present."""
    if len(token) >= 2 and token[0] == token[-1] and token[0] in ("'", '"'):
        return token[1:-1]
    return token


def quoted(value: str) -> str:
    """Quote ``value`` for display in ARFF syntax when it needs quoting.

    Raises:
        ValueError: If the value contains both quote characters.
    """
    if '"' in value and "'" in value:
        raise ValueError(f"can't quote value containing both quote characters: {value}")
    if '"' in value:
        return f"'{value}'"
    if (
        "'" in value
        or value == MISSING_VALUE_SYMBOL
        or COMMENT_SYMBOL in value
        or any(ch.isspace() for ch in value)
    ):
        return f'"{value}"'
    return value
