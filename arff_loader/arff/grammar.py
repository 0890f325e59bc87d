from __future__ import annotations

import logging
from collections.abc import Iterator

from ..models.types import AttributeType, Nominal, Numeric
from .constants import (
    ATTRIBUTE_SECTION_KEYWORD,
    DATA_SECTION_KEYWORD,
    NUMERIC_KEYWORDS,
    RELATION_SECTION_KEYWORD,
)
from .errors import (
    AttributeNameNotFoundError,
    AttributeTypeNotFoundError,
    NominalClassesParseError,
    RelationNameNotValidError,
    UnrecognisedContentError,
    UnsupportedAttributeTypeError,
)
from .lines import is_whitespace_only, line_starts_with, read_till_found, remove_keyword
from .tokens import (
    ATTRIBUTE_TYPE_PATTERN,
    NAME_PATTERN,
    NOMINAL_VALUE_PATTERN,
    remove_quotes,
    split_pattern_from_line_start,
)

"""Parsers for the @relation and @attribute sections of an ARFF file."""

__all__ = [
    "parse_relation_section",
    "parse_relation_line",
    "parse_attribute_section",
    "parse_attribute",
    "parse_attribute_type",
    "parse_nominal_classes",
]

logger = logging.getLogger(__name__)


def parse_relation_section(lines: Iterator[str]) -> str:
    """Find the @relation line and return the relation name."""
    line = read_till_found(lines, {RELATION_SECTION_KEYWORD})
    return parse_relation_line(line)


def parse_relation_line(line: str) -> str:
    """Parse the (unquoted) relation name from an @relation line.

    Raises:
        MissingKeywordError: The line doesn't start with @relation.
        RelationNameNotValidError: No name follows the keyword.
        UnrecognisedContentError: Anything other than whitespace follows the name.
    """
    rest = remove_keyword(line, RELATION_SECTION_KEYWORD).lstrip()
    name, unconsumed = split_pattern_from_line_start(rest, NAME_PATTERN)
    if name is None:
        raise RelationNameNotValidError(line)
    if not is_whitespace_only(unconsumed):
        raise UnrecognisedContentError(unconsumed, line)
    return remove_quotes(name)


def parse_attribute_section(lines: Iterator[str]) -> list[tuple[str, AttributeType]]:
    """Parse @attribute lines up to and including the @data marker.

    Returns:
        ``(name, type)`` pairs in declaration order.
    """
    attributes: list[tuple[str, AttributeType]] = []
    stop_words = {ATTRIBUTE_SECTION_KEYWORD, DATA_SECTION_KEYWORD}
    while True:
        line = read_till_found(lines, stop_words)
        if line_starts_with(line, DATA_SECTION_KEYWORD):
            break
        name, attribute_type = parse_attribute(line)
        logger.debug("attribute %d: %s %s", len(attributes), name, attribute_type)
        attributes.append((name, attribute_type))
    return attributes


def parse_attribute(line: str) -> tuple[str, AttributeType]:
    """Parse an attribute name and type from an @attribute declaration.

    Raises:
        MissingKeywordError: The line doesn't start with @attribute.
        AttributeNameNotFoundError: No name follows the keyword.
        AttributeTypeNotFoundError: No type follows the name.
        UnsupportedAttributeTypeError: The type is date/string/relational or
            an unknown word.
        NominalClassesParseError: The {...} class list is malformed.
        UnrecognisedContentError: Extra content follows the type.
    """
    rest = remove_keyword(line, ATTRIBUTE_SECTION_KEYWORD)
    name, unconsumed = split_pattern_from_line_start(rest, NAME_PATTERN)
    if name is None:
        raise AttributeNameNotFoundError(line)

    attribute_type, more_unconsumed = parse_attribute_type(unconsumed)
    if attribute_type is None:
        raise AttributeTypeNotFoundError(line)

    if not is_whitespace_only(more_unconsumed):
        raise UnrecognisedContentError(more_unconsumed, line)

    return remove_quotes(name), attribute_type


def parse_attribute_type(text: str) -> tuple[AttributeType | None, str]:
    """Parse the attribute type at the start of ``text``.

    Returns:
        ``(type, remainder)``, or ``(None, text)`` when there is no type at all.

    Raises:
        NominalClassesParseError: A ``{`` class list is malformed or never closed.
        UnsupportedAttributeTypeError: Any other word that isn't a numeric type.
    """
    type_token, unconsumed = split_pattern_from_line_start(text, ATTRIBUTE_TYPE_PATTERN)
    if type_token is None:
        if is_whitespace_only(text):
            return None, text
        if text.lstrip().startswith("{"):
            # class list that never closes
            raise NominalClassesParseError(text.strip())
        # some word is there, it just isn't a type we know
        raise UnsupportedAttributeTypeError(text.split()[0])

    lowered = type_token.lower()
    if lowered.startswith("{"):
        # classes come from the original (not lower-cased) text
        return Nominal(tuple(parse_nominal_classes(type_token))), unconsumed
    if lowered in NUMERIC_KEYWORDS:
        return Numeric(), unconsumed
    # date / string / relational
    raise UnsupportedAttributeTypeError(type_token)


def parse_nominal_classes(type_token: str) -> list[str]:
    """Parse the class labels out of a ``{...}`` type declaration.

    Labels keep declaration order and duplicates are preserved.

    Raises:
        NominalClassesParseError: On an empty label, an empty list, or a
            separator other than ',' / '}'.
    """
    if not type_token.startswith("{"):
        raise NominalClassesParseError(type_token)
    classes: list[str] = []
    remaining = type_token[1:]
    while True:
        value, unconsumed = split_pattern_from_line_start(remaining, NOMINAL_VALUE_PATTERN)
        if value is None:
            raise NominalClassesParseError(type_token)
        classes.append(remove_quotes(value))

        remaining = unconsumed.lstrip()
        if remaining.startswith(","):
            remaining = remaining[1:]
        elif remaining.startswith("}"):
            if remaining[1:].strip():
                raise NominalClassesParseError(type_token)
            return classes
        else:
            raise NominalClassesParseError(type_token)
