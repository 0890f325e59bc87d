from __future__ import annotations

from collections.abc import Iterable

"""Error taxonomy for ARFF loading.

Every parse failure is fatal for the file being loaded; no partial dataset is
returned. Each class carries an ``error_type`` label (UPPER_SNAKE) which is the
value written to the JSON Lines error log.

``line_number`` is filled in by the row iterator for errors raised while
parsing the @data section, and by ``load`` for header errors when the line
source knows where it stopped.
"""

__all__ = [
    "ArffError",
    "KeywordsNotFoundError",
    "MissingKeywordError",
    "RelationNameNotValidError",
    "AttributeNameNotFoundError",
    "AttributeTypeNotFoundError",
    "UnsupportedAttributeTypeError",
    "NominalClassesParseError",
    "UnrecognisedContentError",
    "DataSizeMismatchError",
    "InvalidValueError",
    "MissingValueError",
    "ForeignRepresentationError",
    "UnsupportedRepresentationError",
]


class ArffError(Exception):
    """Base class for all errors raised while reading ARFF content."""

    error_type = "ARFF_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.line_number: int | None = None

    def __str__(self) -> str:
        message = super().__str__()
        if self.line_number is not None:
            return f"line {self.line_number}: {message}"
        return message


class KeywordsNotFoundError(ArffError):
    error_type = "KEYWORDS_NOT_FOUND"

    def __init__(self, keywords: Iterable[str]) -> None:
        self.keywords = sorted(keywords)
        super().__init__(f"Couldn't find line containing any of: {', '.join(self.keywords)}")


class MissingKeywordError(ArffError):
    error_type = "MISSING_KEYWORD"

    def __init__(self, line: str, keyword: str) -> None:
        self.line = line
        self.keyword = keyword
        super().__init__(f"{line} does not start with keyword: {keyword}")


class RelationNameNotValidError(ArffError):
    error_type = "RELATION_NAME_NOT_VALID"

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Couldn't parse relation name from: {line}")


class AttributeNameNotFoundError(ArffError):
    error_type = "ATTRIBUTE_NAME_NOT_FOUND"

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Couldn't parse attribute name from: {line}")


class AttributeTypeNotFoundError(ArffError):
    error_type = "ATTRIBUTE_TYPE_NOT_FOUND"

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Couldn't parse attribute type from: {line}")


class UnsupportedAttributeTypeError(ArffError):
    """Raised for attribute types the format defines but this loader does not read."""

    error_type = "UNSUPPORTED_ATTRIBUTE_TYPE"

    def __init__(self, attribute_type: str) -> None:
        self.attribute_type = attribute_type
        super().__init__(f"Unsupported attribute type: {attribute_type}")


class NominalClassesParseError(ArffError):
    error_type = "NOMINAL_CLASSES_PARSE_ERROR"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Error parsing nominal values from: {text}")


class UnrecognisedContentError(ArffError):
    """Raised when a line parses successfully but has extra content tacked on."""

    error_type = "UNRECOGNISED_CONTENT"

    def __init__(self, content: str, line: str) -> None:
        self.content = content
        self.line = line
        super().__init__(f"Unrecognised content '{content}' in line: {line}")


class DataSizeMismatchError(ArffError):
    error_type = "DATA_SIZE_MISMATCH"

    def __init__(self, num_attributes: int, line: str) -> None:
        self.num_attributes = num_attributes
        self.line = line
        super().__init__(f"Wrong number of values (require {num_attributes}) in: {line}")


class InvalidValueError(ArffError):
    error_type = "INVALID_VALUE"

    def __init__(self, value: str, attribute: str, reason: str) -> None:
        self.value = value
        self.attribute = attribute
        super().__init__(f"Invalid value '{value}' for attribute '{attribute}': {reason}")


class MissingValueError(ArffError):
    """Raised when reading a representation whose value is missing (``?``)."""

    error_type = "MISSING_VALUE"

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"Value of attribute '{attribute}' is missing")


class ForeignRepresentationError(ValueError):
    """A representation was used with a row/batch whose headers did not create it.

    This is a programming error, not a problem with the file contents.
    """


class UnsupportedRepresentationError(ValueError):
    """A header was asked for a representation kind its type does not have."""
