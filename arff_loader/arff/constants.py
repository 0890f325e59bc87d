from __future__ import annotations

"""Constants defined by the ARFF file format.

Keywords are stored lower-case; every comparison against file content is
case-insensitive.
"""

__all__ = [
    "RELATION_SECTION_KEYWORD",
    "ATTRIBUTE_SECTION_KEYWORD",
    "DATA_SECTION_KEYWORD",
    "NUMERIC_ATTRIBUTE_KEYWORD",
    "INTEGER_ATTRIBUTE_KEYWORD",
    "REAL_ATTRIBUTE_KEYWORD",
    "DATE_ATTRIBUTE_KEYWORD",
    "STRING_ATTRIBUTE_KEYWORD",
    "RELATIONAL_ATTRIBUTE_KEYWORD",
    "NUMERIC_KEYWORDS",
    "MISSING_VALUE_SYMBOL",
    "COMMENT_SYMBOL",
    "DATA_DELIMITERS",
    "QUOTES",
]

# Section keywords
RELATION_SECTION_KEYWORD = "@relation"
ATTRIBUTE_SECTION_KEYWORD = "@attribute"
DATA_SECTION_KEYWORD = "@data"

# Attribute type keywords
NUMERIC_ATTRIBUTE_KEYWORD = "numeric"
INTEGER_ATTRIBUTE_KEYWORD = "integer"
REAL_ATTRIBUTE_KEYWORD = "real"
DATE_ATTRIBUTE_KEYWORD = "date"
STRING_ATTRIBUTE_KEYWORD = "string"
RELATIONAL_ATTRIBUTE_KEYWORD = "relational"

# numeric / integer / real are all read as floating-point values
NUMERIC_KEYWORDS = frozenset(
    {NUMERIC_ATTRIBUTE_KEYWORD, INTEGER_ATTRIBUTE_KEYWORD, REAL_ATTRIBUTE_KEYWORD}
)

MISSING_VALUE_SYMBOL = "?"
COMMENT_SYMBOL = "%"

# Characters that may separate values on a data line
DATA_DELIMITERS = frozenset({"\t", ","})
QUOTES = frozenset({'"', "'"})
