from __future__ import annotations

import pytest

from arff_loader.arff.errors import (
    AttributeNameNotFoundError,
    AttributeTypeNotFoundError,
    KeywordsNotFoundError,
    MissingKeywordError,
    NominalClassesParseError,
    RelationNameNotValidError,
    UnrecognisedContentError,
    UnsupportedAttributeTypeError,
)
from arff_loader.arff.grammar import (
    parse_attribute,
    parse_attribute_section,
    parse_nominal_classes,
    parse_relation_line,
    parse_relation_section,
)
from arff_loader.models.types import Nominal, Numeric


class TestRelation:
    def test_plain_name(self):
        assert parse_relation_line("@relation iris") == "iris"

    def test_quoted_name_and_keyword_case(self):
        assert parse_relation_line("@RELATION 'weather data'  ") == "weather data"

    def test_missing_name(self):
        with pytest.raises(RelationNameNotValidError):
            parse_relation_line("@relation")

    @pytest.mark.parametrize("line,name", [("@relation '{weird} name'", "{weird} name"), ("@relation ','", ",")])
    def test_quoted_name_with_reserved_start(self, line: str, name: str):
        assert parse_relation_line(line) == name

    def test_trailing_content(self):
        with pytest.raises(UnrecognisedContentError) as e:
            parse_relation_line("@relation iris extra")
        assert e.value.content == " extra"

    def test_line_not_starting_with_keyword(self):
        with pytest.raises(MissingKeywordError):
            parse_relation_line("name @relation iris")

    def test_section_skips_leading_noise(self):
        lines = iter(["% header comment", "", "@relation iris", "@attribute x numeric"])
        assert parse_relation_section(lines) == "iris"

    def test_section_missing(self):
        with pytest.raises(KeywordsNotFoundError):
            parse_relation_section(iter(["% nothing here"]))


class TestAttribute:
    @pytest.mark.parametrize("keyword", ["numeric", "INTEGER", "Real"])
    def test_numeric_keywords(self, keyword: str):
        name, attribute_type = parse_attribute(f"@attribute width {keyword}")
        assert name == "width"
        assert attribute_type == Numeric()

    def test_nominal(self):
        name, attribute_type = parse_attribute("@ATTRIBUTE class\t{Iris-setosa, Iris-versicolor}")
        assert name == "class"
        assert attribute_type == Nominal(("Iris-setosa", "Iris-versicolor"))

    def test_quoted_name_is_unquoted(self):
        name, _ = parse_attribute("@attribute 'petal width' real")
        assert name == "petal width"

    def test_nominal_labels_keep_case(self):
        _, attribute_type = parse_attribute("@attribute windy {TRUE, False}")
        assert attribute_type.classes == ("TRUE", "False")

    def test_missing_name(self):
        with pytest.raises(AttributeNameNotFoundError):
            parse_attribute("@attribute")

    def test_missing_type(self):
        with pytest.raises(AttributeTypeNotFoundError):
            parse_attribute("@attribute x   ")

    @pytest.mark.parametrize(
        "line",
        [
            "@attribute when date 'yyyy-MM-dd'",
            "@attribute text string",
            "@attribute bag relational",
            "@attribute x banana",
        ],
    )
    def test_unsupported_types(self, line: str):
        with pytest.raises(UnsupportedAttributeTypeError):
            parse_attribute(line)

    def test_trailing_content(self):
        with pytest.raises(UnrecognisedContentError):
            parse_attribute("@attribute x numeric % not a comment here")

    @pytest.mark.parametrize("line", ["@attribute colour {red, green", "@attribute colour {"])
    def test_unclosed_class_list(self, line: str):
        with pytest.raises(NominalClassesParseError):
            parse_attribute(line)

    def test_quoted_separator_labels(self):
        _, attribute_type = parse_attribute("@attribute sep {',', ';'}")
        assert attribute_type.classes == (",", ";")

    def test_quoted_brace_label(self):
        _, attribute_type = parse_attribute("@attribute bracket {'}', '{'}")
        assert attribute_type.classes == ("}", "{")

    def test_quoted_name_with_reserved_start(self):
        name, attribute_type = parse_attribute("@attribute '% off' numeric")
        assert name == "% off"
        assert attribute_type == Numeric()

    def test_section_stops_at_data(self):
        lines = iter([
            "@attribute a numeric",
            "% comment",
            "",
            "@attribute b {x,y}",
            "@data",
            "1,x",
        ])
        attributes = parse_attribute_section(lines)
        assert [name for name, _ in attributes] == ["a", "b"]
        assert next(lines) == "1,x"

    def test_section_without_data_marker(self):
        with pytest.raises(KeywordsNotFoundError):
            parse_attribute_section(iter(["@attribute a numeric"]))

    def test_duplicate_names_allowed(self):
        lines = iter(["@attribute a numeric", "@attribute a numeric", "@data"])
        assert [name for name, _ in parse_attribute_section(lines)] == ["a", "a"]


class TestNominalClasses:
    def test_order_and_whitespace(self):
        assert parse_nominal_classes("{ red , green,blue }") == ["red", "green", "blue"]

    def test_quoted_labels(self):
        assert parse_nominal_classes("{'dark red', \"light, blue\"}") == ["dark red", "light, blue"]

    def test_quoted_labels_with_reserved_start(self):
        assert parse_nominal_classes("{'% off', full}") == ["% off", "full"]
        assert parse_nominal_classes("{'}', x}") == ["}", "x"]
        assert parse_nominal_classes("{\"{a} b\", ','}") == ["{a} b", ","]

    def test_duplicates_preserved(self):
        assert parse_nominal_classes("{a,b,a}") == ["a", "b", "a"]

    @pytest.mark.parametrize("text", ["{}", "{a,,b}", "{a b}", "{a,}", "{a} b", "a,b}"])
    def test_malformed(self, text: str):
        with pytest.raises(NominalClassesParseError):
            parse_nominal_classes(text)
