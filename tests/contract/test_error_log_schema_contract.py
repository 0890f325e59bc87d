from __future__ import annotations

import json
import pathlib

import jsonschema
import pytest

from arff_loader.arff.errors import InvalidValueError
from arff_loader.logging.error_log import ErrorLogBuffer
from arff_loader.models.error_record import ErrorRecord

"""Error log JSON schema contract test."""

SCHEMA_PATH = pathlib.Path(__file__).with_name("error_log_schema.json")


@pytest.fixture()
def schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_error_log_schema_valid_example(schema):
    record = {
        "timestamp": "2025-09-26T10:12:33.123456Z",
        "file": "data/iris.arff",
        "line": 42,
        "error_type": "DATA_SIZE_MISMATCH",
        "message": "Wrong number of values (require 5) in: 5.1,3.5",
    }
    jsonschema.validate(record, schema)


def test_error_log_schema_rejects_extra_key(schema):
    record = {
        "timestamp": "2025-09-26T10:12:33Z",
        "file": "data/iris.arff",
        "line": -1,
        "error_type": "FILE_ERROR",
        "message": "No such file",
        "extra": "not allowed",
    }
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(record, schema)


def test_error_log_schema_rejects_line_below_minus_one(schema):
    record = ErrorRecord.create("a.arff", -2, "FILE_ERROR", "x")
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(json.loads(record.to_json_line()), schema)


def test_written_log_lines_conform(schema, temp_workdir):
    exc = InvalidValueError("purple", "colour", "not one of the declared classes")
    exc.line_number = 9
    buf = ErrorLogBuffer()
    buf.append(ErrorRecord.from_exception("data/a.arff", exc))
    buf.append(ErrorRecord.from_exception("data/b.arff", FileNotFoundError(2, "No such file")))
    path = buf.flush()
    for raw in path.read_text(encoding="utf-8").splitlines():
        jsonschema.validate(json.loads(raw), schema)
