from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone

from ..arff.errors import ArffError

"""ErrorRecord model for the JSON Lines error log.

One record is written per file that failed to load. ``line`` is the 1-based
line of the ARFF file where parsing stopped, or -1 when the failure isn't tied
to a line (the file couldn't be opened, for instance).
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: ARFF file being loaded
        line: Line number (1-based), -1 if unknown
        error_type: Error kind in UPPER_SNAKE_CASE (e.g. DATA_SIZE_MISMATCH)
        message: Human readable description
    """
    timestamp: str
    file: str
    line: int
    error_type: str
    message: str

    @staticmethod
    def create(file: str, line: int, error_type: str, message: str) -> ErrorRecord:
        ts = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            line=line,
            error_type=error_type,
            message=message,
        )

    @staticmethod
    def from_exception(file: str, exc: BaseException) -> ErrorRecord:
        """Build a record from a load failure.

        ArffError subclasses supply their own kind and line number; anything
        else (OSError, UnicodeDecodeError) is tagged from its class name.
        """
        if isinstance(exc, ArffError):
            line = exc.line_number if exc.line_number is not None else -1
            return ErrorRecord.create(file, line, exc.error_type, exc.args[0] if exc.args else str(exc))
        if isinstance(exc, OSError):
            error_type = "FILE_ERROR"
        elif isinstance(exc, UnicodeDecodeError):
            error_type = "DECODE_ERROR"
        else:
            error_type = "UNEXPECTED_ERROR"
        return ErrorRecord.create(file, -1, error_type, str(exc))

    def to_json_line(self) -> str:
        # dataclass のフィールド以外のキーは出さない
        return json.dumps(asdict(self), ensure_ascii=False)
