from __future__ import annotations

from datetime import datetime, timedelta, timezone

from arff_loader.models.load_result import FileStat, FileStatus, LoadResult
from arff_loader.services.summary import render_summary_line


def _result(stats: list[FileStat], seconds: float) -> LoadResult:
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return LoadResult.from_stats(stats, start, start + timedelta(seconds=seconds))


def test_render_summary_line_all_success():
    stats = [
        FileStat("a.arff", FileStatus.SUCCESS, relation_name="a", rows=100, columns=3),
        FileStat("b.arff", FileStatus.SUCCESS, relation_name="b", rows=50, columns=2),
    ]
    line = render_summary_line(2, _result(stats, 3.0))
    assert line == "SUMMARY files=2/2 success=2 failed=0 rows=150 elapsed_sec=3 throughput_rps=50"


def test_failed_files_rows_not_counted():
    stats = [
        FileStat("a.arff", FileStatus.SUCCESS, relation_name="a", rows=10, columns=1),
        FileStat("b.arff", FileStatus.FAILED, rows=99, error="boom"),
    ]
    result = _result(stats, 0.5)
    assert result.total_files == 2
    line = render_summary_line(result.total_files, result)
    assert "success=1 failed=1 rows=10" in line
    assert line.endswith("elapsed_sec=0.5 throughput_rps=20")


def test_zero_elapsed_has_zero_throughput():
    line = render_summary_line(0, _result([], 0))
    assert line == "SUMMARY files=0/0 success=0 failed=0 rows=0 elapsed_sec=0 throughput_rps=0"


def test_small_numbers_not_in_exponent_form():
    stats = [FileStat("a.arff", FileStatus.SUCCESS, relation_name="a", rows=1, columns=1)]
    line = render_summary_line(1, _result(stats, 0.0005))
    assert "elapsed_sec=0.0005 " in line
    assert "e-" not in line
