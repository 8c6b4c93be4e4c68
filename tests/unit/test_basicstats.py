import dataclasses

import pytest
from basicstats.services import basicstats as pipeline
from basicstats.services.buffer import GrowableBuffer
from basicstats.services.basicstats import StatsReport, analyze_file, compute_stats, sample_set
from basicstats.services.errors import AllocationFailure, DivisionByZero, EmptyInput, InputUnavailable

def test_compute_stats_scenario():
    report = compute_stats([1, 2, 2, 3, 4])
    assert report.count == 5
    assert report.mean == pytest.approx(2.4)
    assert report.median == 2.0
    assert report.mode == 2.0
    assert round(report.stddev, 3) == 1.020
    assert round(report.harmonic_mean, 3) == 1.935
    assert report.unused_capacity == 15

def test_compute_stats_mode_at_end_of_sorted_input():
    report = compute_stats([5, 5, 5, 1, 1])
    assert report.mode == 5.0
    assert report.median == 5.0

def test_compute_stats_accepts_generator():
    report = compute_stats(float(i) for i in range(1, 22))
    assert report.count == 21
    assert report.unused_capacity == 19
    assert report.median == 11.0

def test_report_is_immutable():
    report = compute_stats([1.0])
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.mean = 3.0  # type: ignore[misc]
    assert report.as_dict()["count"] == 1

def test_empty_input():
    with pytest.raises(EmptyInput):
        compute_stats([])

def test_zero_value_fails_before_report():
    with pytest.raises(DivisionByZero):
        compute_stats([3, 0, 1])

def test_allocation_failure_aborts_run():
    with pytest.raises(AllocationFailure):
        compute_stats(range(1, 50), max_capacity=40)

def test_buffer_released_on_error(monkeypatch):
    created = []

    class RecordingBuffer(GrowableBuffer):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            created.append(self)

    monkeypatch.setattr(pipeline, "GrowableBuffer", RecordingBuffer)
    with pytest.raises(DivisionByZero):
        compute_stats([1, 0])
    assert len(created) == 1
    assert created[0].capacity == 0

def test_sample_set_releases_storage():
    with sample_set() as buf:
        buf.extend([1, 2, 3])
        assert buf.capacity == 20
    assert buf.capacity == 0
    assert len(buf) == 0

def test_analyze_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1 2 2\n3 4 stop 99\n")
    report = analyze_file(str(path))
    assert isinstance(report, StatsReport)
    assert report.count == 5
    assert report.mode == 2.0

def test_analyze_file_missing(tmp_path):
    with pytest.raises(InputUnavailable):
        analyze_file(str(tmp_path / "missing.txt"))

def test_analyze_file_directory(tmp_path):
    with pytest.raises(InputUnavailable):
        analyze_file(str(tmp_path))

def test_analyze_file_empty(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    with pytest.raises(EmptyInput):
        analyze_file(str(path))

def test_analyze_stdin(monkeypatch):
    import io
    monkeypatch.setattr("sys.stdin", io.StringIO("4 4 8"))
    report = analyze_file("-")
    assert report.count == 3
    assert report.mode == 4.0

def test_analyze_file_undecodable_bytes_after_last_number(tmp_path):
    path = tmp_path / "mixed.bin"
    path.write_bytes(b"1 2 2 3 4 end \xff\xfe garbage")
    report = analyze_file(str(path))
    assert report.count == 5
    assert report.mode == 2.0

def test_analyze_file_undecodable_token_stops_reading(tmp_path):
    path = tmp_path / "mixed.bin"
    path.write_bytes(b"7 8 \xff 9")
    assert analyze_file(str(path)).count == 2

def test_report_lists_overflowed_fields():
    report = compute_stats([1e308, 1e308])
    assert report.non_finite_fields() == ["mean", "median", "stddev"]
    assert compute_stats([1, 2]).non_finite_fields() == []
