import pytest

from packet_guardian.core.aggregator import aggregate
from packet_guardian.core.models import LogRecord


def _rec(src, dst, size):
    return LogRecord(source=src, destination=dst, size_bytes=size, raw=f"{src},{dst},{size}")


def test_sizes_kept_in_input_order(run_start):
    flows = aggregate([_rec("a", "b", s) for s in (100, 200, 300)], run_start=run_start)
    assert flows[("a", "b")].size_sequence == [100, 200, 300]


def test_directions_are_separate_flows(run_start):
    flows = aggregate([_rec("a", "b", 1), _rec("b", "a", 2), _rec("a", "b", 3)], run_start=run_start)
    assert set(flows) == {("a", "b"), ("b", "a")}
    assert flows[("a", "b")].size_sequence == [1, 3]
    assert flows[("b", "a")].size_sequence == [2]


def test_synthetic_timestamps_are_per_flow_ordinals(run_start):
    records = [_rec("a", "b", 1), _rec("c", "d", 1), _rec("a", "b", 1), _rec("a", "b", 1)]
    flows = aggregate(records, run_start=run_start)
    assert flows[("a", "b")].timestamp_sequence == [run_start, run_start + 1, run_start + 2]
    assert flows[("c", "d")].timestamp_sequence == [run_start]
    for f in flows.values():
        assert len(f.size_sequence) == len(f.timestamp_sequence)


def test_default_run_start_is_captured_once():
    flows = aggregate([_rec("a", "b", s) for s in range(50)])
    ts = flows[("a", "b")].timestamp_sequence
    assert all(b - a == pytest.approx(1.0) for a, b in zip(ts, ts[1:]))


def test_empty_records():
    assert aggregate([]) == {}
