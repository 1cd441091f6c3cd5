from packet_guardian.core.parser import LineParser, parse
from packet_guardian.core.registry import LineFormatRegistry
from packet_guardian.formats.csv_line.format import CsvLineFormat


def test_bracketed_round_trip():
    for src, dst, size in [("10.0.0.1", "10.0.0.2", 0), ("host-a", "host-b", 987654321)]:
        records = parse(f"SRC={src} DST={dst} PROTO=X SIZE={size}")
        assert len(records) == 1
        r = records[0]
        assert (r.source, r.destination, r.size_bytes) == (src, dst, size)


def test_csv_strictness():
    assert len(parse("a,b,100")) == 1
    assert parse("a,b,c,100") == []


def test_blank_lines_and_whitespace_trimmed():
    text = "\n   \n  a,b,100  \n\n\tc,d,5\n"
    records = parse(text)
    assert [r.raw for r in records] == ["a,b,100", "c,d,5"]


def test_order_preserved_across_formats():
    text = "\n".join(
        [
            "[t] SRC=a DST=b PROTO=TCP SIZE=1",
            "a,b,2",
            "SIZE=3 DST=b SRC=a",
        ]
    )
    assert [r.size_bytes for r in parse(text)] == [1, 2, 3]


def test_first_matching_format_wins():
    # Bracketed match uses the SRC/DST/PROTO/SIZE block even if stray tokens precede it.
    line = "SRC=zzz [x] SRC=a DST=b PROTO=TCP SIZE=10"
    records = parse(line)
    assert len(records) == 1
    assert records[0].source == "a"


def test_unmatched_lines_are_counted(parser):
    records = parser.parse("garbage\nSRC=a DST=b SIZE=oops\na,b,1")
    assert len(records) == 1
    assert parser.dropped == 2


def test_custom_registry_limits_formats():
    reg = LineFormatRegistry()
    reg.register(CsvLineFormat())
    p = LineParser(reg)
    assert p.parse("SRC=a DST=b PROTO=TCP SIZE=10\na,b,1")[0].raw == "a,b,1"
    assert p.dropped == 1


def test_empty_input():
    assert parse("") == []
    assert parse("   \n\n") == []


def test_only_newline_separates_lines():
    # Form feed is whitespace inside a line, not a line break.
    records = parse("SRC=a\x0cDST=b PROTO=X SIZE=5\r\nc,d,7 ")
    assert [(r.source, r.destination, r.size_bytes) for r in records] == [("a", "b", 5), ("c", "d", 7)]
    assert parse("c,d,7\r\ne,f,8") == parse("c,d,7\ne,f,8")
