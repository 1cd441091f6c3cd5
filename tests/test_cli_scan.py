import sys

import pytest

from packet_guardian.cli import scan
from packet_guardian.cli.scan import EXIT_OK, EXIT_USAGE, build_parser, run_scan


def _args(*argv):
    return build_parser().parse_args(list(argv))


def test_scan_sample(capsys):
    assert run_scan(_args("--sample")) == EXIT_OK
    out = capsys.readouterr().out
    assert "192.168.10.22 → 104.27.122.12" in out
    assert "(bytes=10037)" in out


def test_scan_file_writes_csv(tmp_path, capsys):
    log = tmp_path / "flows.log"
    log.write_text("a,b,10\na,b,20\na,b,30\nc,d,5\n")
    out_csv = tmp_path / "report.csv"

    assert run_scan(_args(str(log), "--csv", str(out_csv))) == EXIT_OK
    assert out_csv.read_text().splitlines() == [
        '"Source","Destination","Bytes","Reason"',
        '"a","b","60","3 increasing packets"',
    ]


def test_scan_clean_file(tmp_path, capsys):
    log = tmp_path / "flows.log"
    log.write_text("a,b,30\na,b,20\n")
    assert run_scan(_args(str(log))) == EXIT_OK
    assert "No suspicious flows detected." in capsys.readouterr().out


def test_scan_unparsable_file(tmp_path, capsys):
    log = tmp_path / "flows.log"
    log.write_text("just words\n")
    assert run_scan(_args(str(log))) == EXIT_USAGE
    assert "No parsable log lines found" in capsys.readouterr().err


def test_scan_bad_run_length(capsys):
    assert run_scan(_args("--sample", "--run-length", "1")) == EXIT_USAGE
    assert "increasing_run_length" in capsys.readouterr().err


def test_main_exits_cleanly_on_broken_pipe(monkeypatch):
    def _broken(args):
        raise BrokenPipeError()

    monkeypatch.setattr(scan, "run_scan", _broken)
    monkeypatch.setattr(sys, "argv", ["packet-guardian-scan", "--sample"])
    with pytest.raises(SystemExit) as exc:
        scan.main()
    assert exc.value.code == EXIT_OK


def test_main_exits_cleanly_on_interrupt(monkeypatch):
    def _interrupted(args):
        raise KeyboardInterrupt()

    monkeypatch.setattr(scan, "run_scan", _interrupted)
    monkeypatch.setattr(sys, "argv", ["packet-guardian-scan", "--sample"])
    with pytest.raises(SystemExit) as exc:
        scan.main()
    assert exc.value.code == EXIT_OK
