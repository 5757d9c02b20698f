import io
import pytest
from ctables.interface import TableInterface
from ctables.main import main, run_tables


def test_main_prints_all_tables(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 600
    token_counts = [len(line.split()) for line in lines]
    # testInverseTrig, testTrig, testLog, testSqrt, testExp, testAngle
    expected = [8] * 100 + [8] * 100 + [6] * 100 + [4] * 100 + [4] * 100 + [3] * 100
    assert token_counts == expected


def test_main_keeps_fixed_order(capsys):
    main(["-r", "testAngle", "-r", "testSqrt"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 200
    assert lines[0] == "-5.000000000000 0.000000000000  0.000000000000 2.236067977500"
    assert lines[100] == "1.0000000000000000 0.0000000000000000 0.0000000000000000"


def test_main_polar(capsys):
    main(["--routine", "testExp", "--polar"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 100
    assert lines[0].split()[2] == "0.006737946999"


def test_main_row_alignment(capsys):
    main(["-r", "testLog", "--align", "row"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 100
    assert all(len(line.split()) == 6 for line in lines)


def test_unknown_routine_exits():
    with pytest.raises(SystemExit) as excinfo:
        TableInterface(["-r", "testCbrt"])
    assert excinfo.value.code == 2


def test_interface_defaults():
    si = TableInterface([])
    assert si.routines[0] == "testInverseTrig"
    assert len(si.routines) == 6
    assert si.polar is False
    assert si.align == "table"
    assert si.log_file is None


def test_run_tables_to_stream():
    out = io.StringIO()
    run_tables(["testSqrt", "testExp"], out=out)
    assert len(out.getvalue().splitlines()) == 200
