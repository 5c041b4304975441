
from distsort.report import format_keys, print_timings, timing_summary


def test_timing_summary():
    stats = timing_summary([1.0, 3.0])
    assert stats == {"mean": 2.0, "std": 1.0, "min": 1.0, "max": 3.0}


def test_print_timings(capsys):
    print_timings([0.5, 1.5])
    out = capsys.readouterr().out
    assert "Processus 1 : 1.500000 s" in out
    assert "Moyenne     : 1.000000 s" in out


def test_format_keys():
    assert format_keys([3, -1, 0]) == "3 -1 0"
    assert format_keys([]) == ""
