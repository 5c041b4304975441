import pytest

from distsort.speedup import (SEQUENTIAL, append_rows, efficiency, load_timings, speedup,
                              speedup_table)


def test_speedup_and_efficiency():
    assert speedup(8.0, 2.0) == 4.0
    assert efficiency(8.0, 2.0, 4) == 1.0
    assert efficiency(8.0, 4.0, 4) == 0.5


def test_csv_round_keeps_best_time(tmp_path):
    path = tmp_path / "timings.csv"
    append_rows(path, [
        {"algorithm": SEQUENTIAL, "procs": 1, "size": 1000, "seconds": 0.8},
        {"algorithm": "psrs", "procs": 4, "size": 1000, "seconds": 0.4},
    ])
    append_rows(path, [{"algorithm": "psrs", "procs": 4, "size": 1000, "seconds": 0.2}])

    timings = load_timings(path)
    assert timings[SEQUENTIAL][1][1000] == 0.8
    assert timings["psrs"][4][1000] == 0.2
    assert path.read_text().count("algorithm,procs,size,seconds") == 1


def test_speedup_table():
    timings = {
        SEQUENTIAL: {1: {1000: 1.0, 10000: 10.0}},
        "psrs": {2: {1000: 0.5, 10000: 4.0}},
        "hypercube": {4: {1000: 0.5}},
    }
    rows = speedup_table(timings)
    assert [(algo, procs) for algo, procs, _ in rows] == [("hypercube", 4), ("psrs", 2)]
    hyper, psrs = rows[0][2], rows[1][2]
    assert hyper == {1000: (2.0, 0.5)}
    assert psrs[10000] == pytest.approx((2.5, 1.25))
