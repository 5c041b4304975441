import threading

import numpy
import pytest
from numpy.testing import assert_array_equal

from distsort.checks import is_globally_ordered, is_locally_sorted, is_permutation
from distsort.psrs import psrs_sort

from .helpers import EXAMPLE, run_sort, run_spmd


def test_example_is_globally_sorted():
    partitions = run_sort(psrs_sort, EXAMPLE, 4)
    assert_array_equal(numpy.concatenate(partitions), list(range(1, 13)))


@pytest.mark.parametrize("nbp", [2, 3, 4, 5, 8])
def test_random_input(nbp):
    rng = numpy.random.default_rng(nbp)
    keys = rng.integers(-1000, 1000, size=nbp * 37)
    partitions = run_sort(psrs_sort, keys, nbp)
    assert len(partitions) == nbp
    assert is_permutation(partitions, keys)
    assert all(is_locally_sorted(p) for p in partitions)
    assert is_globally_ordered(partitions)


def test_many_duplicates():
    keys = [7] * 12 + [3] * 4
    partitions = run_sort(psrs_sort, keys, 4)
    assert is_permutation(partitions, keys)
    assert is_globally_ordered(partitions)


def test_conservation_after_exchange():
    counts = {}
    lock = threading.Lock()

    def on_round(i, local):
        with lock:
            counts.setdefault(i, []).append(local.size)

    run_sort(psrs_sort, numpy.arange(40)[::-1], 4, on_round=on_round)
    assert list(counts) == [0]
    assert len(counts[0]) == 4
    assert sum(counts[0]) == 40


def test_single_worker_is_local_sort():
    calls = []
    partitions = run_sort(psrs_sort, EXAMPLE, 1, on_round=lambda i, local: calls.append(i))
    assert_array_equal(partitions[0], sorted(EXAMPLE))
    assert calls == []


def test_empty_input():
    partitions = run_sort(psrs_sort, [], 4)
    assert [p.size for p in partitions] == [0, 0, 0, 0]


def test_verbose_trace(capsys):
    run_sort(psrs_sort, EXAMPLE, 2, verbose=True)
    out = capsys.readouterr().out
    assert "Rang 0 : pivots" in out
    assert "Rang 1 : paquets de tailles" in out


def test_unequal_partitions_with_an_empty_rank():
    # rang 0 vide : echantillons [0, 0], rang 1 : [1, 4] -> pivot 1
    chunks = [[], [3, 1, 2, 4]]
    partitions = run_spmd(2, lambda comm: psrs_sort(comm, chunks[comm.rank]))
    assert [p.tolist() for p in partitions] == [[1], [2, 3, 4]]


def test_empty_input_goes_through_the_exchange():
    rounds = []
    run_sort(psrs_sort, [], 4, on_round=lambda i, local: rounds.append(local.size))
    assert rounds == [0, 0, 0, 0]
