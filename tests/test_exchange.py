import numpy
import pytest
from numpy.testing import assert_array_equal

from distsort.exchange import exchange_buckets, exchange_counts, exchange_with_neighbour

from .helpers import run_spmd


def test_exchange_counts():
    results = run_spmd(2, lambda comm: exchange_counts(comm, [comm.rank, comm.rank + 5]).tolist())
    assert results == [[0, 1], [5, 6]]


def test_exchange_buckets_groups_by_origin():
    def target(comm):
        # paquet j du rang r : j copies de 10*r + j
        buckets = [numpy.full(j, 10 * comm.rank + j) for j in range(comm.size)]
        return exchange_buckets(comm, buckets).tolist()

    results = run_spmd(3, target)
    assert results[0] == []
    assert results[1] == [1, 11, 21]
    assert results[2] == [2, 2, 12, 12, 22, 22]


def test_exchange_buckets_conserves_keys():
    def target(comm):
        rng = numpy.random.default_rng(comm.rank)
        buckets = [rng.integers(0, 100, size=rng.integers(0, 5)) for _ in range(comm.size)]
        sent = sum(len(b) for b in buckets)
        return sent, exchange_buckets(comm, buckets).size

    results = run_spmd(4, target)
    assert sum(s for s, _ in results) == sum(r for _, r in results)


def test_exchange_buckets_needs_one_bucket_per_rank():
    with pytest.raises(ValueError):
        run_spmd(2, lambda comm: exchange_buckets(comm, [numpy.arange(2)]))


def test_exchange_with_neighbour():
    def target(comm):
        partner = comm.rank ^ 1
        return exchange_with_neighbour(comm, numpy.arange(comm.rank * 2), partner, partner)

    results = run_spmd(2, target)
    assert_array_equal(results[0], [0, 1])
    assert results[1].size == 0
