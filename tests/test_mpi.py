import numpy
import pytest

pytest.importorskip("mpi4py.MPI")

from distsort.checks import is_globally_ordered, is_locally_sorted, is_permutation  # noqa: E402
from distsort.hypercube import hypercube_sort  # noqa: E402
from distsort.mpi_comm import MPIComm  # noqa: E402
from distsort.psrs import psrs_sort  # noqa: E402
from distsort.topology import is_power_of_two  # noqa: E402


def split(keys, comm):
    keys = comm.bcast(keys)
    return comm.scatter(numpy.array_split(keys, comm.size) if comm.is_coordinator else None)


def heal(local, comm):
    return comm.bcast(comm.gather(local))


@pytest.mark.mpi
def test_psrs_on_comm_world():
    comm = MPIComm()
    keys = numpy.random.default_rng(42).integers(-500, 500, size=25 * comm.size)
    local = psrs_sort(comm, split(keys, comm))

    partitions = heal(local, comm)
    assert is_permutation(partitions, keys)
    assert is_globally_ordered(partitions)
    assert all(is_locally_sorted(p) for p in partitions)


@pytest.mark.mpi
def test_hypercube_on_comm_world():
    comm = MPIComm()
    if not is_power_of_two(comm.size):
        pytest.skip("nombre de processus qui n'est pas une puissance de 2")
    keys = numpy.random.default_rng(42).integers(0, 1000, size=16 * comm.size)
    local = hypercube_sort(comm, split(keys, comm))

    partitions = heal(local, comm)
    assert is_permutation(partitions, keys)
    assert all(is_locally_sorted(p) for p in partitions)
