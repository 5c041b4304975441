"""
Quicksort parallele sur un hypercube de dimension d (P = 2^d processus).

A chaque tour i :
    - chaque processus envoie son premier element au coordinateur, qui en
      prend la mediane comme pivot et la diffuse
    - chaque processus coupe ses cles en (<= pivot, > pivot)
    - il echange une moitie avec son voisin dans la dimension i : le bit 0
      garde les petites valeurs, le bit 1 les grandes
    - barriere avant le tour suivant

Le pivot est global a chaque tour : seules l'ordre local et la conservation
des cles sont garanties, pas l'ordre entre processus.

Execution : mpirun -np 4 python -m mpi4py quicksort_hypercube_mpi.py 5 2 8 1 9 3 7 4 6 0 15 12
"""
import numpy as np

from .errors import ConfigurationError
from .exchange import exchange_with_neighbour
from .local_sort import local_sort
from .partition import keep_and_send, split_at
from .pivots import first_element_sample, median_pivot
from .report import trace
from .topology import CartTopology, hypercube_dimension, is_power_of_two


def choose_pivot(comm, local):
    samples = comm.gather(first_element_sample(local))
    pivot = median_pivot(samples) if comm.is_coordinator else None
    return comm.bcast(pivot)


def hypercube_round(comm, cube, local, dimension, verbose=False):
    """Un tour de l'algorithme dans la dimension donnee, renvoie le nouveau tableau local."""
    pivot = choose_pivot(comm, local)
    low, high = split_at(local, pivot)

    bit = cube.coords[dimension]
    keep, send = keep_and_send(low, high, bit)

    source, dest = cube.shift(dimension, 1)
    received = exchange_with_neighbour(cube, send, dest, source)
    trace(comm, verbose, f"dimension {dimension}, pivot {pivot}, bit {bit} : "
                         f"{send.size} envoyes a {dest}, {received.size} recus de {source}")

    local = np.concatenate([keep, received])
    cube.Barrier()
    return local


def hypercube_sort(comm, local, on_round=None, verbose=False):
    nbp = comm.size
    if not is_power_of_two(nbp):
        raise ConfigurationError(f"Erreur : le nombre de processus ({nbp}) doit etre une puissance de 2")
    dimension = hypercube_dimension(nbp)

    local = local_sort(local)

    # P = 1 : aucun tour. Les tableaux vides participent a tous les tours
    if dimension == 0:
        trace(comm, verbose, "aucun echange necessaire")
        return local

    cube = comm.cart_create(CartTopology.hypercube(dimension))
    try:
        for i in range(dimension):
            local = hypercube_round(comm, cube, local, i, verbose)
            if on_round is not None:
                on_round(i, local)
    finally:
        cube.Free()

    return local_sort(local)
