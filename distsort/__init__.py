"""
Tri distribue sur P processus MPI.

Deux algorithmes, meme contrat (donnees non triees reparties -> P partitions
triees) :
    - psrs_sort      : tri par echantillonnage regulier (PSRS)
    - hypercube_sort : quicksort sur hypercube (P = 2^d)
"""
from .errors import ConfigurationError, DistSortError, ExchangeError, KeyParseError
from .hypercube import hypercube_sort
from .local_sort import local_sort
from .psrs import psrs_sort

ALGORITHMS = {
    "psrs": psrs_sort,
    "hypercube": hypercube_sort,
}

__all__ = [
    "ALGORITHMS",
    "ConfigurationError",
    "DistSortError",
    "ExchangeError",
    "KeyParseError",
    "hypercube_sort",
    "local_sort",
    "psrs_sort",
]
