"""
Tri parallele par echantillonnage regulier (PSRS).

    1. tri local
    2. P echantillons reguliers par processus, rassembles sur le coordinateur
    3. le coordinateur choisit P-1 pivots et les diffuse
    4. chaque processus repartit ses cles en P paquets
    5. echange tous-vers-tous des paquets (tailles puis donnees)
    6. tri local final

A la fin, toute cle du processus i est <= toute cle du processus j > i.

Execution : mpirun -np 4 python -m mpi4py psrs_mpi.py 5 2 8 1 9 3 7 4 6 10 12 11
"""
from .exchange import exchange_buckets
from .local_sort import local_sort
from .partition import partition_buckets
from .pivots import regular_samples, select_pivots
from .report import trace


def psrs_sort(comm, local, on_round=None, verbose=False):
    nbp = comm.size

    # Etape 1 : tri local
    local = local_sort(local)

    # P = 1 : aucun echange. Un tableau vide (N = 0 ou partition vide) suit le
    # chemin normal avec des echantillons sentinelles et des tailles nulles
    if nbp == 1:
        trace(comm, verbose, "aucun echange necessaire")
        return local

    # Etape 2 : echantillonnage regulier
    samples = regular_samples(local, nbp)
    all_samples = comm.gather(samples)

    # Etape 3 : pivots choisis par le coordinateur puis diffuses
    pivots = select_pivots(all_samples, nbp) if comm.is_coordinator else None
    pivots = comm.bcast(pivots)
    trace(comm, verbose, f"pivots {pivots.tolist()}")

    # Etape 4 : repartition en paquets
    buckets = partition_buckets(local, pivots)
    trace(comm, verbose, f"paquets de tailles {[len(b) for b in buckets]}")

    # Etape 5 : echange tous-vers-tous
    local = exchange_buckets(comm, buckets)
    if on_round is not None:
        on_round(0, local)

    # Etape 6 : tri final
    return local_sort(local)
