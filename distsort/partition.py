import numpy as np

from .local_sort import as_keys


def bucket_ids(keys, pivots):
    # Nombre de pivots strictement inferieurs a la cle : une cle egale a un
    # pivot reste dans le paquet de gauche
    return np.searchsorted(as_keys(pivots), as_keys(keys), side="left")


def partition_buckets(keys, pivots):
    """Repartit keys en len(pivots)+1 paquets ordonnes.

    L'ordre relatif des cles est conserve dans chaque paquet, donc un tableau
    trie donne des paquets tries.
    """
    keys = as_keys(keys)
    ids = bucket_ids(keys, pivots)
    order = np.argsort(ids, kind="stable")
    counts = np.bincount(ids, minlength=len(pivots) + 1)
    return np.split(keys[order], np.cumsum(counts)[:-1])


def split_at(keys, pivot):
    keys = as_keys(keys)
    mask = keys <= pivot
    return keys[mask], keys[~mask]


def keep_and_send(low, high, bit):
    """(garde, envoie) selon la coordonnee du processus dans la dimension courante.

    bit 0 garde les petites valeurs et envoie les grandes, bit 1 l'inverse.
    """
    if bit == 0:
        return low, high
    return high, low
