"""
Choix des pivots.

PSRS : echantillonnage regulier a deux niveaux. Chaque processus donne P
echantillons de son tableau trie, le coordinateur trie les P*P echantillons
et garde P-1 pivots a pas regulier.

Hypercube : a chaque tour, chaque processus donne son premier element, le
coordinateur prend la mediane des P valeurs. Peu couteux mais sensible aux
donnees mal reparties.
"""
import numpy as np

from .local_sort import KEY_DTYPE, local_sort

# Valeur envoyee par un processus dont le tableau est vide
EMPTY_SAMPLE = 0


def sample_indices(n_local, p):
    # Formule de reference i*n_local/P*P en division entiere. Elle depasse la
    # fin du tableau des que i*n_local/P*P >= n_local : on borne au dernier
    # indice, les echantillons peuvent alors se repeter.
    return [min((i * n_local) // p * p, n_local - 1) for i in range(p)]


def regular_samples(sorted_local, p):
    n_local = len(sorted_local)
    if n_local == 0:
        return np.full(p, EMPTY_SAMPLE, dtype=KEY_DTYPE)
    return np.asarray(sorted_local, dtype=KEY_DTYPE)[sample_indices(n_local, p)]


def pivot_offsets(p):
    return [(i + 1) * p + p // 2 - 1 for i in range(p - 1)]


def select_pivots(all_samples, p):
    """P-1 pivots parmi les P*P echantillons rassembles sur le coordinateur."""
    samples = local_sort(np.concatenate([np.asarray(s, dtype=KEY_DTYPE) for s in all_samples]))
    if samples.size != p * p:
        raise ValueError(f"{samples.size} echantillons recus, {p * p} attendus")
    return samples[pivot_offsets(p)]


def first_element_sample(local):
    return int(local[0]) if len(local) > 0 else EMPTY_SAMPLE


def median_pivot(samples):
    samples = local_sort(samples)
    return int(samples[samples.size // 2])
