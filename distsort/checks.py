"""Verifications du resultat d'un tri distribue (tableaux locaux ranges par rang)."""
import numpy as np

from .local_sort import as_keys


def is_locally_sorted(keys):
    keys = as_keys(keys)
    return bool(np.all(keys[:-1] <= keys[1:]))


def is_permutation(partitions, original):
    merged = np.sort(np.concatenate([as_keys(p) for p in partitions])) if partitions else as_keys([])
    return np.array_equal(merged, np.sort(as_keys(original)))


def is_globally_ordered(partitions):
    """Toute cle du rang i est <= toute cle du rang j > i (rangs vides ignores)."""
    last = None
    for part in partitions:
        part = as_keys(part)
        if part.size == 0:
            continue
        if last is not None and part.min() < last:
            return False
        last = part.max()
    return True


def total_count(partitions):
    return sum(len(p) for p in partitions)


def verify(partitions, original, ordered):
    """Dictionnaire des proprietes verifiees, ordered=True pour exiger l'ordre global."""
    results = {
        "conservation": total_count(partitions) == len(original),
        "permutation": is_permutation(partitions, original),
        "local_order": all(is_locally_sorted(p) for p in partitions),
    }
    if ordered:
        results["global_order"] = is_globally_ordered(partitions)
    return results
