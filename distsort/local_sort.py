import numpy as np

KEY_DTYPE = np.int64


def as_keys(values):
    return np.asarray(values, dtype=KEY_DTYPE)


def local_sort(keys):
    # Toujours un nouveau buffer : l'ancien n'est jamais modifie
    return np.sort(as_keys(keys), kind="quicksort")
