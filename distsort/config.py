import re

import numpy as np

from .errors import ConfigurationError, KeyParseError
from .local_sort import as_keys
from .topology import is_power_of_two

# Prefixe lu par atoi : espaces, signe optionnel, chiffres
_ATOI = re.compile(r"\s*([+-]?\d+)")
_STRICT = re.compile(r"\s*[+-]?\d+\s*")

KEY_MIN = np.iinfo(np.int64).min
KEY_MAX = np.iinfo(np.int64).max


def parse_key(token, strict=False):
    """Lit un entier comme atoi : '12abc' -> 12, 'abc' -> 0.

    En mode strict, tout jeton qui n'est pas exactement un entier est refuse.
    """
    if strict and not _STRICT.fullmatch(token):
        raise KeyParseError(token)
    match = _ATOI.match(token)
    if match is None:
        return 0
    value = int(match.group(1))
    if not KEY_MIN <= value <= KEY_MAX:
        raise KeyParseError(token)
    return value


def parse_keys(tokens, strict=False):
    return as_keys([parse_key(t, strict) for t in tokens])


def validate_job(n, nbp, algorithm):
    """Verifications faites avant tout tri. Ne depend que de (n, nbp, algorithm)."""
    if algorithm == "hypercube" and not is_power_of_two(nbp):
        raise ConfigurationError(
            f"Erreur : le nombre de processus ({nbp}) doit etre une puissance de 2\n"
            f"Utilisation : mpirun -np <puissance de 2> python -m mpi4py "
            f"quicksort_hypercube_mpi.py <elements>")
    if n % nbp != 0:
        raise ConfigurationError(
            f"Erreur : le nombre d'elements ({n}) doit etre divisible "
            f"par le nombre de processus ({nbp})")


def split_blocks(keys, nbp):
    """Decoupe en nbp blocs consecutifs de meme taille (a distribuer par scatter)."""
    keys = as_keys(keys)
    if keys.size % nbp != 0:
        raise ConfigurationError(
            f"Erreur : le nombre d'elements ({keys.size}) doit etre divisible "
            f"par le nombre de processus ({nbp})")
    return np.split(keys, nbp)
