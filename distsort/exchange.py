"""
Echanges de donnees en deux phases : d'abord les tailles, puis les donnees.

Le recepteur connait la taille exacte avant l'arrivee des donnees et alloue
son buffer en consequence.
"""
import numpy as np

from .envelope import Envelope
from .local_sort import KEY_DTYPE, as_keys


def exchange_counts(comm, send_counts):
    recv_counts = np.zeros(comm.size, dtype=np.int64)
    comm.Alltoall(np.asarray(send_counts, dtype=np.int64), recv_counts)
    return recv_counts


def exchange_buckets(comm, buckets):
    """Envoie buckets[j] au processus j, renvoie la concatenation des paquets recus.

    Les paquets recus sont ranges par rang d'origine.
    """
    if len(buckets) != comm.size:
        raise ValueError(f"{len(buckets)} paquets pour {comm.size} processus")

    # Phase 1 : tailles
    send_env = Envelope.from_counts([len(b) for b in buckets])
    recv_env = Envelope.from_counts(exchange_counts(comm, send_env.counts))

    # Phase 2 : donnees
    sendbuf = np.concatenate([as_keys(b) for b in buckets])
    recvbuf = np.empty(recv_env.total, dtype=KEY_DTYPE)
    comm.Alltoallv(sendbuf, send_env, recvbuf, recv_env)
    return recvbuf


def exchange_with_neighbour(comm, sendbuf, dest, source):
    sendbuf = as_keys(sendbuf)

    # Phase 1 : tailles
    recv_size = comm.sendrecv(int(sendbuf.size), dest=dest, source=source)

    # Phase 2 : donnees
    recvbuf = np.empty(recv_size, dtype=KEY_DTYPE)
    comm.Sendrecv(sendbuf, dest, recvbuf, source)
    return recvbuf
