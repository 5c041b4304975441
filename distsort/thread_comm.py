"""
Support de communication en memoire : un thread par rang.

Chaque collective publie la contribution du rang dans une case partagee,
attend tous les autres rangs (threading.Barrier), copie ce dont il a besoin,
puis attend une seconde fois avant que les cases puissent etre reecrites.
Le point a point passe par une file (queue.Queue) par couple (source, dest).
Les donnees sont toujours copiees : aucun rang ne garde une reference sur le
buffer d'un autre.

Utilisation :
    results = ThreadGroup(4).run(lambda comm: psrs_sort(comm, chunks[comm.rank]))
"""
import copy
import queue
import threading
import time

import numpy as np

from .comm import COORDINATOR, Communicator
from .errors import ExchangeError

POLL_INTERVAL = 0.05


class ThreadGroup:
    def __init__(self, size, timeout=None):
        if size < 1:
            raise ValueError("il faut au moins un rang")
        self.size = size
        self.timeout = timeout
        self._barrier = threading.Barrier(size, timeout=timeout)
        self._slots = [None] * size
        self._mailboxes = {(src, dst): queue.Queue()
                           for src in range(size) for dst in range(size)}

    def communicators(self):
        return [ThreadComm(self, rank) for rank in range(self.size)]

    @property
    def aborted(self):
        return self._barrier.broken

    def abort(self):
        # Debloque tous les rangs en attente dans une collective
        self._barrier.abort()

    def run(self, target, *args, **kwargs):
        """Execute target(comm, *args, **kwargs) sur chaque rang.

        Renvoie la liste des resultats indexee par rang. Si un rang leve une
        exception, le groupe est abandonne et l'exception d'origine est
        relevee dans l'appelant.
        """
        results = [None] * self.size
        errors = [None] * self.size

        def worker(comm):
            try:
                results[comm.rank] = target(comm, *args, **kwargs)
            except BaseException as exc:
                errors[comm.rank] = exc
                self.abort()

        threads = [threading.Thread(target=worker, args=(comm,), name=f"rank-{comm.rank}")
                   for comm in self.communicators()]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        # Les BrokenBarrierError ne sont que la consequence de l'abandon
        failures = [exc for exc in errors if exc is not None]
        for exc in failures:
            if not isinstance(exc, threading.BrokenBarrierError):
                raise exc
        if failures:
            raise failures[0]
        return results


def _copy(obj):
    if isinstance(obj, np.ndarray):
        return obj.copy()
    return copy.deepcopy(obj)


class ThreadComm(Communicator):

    def __init__(self, group, rank, topology=None):
        self.group = group
        self.rank = rank
        self.size = group.size
        self.topology = topology

    def _exchange(self, value, collect):
        # collect lit les cases entre les deux barrieres, pendant qu'aucun
        # rang ne peut encore les reecrire
        group = self.group
        group._slots[self.rank] = value
        group._barrier.wait()
        try:
            return collect(group._slots)
        finally:
            group._barrier.wait()

    def scatter(self, chunks, root=COORDINATOR):
        return self._exchange(chunks if self.rank == root else None,
                              lambda slots: _copy(slots[root][self.rank]))

    def gather(self, obj, root=COORDINATOR):
        if self.rank != root:
            self._exchange(obj, lambda slots: None)
            return None
        return self._exchange(obj, lambda slots: [_copy(item) for item in slots])

    def bcast(self, obj, root=COORDINATOR):
        return self._exchange(obj if self.rank == root else None,
                              lambda slots: _copy(slots[root]))

    def Alltoall(self, sendbuf, recvbuf):
        def collect(slots):
            for peer, buf in enumerate(slots):
                recvbuf[peer] = buf[self.rank]
        self._exchange(sendbuf, collect)

    def Alltoallv(self, sendbuf, send_env, recvbuf, recv_env):
        def collect(slots):
            for peer, (buf, env) in enumerate(slots):
                if env.counts[self.rank] != recv_env.counts[peer]:
                    raise ExchangeError(
                        f"rang {self.rank} : {env.counts[self.rank]} elements envoyes par "
                        f"{peer}, {recv_env.counts[peer]} attendus")
                recv_env.block(recvbuf, peer)[...] = env.block(buf, self.rank)
        self._exchange((sendbuf, send_env), collect)

    def Barrier(self):
        self.group._barrier.wait()

    def _post(self, obj, dest):
        self.group._mailboxes[(self.rank, dest)].put(_copy(obj))

    def _receive(self, source):
        box = self.group._mailboxes[(source, self.rank)]
        timeout = self.group.timeout
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            if self.group.aborted:
                raise threading.BrokenBarrierError
            try:
                return box.get(timeout=POLL_INTERVAL)
            except queue.Empty:
                if deadline is not None and time.monotonic() > deadline:
                    raise TimeoutError(f"rang {self.rank} : rien recu de {source}")

    def sendrecv(self, sendobj, dest, source):
        self._post(sendobj, dest)
        return self._receive(source)

    def Sendrecv(self, sendbuf, dest, recvbuf, source):
        self._post(np.asarray(sendbuf), dest)
        data = self._receive(source)
        if data.size != recvbuf.size:
            raise ExchangeError(
                f"rang {self.rank} : {data.size} elements recus de {source}, "
                f"{recvbuf.size} attendus")
        recvbuf[...] = data

    def cart_create(self, topology):
        if topology.size != self.size:
            raise ValueError(f"grille {topology.dims} incompatible avec {self.size} rangs")
        return ThreadComm(self.group, self.rank, topology)

    def Wtime(self):
        return time.perf_counter()
