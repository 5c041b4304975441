"""
Interface du support de communication utilise par les algorithmes de tri.

Les noms suivent mpi4py : minuscules pour les objets Python (pickle),
majuscules pour les buffers numpy. Deux implementations :
    - MPIComm    (mpi_comm.py)    : mpi4py, un processus par rang
    - ThreadComm (thread_comm.py) : un thread par rang, dans un seul processus
"""
from abc import ABC, abstractmethod

COORDINATOR = 0


class Communicator(ABC):
    rank: int
    size: int
    topology = None

    def Get_rank(self):
        return self.rank

    def Get_size(self):
        return self.size

    @property
    def is_coordinator(self):
        return self.rank == COORDINATOR

    # --- Collectives sur objets Python ---

    @abstractmethod
    def scatter(self, chunks, root=COORDINATOR):
        ...

    @abstractmethod
    def gather(self, obj, root=COORDINATOR):
        ...

    @abstractmethod
    def bcast(self, obj, root=COORDINATOR):
        ...

    # --- Collectives sur buffers ---

    @abstractmethod
    def Alltoall(self, sendbuf, recvbuf):
        """Un element de sendbuf par processus, recvbuf[j] vient du processus j."""

    @abstractmethod
    def Alltoallv(self, sendbuf, send_env, recvbuf, recv_env):
        """Echange tous-vers-tous de blocs de taille variable (Envelope)."""

    @abstractmethod
    def Barrier(self):
        ...

    # --- Point a point ---

    @abstractmethod
    def sendrecv(self, sendobj, dest, source):
        ...

    @abstractmethod
    def Sendrecv(self, sendbuf, dest, recvbuf, source):
        ...

    # --- Topologie ---

    @abstractmethod
    def cart_create(self, topology):
        """Communicateur associe a une CartTopology (collectif)."""

    @property
    def coords(self):
        return self.topology.coords(self.rank)

    def shift(self, direction, disp=1):
        return self.topology.shift(self.rank, direction, disp)

    def Free(self):
        pass

    @abstractmethod
    def Wtime(self):
        ...
