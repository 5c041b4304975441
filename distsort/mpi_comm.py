from mpi4py import MPI
from mpi4py.util import dtlib

from .comm import COORDINATOR, Communicator

# Tags des deux phases d'un echange point a point
TAG_SIZE = 0
TAG_DATA = 1


def _message(buf, env):
    return [buf, (env.counts.tolist(), env.displs.tolist()), dtlib.from_numpy_dtype(buf.dtype)]


class MPIComm(Communicator):
    """Communicator au-dessus d'un communicateur mpi4py."""

    def __init__(self, comm=None, topology=None):
        self.comm = MPI.COMM_WORLD if comm is None else comm
        self.rank = self.comm.Get_rank()
        self.size = self.comm.Get_size()
        self.topology = topology

    def scatter(self, chunks, root=COORDINATOR):
        return self.comm.scatter(chunks, root=root)

    def gather(self, obj, root=COORDINATOR):
        return self.comm.gather(obj, root=root)

    def bcast(self, obj, root=COORDINATOR):
        return self.comm.bcast(obj, root=root)

    def Alltoall(self, sendbuf, recvbuf):
        self.comm.Alltoall(sendbuf, recvbuf)

    def Alltoallv(self, sendbuf, send_env, recvbuf, recv_env):
        self.comm.Alltoallv(_message(sendbuf, send_env), _message(recvbuf, recv_env))

    def Barrier(self):
        self.comm.Barrier()

    def sendrecv(self, sendobj, dest, source):
        return self.comm.sendrecv(sendobj, dest=dest, sendtag=TAG_SIZE,
                                  source=source, recvtag=TAG_SIZE)

    def Sendrecv(self, sendbuf, dest, recvbuf, source):
        self.comm.Sendrecv(sendbuf, dest=dest, sendtag=TAG_DATA,
                           recvbuf=recvbuf, source=source, recvtag=TAG_DATA)

    def cart_create(self, topology):
        cart = self.comm.Create_cart(dims=list(topology.dims),
                                     periods=list(topology.periods), reorder=False)
        return MPIComm(cart, topology)

    @property
    def coords(self):
        return tuple(self.comm.Get_coords(self.rank))

    def shift(self, direction, disp=1):
        source, dest = self.comm.Shift(direction, disp)
        return (None if source == MPI.PROC_NULL else source,
                None if dest == MPI.PROC_NULL else dest)

    def Free(self):
        if self.comm != MPI.COMM_WORLD:
            self.comm.Free()

    def Wtime(self):
        return MPI.Wtime()
