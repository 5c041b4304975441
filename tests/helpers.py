from distsort.config import split_blocks
from distsort.thread_comm import ThreadGroup

EXAMPLE = [5, 2, 8, 1, 9, 3, 7, 4, 6, 10, 12, 11]

TIMEOUT = 10


def run_spmd(nbp, target, *args, **kwargs):
    return ThreadGroup(nbp, timeout=TIMEOUT).run(target, *args, **kwargs)


def run_sort(sort, keys, nbp, **kwargs):
    """Lance sort sur nbp rangs (threads), renvoie les tableaux finaux par rang."""
    chunks = split_blocks(keys, nbp)
    return run_spmd(nbp, lambda comm: sort(comm, chunks[comm.rank], **kwargs))
