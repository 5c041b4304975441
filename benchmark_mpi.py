"""
Mesure du temps de tri distribue pour plusieurs tailles de tableau.

Les temps sont ajoutes a un fichier CSV lu ensuite par plot_speedup.py.

Execution :
    mpirun -np 4 python -m mpi4py benchmark_mpi.py --algorithm psrs
    mpirun -np 4 python -m mpi4py benchmark_mpi.py --algorithm hypercube
"""
import argparse

import numpy as np
from mpi4py import MPI

from distsort import ALGORITHMS
from distsort.config import split_blocks, validate_job
from distsort.errors import ConfigurationError
from distsort.mpi_comm import MPIComm
from distsort.speedup import SEQUENTIAL, append_rows

# Tailles a tester
sizes = [1000, 10000, 50000]


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), default="psrs")
    parser.add_argument("--output", default="timings.csv")
    parser.add_argument("--sizes", type=int, nargs="+", default=sizes)
    args = parser.parse_args()

    comm = MPIComm(MPI.COMM_WORLD)
    rank = comm.rank
    nbp = comm.size
    sort = ALGORITHMS[args.algorithm]

    if rank == 0:
        print(f"Tri {args.algorithm} MPI - {nbp} processus")

    rows = []
    for array_size in args.sizes:
        try:
            validate_job(array_size, nbp, args.algorithm)
        except ConfigurationError as exc:
            if rank == 0:
                print(exc)
            continue

        if rank == 0:
            np.random.seed(42)
            array = np.random.randint(0, 100001, size=array_size)
            chunks = split_blocks(array, nbp)
        else:
            chunks = None

        local = comm.scatter(chunks)

        comm.Barrier()
        start_time = comm.Wtime()
        local = sort(comm, local)
        comm.Barrier()
        end_time = comm.Wtime()

        if rank == 0:
            elapsed = end_time - start_time
            start_seq = comm.Wtime()
            np.sort(array)
            t_seq = comm.Wtime() - start_seq
            print(f"Taille: {array_size:7d} | Temps: {elapsed:.6f}s | Sequentiel: {t_seq:.6f}s")
            rows.append({"algorithm": args.algorithm, "procs": nbp,
                         "size": array_size, "seconds": elapsed})
            rows.append({"algorithm": SEQUENTIAL, "procs": 1,
                         "size": array_size, "seconds": t_seq})

    if rank == 0 and rows:
        append_rows(args.output, rows)
        print(f"Temps ajoutes a {args.output}")


if __name__ == "__main__":
    main()
