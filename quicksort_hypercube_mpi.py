"""
Quicksort parallele sur hypercube (nombre de processus = puissance de 2) et
comparaison avec le tri sequentiel.

Execution : mpirun --oversubscribe -np 4 python -m mpi4py quicksort_hypercube_mpi.py 5 2 8 1 9 3 7 4 6 0 15 12
"""
import sys

from distsort.cli import main

if __name__ == "__main__":
    sys.exit(main(algorithm="hypercube"))
