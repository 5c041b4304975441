"""
Tri parallele par echantillonnage regulier (PSRS) et comparaison avec le tri
sequentiel.

Execution : mpirun -np 4 python -m mpi4py psrs_mpi.py 5 2 8 1 9 3 7 4 6 10 12 11
"""
import sys

from distsort.cli import main

if __name__ == "__main__":
    sys.exit(main(algorithm="psrs"))
