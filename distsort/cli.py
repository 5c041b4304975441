"""
Lancement d'un tri distribue depuis la ligne de commande.

Chaque processus lit les memes arguments et fait les memes verifications ;
seul le coordinateur affiche. Les cles sont distribuees par scatter en blocs
de N/P elements.

Execution :
    mpirun -np 4 python -m mpi4py -m distsort --algorithm psrs 5 2 8 1 9 3 7 4 6 10 12 11
    python -m distsort --workers 4 --algorithm hypercube --check 5 2 8 1 9 3 7 4 6 10 12 11
"""
import argparse
import sys

import numpy as np

from . import ALGORITHMS
from .checks import verify
from .config import parse_keys, split_blocks, validate_job
from .errors import ConfigurationError
from .report import format_keys, print_timings, root_print
from .thread_comm import ThreadGroup
from .topology import hypercube_dimension

LABELS = {
    "psrs": "PSRS",
    "hypercube": "quicksort hypercube",
}


# Options declarees par build_parser. Tout autre jeton de la ligne de commande
# est une cle, y compris '-x' ou '-5abc' (lus comme atoi)
VALUE_OPTIONS = ("--algorithm", "--workers")
FLAG_OPTIONS = ("-h", "--help", "--strict", "--no-baseline", "--check",
                "--print-result", "--timings", "--verbose")


def split_argv(argv):
    """(options, cles) : les cles gardent leur ordre d'apparition."""
    options, keys = [], []
    tokens = iter(argv)
    for token in tokens:
        name = token.split("=", 1)[0]
        if name in FLAG_OPTIONS:
            options.append(token)
        elif name in VALUE_OPTIONS:
            options.append(token)
            if "=" not in token:
                value = next(tokens, None)
                if value is not None:
                    options.append(value)
        else:
            keys.append(token)
    return options, keys


def build_parser(algorithm=None):
    parser = argparse.ArgumentParser(
        prog="distsort", allow_abbrev=False,
        description="Tri distribue d'entiers (PSRS ou quicksort sur hypercube).")
    parser.add_argument("keys", nargs="*", metavar="KEY",
                        help="entiers a trier (lus comme atoi : un jeton invalide vaut 0)")
    if algorithm is None:
        parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), default="psrs")
    parser.add_argument("--workers", type=int, default=None,
                        help="simuler N processus par des threads au lieu de MPI")
    parser.add_argument("--strict", action="store_true",
                        help="refuser les jetons qui ne sont pas des entiers")
    parser.add_argument("--no-baseline", dest="baseline", action="store_false",
                        help="ne pas chronometrer le tri sequentiel")
    parser.add_argument("--check", action="store_true",
                        help="verifier le resultat sur le coordinateur")
    parser.add_argument("--print-result", action="store_true",
                        help="afficher le tableau final de chaque processus")
    parser.add_argument("--timings", action="store_true",
                        help="afficher les temps de chaque processus")
    parser.add_argument("--verbose", action="store_true",
                        help="trace de chaque etape, par processus")
    return parser


def sequential_time(comm, keys):
    deb = comm.Wtime()
    np.sort(keys)
    fin = comm.Wtime()
    return fin - deb


def run_job(comm, args, algorithm):
    """Corps SPMD du programme, execute par chaque processus. Renvoie le code de sortie."""
    nbp = comm.size

    try:
        keys = parse_keys(args.keys, strict=args.strict)
        validate_job(keys.size, nbp, algorithm)
    except ConfigurationError as exc:
        root_print(comm, exc)
        return 1
    n = keys.size

    root_print(comm, f"Tableau d'entree de {n} elements : {format_keys(keys)}")
    if algorithm == "hypercube":
        root_print(comm, f"Hypercube de dimension {hypercube_dimension(nbp)} avec {nbp} processus")

    chunks = split_blocks(keys, nbp) if comm.is_coordinator else None
    local = comm.scatter(chunks)

    comm.Barrier()
    deb = comm.Wtime()
    local = ALGORITHMS[algorithm](comm, local, verbose=args.verbose)
    fin = comm.Wtime()

    all_times = comm.gather(fin - deb)
    partitions = comm.gather(local) if (args.check or args.print_result) else None

    status = 0
    if comm.is_coordinator:
        print(f"Temps parallele ({LABELS[algorithm]}) : {n} elements tries en {fin - deb:.6f} s")

        if args.baseline:
            print("Tri sequentiel des memes donnees...")
            print(f"Temps sequentiel : {n} elements tries en {sequential_time(comm, keys):.6f} s")

        if args.timings:
            print_timings(all_times)

        if args.print_result:
            print(f"\n--- Tableau final par processus ---")
            for p, part in enumerate(partitions):
                print(f"  Processus {p} : {format_keys(part)}")

        if args.check:
            results = verify(partitions, keys, ordered=(algorithm == "psrs"))
            print(f"\nVerification : " + ", ".join(f"{k}={v}" for k, v in results.items()))
            if not all(results.values()):
                status = 2

    return comm.bcast(status)


def main(argv=None, algorithm=None):
    parser = build_parser(algorithm)
    options, keys = split_argv(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(options)
    args.keys = keys
    algorithm = algorithm or args.algorithm

    if args.workers is not None:
        if args.workers < 1:
            parser.error("--workers doit etre >= 1")
        return ThreadGroup(args.workers).run(run_job, args, algorithm)[0]

    # mpi4py initialise MPI a l'import : seulement si on ne simule pas
    from .mpi_comm import MPIComm
    return run_job(MPIComm(), args, algorithm)
