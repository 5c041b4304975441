"""
Speedup et efficacite des tris distribues a partir des temps mesures par
benchmark_mpi.py.

Execution : python plot_speedup.py timings.csv --output-dir .
"""
import argparse
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from distsort.speedup import SEQUENTIAL, efficiency, load_timings, speedup, speedup_table

styles = {
    "psrs": ('s', '-.'),
    "hypercube": ('^', '-'),
}


def print_tables(timings, sizes):
    header = f"{'Version':<25} " + " ".join(f"{'N=' + str(s):>10}" for s in sizes)
    table = speedup_table(timings, sizes)

    print("Speedup")
    print(header)
    print("-" * len(header))
    for algo, procs, values in table:
        cells = " ".join(f"{values[s][0]:>10.2f}" if s in values else f"{'-':>10}" for s in sizes)
        print(f"{algo + ' (' + str(procs) + ' proc)':<25} {cells}")

    print("\nEfficacité")
    print(header)
    print("-" * len(header))
    for algo, procs, values in table:
        cells = " ".join(f"{values[s][1]:>10.2f}" if s in values else f"{'-':>10}" for s in sizes)
        print(f"{algo + ' (' + str(procs) + ' proc)':<25} {cells}")


def plot(timings, sizes, output_dir):
    t_seq = timings[SEQUENTIAL][1]
    algos = sorted(a for a in timings if a != SEQUENTIAL)
    all_procs = sorted({1} | {p for a in algos for p in timings[a]})

    fig, axes = plt.subplots(1, 2, figsize=(14, 6))

    # --- Speedup ---
    ax1 = axes[0]
    ax1.plot(1, 1, 'kD', markersize=8, label="Séquentiel", zorder=5)
    for size in sizes:
        for algo in algos:
            marker, line = styles.get(algo, ('o', '--'))
            procs = [p for p in sorted(timings[algo]) if size in timings[algo][p]]
            sp = [speedup(t_seq[size], timings[algo][p][size]) for p in procs]
            ax1.plot(procs, sp, marker=marker, linestyle=line, label=f"{algo} N={size}")

    ax1.plot(all_procs, all_procs, 'k:', linewidth=1.5, label="Idéal")
    ax1.set_xlabel("Nombre de processus (P)", fontsize=12)
    ax1.set_ylabel("Speedup S(P)", fontsize=12)
    ax1.set_title("Speedup", fontsize=14)
    ax1.legend(fontsize=6, loc="upper left", ncol=2)
    ax1.set_xticks(all_procs)
    ax1.grid(True, alpha=0.3)

    # --- Efficacité ---
    ax2 = axes[1]
    ax2.plot(1, 1, 'kD', markersize=8, label="Séquentiel", zorder=5)
    for size in sizes:
        for algo in algos:
            marker, line = styles.get(algo, ('o', '--'))
            procs = [p for p in sorted(timings[algo]) if size in timings[algo][p]]
            eff = [efficiency(t_seq[size], timings[algo][p][size], p) for p in procs]
            ax2.plot(procs, eff, marker=marker, linestyle=line, label=f"{algo} N={size}")

    ax2.axhline(y=1.0, color='k', linestyle=':', linewidth=1.5, label="Idéal")
    ax2.set_xlabel("Nombre de processus (P)", fontsize=12)
    ax2.set_ylabel("Efficacité E(P)", fontsize=12)
    ax2.set_title("Efficacité", fontsize=14)
    ax2.legend(fontsize=6, loc="best", ncol=2)
    ax2.set_xticks(all_procs)
    ax2.set_ylim(0, 1.15)
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()
    path = os.path.join(output_dir, "speedup_efficacite.png")
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return path


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("timings", nargs="?", default="timings.csv")
    parser.add_argument("--output-dir", default=".")
    args = parser.parse_args(argv)

    timings = load_timings(args.timings)
    if SEQUENTIAL not in timings:
        parser.error(f"aucun temps sequentiel dans {args.timings}")
    sizes = sorted(timings[SEQUENTIAL][1])

    print_tables(timings, sizes)
    path = plot(timings, sizes, args.output_dir)
    print(f"\nFigure sauvegardee : {path}")


if __name__ == "__main__":
    main()
