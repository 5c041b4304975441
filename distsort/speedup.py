"""
Mesures de temps : ecriture/lecture CSV, speedup et efficacite.

Une ligne par mesure : algorithm,procs,size,seconds. Le tri sequentiel est
enregistre avec algorithm="sequentiel" et procs=1.
"""
import csv
import os
from collections import defaultdict

SEQUENTIAL = "sequentiel"
FIELDS = ["algorithm", "procs", "size", "seconds"]


def append_rows(path, rows):
    new_file = not os.path.exists(path) or os.path.getsize(path) == 0
    with open(path, "a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        if new_file:
            writer.writeheader()
        for row in rows:
            writer.writerow(row)


def load_timings(path):
    """{algorithm: {procs: {size: seconds}}}. Une mesure repetee garde le meilleur temps."""
    timings = defaultdict(lambda: defaultdict(dict))
    with open(path, newline="") as f:
        for row in csv.DictReader(f):
            algo, procs, size = row["algorithm"], int(row["procs"]), int(row["size"])
            seconds = float(row["seconds"])
            best = timings[algo][procs].get(size)
            timings[algo][procs][size] = seconds if best is None else min(best, seconds)
    return {algo: dict(per_procs) for algo, per_procs in timings.items()}


def speedup(t_seq, t_par):
    return t_seq / t_par


def efficiency(t_seq, t_par, procs):
    return t_seq / (procs * t_par)


def speedup_table(timings, sizes=None):
    """Lignes (algorithm, procs, {size: (speedup, efficacite)}) par rapport au sequentiel."""
    t_seq = timings[SEQUENTIAL][1]
    if sizes is None:
        sizes = sorted(t_seq)
    rows = []
    for algo in sorted(a for a in timings if a != SEQUENTIAL):
        for procs in sorted(timings[algo]):
            data = timings[algo][procs]
            values = {s: (speedup(t_seq[s], data[s]), efficiency(t_seq[s], data[s], procs))
                      for s in sizes if s in data and s in t_seq}
            rows.append((algo, procs, values))
    return rows
