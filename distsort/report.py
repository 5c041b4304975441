import numpy as np


def root_print(comm, *args):
    if comm.is_coordinator:
        print(*args, flush=True)


def trace(comm, verbose, message):
    if verbose:
        print(f"Rang {comm.rank} : {message}", flush=True)


def format_keys(keys):
    return " ".join(str(k) for k in keys)


def timing_summary(all_times):
    """Moyenne, ecart-type, min et max des temps par processus."""
    return {
        "mean": float(np.mean(all_times)),
        "std": float(np.std(all_times)),
        "min": float(np.min(all_times)),
        "max": float(np.max(all_times)),
    }


def print_timings(all_times):
    print(f"\n--- Temps par processus ---")
    for p, t in enumerate(all_times):
        print(f"  Processus {p} : {t:.6f} s")
    stats = timing_summary(all_times)
    print(f"\nMoyenne     : {stats['mean']:.6f} s")
    print(f"Ecart-type  : {stats['std']:.6f} s")
    print(f"Min         : {stats['min']:.6f} s")
    print(f"Max         : {stats['max']:.6f} s")
