from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Envelope:
    """Nombre d'elements et deplacements par processus pour un buffer aplati.

    counts[j] : nombre d'elements echanges avec le processus j
    displs[j] : position du premier de ces elements dans le buffer
    """
    counts: np.ndarray
    displs: np.ndarray

    @classmethod
    def from_counts(cls, counts):
        counts = np.asarray(counts, dtype=np.int64)
        displs = np.zeros_like(counts)
        if counts.size > 1:
            displs[1:] = np.cumsum(counts)[:-1]
        return cls(counts=counts, displs=displs)

    @property
    def total(self) -> int:
        return int(self.counts.sum())

    def __len__(self):
        return len(self.counts)

    def block(self, buffer, peer):
        start = self.displs[peer]
        return buffer[start:start + self.counts[peer]]
