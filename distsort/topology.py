from dataclasses import dataclass


def is_power_of_two(n):
    return n > 0 and (n & (n - 1)) == 0


def hypercube_dimension(size):
    if not is_power_of_two(size):
        raise ValueError(f"{size} n'est pas une puissance de 2")
    return size.bit_length() - 1


@dataclass(frozen=True)
class CartTopology:
    """Grille cartesienne, numerotation row-major comme MPI_Cart_create.

    La premiere dimension est la plus significative :
    rank = sum(coords[i] * prod(dims[i+1:])).
    """
    dims: tuple
    periods: tuple

    @classmethod
    def hypercube(cls, dimension):
        # Taille 2 et periodique dans chaque dimension
        return cls(dims=(2,) * dimension, periods=(True,) * dimension)

    @property
    def ndims(self):
        return len(self.dims)

    @property
    def size(self):
        n = 1
        for d in self.dims:
            n *= d
        return n

    def coords(self, rank):
        if not 0 <= rank < self.size:
            raise ValueError(f"rang {rank} hors de la grille {self.dims}")
        coords = []
        for d in reversed(self.dims):
            coords.append(rank % d)
            rank //= d
        return tuple(reversed(coords))

    def rank_of(self, coords):
        rank = 0
        for c, d in zip(coords, self.dims):
            rank = rank * d + c
        return rank

    def shift(self, rank, direction, disp=1):
        """Equivalent de MPI_Cart_shift : renvoie (source, dest).

        None remplace MPI.PROC_NULL au bord d'une dimension non periodique.
        """
        coords = list(self.coords(rank))
        d = self.dims[direction]

        def moved(step):
            c = coords[direction] + step
            if self.periods[direction]:
                c %= d
            elif not 0 <= c < d:
                return None
            shifted = list(coords)
            shifted[direction] = c
            return self.rank_of(shifted)

        return moved(-disp), moved(disp)
