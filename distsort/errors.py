class DistSortError(Exception):
    pass


class ConfigurationError(DistSortError):
    """Configuration du job invalide (N, P, algorithme), detectee avant le tri."""


class KeyParseError(ConfigurationError):
    """Jeton de la ligne de commande qui n'est pas un entier (mode strict)."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Erreur : '{token}' n'est pas un entier valide")


class ExchangeError(DistSortError):
    """Taille annoncee et taille recue differentes pendant un echange."""
