"""Infrastructure providers.

Implementations are imported here so ``__subclasses__()`` sees them before
any container is built.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
