"""Test DI wiring.

Importing ``tests.di.persistence`` registers the in-memory persistence
component as a subclass of ``PersistenceProvider``.
"""

from tests.di.container import build_test_container
from tests.di.persistence import MockPersistenceProvider

__all__ = ["MockPersistenceProvider", "build_test_container"]
