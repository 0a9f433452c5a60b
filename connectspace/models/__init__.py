"""ORM models registered with ``connectspace.database.Base``."""

from .local_storage import LocalStorageEntry

__all__ = ["LocalStorageEntry"]
