"""Service layer: durable local storage and the wishlist store built on it."""

from .local_storage import LocalStorage, LocalStorageError, get_local_storage
from .wishlist_store import WishlistStore, get_wishlist_store

__all__ = [
    "LocalStorage",
    "LocalStorageError",
    "WishlistStore",
    "get_local_storage",
    "get_wishlist_store",
]
