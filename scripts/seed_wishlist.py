import sys

from connectspace.demo_events import DEMO_EVENTS, bootstrap_sample
from connectspace.services.wishlist_store import get_wishlist_store


def main(argv: list[str]) -> None:
    """Replace the stored wishlist with the first N demo events (default: all)."""

    count = int(argv[0]) if argv else len(DEMO_EVENTS)

    # Storage backend comes from WISHLIST_STORAGE / WISHLIST_STORAGE_PATH / DATABASE_URL
    store = get_wishlist_store()
    store.clear()
    # bootstrap_sample clamps to 0..len(DEMO_EVENTS); a negative N seeds nothing
    for event in bootstrap_sample(count):
        store.add(event)
    print(f"Seeded wishlist with {len(store)} demo events ({store.storage.backend_name} storage).")


if __name__ == "__main__":
    main(sys.argv[1:])
