"""ConnectSpace wishlist: saved events, local persistence and read views."""
