import logging
import os
from dotenv import load_dotenv  # load .env variables

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from connectspace.services.local_storage import get_local_storage
from connectspace.services.wishlist_store import get_wishlist_store

# ----- Load environment variables -----
load_dotenv()

# ----- Logging -----
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

# ----- Routers -----
from connectspace.routes.wishlist import router as wishlist_router

# ----- FastAPI app -----
app = FastAPI(
    title="ConnectSpace Wishlist",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# ----- CORS (enabled only if ALLOWED_ORIGINS is set) -----
raw_origins = os.getenv("ALLOWED_ORIGINS", "").strip()
if raw_origins:
    allowed_origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=86400,
    )

# ----- Include routers -----
app.include_router(wishlist_router)


@app.on_event("startup")
def on_startup():
    """Pick the storage backend and load the saved wishlist."""

    storage = get_local_storage()
    store = get_wishlist_store()
    items = store.hydrate()
    logging.info(
        "ConnectSpace wishlist started with %s saved events (%s storage).",
        len(items),
        storage.backend_name,
    )


# ----- Health check endpoint -----
@app.get("/health", tags=["meta"])
def health():
    return {"ok": True}
