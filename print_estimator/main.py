from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import estimates

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("print_estimator")

app = FastAPI(
    title=settings.APP_NAME,
    description="Print-job cost estimator: cheapest press-sheet layout per paper type",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(estimates.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "print-estimator"}


@app.on_event("startup")
def warm_catalog():
    """Load the catalog on startup so the first request doesn't pay for it."""
    from .catalog import CatalogError
    try:
        catalog = estimates.get_catalog()
        logger.info("Catalog ready: %d entries", len(catalog))
    except CatalogError as e:
        # Estimates will fail until the catalog is fixed; the app still serves /health
        logger.warning("Catalog not loaded: %s", e)
