"""
Estimate API — price a print job against the loaded catalog.

POST /api/estimate             — Ranked results for width × height × quantity in a category
GET  /api/estimate/categories  — Categories the calculator can price
GET  /api/estimate/tiers       — Supported order quantities
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..catalog import CatalogError, calculable_categories, load_catalog
from ..config import settings
from ..engine.config import EngineConfig
from ..engine.estimator import PrintEstimator
from ..schemas import CatalogEntry, ErrorKind, EstimateRequest, EstimateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/estimate", tags=["estimate"])

# Singleton engine: immutable config, no per-request state
engine_config = EngineConfig.from_settings(settings)
estimator = PrintEstimator(engine_config)

_catalog_cache: dict[str, List[CatalogEntry]] = {}

ERROR_STATUS = {
    ErrorKind.INVALID_INPUT: 422,
    ErrorKind.NO_RESULTS: 404,
}


def get_catalog() -> List[CatalogEntry]:
    """Catalog loaded once per process from CATALOG_PATH."""
    path = settings.CATALOG_PATH
    if path not in _catalog_cache:
        _catalog_cache[path] = load_catalog(path)
    return _catalog_cache[path]


def require_catalog() -> List[CatalogEntry]:
    """Request dependency. 503 until a catalog can be loaded."""
    try:
        return get_catalog()
    except CatalogError as e:
        logger.warning("Catalog unavailable: %s", e)
        raise HTTPException(status_code=503, detail="Price catalog is not available")


@router.post("", response_model=EstimateResponse)
def estimate(request: EstimateRequest, catalog: List[CatalogEntry] = Depends(require_catalog)):
    """
    Price the job for every paper type in the category.

    422 for missing/non-positive size or quantity, 404 when nothing in the
    category can be priced.
    """
    results, error = estimator.compute_options(catalog, request)
    if error is not None:
        raise HTTPException(
            status_code=ERROR_STATUS[error.kind],
            detail={"error": error.kind.value, "message": error.message},
        )
    return EstimateResponse(results=results)


@router.get("/categories")
def list_categories(catalog: List[CatalogEntry] = Depends(require_catalog)):
    return {"categories": calculable_categories(catalog, engine_config)}


@router.get("/tiers")
def list_tiers():
    return {"quantities": list(engine_config.quantity_tiers)}
