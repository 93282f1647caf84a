"""Catalog endpoints."""

from fastapi import APIRouter

from kitchens.application.config import CatalogConfig, catalog_to_config
from kitchens.domain import DEFAULT_CATALOG

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=CatalogConfig)
async def get_catalog() -> CatalogConfig:
    """Return the built-in catalog in catalog-file form."""
    return catalog_to_config(DEFAULT_CATALOG)
