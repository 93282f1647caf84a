"""API routers for the REST API."""

from kitchens.web.routers.budget import router as budget_router
from kitchens.web.routers.catalog import router as catalog_router
from kitchens.web.routers.solve import router as solve_router
from kitchens.web.routers.validate import router as validate_router

__all__ = [
    "budget_router",
    "catalog_router",
    "solve_router",
    "validate_router",
]
