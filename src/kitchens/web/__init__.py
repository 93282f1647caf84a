"""FastAPI REST API for kitchen layout and budgeting.

This module provides a REST API for solving kitchen layouts, pricing
placements, browsing the catalog and validating room descriptions.

Usage:
    uvicorn kitchens.web:app --reload
"""

from kitchens.web.app import app, create_app

__all__ = ["app", "create_app"]
