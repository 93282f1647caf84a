"""Pydantic schemas for the REST API."""

from kitchens.web.schemas.common import (
    AnchorTypeEnum,
    ModuleCategoryEnum,
    PlacedModuleSchema,
)
from kitchens.web.schemas.requests import (
    BudgetRequest,
    ConfigValidateRequest,
    SolveRequest,
)
from kitchens.web.schemas.responses import (
    BudgetLineSchema,
    BudgetSchema,
    ErrorResponseSchema,
    SolveOutputSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "AnchorTypeEnum",
    "ModuleCategoryEnum",
    "PlacedModuleSchema",
    # Requests
    "BudgetRequest",
    "ConfigValidateRequest",
    "SolveRequest",
    # Responses
    "BudgetLineSchema",
    "BudgetSchema",
    "ErrorResponseSchema",
    "SolveOutputSchema",
    "ValidationResultSchema",
]
