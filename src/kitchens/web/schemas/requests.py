"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from kitchens.web.schemas.common import PlacedModuleSchema


class SolveRequest(BaseModel):
    """Request for solving a room description."""

    config: dict[str, Any] = Field(..., description="Room description JSON")


class BudgetRequest(BaseModel):
    """Request for pricing a list of placements.

    Budget lines group placements by ref, so every placement sharing a ref
    must carry the same price.
    """

    placed_modules: list[PlacedModuleSchema] = Field(
        default_factory=list, description="Placements to price"
    )
    catalog: dict[str, Any] | None = Field(
        default=None, description="Catalog JSON to price against"
    )

    @model_validator(mode="after")
    def validate_consistent_prices(self) -> "BudgetRequest":
        """Reject placements that price the same ref differently."""
        prices: dict[str, float] = {}
        for module in self.placed_modules:
            seen = prices.setdefault(module.ref, module.price)
            if seen != module.price:
                raise ValueError(
                    f"Module '{module.ref}' is priced both {seen:g} and "
                    f"{module.price:g}; placements sharing a ref must share a price"
                )
        return self


class ConfigValidateRequest(BaseModel):
    """Request for validating a room description."""

    config: dict[str, Any] = Field(..., description="Room description JSON")
