"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from kitchens.web.schemas.common import ModuleCategoryEnum, PlacedModuleSchema


class BudgetLineSchema(BaseModel):
    """One priced line of a budget."""

    quantity: int = Field(..., description="Number of units")
    ref: str = Field(..., description="Module ref, hardware key or lineal key")
    label: str = Field(..., description="Display label")
    unit_price: float = Field(..., description="Price per unit")
    total: float = Field(..., description="Line total")
    category: ModuleCategoryEnum | None = Field(
        default=None, description="Module category for module lines"
    )


class BudgetSchema(BaseModel):
    """Priced bill of materials."""

    module_lines: list[BudgetLineSchema] = Field(default_factory=list)
    hardware_lines: list[BudgetLineSchema] = Field(default_factory=list)
    lineal_lines: list[BudgetLineSchema] = Field(default_factory=list)
    modules_total: float = Field(default=0.0, description="Sum of module lines")
    hardware_total: float = Field(default=0.0, description="Sum of hardware lines")
    lineal_total: float = Field(default=0.0, description="Sum of lineal lines")
    total_price: float = Field(default=0.0, description="Grand total")
    module_count: int = Field(default=0, description="Number of placed modules")
    base_lineal_m: float = Field(
        default=0.0, description="Meters of base modules along the walls"
    )


class SolveOutputSchema(BaseModel):
    """Response for a solved kitchen."""

    shape: str = Field(..., description="Room shape")
    placed_modules: list[PlacedModuleSchema] = Field(
        default_factory=list, description="Placements in solver order"
    )
    diagnostics: list[str] = Field(
        default_factory=list, description="Anchor conflicts"
    )
    budget: BudgetSchema = Field(..., description="Budget for the placements")


class ValidationResultSchema(BaseModel):
    """Response for room description validation."""

    is_valid: bool = Field(..., description="Whether the room description is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Error payload returned with 4xx responses."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: list[dict[str, Any]] | None = Field(
        default=None, description="Additional error details"
    )
