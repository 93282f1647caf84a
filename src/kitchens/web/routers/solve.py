"""Kitchen solve endpoints."""

from fastapi import APIRouter

from kitchens.application import KitchenLayoutOutput, SolveKitchenCommand
from kitchens.application.config import load_config_from_dict, resolve_catalog
from kitchens.infrastructure import budget_to_dict, placement_to_dict
from kitchens.web.dependencies import SolveCommandDep
from kitchens.web.exceptions import KitchenGenerationError
from kitchens.web.schemas.requests import SolveRequest
from kitchens.web.schemas.responses import BudgetSchema, SolveOutputSchema

router = APIRouter(prefix="/solve", tags=["solve"])


def _output_to_schema(output: KitchenLayoutOutput) -> SolveOutputSchema:
    """Convert KitchenLayoutOutput to response schema."""
    return SolveOutputSchema(
        shape=output.room.shape.value,
        placed_modules=[placement_to_dict(m) for m in output.placed_modules],
        diagnostics=output.diagnostics,
        budget=BudgetSchema(**budget_to_dict(output.budget)),
    )


@router.post("", response_model=SolveOutputSchema)
async def solve_kitchen(
    request: SolveRequest,
    command: SolveCommandDep,
) -> SolveOutputSchema:
    """Lay out and price a kitchen from a room description.

    Args:
        request: Request containing the room description.
        command: Injected command bound to the built-in catalog.

    Returns:
        Placements, diagnostics and budget.

    Raises:
        ConfigError: If the room description fails schema validation.
        KitchenGenerationError: If the room cannot be built.
    """
    config = load_config_from_dict(request.config)
    if config.catalog is not None:
        command = SolveKitchenCommand(resolve_catalog(config))

    output = command.execute_config(config)
    if not output.is_valid:
        raise KitchenGenerationError(output.errors)
    return _output_to_schema(output)
