"""Budget endpoints."""

from fastapi import APIRouter

from kitchens.application.config import config_to_catalog, load_catalog_from_dict
from kitchens.domain import BudgetAggregator, ModuleCategory, ObstacleType, PlacedModule
from kitchens.infrastructure import budget_to_dict
from kitchens.web.dependencies import BudgetAggregatorDep
from kitchens.web.schemas.common import PlacedModuleSchema
from kitchens.web.schemas.requests import BudgetRequest
from kitchens.web.schemas.responses import BudgetSchema

router = APIRouter(prefix="/budget", tags=["budget"])


def _schema_to_placement(schema: PlacedModuleSchema) -> PlacedModule:
    return PlacedModule(
        ref=schema.ref,
        category=ModuleCategory(schema.category.value),
        wall_id=schema.wall_id,
        position=schema.position,
        width=schema.width,
        label=schema.label,
        price=schema.price,
        anchor=ObstacleType(schema.anchor.value) if schema.anchor else None,
        corner=schema.corner,
    )


@router.post("", response_model=BudgetSchema)
async def price_placements(
    request: BudgetRequest,
    aggregator: BudgetAggregatorDep,
) -> BudgetSchema:
    """Price a list of placements.

    Placements are grouped by ref and each group is billed at the price its
    placements carry; a request pricing one ref two ways is rejected with a
    422. Hardware and lineal rates come from the request's catalog or the
    built-in one.
    """
    if request.catalog is not None:
        aggregator = BudgetAggregator(
            config_to_catalog(load_catalog_from_dict(request.catalog))
        )

    placements = [_schema_to_placement(m) for m in request.placed_modules]
    return BudgetSchema(**budget_to_dict(aggregator.aggregate(placements)))
