"""FastAPI dependency injection for kitchen services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from kitchens.application.commands import SolveKitchenCommand
from kitchens.domain import DEFAULT_CATALOG, BudgetAggregator


@lru_cache(maxsize=1)
def get_solve_command() -> SolveKitchenCommand:
    """Get cached SolveKitchenCommand bound to the built-in catalog."""
    return SolveKitchenCommand(DEFAULT_CATALOG)


@lru_cache(maxsize=1)
def get_budget_aggregator() -> BudgetAggregator:
    """Get cached BudgetAggregator bound to the built-in catalog."""
    return BudgetAggregator(DEFAULT_CATALOG)


# Type aliases for cleaner endpoint signatures
SolveCommandDep = Annotated[SolveKitchenCommand, Depends(get_solve_command)]
BudgetAggregatorDep = Annotated[BudgetAggregator, Depends(get_budget_aggregator)]
