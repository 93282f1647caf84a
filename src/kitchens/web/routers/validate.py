"""Room description validation endpoints."""

from fastapi import APIRouter

from kitchens.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from kitchens.web.schemas.requests import ConfigValidateRequest
from kitchens.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_room(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a room description without solving it.

    Schema errors are reported in ``errors`` rather than as an HTTP error.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        errors = [
            {"message": d.get("message", e.message), "path": d.get("path", "<root>")}
            for d in e.details
        ] or [{"message": e.message, "path": "<root>"}]
        return ValidationResultSchema(is_valid=False, errors=errors)

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
