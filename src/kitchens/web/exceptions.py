"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from kitchens.application.config import ConfigError


class KitchenGenerationError(Exception):
    """Raised when a room cannot be solved."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Solve failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(KitchenGenerationError)
    async def generation_error_handler(
        request: Request, exc: KitchenGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Kitchen layout failed",
                "error_type": "generation",
                "details": [{"message": e} for e in exc.errors],
            },
        )
