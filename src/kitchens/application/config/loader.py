"""Configuration file loader with comprehensive error handling.

This module provides functionality to load and parse JSON room descriptions
and catalog files. It handles file system errors, JSON parsing errors,
and Pydantic validation errors with clear, actionable error messages.
"""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from kitchens.application.config.schemas import CatalogConfig, KitchenConfiguration

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("walls", 0, "length"))
        'walls[0].length'
        >>> _format_json_path(("walls", 1, "obstacles", 0, "position"))
        'walls[1].obstacles[0].position'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract path, message, value and error type from a Pydantic error."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]) or "<root>",
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    """Format validation error details into a human-readable message."""
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        # Whole-object inputs are too noisy to echo back
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    """Read and parse a JSON file, raising ConfigError on any failure."""
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )


def _validate(model: type[ModelT], data: Any, path: Path | None = None) -> ModelT:
    """Validate data against a schema model, raising ConfigError on failure."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        logger.debug(f"{model.__name__} validation failed with {len(details)} error(s)")
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> KitchenConfiguration:
    """Load and validate a room description from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated KitchenConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute indicates the specific error category.

    Example:
        >>> try:
        ...     config = load_config(Path("my-kitchen.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    config = _validate(KitchenConfiguration, _read_json(path), path)
    logger.debug(f"Loaded {config.shape.value} room from {path}")
    return config


def load_config_from_dict(data: dict[str, Any]) -> KitchenConfiguration:
    """Load and validate a room description from a dictionary.

    This is useful for loading configuration from sources other than files,
    such as API requests.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(KitchenConfiguration, data)


def load_catalog(path: Path) -> CatalogConfig:
    """Load and validate a catalog from a JSON file.

    Raises:
        ConfigError: If the file cannot be loaded or validated.
    """
    catalog = _validate(CatalogConfig, _read_json(path), path)
    logger.debug(f"Loaded catalog with {len(catalog.modules)} module(s) from {path}")
    return catalog


def load_catalog_from_dict(data: dict[str, Any]) -> CatalogConfig:
    """Load and validate a catalog from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(CatalogConfig, data)
