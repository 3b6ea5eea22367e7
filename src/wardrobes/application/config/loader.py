"""Loading of wardrobe input documents.

Module configs, canvas snapshots and production inputs are read from JSON
and validated against the schemas. Any failure along the way, from a missing
file to a bad field, surfaces as a single ``ConfigError``.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wardrobes.application.config.schemas import (
    CanvasSnapshotSchema,
    ModuleConfigSchema,
    ProductionInputSchema,
)

__all__ = [
    "ConfigError",
    "load_canvas_snapshot",
    "load_canvas_snapshot_from_dict",
    "load_module_config",
    "load_module_config_from_dict",
    "load_production_input",
    "load_production_input_from_dict",
]

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ConfigError(Exception):
    """An input document could not be read or validated.

    ``error_type`` is one of ``file_not_found``, ``file_read_error``,
    ``json_parse`` or ``validation``. For validation failures ``details``
    holds one entry per invalid field with its JSON path; for JSON syntax
    errors it holds the line and column.
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
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as ``items[0].width_mm``.

    >>> _format_json_path(("shapes", 2, "rect", "x"))
    'shapes[2].rect.x'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message dictionaries."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Input validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    """Read and parse a JSON file, raising ConfigError on failure."""
    if not path.exists():
        raise ConfigError(
            message=f"Input file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error reading input file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in input file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def _validate(schema: type[SchemaT], data: Any, path: Path | None = None) -> SchemaT:
    """Validate parsed data against a schema, raising ConfigError on failure."""
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_module_config(path: Path) -> ModuleConfigSchema:
    """Load and validate a module configuration from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        A validated ModuleConfigSchema instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            error_type attribute tells which.
    """
    return _validate(ModuleConfigSchema, _read_json(path), path)


def load_module_config_from_dict(data: dict[str, Any]) -> ModuleConfigSchema:
    """Validate a module configuration from an already parsed dictionary."""
    return _validate(ModuleConfigSchema, data)


def load_canvas_snapshot(path: Path) -> CanvasSnapshotSchema:
    """Load and validate a canvas snapshot (module plus shapes) from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    return _validate(CanvasSnapshotSchema, _read_json(path), path)


def load_canvas_snapshot_from_dict(data: dict[str, Any]) -> CanvasSnapshotSchema:
    """Validate a canvas snapshot from an already parsed dictionary."""
    return _validate(CanvasSnapshotSchema, data)


def load_production_input(path: Path) -> ProductionInputSchema:
    """Load and validate a production input from a JSON file.

    Example:
        >>> try:
        ...     production = load_production_input(Path("production.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    return _validate(ProductionInputSchema, _read_json(path), path)


def load_production_input_from_dict(data: dict[str, Any]) -> ProductionInputSchema:
    """Validate a production input from an already parsed dictionary."""
    return _validate(ProductionInputSchema, data)
