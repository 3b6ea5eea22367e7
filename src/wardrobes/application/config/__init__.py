"""Input documents for the wardrobe layout engine.

This package provides Pydantic models for the JSON documents the command
line reads, a loader with comprehensive error handling, and adapters that
turn validated documents into domain objects.

Public API:
    - ModuleConfigSchema: Wardrobe carcass configuration
    - CanvasSnapshotSchema: Module configuration plus canvas shapes
    - ProductionInputSchema: Production panel list with overrides
    - load_module_config / load_canvas_snapshot / load_production_input:
      Load a document from a JSON file
    - *_from_dict variants: Validate an already parsed dictionary
    - ConfigError: Exception for input errors
    - config_to_*: Schema to domain adapters

Example:
    >>> from pathlib import Path
    >>> from wardrobes.application.config import load_production_input, ConfigError
    >>>
    >>> try:
    ...     production = load_production_input(Path("production.json"))
    ...     print(f"{len(production.items)} panels")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from wardrobes.application.config.adapter import (
    config_to_module_config,
    config_to_overrides,
    config_to_production_items,
    config_to_shapes,
)
from wardrobes.application.config.loader import (
    ConfigError,
    load_canvas_snapshot,
    load_canvas_snapshot_from_dict,
    load_module_config,
    load_module_config_from_dict,
    load_production_input,
    load_production_input_from_dict,
)
from wardrobes.application.config.schemas import (
    CanvasSnapshotSchema,
    LineShapeSchema,
    ModuleConfigSchema,
    PanelOverrideSchema,
    PanelsEnabledSchema,
    ProductionInputSchema,
    ProductionPanelItemSchema,
    RectShapeSchema,
    ShapeSchema,
    WardrobeSectionSchema,
)

__all__ = [
    # Schemas
    "CanvasSnapshotSchema",
    "LineShapeSchema",
    "ModuleConfigSchema",
    "PanelOverrideSchema",
    "PanelsEnabledSchema",
    "ProductionInputSchema",
    "ProductionPanelItemSchema",
    "RectShapeSchema",
    "ShapeSchema",
    "WardrobeSectionSchema",
    # Loader
    "ConfigError",
    "load_canvas_snapshot",
    "load_canvas_snapshot_from_dict",
    "load_module_config",
    "load_module_config_from_dict",
    "load_production_input",
    "load_production_input_from_dict",
    # Adapters
    "config_to_module_config",
    "config_to_overrides",
    "config_to_production_items",
    "config_to_shapes",
]
