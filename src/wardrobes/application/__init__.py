"""Application layer - use cases and input documents."""

from .commands import BuildProductionCommand
from .dtos import ProductionOutput

__all__ = [
    "BuildProductionCommand",
    "ProductionOutput",
]
