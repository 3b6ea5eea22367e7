"""Infrastructure layer - output formatters."""

from .formatters import BoundsJsonExporter, CadGroupFormatter, SectionLayoutFormatter

__all__ = [
    "BoundsJsonExporter",
    "CadGroupFormatter",
    "SectionLayoutFormatter",
]
