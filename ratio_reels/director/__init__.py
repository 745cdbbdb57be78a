"""
Carga y validación de timelines declarativos.
"""

from .loader import ELEMENT_BUILDERS, TimelineDocument, TimelineLoader
from .validator import TimelineValidator, ValidationResult

__all__ = ["ELEMENT_BUILDERS", "TimelineDocument", "TimelineLoader", "TimelineValidator", "ValidationResult"]
