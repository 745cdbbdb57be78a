"""
Excepciones del proyecto.
El render nunca lanza por casos numéricos; estas cubren declaración, carga y registro.
"""

from typing import List, Optional


class RatioReelsError(Exception):
    """Error base de ratio-reels."""


class CompositionNotFoundError(RatioReelsError, KeyError):
    """Id de composición no registrado."""

    def __init__(self, composition_id: str, available: Optional[List[str]] = None):
        self.composition_id = composition_id
        self.available = available or []
        super().__init__(composition_id)

    def __str__(self) -> str:
        hint = f" (disponibles: {', '.join(self.available)})" if self.available else ""
        return f"Composición no encontrada: {self.composition_id}{hint}"


class TimelineLoadError(RatioReelsError):
    """Un archivo declarativo de timeline no se pudo interpretar."""


class TimelineValidationError(RatioReelsError):
    """La validación estricta encontró problemas."""

    def __init__(self, issues: List[str]):
        self.issues = list(issues)
        super().__init__(f"{len(self.issues)} problema(s) de validación: " + "; ".join(self.issues))
