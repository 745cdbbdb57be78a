"""
Registro de composiciones: punto de entrada del renderizador externo.
"""

import logging
from functools import lru_cache
from typing import Dict, Iterator, List, Tuple

from .compositions import BUILDERS, Composition
from .domain.models import FrameOutput, RegistryEntry
from .errors import CompositionNotFoundError

logger = logging.getLogger(__name__)


class CompositionRegistry:
    """Mapa id → composición, en orden de registro."""

    def __init__(self):
        self._compositions: Dict[str, Composition] = {}

    def register(self, composition: Composition) -> Composition:
        if composition.id in self._compositions:
            logger.warning(f"Composición {composition.id} registrada de nuevo, se reemplaza")
        self._compositions[composition.id] = composition
        return composition

    def get(self, composition_id: str) -> Composition:
        try:
            return self._compositions[composition_id]
        except KeyError:
            raise CompositionNotFoundError(composition_id, self.ids()) from None

    def ids(self) -> List[str]:
        return list(self._compositions)

    def entries(self) -> List[RegistryEntry]:
        """Contrato mínimo que necesita el renderizador: fps, frames y tamaño."""
        return [c.entry for c in self._compositions.values()]

    def render(self, composition_id: str, frame: int) -> FrameOutput:
        return self.get(composition_id).render(frame)

    def __contains__(self, composition_id: str) -> bool:
        return composition_id in self._compositions

    def __iter__(self) -> Iterator[Composition]:
        return iter(self._compositions.values())

    def __len__(self) -> int:
        return len(self._compositions)


@lru_cache(maxsize=None)
def builtin_compositions() -> Tuple[Composition, ...]:
    """Composiciones del proyecto, construidas una sola vez por proceso."""
    return tuple(build() for build in BUILDERS)


def is_builtin(composition: Composition) -> bool:
    """
    True solo para las instancias de builtin_compositions().
    Se compara identidad: un timeline cargado de archivo con el mismo id no cuenta.
    """
    return any(c is composition for c in builtin_compositions())


def default_registry() -> CompositionRegistry:
    """Registro con todas las composiciones del proyecto."""
    registry = CompositionRegistry()
    for composition in builtin_compositions():
        registry.register(composition)
    logger.debug(f"Registro listo: {', '.join(registry.ids())}")
    return registry
