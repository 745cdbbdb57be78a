"""
Modelo de línea de tiempo.
Convierte un frame absoluto en frame local y opacidad por escena.
"""

from dataclasses import dataclass
from typing import Iterable, List

from ..domain.models import Scene
from .interpolation import clamp01

DEFAULT_FADE_IN = 25
DEFAULT_BUFFER = 10


@dataclass(frozen=True)
class SceneState:
    """Escena visible en un frame concreto."""
    scene: Scene
    local_frame: int
    opacity: float


def local_frame(scene: Scene, frame: int) -> int:
    return frame - scene.start


def is_visible(scene: Scene, frame: int, buffer: int = DEFAULT_BUFFER) -> bool:
    """Visible con un pequeño margen a cada lado para no recortar entradas y salidas."""
    local = local_frame(scene, frame)
    return -buffer <= local <= scene.duration + buffer


def scene_fade(scene: Scene, frame: int, fade_in: int = DEFAULT_FADE_IN) -> float:
    """
    Opacidad de la escena: rampa de entrada por rampa de salida.

    El producto (no el mínimo) deja la opacidad exactamente en 0 fuera de la
    ventana activa sin ramificar por fase.
    """
    local = local_frame(scene, frame)
    if scene.fade_in is not None:
        fade_in = scene.fade_in
    fade_in_value = clamp01(local / fade_in) if fade_in > 0 else (1.0 if local >= 0 else 0.0)
    if scene.crossfade > 0:
        fade_out_value = clamp01((scene.duration - local) / scene.crossfade)
    else:
        fade_out_value = 1.0 if local <= scene.duration else 0.0
    return fade_in_value * fade_out_value


def scene_states(
    scenes: Iterable[Scene],
    frame: int,
    fade_in: int = DEFAULT_FADE_IN,
    buffer: int = DEFAULT_BUFFER,
) -> List[SceneState]:
    """
    Evalúa todas las escenas declaradas para un frame.

    Returns:
        Escenas visibles ordenadas por z_index (estable respecto a la declaración)
    """
    states = [
        SceneState(scene=scene, local_frame=local_frame(scene, frame), opacity=scene_fade(scene, frame, fade_in))
        for scene in scenes
        if is_visible(scene, frame, buffer)
    ]
    return sorted(states, key=lambda s: s.scene.z_index)
