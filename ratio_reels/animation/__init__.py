"""Núcleo de interpolación y modelo de línea de tiempo"""

from .interpolation import (
    clamp01,
    cubic_in,
    cubic_in_out,
    cubic_out,
    ease_in_out,
    ease_out,
    interpolate,
    linear,
    round_half_up,
)
from .timeline import SceneState, is_visible, local_frame, scene_fade, scene_states

__all__ = [
    "clamp01", "cubic_in", "cubic_in_out", "cubic_out", "ease_in_out", "ease_out",
    "interpolate", "linear", "round_half_up",
    "SceneState", "is_visible", "local_frame", "scene_fade", "scene_states",
]
