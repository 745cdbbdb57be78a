"""
Overlays cinemáticos: viñeta, grano, barra de progreso y resplandores.
"""

import math
from typing import Sequence

from ..animation.interpolation import clamp01, ease_out, interpolate
from ..domain.models import Node, node
from .palette import GOLD, NAVY, NAVY_MID

VIGNETTE_Z = 50
GRAIN_Z = 51
PROGRESS_Z = 55


def background(top: str = NAVY, middle: str = NAVY_MID) -> Node:
    """Degradado vertical de fondo, siempre presente."""
    return node("background", gradient=[top, middle, top], direction="vertical")


def vignette(intensity: float = 0.6) -> Node:
    return node(
        "vignette",
        stops=[[0.0, 0.0], [0.6, intensity * 0.4], [1.0, intensity]],
        z_index=VIGNETTE_Z,
    )


def film_grain(frame: int, opacity: float = 0.04) -> Node:
    """Grano de película; la semilla del ruido cambia con el frame de forma determinista."""
    return node(
        "film_grain",
        seed=(frame * 17) % 100,
        opacity=opacity,
        tile_size=128,
        blend_mode="overlay",
        z_index=GRAIN_Z,
    )


def progress_bar(frame: int, duration_in_frames: int, fade_start: int = 80, fade_end: int = 100,
                 max_opacity: float = 0.5, height: float = 2) -> Node:
    """Barra inferior que avanza con el video."""
    fraction = clamp01(frame / duration_in_frames) if duration_in_frames > 0 else 0.0
    return node(
        "progress_bar",
        width_fraction=fraction,
        height=height,
        opacity=ease_out(frame, 0, max_opacity, fade_start, fade_end),
        gradient=[GOLD, "rgba(201,168,76,0.3)"],
        z_index=PROGRESS_Z,
    )


def radial_glow(size: float, strength: float = 0.08, top: str = "30%",
                opacity: float = 1.0, scale: float = 1.0) -> Node:
    return node(
        "radial_glow",
        size=size,
        color=f"rgba(201,168,76,{strength})",
        top=top,
        opacity=opacity,
        scale=scale,
    )


def pulsing_glow(frame: int, size: float = 350, strength: float = 0.12, speed: float = 0.08,
                 top: str = "35%") -> Node:
    """Resplandor que late entre 0.95 y 1.05 de escala."""
    scale = interpolate(math.sin(frame * speed), [-1, 1], [0.95, 1.05])
    return radial_glow(size, strength=strength, top=top, scale=scale)


def flash(frame: int, frames: Sequence[float], values: Sequence[float], color: str = GOLD) -> Node:
    """Destello a pantalla completa con envolvente multipunto."""
    return node("flash", color=color, opacity=interpolate(frame, frames, values))
