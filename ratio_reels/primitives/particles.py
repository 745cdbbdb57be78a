"""
Campos de partículas deterministas.

No hay objetos partícula ni estado de velocidad: la posición y la opacidad de
la partícula i en el frame f son funciones cerradas de (i, f). La colocación
usa el ángulo áureo (137.5°) en lugar de un generador aleatorio.
"""

import math
from dataclasses import asdict, dataclass
from typing import List, Optional, Sequence

from ..animation.interpolation import clamp01, interpolate
from ..domain.models import Node, node
from .palette import GOLD, STORY_HEIGHT, STORY_WIDTH

GOLDEN_ANGLE = 137.5
PARTICLES_Z = 5


@dataclass(frozen=True)
class Particle:
    x: float
    y: float
    size: float
    opacity: float
    blur: float = 0.0


def golden_particle(i: int, frame: int, width: float = STORY_WIDTH, height: float = STORY_HEIGHT) -> Particle:
    """Partícula i: deriva lateral senoidal y subida infinita por módulo."""
    seed = i * GOLDEN_ANGLE
    x = ((seed * 0.618) % 1) * width
    base_y = ((seed * 0.381) % 1) * height
    speed = 0.15 + (i % 5) * 0.08
    size = 1.5 + (i % 3)
    delay = (i * 7) % 30
    drift = math.sin((frame + seed) * 0.02) * 15
    y = (base_y - (frame + delay) * speed) % height
    opacity = 0.15 + math.sin((frame + seed) * 0.04) * 0.1
    return Particle(x=x + drift, y=y, size=size, opacity=opacity, blur=0.5)


def rising_particle(i: int, frame: int) -> Particle:
    """Polvo en coordenadas porcentuales que sube y reaparece abajo."""
    x = (i * 37 + 13) % 100
    speed = 0.15 + (i * 0.07) % 0.3
    size = 1.5 + (i % 3)
    opacity = 0.06 + (i * 0.02) % 0.12
    y = 100 - ((frame * speed + i * 20) % 120)
    return Particle(x=x, y=y, size=size, opacity=opacity, blur=1.0 if size > 2.5 else 0.0)


def floating_mote(i: int, frame: int) -> Particle:
    """Mota suspendida: no sube, solo flota y parpadea."""
    seed = i * GOLDEN_ANGLE
    x = (seed * 2.3) % 380
    base_y = (seed * 1.7) % 800
    drift = math.sin((frame + seed) * 0.015) * 15
    opacity = interpolate(math.sin((frame + seed * 3) * 0.02), [-1, 1], [0.03, 0.12])
    return Particle(x=x, y=base_y + drift, size=2 + (i % 3), opacity=opacity)


def _field(kind: str, particles: List[Particle], units: str) -> Node:
    return node(
        "particles",
        variant=kind,
        units=units,
        color=GOLD,
        particles=[asdict(p) for p in particles],
        z_index=PARTICLES_Z,
    )


def golden_particles(frame: int, count: int = 18, width: float = STORY_WIDTH,
                     height: float = STORY_HEIGHT) -> Node:
    return _field("golden", [golden_particle(i, frame, width, height) for i in range(count)], "px")


def rising_particles(frame: int, count: int = 12) -> Node:
    return _field("rising", [rising_particle(i, frame) for i in range(count)], "percent")


def floating_motes(frame: int, count: int = 6) -> Node:
    return _field("floating", [floating_mote(i, frame) for i in range(count)], "px")


def anchored_particle(frame: int, x: float, y: float, size: float, delay: int,
                      drift: float = 20, speed: float = 0.008) -> Optional[Particle]:
    """Partícula fija en (x, y) que oscila en elipse; no existe antes de su retardo."""
    f = frame - delay
    if f < 0:
        return None
    return Particle(
        x=x + math.cos(f * speed * 0.7) * drift * 0.5,
        y=y + math.sin(f * speed) * drift,
        size=size,
        opacity=clamp01(f / 20) * 0.3 * (0.5 + 0.5 * math.sin(f * speed * 2)),
    )


def anchored_particles(frame: int, anchors: Sequence[dict]) -> Node:
    """Campo de partículas colocadas a mano; cada anclaje son los kwargs de anchored_particle."""
    particles = [anchored_particle(frame, **anchor) for anchor in anchors]
    return _field("anchored", [p for p in particles if p is not None], "px")
