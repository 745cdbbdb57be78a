"""
Gráficos animados: anillo de puntuación, barras por dimensión, radar y contadores.
Cada valor es ease(frame, 0, objetivo, inicio, fin), nunca un acumulador.
"""

import math
from typing import List, Sequence, Tuple

from ..animation.interpolation import ease_out, interpolate, round_half_up
from ..domain.models import Node, ScoreDimension, node
from .palette import AMBER, GOLD, GREEN, RED, SANS, SERIF, TEXT_SEC

RING_RADIUS = 52
RADAR_CENTER = 150
RADAR_MAX_RADIUS = 100
RADAR_RINGS = (0.25, 0.5, 0.75, 1.0)


def score_color(score: float) -> str:
    if score >= 80:
        return GREEN
    if score >= 70:
        return GOLD
    return AMBER


def score_ring(frame: int, score: float, start: int = 10, end: int = 50,
               radius: float = RING_RADIUS, stroke: float = 6) -> Node:
    """Anillo con el arco de puntuación, número central y halo pulsante."""
    circumference = 2 * math.pi * radius
    progress = ease_out(frame, 0, score / 100, start, end)
    return node(
        "score_ring",
        node("text", text=str(round_half_up(ease_out(frame, 0, score, start, end))),
             font_family=SERIF, font_size=38, color=GOLD),
        node("text", text="/ 100", font_family=SANS, font_size=10, color=TEXT_SEC),
        radius=radius,
        stroke_width=stroke,
        circumference=circumference,
        dash_offset=circumference - progress * circumference,
        glow_opacity=0.3 + 0.2 * math.sin(frame * 0.06),
        color=GOLD,
    )


def dimension_bars(frame: int, dimensions: Sequence[ScoreDimension], first_delay: int = 20,
                   stagger: int = 8) -> Node:
    """Barras escalonadas; el color depende del umbral de la puntuación final."""
    rows = []
    for i, dim in enumerate(dimensions):
        delay = first_delay + i * stagger
        width = ease_out(frame, 0, dim.score, delay + 5, delay + 25)
        color = score_color(dim.score)
        rows.append(node(
            "bar",
            node("text", text=dim.label, font_size=10, color=TEXT_SEC),
            node("text", text=str(round_half_up(width)), font_size=10, color=color),
            opacity=ease_out(frame, 0, 1, delay, delay + 12),
            width_percent=width,
            color=color,
        ))
    return node("dimension_bars", *rows)


def polar(angle: float, radius: float, center: float = RADAR_CENTER) -> Tuple[float, float]:
    return center + math.cos(angle) * radius, center + math.sin(angle) * radius


def radar_vertices(values: Sequence[float], expand: float = 1.0,
                   max_radius: float = RADAR_MAX_RADIUS) -> List[Tuple[float, float]]:
    """Vértices del polígono de datos: eje i en -π/2 + i·2π/n."""
    n = len(values)
    if n == 0:
        return []
    step = 2 * math.pi / n
    return [polar(-math.pi / 2 + i * step, (v / 100) * max_radius * expand) for i, v in enumerate(values)]


def radar_chart(frame: int, values: Sequence[float], labels: Sequence[str],
                start: int = 15, end: int = 60) -> Node:
    """Radar de habilidades que se expande desde el centro."""
    n = len(values)
    step = 2 * math.pi / n if n else 0.0
    expand = ease_out(frame, 0, 1, start, end)
    rings = [
        node("polygon", points=[list(polar(-math.pi / 2 + i * step, RADAR_MAX_RADIUS * ring)) for i in range(n)],
             role="guide", scale=ring)
        for ring in RADAR_RINGS
    ]
    axes = [
        node("axis", end=list(polar(-math.pi / 2 + i * step, RADAR_MAX_RADIUS)))
        for i in range(n)
    ]
    label_nodes = [
        node("text", text=label, font_size=9, color=TEXT_SEC,
             position=list(polar(-math.pi / 2 + i * step, RADAR_MAX_RADIUS + 22)))
        for i, label in enumerate(labels)
    ]
    data = node("polygon", points=[list(p) for p in radar_vertices(values, expand)],
                role="data", color=GOLD, opacity=expand)
    return node("radar", *rings, *axes, data, *label_nodes,
                center=RADAR_CENTER, max_radius=RADAR_MAX_RADIUS, expand=expand)


def counter(frame: int, target: float, delay: int = 0, duration: int = 40, suffix: str = "") -> Node:
    """Contador que sube hasta el objetivo con ease-out."""
    f = frame - delay
    value = round_half_up(ease_out(f, 0, target, 0, duration))
    return node("counter", text=f"{value}{suffix}", value=value, opacity=ease_out(f, 0, 1, 0, 15))


MONTAGE_SCORES = ((45, RED), (62, AMBER), (71, GOLD), (78, GREEN))


def score_montage(frame: int, scores: Sequence[Tuple[float, str]] = MONTAGE_SCORES,
                  radius: float = 22, step: int = 20) -> Node:
    """
    Fila de círculos que muestran la mejora de sesión en sesión.
    Todos salvo el último se atenúan a 0.3 al terminar su turno.
    """
    circumference = 2 * math.pi * radius
    circles = []
    last = len(scores) - 1
    for i, (target, color) in enumerate(scores):
        start_f = i * step
        end_f = start_f + step
        if i < last:
            opacity = interpolate(frame, [start_f, start_f + 8, end_f - 5, end_f], [0, 1, 1, 0.3])
        else:
            opacity = ease_out(frame, 0, 1, start_f, start_f + 12)
        progress = ease_out(frame, 0, target / 100, start_f + 2, end_f - 2)
        circles.append(node(
            "score_circle",
            text=str(round_half_up(ease_out(frame, 0, target, start_f + 2, end_f - 2))),
            opacity=opacity,
            dash_offset=circumference - progress * circumference,
            color=color,
        ))
    first = scores[0][0] if scores else 0
    final = scores[-1][0] if scores else 0
    return node("score_montage", *circles, overall=ease_out(frame, first, final, 10, 80))
