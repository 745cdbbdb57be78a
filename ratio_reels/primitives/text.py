"""
Primitivas de texto: bloques de texto, revelado y líneas de acento.
"""

from typing import Literal, Optional, Union

from ..animation.interpolation import ease_out, interpolate
from ..domain.models import Node, node
from .palette import GOLD, NAVY, SANS, SERIF, TEXT


def text(
    content: str,
    size: float = 14,
    serif: bool = False,
    color: str = TEXT,
    weight: int = 400,
    **style,
) -> Node:
    """Bloque de texto estático."""
    return node(
        "text",
        text=content,
        font_family=SERIF if serif else SANS,
        font_size=size,
        font_weight=weight,
        color=color,
        **style,
    )


def text_reveal(
    frame: int,
    content: Union[Node, str],
    delay: int = 0,
    direction: Literal["up", "down"] = "up",
    distance: float = 24,
    duration: int = 25,
    **style,
) -> Node:
    """
    Revela un elemento: opacidad 0→1 y desplazamiento vertical ±distance→0.

    Args:
        frame: Frame local de la escena
        content: Nodo hijo o texto plano
        delay: Frame local donde empieza la animación
        direction: "up" entra desde abajo, "down" desde arriba
        distance: Desplazamiento inicial en px
        duration: Duración de la animación en frames
    """
    f = frame - delay
    offset = distance if direction == "up" else -distance
    child = text(content) if isinstance(content, str) else content
    return node(
        "reveal",
        child,
        opacity=ease_out(f, 0, 1, 0, duration),
        translate_y=ease_out(f, offset, 0, 0, duration),
        **style,
    )


def accent_line(
    frame: int,
    width: float,
    delay: int = 0,
    thickness: float = 1,
    duration: int = 30,
    color: Optional[str] = None,
    eased: bool = True,
) -> Node:
    """Línea dorada que crece de 0 a `width` px (lineal si eased=False)."""
    f = frame - delay
    grown = ease_out(f, 0, width, 0, duration) if eased else interpolate(f, [0, duration], [0, width])
    return node(
        "line",
        width=grown,
        height=thickness,
        gradient=[color or GOLD, "transparent"],
        opacity=0.7,
    )


FADE_SLIDE_OFFSETS = {"up": (20, "y"), "down": (-20, "y"), "left": (20, "x"), "right": (-20, "x")}


def fade_slide(frame: int, content: Union[Node, str], delay: int = 0,
               direction: Literal["up", "down", "left", "right"] = "up", duration: int = 15) -> Node:
    """Variante lineal de text_reveal que también admite desplazamiento horizontal."""
    f = frame - delay
    offset, axis = FADE_SLIDE_OFFSETS[direction]
    child = text(content) if isinstance(content, str) else content
    return node(
        "reveal",
        child,
        opacity=interpolate(f, [0, duration], [0, 1]),
        **{f"translate_{axis}": interpolate(f, [0, duration], [offset, 0])},
    )


def button(label: str, fill: str = GOLD, color: str = NAVY, scale: float = 1.0) -> Node:
    """Botón de llamada a la acción."""
    return node("button", text(label, size=14, color=color, weight=700),
                background=[fill, "#B8943F"], radius=12, scale=scale)
