"""
Mockup de teléfono en perspectiva 3D.

Compone cuatro transformaciones independientes, todas funciones del frame:
entrada (opacidad, traslación, escala), rotación de entrada más balanceo
perpetuo, Ken Burns sobre la pantalla y una banda de brillo diagonal.
"""

import math
from dataclasses import dataclass
from typing import Literal, Optional, Union

from ..animation.interpolation import ease_in_out, ease_out, interpolate
from ..domain.models import Node, node

Tilt = Literal["left", "right", "none"]
KenBurns = Literal["zoom-in", "zoom-out", "pan-up", "pan-down"]

TILT_SIGN = {"right": -1, "left": 1, "none": 0}


@dataclass(frozen=True)
class PhoneMotion:
    """Parámetros de movimiento de una variante de mockup."""
    width: float
    bezel: float
    radius: float
    perspective: float
    entry_opacity_end: int
    entry_end: int
    entry_offset_y: float
    entry_scale: float
    tilt_start: float
    tilt_end: float
    tilt_x_start: float
    tilt_x_end: float
    settle: int
    sway_y_speed: float
    sway_y_amplitude: float
    sway_x_speed: float
    sway_x_amplitude: float
    glare_start: int
    glare_end: int
    glare_fade: tuple
    shadow_y: float
    shadow_blur: float
    glow_max: float
    glow_fade: tuple


# Teléfono construido con contenido dibujado (pantallas simuladas)
CSS_PHONE = PhoneMotion(
    width=270, bezel=8, radius=36, perspective=900,
    entry_opacity_end=35, entry_end=40, entry_offset_y=60, entry_scale=0.85,
    tilt_start=18, tilt_end=4, tilt_x_start=8, tilt_x_end=2, settle=50,
    sway_y_speed=0.012, sway_y_amplitude=1.5, sway_x_speed=0.015, sway_x_amplitude=0.5,
    glare_start=10, glare_end=200, glare_fade=(20, 50),
    shadow_y=20, shadow_blur=60, glow_max=0.18, glow_fade=(15, 45),
)

# Teléfono con captura de pantalla real (formato corto, más rápido)
SCREENSHOT_PHONE = PhoneMotion(
    width=250, bezel=7, radius=34, perspective=800,
    entry_opacity_end=25, entry_end=30, entry_offset_y=50, entry_scale=0.88,
    tilt_start=16, tilt_end=3, tilt_x_start=6, tilt_x_end=1.5, settle=40,
    sway_y_speed=0.015, sway_y_amplitude=1.2, sway_x_speed=0.018, sway_x_amplitude=0.4,
    glare_start=8, glare_end=150, glare_fade=(15, 40),
    shadow_y=18, shadow_blur=50, glow_max=0.15, glow_fade=(10, 35),
)

KEN_BURNS_WINDOW = (30, 220)


@dataclass(frozen=True)
class PhoneTransform:
    opacity: float
    translate_y: float
    scale: float
    rotate_y: float
    rotate_x: float
    screen_scale: float
    screen_x: float
    screen_y: float
    glare_position: float
    glare_opacity: float
    shadow_x: float
    shadow_y: float
    shadow_blur: float
    glow_opacity: float


def ken_burns(frame: int, mode: Optional[str]) -> tuple:
    """(escala, x, y) de la pantalla para el modo indicado."""
    start, end = KEN_BURNS_WINDOW
    if mode == "zoom-in":
        return ease_in_out(frame, 1, 1.04, start, end), 0.0, 0.0
    if mode == "zoom-out":
        return ease_in_out(frame, 1.04, 1, start, end), 0.0, 0.0
    if mode == "pan-up":
        return 1.0, 0.0, ease_in_out(frame, 0, -8, start, end)
    if mode == "pan-down":
        return 1.0, 0.0, ease_in_out(frame, 0, 8, start, end)
    return 1.0, 0.0, 0.0


def phone_transform(frame: int, tilt: Tilt = "left", ken_burns_mode: Optional[KenBurns] = None,
                    motion: PhoneMotion = CSS_PHONE) -> PhoneTransform:
    """
    Calcula todas las transformaciones del mockup para un frame local.

    El balanceo no se asienta nunca: su amplitud es constante pasado el
    tramo de entrada, lo que da movimiento sutil perpetuo sin estado.
    """
    m = motion
    sign = TILT_SIGN[tilt]

    sway = math.sin((frame - m.settle) * m.sway_y_speed) * m.sway_y_amplitude * sign if frame > m.settle else 0.0
    rotate_y = ease_out(frame, m.tilt_start * sign, m.tilt_end * sign, 0, m.settle) + sway
    rotate_x = (ease_out(frame, m.tilt_x_start, m.tilt_x_end, 0, m.settle)
                + math.sin((frame - m.settle) * m.sway_x_speed) * m.sway_x_amplitude)

    kb_scale, kb_x, kb_y = ken_burns(frame, ken_burns_mode)

    return PhoneTransform(
        opacity=ease_out(frame, 0, 1, 0, m.entry_opacity_end),
        translate_y=ease_out(frame, m.entry_offset_y, 0, 0, m.entry_end),
        scale=ease_out(frame, m.entry_scale, 1, 0, m.entry_end),
        rotate_y=rotate_y,
        rotate_x=rotate_x,
        screen_scale=kb_scale,
        screen_x=kb_x,
        screen_y=kb_y,
        glare_position=ease_in_out(frame, -30, 130, m.glare_start, m.glare_end),
        glare_opacity=ease_out(frame, 0, 1, *m.glare_fade),
        shadow_x=rotate_y * -2,
        shadow_y=m.shadow_y + rotate_x * 2,
        shadow_blur=m.shadow_blur + abs(rotate_y) * 3,
        glow_opacity=ease_out(frame, 0, m.glow_max, *m.glow_fade),
    )


def phone_mockup(
    frame: int,
    screen: Union[Node, str],
    delay: int = 0,
    tilt: Tilt = "left",
    ken_burns_mode: Optional[KenBurns] = None,
    motion: PhoneMotion = CSS_PHONE,
) -> Node:
    """
    Mockup completo: resplandor trasero, cuerpo, pantalla y brillo.

    Args:
        frame: Frame local de la escena
        screen: Contenido de la pantalla (nodo) o ruta simbólica de una captura
        delay: Frame local donde empieza la entrada
        tilt: Dirección de la inclinación 3D
        ken_burns_mode: Movimiento lento de la pantalla (None = estático)
        motion: Variante de parámetros (CSS_PHONE o SCREENSHOT_PHONE)
    """
    t = phone_transform(frame - delay, tilt, ken_burns_mode, motion)
    content = node("image", src=screen) if isinstance(screen, str) else screen

    return node(
        "phone",
        node("glow", opacity=t.glow_opacity, width=motion.width + 70, height=motion.width * 1.5),
        node(
            "phone_body",
            node(
                "screen",
                content,
                node("glare", position=t.glare_position, opacity=t.glare_opacity, angle=105),
                radius=motion.radius - motion.bezel + 2,
                scale=t.screen_scale,
                translate_x=t.screen_x,
                translate_y=t.screen_y,
            ),
            width=motion.width,
            height=motion.width * 2.167,
            bezel=motion.bezel,
            radius=motion.radius,
            rotate_y=t.rotate_y,
            rotate_x=t.rotate_x,
            shadow=[t.shadow_x, t.shadow_y, t.shadow_blur],
        ),
        opacity=t.opacity,
        translate_y=t.translate_y,
        scale=t.scale,
        perspective=motion.perspective,
    )


def flat_phone(frame: int, src: str, delay: int = 0, scale: float = 0.85, entry_scale: float = 0.9) -> Node:
    """Variante plana sin perspectiva: entrada lineal de 20 frames."""
    f = frame - delay
    return node(
        "phone",
        node("phone_body", node("screen", node("image", src=src), radius=32), width=280, radius=32),
        opacity=interpolate(f, [0, 20], [0, 1]),
        translate_y=interpolate(f, [0, 20], [40, 0]),
        scale=interpolate(f, [0, 20], [entry_scale, 1]) * scale,
    )
