"""
Núcleo de interpolación.
Mapeo numérico puro con extrapolación controlada y curvas de easing.
Todo lo demás (escenas, primitivas, subtítulos) se construye encima.
"""

import math
from typing import Callable, Literal, Sequence

Easing = Callable[[float], float]
Extrapolation = Literal["clamp", "extend", "identity"]


def linear(t: float) -> float:
    return t


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    """Arranque rápido y asentamiento suave (entradas)."""
    return 1 - cubic_in(1 - t)


def cubic_in_out(t: float) -> float:
    """Aceleración y frenado simétricos (Ken Burns, barrido de brillo)."""
    if t < 0.5:
        return cubic_in(t * 2) / 2
    return 1 - cubic_in((1 - t) * 2) / 2


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def round_half_up(value: float) -> int:
    """Redondeo de display: 0.5 siempre hacia arriba (no redondeo bancario)."""
    return math.floor(value + 0.5)


def _find_segment(value: float, input_range: Sequence[float]) -> int:
    index = 1
    while index < len(input_range) - 1 and input_range[index] < value:
        index += 1
    return index - 1


def _interpolate_segment(
    value: float,
    in_low: float,
    in_high: float,
    out_low: float,
    out_high: float,
    extrapolate_left: Extrapolation,
    extrapolate_right: Extrapolation,
    easing: Easing,
) -> float:
    # Intervalo degenerado o invertido: valor congelado en forma de escalón
    if in_high <= in_low:
        return out_low if value < in_low else out_high

    if value < in_low:
        if extrapolate_left == "identity":
            return value
        if extrapolate_left == "clamp":
            return out_low
    elif value > in_high:
        if extrapolate_right == "identity":
            return value
        if extrapolate_right == "clamp":
            return out_high

    if out_low == out_high:
        return out_low

    t = (value - in_low) / (in_high - in_low)
    if t == 0:
        return out_low
    if t == 1:
        return out_high
    return easing(t) * (out_high - out_low) + out_low


def interpolate(
    value: float,
    input_range: Sequence[float],
    output_range: Sequence[float],
    extrapolate_left: Extrapolation = "clamp",
    extrapolate_right: Extrapolation = "clamp",
    easing: Easing = linear,
) -> float:
    """
    Mapea un valor desde input_range a output_range.

    Los rangos pueden tener más de dos puntos; se usa el segmento que contiene
    al valor. Con extrapolación "clamp" (por defecto) los extremos devuelven
    exactamente el valor de salida correspondiente, sea cual sea el easing.

    Args:
        value: Valor de entrada (normalmente un frame)
        input_range: Puntos de entrada no decrecientes
        output_range: Puntos de salida (misma longitud)
        extrapolate_left: Comportamiento antes del primer punto
        extrapolate_right: Comportamiento después del último punto
        easing: Curva aplicada dentro de cada segmento

    Returns:
        Valor interpolado

    Raises:
        ValueError: Si los rangos no tienen la misma longitud o tienen menos de 2 puntos
    """
    if len(input_range) != len(output_range):
        raise ValueError(
            f"input_range ({len(input_range)}) y output_range ({len(output_range)}) "
            "deben tener la misma longitud"
        )
    if len(input_range) < 2:
        raise ValueError("Los rangos necesitan al menos 2 puntos")

    index = _find_segment(value, input_range)
    left = extrapolate_left if index == 0 else "extend"
    right = extrapolate_right if index == len(input_range) - 2 else "extend"
    return _interpolate_segment(
        value,
        input_range[index], input_range[index + 1],
        output_range[index], output_range[index + 1],
        left, right, easing,
    )


def ease_out(frame: float, start_value: float, end_value: float, start_frame: float, end_frame: float) -> float:
    """Ease-out cúbico con clamp en ambos lados."""
    return interpolate(frame, [start_frame, end_frame], [start_value, end_value], easing=cubic_out)


def ease_in_out(frame: float, start_value: float, end_value: float, start_frame: float, end_frame: float) -> float:
    """Ease-in-out cúbico con clamp en ambos lados."""
    return interpolate(frame, [start_frame, end_frame], [start_value, end_value], easing=cubic_in_out)
