"""
Simulación de chat juez/abogado.

Cada mensaje tiene tres estados lógicos que dependen solo de comparar el
frame con sus umbrales: latente, escribiendo (indicador de puntos) y
revelando (máquina de escribir). Ningún mensaje acumula estado.
"""

import math
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence

from ..animation.interpolation import ease_out
from ..domain.models import ChatMessage, Node, node
from .palette import GOLD, NAVY_CARD, NAVY_LIGHT, SANS, SERIF, TEXT, TEXT_SEC, TEXT_TER

Phase = Literal["dormant", "typing", "revealing"]

# Tolerancia de coma flotante: 100 * 0.29 da 28.999999999999996
REVEAL_EPSILON = 1e-9

JUDGE_LABEL = "Justice AI"
ADVOCATE_LABEL = "You (Counsel)"


@dataclass(frozen=True)
class ChatState:
    phase: Phase
    visible_chars: int
    text: str
    still_typing: bool
    speaking: bool
    reveal_frame: int


def chat_phase(message: ChatMessage, frame: int) -> Phase:
    if frame < message.typing_start:
        return "dormant"
    if frame < message.message_start:
        return "typing"
    return "revealing"


def visible_chars(message: ChatMessage, frame: int) -> int:
    """Caracteres revelados: floor((f - inicio) * velocidad), acotado a la longitud."""
    reveal = frame - message.message_start
    if reveal <= 0 or message.chars_per_frame <= 0:
        return 0
    return min(len(message.text), math.floor(reveal * message.chars_per_frame + REVEAL_EPSILON))


def full_text_frame(message: ChatMessage) -> int:
    """Primer frame con el texto completo visible."""
    if message.chars_per_frame <= 0:
        return message.message_start
    return message.message_start + math.ceil((len(message.text) - REVEAL_EPSILON) / message.chars_per_frame)


def chat_state(message: ChatMessage, frame: int) -> ChatState:
    phase = chat_phase(message, frame)
    reveal = frame - message.message_start
    count = visible_chars(message, frame) if phase == "revealing" else 0
    speaking = bool(
        phase == "revealing"
        and message.is_judge
        and message.voice_duration_frames
        and 0 <= reveal < message.voice_duration_frames
    )
    return ChatState(
        phase=phase,
        visible_chars=count,
        text=message.text[:count],
        still_typing=phase == "revealing" and count < len(message.text),
        speaking=speaking,
        reveal_frame=reveal,
    )


def typing_indicator(frame: int, role: str = "judge", amplitude: float = 3) -> Node:
    """Tres puntos con ondas senoidales desfasadas."""
    is_judge = role == "judge"
    dots = []
    for i in range(3):
        phase = (frame + i * 6) * 0.12
        dots.append(node(
            "dot",
            opacity=0.3 + 0.7 * abs(math.sin(phase)),
            translate_y=math.sin(phase) * amplitude,
            color=GOLD if is_judge else TEXT_SEC,
            size=6,
        ))
    return node(
        "typing_indicator",
        *dots,
        role=role,
        align="start" if is_judge else "end",
        accent=GOLD if is_judge else NAVY_LIGHT,
    )


def speaking_indicator(frame: int) -> Node:
    """Barras de sonido mientras suena la voz del juez."""
    bars = [
        node("bar", height=4 + 8 * abs(math.sin((frame + i * 7) * 0.14)), width=2)
        for i in range(4)
    ]
    return node("speaking_indicator", *bars, color=GOLD)


def cursor_visible(frame: int) -> bool:
    return math.sin(frame * 0.15) > 0


def chat_bubble(message: ChatMessage, frame: int, slide_distance: float = 12,
                slide_duration: int = 15, dot_amplitude: float = 3) -> Optional[Node]:
    """
    Burbuja de un mensaje en el frame dado.

    Returns:
        None si el mensaje aún está latente, el indicador de escritura o la burbuja
    """
    state = chat_state(message, frame)
    if state.phase == "dormant":
        return None
    if state.phase == "typing":
        return typing_indicator(frame, message.role, dot_amplitude)

    is_judge = message.is_judge
    label = message.label or (JUDGE_LABEL if is_judge else ADVOCATE_LABEL)
    header = node(
        "bubble_header",
        node("text", text=label, font_family=SERIF if is_judge else SANS, font_size=10,
             color=GOLD if is_judge else TEXT_SEC),
        speaking_indicator(frame) if state.speaking else None,
        node("text", text="typing...", font_size=9, color=TEXT_TER)
        if (not is_judge and state.still_typing) else None,
    )
    body = node(
        "text",
        node("cursor", visible=cursor_visible(frame), color=GOLD if is_judge else TEXT_SEC)
        if state.still_typing else None,
        text=state.text,
        font_family=SANS,
        font_size=12.5,
        color=TEXT,
    )
    return node(
        "chat_bubble",
        header,
        body,
        role=message.role,
        align="start" if is_judge else "end",
        opacity=ease_out(state.reveal_frame, 0, 1, 0, 12),
        translate_y=ease_out(state.reveal_frame, slide_distance, 0, 0, slide_duration),
        background=NAVY_CARD,
        accent=GOLD if is_judge else NAVY_LIGHT,
        glow=state.speaking,
        visible_chars=state.visible_chars,
    )


def chat_thread(messages: Sequence[ChatMessage], frame: int, **kwargs) -> Node:
    """Hilo completo: solo aparecen los mensajes que ya salieron del estado latente."""
    bubbles: List[Optional[Node]] = [chat_bubble(m, frame, **kwargs) for m in messages]
    return node("chat_thread", *bubbles)
