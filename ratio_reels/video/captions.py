"""
Sincronizador de subtítulos.
Resalta palabra por palabra en proporción al tiempo transcurrido de la frase.
"""

import math
from typing import List, Optional, Sequence, Tuple

from ..animation.interpolation import clamp01, ease_out
from ..domain.models import CaptionPhrase, CaptionState, Node, node
from ..primitives.palette import SANS, TEXT, TEXT_SEC

CAPTION_Z = 60
FADE_FRAMES = 8
RISE_FRAMES = 10


def active_caption(captions: Sequence[CaptionPhrase], frame: int) -> Optional[CaptionPhrase]:
    """Primera frase cuyo intervalo cerrado contiene al frame."""
    for phrase in captions:
        if phrase.start <= frame <= phrase.end:
            return phrase
    return None


def caption_state(phrase: CaptionPhrase, frame: int) -> CaptionState:
    """
    Estado de una frase en un frame.

    Un intervalo de longitud cero no produce NaN: el progreso queda en 0.
    """
    words = phrase.words
    span = phrase.end - phrase.start
    progress = clamp01((frame - phrase.start) / span) if span > 0 else 0.0
    word_index = min(math.floor(progress * len(words)), max(len(words) - 1, 0))

    fade_in = ease_out(frame, 0, 1, phrase.start, phrase.start + FADE_FRAMES)
    fade_out = ease_out(frame, 1, 0, phrase.end - FADE_FRAMES, phrase.end) if frame > phrase.end - FADE_FRAMES else 1.0

    return CaptionState(
        text=phrase.text,
        words=words,
        word_index=word_index,
        highlighted=[i <= word_index for i in range(len(words))],
        opacity=fade_in * fade_out,
        offset_y=ease_out(frame, 6, 0, phrase.start, phrase.start + RISE_FRAMES),
    )


def resolve_caption(captions: Sequence[CaptionPhrase], frame: int) -> Optional[CaptionState]:
    phrase = active_caption(captions, frame)
    return caption_state(phrase, frame) if phrase else None


def caption_overlay(frame: int, captions: Sequence[CaptionPhrase]) -> Optional[Node]:
    """Caja de subtítulo inferior, o None si no hay frase activa."""
    state = resolve_caption(captions, frame)
    if state is None:
        return None
    words = [
        node("word", text=word, color=TEXT if lit else TEXT_SEC)
        for word, lit in zip(state.words, state.highlighted)
    ]
    return node(
        "caption",
        *words,
        opacity=state.opacity,
        translate_y=state.offset_y,
        font_family=SANS,
        font_size=14,
        bottom=40,
        z_index=CAPTION_Z,
    )


def find_overlaps(captions: Sequence[CaptionPhrase]) -> List[Tuple[CaptionPhrase, CaptionPhrase]]:
    """Pares de frases cuyos intervalos se solapan (la segunda quedaría oculta)."""
    overlaps = []
    for i, first in enumerate(captions):
        for second in captions[i + 1:]:
            if first.start <= second.end and second.start <= first.end:
                overlaps.append((first, second))
    return overlaps
