"""Fixtures compartidos para los tests de ratio-reels."""

import pytest

from ratio_reels.compositions.composition import Composition
from ratio_reels.domain.models import CaptionPhrase, ChatMessage, Scene, node
from ratio_reels.registry import default_registry


@pytest.fixture(scope="session")
def registry():
    """Registro completo; construirlo es caro, se comparte en toda la sesión."""
    return default_registry()


@pytest.fixture
def scene():
    return Scene(id="scenario", start=100, duration=200, crossfade=10)


@pytest.fixture
def judge_message():
    """Mensaje de 120 caracteres a 0.58 caracteres por frame."""
    return ChatMessage(
        role="judge",
        typing_start=115,
        message_start=150,
        chars_per_frame=0.58,
        voice_duration_frames=209,
        text="This court is now in session. Counsel, you may proceed with your submissions "
             "on the matter of parliamentary sovereignty.",
    )


@pytest.fixture
def closing_caption():
    return CaptionPhrase(text="RATIO. See how far you can go.", start=1310, end=1480)


def make_composition(scenes, captions=(), audio=(), duration=300, renderers=None, **kwargs) -> Composition:
    """Composición mínima: cada escena dibuja un texto con su id."""
    if renderers is None:
        renderers = {
            s.id: (lambda frame, sid=s.id: node("text", text=sid, frame=frame))
            for s in scenes
        }
    return Composition(
        id="TestComposition",
        duration_in_frames=duration,
        scenes=scenes,
        renderers=renderers,
        captions=captions,
        audio=audio,
        **kwargs,
    )


@pytest.fixture
def composition_factory():
    return make_composition
