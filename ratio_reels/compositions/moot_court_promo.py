"""
MootCourtPromo: 20 segundos sin locución sobre el juez IA.
Pantallas planas con entradas lineales; cada escena entra y sale con un
fundido de 25 frames centrado en sus bordes nominales.
"""

from ..domain.models import Node, Scene
from ..primitives.overlays import pulsing_glow
from ..primitives.palette import TEXT_SEC
from ..primitives.phone import flat_phone
from ..primitives.text import accent_line, button, fade_slide, text
from .common import CTA_URL, backdrop, cinematic_layers, navy_layers, title_block
from .composition import Composition

DURATION = 600

# El fundido empieza LEAD frames antes del borde nominal de cada escena
LEAD = 15

SCENES = [
    Scene(id="intro", start=-15, duration=100, crossfade=25, fade_in=25),
    Scene(id="hook", start=50, duration=100, crossfade=25, fade_in=25),
    Scene(id="mode-select", start=115, duration=105, crossfade=25, fade_in=25),
    Scene(id="briefing", start=185, duration=105, crossfade=25, fade_in=25),
    Scene(id="session-open", start=255, duration=105, crossfade=25, fade_in=25),
    Scene(id="session-active", start=325, duration=105, crossfade=25, fade_in=25),
    Scene(id="feedback", start=395, duration=105, crossfade=25, fade_in=25),
    Scene(id="cta", start=465, duration=135, crossfade=0, fade_in=30),
]

# (escena, título, descripción, captura)
FEATURES = [
    ("mode-select", "Choose Your AI Judge",
     "Four judicial temperaments. Adversarial, strict, pragmatist, or Socratic.", "moot-court-mobile.png"),
    ("briefing", "Your Case Brief",
     "Real constitutional law scenarios. Key authorities. Your role as counsel.", "ai-briefing-case.png"),
    ("session-open", "The Court is in Session",
     "Real-time exchanges with the AI Judge. Voice input. Quick phrases. 15-minute timer.", "ai-session-live.png"),
    ("session-active", "Argue Your Case",
     "The Judge challenges your submissions. Distinguish authorities. Think on your feet.",
     "ai-session-exchange.png"),
    ("feedback", "Your Judgment",
     "Scored across 7 dimensions. Written feedback. Actionable improvement areas.", "ai-feedback-score.png"),
]


def led(render):
    def nominal(frame: int) -> Node:
        return render(frame - LEAD)
    return nominal


def intro(frame: int) -> Node:
    return backdrop(
        fade_slide(frame, text("RATIO.", size=52, serif=True, weight=700, highlight="."), delay=5),
        accent_line(frame, 60, delay=20, duration=20, eased=False),
        fade_slide(frame, text("AI Advocacy Training", size=14, color=TEXT_SEC, letter_spacing=2), delay=25),
    )


def hook(frame: int) -> Node:
    return backdrop(
        fade_slide(frame, text("How do you prepare for\nthe courtroom\nbefore you get there?", size=28,
                               serif=True, weight=600, highlight="the courtroom"), delay=0),
        accent_line(frame, 40, delay=15, duration=20, eased=False),
        fade_slide(frame, text("Argue before an AI Judge. Get scored on 7 dimensions. Practise anytime, anywhere.",
                               size=13, color=TEXT_SEC, max_width=300), delay=20),
    )


def feature(title: str, description: str, screenshot: str):
    def render(frame: int) -> Node:
        return backdrop(
            fade_slide(frame, title_block(
                text(title, size=24, serif=True, weight=600),
                text(description, size=12, color=TEXT_SEC, max_width=300),
                accent_line(frame, 30, delay=8, duration=20, eased=False),
            )),
            flat_phone(frame, f"screenshots/mobile/{screenshot}", delay=10, scale=1.0, entry_scale=0.92),
        )
    return render


def cta(frame: int) -> Node:
    return backdrop(
        pulsing_glow(frame),
        fade_slide(frame, text("RATIO.", size=56, serif=True, weight=700, highlight="."), delay=5),
        accent_line(frame, 50, delay=15, duration=20, eased=False),
        fade_slide(frame, text("Free for UK law students.\nTrain with AI. Score your advocacy.",
                               size=14, color=TEXT_SEC), delay=20),
        fade_slide(frame, button("Start Practice"), delay=30),
        fade_slide(frame, text(CTA_URL, size=11, color=TEXT_SEC), delay=40),
    )


def build() -> Composition:
    renderers = {"intro": intro, "hook": hook, "cta": cta}
    for scene_id, title, description, screenshot in FEATURES:
        renderers[scene_id] = feature(title, description, screenshot)
    return Composition(
        id="MootCourtPromo",
        duration_in_frames=DURATION,
        scenes=SCENES,
        renderers={scene_id: led(render) for scene_id, render in renderers.items()},
        background=navy_layers(),
        overlays=cinematic_layers(DURATION, vignette_intensity=0, grain_opacity=0, progress_fade=(60, 61),
                                  progress_opacity=0.6, progress_height=3),
    )
