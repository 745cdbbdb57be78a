"""
AIPracticeShort: corto de 32 segundos sobre la práctica con juez IA.
Usa capturas reales dentro del mockup 3D y transiciones más rápidas.
"""

import math
from typing import Optional

from ..animation.interpolation import ease_out, interpolate
from ..domain.models import CaptionPhrase, Node, Scene
from ..primitives.overlays import flash, radial_glow
from ..primitives.palette import TEXT_SEC
from ..primitives.phone import SCREENSHOT_PHONE, phone_mockup
from ..primitives.text import accent_line, button, text, text_reveal
from .common import CHIME, CTA_URL, WHOOSH, backdrop, cinematic_layers, cue, music, navy_layers, title_block
from .composition import Composition

DURATION = 950
SCREENSHOTS = "screenshots/mobile"

SCENES = [
    Scene(id="hook", start=0, duration=90, crossfade=15),
    Scene(id="intro", start=80, duration=120, crossfade=15),
    Scene(id="choose-judge", start=190, duration=120, crossfade=15),
    Scene(id="case-brief", start=300, duration=120, crossfade=15),
    Scene(id="session", start=410, duration=150, crossfade=15),
    Scene(id="feedback", start=550, duration=120, crossfade=15),
    Scene(id="cta", start=650, duration=300, crossfade=0),
]

CAPTIONS = [
    CaptionPhrase(text="Can you argue before a judge?", start=8, end=83),
    CaptionPhrase(text="RATIO trains you with AI.", start=90, end=171),
    CaptionPhrase(text="RATIO. The Digital Court Society.", start=665, end=755),
    CaptionPhrase(text="Free for UK law students.", start=759, end=839),
    CaptionPhrase(text="Start practice today.", start=843, end=934),
]

WHOOSH_VOLUMES = {75: 0.20, 185: 0.18, 295: 0.18, 405: 0.18, 545: 0.18, 645: 0.15}

AUDIO = [
    music("audio/music/ambient-pad-30s.mp3", [0, 15, 400, 650, 900, 950], [0, 0.08, 0.10, 0.08, 0.04, 0.02]),
    *[cue(WHOOSH, f, 15, v) for f, v in WHOOSH_VOLUMES.items()],
    cue("audio/sfx/gavel-tap.mp3", 415, 12, 0.30),
    cue(CHIME, 555, 45, 0.12),
    cue("audio/voiceover/short-01-hook.mp3", 8, 75, 0.85),
    cue("audio/voiceover/short-02-intro.mp3", 90, 81, 0.85),
    cue("audio/voiceover/short-03-cta.mp3", 665, 269, 0.85),
]


def line(frame: int, width: float, delay: int) -> Node:
    return accent_line(frame, width, delay=delay, duration=20)


def hook(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("Can you argue before a judge?", size=30, serif=True, weight=700,
                                highlight="judge"), delay=5, duration=20),
    )


def intro(frame: int) -> Node:
    return backdrop(
        radial_glow(ease_out(frame, 150, 350, 0, 80), strength=0.08, top="42%"),
        text_reveal(frame, text("RATIO.", size=44, serif=True, weight=700), delay=8, duration=25),
        line(frame, 50, 25),
        text_reveal(frame, text("trains you with AI", size=14, color=TEXT_SEC, highlight="AI"),
                    delay=30, duration=22),
    )


def screenshot_scene(title: str, highlight: Optional[str], screenshot: str, tilt: str, phone_delay: int = 12,
                     subtitle: Optional[str] = None, line_width: float = 30):
    """Título, subtítulo opcional y captura en el teléfono inclinado."""
    def render(frame: int) -> Node:
        header = [text_reveal(frame, text(title, size=22, serif=True, weight=700, highlight=highlight),
                              delay=3, duration=18)]
        if subtitle:
            header.append(text_reveal(frame, text(subtitle, size=12, color=TEXT_SEC),
                                      delay=phone_delay - 2, duration=18))
        return backdrop(
            title_block(*header, line(frame, line_width, phone_delay)),
            phone_mockup(frame, f"{SCREENSHOTS}/{screenshot}", delay=phone_delay, tilt=tilt,
                         motion=SCREENSHOT_PHONE),
        )
    return render


def session(frame: int) -> Node:
    content = screenshot_scene("Court is in Session", None, "ai-session-exchange.png", "left",
                               phone_delay=18, subtitle="Real-time exchanges with the AI Judge",
                               line_width=40)(frame)
    return backdrop(flash(frame, [10, 20, 40], [0, 0.05, 0]), content)


def cta(frame: int) -> Node:
    glow = interpolate(math.sin(frame * 0.05), [-1, 1], [0.06, 0.14])
    return backdrop(
        radial_glow(350, strength=glow, top="38%"),
        text_reveal(frame, text("RATIO.", size=44, serif=True, weight=700), delay=8, duration=25),
        line(frame, 50, 25),
        text_reveal(frame, text("Free for UK law students. Train with AI. Score your advocacy.",
                                size=13, color=TEXT_SEC, max_width=250), delay=35, duration=22),
        text_reveal(frame, button("Start Practice", scale=interpolate(math.sin(frame * 0.07), [-1, 1], [0.98, 1.02])),
                    delay=55, duration=22),
        text_reveal(frame, text(CTA_URL, size=11, color="rgba(201,168,76,0.5)"), delay=70, duration=20),
    )


def build() -> Composition:
    return Composition(
        id="AIPracticeShort",
        duration_in_frames=DURATION,
        scenes=SCENES,
        renderers={
            "hook": hook,
            "intro": intro,
            "choose-judge": screenshot_scene("Choose Your AI Judge", "AI Judge", "ai-practice-mobile.png", "left"),
            "case-brief": screenshot_scene("Your Case Brief", "Case Brief", "ai-briefing-case.png", "right"),
            "session": session,
            "feedback": screenshot_scene("Your Judgment", "Judgment", "ai-feedback-score.png", "right",
                                         phone_delay=16, subtitle="Scored across 7 dimensions"),
            "cta": cta,
        },
        captions=CAPTIONS,
        audio=AUDIO,
        background=navy_layers(),
        overlays=cinematic_layers(DURATION, vignette_intensity=0.5, grain_opacity=0.03),
        fade_in=18,
        buffer=5,
    )
