"""
RatioShowcase: recorrido de 20 segundos por las pantallas de la plataforma.
"""

from ..domain.models import Node, Scene
from ..primitives.overlays import pulsing_glow, radial_glow
from ..primitives.palette import GOLD, TEXT_SEC
from ..primitives.phone import flat_phone
from ..primitives.text import accent_line, button, fade_slide, text
from .common import CTA_URL, backdrop, cinematic_layers, navy_layers, title_block
from .composition import Composition

DURATION = 600

SCENES = [
    Scene(id="intro", start=0, duration=90, crossfade=20, fade_in=0),
    Scene(id="dashboard", start=75, duration=100, crossfade=15),
    Scene(id="ai-practice", start=165, duration=100, crossfade=15),
    Scene(id="sessions", start=255, duration=100, crossfade=15),
    Scene(id="law-book", start=345, duration=100, crossfade=15),
    Scene(id="community", start=435, duration=90, crossfade=15),
    Scene(id="cta", start=510, duration=90, z_index=1),
]

FEATURES = {
    "dashboard": (
        "Your Dashboard",
        "Track your advocacy journey. Practice streaks, session history, and skill progress, all in one place.",
        "screenshots/mobile/dashboard-mobile.png",
    ),
    "ai-practice": (
        "AI Advocacy Training",
        "Practice against an AI Judge. Real-time feedback on argumentation, legal reasoning, and case strategy.",
        "screenshots/mobile/ai-practice-mobile.png",
    ),
    "sessions": (
        "Live Video Mooting",
        "Schedule and join live moot court sessions with peers. Video, roles, and structured format.",
        "screenshots/mobile/sessions-mobile.png",
    ),
    "law-book": (
        "The Law Book",
        "17 modules. 300+ topics. Core qualifying subjects, professional practice, specialist areas, and jurisprudence.",
        "screenshots/mobile/law-book-mobile.png",
    ),
    "community": (
        "The Community",
        "Connect with advocates from 142 UK universities. Follow, commend, and rise through the ranks.",
        "screenshots/mobile/community-mobile.png",
    ),
}


def intro(frame: int) -> Node:
    return backdrop(
        radial_glow(400, strength=0.08, top="30%"),
        fade_slide(frame, text("RATIO.", size=48, serif=True, weight=700), delay=5),
        accent_line(frame, 60, delay=20, duration=20, eased=False),
        fade_slide(frame, text("The Digital Constitutional Society", size=14, color=TEXT_SEC), delay=25),
        fade_slide(frame, text("For UK Law Students", size=12, color="rgba(201,168,76,0.7)"), delay=40),
    )


def feature(title: str, description: str, screenshot: str):
    """Escena de funcionalidad reutilizable: título, descripción y captura."""
    def render(frame: int) -> Node:
        return backdrop(
            fade_slide(frame, title_block(
                text(title, size=24, serif=True, weight=700),
                text(description, size=13, color=TEXT_SEC, max_width=300),
                accent_line(frame, 40, delay=10, duration=20, eased=False),
            )),
            flat_phone(frame, screenshot, delay=12),
        )
    return render


def cta(frame: int) -> Node:
    return backdrop(
        pulsing_glow(frame),
        fade_slide(frame, text("RATIO.", size=40, serif=True, weight=700), delay=5),
        accent_line(frame, 50, delay=15, duration=20, eased=False),
        fade_slide(frame, text("Free forever. Built for UK law students. 142 universities supported.",
                               size=13, color=TEXT_SEC, max_width=260), delay=20),
        fade_slide(frame, button("Join as an Advocate"), delay=30),
        fade_slide(frame, text(CTA_URL, size=11, color="rgba(201,168,76,0.6)"), delay=40),
    )


def build() -> Composition:
    renderers = {scene_id: feature(*content) for scene_id, content in FEATURES.items()}
    renderers["intro"] = intro
    renderers["cta"] = cta
    return Composition(
        id="RatioShowcase",
        duration_in_frames=DURATION,
        scenes=SCENES,
        renderers=renderers,
        background=navy_layers(),
        overlays=cinematic_layers(DURATION, vignette_intensity=0.0, grain_opacity=0.0,
                                  progress_fade=(60, 61), progress_opacity=0.6, progress_height=3),
        fade_in=15,
    )
