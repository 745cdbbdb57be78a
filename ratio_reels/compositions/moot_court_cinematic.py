"""
MootCourtCinematic: promo de 73 segundos con ritmo pausado.

Nueve escenas encadenadas con crossfade de 10 frames, una idea por escena.
Las pantallas reales se muestran en el mockup 3D con Ken Burns lento; las
motas doradas usan el frame absoluto para no saltar al cambiar de escena.
"""

import math
from dataclasses import replace

from ..animation.interpolation import ease_out, interpolate
from ..domain.models import CaptionPhrase, Node, Scene
from ..primitives.overlays import flash, radial_glow
from ..primitives.palette import GOLD, TEXT_SEC
from ..primitives.particles import floating_motes
from ..primitives.phone import CSS_PHONE, phone_mockup
from ..primitives.text import accent_line, button, text, text_reveal
from .common import CHIME, CTA_URL, backdrop, cinematic_layers, cue, music, navy_layers, title_block, whooshes
from .composition import Composition

DURATION = 2190

SCENES = [
    Scene(id="cold-open", start=0, duration=85, crossfade=10),
    Scene(id="preparation", start=75, duration=240, crossfade=10),
    Scene(id="choose-judge", start=305, duration=280, crossfade=10),
    Scene(id="case-brief", start=575, duration=315, crossfade=10),
    Scene(id="court-opens", start=880, duration=305, crossfade=10),
    Scene(id="exchange", start=1175, duration=305, crossfade=10),
    Scene(id="feedback", start=1470, duration=210, crossfade=10),
    Scene(id="improvement", start=1670, duration=265, crossfade=10),
    Scene(id="cta", start=1925, duration=265, crossfade=0),
]
STARTS = {scene.id: scene.start for scene in SCENES}

CAPTIONS = [
    CaptionPhrase(text="Every advocate starts somewhere.", start=8, end=60),
    CaptionPhrase(text="Long before the courtroom.", start=83, end=145),
    CaptionPhrase(text="Before the wig, the gown, any of it.", start=150, end=225),
    CaptionPhrase(text="There's the work you do when nobody's watching.", start=230, end=288),
    CaptionPhrase(text="RATIO pairs you with an AI Judge.", start=313, end=390),
    CaptionPhrase(text="Four temperaments: strict, Socratic, pragmatic, or standard.", start=395, end=500),
    CaptionPhrase(text="You pick the bench.", start=505, end=560),
    CaptionPhrase(text="You get a genuine constitutional law brief.", start=583, end=680),
    CaptionPhrase(text="Real authorities, real facts,", start=685, end=770),
    CaptionPhrase(text="and a role, whichever suits you.", start=775, end=863),
    CaptionPhrase(text="Then the session starts.", start=888, end=958),
    CaptionPhrase(text="You argue your case, live, in real time.", start=963, end=1060),
    CaptionPhrase(text="And when you slip, the Judge pushes back.", start=1065, end=1157),
    CaptionPhrase(text="You distinguish the authorities.", start=1183, end=1260),
    CaptionPhrase(text="You think on your feet.", start=1265, end=1340),
    CaptionPhrase(text="It feels like standing before a real bench.", start=1345, end=1454),
    CaptionPhrase(text="When it's over, you get a proper judgment.", start=1478, end=1564),
    CaptionPhrase(text="Scored across seven dimensions of advocacy.", start=1569, end=1650),
    CaptionPhrase(text="Detailed written feedback.", start=1678, end=1748),
    CaptionPhrase(text="What worked, what didn't,", start=1753, end=1823),
    CaptionPhrase(text="and a clear sense of where to go next.", start=1828, end=1910),
    CaptionPhrase(text="RATIO. The Digital Court Society.", start=1933, end=2010),
    CaptionPhrase(text="It's free for UK law students.", start=2015, end=2075),
    CaptionPhrase(text="You can start today.", start=2080, end=2138),
]

# (pista, inicio, duración) de cada locución
VOICEOVER = [
    ("cinematic-01-cold-open", 8, 52),
    ("cinematic-02-preparation", 83, 205),
    ("cinematic-03-choose-judge", 313, 247),
    ("cinematic-04-case-brief", 583, 280),
    ("cinematic-05-court-opens", 888, 269),
    ("cinematic-06-exchange", 1183, 271),
    ("cinematic-07-feedback", 1478, 172),
    ("cinematic-08-improvement", 1678, 232),
    ("cinematic-09-cta", 1933, 205),
]

AUDIO = [
    music("audio/music/ambient-pad-75s.mp3", [0, 30, 880, 1470, 1925, 2100, 2180],
          [0, 0.08, 0.10, 0.12, 0.10, 0.06, 0.03]),
    cue("audio/sfx/courtroom-tone.mp3", 0, None, 0.12),
    cue("audio/sfx/courtroom-murmur.mp3", 0, 300, 0.10),
    *whooshes([70, 300, 570, 875, 1170, 1465, 1665, 1920]),
    cue("audio/sfx/gavel-wood.mp3", 885, 15, 0.40),
    cue("audio/sfx/paper-shuffle.mp3", 585, 25, 0.15),
    cue("audio/sfx/door-close.mp3", 3, 45, 0.12),
    cue(CHIME, 1475, 45, 0.15),
    *[cue(f"audio/voiceover/{name}.mp3", start, duration, 0.92) for name, start, duration in VOICEOVER],
]

PHONE = replace(CSS_PHONE, width=260)


def motes(scene_id: str, frame: int, count: int) -> Node:
    return floating_motes(frame + STARTS[scene_id], count)


def cold_open(frame: int) -> Node:
    return backdrop(
        radial_glow(ease_out(frame, 200, 450, 0, 120), top="50%", opacity=ease_out(frame, 0, 0.1, 10, 80)),
        text_reveal(frame, text("RATIO.", size=48, serif=True, weight=700), delay=15, duration=35),
        accent_line(frame, 60, delay=45),
        text_reveal(frame, text("The Digital Court Society", size=14, color=TEXT_SEC, letter_spacing=2),
                    delay=55, duration=30),
    )


def preparation(frame: int) -> Node:
    lines = [
        text_reveal(frame, text(line, size=26, serif=True, color=TEXT_SEC), delay=delay, duration=30)
        for line, delay in (("Before the courtroom.", 10), ("Before the wig.", 35), ("Before the judgment.", 60))
    ]
    return backdrop(
        motes("preparation", frame, 4),
        *lines,
        accent_line(frame, 40, delay=95),
        text_reveal(frame, text("There is preparation.", size=30, serif=True, weight=700, highlight="preparation"),
                    delay=105, duration=30),
    )


def phone_scene(scene_id: str, heading: Node, subtitle: str, subtitle_delay: int, line_width: float,
                line_delay: int, screenshot: str, phone_delay: int, tilt: str, ken_burns: str, particles: int):
    """Escena de pantalla: titular, subtítulo, línea dorada y teléfono 3D."""
    def render(frame: int) -> Node:
        return backdrop(
            motes(scene_id, frame, particles),
            title_block(
                text_reveal(frame, heading, delay=5, duration=25),
                text_reveal(frame, text(subtitle, size=13, color=TEXT_SEC, max_width=300),
                            delay=subtitle_delay, duration=25),
                accent_line(frame, line_width, delay=line_delay),
            ),
            phone_mockup(frame, f"screenshots/mobile/{screenshot}", delay=phone_delay, tilt=tilt,
                         ken_burns_mode=ken_burns, motion=PHONE),
        )
    return render


def heading(content: str, highlight=None, color=None) -> Node:
    style = {"highlight": highlight} if highlight else {}
    if color:
        style["color"] = color
    return text(content, size=26, serif=True, weight=700, **style)


def cta(frame: int) -> Node:
    glow = interpolate(math.sin(frame * 0.04), [-1, 1], [0.06, 0.14])
    pulse = interpolate(math.sin(frame * 0.06), [-1, 1], [0.98, 1.02])
    return backdrop(
        radial_glow(ease_out(frame, 250, 400, 10, 80), strength=glow, top="40%"),
        motes("cta", frame, 8),
        text_reveal(frame, text("RATIO.", size=52, serif=True, weight=700, highlight="."), delay=10, duration=35),
        accent_line(frame, 60, delay=35),
        text_reveal(frame, text("The Digital Court Society", size=16, serif=True, color=TEXT_SEC),
                    delay=45, duration=30),
        text_reveal(frame, text("Free for UK law students.\nTrain with AI. Score your advocacy.",
                                size=13, color=TEXT_SEC), delay=65, duration=30),
        text_reveal(frame, button("Start Practice", scale=pulse), delay=90, duration=30),
        text_reveal(frame, text(CTA_URL, size=11, color="rgba(201,168,76,0.5)"), delay=115, duration=25),
    )


def build() -> Composition:
    court_opens = phone_scene(
        "court-opens", heading("The Court is in Session", color=GOLD),
        "Argue your case in real time.\nThe Judge listens. The Judge challenges.", 25, 50, 35,
        "ai-session-live.png", 30, "left", "zoom-in", 6,
    )

    def court_opens_with_flash(frame: int) -> Node:
        scene = court_opens(frame)
        return scene.model_copy(update={"children": [flash(frame, [15, 25, 55], [0, 0.06, 0]), *scene.children]})

    return Composition(
        id="MootCourtCinematic",
        duration_in_frames=DURATION,
        scenes=SCENES,
        renderers={
            "cold-open": cold_open,
            "preparation": preparation,
            "choose-judge": phone_scene(
                "choose-judge", heading("Choose Your AI Judge", highlight="AI Judge"),
                "Four judicial temperaments.\nChoose the bench you wish to face.", 20, 35, 30,
                "moot-court-mobile.png", 25, "left", "zoom-in", 5,
            ),
            "case-brief": phone_scene(
                "case-brief", heading("Your Case Brief", highlight="Case Brief"),
                "Real constitutional law scenarios.\nThe authorities. The facts. Your role as counsel.", 20, 35, 30,
                "ai-briefing-case.png", 25, "right", "pan-down", 4,
            ),
            "court-opens": court_opens_with_flash,
            "exchange": phone_scene(
                "exchange", heading("Argue Your Case", highlight="Case"),
                "Make your submissions. Distinguish the authorities.\nThink on your feet.", 20, 35, 30,
                "ai-session-exchange.png", 25, "right", "pan-up", 5,
            ),
            "feedback": phone_scene(
                "feedback", heading("Your Judgment", highlight="Judgment"),
                "Scored across seven dimensions of advocacy.\nKnow exactly where you stand.", 20, 35, 30,
                "ai-feedback-score.png", 25, "left", "zoom-in", 5,
            ),
            "improvement": phone_scene(
                "improvement", heading("Written Feedback.\nKey Improvements.", highlight="Key Improvements."),
                "A clear path to becoming\nthe advocate you intend to be.", 25, 35, 35,
                "ai-feedback-judgment.png", 30, "right", "pan-down", 4,
            ),
            "cta": cta,
        },
        captions=CAPTIONS,
        audio=AUDIO,
        background=navy_layers(),
        overlays=cinematic_layers(DURATION, vignette_intensity=0.55, grain_opacity=0.03, progress_fade=(150, 180)),
    )
