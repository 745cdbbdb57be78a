"""
AnalyticsFeedbackVideo: 50 segundos sobre puntuaciones, feedback y progreso.
"""

from dataclasses import replace

from ..animation.interpolation import ease_in_out, ease_out, round_half_up
from ..domain.models import CaptionPhrase, Node, Scene, ScoreDimension, node
from ..primitives.charts import dimension_bars, radar_chart, score_color, score_montage, score_ring
from ..primitives.overlays import pulsing_glow
from ..primitives.palette import GOLD, GREEN, NAVY_CARD, TEXT_SEC, TEXT_TER
from ..primitives.particles import golden_particles
from ..primitives.phone import CSS_PHONE, phone_mockup
from ..primitives.text import accent_line, button, text, text_reveal
from .common import CHIME, CTA_URL, backdrop, cinematic_layers, cue, music, navy_layers, voiceovers, whooshes
from .composition import Composition

DURATION = 1500

NARROW_PHONE = replace(CSS_PHONE, width=240)

SCENES = [
    Scene(id="hook", start=0, duration=120, crossfade=10),
    Scene(id="score-circle", start=110, duration=150, crossfade=10),
    Scene(id="seven-dimensions", start=250, duration=210, crossfade=10),
    Scene(id="written-feedback", start=450, duration=150, crossfade=10),
    Scene(id="portfolio", start=590, duration=180, crossfade=10),
    Scene(id="session-history", start=760, duration=150, crossfade=10),
    Scene(id="skills-radar", start=900, duration=150, crossfade=10),
    Scene(id="streak-readiness", start=1040, duration=150, crossfade=10),
    Scene(id="progress-montage", start=1180, duration=120, crossfade=10),
    Scene(id="cta", start=1290, duration=210, crossfade=0),
]

CAPTIONS = [
    CaptionPhrase(text="How good are you, really?", start=5, end=95),
    CaptionPhrase(text="After every session, RATIO tells you exactly where you stand.", start=120, end=240),
    CaptionPhrase(text="Seven dimensions of advocacy. Scored individually.", start=260, end=370),
    CaptionPhrase(text="So you know precisely what to work on.", start=373, end=440),
    CaptionPhrase(text="Detailed written feedback. Strengths highlighted.", start=460, end=540),
    CaptionPhrase(text="Improvements pinpointed.", start=543, end=590),
    CaptionPhrase(text="Your portfolio tracks every session.", start=600, end=690),
    CaptionPhrase(text="Watch your average climb over time.", start=693, end=760),
    CaptionPhrase(text="Review any past performance.", start=770, end=840),
    CaptionPhrase(text="Filter by module or session type.", start=843, end=900),
    CaptionPhrase(text="See your complete advocacy profile at a glance.", start=910, end=1030),
    CaptionPhrase(text="Track your streak. Monitor your SQE2 readiness.", start=1050, end=1140),
    CaptionPhrase(text="Stay consistent.", start=1143, end=1180),
    CaptionPhrase(text="Every session makes you sharper.", start=1190, end=1280),
    CaptionPhrase(text="RATIO. See how far you can go.", start=1310, end=1480),
]

# Música que baja bajo cada locución y sube en las transiciones
MUSIC_FRAMES = [0, 15, 100, 115, 235, 255, 435, 455, 585, 605, 745, 765,
                895, 915, 1035, 1055, 1175, 1195, 1275, 1295, 1475, 1500]
MUSIC_VOLUMES = [0, 0.08, 0.08, 0.03, 0.03, 0.08, 0.03, 0.08, 0.03, 0.08, 0.03, 0.08,
                 0.03, 0.08, 0.03, 0.08, 0.03, 0.08, 0.08, 0.03, 0.03, 0.02]

AUDIO = [
    music("audio/music/ambient-pad-60s.mp3", MUSIC_FRAMES, MUSIC_VOLUMES),
    *voiceovers("audio/voiceover/analytics",
                [5, 120, 260, 460, 600, 770, 910, 1050, 1190, 1310],
                [90, 120, 180, 130, 150, 130, 120, 130, 90, 120], volume=0.92),
    cue(CHIME, 150, 50, 0.15),
    *whooshes([108, 248, 448, 588, 758, 898, 1038, 1178, 1288]),
]

DIMENSIONS = [
    ScoreDimension(label="Argument Structure", score=78),
    ScoreDimension(label="Use of Authorities", score=82),
    ScoreDimension(label="Oral Delivery", score=65),
    ScoreDimension(label="Response to Interventions", score=70),
    ScoreDimension(label="Court Manner", score=85),
    ScoreDimension(label="Persuasiveness", score=68),
    ScoreDimension(label="Time Management", score=72),
]

SESSION_HISTORY = [
    ("13 Feb", "Constitutional Law", "Moot", 78),
    ("10 Feb", "Criminal Law", "Moot Court", 72),
    ("7 Feb", "Tort Law", "Moot", 81),
    ("3 Feb", "Administrative Law", "Moot Court", 65),
    ("30 Jan", "Contract Law", "Moot", 74),
]

RADAR_LABELS = ["Legal Knowledge", "Case Analysis", "Oral Delivery", "Procedure",
                "Persuasion", "Engagement", "Conduct"]
RADAR_VALUES = [78, 82, 65, 70, 85, 68, 72]

STRENGTHS = ["Strong application of case authorities", "Clear structure in submissions", "Confident court manner"]
IMPROVEMENTS = ["Develop statutory interpretation argument", "Manage time allocation better"]

# (etiqueta, valor numérico o texto fijo, sufijo)
PORTFOLIO_STATS = [
    ("Sessions", 24, ""),
    ("Avg Score", 72, "%"),
    ("Best Module", "Tort Law", ""),
    ("Streak", 12, " days"),
]
PORTFOLIO_TREND = [45, 52, 58, 55, 62, 68, 65, 72]


def hook(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("How good are you?", size=34, serif=True, weight=700), delay=5),
        accent_line(frame, 80, delay=15),
        text_reveal(frame, text("really?", size=28, serif=True, color=GOLD, font_style="italic"), delay=30),
    )


def score_circle(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("Session Complete · Judgment Delivered", size=11, color=TEXT_SEC,
                                letter_spacing=2), delay=0, duration=20),
        score_ring(frame, 78, radius=80, stroke=8),
    )


def seven_dimensions(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("Seven Dimensions", size=22, serif=True, weight=700), delay=3),
        dimension_bars(frame, DIMENSIONS),
    )


def feedback_items(frame: int, items, color: str, first_delay: int) -> list:
    return [
        node("list_item", text(item, size=10), bullet=color,
             opacity=ease_out(frame, 0, 1, first_delay + i * 15, first_delay + i * 15 + 15))
        for i, item in enumerate(items)
    ]


def written_feedback(frame: int) -> Node:
    screen = node(
        "stack",
        text("Judgment", size=14, serif=True, weight=700),
        text("Strengths", size=10, weight=700, color=GREEN),
        *feedback_items(frame, STRENGTHS, GREEN, 40),
        text("Improvements", size=10, weight=700, color=GOLD),
        *feedback_items(frame, IMPROVEMENTS, GOLD, 85),
        align="start",
        translate_y=ease_in_out(frame, 0, -60, 30, 130),
    )
    return backdrop(phone_mockup(frame, screen, tilt="left", ken_burns_mode="pan-up", motion=NARROW_PHONE))


def stat_card(frame: int, index: int, label: str, value, suffix: str) -> Node:
    delay = 15 + index * 12
    if isinstance(value, str):
        shown = value
    else:
        shown = f"{round_half_up(ease_out(frame, 0, value, delay + 5, delay + 40))}{suffix}"
    return node(
        "card",
        text(shown, size=18, serif=True, weight=700, color=GOLD),
        text(label.upper(), size=8, color=TEXT_TER, letter_spacing=1,
             opacity=ease_out(frame, 0, 1, delay + 10, delay + 25)),
        background=NAVY_CARD,
        opacity=ease_out(frame, 0, 1, delay, delay + 20),
        translate_y=ease_out(frame, 16, 0, delay, delay + 20),
    )


def portfolio(frame: int) -> Node:
    bars = [
        node("bar", height=ease_out(frame, 0, v / 100 * 30, 60 + i * 5, 75 + i * 5), color=GOLD)
        for i, v in enumerate(PORTFOLIO_TREND)
    ]
    screen = node(
        "stack",
        text("PORTFOLIO", size=9, color=GOLD, letter_spacing=2.5),
        node("grid", *[stat_card(frame, i, *stat) for i, stat in enumerate(PORTFOLIO_STATS)], columns=2, gap=8),
        node("card", text("Average Trend", size=9, color=TEXT_SEC), node("bars", *bars), background=NAVY_CARD),
        translate_y=ease_in_out(frame, 0, -80, 20, 130),
    )
    return backdrop(phone_mockup(frame, screen, tilt="right", ken_burns_mode="zoom-in", motion=NARROW_PHONE))


def session_history(frame: int) -> Node:
    cards = []
    for i, (date, module, session_type, score) in enumerate(SESSION_HISTORY):
        delay = 15 + i * 10
        cards.append(node(
            "card",
            text(date, size=9, color=TEXT_TER),
            text(module, size=12, serif=True, weight=700),
            text(session_type, size=9, color=TEXT_SEC),
            node("bar", width_percent=ease_out(frame, 0, score, delay + 10, delay + 30), color=score_color(score)),
            text(str(score), size=12, color=score_color(score)),
            background=NAVY_CARD,
            opacity=ease_out(frame, 0, 1, delay, delay + 15),
            translate_x=ease_out(frame, 30, 0, delay, delay + 15),
        ))
    return backdrop(
        text_reveal(frame, text("Session History", size=22, serif=True, weight=700), delay=3),
        node("stack", *cards, gap=8),
    )


def skills_radar(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("Advocacy Profile", size=22, serif=True, weight=700), delay=3),
        radar_chart(frame, RADAR_VALUES, RADAR_LABELS),
    )


def streak_readiness(frame: int) -> Node:
    readiness = ease_out(frame, 0, 68, 10, 60)
    return backdrop(
        node(
            "card",
            node("emoji", glyph="\U0001f525", size=32),
            text(str(round_half_up(ease_out(frame, 0, 12, 10, 40))), size=44, serif=True, weight=700, color=GOLD),
            text("day streak", size=11, color=TEXT_SEC),
            background=NAVY_CARD,
        ),
        node(
            "conic_ring",
            text(f"{round_half_up(readiness)}%", size=28, serif=True, weight=700),
            text("SQE2 Readiness", size=10, color=TEXT_SEC),
            angle=readiness / 100 * 360,
            color=GOLD,
        ),
    )


def progress_montage(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("Every session makes you sharper", size=20, serif=True, weight=700), delay=3),
        score_montage(frame),
        node("bar", width_percent=ease_out(frame, 45, 78, 10, 80), color=GREEN),
    )


def cta(frame: int) -> Node:
    return node(
        "stack",
        golden_particles(frame, 14),
        pulsing_glow(frame),
        text_reveal(frame, text("RATIO.", size=52, serif=True, weight=700), delay=5),
        accent_line(frame, 60, delay=20),
        text_reveal(frame, text("See how far you can go.", size=16, serif=True, color=TEXT_SEC), delay=30),
        text_reveal(frame, button("Start Practising"), delay=50),
        text_reveal(frame, text(CTA_URL, size=11, color="rgba(201,168,76,0.5)"), delay=65),
        align="center",
        fill=True,
        scale=ease_in_out(frame, 0.95, 1.0, 0, 60),
    )


def hook_layers(frame: int):
    """Partículas doradas solo durante el gancho inicial."""
    layers = navy_layers()(frame)
    if frame < SCENES[1].start:
        layers.append(golden_particles(frame, 10))
    return layers


def build() -> Composition:
    return Composition(
        id="AnalyticsFeedbackVideo",
        duration_in_frames=DURATION,
        scenes=SCENES,
        renderers={
            "hook": hook,
            "score-circle": score_circle,
            "seven-dimensions": seven_dimensions,
            "written-feedback": written_feedback,
            "portfolio": portfolio,
            "session-history": session_history,
            "skills-radar": skills_radar,
            "streak-readiness": streak_readiness,
            "progress-montage": progress_montage,
            "cta": cta,
        },
        captions=CAPTIONS,
        audio=AUDIO,
        background=hook_layers,
        overlays=cinematic_layers(DURATION, vignette_intensity=0.45, grain_opacity=0.025),
    )
