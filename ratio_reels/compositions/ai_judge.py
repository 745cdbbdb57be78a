"""
AIJudgeVideo: 55 segundos sobre el juez IA.
Mockup de teléfono construido en CSS, chat con máquina de escribir,
puntuación final y llamada a la acción.
"""

import math

from ..animation.interpolation import ease_out, interpolate
from ..domain.models import CaptionPhrase, ChatMessage, Node, Scene, ScoreDimension, node
from ..primitives.chat import chat_thread
from ..primitives.charts import dimension_bars, score_ring
from ..primitives.overlays import radial_glow
from ..primitives.palette import GOLD, GREEN, NAVY_CARD, TEXT_SEC, TEXT_TER
from ..primitives.particles import rising_particles
from ..primitives.phone import phone_mockup
from ..primitives.text import accent_line, button, text, text_reveal
from .common import CHIME, CTA_URL, backdrop, cinematic_layers, cue, music, navy_layers, title_block, \
    voiceovers, whooshes
from .composition import Composition

DURATION = 1650

SCENES = [
    Scene(id="cold-open", start=0, duration=120, crossfade=10),
    Scene(id="reveal", start=110, duration=120, crossfade=10),
    Scene(id="phone-mockup", start=220, duration=150, crossfade=10),
    Scene(id="twenty-four-seven", start=360, duration=150, crossfade=10),
    Scene(id="case-brief", start=500, duration=150, crossfade=10),
    Scene(id="courtroom-chat", start=640, duration=210, crossfade=10),
    Scene(id="judge-personas", start=840, duration=150, crossfade=10),
    Scene(id="score-reveal", start=980, duration=180, crossfade=10),
    Scene(id="strengths", start=1150, duration=150, crossfade=10),
    Scene(id="cta", start=1290, duration=360, crossfade=0),
]

CAPTIONS = [
    CaptionPhrase(text="What if you could face a High Court judge", start=5, end=100),
    CaptionPhrase(text="whenever you wanted?", start=115, end=210),
    CaptionPhrase(text="RATIO puts a courtroom in your pocket.", start=225, end=350),
    CaptionPhrase(text="Twenty four seven. No scheduling. No waiting.", start=365, end=440),
    CaptionPhrase(text="Practice on your terms.", start=442, end=500),
    CaptionPhrase(text="Choose a module. Receive a realistic case brief.", start=510, end=630),
    CaptionPhrase(text="Stand before the judge. Present your argument.", start=645, end=745),
    CaptionPhrase(text="Face real interventions.", start=748, end=830),
    CaptionPhrase(text="Four judicial temperaments.", start=845, end=925),
    CaptionPhrase(text="Each one challenges you differently.", start=928, end=980),
    CaptionPhrase(text="Instant, detailed feedback across seven dimensions.", start=990, end=1100),
    CaptionPhrase(text="Know exactly what you did well", start=1155, end=1220),
    CaptionPhrase(text="and where to sharpen.", start=1223, end=1280),
    CaptionPhrase(text="RATIO. Your courtroom is always open.", start=1310, end=1500),
]

AUDIO = [
    music("audio/music/ambient-pad-55s.mp3", [0, 20, 40, 1280, 1310, 1600, 1645],
          [0, 0.08, 0.04, 0.04, 0.06, 0.06, 0.03]),
    *voiceovers("audio/voiceover/ai-judge",
                [5, 115, 225, 365, 510, 645, 845, 990, 1155, 1310],
                [100, 95, 130, 140, 130, 190, 135, 160, 125, 190], volume=0.92),
    cue("audio/sfx/gavel-wood.mp3", 0, 30, 0.30),
    cue(CHIME, 990, 50, 0.15),
    *whooshes([108, 218, 358, 498, 638, 838, 978, 1148, 1288]),
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

MESSAGES = [
    ChatMessage(role="judge", typing_start=15, message_start=30, chars_per_frame=0.6,
                text="Counsel, you may proceed with your submissions on parliamentary sovereignty."),
    ChatMessage(role="advocate", typing_start=80, message_start=95, chars_per_frame=1.8,
                text="My Lord, the doctrine of parliamentary sovereignty as established in Dicey's framework..."),
    ChatMessage(role="judge", typing_start=140, message_start=155, chars_per_frame=0.5,
                text="Counsel, are you suggesting the duty of care extends that far? "
                     "What is the ratio in Factortame?"),
]

PERSONAS = [
    ("⚖️", "Standard", "The Honourable Justice AI", "Balanced High Court Judge"),
    ("\U0001f4d6", "Strict", "Justice Blackstone AI", "The Strict Constructionist"),
    ("\U0001f50d", "Pragmatist", "Justice Denning AI", "The Pragmatist"),
    ("❓", "Socratic", "Justice Socrates AI", "The Questioner"),
]

STRENGTHS = [
    "Strong application of Factortame precedent",
    "Clear, structured oral submissions",
    "Good court manner and composure",
]

IMPROVEMENTS = [
    "Develop response to EU Withdrawal Act argument",
    "Time management: ran 2 minutes over",
    "Use more concise case citations",
]


def cold_open(frame: int) -> Node:
    return backdrop(
        radial_glow(ease_out(frame, 150, 350, 5, 80), strength=0.08 + 0.04 * math.sin(frame * 0.05), top="45%"),
        node("emoji", glyph="⚖️", size=72,
             opacity=ease_out(frame, 0, 1, 5, 35), scale=ease_out(frame, 0.6, 1, 10, 50)),
        text_reveal(frame, text("What if you could face a", size=20, serif=True, color=TEXT_SEC), delay=20),
        text_reveal(frame, text("High Court judge", size=32, serif=True, weight=700, color=GOLD), delay=32),
    )


def reveal(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("whenever", size=44, serif=True, weight=700), delay=5),
        text_reveal(frame, text("you wanted?", size=44, serif=True, weight=700, color=GOLD), delay=15),
        node("shimmer", position=interpolate(frame, [20, 80], [-100, 200]), color=GOLD),
        accent_line(frame, 80, delay=30),
    )


def moot_court_screen() -> Node:
    """Pantalla de Moot Court dibujada dentro del teléfono."""
    return node(
        "stack",
        text("Moot Court", size=16, serif=True, weight=700),
        text("Constitutional Law", size=10, color=TEXT_SEC),
        node("card", text("Justice AI", size=12, color=GOLD), text("Ready when you are, Counsel.", size=10),
             background=NAVY_CARD),
        button("Begin Session", scale=0.8),
        align="start",
        gap=10,
    )


def phone_scene(frame: int) -> Node:
    return backdrop(
        title_block(
            text_reveal(frame, text("A courtroom", size=24, serif=True, weight=700), delay=3, duration=18),
            text_reveal(frame, text("in your pocket", size=24, serif=True, weight=700, color=GOLD),
                        delay=10, duration=18),
        ),
        phone_mockup(frame, moot_court_screen(), delay=15, tilt="left", ken_burns_mode="zoom-in"),
    )


def twenty_four_seven(frame: int) -> Node:
    return backdrop(
        node(
            "clock",
            node("hand", name="hour", rotation=ease_out(frame, 0, 720, 0, 60)),
            node("hand", name="minute", rotation=ease_out(frame, 0, 360 * 4, 0, 60)),
            opacity=ease_out(frame, 0, 1, 0, 25),
            scale=ease_out(frame, 0.7, 1, 0, 30),
        ),
        text_reveal(frame, text("24/7", size=72, serif=True, weight=700, color=GOLD), delay=20),
        text_reveal(frame, text("No scheduling. No waiting.", size=14, color=TEXT_SEC), delay=40),
        text_reveal(frame, text("Practice on your terms.", size=14), delay=82),
    )


def case_brief_screen(frame: int) -> Node:
    return node(
        "card",
        text("CASE BRIEF", size=9, color=GOLD, letter_spacing=2),
        text("R (Miller) v Secretary of State", size=14, serif=True, weight=700),
        text("Module: Public Law", size=10, color=TEXT_SEC),
        text("You appear for the Appellant.", size=10, color=TEXT_TER),
        background=NAVY_CARD,
        translate_y=ease_out(frame, 40, 0, 30, 55),
        opacity=ease_out(frame, 0, 1, 30, 50),
    )


def case_brief(frame: int) -> Node:
    return backdrop(
        title_block(
            text_reveal(frame, text("Receive a realistic", size=22, serif=True, weight=700), delay=3, duration=18),
            text_reveal(frame, text("case brief", size=22, serif=True, weight=700, color=GOLD),
                        delay=10, duration=18),
        ),
        phone_mockup(frame, case_brief_screen(frame), delay=12, tilt="right", ken_burns_mode="pan-down"),
    )


def courtroom_chat(frame: int) -> Node:
    thread = chat_thread(MESSAGES, frame, slide_distance=8, slide_duration=12, dot_amplitude=2)
    return backdrop(
        text_reveal(frame, text("Stand before the judge", size=22, serif=True, weight=700, highlight="Stand"),
                    delay=3, duration=18),
        phone_mockup(frame, thread, delay=8, tilt="left", ken_burns_mode="zoom-in"),
    )


def judge_personas(frame: int) -> Node:
    cards = []
    for i, (emoji, label, name, description) in enumerate(PERSONAS):
        delay = 25 + i * 12
        cards.append(node(
            "card",
            node("emoji", glyph=emoji, size=24),
            text(label.upper(), size=9, color=GOLD, letter_spacing=1.5),
            text(name, size=12, serif=True, weight=700),
            text(description, size=10, color=TEXT_SEC),
            background=NAVY_CARD,
            opacity=ease_out(frame, 0, 1, delay, delay + 18),
            translate_y=ease_out(frame, 20, 0, delay, delay + 18),
            scale=ease_out(frame, 0.9, 1, delay, delay + 18),
        ))
    return backdrop(
        text_reveal(frame, text("Four judicial temperaments", size=22, serif=True, weight=700), delay=3),
        node("grid", *cards, columns=2, gap=10),
    )


def score_reveal(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("Your Judgment", size=22, serif=True, weight=700), delay=3, duration=18),
        score_ring(frame, 78),
        dimension_bars(frame, DIMENSIONS),
    )


def feedback_list(frame: int, title: str, items, color: str, first_delay: int) -> Node:
    rows = []
    for i, item in enumerate(items):
        delay = first_delay + i * 10
        rows.append(node(
            "list_item",
            text(item, size=11),
            bullet=color,
            opacity=ease_out(frame, 0, 1, delay, delay + 15),
            translate_x=ease_out(frame, -20, 0, delay, delay + 15),
        ))
    return node("card", text(title, size=12, weight=700, color=color), *rows, background=NAVY_CARD)


def strengths(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("Know where you stand", size=22, serif=True, weight=700), delay=3, duration=18),
        feedback_list(frame, "Strengths", STRENGTHS, GREEN, 22),
        feedback_list(frame, "Areas to Improve", IMPROVEMENTS, GOLD, 62),
    )


def cta(frame: int) -> Node:
    glow = interpolate(math.sin(frame * 0.05), [-1, 1], [0.08, 0.16])
    return backdrop(
        radial_glow(ease_out(frame, 250, 400, 10, 80), strength=glow, top="40%"),
        text_reveal(frame, text("RATIO.", size=52, serif=True, weight=700), delay=10),
        accent_line(frame, 60, delay=25),
        text_reveal(frame, text("Your courtroom is always open.", size=16, serif=True, color=TEXT_SEC), delay=35),
        text_reveal(frame, button("Start Practising", scale=interpolate(math.sin(frame * 0.07), [-1, 1], [0.98, 1.02])),
                    delay=55),
        text_reveal(frame, text(CTA_URL, size=11, color="rgba(201,168,76,0.5)"), delay=70),
    )


def ambient(frame: int):
    return [*navy_layers(ambient_glow=True)(frame), rising_particles(frame)]


def build() -> Composition:
    return Composition(
        id="AIJudgeVideo",
        duration_in_frames=DURATION,
        scenes=SCENES,
        renderers={
            "cold-open": cold_open,
            "reveal": reveal,
            "phone-mockup": phone_scene,
            "twenty-four-seven": twenty_four_seven,
            "case-brief": case_brief,
            "courtroom-chat": courtroom_chat,
            "judge-personas": judge_personas,
            "score-reveal": score_reveal,
            "strengths": strengths,
            "cta": cta,
        },
        captions=CAPTIONS,
        audio=AUDIO,
        background=ambient,
        overlays=cinematic_layers(DURATION, vignette_intensity=0.45, grain_opacity=0.025),
    )
