"""
LiveSessionSnippet: 55 segundos de una sesión en vivo con el juez IA.

Cuatro secciones consecutivas (título, chat, puntuación y cierre). El chat
se sincroniza con la voz del juez: cada mensaje del juez se escribe a la
velocidad de su locución.
"""

import math
from typing import List

from ..animation.interpolation import ease_out, interpolate
from ..domain.models import CaptionPhrase, ChatMessage, Node, Scene, ScoreDimension, node
from ..primitives.chat import chat_thread
from ..primitives.charts import dimension_bars, score_ring
from ..primitives.overlays import pulsing_glow
from ..primitives.palette import GOLD, GREEN, NAVY_CARD, RED, TEXT_SEC, TEXT_TER
from ..primitives.particles import floating_motes
from ..primitives.text import accent_line, button, text, text_reveal
from .common import CHIME, CTA_URL, backdrop, cinematic_layers, cue, music, navy_layers, whooshes
from .composition import Composition

DURATION = 1650

SCENES = [
    Scene(id="title", start=0, duration=90, crossfade=20, fade_in=10),
    Scene(id="chat", start=90, duration=1150, crossfade=30, fade_in=15),
    Scene(id="score", start=1240, duration=225, crossfade=20, fade_in=20),
    Scene(id="cta", start=1465, duration=185, crossfade=0, fade_in=20),
]
CHAT_START = SCENES[1].start

# Los umbrales de los mensajes son frames absolutos de la composición
MESSAGES = [
    ChatMessage(role="judge", typing_start=95, message_start=115, chars_per_frame=0.58,
                voice_duration_frames=209,
                text="This court is now in session. Counsel, you may proceed with your submissions "
                     "on the matter of parliamentary sovereignty."),
    ChatMessage(role="advocate", typing_start=340, message_start=375, chars_per_frame=2.5,
                text="My Lord, the appellant submits that the doctrine of parliamentary sovereignty, "
                     "as established in Dicey's constitutional framework, remains the cornerstone of "
                     "the UK constitution. No Parliament may bind its successors, and no body may "
                     "override or set aside an Act of Parliament."),
    ChatMessage(role="judge", typing_start=510, message_start=535, chars_per_frame=0.52,
                voice_duration_frames=202,
                text="Counsel, that is textbook recitation. What is the ratio in Factortame? "
                     "Apply it to the facts before this court."),
    ChatMessage(role="advocate", typing_start=750, message_start=785, chars_per_frame=2.5,
                text="My Lord, in Factortame, the House of Lords held that European Community law must "
                     "be given primacy over conflicting domestic legislation. The ratio established that "
                     "courts may grant interim relief against the Crown where EC rights are at stake, "
                     "effectively limiting parliamentary sovereignty in practice."),
    ChatMessage(role="judge", typing_start=915, message_start=940, chars_per_frame=0.49,
                voice_duration_frames=301,
                text="That is helpful, Counsel. Now, what about the effect of the European Union "
                     "Withdrawal Act 2018? Does that not undermine your entire position?"),
]

# Desplazamiento del hilo a medida que entran mensajes
SCROLL_FRAMES = [90, 340, 510, 750, 915]
SCROLL_OFFSETS = [0, 0, -60, -150, -250]

CAPTIONS = [
    CaptionPhrase(text="Here's what a session actually looks like.", start=8, end=75),
    CaptionPhrase(text="And when it's done, you get a proper scored judgment.", start=1252, end=1351),
    CaptionPhrase(text="That could be you.", start=1480, end=1525),
    CaptionPhrase(text="RATIO, free for law students.", start=1528, end=1590),
    CaptionPhrase(text="Start whenever you're ready.", start=1593, end=1645),
]

UI_CLICKS = [380, 400, 420, 440, 460, 790, 810, 830, 850]

AUDIO = [
    music("audio/music/ambient-pad-55s.mp3", [0, 20, 90, 200, 1220, 1240, 1400, 1465, 1620, 1645],
          [0, 0.08, 0.06, 0.03, 0.03, 0.08, 0.10, 0.08, 0.06, 0.03]),
    cue("audio/sfx/courtroom-tone.mp3", 0, None, 0.12),
    cue("audio/sfx/courtroom-murmur.mp3", 0, 300, 0.08),
    cue("audio/voiceover/session-01-title.mp3", 5, 70, 0.92),
    cue("audio/voiceover/session-02-score.mp3", 1250, 101, 0.92),
    cue("audio/voiceover/session-03-cta.mp3", 1475, 175, 0.92),
    cue("audio/voiceover/session-judge-01.mp3", 115, 215, 0.88),
    cue("audio/voiceover/session-judge-02.mp3", 535, 210, 0.88),
    cue("audio/voiceover/session-judge-03.mp3", 940, 310, 0.88),
    cue("audio/sfx/gavel-wood.mp3", 112, 15, 0.40),
    cue("audio/sfx/door-close.mp3", 80, 45, 0.10),
    cue("audio/sfx/paper-shuffle.mp3", 345, 25, 0.10),
    *[cue("audio/sfx/ui-click.mp3", f, 8, 0.06) for f in UI_CLICKS],
    cue(CHIME, 1260, 50, 0.15),
    *whooshes([88, 1238, 1463]),
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

STRENGTH = ("Strong understanding of authorities. Effective use of Factortame ratio "
            "with direct application to facts.")
IMPROVEMENT = ("Work on applying ratio to specific facts rather than broad propositions. "
               "Avoid textbook recitation.")

# Ventana del recuadro de feedback, en frames locales de la sección de puntuación
FEEDBACK_WINDOW = [140, 160, 205, 225]


def title(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("Watch a live\nsession unfold", size=32, serif=True, weight=600), delay=5),
        accent_line(frame, 100, delay=15),
        text_reveal(frame, text("AI Practice · Constitutional Law", size=13, color=TEXT_SEC), delay=22),
    )


def courtroom_header(frame: int) -> Node:
    return node(
        "header",
        node("live_dot", color=RED, opacity=0.5 + 0.5 * math.sin(frame * 0.08)),
        text("LIVE", size=9, color=TEXT_TER, letter_spacing=2),
        text("The Honourable Justice AI", size=14, serif=True, weight=700),
        text("Constitutional Law", size=10, color=GOLD),
        opacity=ease_out(frame, 0, 1, 0, 20),
    )


def chat(frame: int) -> Node:
    """El frame local se vuelve absoluto para evaluar los umbrales de cada mensaje."""
    absolute = frame + CHAT_START
    return node(
        "stack",
        courtroom_header(frame),
        node(
            "scroll",
            chat_thread(MESSAGES, absolute),
            translate_y=interpolate(absolute, SCROLL_FRAMES, SCROLL_OFFSETS),
            top=100,
        ),
        fill=True,
    )


def feedback_box(frame: int) -> Node:
    return node(
        "card",
        text("KEY FEEDBACK", size=9, color=GOLD, letter_spacing=2),
        text("Strength", size=10, weight=700, color=GREEN),
        text(STRENGTH, size=11),
        text("Area for Improvement", size=10, weight=700, color=GOLD),
        text(IMPROVEMENT, size=11),
        background=NAVY_CARD,
        opacity=interpolate(frame, FEEDBACK_WINDOW, [0, 1, 1, 0]),
    )


def score(frame: int) -> Node:
    children = [
        text_reveal(frame, text("SESSION COMPLETE · JUDGMENT DELIVERED", size=10, color=TEXT_SEC,
                                letter_spacing=2), delay=5),
        score_ring(frame, 72),
        text_reveal(frame, text("OVERALL SCORE", size=10, color=TEXT_TER, letter_spacing=2), delay=15),
        dimension_bars(frame, DIMENSIONS),
    ]
    if FEEDBACK_WINDOW[0] <= frame <= FEEDBACK_WINDOW[-1]:
        children.append(feedback_box(frame))
    return backdrop(*children)


def cta(frame: int) -> Node:
    return backdrop(
        pulsing_glow(frame),
        text_reveal(frame, text("Your turn.", size=20, serif=True, color=TEXT_SEC, font_style="italic"), delay=5),
        text_reveal(frame, text("RATIO.", size=56, serif=True, weight=700), delay=18),
        accent_line(frame, 140, delay=25, thickness=2),
        text_reveal(frame, text("The Digital Court Society", size=14, color=TEXT_SEC), delay=30),
        text_reveal(frame, button("Start Practice Today"), delay=42),
        text_reveal(frame, text("Free for UK law students", size=12, color=GOLD), delay=55),
        text_reveal(frame, text(CTA_URL, size=11, color="rgba(201,168,76,0.5)"), delay=65),
    )


def session_layers(frame: int) -> List[Node]:
    return [*navy_layers()(frame), floating_motes(frame)]


def build() -> Composition:
    return Composition(
        id="LiveSessionSnippet",
        duration_in_frames=DURATION,
        scenes=SCENES,
        renderers={"title": title, "chat": chat, "score": score, "cta": cta},
        captions=CAPTIONS,
        audio=AUDIO,
        background=session_layers,
        overlays=cinematic_layers(DURATION, vignette_intensity=0.45, grain_opacity=0.025),
    )
