"""
FeatureShowcase: 70 segundos de gráficos animados sobre la vida en la sociedad.
Sin capturas ni teléfonos: sesiones, rangos, Inns, votaciones, insignias y módulos.
"""

import math
from typing import Optional

from ..animation.interpolation import ease_out, round_half_up
from ..domain.models import CaptionPhrase, Node, Scene, node
from ..primitives.overlays import pulsing_glow
from ..primitives.palette import GOLD, GREEN, NAVY_CARD, RED, TEXT, TEXT_SEC, TEXT_TER
from ..primitives.text import accent_line, button, text, text_reveal
from .common import CHIME, CTA_URL, backdrop, cinematic_layers, cue, music, navy_layers, whooshes
from .composition import Composition

DURATION = 2100

SCENES = [
    Scene(id="cold-open", start=0, duration=110, crossfade=10),
    Scene(id="sessions", start=100, duration=340, crossfade=10),
    Scene(id="rankings", start=430, duration=240, crossfade=10),
    Scene(id="chambers", start=660, duration=290, crossfade=10),
    Scene(id="parliament", start=940, duration=340, crossfade=10),
    Scene(id="badges", start=1270, duration=310, crossfade=10),
    Scene(id="lawbook", start=1570, duration=280, crossfade=10),
    Scene(id="stats", start=1840, duration=70, crossfade=10),
    Scene(id="cta", start=1900, duration=200, crossfade=0),
]

# Las dos últimas frases de estadísticas se solapan con el cierre; gana la primera
CAPTIONS = [
    CaptionPhrase(text="RATIO is a lot more than practice.", start=8, end=88),
    CaptionPhrase(text="You can book a moot court with other advocates in a few minutes.", start=108, end=252),
    CaptionPhrase(text="Six roles, real arguments, no waiting around for university schedules.", start=257, end=411),
    CaptionPhrase(text="There's a national ranking system.", start=438, end=531),
    CaptionPhrase(text="You start as a Pupil and work your way up to King's Counsel.", start=536, end=638),
    CaptionPhrase(text="You choose an Inn: Gray's, Lincoln's, Inner, or Middle.", start=668, end=810),
    CaptionPhrase(text="Each one has its own culture, its own colours.", start=815, end=922),
    CaptionPhrase(text="There's a whole governance layer.", start=948, end=1042),
    CaptionPhrase(text="Real motions, real votes.", start=1047, end=1122),
    CaptionPhrase(text="You actually shape the constitution of the society you belong to.", start=1127, end=1254),
    CaptionPhrase(text="You earn milestones as you go.", start=1278, end=1362),
    CaptionPhrase(text="First Moot, Seasoned Counsel, the Hundred-Day Streak.", start=1367, end=1482),
    CaptionPhrase(text="Things that actually mean something.", start=1487, end=1553),
    CaptionPhrase(text="Over forty structured legal modules.", start=1578, end=1680),
    CaptionPhrase(text="Constitutional, criminal, commercial, human rights, all of it.", start=1685, end=1826),
    CaptionPhrase(text="A hundred and forty-two UK universities.", start=1845, end=1940),
    CaptionPhrase(text="Thousands of advocates already on it.", start=1942, end=2011),
    CaptionPhrase(text="RATIO. The Digital Court Society.", start=1910, end=2010),
    CaptionPhrase(text="Free for UK law students. Come join.", start=2015, end=2100),
]

VOICEOVER_WINDOWS = [(8, 86), (108, 310), (438, 206), (668, 260), (948, 312),
                     (1278, 281), (1578, 255), (1845, 172), (1910, 190)]
VOICEOVER_NAMES = ["open", "sessions", "rankings", "chambers", "parliament", "badges", "lawbook", "stats", "cta"]

AUDIO = [
    music("audio/music/ambient-pad-75s.mp3", [0, 30, 940, 1570, 1900, 2050, 2090],
          [0, 0.09, 0.11, 0.12, 0.10, 0.06, 0.03]),
    cue("audio/sfx/courtroom-tone.mp3", 0, None, 0.08),
    cue("audio/sfx/courtroom-murmur.mp3", 0, 200, 0.06),
    *[
        cue(f"audio/voiceover/showcase-{i + 1:02d}-{name}.mp3", start, duration, 0.92)
        for i, (name, (start, duration)) in enumerate(zip(VOICEOVER_NAMES, VOICEOVER_WINDOWS))
    ],
    *whooshes([95, 425, 655, 935, 1265, 1565, 1835, 1895]),
    cue("audio/sfx/gavel-wood.mp3", 110, 15, 0.25),
    cue(CHIME, 1905, 50, 0.15),
]

CHAMBERS = [
    ("Gray's", "#6B2D3E", "Wisdom through advocacy", "⚖️"),
    ("Lincoln's", "#2E5090", "Justice through scholarship", "\U0001f4d8"),
    ("Inner", "#3D6B45", "Service through practice", "\U0001f33f"),
    ("Middle", "#8B6914", "Excellence through tradition", "\U0001f3db️"),
]

# (rango, altura de la barra, color); King's Counsel va resaltado
PODIUM = [
    ("Pupil", 50, TEXT_TER),
    ("Junior\nCounsel", 90, TEXT_SEC),
    ("Senior\nCounsel", 140, "rgba(201, 168, 76, 0.5)"),
    ("King's\nCounsel", 195, GOLD),
    ("Bencher", 250, "#FFD700"),
]
HIGHLIGHTED_RANK = 3

MOOT_ROLES = [
    "Presiding Judge",
    "Leading Counsel (Appellant)",
    "Junior Counsel (Appellant)",
    "Leading Counsel (Respondent)",
    "Junior Counsel (Respondent)",
    "Clerk",
]

BADGES = [
    ("First Moot", "⚖️"),
    ("7-Day Streak", "\U0001f525"),
    ("Seasoned Counsel", "\U0001f3db️"),
    ("100-Day Streak", "\U0001f3c6"),
    ("AI Sparring Partner", "\U0001f916"),
    ("Respected Advocate", "⭐"),
]

MODULE_CATEGORIES = [
    ("Public Law", 8, "#2E5090"),
    ("Criminal", 7, "#6B2D3E"),
    ("Commercial", 6, "#8B6914"),
    ("Human Rights", 5, "#3D6B45"),
    ("Property", 5, "#5C3D8F"),
    ("Procedure", 4, "#2D6B6B"),
    ("Others", 5, "#4A4A4A"),
]
LARGEST_CATEGORY = 8


def heading(frame: int, title: str, subtitle: Optional[str] = None) -> Node:
    lines = [text_reveal(frame, text(title, size=24, serif=True, weight=600), delay=0)]
    if subtitle:
        lines.append(text_reveal(frame, text(subtitle, size=12, color=TEXT_SEC), delay=8))
    return node("stack", *lines, align="center")


def cold_open(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("RATIO.", size=56, serif=True, weight=700), delay=5),
        accent_line(frame, 160, delay=15),
        text_reveal(frame, text("More than practice", size=16, serif=True, color=TEXT_SEC), delay=22),
    )


def sessions(frame: int) -> Node:
    """Tarjeta de sesión cuyos roles se van ocupando uno a uno."""
    slots = []
    for i, role in enumerate(MOOT_ROLES):
        delay = 30 + i * 20
        fill_delay = delay + 15
        slots.append(node(
            "role_slot",
            text(role, size=11),
            filled=frame > fill_delay,
            fill_percent=ease_out(frame, 0, 100, fill_delay, fill_delay + 15),
            opacity=ease_out(frame, 0, 1, delay, delay + 12),
        ))
    card = node(
        "card",
        text_reveal(frame, text("Constitutional Law Moot", size=18, serif=True, weight=600, color=GOLD), delay=10),
        text_reveal(frame, text("6 roles · 60 min · Advanced", size=11, color=TEXT_SEC), delay=18),
        *slots,
        background=NAVY_CARD,
        width=320,
    )
    return backdrop(heading(frame, "Book a moot court\nin minutes"), card)


def rankings(frame: int) -> Node:
    bars = []
    for i, (rank, height, color) in enumerate(PODIUM):
        delay = 15 + i * 18
        bars.append(node(
            "podium_bar",
            text(rank, size=10, color=color, opacity=ease_out(frame, 0, 1, delay + 20, delay + 30)),
            height=ease_out(frame, 0, height, delay, delay + 30),
            color=color,
            highlighted=i == HIGHLIGHTED_RANK,
        ))
    return backdrop(
        heading(frame, "See where you stand", "Rise through the ranks nationally"),
        node("podium", *bars, gap=8),
    )


def chambers(frame: int) -> Node:
    cards = []
    for i, (name, color, motto, icon) in enumerate(CHAMBERS):
        delay = 10 + i * 22
        cards.append(node(
            "card",
            node("emoji", glyph=icon, size=22),
            text(f"{name} Inn", size=16, serif=True, weight=700),
            text(motto, size=10, color=TEXT_SEC, font_style="italic"),
            accent=color,
            background=NAVY_CARD,
            opacity=ease_out(frame, 0, 1, delay, delay + 18),
            translate_x=ease_out(frame, -60 if i % 2 == 0 else 60, 0, delay, delay + 20),
        ))
    return backdrop(heading(frame, "Choose your Inn"), node("stack", *cards, gap=10))


def parliament(frame: int) -> Node:
    yes = ease_out(frame, 0, 67, 20, 80)
    no = ease_out(frame, 0, 33, 30, 80)
    return backdrop(
        heading(frame, "Shape the constitution"),
        text_reveal(frame, node(
            "card",
            text("MOTION BEFORE THE ASSEMBLY", size=10, color=GOLD, letter_spacing=1.5),
            text("\"That this Assembly supports the adoption of a written constitution for the Society.\"",
                 size=15, serif=True),
            background=NAVY_CARD,
        ), delay=5),
        node(
            "vote_bar",
            node("segment", label=f"Aye {round_half_up(yes)}%", width_percent=yes, color=GREEN),
            node("segment", label=f"No {round_half_up(no)}%", width_percent=no, color=RED),
        ),
        text(f"{round_half_up(ease_out(frame, 0, 142, 20, 70))} votes cast", size=11, color=TEXT_SEC),
    )


def badges(frame: int) -> Node:
    tiles = []
    for i, (name, icon) in enumerate(BADGES):
        delay = 15 + i * 25
        unlocked = frame > delay
        glow = 0.0
        if unlocked:
            glow = ease_out(frame, 0, 0.6, delay, delay + 10) * (0.5 + 0.5 * math.sin((frame - delay) * 0.08))
        tiles.append(node(
            "badge",
            node("emoji", glyph=icon, size=26),
            text(name, size=9, color=TEXT if unlocked else TEXT_TER),
            unlocked=unlocked,
            glow_opacity=glow,
            opacity=ease_out(frame, 0.3, 1, delay, delay + 15),
            scale=ease_out(frame, 0.7, 1, delay, delay + 12),
        ))
    return backdrop(heading(frame, "Earn your milestones"), node("grid", *tiles, columns=3, gap=10))


def lawbook(frame: int) -> Node:
    cards = []
    for i, (name, count, color) in enumerate(MODULE_CATEGORIES):
        delay = 10 + i * 16
        cards.append(node(
            "card",
            text(name, size=12, weight=600),
            text(f"{count} modules", size=9, color=TEXT_SEC),
            node("bar", width_percent=ease_out(frame, 0, count / LARGEST_CATEGORY * 100, delay + 8, delay + 28),
                 color=color),
            background=NAVY_CARD,
            opacity=ease_out(frame, 0, 1, delay, delay + 14),
            translate_x=ease_out(frame, 80, 0, delay, delay + 18),
        ))
    return backdrop(heading(frame, "40+ Legal Modules"), node("stack", *cards, gap=6))


def stats(frame: int) -> Node:
    universities = round_half_up(ease_out(frame, 0, 142, 10, 50))
    advocates = round_half_up(ease_out(frame, 0, 2847, 15, 55))
    return backdrop(
        text_reveal(frame, text(str(universities), size=56, serif=True, weight=700, color=GOLD), delay=5),
        text_reveal(frame, text("UK UNIVERSITIES", size=13, color=TEXT_SEC, letter_spacing=1.5), delay=12),
        accent_line(frame, 120, delay=20),
        text_reveal(frame, text(f"{advocates:,}+", size=56, serif=True, weight=700, color=GOLD), delay=25),
        text_reveal(frame, text("ADVOCATES", size=13, color=TEXT_SEC, letter_spacing=1.5), delay=32),
    )


def cta(frame: int) -> Node:
    return backdrop(
        pulsing_glow(frame),
        text_reveal(frame, text("RATIO.", size=56, serif=True, weight=700), delay=5),
        text_reveal(frame, text("The Digital Court Society", size=16, serif=True, color=TEXT_SEC), delay=15),
        accent_line(frame, 180, delay=22, thickness=2),
        text_reveal(frame, button("Join as an Advocate"), delay=35),
        text_reveal(frame, text("Free for UK law students", size=12, color=TEXT_SEC), delay=48),
        text_reveal(frame, text(CTA_URL, size=11, color=TEXT_TER), delay=60),
    )


def build() -> Composition:
    return Composition(
        id="FeatureShowcase",
        duration_in_frames=DURATION,
        scenes=SCENES,
        renderers={
            "cold-open": cold_open,
            "sessions": sessions,
            "rankings": rankings,
            "chambers": chambers,
            "parliament": parliament,
            "badges": badges,
            "lawbook": lawbook,
            "stats": stats,
            "cta": cta,
        },
        captions=CAPTIONS,
        audio=AUDIO,
        background=navy_layers(particles=14),
        overlays=cinematic_layers(DURATION, vignette_intensity=0.5, grain_opacity=0.03, progress=False),
        fade_in=20,
    )
