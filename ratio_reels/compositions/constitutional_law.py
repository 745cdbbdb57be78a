"""
ConstitutionalLaw: 54 segundos sobre el módulo de derecho constitucional.

Seis secciones contiguas que se funden por rampa (entrada corta, salida de 20
frames). Cada sección conserva su propio reloj de animación, desplazado
respecto al frame local según SECTION_CLOCKS.
"""

from typing import Callable

from ..animation.interpolation import ease_out
from ..domain.models import CaptionPhrase, Node, Scene, ScoreDimension, node
from ..primitives.charts import dimension_bars, score_ring
from ..primitives.palette import GOLD, NAVY_CARD, TEXT_SEC, TEXT_TER
from ..primitives.text import accent_line, button, text, text_reveal
from .common import CHIME, CTA_URL, backdrop, cinematic_layers, cue, music, navy_layers, title_block, whooshes
from .composition import Composition

DURATION = 1630

SCENES = [
    Scene(id="title", start=0, duration=126, crossfade=20, fade_in=10),
    Scene(id="topics", start=126, duration=384, crossfade=20, fade_in=14),
    Scene(id="cases", start=510, duration=302, crossfade=20, fade_in=15),
    Scene(id="practice", start=812, duration=326, crossfade=20, fade_in=15),
    Scene(id="score", start=1138, duration=188, crossfade=20, fade_in=15),
    Scene(id="cta", start=1326, duration=304, crossfade=0, fade_in=20),
]

# Desplazamiento del reloj interno de cada sección respecto a su frame local
SECTION_CLOCKS = {"title": 0, "topics": 36, "cases": 190, "practice": 260, "score": 350, "cta": 390}

CAPTIONS = [
    CaptionPhrase(text="Everything you need for constitutional law.", start=8, end=116),
    CaptionPhrase(text="Nine core topics. All on RATIO.", start=135, end=410),
    CaptionPhrase(text="The cases that shaped the constitution.", start=520, end=740),
    CaptionPhrase(text="Practice with an AI Judge who knows the authorities.", start=823, end=1060),
    CaptionPhrase(text="Get scored on your constitutional reasoning.", start=1148, end=1300),
    CaptionPhrase(text="Study constitutional law the way it was meant to be studied.", start=1337, end=1510),
    CaptionPhrase(text="Free for UK law students.", start=1520, end=1620),
]

AUDIO = [
    music("audio/music/ambient-pad-45s.mp3", [0, 20, 126, 300, 1326, 1376, 1600, 1625],
          [0, 0.07, 0.05, 0.04, 0.04, 0.08, 0.06, 0.03]),
    cue("audio/sfx/courtroom-tone.mp3", 0, None, 0.08),
    *[
        cue(f"audio/voiceover/conlaw-{i + 1:02d}-{name}.mp3", start, duration, 0.92)
        for i, (name, start, duration) in enumerate([
            ("title", 5, 111), ("topics", 132, 368), ("cases", 518, 287),
            ("practice", 820, 311), ("score", 1146, 173), ("cta", 1334, 292),
        ])
    ],
    *whooshes([124, 508, 810]),
    cue("audio/sfx/gavel-wood.mp3", 817, 15, 0.30),
    cue(CHIME, 1153, 50, 0.12),
]

TOPICS = [
    ("Parliamentary Sovereignty", "\U0001f3db️"),
    ("Rule of Law", "⚖️"),
    ("Separation of Powers", "\U0001f4dc"),
    ("Judicial Review", "\U0001f50d"),
    ("Royal Prerogative", "\U0001f451"),
    ("Human Rights Act 1998", "\U0001f6e1️"),
    ("Devolution", "\U0001f3f4\U000e0067\U000e0062\U000e0073\U000e0063\U000e0074\U000e007f"),
    ("Constitutional Reform", "\U0001f4c4"),
    ("EU Withdrawal & Brexit", "\U0001f1ea\U0001f1fa"),
]

# (caso, año, tema, color)
KEY_CASES = [
    ("Entick v Carrington", "1765", "Rule of Law", "#4A90D9"),
    ("A.V. Dicey: Introduction to the Study of the Law of the Constitution", "1885",
     "Parliamentary Sovereignty", GOLD),
    ("R (Factortame) v SS for Transport", "1990", "EU Supremacy", "#4CAF50"),
    ("R (Miller) v Secretary of State", "2017", "Prerogative & Parliament", "#E67E22"),
    ("R (UNISON) v Lord Chancellor", "2017", "Access to Justice", "#9C27B0"),
    ("R (Miller) v The Prime Minister", "2019", "Prorogation", "#F44336"),
]

MINI_SCORES = [
    ScoreDimension(label="Argument Structure", score=78),
    ScoreDimension(label="Use of Authorities", score=82),
    ScoreDimension(label="Constitutional Reasoning", score=74),
    ScoreDimension(label="Persuasiveness", score=71),
]


def section_clock(scene_id: str, render: Callable[[int], Node]) -> Callable[[int], Node]:
    offset = SECTION_CLOCKS[scene_id]

    def shifted(frame: int) -> Node:
        return render(frame + offset)
    return shifted


def label(frame: int, content: str, delay: int = 0) -> Node:
    return text_reveal(frame, text(content.upper(), size=10, color=GOLD, letter_spacing=2), delay=delay)


def title(frame: int) -> Node:
    return backdrop(
        label(frame, "RATIO Law Book", delay=5),
        text_reveal(frame, text("Constitutional\nLaw", size=44, serif=True, weight=700), delay=12),
        accent_line(frame, 120, delay=20, thickness=2),
        text_reveal(frame, text("Parliamentary sovereignty, rule of law,\nroyal prerogative, and devolution",
                                size=13, color=TEXT_SEC), delay=25),
        text_reveal(frame, text("9 Topics · Specialist Module", size=11, color=TEXT_TER), delay=35),
    )


def topics(frame: int) -> Node:
    pills = []
    for i, (name, icon) in enumerate(TOPICS):
        f = frame - (8 + i * 12)
        pills.append(node(
            "pill",
            node("emoji", glyph=icon, size=18),
            text(name, size=13),
            background=NAVY_CARD,
            opacity=ease_out(f, 0, 1, 0, 15),
            translate_x=ease_out(f, 30, 0, 0, 20),
            scale=ease_out(f, 0.9, 1, 0, 15),
        ))
    return backdrop(label(frame, "What You Will Study"), node("stack", *pills, gap=8))


def cases(frame: int) -> Node:
    cards = []
    for i, (name, year, topic, color) in enumerate(KEY_CASES):
        f = frame - (15 + i * 15)
        cards.append(node(
            "card",
            text(name, size=13, serif=True, weight=600),
            text(f"{year} · {topic}", size=10, color=color),
            accent=color,
            background=NAVY_CARD,
            opacity=ease_out(f, 0, 1, 0, 15),
            translate_y=ease_out(f, 20, 0, 0, 18),
        ))
    return backdrop(
        title_block(
            label(frame, "Key Authorities"),
            text_reveal(frame, text("Cases that shaped\nthe constitution", size=26, serif=True, weight=600), delay=5),
        ),
        node("stack", *cards, gap=8),
    )


def practice(frame: int) -> Node:
    brief = node(
        "card",
        text("Case Brief", size=11, weight=700, color=GOLD),
        text("Topic: Parliamentary Sovereignty post-Brexit\nRole: Junior Counsel for the Appellant", size=11),
        background=NAVY_CARD,
    )
    judge = node(
        "card",
        text("Justice AI", size=11, weight=700, color=GOLD),
        text("Counsel, explain the constitutional significance of the European Union (Withdrawal) Act 2018 "
             "in relation to parliamentary sovereignty.", size=11),
        role="judge",
        background=NAVY_CARD,
    )
    advocate = node(
        "card",
        text("You (Counsel)", size=11, weight=700, color=TEXT_SEC),
        text("My Lord, the Withdrawal Act 2018 represents Parliament's reassertion of legislative supremacy "
             "by repealing the European Communities Act 1972…", size=11),
        role="advocate",
        background="rgba(201, 168, 76, 0.08)",
    )
    return backdrop(
        label(frame, "Moot Court Session"),
        text_reveal(frame, brief, delay=10),
        text_reveal(frame, judge, delay=30),
        text_reveal(frame, advocate, delay=55),
    )


def score(frame: int) -> Node:
    return backdrop(
        label(frame, "Your Constitutional Law Score", delay=5),
        score_ring(frame, 76, start=10, end=45, radius=48),
        dimension_bars(frame, MINI_SCORES),
    )


def cta(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("Study constitutional law\nthe way it was meant to be studied.",
                                size=20, serif=True), delay=5),
        text_reveal(frame, text("RATIO.", size=52, serif=True, weight=700, highlight="."), delay=18),
        accent_line(frame, 140, delay=25, thickness=2),
        text_reveal(frame, text("The Digital Court Society", size=14, color=TEXT_SEC), delay=30),
        text_reveal(frame, button("Start Practice Today"), delay=42),
        text_reveal(frame, text("Free for UK law students", size=12, color=TEXT_SEC), delay=55),
        text_reveal(frame, text(CTA_URL, size=11, color=TEXT_TER), delay=65),
    )


def build() -> Composition:
    renderers = {"title": title, "topics": topics, "cases": cases, "practice": practice, "score": score, "cta": cta}
    return Composition(
        id="ConstitutionalLaw",
        duration_in_frames=DURATION,
        scenes=SCENES,
        renderers={scene_id: section_clock(scene_id, render) for scene_id, render in renderers.items()},
        captions=CAPTIONS,
        audio=AUDIO,
        background=navy_layers(ambient_glow=True),
        overlays=cinematic_layers(DURATION, vignette_intensity=0.45, grain_opacity=0.025, progress=False),
    )
