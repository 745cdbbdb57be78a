"""
RecruitmentPromo: 48 segundos de captación para el equipo de RATIO.
Plataforma, puestos abiertos y universidades, con partículas doradas
colocadas a mano detrás de todas las escenas.
"""

from typing import List

from ..animation.interpolation import ease_out
from ..domain.models import CaptionPhrase, Node, Scene, node
from ..primitives.charts import counter
from ..primitives.palette import GOLD, NAVY_CARD, TEXT, TEXT_SEC, TEXT_TER
from ..primitives.particles import anchored_particles
from ..primitives.text import accent_line, button, text, text_reveal
from .common import CHIME, backdrop, cinematic_layers, cue, music, navy_layers, title_block, whooshes
from .composition import Composition

DURATION = 1440

SCENES = [
    Scene(id="hook", start=0, duration=80, crossfade=18, fade_in=8),
    Scene(id="what", start=72, duration=300, crossfade=20, fade_in=14),
    Scene(id="hiring", start=364, duration=220, crossfade=20, fade_in=14),
    Scene(id="roles", start=576, duration=295, crossfade=20, fade_in=14),
    Scene(id="unis", start=863, duration=310, crossfade=20, fade_in=14),
    Scene(id="cta", start=1165, duration=275, crossfade=0, fade_in=20),
]

CAPTIONS = [
    CaptionPhrase(text="We're building something for law students.", start=8, end=65),
    CaptionPhrase(text="RATIO is a constitutional training ground.", start=83, end=180),
    CaptionPhrase(text="AI judges, live moots, national rankings.", start=185, end=280),
    CaptionPhrase(text="Built for students who take advocacy seriously.", start=285, end=355),
    CaptionPhrase(text="And now we're looking for the people who want to help us build it.", start=375, end=480),
    CaptionPhrase(text="Part-time roles. Summer work. Real experience.", start=485, end=570),
    CaptionPhrase(text="Growth and partnerships. Content and legal writing.", start=587, end=700),
    CaptionPhrase(text="Community management. Development. Design.", start=705, end=800),
    CaptionPhrase(text="And more roles opening soon.", start=805, end=853),
    CaptionPhrase(text="We want students from across the UK.", start=874, end=950),
    CaptionPhrase(text="Birkbeck. UCL. King's. Oxford. Cambridge.", start=955, end=1070),
    CaptionPhrase(text="A hundred and forty-two universities and counting.", start=1075, end=1160),
    CaptionPhrase(text="If you're studying law and you want real work experience this summer,", start=1176, end=1320),
    CaptionPhrase(text="come find us. RATIO. The Digital Court Society.", start=1325, end=1405),
]

VOICEOVER = [("hook", 5, 62), ("what", 80, 278), ("hiring", 372, 201),
             ("roles", 584, 272), ("unis", 871, 293), ("cta", 1173, 236)]

AUDIO = [
    music("audio/music/ambient-pad-45s.mp3", [0, 20, 72, 364, 576, 863, 1165, 1380, 1430],
          [0, 0.06, 0.05, 0.05, 0.06, 0.06, 0.08, 0.06, 0.03]),
    cue("audio/sfx/courtroom-tone.mp3", 0, None, 0.06),
    *[cue(f"audio/voiceover/recruit-{i + 1:02d}-{name}.mp3", start, duration, 0.92)
      for i, (name, start, duration) in enumerate(VOICEOVER)],
    *whooshes([70, 362, 574, 861, 1163]),
    cue(CHIME, 1175, 50, 0.10),
]

ANCHORS = [
    dict(x=40, y=150, size=4, delay=20),
    dict(x=320, y=300, size=3, delay=60, speed=0.01),
    dict(x=80, y=600, size=5, delay=100, drift=25),
    dict(x=280, y=500, size=3, delay=200, speed=0.012),
    dict(x=180, y=750, size=4, delay=300),
]

FEATURES = [
    ("AI Judges", "⚖️"),
    ("Live Moot Courts", "\U0001f3db️"),
    ("National Rankings", "\U0001f3c6"),
    ("Student Governance", "\U0001f4dc"),
    ("40+ Legal Modules", "\U0001f4da"),
    ("142 Universities", "\U0001f393"),
]

# (puesto, tipo, retribución, color)
ROLES = [
    ("Law Society Outreach\n& Partnerships", "Part-time", "£12–15/hr", "#4A90D9"),
    ("Case Research &\nMoot Scenario Writer", "Part-time", "£12–15/hr", "#4CAF50"),
    ("Advocacy Community\nLead", "Apprenticeship", "£11–13k/yr", "#E67E22"),
    ("Legal Tech\nDeveloper", "Part-time", "£18–22k pro rata", "#9C27B0"),
    ("Legal UX\nResearcher", "Coming Soon", None, "#F44336"),
    ("Legal Communications\n& Design", "Coming Soon", None, GOLD),
]
ROLE_TYPE_COLORS = {"Part-time": "#6BAAF7", "Apprenticeship": "#F5A623", "Coming Soon": TEXT_SEC}

# (universidad, destacada)
UNIVERSITIES = [
    ("Birkbeck, University of London", True),
    ("UCL", False),
    ("King's College London", False),
    ("University of Oxford", False),
    ("University of Cambridge", False),
    ("LSE", False),
    ("University of Manchester", False),
    ("University of Bristol", False),
    ("University of Edinburgh", False),
    ("University of Birmingham", False),
    ("University of Leeds", False),
    ("University of Nottingham", False),
    ("Queen Mary", False),
    ("SOAS", False),
    ("University of Warwick", False),
    ("Durham University", False),
]


def particle_layers(frame: int) -> List[Node]:
    return [*navy_layers(ambient_glow=True)(frame), anchored_particles(frame, ANCHORS)]


def label(frame: int, content: str, delay: int = 0) -> Node:
    return text_reveal(frame, text(content.upper(), size=10, color=GOLD, letter_spacing=2), delay=delay)


def hook(frame: int) -> Node:
    return backdrop(
        label(frame, "RATIO.", delay=3),
        text_reveal(frame, text("We're building\nsomething.", size=40, serif=True, weight=700), delay=8),
        accent_line(frame, 100, delay=15, thickness=2),
        text_reveal(frame, text("For law students.", size=16, color=TEXT_SEC), delay=20),
    )


def what(frame: int) -> Node:
    badges = []
    for i, (name, icon) in enumerate(FEATURES):
        f = frame - (15 + i * 12)
        badges.append(node(
            "card",
            node("emoji", glyph=icon, size=24),
            text(name, size=12, weight=600),
            background=NAVY_CARD,
            opacity=ease_out(f, 0, 1, 0, 15),
            scale=ease_out(f, 0.9, 1, 0, 18),
            translate_y=ease_out(f, 20, 0, 0, 18),
        ))
    return backdrop(
        title_block(
            label(frame, "The Platform"),
            text_reveal(frame, text("A constitutional\ntraining ground.", size=28, serif=True, weight=600), delay=5),
        ),
        node("grid", *badges, columns=2, gap=10),
    )


def hiring(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("We're hiring.", size=44, serif=True, weight=700, highlight="hiring")),
        accent_line(frame, 140, delay=10, thickness=2),
        text_reveal(frame, text("Part-time roles.\nSummer work.\nReal experience.", size=20, serif=True),
                    delay=15),
        text_reveal(frame, text("Perfect for law students looking for\nwork experience after exams.",
                                size=13, color=TEXT_SEC), delay=30),
    )


def role_card(frame: int, i: int, title: str, kind: str, pay, color: str) -> Node:
    f = frame - (12 + i * 14)
    return node(
        "card",
        text(title, size=13, weight=600),
        node("badge", text(kind, size=9, color=ROLE_TYPE_COLORS[kind])),
        text(pay, size=10, color=TEXT_SEC) if pay else None,
        accent=color,
        background=NAVY_CARD,
        opacity=ease_out(f, 0, 1, 0, 15),
        translate_x=ease_out(f, 40, 0, 0, 20),
        scale=ease_out(f, 0.92, 1, 0, 15),
    )


def roles(frame: int) -> Node:
    return backdrop(
        title_block(
            label(frame, "Open Roles"),
            text_reveal(frame, text("Join the team.", size=28, serif=True, weight=600), delay=5),
        ),
        node("stack", *[role_card(frame, i, *role) for i, role in enumerate(ROLES)], gap=8),
    )


def unis(frame: int) -> Node:
    pills = []
    for i, (name, highlighted) in enumerate(UNIVERSITIES):
        f = frame - (20 + i * 6)
        pills.append(node(
            "pill",
            text(name, size=10, color=GOLD if highlighted else TEXT),
            border=GOLD if highlighted else None,
            background=NAVY_CARD,
            opacity=ease_out(f, 0, 1, 0, 12),
            scale=ease_out(f, 0.85, 1, 0, 15),
            translate_y=ease_out(f, 15, 0, 0, 15),
        ))
    return backdrop(
        counter(frame, 142, delay=5, duration=50),
        label(frame, "UK Universities"),
        accent_line(frame, 100, delay=10),
        text_reveal(frame, text("Open to all UK law students", size=13, color=TEXT_SEC), delay=15),
        node("wrap", *pills, gap=6),
        text_reveal(frame, text("+126 more universities", size=11, color=TEXT_TER), delay=121),
    )


def cta(frame: int) -> Node:
    return backdrop(
        text_reveal(frame, text("RATIO.", size=56, serif=True, weight=700, highlight=".")),
        text_reveal(frame, text("The Digital Court Society", size=14, color=TEXT_SEC), delay=5),
        accent_line(frame, 140, delay=10, thickness=2),
        text_reveal(frame, button("Apply Now"), delay=18),
        text_reveal(frame, text("ratiothedigitalcourtsociety.com/careers", size=11, color=GOLD), delay=25),
        text_reveal(frame, text("Free for UK law students", size=12, color=TEXT_TER), delay=35),
    )


def build() -> Composition:
    return Composition(
        id="RecruitmentPromo",
        duration_in_frames=DURATION,
        scenes=SCENES,
        renderers={"hook": hook, "what": what, "hiring": hiring, "roles": roles, "unis": unis, "cta": cta},
        captions=CAPTIONS,
        audio=AUDIO,
        background=particle_layers,
        overlays=cinematic_layers(DURATION, vignette_intensity=0.5, grain_opacity=0.03, progress=False),
    )
