"""
Tokens de marca RATIO.
Colores y tipografías compartidos por todas las composiciones.
"""

GOLD = "#C9A84C"
GOLD_DIM = "rgba(201, 168, 76, 0.12)"
NAVY = "#0C1220"
NAVY_MID = "#131E30"
NAVY_CARD = "#182640"
NAVY_LIGHT = "#1E3050"
TEXT = "#F2EDE6"
TEXT_SEC = "rgba(242, 237, 230, 0.55)"
TEXT_TER = "rgba(242, 237, 230, 0.3)"
BURGUNDY = "#6B2D3E"
GREEN = "#4CAF50"
AMBER = "#E67E22"
RED = "#E53935"

SERIF = "'Cormorant Garamond', Georgia, serif"
SANS = "'DM Sans', system-ui, sans-serif"

# Formato "story" vertical
STORY_WIDTH = 393
STORY_HEIGHT = 852
STORY_FPS = 30
