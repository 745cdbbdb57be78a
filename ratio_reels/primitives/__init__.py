"""Biblioteca de primitivas animadas"""

from .charts import counter, dimension_bars, radar_chart, score_montage, score_ring
from .chat import chat_bubble, chat_state, chat_thread, speaking_indicator, typing_indicator, visible_chars
from .overlays import background, film_grain, flash, progress_bar, pulsing_glow, radial_glow, vignette
from .particles import floating_motes, golden_particles, rising_particles
from .phone import CSS_PHONE, SCREENSHOT_PHONE, PhoneMotion, flat_phone, phone_mockup
from .text import accent_line, button, fade_slide, text, text_reveal

__all__ = [
    "counter", "dimension_bars", "radar_chart", "score_montage", "score_ring",
    "chat_bubble", "chat_state", "chat_thread", "speaking_indicator", "typing_indicator", "visible_chars",
    "background", "film_grain", "flash", "progress_bar", "pulsing_glow", "radial_glow", "vignette",
    "floating_motes", "golden_particles", "rising_particles",
    "CSS_PHONE", "SCREENSHOT_PHONE", "PhoneMotion", "flat_phone", "phone_mockup",
    "accent_line", "button", "fade_slide", "text", "text_reveal",
]
