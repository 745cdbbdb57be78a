"""
Composiciones de video: cada módulo declara escenas, subtítulos y audio.
"""

from . import (
    ai_judge,
    ai_practice_short,
    analytics_feedback,
    constitutional_law,
    feature_showcase,
    live_session,
    moot_court_cinematic,
    moot_court_promo,
    ratio_showcase,
    recruitment_promo,
)
from .composition import Composition, LayerRenderer, SceneRenderer

BUILDERS = [
    ratio_showcase.build,
    ai_practice_short.build,
    ai_judge.build,
    analytics_feedback.build,
    live_session.build,
    feature_showcase.build,
    moot_court_cinematic.build,
    constitutional_law.build,
    moot_court_promo.build,
    recruitment_promo.build,
]

__all__ = ["BUILDERS", "Composition", "LayerRenderer", "SceneRenderer"]
