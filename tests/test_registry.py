"""Tests del registro de composiciones."""

import logging

import pytest

from ratio_reels.domain.models import Scene
from ratio_reels.errors import CompositionNotFoundError
from ratio_reels.registry import CompositionRegistry

from conftest import make_composition


class TestCompositionRegistry:

    def test_default_registry_order(self, registry):
        assert registry.ids() == [
            "RatioShowcase",
            "AIPracticeShort",
            "AIJudgeVideo",
            "AnalyticsFeedbackVideo",
            "LiveSessionSnippet",
            "FeatureShowcase",
            "MootCourtCinematic",
            "ConstitutionalLaw",
            "MootCourtPromo",
            "RecruitmentPromo",
        ]
        assert len(registry) == 10

    def test_unknown_id(self, registry):
        with pytest.raises(CompositionNotFoundError) as exc_info:
            registry.get("Nope")
        assert isinstance(exc_info.value, KeyError)
        assert "RatioShowcase" in str(exc_info.value)
        assert exc_info.value.composition_id == "Nope"

    def test_contains_and_iter(self, registry):
        assert "FeatureShowcase" in registry
        assert "Nope" not in registry
        assert [c.id for c in registry] == registry.ids()

    def test_entries(self, registry):
        entries = registry.entries()
        assert [e.id for e in entries] == registry.ids()
        assert entries[0].duration_seconds == 20.0

    def test_render_delegates(self, registry):
        output = registry.render("RatioShowcase", 42)
        assert output.composition_id == "RatioShowcase"
        assert output.frame == 42

    def test_register_replaces_with_warning(self, caplog):
        registry = CompositionRegistry()
        registry.register(make_composition([Scene(id="a", start=0, duration=10)]))
        with caplog.at_level(logging.WARNING):
            registry.register(make_composition([Scene(id="b", start=0, duration=10)]))
        assert len(registry) == 1
        assert registry.get("TestComposition").scenes[0].id == "b"
        assert "reemplaza" in caplog.text
