"""Tests del modelo de línea de tiempo."""

import pytest

from ratio_reels.animation.timeline import is_visible, local_frame, scene_fade, scene_states
from ratio_reels.domain.models import Scene


class TestVisibility:

    def test_scenario_bounds(self, scene):
        assert is_visible(scene, 95)
        assert is_visible(scene, 305)
        assert not is_visible(scene, 89)
        assert not is_visible(scene, 311)

    def test_buffer_edges_are_inclusive(self, scene):
        assert is_visible(scene, 90)
        assert is_visible(scene, 310)

    def test_custom_buffer(self, scene):
        assert not is_visible(scene, 95, buffer=0)
        assert is_visible(scene, 100, buffer=0)

    def test_local_frame(self, scene):
        assert local_frame(scene, 100) == 0
        assert local_frame(scene, 90) == -10


class TestSceneFade:

    def test_scenario_values(self, scene):
        assert scene_fade(scene, 125) == 1.0
        assert 0 < scene_fade(scene, 295) < 1

    def test_fade_shape(self, scene):
        assert scene_fade(scene, 90) == 0
        assert scene_fade(scene, 100) == 0
        assert scene_fade(scene, 290) == 1.0
        assert scene_fade(scene, 300) == 0
        assert scene_fade(scene, 310) == 0

    def test_crossfade_is_monotonic(self, scene):
        values = [scene_fade(scene, f) for f in range(290, 301)]
        assert all(0 <= v <= 1 for v in values)
        assert values == sorted(values, reverse=True)

    def test_fade_in_is_monotonic(self, scene):
        values = [scene_fade(scene, f) for f in range(100, 126)]
        assert values == sorted(values)

    def test_zero_crossfade_is_a_hard_cut(self):
        scene = Scene(id="cut", start=0, duration=50)
        assert scene_fade(scene, 50) == 1.0
        assert scene_fade(scene, 51) == 0.0

    def test_scene_fade_in_overrides_default(self):
        scene = Scene(id="title", start=0, duration=90, crossfade=20, fade_in=10)
        assert scene_fade(scene, 5, fade_in=25) == pytest.approx(0.5)
        assert scene_fade(scene, 10, fade_in=25) == 1.0

    def test_zero_fade_in_starts_opaque(self):
        scene = Scene(id="intro", start=0, duration=90, crossfade=20, fade_in=0)
        assert scene_fade(scene, 0) == 1.0
        assert scene_fade(scene, -1) == 0.0


class TestSceneStates:

    def test_only_visible_scenes_are_returned(self):
        scenes = [
            Scene(id="a", start=0, duration=100, crossfade=15),
            Scene(id="b", start=85, duration=100, crossfade=15),
            Scene(id="c", start=300, duration=100),
        ]
        ids = [s.scene.id for s in scene_states(scenes, 90)]
        assert ids == ["a", "b"]

    def test_sorted_by_z_index_keeping_declaration_order(self):
        scenes = [
            Scene(id="top", start=0, duration=100, z_index=1),
            Scene(id="first", start=0, duration=100),
            Scene(id="second", start=0, duration=100),
        ]
        ids = [s.scene.id for s in scene_states(scenes, 50)]
        assert ids == ["first", "second", "top"]

    def test_crossfade_overlap_opacities(self):
        outgoing = Scene(id="out", start=0, duration=100, crossfade=15)
        incoming = Scene(id="in", start=85, duration=100, crossfade=15, fade_in=15)
        for frame in range(85, 101):
            assert 0 <= scene_fade(outgoing, frame) <= 1
            assert 0 <= scene_fade(incoming, frame) <= 1
        assert scene_fade(outgoing, 100) == 0
        assert scene_fade(incoming, 100) == 1.0
