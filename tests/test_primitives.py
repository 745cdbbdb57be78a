"""Tests de primitivas: partículas, gráficos, teléfono y texto."""

import math

import pytest

from ratio_reels.domain.models import ScoreDimension
from ratio_reels.primitives.charts import counter, dimension_bars, radar_chart, radar_vertices, score_color, score_ring
from ratio_reels.primitives.palette import AMBER, GOLD, GREEN, STORY_HEIGHT
from ratio_reels.primitives.particles import (
    anchored_particle,
    anchored_particles,
    floating_mote,
    golden_particle,
    golden_particles,
    rising_particle,
)
from ratio_reels.primitives.phone import CSS_PHONE, SCREENSHOT_PHONE, flat_phone, ken_burns, phone_mockup, phone_transform
from ratio_reels.primitives.text import accent_line, fade_slide, text_reveal


class TestParticles:

    def test_deterministic(self):
        assert golden_particle(7, 321) == golden_particle(7, 321)
        assert golden_particles(50, 18) == golden_particles(50, 18)

    def test_golden_particles_wrap_vertically(self):
        for frame in (0, 100, 5000, 100000):
            for i in range(18):
                assert 0 <= golden_particle(i, frame).y < STORY_HEIGHT

    def test_rising_particles_stay_in_band(self):
        for frame in (0, 37, 900, 12345):
            for i in range(12):
                p = rising_particle(i, frame)
                assert -20 < p.y <= 100
                assert 0 <= p.x < 100

    def test_floating_mote_opacity_range(self):
        for frame in range(0, 600, 17):
            assert 0.03 <= floating_mote(3, frame).opacity <= 0.12

    def test_field_node(self):
        field = golden_particles(10, count=5)
        assert field.kind == "particles"
        assert len(field.props["particles"]) == 5

    def test_anchored_particle_waits_for_its_delay(self):
        assert anchored_particle(19, x=40, y=150, size=4, delay=20) is None
        first = anchored_particle(20, x=40, y=150, size=4, delay=20)
        assert first.opacity == 0
        assert (first.x, first.y) == (50, 150)

    def test_anchored_particle_stays_near_its_anchor(self):
        for frame in range(40, 3000, 37):
            p = anchored_particle(frame, x=80, y=600, size=5, delay=20, drift=25)
            assert abs(p.x - 80) <= 12.5
            assert abs(p.y - 600) <= 25
            assert 0 <= p.opacity <= 0.3

    def test_anchored_field_skips_pending_anchors(self):
        anchors = [dict(x=40, y=150, size=4, delay=20), dict(x=320, y=300, size=3, delay=60)]
        field = anchored_particles(30, anchors)
        assert field.props["variant"] == "anchored"
        assert len(field.props["particles"]) == 1
        assert len(anchored_particles(60, anchors).props["particles"]) == 2


class TestCharts:

    @pytest.mark.parametrize("score,color", [(85, GREEN), (80, GREEN), (78, GOLD), (70, GOLD), (65, AMBER)])
    def test_score_color(self, score, color):
        assert score_color(score) == color

    def test_score_ring_counts_up(self):
        assert score_ring(0, 78).find("text")[0].props["text"] == "0"
        final = score_ring(50, 78)
        assert final.find("text")[0].props["text"] == "78"
        assert final.props["dash_offset"] == pytest.approx(final.props["circumference"] * 0.22)

    def test_dimension_bars_reach_their_score(self):
        dims = [ScoreDimension(label="Court Manner", score=85), ScoreDimension(label="Oral Delivery", score=65)]
        bars = dimension_bars(200, dims).find("bar")
        assert [b.props["width_percent"] for b in bars] == [85, 65]
        assert [b.props["color"] for b in bars] == [GREEN, AMBER]

    def test_dimension_bars_are_staggered(self):
        dims = [ScoreDimension(label=str(i), score=100) for i in range(3)]
        bars = dimension_bars(45, dims, first_delay=20, stagger=8).find("bar")
        widths = [b.props["width_percent"] for b in bars]
        assert widths[0] > widths[1] > widths[2]

    def test_radar_vertices(self):
        vertices = radar_vertices([100, 100, 100, 100])
        assert vertices[0] == pytest.approx((150, 50))
        assert vertices[1] == pytest.approx((250, 150))
        assert radar_vertices([]) == []

    def test_radar_expands_from_center(self):
        start = radar_chart(0, [80, 60, 70], ["A", "B", "C"])
        assert start.props["expand"] == 0
        data = [p for p in start.find("polygon") if p.props["role"] == "data"][0]
        assert data.props["points"][0] == pytest.approx([150, 150])

    def test_counter_suffix(self):
        assert counter(45, 142, delay=5, suffix="+").props["text"] == "142+"
        assert counter(0, 142).props["value"] == 0


class TestPhone:

    def test_entry(self):
        t = phone_transform(0)
        assert t.opacity == 0
        assert t.scale == CSS_PHONE.entry_scale
        assert t.translate_y == CSS_PHONE.entry_offset_y
        settled = phone_transform(CSS_PHONE.entry_end)
        assert settled.opacity == 1
        assert settled.scale == 1

    def test_sway_never_settles(self):
        assert phone_transform(200).rotate_y != phone_transform(300).rotate_y

    def test_tilt_direction(self):
        assert phone_transform(10, tilt="left").rotate_y > 0
        assert phone_transform(10, tilt="right").rotate_y < 0
        assert phone_transform(400, tilt="none").rotate_y == 0

    def test_screenshot_variant_is_faster(self):
        assert phone_transform(SCREENSHOT_PHONE.entry_end, motion=SCREENSHOT_PHONE).scale == 1
        assert phone_transform(SCREENSHOT_PHONE.entry_end).scale < 1

    @pytest.mark.parametrize("mode,expected", [
        ("zoom-in", (1.04, 0.0, 0.0)),
        ("zoom-out", (1, 0.0, 0.0)),
        ("pan-up", (1.0, 0.0, -8)),
        ("pan-down", (1.0, 0.0, 8)),
        (None, (1.0, 0.0, 0.0)),
    ])
    def test_ken_burns_end_state(self, mode, expected):
        assert ken_burns(220, mode) == expected

    def test_delay_shifts_the_entry(self):
        early = phone_mockup(10, "screenshots/mobile/dashboard-mobile.png", delay=10)
        assert early.props["opacity"] == 0
        assert early.find("image")[0].props["src"] == "screenshots/mobile/dashboard-mobile.png"

    def test_flat_phone_entry_scale(self):
        src = "screenshots/mobile/ai-session-live.png"
        assert flat_phone(10, src, delay=10).props["scale"] == pytest.approx(0.9 * 0.85)
        assert flat_phone(20, src, delay=10, scale=1.0, entry_scale=0.92).props["scale"] == pytest.approx(0.96)
        settled = flat_phone(30, src, delay=10, scale=1.0, entry_scale=0.92)
        assert settled.props["scale"] == pytest.approx(1.0)
        assert settled.props["opacity"] == 1


class TestText:

    def test_text_reveal(self):
        start = text_reveal(10, "RATIO.", delay=10)
        assert start.props["opacity"] == 0
        assert start.props["translate_y"] == 24
        done = text_reveal(35, "RATIO.", delay=10)
        assert done.props["opacity"] == 1
        assert done.props["translate_y"] == 0

    def test_reveal_from_above(self):
        assert text_reveal(0, "RATIO.", direction="down").props["translate_y"] == -24

    def test_fade_slide_horizontal(self):
        assert fade_slide(0, "x", direction="left").props["translate_x"] == 20
        assert fade_slide(15, "x", direction="left").props["translate_x"] == 0

    def test_accent_line_grows(self):
        assert accent_line(0, 60).props["width"] == 0
        assert accent_line(30, 60).props["width"] == 60
        assert accent_line(10, 60, duration=20, eased=False).props["width"] == pytest.approx(30)
        assert math.isclose(accent_line(30, 60).props["height"], 1)
