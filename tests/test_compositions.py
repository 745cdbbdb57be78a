"""Tests de las composiciones registradas."""

import pytest

from ratio_reels.director.validator import TimelineValidator
from ratio_reels.domain.models import Scene
from ratio_reels.primitives.palette import GOLD
from ratio_reels.primitives.particles import floating_motes

COMPOSITION_IDS = [
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


def sample_frames(duration):
    return sorted({0, 1, 17, duration // 3, duration // 2, duration - 1})


class TestPurity:

    @pytest.mark.parametrize("composition_id", COMPOSITION_IDS)
    def test_render_twice_is_byte_identical(self, registry, composition_id):
        composition = registry.get(composition_id)
        for frame in sample_frames(composition.duration_in_frames):
            assert composition.render(frame).to_json() == composition.render(frame).to_json()

    @pytest.mark.parametrize("composition_id", COMPOSITION_IDS)
    def test_render_order_does_not_matter(self, registry, composition_id):
        composition = registry.get(composition_id)
        last = composition.duration_in_frames - 1
        before = composition.render(last).to_json()
        for frame in sample_frames(composition.duration_in_frames):
            composition.render(frame)
        assert composition.render(last).to_json() == before

    @pytest.mark.parametrize("composition_id", COMPOSITION_IDS)
    def test_frames_outside_the_range_do_not_raise(self, registry, composition_id):
        composition = registry.get(composition_id)
        assert composition.render(-50).frame == -50
        assert composition.render(composition.duration_in_frames + 100).tree.kind == "composition"


class TestCompositionContract:

    @pytest.mark.parametrize("composition_id,duration", [
        ("RatioShowcase", 600),
        ("AIPracticeShort", 950),
        ("AIJudgeVideo", 1650),
        ("AnalyticsFeedbackVideo", 1500),
        ("LiveSessionSnippet", 1650),
        ("FeatureShowcase", 2100),
        ("MootCourtCinematic", 2190),
        ("ConstitutionalLaw", 1630),
        ("MootCourtPromo", 600),
        ("RecruitmentPromo", 1440),
    ])
    def test_entries(self, registry, composition_id, duration):
        entry = registry.get(composition_id).entry
        assert entry.fps == 30
        assert (entry.width, entry.height) == (393, 852)
        assert entry.duration_in_frames == duration

    @pytest.mark.parametrize("composition_id", COMPOSITION_IDS)
    def test_every_scene_has_a_renderer(self, registry, composition_id):
        composition = registry.get(composition_id)
        assert {s.id for s in composition.scenes} == set(composition.renderers)

    def test_audio_is_passed_through(self, registry):
        composition = registry.get("AIJudgeVideo")
        output = composition.render(500)
        assert output.audio == list(composition.audio)

    def test_music_envelope(self, registry):
        music = registry.get("LiveSessionSnippet").audio[0]
        assert music.volume_at(0) == 0
        assert music.volume_at(20) == pytest.approx(0.08)


class TestValidation:

    @pytest.mark.parametrize("composition_id", COMPOSITION_IDS)
    def test_no_errors(self, registry, composition_id):
        assert TimelineValidator().validate(registry.get(composition_id)).errors == []

    @pytest.mark.parametrize("composition_id", [c for c in COMPOSITION_IDS if c != "FeatureShowcase"])
    def test_no_warnings(self, registry, composition_id):
        assert TimelineValidator().validate(registry.get(composition_id)).warnings == []

    def test_feature_showcase_hides_two_captions(self, registry):
        result = TimelineValidator().validate(registry.get("FeatureShowcase"))
        assert len(result.warnings) == 2
        assert all("RATIO. The Digital Court Society." in w for w in result.warnings)


class TestRatioShowcase:

    def test_crossfade_between_intro_and_dashboard(self, registry):
        tree = registry.get("RatioShowcase").render(80).tree
        scenes = {s.props["id"]: s for s in tree.find("scene")}
        assert {"intro", "dashboard"} <= set(scenes)
        assert 0 < scenes["intro"].props["opacity"] < 1
        assert 0 < scenes["dashboard"].props["opacity"] < 1

    def test_intro_is_opaque_from_the_first_frame(self, registry):
        intro = registry.get("RatioShowcase").render(0).tree.find("scene")[0]
        assert intro.props["id"] == "intro"
        assert intro.props["opacity"] == 1.0

    def test_cta_stacks_on_top(self, registry):
        scenes = registry.get("RatioShowcase").render(515).tree.find("scene")
        assert scenes[-1].props["id"] == "cta"


class TestLiveSession:

    def test_typing_indicator_before_the_first_message(self, registry):
        tree = registry.get("LiveSessionSnippet").render(105).tree
        assert tree.find("typing_indicator")

    def test_first_judge_message_is_revealing(self, registry):
        tree = registry.get("LiveSessionSnippet").render(140).tree
        bubble = tree.find("chat_bubble")[0]
        assert bubble.props["visible_chars"] == 14
        assert bubble.find("speaking_indicator")

    def test_first_judge_message_completes(self, registry):
        bubble = registry.get("LiveSessionSnippet").render(322).tree.find("chat_bubble")[0]
        assert bubble.props["visible_chars"] == 120
        assert not bubble.find("cursor")

    def test_feedback_box_window(self, registry):
        composition = registry.get("LiveSessionSnippet")
        assert not composition.render(1240 + 100).tree.find("card")
        assert composition.render(1240 + 180).tree.find("card")


class TestAnalyticsFeedback:

    def test_closing_caption(self, registry):
        caption = registry.get("AnalyticsFeedbackVideo").render(1395).caption
        assert caption.text == "RATIO. See how far you can go."
        assert caption.word_index == 3

    def test_no_caption_in_gaps(self, registry):
        assert registry.get("AnalyticsFeedbackVideo").render(1300).caption is None


def scenes_at(registry, composition_id, frame):
    tree = registry.get(composition_id).render(frame).tree
    return {s.props["id"]: s for s in tree.find("scene")}


class TestMootCourtCinematic:

    def test_short_crossfade_into_preparation(self, registry):
        scenes = scenes_at(registry, "MootCourtCinematic", 80)
        assert scenes["cold-open"].props["opacity"] == pytest.approx(0.5)
        assert scenes["preparation"].props["opacity"] == pytest.approx(0.2)

    def test_motes_follow_the_absolute_frame(self, registry):
        preparation = scenes_at(registry, "MootCourtCinematic", 200)["preparation"]
        assert preparation.find("particles")[0] == floating_motes(200, 4)

    def test_phone_is_narrower(self, registry):
        choose_judge = scenes_at(registry, "MootCourtCinematic", 400)["choose-judge"]
        assert choose_judge.find("phone_body")[0].props["width"] == 260
        assert choose_judge.find("image")[0].props["src"] == "screenshots/mobile/moot-court-mobile.png"

    def test_gavel_flash_when_court_opens(self, registry):
        court_opens = scenes_at(registry, "MootCourtCinematic", 905)["court-opens"]
        assert court_opens.find("flash")[0].props["opacity"] == pytest.approx(0.06)


class TestConstitutionalLaw:

    def test_no_progress_bar(self, registry):
        composition = registry.get("ConstitutionalLaw")
        for frame in (0, 800, 1629):
            assert not composition.render(frame).tree.find("progress_bar")

    def test_sections_keep_their_own_clock(self, registry):
        pills = scenes_at(registry, "ConstitutionalLaw", 126)["topics"].find("pill")
        assert len(pills) == 9
        assert pills[0].props["opacity"] == 1
        assert pills[-1].props["opacity"] == 0

    def test_caption_for_the_cases_section(self, registry):
        caption = registry.get("ConstitutionalLaw").render(600).caption
        assert caption.text == "The cases that shaped the constitution."


class TestMootCourtPromo:

    def test_fades_straddle_the_nominal_boundaries(self, registry):
        assert scenes_at(registry, "MootCourtPromo", 0)["intro"].props["opacity"] == pytest.approx(0.6)
        scenes = scenes_at(registry, "MootCourtPromo", 130)
        assert scenes["mode-select"].props["opacity"] == pytest.approx(0.6)
        assert scenes["hook"].props["opacity"] == pytest.approx(0.8)

    def test_renderers_see_the_nominal_clock(self, registry):
        phone = scenes_at(registry, "MootCourtPromo", 150)["mode-select"].find("phone")[0]
        assert phone.props["opacity"] == pytest.approx(0.5)
        assert phone.props["scale"] == pytest.approx(0.96)

    def test_silent_without_captions(self, registry):
        composition = registry.get("MootCourtPromo")
        assert composition.captions == ()
        assert composition.audio == ()
        assert composition.render(300).caption is None


class TestRecruitmentPromo:

    @pytest.mark.parametrize("frame,count", [(10, 0), (30, 1), (150, 3), (300, 5)])
    def test_anchored_particles_appear_after_their_delay(self, registry, frame, count):
        tree = registry.get("RecruitmentPromo").render(frame).tree
        field = [p for p in tree.find("particles") if p.props["variant"] == "anchored"]
        assert len(field) == 1
        assert len(field[0].props["particles"]) == count

    def test_roles_without_pay_only_show_the_badge(self, registry):
        cards = scenes_at(registry, "RecruitmentPromo", 726)["roles"].find("card")
        assert [len(c.children) for c in cards] == [3, 3, 3, 3, 2, 2]

    def test_first_university_is_highlighted(self, registry):
        pills = scenes_at(registry, "RecruitmentPromo", 923)["unis"].find("pill")
        assert len(pills) == 16
        assert pills[0].props["border"] == GOLD
        assert all(p.props["border"] is None for p in pills[1:])


class TestCustomComposition:

    def test_scene_without_renderer_is_drawn_empty(self, composition_factory):
        composition = composition_factory([Scene(id="solo", start=0, duration=50)], renderers={})
        scene = composition.render(10).tree.find("scene")[0]
        assert scene.children == []

    def test_scene_receives_local_frame(self, composition_factory):
        composition = composition_factory([Scene(id="late", start=40, duration=50)])
        content = composition.render(55).tree.find("text")[0]
        assert content.props["frame"] == 15
