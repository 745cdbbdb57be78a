"""Tests del sincronizador de subtítulos."""

import pytest

from ratio_reels.domain.models import CaptionPhrase
from ratio_reels.video.captions import active_caption, caption_overlay, caption_state, find_overlaps, resolve_caption


class TestCaptionState:

    def test_scenario_midpoint(self, closing_caption):
        state = caption_state(closing_caption, 1395)
        assert state.words == ["RATIO.", "See", "how", "far", "you", "can", "go."]
        assert state.word_index == 3
        assert state.highlighted == [True, True, True, True, False, False, False]

    def test_word_index_stays_in_range(self, closing_caption):
        n = len(closing_caption.words)
        for frame in range(closing_caption.start, closing_caption.end + 1):
            assert 0 <= caption_state(closing_caption, frame).word_index <= n - 1

    def test_last_frame_highlights_every_word(self, closing_caption):
        state = caption_state(closing_caption, closing_caption.end)
        assert state.word_index == 6
        assert all(state.highlighted)

    def test_entry_fade_and_rise(self, closing_caption):
        first = caption_state(closing_caption, 1310)
        assert first.opacity == 0
        assert first.offset_y == 6
        settled = caption_state(closing_caption, 1320)
        assert settled.opacity == 1.0
        assert settled.offset_y == 0

    def test_exit_fade(self, closing_caption):
        assert caption_state(closing_caption, 1480).opacity == 0
        assert 0 < caption_state(closing_caption, 1476).opacity < 1

    def test_zero_length_phrase_does_not_divide_by_zero(self):
        phrase = CaptionPhrase(text="Hola mundo", start=10, end=10)
        state = caption_state(phrase, 10)
        assert state.word_index == 0
        assert state.opacity == 0

    def test_empty_text(self):
        state = caption_state(CaptionPhrase(text="", start=0, end=30), 15)
        assert state.words == []
        assert state.highlighted == []


class TestActiveCaption:

    def test_first_match_wins(self):
        captions = [
            CaptionPhrase(text="primera", start=0, end=100),
            CaptionPhrase(text="segunda", start=50, end=150),
        ]
        assert active_caption(captions, 75).text == "primera"
        assert active_caption(captions, 120).text == "segunda"

    def test_closed_interval(self):
        captions = [CaptionPhrase(text="frase", start=10, end=20)]
        assert active_caption(captions, 10) is not None
        assert active_caption(captions, 20) is not None
        assert active_caption(captions, 21) is None
        assert resolve_caption(captions, 9) is None

    def test_alias_fields(self):
        phrase = CaptionPhrase.model_validate({"text": "desde alias", "from": 5, "to": 25})
        assert (phrase.start, phrase.end) == (5, 25)


class TestCaptionOverlay:

    def test_words_are_coloured_by_highlight(self, closing_caption):
        overlay = caption_overlay(1395, [closing_caption])
        words = overlay.find("word")
        assert len(words) == 7
        lit = [w.props["color"] for w in words]
        assert lit[0] == lit[3]
        assert lit[3] != lit[4]

    def test_no_overlay_outside_phrases(self, closing_caption):
        assert caption_overlay(100, [closing_caption]) is None


class TestFindOverlaps:

    def test_pairs_in_declaration_order(self):
        a = CaptionPhrase(text="a", start=0, end=100)
        b = CaptionPhrase(text="b", start=90, end=200)
        c = CaptionPhrase(text="c", start=300, end=400)
        assert find_overlaps([a, b, c]) == [(a, b)]

    @pytest.mark.parametrize("start,overlaps", [(100, True), (101, False)])
    def test_touching_windows_overlap(self, start, overlaps):
        a = CaptionPhrase(text="a", start=0, end=100)
        b = CaptionPhrase(text="b", start=start, end=200)
        assert bool(find_overlaps([a, b])) is overlaps
