"""Tests de la simulación de chat y la máquina de escribir."""

from ratio_reels.domain.models import ChatMessage
from ratio_reels.primitives.chat import (
    chat_bubble,
    chat_phase,
    chat_state,
    chat_thread,
    full_text_frame,
    visible_chars,
)


class TestTypewriter:

    def test_scenario(self, judge_message):
        assert len(judge_message.text) == 120
        assert chat_phase(judge_message, 140) == "typing"
        partial = chat_state(judge_message, 160)
        assert partial.phase == "revealing"
        assert partial.visible_chars == 5
        assert partial.still_typing

        done = chat_state(judge_message, 357)
        assert done.visible_chars == 120
        assert done.text == judge_message.text
        assert not done.still_typing

    def test_full_text_frame(self, judge_message):
        assert full_text_frame(judge_message) == 357
        assert visible_chars(judge_message, 356) < 120

    def test_exact_multiple_reaches_full_length(self):
        message = ChatMessage(role="judge", text="x" * 29, typing_start=0, message_start=10,
                              chars_per_frame=0.29)
        assert full_text_frame(message) == 110
        assert visible_chars(message, 110) == 29
        assert visible_chars(message, 109) == 28
        assert not chat_state(message, 110).still_typing

    def test_full_text_frame_is_first_full_frame_for_any_speed(self):
        for hundredths in range(1, 400):
            speed = hundredths / 100
            for length in range(1, 200):
                message = ChatMessage(role="advocate", text="a" * length, typing_start=0,
                                      message_start=0, chars_per_frame=speed)
                full = full_text_frame(message)
                assert visible_chars(message, full) == length, (speed, length)
                assert visible_chars(message, full - 1) < length, (speed, length)

    def test_monotonic(self, judge_message):
        counts = [visible_chars(judge_message, f) for f in range(100, 420)]
        assert counts == sorted(counts)
        assert counts[-1] == 120

    def test_zero_speed_reveals_nothing(self):
        message = ChatMessage(role="advocate", text="Hola", typing_start=0, message_start=10,
                              chars_per_frame=0)
        assert visible_chars(message, 500) == 0

    def test_dormant_before_typing(self, judge_message):
        assert chat_phase(judge_message, 114) == "dormant"
        assert chat_state(judge_message, 114).visible_chars == 0


class TestSpeaking:

    def test_judge_speaks_during_voice_clip(self, judge_message):
        assert chat_state(judge_message, 200).speaking
        assert not chat_state(judge_message, 150 + 209).speaking

    def test_advocate_never_speaks(self):
        message = ChatMessage(role="advocate", text="My Lord", typing_start=0, message_start=5,
                              voice_duration_frames=100)
        assert not chat_state(message, 20).speaking


class TestBubbles:

    def test_dormant_message_has_no_node(self, judge_message):
        assert chat_bubble(judge_message, 100) is None

    def test_typing_indicator(self, judge_message):
        bubble = chat_bubble(judge_message, 140)
        assert bubble.kind == "typing_indicator"
        assert len(bubble.find("dot")) == 3

    def test_cursor_only_while_typing(self, judge_message):
        assert chat_bubble(judge_message, 160).find("cursor")
        assert not chat_bubble(judge_message, 400).find("cursor")

    def test_speaking_indicator_in_header(self, judge_message):
        assert chat_bubble(judge_message, 200).find("speaking_indicator")
        assert not chat_bubble(judge_message, 400).find("speaking_indicator")

    def test_thread_skips_dormant_messages(self, judge_message):
        later = ChatMessage(role="advocate", text="My Lord...", typing_start=500, message_start=520)
        thread = chat_thread([judge_message, later], 200)
        assert len(thread.children) == 1
