"""Tests del exportador de subtítulos ASS/SRT."""

import pytest

from ratio_reels.domain.models import CaptionPhrase
from ratio_reels.video.subtitles import CaptionExporter

CAPTIONS = [
    CaptionPhrase(text="Can you argue before a judge?", start=8, end=83),
    CaptionPhrase(text="RATIO. The Digital Court Society.", start=665, end=755),
]


@pytest.fixture
def exporter(tmp_path):
    return CaptionExporter(output_dir=tmp_path, fps=30)


class TestTimeFormat:

    def test_ass_time(self, exporter):
        assert exporter._format_time(0) == "0:00:00.00"
        assert exporter._format_time(65.5) == "0:01:05.50"
        assert exporter._format_time(3725.25) == "1:02:05.25"

    def test_srt_time(self, exporter):
        assert exporter._format_srt_time(2.8) == "00:00:02,800"
        assert exporter._format_srt_time(3661.001) == "01:01:01,001"


class TestKaraoke:

    def test_durations_cover_the_phrase(self, exporter):
        phrase = CaptionPhrase(text="uno dos tres", start=0, end=29)
        assert exporter.karaoke(phrase) == "{\\k33}uno {\\k33}dos {\\k34}tres"

    def test_empty_phrase(self, exporter):
        assert exporter.karaoke(CaptionPhrase(text="", start=0, end=10)) == ""

    def test_braces_are_escaped(self, exporter):
        assert "{x}" not in exporter.karaoke(CaptionPhrase(text="{x}", start=0, end=10))


class TestAss:

    def test_sections_and_styles(self, exporter):
        content = exporter.to_ass(CAPTIONS, title="AIPracticeShort")
        assert content.startswith("[Script Info]")
        assert "Title: AIPracticeShort" in content
        assert "PlayResX: 393" in content
        assert "[V4+ Styles]" in content and "[Events]" in content
        assert "Style: Default," in content and "Style: Brand," in content

    def test_dialogue_lines(self, exporter):
        lines = [l for l in exporter.to_ass(CAPTIONS).splitlines() if l.startswith("Dialogue:")]
        assert len(lines) == 2
        assert lines[0].startswith("Dialogue: 0,0:00:00.27,0:00:02.80,Default,")
        assert ",Brand," in lines[1]


class TestSrt:

    def test_blocks(self, exporter):
        content = exporter.to_srt(CAPTIONS)
        assert content.startswith("1\n00:00:00,267 --> 00:00:02,800\nCan you argue before a judge?\n")
        assert "\n2\n00:00:22,167 --> 00:00:25,200\n" in content


class TestExport:

    def test_writes_ass_file(self, exporter, tmp_path):
        path = exporter.export(CAPTIONS, "AIPracticeShort")
        assert path == tmp_path / "AIPracticeShort.ass"
        assert "Dialogue:" in path.read_text(encoding="utf-8")

    def test_writes_srt_file(self, exporter, tmp_path):
        path = exporter.export(CAPTIONS, "AIPracticeShort", fmt="srt")
        assert path.suffix == ".srt"

    def test_unknown_format(self, exporter):
        with pytest.raises(ValueError):
            exporter.export(CAPTIONS, "x", fmt="vtt")

    def test_registered_composition(self, registry, exporter):
        composition = registry.get("AnalyticsFeedbackVideo")
        path = exporter.export(composition.captions, composition.id)
        dialogues = [l for l in path.read_text(encoding="utf-8").splitlines() if l.startswith("Dialogue:")]
        assert len(dialogues) == len(composition.captions)
