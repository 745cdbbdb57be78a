"""Tests de la exportación por lotes y el manifiesto."""

import json

import pytest

from ratio_reels.director.loader import TimelineLoader
from ratio_reels.video.exporter import FrameExporter

DOCUMENT = {
    "id": "ExportDemo",
    "duration_in_frames": 40,
    "scenes": [{"id": "only", "start": 0, "duration": 40,
                "elements": [{"type": "text", "content": "RATIO."}]}],
}


class TestExport:

    def test_json_lines_match_render(self, registry, tmp_path):
        composition = registry.get("RatioShowcase")
        path = FrameExporter(output_dir=tmp_path).export(composition, start=0, end=10)
        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 10
        assert lines[3] == composition.render(3).to_json()
        assert json.loads(lines[9])["frame"] == 9

    def test_parallel_export_is_identical(self, registry, tmp_path):
        composition = registry.get("AIPracticeShort")
        sequential = FrameExporter(output_dir=tmp_path / "seq").export(composition, start=100, end=170)
        parallel = FrameExporter(output_dir=tmp_path / "par", workers=2).export(composition, start=100, end=170)
        assert sequential.read_text(encoding="utf-8") == parallel.read_text(encoding="utf-8")

    def test_svg_export(self, registry, tmp_path):
        frames_dir = FrameExporter(output_dir=tmp_path).export(registry.get("RatioShowcase"), 0, 3, fmt="svg")
        assert sorted(p.name for p in frames_dir.iterdir()) == [
            "frame_00000.svg", "frame_00001.svg", "frame_00002.svg",
        ]

    def test_loaded_composition_runs_in_process(self, tmp_path):
        composition = TimelineLoader().load(DOCUMENT)
        path = FrameExporter(output_dir=tmp_path, workers=4).export(composition)
        assert len(path.read_text(encoding="utf-8").splitlines()) == 40

    def test_loaded_timeline_sharing_a_registered_id_is_not_replaced(self, registry, tmp_path, caplog):
        document = {
            "id": "RatioShowcase",
            "duration_in_frames": 600,
            "scenes": [{"id": "only", "start": 0, "duration": 600,
                        "elements": [{"type": "text", "content": "FROM FILE"}]}],
        }
        loaded = TimelineLoader().load(document)
        assert loaded.entry == registry.get("RatioShowcase").entry

        path = FrameExporter(output_dir=tmp_path, workers=2).export(loaded, start=0, end=30)
        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 30
        assert lines[5] == loaded.render(5).to_json()
        assert "FROM FILE" in lines[5]
        assert "exportando en un solo proceso" in caplog.text

    @pytest.mark.parametrize("start,end", [(-1, 10), (0, 601), (20, 20)])
    def test_invalid_range(self, registry, tmp_path, start, end):
        with pytest.raises(ValueError):
            FrameExporter(output_dir=tmp_path).export(registry.get("RatioShowcase"), start, end)

    def test_invalid_format(self, registry, tmp_path):
        with pytest.raises(ValueError):
            FrameExporter(output_dir=tmp_path).export(registry.get("RatioShowcase"), 0, 1, fmt="png")


class TestManifest:

    def test_manifest_lists_every_composition(self, registry, tmp_path):
        path = FrameExporter(output_dir=tmp_path).manifest(registry)
        data = json.loads(path.read_text(encoding="utf-8"))
        items = data["compositions"]
        assert [c["id"] for c in items] == registry.ids()
        showcase = items[0]
        assert showcase["duration_seconds"] == 20.0
        assert showcase["width"] == 393

    def test_audio_cues_are_declarative(self, registry, tmp_path):
        path = FrameExporter(output_dir=tmp_path).manifest([registry.get("LiveSessionSnippet")])
        audio = json.loads(path.read_text(encoding="utf-8"))["compositions"][0]["audio"]
        music = audio[0]
        assert music["envelope"]["frames"][:3] == [0, 20, 90]
        assert "duration_in_frames" not in music
