"""Tests de la CLI."""

import json

import pytest

from ratio_reels.config import ENV_OVERRIDES
from ratio_reels.main import main


@pytest.fixture(autouse=True)
def isolated_output(tmp_path, monkeypatch):
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("RATIO_REELS_OUTPUT_DIR", str(tmp_path))
    return tmp_path


class TestCli:

    def test_list(self):
        assert main(["list"]) == 0

    def test_render_prints_json(self, capsys):
        assert main(["render", "RatioShowcase", "10"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["composition_id"] == "RatioShowcase"
        assert data["frame"] == 10

    def test_unknown_composition(self):
        assert main(["render", "Nope", "1"]) == 1

    def test_captions(self, isolated_output):
        assert main(["captions", "AIPracticeShort", "--format", "srt"]) == 0
        assert (isolated_output / "AIPracticeShort.srt").exists()

    def test_preview(self, isolated_output):
        target = isolated_output / "preview.svg"
        assert main(["preview", "RatioShowcase", "130", "-o", str(target)]) == 0
        assert target.read_text(encoding="utf-8").startswith("<svg")

    def test_manifest(self, isolated_output):
        assert main(["manifest"]) == 0
        assert (isolated_output / "manifest.json").exists()

    def test_validate_warnings_do_not_fail(self):
        assert main(["validate", "FeatureShowcase"]) == 0

    def test_validate_strict_fails_on_warnings(self):
        assert main(["validate", "FeatureShowcase", "--strict"]) == 1

    def test_export(self, isolated_output):
        assert main(["export", "RatioShowcase", "--end", "5", "--workers", "1"]) == 0
        assert (isolated_output / "RatioShowcase_0-4.jsonl").exists()

    def test_export_invalid_range(self):
        assert main(["export", "RatioShowcase", "--start", "10", "--end", "5"]) == 2

    def test_validate_file(self, tmp_path):
        path = tmp_path / "timeline.yaml"
        path.write_text("id: Demo\nduration_in_frames: 30\nscenes:\n  - id: a\n    start: 0\n    duration: 30\n",
                        encoding="utf-8")
        assert main(["validate", "--file", str(path)]) == 0
