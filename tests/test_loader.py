"""Tests del cargador de timelines declarativos."""

import json

import pytest

from ratio_reels.director.loader import ELEMENT_BUILDERS, TimelineLoader
from ratio_reels.errors import TimelineLoadError

DOCUMENT = {
    "id": "DeclarativeDemo",
    "duration_in_frames": 120,
    "fade_in": 10,
    "scenes": [
        {
            "id": "opening",
            "start": 0,
            "duration": 70,
            "crossfade": 10,
            "fade_in": 0,
            "elements": [
                {"type": "text", "content": "Practica cada día", "size": 24, "serif": True},
                {"type": "accent_line", "width": 80, "delay": 10},
            ],
        },
        {
            "id": "numbers",
            "start": 60,
            "duration": 60,
            "elements": [
                {"type": "score_ring", "score": 78},
                {"type": "counter", "target": 142, "suffix": "+", "delay": 5},
            ],
        },
    ],
    "captions": [{"text": "Practica cada día.", "from": 5, "to": 60}],
    "audio": [{"asset_ref": "audio/music/ambient-pad.mp3", "volume": 0.1}],
}

YAML_DOCUMENT = """
id: YamlDemo
duration_in_frames: 90
scenes:
  - id: only
    start: 0
    duration: 90
    elements:
      - type: radar
        values: [80, 60, 70, 90]
        labels: [A, B, C, D]
      - type: chat
        delay: 10
        messages:
          - role: judge
            text: Counsel, you may proceed.
            typing_start: 0
            message_start: 15
"""


@pytest.fixture
def loader():
    return TimelineLoader()


class TestParse:

    def test_dict_document(self, loader):
        document = loader.parse(DOCUMENT)
        assert document.id == "DeclarativeDemo"
        assert document.scenes[0].elements[0].params["content"] == "Practica cada día"
        assert document.captions[0].start == 5

    def test_json_string_with_markdown_fences(self, loader):
        raw = "```json\n" + json.dumps(DOCUMENT) + "\n```"
        assert loader.parse(raw).duration_in_frames == 120

    def test_yaml_string(self, loader):
        document = loader.parse(YAML_DOCUMENT)
        assert document.scenes[0].elements[1].delay == 10

    def test_invalid_syntax(self, loader):
        with pytest.raises(TimelineLoadError):
            loader.parse("scenes: [unclosed")

    def test_not_a_mapping(self, loader):
        with pytest.raises(TimelineLoadError):
            loader.parse("- just\n- a list")

    def test_missing_required_fields(self, loader):
        with pytest.raises(TimelineLoadError):
            loader.parse({"id": "x", "scenes": []})

    def test_unknown_element_type(self, loader):
        document = json.loads(json.dumps(DOCUMENT))
        document["scenes"][0]["elements"].append({"type": "hologram"})
        with pytest.raises(TimelineLoadError, match="hologram"):
            loader.parse(document)

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(TimelineLoadError):
            loader.load_file(tmp_path / "missing.yaml")


class TestBuild:

    def test_composition_settings(self, loader):
        composition = loader.load(DOCUMENT)
        assert composition.id == "DeclarativeDemo"
        assert composition.fade_in == 10
        assert [s.id for s in composition.scenes] == ["opening", "numbers"]
        assert composition.scene("opening").fade_in == 0
        assert len(composition.audio) == 1

    def test_elements_render(self, loader):
        composition = loader.load(DOCUMENT)
        tree = composition.render(119).tree
        assert tree.find("counter")[0].props["text"] == "142+"
        assert tree.find("score_ring")

    def test_caption_from_document(self, loader):
        output = loader.load(DOCUMENT).render(30)
        assert output.caption.text == "Practica cada día."

    def test_render_is_pure(self, loader):
        composition = loader.load(DOCUMENT)
        assert composition.render(65).to_json() == composition.render(65).to_json()

    def test_yaml_file(self, loader, tmp_path):
        path = tmp_path / "timeline.yaml"
        path.write_text(YAML_DOCUMENT, encoding="utf-8")
        composition = loader.load_file(path)
        tree = composition.render(40).tree
        assert tree.find("radar")
        assert tree.find("chat_bubble")

    def test_missing_element_parameter(self, loader):
        document = json.loads(json.dumps(DOCUMENT))
        document["scenes"][0]["elements"] = [{"type": "text"}]
        with pytest.raises(TimelineLoadError, match="opening"):
            loader.load(document)

    def test_builder_table(self):
        assert set(ELEMENT_BUILDERS) == {
            "text", "accent_line", "phone", "score_ring", "dimension_bars", "radar", "counter", "chat",
        }
