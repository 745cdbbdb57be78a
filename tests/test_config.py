"""Tests de la carga de configuración."""

import pytest
from pydantic import ValidationError

from ratio_reels.config import ENV_OVERRIDES, Settings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "nope.yaml")
        assert settings == Settings()
        assert settings.workers == 4
        assert settings.default_composition == "RatioShowcase"

    def test_yaml_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("ratio_reels:\n  output_dir: ./renders\n  workers: 2\n  preview_scale: 0.5\n",
                        encoding="utf-8")
        settings = load_settings(path)
        assert settings.output_dir == "./renders"
        assert settings.workers == 2
        assert settings.preview_scale == 0.5

    def test_flat_yaml_is_accepted(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("log_level: DEBUG\n", encoding="utf-8")
        assert load_settings(path).log_level == "DEBUG"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path) == Settings()

    @pytest.mark.parametrize("content", ["ratio_reels:\n", "- workers: 2\n", "just a string\n"])
    def test_malformed_yaml_falls_back_to_defaults(self, tmp_path, caplog, content):
        path = tmp_path / "config.yaml"
        path.write_text(content, encoding="utf-8")
        assert load_settings(path) == Settings()
        assert "valores por defecto" in caplog.text

    def test_environment_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("ratio_reels:\n  workers: 2\n", encoding="utf-8")
        monkeypatch.setenv("RATIO_REELS_WORKERS", "8")
        monkeypatch.setenv("RATIO_REELS_STRICT", "true")
        monkeypatch.setenv("RATIO_REELS_OUTPUT_DIR", str(tmp_path / "out"))
        settings = load_settings(path)
        assert settings.workers == 8
        assert settings.strict_validation is True
        assert settings.output_dir == str(tmp_path / "out")

    def test_invalid_value_raises(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RATIO_REELS_WORKERS", "0")
        with pytest.raises(ValidationError):
            load_settings(tmp_path / "nope.yaml")

    def test_shipped_config_matches_defaults(self):
        from pathlib import Path
        shipped = Path(__file__).resolve().parent.parent / "config" / "config.yaml"
        assert load_settings(shipped) == Settings()
