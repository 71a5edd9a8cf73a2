"""Tests for marked_outline.services.settings_service and config_path."""

import json

import pytest

from marked_outline.services.config_path import get_config_dir

pytest.importorskip("gi")

from marked_outline.services.settings_service import SettingsService  # noqa: E402


class TestConfigDir:
    def test_xdg_config_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / "marked-outline"

    def test_home_fallback(self, monkeypatch, tmp_path):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / ".config" / "marked-outline"


class TestSettingsService:
    def test_defaults(self, tmp_path):
        settings = SettingsService(config_dir=tmp_path)
        assert settings.get("overview.title") == "Marked Text Overview"
        assert settings.get("overview.bullet") == "-"
        assert settings.get("overview.missing", "fallback") == "fallback"

    def test_set_saves_and_emits(self, tmp_path):
        settings = SettingsService(config_dir=tmp_path)
        changes = []
        settings.connect("changed", lambda service, key, value: changes.append((key, value)))
        settings.set("overview.bullet", "+")
        assert changes == [("overview.bullet", "+")]
        saved = json.loads((tmp_path / "settings.json").read_text(encoding="utf-8"))
        assert saved["overview"]["bullet"] == "+"
        assert SettingsService(config_dir=tmp_path).get("overview.bullet") == "+"

    def test_saved_values_merge_with_defaults(self, tmp_path):
        (tmp_path / "settings.json").write_text(json.dumps({"overview": {"width": 400}}), encoding="utf-8")
        settings = SettingsService(config_dir=tmp_path)
        assert settings.get("overview.width") == 400
        assert settings.get("overview.title") == "Marked Text Overview"

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path):
        (tmp_path / "settings.json").write_text("{not json", encoding="utf-8")
        assert SettingsService(config_dir=tmp_path).get("overview.width") == 320

    def test_reset(self, tmp_path):
        settings = SettingsService(config_dir=tmp_path)
        settings.set("overview.title", "Marks")
        settings.reset("overview.title")
        assert settings.get("overview.title") == "Marked Text Overview"
        settings.set("overview.width", 1)
        settings.reset()
        assert settings.get("overview.width") == 320
