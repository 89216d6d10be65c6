import json

import pytest

from vocabloop.config import Config, SettingsManager


@pytest.mark.unit
def test_defaults_written_to_file(settings_file, monkeypatch):
    monkeypatch.delenv("LEARN_FAVORITES", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = SettingsManager(str(settings_file))

    assert settings.get("LEARN_FAVORITES") is True
    assert settings.get("LOG_LEVEL") == "INFO"
    assert json.loads(settings_file.read_text(encoding="utf-8"))["LEARN_FAVORITES"] is True


@pytest.mark.unit
def test_singleton(settings_file):
    first = SettingsManager(str(settings_file))
    assert SettingsManager() is first


@pytest.mark.unit
def test_set_persists(settings_file, monkeypatch):
    monkeypatch.delenv("LEARN_FAVORITES", raising=False)
    SettingsManager(str(settings_file)).set("LEARN_FAVORITES", False)

    SettingsManager.reset_instance()
    assert SettingsManager(str(settings_file)).get("LEARN_FAVORITES") is False


@pytest.mark.unit
@pytest.mark.parametrize("raw,expected", [("false", False), ("0", False), ("yes", True), ("on", True)])
def test_env_override_bool(settings_file, monkeypatch, raw, expected):
    monkeypatch.setenv("LEARN_FAVORITES", raw)
    assert SettingsManager(str(settings_file)).get("LEARN_FAVORITES") is expected


@pytest.mark.unit
def test_env_override_bad_int_falls_back(settings_file, monkeypatch):
    monkeypatch.setenv("WINDOW_WIDTH", "wide")
    assert SettingsManager(str(settings_file)).get("WINDOW_WIDTH") == SettingsManager.DEFAULTS["WINDOW_WIDTH"]


@pytest.mark.unit
def test_corrupt_file_uses_defaults(settings_file, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings_file.write_text("{not json", encoding="utf-8")
    assert SettingsManager(str(settings_file)).get("LOG_LEVEL") == "INFO"


@pytest.mark.unit
def test_export_dir_env_override(settings_file, monkeypatch, tmp_path):
    monkeypatch.setenv("EXPORT_DIR", str(tmp_path / "out"))
    assert SettingsManager(str(settings_file)).get("EXPORT_DIR") == str(tmp_path / "out")


@pytest.mark.unit
def test_export_dir_default_comes_from_config(settings_file, monkeypatch):
    monkeypatch.delenv("EXPORT_DIR", raising=False)
    assert SettingsManager(str(settings_file)).get("EXPORT_DIR") == Config.EXPORT_DIR
