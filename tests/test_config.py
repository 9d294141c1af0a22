from __future__ import annotations

from jobdash.config import DEFAULT_SETTINGS, data_dir, load_settings


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.delenv("JOBDASH_API_URL", raising=False)
    assert load_settings(tmp_path / "missing.yaml") == DEFAULT_SETTINGS


def test_yaml_overrides_and_env_wins(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("default_location: Germany\nrequest_timeout: 5\napi_base_url: http://a\n", encoding="utf-8")
    monkeypatch.setenv("JOBDASH_API_URL", "http://b")

    settings = load_settings(path)
    assert settings["default_location"] == "Germany"
    assert settings["request_timeout"] == 5
    assert settings["default_role"] == "developer"
    assert settings["api_base_url"] == "http://b"


def test_non_mapping_yaml_is_ignored(tmp_path, monkeypatch):
    monkeypatch.delenv("JOBDASH_API_URL", raising=False)
    path = tmp_path / "settings.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_data_dir_override(tmp_path, monkeypatch):
    monkeypatch.setenv("JOBDASH_DATA_DIR", str(tmp_path))
    assert data_dir() == tmp_path
