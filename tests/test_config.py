"""
Tests for the YAML configuration loader
"""
import pytest
from pydantic import ValidationError

from app.config import CONFIG_ENV_VAR, load_config
from app.models import Settings


def test_load_config(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text("data_path: other.json\nsample_size: 3\nport: 9000\n", encoding="utf-8")

    settings = load_config(str(path))

    assert settings.data_path == "other.json"
    assert settings.sample_size == 3
    assert settings.port == 9000
    assert settings.views_dir == "views"


def test_load_config_from_env(tmp_path, monkeypatch):
    path = tmp_path / "server.yaml"
    path.write_text("title: From Env\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().title == "From Env"


def test_load_config_missing_requested_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_load_config_missing_default_file(tmp_path, monkeypatch):
    """No config file at the default path → defaults"""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)

    assert load_config() == Settings()


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == Settings()


def test_load_config_ignores_unknown_keys(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text("sample_size: 2\nfoo: bar\n", encoding="utf-8")

    settings = load_config(str(path))

    assert settings.sample_size == 2
    assert not hasattr(settings, "foo")


def test_load_config_not_a_mapping(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_load_config_negative_sample_size(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text("sample_size: -1\n", encoding="utf-8")

    with pytest.raises(ValueError, match="sample_size"):
        load_config(str(path))


def test_settings_rejects_negative_sample_size():
    """Constraint lives on the model, not only in the loader"""
    with pytest.raises(ValidationError):
        Settings(sample_size=-1)
