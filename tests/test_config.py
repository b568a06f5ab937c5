import json

import pytest

from blog_studio.config import AppConfig, config_from_env, load_config
from blog_studio.core.errors import ConfigError


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_config(tmp_path):
    path = write_config(tmp_path, {
        "api_key": "k",
        "rest_url": "https://blog.example.com/wp-json/",
        "nonce": "abc",
        "request_timeout": 30,
    })

    config = load_config(str(path))

    assert config.rest_url == "https://blog.example.com/wp-json/"
    assert config.request_timeout == 30
    assert config.text_model == "gemini-2.5-pro"


def test_load_config_missing_key(tmp_path):
    path = write_config(tmp_path, {"rest_url": "https://blog.example.com/wp-json/"})

    with pytest.raises(ValueError, match="Missing required config key: nonce"):
        load_config(str(path))


def test_load_config_unknown_key(tmp_path):
    path = write_config(tmp_path, {"rest_url": "u", "nonce": "n", "colour": "blue"})

    with pytest.raises(ConfigError, match="colour"):
        load_config(str(path))


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.json"))


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    monkeypatch.setenv("WORDPRESS_REST_URL", "https://blog.example.com/wp-json/")
    monkeypatch.setenv("WORDPRESS_NONCE", "env-nonce")
    monkeypatch.setenv("GEMINI_IMAGE_MODEL", "imagen-test")
    monkeypatch.setenv("REQUEST_TIMEOUT", "12.5")

    config = config_from_env()

    assert config.api_key == "env-key"
    assert config.nonce == "env-nonce"
    assert config.image_model == "imagen-test"
    assert config.request_timeout == 12.5


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT", "soon")
    with pytest.raises(ConfigError):
        config_from_env()


def test_with_api_key_is_a_copy():
    config = AppConfig(api_key="old")
    assert config.with_api_key("new").api_key == "new"
    assert config.api_key == "old"
