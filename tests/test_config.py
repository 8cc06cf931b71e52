"""Tests for configuration loading."""

from pathlib import Path

import pytest

from a2a_client.config import load_config
from a2a_client.exceptions import ConfigError
from a2a_client.models import ClientConfig


def write_yaml(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "a2a.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_defaults(self):
        assert load_config(env={}) == ClientConfig()

    def test_yaml_top_level(self, tmp_path):
        path = write_yaml(tmp_path, "base_url: http://agent:8080/\ntimeout_ms: 1500\nmax_retries: 4\n")
        config = load_config(path, env={})
        assert config == ClientConfig(base_url="http://agent:8080/", timeout_ms=1500, max_retries=4)

    def test_yaml_section(self, tmp_path):
        path = write_yaml(tmp_path, "a2a:\n  base_url: http://agent:8080\n  max_retries: 0\n")
        config = load_config(path, env={})
        assert config.base_url == "http://agent:8080"
        assert config.max_retries == 0
        assert config.timeout_ms == 5000

    def test_empty_yaml(self, tmp_path):
        path = write_yaml(tmp_path, "")
        assert load_config(path, env={}) == ClientConfig()

    def test_env_beats_yaml(self, tmp_path):
        path = write_yaml(tmp_path, "base_url: http://file\ntimeout_ms: 1000\n")
        env = {"A2A_BASE_URL": "http://env", "A2A_TIMEOUT_MS": "2000", "A2A_MAX_RETRIES": "7"}
        config = load_config(path, env=env)
        assert config == ClientConfig(base_url="http://env", timeout_ms=2000, max_retries=7)

    def test_empty_env_base_url_clears_file_value(self, tmp_path):
        path = write_yaml(tmp_path, "base_url: http://file\n")
        assert load_config(path, env={"A2A_BASE_URL": ""}).base_url is None

    def test_overrides_beat_env(self):
        env = {"A2A_BASE_URL": "http://env", "A2A_MAX_RETRIES": "7"}
        config = load_config(env=env, base_url="http://cli", max_retries=None)
        assert config.base_url == "http://cli"
        assert config.max_retries == 7

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("A2A_BASE_URL", "http://from-os")
        monkeypatch.delenv("A2A_TIMEOUT_MS", raising=False)
        monkeypatch.delenv("A2A_MAX_RETRIES", raising=False)
        assert load_config().base_url == "http://from-os"


class TestLoadConfigErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml", env={})

    def test_unknown_yaml_key(self, tmp_path):
        path = write_yaml(tmp_path, "base_url: http://x\nretries: 3\n")
        with pytest.raises(ConfigError, match="retries"):
            load_config(path, env={})

    def test_non_mapping_yaml(self, tmp_path):
        path = write_yaml(tmp_path, "- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path, env={})

    def test_invalid_yaml(self, tmp_path):
        path = write_yaml(tmp_path, "base_url: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path, env={})

    def test_non_integer_env(self):
        with pytest.raises(ConfigError, match="timeout_ms"):
            load_config(env={"A2A_TIMEOUT_MS": "fast"})

    def test_negative_retries(self):
        with pytest.raises(ConfigError, match="non-negative"):
            load_config(env={}, max_retries=-1)

    def test_unknown_override(self):
        with pytest.raises(ConfigError, match="Unknown config option"):
            load_config(env={}, retries=3)

    @pytest.mark.parametrize("text", ["timeout_ms: 1.5\n", "max_retries: 2.9\n", "max_retries: 2.0\n"])
    def test_float_yaml_value(self, tmp_path, text):
        path = write_yaml(tmp_path, text)
        with pytest.raises(ConfigError, match="must be an integer"):
            load_config(path, env={})

    def test_non_string_base_url(self, tmp_path):
        path = write_yaml(tmp_path, "base_url: 8080\n")
        with pytest.raises(ConfigError, match="base_url must be a string"):
            load_config(path, env={})
