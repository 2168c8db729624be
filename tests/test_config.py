"""Tests for configuration loading."""

import pytest
from pathlib import Path

from aliasreg.config import load_config

_ENV_KEYS = ["ALIASREG_REGISTRY", "ALIASREG_LOG_LEVEL"]


class TestConfig:
    def test_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        for key in _ENV_KEYS:
            monkeypatch.delenv(key, raising=False)

        config = load_config(tmp_path / "missing.toml")
        assert config.registry_path.name == "registry.bin"
        assert config.registry_path.parent.name == ".aliasreg"
        assert config.log_level == "WARNING"

    def test_env_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ALIASREG_REGISTRY", str(tmp_path / "custom.bin"))
        monkeypatch.setenv("ALIASREG_LOG_LEVEL", "DEBUG")

        config = load_config()
        assert config.registry_path == tmp_path / "custom.bin"
        assert config.log_level == "DEBUG"

    def test_toml_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        for key in _ENV_KEYS:
            monkeypatch.delenv(key, raising=False)

        toml_path = tmp_path / "aliasreg.toml"
        toml_path.write_text(f"""
registry_path = "{tmp_path / 'from-toml.bin'}"
log_level = "INFO"
""")
        config = load_config(toml_path)
        assert config.registry_path == tmp_path / "from-toml.bin"
        assert config.log_level == "INFO"

    def test_toml_in_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        for key in _ENV_KEYS:
            monkeypatch.delenv(key, raising=False)

        (tmp_path / "aliasreg.toml").write_text('log_level = "ERROR"\n')
        config = load_config()
        assert config.log_level == "ERROR"

    def test_home_expanded(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ALIASREG_REGISTRY", "~/aliases.bin")

        config = load_config()
        assert config.registry_path == Path.home() / "aliases.bin"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ALIASREG_LOG_LEVEL", "DEBUG")

        toml_path = tmp_path / "aliasreg.toml"
        toml_path.write_text('log_level = "INFO"\n')
        config = load_config(toml_path)
        assert config.log_level == "DEBUG"  # env wins
