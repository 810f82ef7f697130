"""Tests for csc.toml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from csc.core.errors import ConfigError
from csc.core.manifest import LOG_LEVEL_ENV, find_config, load_config, resolve_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


class TestLoadConfig:
    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / "csc.toml"
        path.write_text(
            """
[repl]
prompt = "calc> "
banner = false

[logging]
level = "debug"
"""
        )
        config = load_config(path)
        assert config.repl.prompt == "calc> "
        assert config.repl.banner is False
        assert config.logging.level == "DEBUG"
        assert config.source == path

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "csc.toml"
        path.write_text("")
        config = load_config(path)
        assert config.repl.prompt == "> "
        assert config.repl.banner is True
        assert config.logging.level == "WARNING"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "csc.toml"
        path.write_text("[repl\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "missing.toml")

    def test_invalid_level(self, tmp_path: Path) -> None:
        path = tmp_path / "csc.toml"
        path.write_text('[logging]\nlevel = "LOUD"\n')
        with pytest.raises(ConfigError, match="Invalid log level"):
            load_config(path)

    def test_wrong_types(self, tmp_path: Path) -> None:
        path = tmp_path / "csc.toml"
        path.write_text("[repl]\nprompt = 3\n")
        with pytest.raises(ConfigError, match="repl.prompt"):
            load_config(path)
        path.write_text('[repl]\nbanner = "yes"\n')
        with pytest.raises(ConfigError, match="repl.banner"):
            load_config(path)


class TestResolveConfig:
    def test_defaults_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert find_config() is None
        config = resolve_config()
        assert config.source is None
        assert config.logging.level == "WARNING"

    def test_finds_file_in_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "csc.toml").write_text('[repl]\nprompt = ">> "\n')
        monkeypatch.chdir(tmp_path)
        assert resolve_config().repl.prompt == ">> "

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "csc.toml"
        path.write_text('[logging]\nlevel = "ERROR"\n')
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        assert resolve_config(path).logging.level == "INFO"

    def test_invalid_env_level(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        with pytest.raises(ConfigError, match=LOG_LEVEL_ENV):
            resolve_config()
