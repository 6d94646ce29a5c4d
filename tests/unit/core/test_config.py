"""Unit tests for configuration loading and saving."""

import tomllib
from pathlib import Path

import pytest
import typer
from dustctl.core.config import (
    AppConfig,
    ConfigParseError,
    ConfigValidationError,
    SweepConfig,
    load_config,
    require_config,
    save_config,
)
from dustctl.sweep.matcher import DEFAULT_ARTIFACT_NAMES


class TestSweepConfig:
    """Tests for the SweepConfig model."""

    def test_defaults(self) -> None:
        config = SweepConfig()
        assert config.artifact_names == list(DEFAULT_ARTIFACT_NAMES)
        assert config.max_workers is None

    def test_names_stripped_and_deduplicated(self) -> None:
        config = SweepConfig(artifact_names=[" bin ", "obj", "bin"])
        assert config.artifact_names == ["bin", "obj"]

    def test_empty_names_rejected(self) -> None:
        with pytest.raises(ValueError, match="At least one"):
            SweepConfig(artifact_names=[])

    def test_separator_rejected(self) -> None:
        with pytest.raises(ValueError, match="path separator"):
            SweepConfig(artifact_names=["out/bin"])

    def test_max_workers_positive(self) -> None:
        with pytest.raises(ValueError):
            SweepConfig(max_workers=0)

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValueError):
            SweepConfig(unknown=True)  # type: ignore[call-arg]

    def test_build_matcher(self) -> None:
        matcher = SweepConfig(artifact_names=["target"]).build_matcher()
        assert matcher.matches("/proj/Target")
        assert not matcher.matches("/proj/bin")


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "absent.toml")
        assert config == AppConfig()

    def test_default_path_uses_xdg(self, isolated_config_home: Path) -> None:
        """Default path is under XDG_CONFIG_HOME/dustctl."""
        path = isolated_config_home / "dustctl" / "config.toml"
        path.parent.mkdir(parents=True)
        path.write_text('[sweep]\nartifact_names = ["dist"]\n')

        assert load_config().sweep.artifact_names == ["dist"]

    def test_loads_values(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('[sweep]\nartifact_names = ["bin", "target"]\nmax_workers = 4\n')

        config = load_config(path)

        assert config.sweep.artifact_names == ["bin", "target"]
        assert config.sweep.max_workers == 4

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[sweep\n")

        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[sweep]\nmax_workers = -1\n")

        with pytest.raises(ConfigValidationError, match="Invalid config content"):
            load_config(path)

    def test_unknown_section(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[other]\nx = 1\n")

        with pytest.raises(ConfigValidationError):
            load_config(path)


class TestSaveConfig:
    """Tests for save_config."""

    def test_save_and_reload(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "config.toml"
        config = AppConfig(sweep=SweepConfig(artifact_names=["bin"], max_workers=2))

        saved = save_config(config, path)

        assert saved == path
        assert load_config(path) == config
        assert not list(path.parent.glob("*.tmp"))

    def test_unset_max_workers_omitted(self, tmp_path: Path) -> None:
        """TOML output omits unset optional values."""
        path = save_config(AppConfig(), tmp_path / "config.toml")

        with open(path, "rb") as f:
            data = tomllib.load(f)

        assert data == {"sweep": {"artifact_names": list(DEFAULT_ARTIFACT_NAMES)}}


class TestRequireConfig:
    """Tests for require_config."""

    def test_exits_on_error(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("not toml [")

        with pytest.raises(typer.Exit) as exc_info:
            require_config(path)

        assert exc_info.value.exit_code == 1

    def test_returns_config(self, tmp_path: Path) -> None:
        assert require_config(tmp_path / "absent.toml") == AppConfig()
