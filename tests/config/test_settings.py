"""Tests for ChainSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from chainctl.config.settings import ChainSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = ChainSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.node.chain_name is None
        assert settings.node.data_dir is None
        assert settings.binaries.location is None
        assert settings.binaries.daemon == "multichaind"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ChainSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "chainctl.toml"
        toml.write_text(
            '[node]\nchain_name = "research"\ndata_dir = "/var/mc"\n'
            '[binaries]\nlocation = "/opt/multichain"\n'
        )
        settings = ChainSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path == toml
        assert settings.node.chain_name == "research"
        assert settings.node.data_dir == Path("/var/mc")
        assert settings.binaries.location == Path("/opt/multichain")
        assert settings.binaries.cli == "multichain-cli"  # default preserved

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "chainctl.toml").write_text("")
        settings = ChainSettings.from_cli(start_dir=tmp_path)
        assert settings.node.chain_name is None

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[node]\nchain_name = "custom"\n')
        settings = ChainSettings.from_cli(config_path=str(custom))
        assert settings.node.chain_name == "custom"
        assert settings.config_path == custom

    def test_explicit_missing_path_ignored(self, tmp_path: Path) -> None:
        settings = ChainSettings.from_cli(config_path=str(tmp_path / "absent.toml"))
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "chainctl.toml").write_text("[node\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ChainSettings.from_cli(start_dir=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = ChainSettings.from_cli(
            start_dir=tmp_path, json_output=True, quiet=True, verbose=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "chainctl.toml").write_text("verbose = true\n")
        settings = ChainSettings.from_cli(start_dir=tmp_path, verbose=False)
        assert settings.verbose is False

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHAINCTL_QUIET", "true")
        settings = ChainSettings.from_cli(start_dir=tmp_path)
        assert settings.quiet is True

    def test_nested_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "chainctl.toml").write_text('[node]\nchain_name = "toml"\n')
        monkeypatch.setenv("CHAINCTL_NODE__CHAIN_NAME", "env")
        settings = ChainSettings.from_cli(start_dir=tmp_path)
        assert settings.node.chain_name == "env"
