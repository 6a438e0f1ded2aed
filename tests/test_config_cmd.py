"""
Tests for ConfigCommand — configuration display and updates
"""

import pytest
from unittest.mock import Mock
from pathlib import Path

from primer.commands.config_cmd import ConfigCommand, handle


@pytest.fixture
def config_command(primer_factory):
    """ConfigCommand backed by a real, isolated ConfigManager."""
    return primer_factory.create_command(ConfigCommand)


@pytest.fixture
def mocked_config_command(primer_factory):
    """ConfigCommand with a mocked ConfigManager."""
    cli = primer_factory.create_cli_mock()
    cli.config_manager = Mock()
    cli.config_manager.display.return_value = "Config display output"
    cli.config_manager.set.return_value = None
    cli.config_manager.project_config_path = Path("/fake/project/.primer/config.yaml")
    cli.config_manager.user_config_path = Path("/fake/user/.primer/config.yaml")
    return ConfigCommand(cli)


class TestShowConfig:

    def test_shows_display_output(self, mocked_config_command, capsys):
        mocked_config_command.show_config()
        out = capsys.readouterr().out
        assert "PRIMER CONFIG" in out
        assert "Config display output" in out


class TestSetConfig:

    def test_project_scope(self, mocked_config_command, capsys):
        assert mocked_config_command.set_config("output.clipboard", "false") is True
        mocked_config_command._cli.config_manager.set.assert_called_once_with(
            "output.clipboard", "false", "project")
        out = capsys.readouterr().out
        assert "Set output.clipboard = false" in out
        assert "/fake/project/.primer/config.yaml" in out

    def test_user_scope(self, mocked_config_command, capsys):
        mocked_config_command.set_config("display.symbols", "ascii", scope="user")
        assert "/fake/user/.primer/config.yaml" in capsys.readouterr().out

    def test_error_reported(self, mocked_config_command, capsys):
        mocked_config_command._cli.config_manager.set.return_value = "Unknown section: x"
        assert mocked_config_command.set_config("x.y", "z") is False
        out = capsys.readouterr().out
        assert "ERROR" in out
        assert "Unknown section: x" in out

    def test_real_manager_persists(self, config_command, primer_factory):
        assert config_command.set_config("output.wait_for_key", "false") is True
        saved = (primer_factory.tmp_path / ".primer" / "config.yaml").read_text()
        assert "wait_for_key: false" in saved


class TestHandle:

    def test_set_dispatch(self):
        cli = Mock()
        handle(cli, Mock(set=["display.symbols", "ascii"], user=True))
        cli._config_cmd.set_config.assert_called_once_with("display.symbols", "ascii", scope="user")

    def test_show_dispatch(self):
        cli = Mock()
        handle(cli, Mock(set=None, user=False))
        cli._config_cmd.show_config.assert_called_once_with()
