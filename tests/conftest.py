"""
Shared pytest fixtures for the primer test suite.

Usage in tests:
    def test_something(primer_factory):
        cmd = primer_factory.create_command(ComposeCommand)

    def test_with_cli(mock_cli):
        assert mock_cli.config.output.clipboard is False
"""

import pytest
from tests.factories import PrimerTestFactory


@pytest.fixture
def primer_factory(tmp_path):
    """Create an isolated PrimerTestFactory."""
    return PrimerTestFactory(tmp_path)


@pytest.fixture
def mock_cli(primer_factory):
    """Mock CLI with real config, symbols and library."""
    return primer_factory.create_cli_mock()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep user environment overrides out of tests."""
    for name in ("PRIMER_SYMBOLS", "PRIMER_CLIPBOARD", "PRIMER_WAIT_FOR_KEY",
                 "PRIMER_ASCII_ONLY", "PRIMER_UNICODE", "PRIMER_PROJECT_PATH"):
        monkeypatch.delenv(name, raising=False)
