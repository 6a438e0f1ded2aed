"""
BaseCommand — Shared foundation for all CLI commands

Provides access to CLI resources via composition.
Commands receive the CLI instance and access its resources through properties.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..cli import PrimerCLI


class BaseCommand:
    """
    Base class for CLI commands with access to shared resources.

    Commands don't reinitialize resources; they access them via the CLI instance.
    """

    def __init__(self, cli: 'PrimerCLI'):
        """
        Initialize command with CLI instance.

        Args:
            cli: The main PrimerCLI instance holding all resources
        """
        self._cli = cli

    @property
    def project_dir(self):
        """Project root directory (where .primer/ config lives)."""
        return self._cli.project_dir

    @property
    def config(self):
        """Application configuration."""
        return self._cli.config

    @property
    def config_manager(self):
        return self._cli.config_manager

    @property
    def symbols(self):
        """Symbol set for display (Unicode/ASCII)."""
        return self._cli.symbols

    @property
    def library(self):
        """Fragment library."""
        return self._cli.library
