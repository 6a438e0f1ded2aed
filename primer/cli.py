"""
CLI -- Command interface

Builds a prompt for an AI assistant from a base block plus optional
blocks chosen through a few menus. Prints it, copies it if it can.
"""

import argparse
import os
from pathlib import Path

from .config import ConfigManager
from .core.fragments import get_library
from .presentation.symbols import get_symbols
from .commands.compose import ComposeCommand
from .commands.fragments_cmd import FragmentsCommand
from .commands.types_cmd import TypesCommand
from .commands.config_cmd import ConfigCommand
from . import __version__


class PrimerCLI:
    """Command-line interface for the prompt composer."""

    def __init__(self, project_dir: Path):
        self.project_dir = Path(project_dir)
        self.config_manager = ConfigManager(self.project_dir)
        self.config = self.config_manager.load()

        # Initialize symbols based on config
        self.symbols = get_symbols(self.config.display.symbols)

        # Static fragment catalog (sessions derive their own when needed)
        self.library = get_library()

        # Initialize command handlers
        self._compose_cmd = ComposeCommand(self)
        self._fragments_cmd = FragmentsCommand(self)
        self._types_cmd = TypesCommand(self)
        self._config_cmd = ConfigCommand(self)

    def compose(self, **kwargs):
        """Run the interactive composer. Delegates to ComposeCommand."""
        return self._compose_cmd.interactive(**kwargs)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="primer",
        description="Primer -- Compose prompts for AI assistants",
        epilog="Run without a command to start the interactive composer."
    )

    parser.add_argument(
        '--project-dir', '-p',
        default=os.environ.get("PRIMER_PROJECT_PATH", "."),
        help='Directory holding .primer/config.yaml (default: PRIMER_PROJECT_PATH or current)'
    )

    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'primer {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Register all commands from command modules (self-registration pattern)
    from .commands import register_all
    register_all(subparsers)
    return parser


def main(argv=None):
    """
    Main entry point for the primer CLI.

    Uses command registry pattern for modular command handling.
    With no command, starts the interactive composer.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    cli = PrimerCLI(Path(args.project_dir))

    if not args.command:
        cli.compose()
        return 0

    from .commands import dispatch
    try:
        dispatch(args.command, cli, args)
    except KeyError as e:
        print(f"Error: {e}")
        parser.print_help()
    return 0


if __name__ == '__main__':
    main()
