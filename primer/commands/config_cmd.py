"""
ConfigCommand — Configuration display and updates
"""

from ..commands.base import BaseCommand
from ..presentation.template import OutputTemplate


class ConfigCommand(BaseCommand):
    """Command for configuration management."""

    def show_config(self):
        """Show current configuration."""
        template = OutputTemplate(symbols=self.symbols)
        template.header("PRIMER CONFIG", "Current Configuration")
        template.section("SETTINGS", self.config_manager.display())
        template.footer()
        print(template.render())

    def set_config(self, key: str, value: str, scope: str = "project") -> bool:
        """Set a configuration value. Returns True on success."""
        symbols = self.symbols
        error = self.config_manager.set(key, value, scope)

        template = OutputTemplate(symbols=symbols)
        if error:
            template.header("PRIMER CONFIG", "Error")
            template.section("ERROR", error)
            template.footer()
        else:
            template.header("PRIMER CONFIG", "Configuration Updated")
            template.section("SETTING", f"Set {key} = {value}")
            if scope == "user":
                template.section("SAVED TO", str(self.config_manager.user_config_path))
            else:
                template.section("SAVED TO", str(self.config_manager.project_config_path))
            template.footer(f"{symbols.check_pass} Configuration saved")

        print(template.render())
        return error is None


def register_parser(subparsers):
    """Register config command parser."""
    p = subparsers.add_parser('config', help='Show or change configuration')
    p.add_argument('--set', nargs=2, metavar=('KEY', 'VALUE'),
                   help='Set a value (e.g. output.clipboard false)')
    p.add_argument('--user', action='store_true',
                   help='With --set: save to user config instead of project')
    return p


def handle(cli, args):
    """Handle config command dispatch."""
    if args.set:
        key, value = args.set
        cli._config_cmd.set_config(key, value, scope="user" if args.user else "project")
    else:
        cli._config_cmd.show_config()
