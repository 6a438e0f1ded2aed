"""
Configuration — Centralized settings management

Config hierarchy (highest to lowest priority):
  1. Project config (.primer/config.yaml)
  2. User config (~/.primer/config.yaml)
  3. Environment variables
  4. Defaults

Composed prompts are never written here; only preferences are.
"""

import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from .presentation.symbols import get_symbols


TRUE_VALUES = ('true', '1', 'yes', 'on')
FALSE_VALUES = ('false', '0', 'no', 'off')


def parse_bool(value: str) -> Optional[bool]:
    """Parse a boolean setting. Returns None when unrecognized."""
    value = str(value).strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return None


@dataclass
class DisplayConfig:
    """Display preferences."""
    symbols: str = "auto"  # "unicode" | "ascii" | "auto"

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        valid_symbols = ("unicode", "ascii", "auto")
        if self.symbols not in valid_symbols:
            return f"Unknown symbols setting '{self.symbols}'. Valid: {', '.join(valid_symbols)}"
        return None


@dataclass
class OutputConfig:
    """What happens with the composed prompt."""
    clipboard: bool = True     # Best-effort copy after printing
    wait_for_key: bool = True  # Pause before exit on interactive terminals

    def validate(self) -> Optional[str]:
        for name in ("clipboard", "wait_for_key"):
            if not isinstance(getattr(self, name), bool):
                return f"Setting output.{name} must be true or false"
        return None


@dataclass
class Config:
    """Application configuration."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "display": {
                "symbols": self.display.symbols,
            },
            "output": {
                "clipboard": self.output.clipboard,
                "wait_for_key": self.output.wait_for_key,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary. Wrongly shaped or invalid values fall back to defaults."""
        display_data = _section(data, "display")
        output_data = _section(data, "output")

        display = DisplayConfig(symbols=display_data.get("symbols", "auto"))
        if display.validate():
            display = DisplayConfig()

        return cls(
            display=display,
            output=OutputConfig(
                clipboard=_coerce_bool(output_data.get("clipboard"), True),
                wait_for_key=_coerce_bool(output_data.get("wait_for_key"), True),
            ),
        )


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name)
    return value if isinstance(value, dict) else {}


def _coerce_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    parsed = parse_bool(value)
    return default if parsed is None else parsed


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Project config (.primer/config.yaml)
      2. User config (~/.primer/config.yaml)
      3. Environment overrides
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".primer"
    USER_CONFIG_FILE = "config.yaml"
    PROJECT_CONFIG_DIR = ".primer"
    PROJECT_CONFIG_FILE = "config.yaml"

    ENV_OVERRIDES = {
        "PRIMER_SYMBOLS": ("display", "symbols"),
        "PRIMER_CLIPBOARD": ("output", "clipboard"),
        "PRIMER_WAIT_FOR_KEY": ("output", "wait_for_key"),
    }

    def __init__(self, project_dir: Optional[Path] = None, user_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self.user_dir = Path(user_dir) if user_dir else self.USER_CONFIG_DIR
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_DIR / self.PROJECT_CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.user_dir / self.USER_CONFIG_FILE

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        # Environment sits below both files
        for env_name, (section, setting) in self.ENV_OVERRIDES.items():
            if os.environ.get(env_name):
                config_data.setdefault(section, {})[setting] = os.environ[env_name]

        config_data = self._merge(config_data, self._read_yaml(self.user_config_path))
        config_data = self._merge(config_data, self._read_yaml(self.project_config_path))

        self._config = Config.from_dict(config_data)
        return self._config

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            return {}  # Ignore malformed config
        return data if isinstance(data, dict) else {}

    def _write_setting(self, path: Path, section: str, setting: str, value: Any):
        """Write one setting into a config file, keeping the rest of that file."""
        data = self._read_yaml(path)
        if not isinstance(data.get(section), dict):
            data[section] = {}
        data[section][setting] = value
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False)
        self._config = None  # Reload with the new layer on next access

    def set(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """
        Set a configuration value.

        Only the given key is written, into the file for the chosen scope.
        Values from other layers stay where they came from.

        Args:
            key: Dot-separated key (e.g., "output.clipboard")
            value: Value to set
            scope: "project" or "user"

        Returns:
            Error message or None if successful
        """
        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'display.symbols')"

        section, setting = parts

        if section == "display":
            if setting != "symbols":
                return f"Unknown display setting: {setting}. Valid: symbols"
            error = DisplayConfig(symbols=value).validate()
            if error:
                return error
            stored: Any = value

        elif section == "output":
            if setting not in ("clipboard", "wait_for_key"):
                return f"Unknown output setting: {setting}. Valid: clipboard, wait_for_key"
            stored = parse_bool(value)
            if stored is None:
                return f"Setting output.{setting} must be true or false, got '{value}'"

        else:
            return f"Unknown section: {section}. Valid: display, output"

        path = self.user_config_path if scope == "user" else self.project_config_path
        self._write_setting(path, section, setting, stored)
        return None

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value as display text."""
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return None

        section, setting = parts
        if section == "display" and setting == "symbols":
            return config.display.symbols
        if section == "output" and setting in ("clipboard", "wait_for_key"):
            return str(getattr(config.output, setting)).lower()
        return None

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()
        symbols = get_symbols(config.display.symbols)

        def flag(enabled: bool) -> str:
            return f"{symbols.check_pass} on" if enabled else "off"

        lines = [
            "Display:",
            f"  Symbols: {config.display.symbols}",
            "",
            "Output:",
            f"  Clipboard: {flag(config.output.clipboard)}",
            f"  Wait for key: {flag(config.output.wait_for_key)}",
            "",
            "Config files:",
            f"  User: {self.user_config_path}",
            f"  Project: {self.project_config_path}",
        ]
        return "\n".join(lines)


def get_config(project_dir: Optional[Path] = None) -> Config:
    """Load configuration for a project."""
    return ConfigManager(project_dir).load()
