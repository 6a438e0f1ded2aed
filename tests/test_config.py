"""
Tests for Config — layered settings (project > user > env > defaults)
"""

import pytest
import yaml

from primer.config import (
    Config,
    ConfigManager,
    DisplayConfig,
    OutputConfig,
    parse_bool,
)


@pytest.fixture
def manager(primer_factory):
    return primer_factory.config_manager


class TestDefaults:

    def test_defaults(self):
        config = Config()
        assert config.display.symbols == "auto"
        assert config.output.clipboard is True
        assert config.output.wait_for_key is True

    def test_round_trip_dict(self):
        config = Config(display=DisplayConfig(symbols="ascii"),
                        output=OutputConfig(clipboard=False, wait_for_key=True))
        assert Config.from_dict(config.to_dict()) == config

    def test_from_dict_accepts_string_booleans(self):
        config = Config.from_dict({"output": {"clipboard": "no", "wait_for_key": "bogus"}})
        assert config.output.clipboard is False
        assert config.output.wait_for_key is True


class TestValidation:

    def test_display_rejects_unknown(self):
        assert "Unknown symbols setting" in DisplayConfig(symbols="emoji").validate()

    def test_display_valid(self):
        assert DisplayConfig(symbols="unicode").validate() is None

    def test_output_requires_bools(self):
        assert OutputConfig(clipboard="yes").validate() is not None
        assert OutputConfig().validate() is None

    @pytest.mark.parametrize("value,expected", [
        ("true", True), ("YES", True), ("1", True), ("on", True),
        ("false", False), ("No", False), ("0", False), ("off", False),
        ("maybe", None),
    ])
    def test_parse_bool(self, value, expected):
        assert parse_bool(value) is expected


class TestLoading:

    def test_no_files_gives_defaults(self, manager):
        assert manager.load() == Config()

    def test_user_file(self, primer_factory, manager):
        primer_factory.write_user_config("output:\n  clipboard: false\n")
        assert manager.load().output.clipboard is False

    def test_project_overrides_user(self, primer_factory, manager):
        primer_factory.write_user_config("display:\n  symbols: ascii\n")
        primer_factory.write_project_config("display:\n  symbols: unicode\n")
        assert manager.load().display.symbols == "unicode"

    def test_sections_merge(self, primer_factory, manager):
        primer_factory.write_user_config("output:\n  clipboard: false\n")
        primer_factory.write_project_config("output:\n  wait_for_key: false\n")
        config = manager.load()
        assert config.output.clipboard is False
        assert config.output.wait_for_key is False

    def test_env_used_when_files_silent(self, manager, monkeypatch):
        monkeypatch.setenv("PRIMER_CLIPBOARD", "false")
        monkeypatch.setenv("PRIMER_SYMBOLS", "ascii")
        config = manager.load()
        assert config.output.clipboard is False
        assert config.display.symbols == "ascii"

    def test_files_beat_env(self, primer_factory, manager, monkeypatch):
        monkeypatch.setenv("PRIMER_WAIT_FOR_KEY", "false")
        primer_factory.write_project_config("output:\n  wait_for_key: true\n")
        assert manager.load().output.wait_for_key is True

    def test_malformed_yaml_ignored(self, primer_factory, manager):
        primer_factory.write_project_config("output: [unclosed\n")
        assert manager.load() == Config()

    def test_non_mapping_yaml_ignored(self, primer_factory, manager):
        primer_factory.write_project_config("- just\n- a list\n")
        assert manager.load() == Config()

    @pytest.mark.parametrize("text", [
        "output: true\n",
        "display: ascii\n",
        "display:\n  - unicode\noutput: [1, 2]\n",
    ])
    def test_wrongly_shaped_sections_ignored(self, primer_factory, manager, text):
        primer_factory.write_project_config(text)
        assert manager.load() == Config()

    def test_unknown_symbols_fall_back(self, primer_factory, manager, monkeypatch):
        primer_factory.write_project_config("display:\n  symbols: emoji\n")
        assert manager.load().display.symbols == "auto"
        monkeypatch.setenv("PRIMER_SYMBOLS", "sparkles")
        fresh = ConfigManager(primer_factory.tmp_path, user_dir=primer_factory.user_dir)
        assert fresh.load().display.symbols == "auto"

    def test_load_is_cached(self, primer_factory, manager):
        first = manager.load()
        primer_factory.write_project_config("display:\n  symbols: ascii\n")
        assert manager.load() is first


class TestSetGet:

    def test_set_project(self, primer_factory, manager):
        assert manager.set("output.clipboard", "false") is None
        assert manager.project_config_path.exists()
        fresh = ConfigManager(primer_factory.tmp_path, user_dir=primer_factory.user_dir)
        assert fresh.load().output.clipboard is False

    def test_set_user(self, primer_factory, manager):
        assert manager.set("display.symbols", "ascii", scope="user") is None
        assert manager.user_config_path.exists()
        assert not manager.project_config_path.exists()

    def test_get(self, manager):
        manager.set("output.wait_for_key", "no")
        assert manager.get("output.wait_for_key") == "false"
        assert manager.get("display.symbols") == "auto"
        assert manager.get("display.nothing") is None
        assert manager.get("flat") is None

    @pytest.mark.parametrize("key,value,fragment", [
        ("clipboard", "false", "Invalid key format"),
        ("llm.provider", "claude", "Unknown section"),
        ("display.color", "red", "Unknown display setting"),
        ("display.symbols", "emoji", "Unknown symbols setting"),
        ("output.pager", "true", "Unknown output setting"),
        ("output.clipboard", "sometimes", "must be true or false"),
    ])
    def test_set_errors(self, manager, key, value, fragment):
        error = manager.set(key, value)
        assert fragment in error
        assert not manager.project_config_path.exists()

    def test_failed_set_leaves_config_unchanged(self, manager):
        manager.set("display.symbols", "emoji")
        assert manager.load().display.symbols == "auto"

    def test_set_writes_only_the_given_key(self, primer_factory, manager, monkeypatch):
        monkeypatch.setenv("PRIMER_CLIPBOARD", "false")
        primer_factory.write_user_config("display:\n  symbols: ascii\n")
        manager.load()
        assert manager.set("output.wait_for_key", "false") is None
        saved = yaml.safe_load(manager.project_config_path.read_text())
        assert saved == {"output": {"wait_for_key": False}}

    def test_set_keeps_existing_file_entries(self, primer_factory, manager):
        primer_factory.write_project_config("display:\n  symbols: unicode\n")
        manager.set("output.clipboard", "no")
        saved = yaml.safe_load(manager.project_config_path.read_text())
        assert saved == {"display": {"symbols": "unicode"}, "output": {"clipboard": False}}

    def test_set_visible_after_cached_load(self, manager):
        manager.load()
        manager.set("display.symbols", "ascii")
        assert manager.load().display.symbols == "ascii"


class TestDisplay:

    def test_lists_settings_and_paths(self, manager):
        text = manager.display()
        assert "Symbols: auto" in text
        assert "Clipboard:" in text
        assert str(manager.project_config_path) in text
