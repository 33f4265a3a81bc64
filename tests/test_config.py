"""
Tests for configuration loading and validation.
"""
import logging

import pytest

from creature_importer.config import ImporterConfig
from creature_importer.config_loader import configure_logging, load_config_from_env
from creature_importer.config_validator import get_optional_env, parse_ceiling, parse_threshold
from creature_importer.exceptions import ConfigurationError

ENV_KEYS = [
    "CREATURE_CATALOG_PATH",
    "FUZZY_LIST_THRESHOLD",
    "FUZZY_GUESS_THRESHOLD",
    "DEFAULT_MASTERY_CEILING",
    "DEFAULT_SPELL_CEILING",
    "CATALOG_DOCUMENT_NAME",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env."""

    def test_defaults(self):
        """Test that defaults apply without environment variables."""
        config = load_config_from_env(load_env_file=False)

        assert config.catalog_path is None
        assert config.list_threshold == 0.3
        assert config.best_guess_threshold == 0.5
        assert config.default_mastery_ceiling == 4
        assert config.default_spell_ceiling == 5
        assert config.catalog_document_name == "Item"
        assert config.log_level == "INFO"

    def test_values_from_environment(self, monkeypatch, tmp_path):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("CREATURE_CATALOG_PATH", str(tmp_path))
        monkeypatch.setenv("FUZZY_LIST_THRESHOLD", "0.4")
        monkeypatch.setenv("DEFAULT_SPELL_CEILING", "3")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = load_config_from_env(load_env_file=False)

        assert config.catalog_path == str(tmp_path)
        assert config.list_threshold == 0.4
        assert config.default_spell_ceiling == 3
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("key,value", [
        ("FUZZY_LIST_THRESHOLD", "high"),
        ("FUZZY_GUESS_THRESHOLD", "1.5"),
        ("DEFAULT_MASTERY_CEILING", "-1"),
        ("DEFAULT_SPELL_CEILING", "two"),
        ("LOG_LEVEL", "LOUD"),
    ])
    def test_invalid_values_raise(self, monkeypatch, key, value):
        """Test that invalid settings fail with ConfigurationError."""
        monkeypatch.setenv(key, value)

        with pytest.raises(ConfigurationError):
            load_config_from_env(load_env_file=False)

    def test_missing_catalog_path_raises(self, monkeypatch, tmp_path):
        """Test that a catalog path must exist."""
        monkeypatch.setenv("CREATURE_CATALOG_PATH", str(tmp_path / "missing"))

        with pytest.raises(ConfigurationError):
            load_config_from_env(load_env_file=False)


class TestValidators:
    """Tests for config_validator helpers."""

    def test_placeholder_falls_back_to_default(self, monkeypatch):
        """Test that placeholder values warn and use the default."""
        monkeypatch.setenv("CREATURE_CATALOG_PATH", "your_catalog_here")

        with pytest.warns(UserWarning):
            assert get_optional_env("CREATURE_CATALOG_PATH", "fallback") == "fallback"

    def test_threshold_bounds(self):
        """Test threshold parsing."""
        assert parse_threshold("0", "X") == 0.0
        assert parse_threshold("1", "X") == 1.0
        with pytest.raises(ConfigurationError):
            parse_threshold("-0.1", "X")

    def test_ceiling_parsing(self):
        """Test ceiling parsing."""
        assert parse_ceiling("0", "X") == 0
        with pytest.raises(ConfigurationError):
            parse_ceiling("2.5", "X")


class TestImporterConfig:
    """Tests for ImporterConfig helpers."""

    @pytest.mark.parametrize("school,expected", [
        ("Feuermagie", "firemagic"),
        ("stärkungsmagie", "enhancemagic"),
        ("firemagic", "firemagic"),
        ("Kochmagie", None),
        (None, None),
    ])
    def test_map_school(self, school, expected):
        """Test school name mapping."""
        assert ImporterConfig().map_school(school) == expected

    def test_skill_label_falls_back_to_key(self):
        """Test that unknown skills are labelled by their key."""
        config = ImporterConfig()
        assert config.skill_label("melee") == "Melee"
        assert config.skill_label("juggling") == "juggling"
        assert config.skill_label(None) == ""

    def test_skill_groups_are_disjoint(self):
        """Test that no skill is in two groups."""
        skills = ImporterConfig().skill_groups.all_skills()
        assert len(skills) == len(set(skills))


def test_configure_logging_sets_level():
    """Test that configure_logging configures the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    for handler in handlers:
        root.removeHandler(handler)
    try:
        configure_logging("WARNING")
        assert root.level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
