"""
Configuration loader with validation.

Builds ImporterConfig from environment variables and an optional .env file.
"""
import logging
from dotenv import load_dotenv
from .config import ImporterConfig
from .config_validator import get_optional_env, parse_ceiling, parse_threshold, validate_catalog_dir
from .exceptions import ConfigurationError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config_from_env(load_env_file: bool = True) -> ImporterConfig:
    """
    Load configuration from environment variables with validation.
    
    Usage:
        config = load_config_from_env()
        app = CreatureImportApp(config)
    
    :param load_env_file: Read a .env file first (local development)
    :return: Validated ImporterConfig instance
    :raises: ConfigurationError if values are invalid
    """
    if load_env_file:
        load_dotenv()
    
    config = ImporterConfig(
        catalog_path=get_optional_env("CREATURE_CATALOG_PATH"),
        catalog_document_name=get_optional_env("CATALOG_DOCUMENT_NAME", "Item"),
        list_threshold=parse_threshold(
            get_optional_env("FUZZY_LIST_THRESHOLD", "0.3"), "FUZZY_LIST_THRESHOLD"
        ),
        best_guess_threshold=parse_threshold(
            get_optional_env("FUZZY_GUESS_THRESHOLD", "0.5"), "FUZZY_GUESS_THRESHOLD"
        ),
        default_mastery_ceiling=parse_ceiling(
            get_optional_env("DEFAULT_MASTERY_CEILING", "4"), "DEFAULT_MASTERY_CEILING"
        ),
        default_spell_ceiling=parse_ceiling(
            get_optional_env("DEFAULT_SPELL_CEILING", "5"), "DEFAULT_SPELL_CEILING"
        ),
        log_level=get_optional_env("LOG_LEVEL", "INFO").upper(),
    )
    
    if config.log_level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {config.log_level!r}"
        )
    
    if config.catalog_path:
        config.catalog_path = validate_catalog_dir(config.catalog_path, "CREATURE_CATALOG_PATH")
    
    return config


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging in the format used across the service."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )
