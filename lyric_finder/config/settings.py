"""
Configuration management for Lyric Finder

This module handles loading, validation, and management of application settings
from multiple sources including YAML files and environment variables.

The configuration is organized into logical sections using dataclasses:
- Catalog search settings (endpoint, over-fetch limit)
- Lyrics provider settings (endpoint)
- Discovery tuning (sampling budget, long-line preference)
- Network, share link, quote card and logging options

Environment variables take precedence over file-based values so that endpoints
and log levels can be switched per shell without editing a config file.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, asdict
from dotenv import load_dotenv

from ..exceptions import ConfigError

# Load environment variables from .env file if present
load_dotenv()


@dataclass
class CatalogConfig:
    """
    Song catalog search configuration

    The catalog is queried once per discovery run and deliberately over-fetched
    so that the sampling phase has enough titles to choose from.
    """
    base_url: str = "https://itunes.apple.com/search"
    entity: str = "song"
    limit: int = 60


@dataclass
class LyricsConfig:
    """Lyrics provider configuration"""
    base_url: str = "https://api.lyrics.ovh/v1"


@dataclass
class DiscoveryConfig:
    """
    Discovery algorithm tuning

    sample_attempts bounds the random-sampling phase; the effective budget is
    min(sample_attempts, number of catalog titles).
    """
    sample_attempts: int = 20
    prefer_long: bool = False


@dataclass
class NetworkConfig:
    """HTTP settings shared by the catalog and lyrics clients"""
    user_agent: str = "Lyric-Finder/1.0"
    request_timeout: int = 15


@dataclass
class ShareConfig:
    """Share link settings. An empty base_url yields a relative query string."""
    base_url: str = ""


@dataclass
class CardConfig:
    """
    Quote card export settings

    width is the logical card width in pixels; the rendered PNG is width * scale
    pixels wide.
    """
    theme: str = "light"  # light, dark
    width: int = 1080
    scale: int = 2
    output_directory: str = "~/Pictures/Lyric Cards"


@dataclass
class LoggingConfig:
    """
    Logging configuration and output settings

    Controls log levels, optional rotating file output and console formatting.
    """
    level: str = "INFO"
    file: str = ""
    max_size: str = "10MB"
    backup_count: int = 3
    console_output: bool = True
    colored_output: bool = True


class Settings:
    """
    Main settings class that manages all configuration

    Loads settings from a YAML file (first match in the search path), then
    applies environment variable overrides. Unknown sections and keys in the
    file are ignored.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize settings from config file or environment variables

        Args:
            config_path: Path to custom config file, if None uses default locations
        """
        self.config_path = config_path
        self.config_dir = Path.home() / ".lyric-finder"

        self.reset_defaults()
        self._load_config()
        self._load_environment_variables()

    def reset_defaults(self) -> None:
        """Replace every section with its default values"""
        self.catalog = CatalogConfig()
        self.lyrics = LyricsConfig()
        self.discovery = DiscoveryConfig()
        self.network = NetworkConfig()
        self.share = ShareConfig()
        self.card = CardConfig()
        self.logging = LoggingConfig()

    def _sections(self) -> Dict[str, Any]:
        return {
            'catalog': self.catalog,
            'lyrics': self.lyrics,
            'discovery': self.discovery,
            'network': self.network,
            'share': self.share,
            'card': self.card,
            'logging': self.logging,
        }

    def _load_config(self) -> None:
        """
        Load configuration from YAML file

        Searches for configuration files in multiple locations in order of
        precedence. The first file found will be used.
        """
        config_paths = [
            self.config_path,
            self.config_dir / "config.yaml",
            Path("config/config.yaml"),
            Path("config.yaml")
        ]

        config_data = {}
        for path in config_paths:
            if path and Path(path).exists():
                try:
                    with open(path, 'r', encoding='utf-8') as f:
                        config_data = yaml.safe_load(f) or {}
                    self.config_path = str(path)
                    break
                except (OSError, yaml.YAMLError) as e:
                    print(f"Warning: Failed to load config from {path}: {e}")

        self._apply_config(config_data)

    def _apply_config(self, config_data: Dict[str, Any]) -> None:
        """
        Apply configuration data to dataclass instances

        Only attributes that exist on the target dataclass are updated.

        Args:
            config_data: Dictionary containing configuration sections
        """
        if not isinstance(config_data, dict):
            return

        config_mapping = self._sections()
        for section_name, section_data in config_data.items():
            if section_name in config_mapping and isinstance(section_data, dict):
                config_obj = config_mapping[section_name]
                for key, value in section_data.items():
                    if hasattr(config_obj, key):
                        setattr(config_obj, key, value)

    def _load_environment_variables(self) -> None:
        """Apply environment variable overrides"""
        env_mappings = {
            'LYRIC_FINDER_LOG_LEVEL': lambda v: setattr(self.logging, 'level', v),
            'LYRIC_FINDER_CATALOG_URL': lambda v: setattr(self.catalog, 'base_url', v),
            'LYRIC_FINDER_LYRICS_URL': lambda v: setattr(self.lyrics, 'base_url', v),
            'LYRIC_FINDER_TIMEOUT': lambda v: setattr(self.network, 'request_timeout', int(v)),
            'LYRIC_FINDER_CARD_DIR': lambda v: setattr(self.card, 'output_directory', v),
        }

        for env_var, setter in env_mappings.items():
            value = os.getenv(env_var)
            if value:
                try:
                    setter(value)
                except ValueError:
                    print(f"Warning: Ignoring invalid value for {env_var}: {value!r}")

    def get_config_directory(self) -> Path:
        """Get the expanded config directory path"""
        return Path(self.config_dir).expanduser()

    def get_card_directory(self) -> Path:
        """Get the expanded quote card output directory"""
        return Path(self.card.output_directory).expanduser()

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Serialize every section to plain dictionaries"""
        return {name: asdict(section) for name, section in self._sections().items()}

    def save_config(self, path: Optional[str] = None) -> Path:
        """
        Save current configuration to file

        Args:
            path: Custom path to save config, defaults to user config directory

        Returns:
            Path the configuration was written to

        Raises:
            ConfigError: If the configuration cannot be saved
        """
        if not path:
            target = self.get_config_directory() / "config.yaml"
        else:
            target = Path(path)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, 'w', encoding='utf-8') as f:
                yaml.dump(self.to_dict(), f, default_flow_style=False, indent=2)
        except OSError as e:
            raise ConfigError(
                f"Failed to save config to {target}: {e}",
                details={'file_path': str(target), 'original_error': str(e)}
            )
        return target

    def validate(self, strict: bool = False) -> bool:
        """
        Validate current configuration

        Args:
            strict: Raise ConfigError instead of returning False

        Returns:
            True if configuration is valid, False otherwise
        """
        # Imported here, the logger module depends on this one
        from ..utils.logger import parse_size

        errors = []
        limit = self.catalog.limit

        if not isinstance(limit, int) or isinstance(limit, bool) or limit < 1:
            errors.append(f"Invalid catalog limit: {self.catalog.limit}")

        if not isinstance(self.discovery.sample_attempts, int) or self.discovery.sample_attempts < 0:
            errors.append(f"Invalid sample_attempts: {self.discovery.sample_attempts}")

        if not isinstance(self.network.request_timeout, (int, float)) or self.network.request_timeout <= 0:
            errors.append(f"Invalid request timeout: {self.network.request_timeout}")

        if self.card.theme not in ['light', 'dark']:
            errors.append(f"Invalid card theme: {self.card.theme}")

        if not isinstance(self.card.width, int) or self.card.width < 1:
            errors.append(f"Invalid card width: {self.card.width}")

        if not isinstance(self.card.scale, int) or self.card.scale < 1:
            errors.append(f"Invalid card scale: {self.card.scale}")

        levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if not isinstance(self.logging.level, str) or self.logging.level.upper() not in levels:
            errors.append(f"Invalid logging level: {self.logging.level}")

        try:
            parse_size(str(self.logging.max_size))
        except ValueError:
            errors.append(f"Invalid log max_size: {self.logging.max_size}")

        if not isinstance(self.logging.backup_count, int) or self.logging.backup_count < 0:
            errors.append(f"Invalid log backup_count: {self.logging.backup_count}")

        if errors:
            if strict:
                raise ConfigError(
                    "Configuration validation failed: " + "; ".join(errors),
                    details={'errors': errors, 'file_path': self.config_path}
                )
            print("Configuration validation errors:")
            for error in errors:
                print(f"  - {error}")
            return False

        return True

    def __str__(self) -> str:
        sections = [
            f"Catalog: {self.catalog.base_url} (limit {self.catalog.limit})",
            f"Lyrics: {self.lyrics.base_url}",
            f"Sampling: {self.discovery.sample_attempts}",
            f"Theme: {self.card.theme}",
        ]
        return f"Settings({', '.join(sections)})"


# Global settings instance for singleton pattern
settings = Settings()


def get_settings() -> Settings:
    """
    Get the global settings instance

    Returns:
        The global Settings instance
    """
    return settings


def reload_settings(config_path: Optional[str] = None) -> Settings:
    """
    Reload settings from configuration files

    Creates a new settings instance with updated configuration from files
    and environment variables.

    Args:
        config_path: Optional path to specific config file

    Returns:
        New Settings instance with reloaded configuration
    """
    global settings
    settings = Settings(config_path)
    return settings
