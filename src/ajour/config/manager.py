"""Configuration management - load/save ajour.yml"""

from pathlib import Path
from typing import Optional

import yaml

from ..errors import ConfigParseError, FilesystemError, SchemaError
from ..logging_config import get_logger
from .paths import AppPaths
from .schema import Config

logger = get_logger("config_manager")


class ConfigurationManager:
    """Manages persistence of the configuration.

    Loads ajour.yml, falling back to (and writing) a default configuration
    when the file is missing or cannot be parsed.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or AppPaths.config_file()
        self.config: Optional[Config] = None

    def load(self) -> Config:
        """Load configuration from the YAML file.

        Returns:
            Config with loaded settings

        Raises:
            FilesystemError: If the file cannot be read
            ConfigParseError: If the file is not UTF-8, the YAML is malformed or a
                value has the wrong type
            SchemaError: If column_config is not a valid layout
        """
        logger.debug(f"Loading configuration from {self.config_path}")
        try:
            text = self.config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise FilesystemError(self.config_path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise ConfigParseError("<document>", f"not valid UTF-8: {e}") from e

        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigParseError("<document>", f"malformed YAML: {e}") from e

        self.config = Config.from_dict(document)
        logger.debug(f"Configuration loaded: {len(self.config.wow.directories)} flavor directories")
        return self.config

    def save(self) -> None:
        """Save the current configuration to the YAML file.

        Creates the configuration directory if it doesn't exist.

        Raises:
            FilesystemError: If the directory or file cannot be written
        """
        if self.config is None:
            raise ValueError("No configuration to save")

        logger.debug(f"Saving configuration to {self.config_path}")
        text = yaml.safe_dump(
            self.config.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise FilesystemError(self.config_path, e.strerror or str(e)) from e

    def create_default(self) -> Config:
        """Create a default configuration.

        Returns:
            New Config with default values
        """
        self.config = Config()
        return self.config

    def load_or_default(self) -> Config:
        """Load the configuration, or create and save a default one.

        A missing, unreadable or unparsable file is replaced by the default
        configuration. The reason is logged.

        Raises:
            FilesystemError: If the default configuration cannot be saved
        """
        try:
            return self.load()
        except (FilesystemError, ConfigParseError, SchemaError) as e:
            if isinstance(e.__cause__, FileNotFoundError):
                logger.info(f"No configuration at {self.config_path}, creating default")
            else:
                logger.warning(f"Could not load {self.config_path}, using default configuration: {e}")

        self.create_default()
        self.save()
        return self.config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Return the configuration, loading it or creating the default.

    Args:
        config_path: Location of ajour.yml, defaults to the config directory

    Raises:
        FilesystemError: If no configuration could be read or written
    """
    logger.debug("loading config")
    return ConfigurationManager(config_path).load_or_default()
