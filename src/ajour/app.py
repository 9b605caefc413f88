"""Application startup: logging, configuration and directory resolution"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config.enums import Flavor
from .config.manager import ConfigurationManager
from .config.paths import AppPaths
from .config.schema import Config
from .errors import FilesystemError
from .logging_config import get_logger, setup_logging
from . import __version__

logger = get_logger("app")


@dataclass
class FlavorDirectories:
    """Resolved directories of one configured flavor"""
    flavor: Flavor
    addon_directory: Optional[Path]
    wtf_directory: Optional[Path]
    download_directory: Optional[Path]


class AjourApp:
    """Application orchestrator.

    Owns the single Config instance. It is loaded once in ``start`` and
    handed to whatever needs it.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_manager = ConfigurationManager(config_path)
        self.config: Optional[Config] = None

    def start(self) -> Config:
        """Load the configuration and run pending migrations.

        Raises:
            FilesystemError: If no configuration could be read or written
        """
        self.config = self.config_manager.load_or_default()

        if self.config.wow.directory is not None:
            self.config.migrate_legacy_wow_directory()
            self.config_manager.save()

        return self.config

    def resolve_directories(self) -> list[FlavorDirectories]:
        """Resolve the directories of every configured flavor."""
        if self.config is None:
            raise ValueError("Configuration not loaded")

        resolved = []
        for flavor in self.config.get_configured_flavors():
            entry = FlavorDirectories(
                flavor=flavor,
                addon_directory=self.config.get_addon_directory_for_flavor(flavor),
                wtf_directory=self.config.get_wtf_directory_for_flavor(flavor),
                download_directory=self.config.get_download_directory_for_flavor(flavor),
            )
            logger.info(f"{flavor.label}: addons={entry.addon_directory} wtf={entry.wtf_directory}")
            resolved.append(entry)
        return resolved


def _data_dir_argument(argv: list[str]) -> Optional[str]:
    if "--data" in argv:
        index = argv.index("--data")
        if index + 1 < len(argv):
            return argv[index + 1]
    return None


def main(argv: Optional[list[str]] = None) -> int:
    """Application entry point."""
    if argv is None:
        argv = sys.argv[1:]

    data_dir = _data_dir_argument(argv)
    if data_dir:
        os.environ[AppPaths.DATA_DIR_ENV] = data_dir

    # Initialize logging first
    logger = setup_logging(debug="--debug" in argv)
    logger.info(f"Starting Ajour v{__version__}")

    try:
        app = AjourApp()
        app.start()
        app.resolve_directories()
    except FilesystemError:
        logger.exception("Could not load or create the configuration")
        return 1
    finally:
        logger.info("Ajour shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
