"""Locations of the configuration directory and the files stored in it"""

import os
import sys
from pathlib import Path


class AppPaths:
    """Well-known locations for Ajour's own files.

    The configuration directory can be overridden with the AJOUR_DATA_DIR
    environment variable, which is what the ``--data`` flag sets.
    """

    APP_DIR_NAME = "ajour"
    DATA_DIR_ENV = "AJOUR_DATA_DIR"

    CONFIG_FILE_NAME = "ajour.yml"
    LOG_FILE_NAME = "ajour.log"

    @classmethod
    def config_dir(cls) -> Path:
        """Return the directory holding ajour.yml and the log file.

        Priority:
          1) AJOUR_DATA_DIR
          2) Windows: %APPDATA%/ajour
          3) Others: $XDG_CONFIG_HOME/ajour, falling back to ~/.config/ajour
        """
        override = os.environ.get(cls.DATA_DIR_ENV)
        if override:
            return cls.expand_path(override)

        if sys.platform == "win32":
            base = os.environ.get("APPDATA") or str(Path.home())
        else:
            base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
        return Path(base) / cls.APP_DIR_NAME

    @classmethod
    def config_file(cls) -> Path:
        return cls.config_dir() / cls.CONFIG_FILE_NAME

    @classmethod
    def log_file(cls) -> Path:
        return cls.config_dir() / cls.LOG_FILE_NAME

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand environment variables and ``~`` in a path string.

        Args:
            path_str: Path string potentially containing environment variables

        Returns:
            Path object with expanded variables
        """
        return Path(os.path.expandvars(path_str)).expanduser()

    @classmethod
    def ensure_config_dir(cls) -> Path:
        """Ensure the configuration directory exists.

        Returns:
            Path to the configuration directory
        """
        config_dir = cls.config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir
