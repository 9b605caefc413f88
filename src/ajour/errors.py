"""Exceptions raised by the configuration layer."""

from pathlib import Path
from typing import Any, Optional

from .logging_config import get_logger

logger = get_logger("errors")


class ConfigError(Exception):
    """Base class for configuration errors, carrying a context dict."""

    def __init__(self, message: str, *, context: Optional[dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)
        logger.debug("%s | context=%s", message, self.context)


class SchemaError(ConfigError):
    """A column layout has an unknown version tag or misses required fields."""

    def __init__(self, reason: str, *, tag: Optional[str] = None):
        self.reason = reason
        self.tag = tag
        prefix = f"column_config {tag}" if tag else "column_config"
        super().__init__(f"{prefix}: {reason}", context={"tag": tag, "reason": reason})


class ConfigParseError(ConfigError):
    """The persisted document is not valid YAML or has a value of the wrong type."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid value for '{key}': {reason}", context={"key": key, "reason": reason})


class FilesystemError(ConfigError):
    """Reading or writing a configuration file failed at the OS level."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(
            f"I/O error with configuration file '{path}': {reason}",
            context={"path": str(path), "reason": reason},
        )
