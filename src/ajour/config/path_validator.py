"""Validation of flavor directories before they are stored in the configuration.

A flavor directory must have a parent, because the WoW root directory is
derived from it. Existence is reported but not required: the directory may
live on a drive that is not mounted right now.
"""

from pathlib import Path

from ..logging_config import get_logger
from .enums import Flavor

logger = get_logger("path_validator")


def has_parent(path: Path) -> bool:
    """Check if a path has a parent component (is not a filesystem root).

    Args:
        path: The path to check

    Returns:
        True if ``path.parent`` is a different path
    """
    return bool(path.name) and path.parent != path


def validate_flavor_directory(flavor: Flavor, path: Path) -> tuple[bool, str]:
    """Validate a flavor directory.

    Args:
        flavor: The flavor the directory is meant for
        path: The flavor folder, e.g. ``.../World of Warcraft/_retail_``

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not str(path).strip():
        return False, "Directory is empty"

    if not has_parent(path):
        return False, f"{path} is a filesystem root, expected the {flavor.folder_name} folder"

    if path.exists() and not path.is_dir():
        return False, f"{path} is not a directory"

    if path.name.casefold() != flavor.folder_name.casefold():
        # Custom installs may use other folder names
        logger.warning("Directory %s for %s is not named %s", path, flavor.label, flavor.folder_name)

    return True, ""
