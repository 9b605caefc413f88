"""Flavor-aware resolution of the directories inside a WoW installation.

The stored directory of a flavor is its flavor folder, e.g.
``/games/World of Warcraft/_retail_``. AddOns and WTF live below it::

    World of Warcraft/          <- root directory
        _retail_/               <- stored flavor directory, download directory
            Interface/AddOns/   <- addon directory
            WTF/                <- settings directory

Resolution never raises for environment problems. Results are advisory:
callers check existence before using a path.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from ..logging_config import get_logger
from .enums import Flavor

logger = get_logger("directories")

ADDON_SUBPATH = ("Interface", "AddOns")
WTF_SUBPATH = ("WTF",)


class DirectoryResolver:
    """Resolves per-flavor directories from the configured flavor folders.

    Every call looks at the filesystem again; nothing is cached, as WoW may
    be installed or launched while Ajour is running.
    """

    def __init__(self, directories: Mapping[Flavor, Path]):
        self.directories = directories

    def addon_directory(self, flavor: Flavor) -> Optional[Path]:
        """Get the Interface/AddOns directory of a flavor.

        When the flavor folder exists but the AddOns directory does not (a
        fresh install where WoW was never started) the directory is created.

        Args:
            flavor: The flavor to resolve

        Returns:
            The addon directory, which may not exist, or None if the flavor
            has no directory configured
        """
        flavor_dir = self.directories.get(flavor)
        if flavor_dir is None:
            return None

        addon_dir = self._resolve_case_insensitive(flavor_dir, ADDON_SUBPATH)

        if _exists(flavor_dir) and not _exists(addon_dir):
            try:
                addon_dir.mkdir(parents=True, exist_ok=True)
                logger.info("Created addon directory %s", addon_dir)
            except OSError as e:
                logger.warning("Could not create addon directory %s: %s", addon_dir, e)

        return addon_dir

    def settings_directory(self, flavor: Flavor) -> Optional[Path]:
        """Get the WTF directory of a flavor.

        The WTF directory belongs to WoW and is never created here.

        Returns:
            The WTF directory, which may not exist, or None if the flavor has
            no directory configured
        """
        flavor_dir = self.directories.get(flavor)
        if flavor_dir is None:
            return None
        return self._resolve_case_insensitive(flavor_dir, WTF_SUBPATH)

    def download_directory(self, flavor: Flavor) -> Optional[Path]:
        """Get the directory temporary addon archives are downloaded to.

        This is the flavor directory itself.
        """
        return self.directories.get(flavor)

    def root_directory(self, flavor: Flavor) -> Optional[Path]:
        """Get the WoW installation directory containing the flavor folder.

        Raises:
            ValueError: If the stored flavor directory has no parent
        """
        flavor_dir = self.directories.get(flavor)
        if flavor_dir is None:
            return None
        if flavor_dir.parent == flavor_dir or not flavor_dir.name:
            raise ValueError(f"Directory of {flavor.label} has no parent: {flavor_dir}")
        return flavor_dir.parent

    @staticmethod
    def flavor_directory(flavor: Flavor, path: Path) -> Path:
        """Join a WoW installation directory with the folder of a flavor."""
        return path / flavor.folder_name

    def _resolve_case_insensitive(self, base: Path, parts: tuple[str, ...]) -> Path:
        """Return ``base/parts``, or an existing directory matching it ignoring case.

        If the exact path is missing, the user (or a case-insensitive
        filesystem copy) may have changed the letter case of a component.
        When several directories match, the lexicographically first wins.
        """
        expected = base.joinpath(*parts)
        if _exists(expected):
            return expected

        candidates = [base]
        for part in parts:
            wanted = part.casefold()
            next_candidates = []
            for candidate in candidates:
                next_candidates.extend(
                    entry for entry in self._list_directories(candidate)
                    if entry.name.casefold() == wanted
                )
            candidates = next_candidates
            if not candidates:
                return expected

        match = sorted(candidates, key=str)[0]
        if len(candidates) > 1:
            logger.debug("Several directories match %s, using %s", expected, match)
        return match

    @staticmethod
    def _list_directories(path: Path) -> list[Path]:
        try:
            entries = list(path.iterdir())
        except OSError:
            return []
        return [entry for entry in entries if _is_dir(entry)]


def _exists(path: Path) -> bool:
    """Existence check that treats unreadable or invalid paths as missing."""
    try:
        return path.exists()
    except OSError as e:
        logger.debug("Could not check %s: %s", path, e)
        return False


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False
