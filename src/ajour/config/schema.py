"""Configuration data model stored in ajour.yml"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from ..logging_config import get_logger
from .addons import Addons
from .columns import ColumnConfig, column_config_from_dict, column_config_to_dict, default_column_config
from .directories import DirectoryResolver
from .enums import Flavor, Language, SelfUpdateChannel
from .parsing import (
    as_mapping,
    expect_str,
    flavor_map_to_dict,
    parse_bool,
    parse_enum,
    parse_flavor_map,
    parse_optional_float,
    parse_optional_path,
    parse_optional_str,
    parse_window_size,
)
from .path_validator import validate_flavor_directory
from .wow import Wow

logger = get_logger("schema")


@dataclass
class Config:
    """Complete application configuration.

    Every field has a default, so a document with any subset of keys (or an
    empty one) produces a complete Config.
    """
    wow: Wow = field(default_factory=Wow)
    addons: Addons = field(default_factory=Addons)
    theme: Optional[str] = None
    column_config: ColumnConfig = field(default_factory=default_column_config)
    window_size: Optional[tuple[int, int]] = None
    scale: Optional[float] = None
    backup_directory: Optional[Path] = None
    backup_addons: bool = False
    backup_wtf: bool = False
    hide_ignored_addons: bool = False
    self_update_channel: SelfUpdateChannel = SelfUpdateChannel.STABLE
    weak_auras_account: dict[Flavor, str] = field(default_factory=dict)
    alternating_row_colors: bool = True
    language: Language = Language.ENGLISH
    catalog_source: Any = None  # owned by the catalog, stored verbatim
    auto_update: bool = False

    @classmethod
    def from_dict(cls, raw: Any) -> "Config":
        """Build a Config from a parsed ajour.yml document.

        Args:
            raw: The parsed document; None is treated as an empty document

        Returns:
            Config with absent fields set to their defaults

        Raises:
            ConfigParseError: If a field has a value of the wrong type
            SchemaError: If column_config is not a valid layout
        """
        data = as_mapping(raw, "<document>")

        column_config = data.get("column_config")
        return cls(
            wow=Wow.from_dict(data.get("wow")),
            addons=Addons.from_dict(data.get("addons")),
            theme=parse_optional_str(data, "theme"),
            column_config=(
                default_column_config() if column_config is None else column_config_from_dict(column_config)
            ),
            window_size=parse_window_size(data, "window_size"),
            scale=parse_optional_float(data, "scale"),
            backup_directory=parse_optional_path(data, "backup_directory"),
            backup_addons=parse_bool(data, "backup_addons", False),
            backup_wtf=parse_bool(data, "backup_wtf", False),
            hide_ignored_addons=parse_bool(data, "hide_ignored_addons", False),
            self_update_channel=parse_enum(
                data, "self_update_channel", SelfUpdateChannel, SelfUpdateChannel.STABLE
            ),
            weak_auras_account=parse_flavor_map(data, "weak_auras_account", expect_str),
            alternating_row_colors=parse_bool(data, "alternating_row_colors", True),
            language=parse_enum(data, "language", Language, Language.ENGLISH),
            catalog_source=data.get("catalog_source"),
            auto_update=parse_bool(data, "auto_update", False),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ajour.yml document shape."""
        return {
            "wow": self.wow.to_dict(),
            "addons": self.addons.to_dict(),
            "theme": self.theme,
            "column_config": column_config_to_dict(self.column_config),
            "window_size": list(self.window_size) if self.window_size is not None else None,
            "scale": self.scale,
            "backup_directory": str(self.backup_directory) if self.backup_directory is not None else None,
            "backup_addons": self.backup_addons,
            "backup_wtf": self.backup_wtf,
            "hide_ignored_addons": self.hide_ignored_addons,
            "self_update_channel": self.self_update_channel.value,
            "weak_auras_account": flavor_map_to_dict(self.weak_auras_account),
            "alternating_row_colors": self.alternating_row_colors,
            "language": self.language.value,
            "catalog_source": self.catalog_source,
            "auto_update": self.auto_update,
        }

    @property
    def directories(self) -> DirectoryResolver:
        """A resolver over the currently configured flavor directories."""
        return DirectoryResolver(self.wow.directories)

    def get_flavor_directory_for_flavor(self, flavor: Flavor, path: Path) -> Path:
        return DirectoryResolver.flavor_directory(flavor, path)

    def get_root_directory_for_flavor(self, flavor: Flavor) -> Optional[Path]:
        return self.directories.root_directory(flavor)

    def get_addon_directory_for_flavor(self, flavor: Flavor) -> Optional[Path]:
        """Get the Interface/AddOns directory, or None if the flavor is not configured."""
        return self.directories.addon_directory(flavor)

    def get_download_directory_for_flavor(self, flavor: Flavor) -> Optional[Path]:
        return self.directories.download_directory(flavor)

    def get_wtf_directory_for_flavor(self, flavor: Flavor) -> Optional[Path]:
        """Get the WTF directory, or None if the flavor is not configured."""
        return self.directories.settings_directory(flavor)

    def set_flavor_directory(self, flavor: Flavor, path: Path) -> None:
        """Store the flavor folder of a flavor.

        Raises:
            ValueError: If the path cannot be a flavor folder
        """
        is_valid, error = validate_flavor_directory(flavor, path)
        if not is_valid:
            raise ValueError(error)
        self.wow.directories[flavor] = path
        logger.info("Directory for %s set to %s", flavor.label, path)

    def remove_flavor_directory(self, flavor: Flavor) -> bool:
        """Forget the directory of a flavor.

        Returns:
            True if the flavor had a directory
        """
        return self.wow.directories.pop(flavor, None) is not None

    def get_configured_flavors(self) -> list[Flavor]:
        """Flavors with a directory, in declaration order."""
        return [flavor for flavor in Flavor if flavor in self.wow.directories]

    def migrate_legacy_wow_directory(self) -> list[Flavor]:
        """Move the legacy single WoW directory into per-flavor directories.

        Each flavor folder that exists below ``wow.directory`` is recorded,
        unless the flavor already has a directory. The legacy field is cleared.

        Returns:
            The flavors that were added
        """
        legacy_dir = self.wow.directory
        if legacy_dir is None:
            return []

        added = []
        for flavor in Flavor:
            if flavor in self.wow.directories:
                continue
            flavor_dir = self.get_flavor_directory_for_flavor(flavor, legacy_dir)
            if flavor_dir.is_dir():
                self.wow.directories[flavor] = flavor_dir
                added.append(flavor)

        self.wow.directory = None
        logger.info("Migrated legacy WoW directory %s: %s", legacy_dir, [f.value for f in added])
        return added
