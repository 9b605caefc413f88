"""Configuration management module.

This module provides configuration storage, loading, and data models for the application.

Submodules:
    manager: ConfigurationManager for loading/saving ajour.yml, load_config entry point
    schema: Config, the complete configuration record
    enums: Flavor, Language and the release channel enumerations
    columns: Versioned column layouts (V1, V2, V3)
    directories: DirectoryResolver for AddOns, WTF and download directories
    wow, addons: Sections of the configuration
    paths: AppPaths with the config directory and file locations
    path_validator: Validation of flavor directories

The configuration is stored as YAML in <config dir>/ajour.yml.
"""

from .columns import (
    ColumnConfig,
    ColumnConfigV1,
    ColumnConfigV2,
    ColumnConfigV3,
    ColumnSettings,
    column_config_from_dict,
    column_config_to_dict,
    default_column_config,
    upgrade_to_v3,
)
from .directories import DirectoryResolver
from .enums import Flavor, GlobalReleaseChannel, Language, ReleaseChannel, SelfUpdateChannel
from .manager import ConfigurationManager, load_config
from .paths import AppPaths
from .schema import Config

__all__ = [
    "AppPaths",
    "ColumnConfig",
    "ColumnConfigV1",
    "ColumnConfigV2",
    "ColumnConfigV3",
    "ColumnSettings",
    "Config",
    "ConfigurationManager",
    "DirectoryResolver",
    "Flavor",
    "GlobalReleaseChannel",
    "Language",
    "ReleaseChannel",
    "SelfUpdateChannel",
    "column_config_from_dict",
    "column_config_to_dict",
    "default_column_config",
    "load_config",
    "upgrade_to_v3",
]
