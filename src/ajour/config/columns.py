"""Versioned column layouts for the addon, catalog and aura tables.

Every layout ever written to ajour.yml stays readable. A document is read
back as the version it was written in; nothing is upgraded implicitly, so a
release that only knows V2 can re-save a file without dropping V3 fields.
``upgrade_to_v3`` performs the explicit forward migration.

Persisted shape (externally tagged)::

    column_config:
      V3:
        my_addons_columns:
          - key: title
            width: 200
            hidden: false
        catalog_columns: []
        aura_columns: []
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from ..errors import SchemaError

U16_MAX = 65535

DEFAULT_LOCAL_VERSION_WIDTH = 150
DEFAULT_REMOTE_VERSION_WIDTH = 150
DEFAULT_STATUS_WIDTH = 85

# Column keys the V1 widths belong to, in V1 field order
V1_COLUMN_KEYS = ("local_version", "remote_version", "status")


@dataclass(frozen=True)
class ColumnSettings:
    """A single table column: its key, an optional fixed width, visibility"""
    key: str
    width: Optional[int] = None
    hidden: bool = False


@dataclass(frozen=True)
class ColumnConfigV1:
    """Fixed widths of the three resizable columns of the addon table"""
    local_version_width: int = DEFAULT_LOCAL_VERSION_WIDTH
    remote_version_width: int = DEFAULT_REMOTE_VERSION_WIDTH
    status_width: int = DEFAULT_STATUS_WIDTH


@dataclass(frozen=True)
class ColumnConfigV2:
    """Ordered columns of the addon table"""
    columns: tuple[ColumnSettings, ...] = ()


@dataclass(frozen=True)
class ColumnConfigV3:
    """Ordered columns for each of the addon, catalog and aura tables"""
    my_addons_columns: tuple[ColumnSettings, ...] = ()
    catalog_columns: tuple[ColumnSettings, ...] = ()
    aura_columns: tuple[ColumnSettings, ...] = ()


ColumnConfig = Union[ColumnConfigV1, ColumnConfigV2, ColumnConfigV3]

VERSION_TAGS = ("V1", "V2", "V3")


def default_column_config() -> ColumnConfig:
    """Layout used when ajour.yml has no column_config."""
    return ColumnConfigV1()


def version_of(layout: ColumnConfig) -> str:
    """Return the version tag (``V1``, ``V2`` or ``V3``) of a layout."""
    if isinstance(layout, ColumnConfigV1):
        return "V1"
    if isinstance(layout, ColumnConfigV2):
        return "V2"
    if isinstance(layout, ColumnConfigV3):
        return "V3"
    raise TypeError(f"Not a column layout: {layout!r}")


def column_config_from_dict(raw: Any) -> ColumnConfig:
    """Parse a persisted, version-tagged layout.

    Args:
        raw: Mapping with exactly one key, the version tag

    Returns:
        Layout of the same version as the persisted one

    Raises:
        SchemaError: If the tag is unknown or a required field is missing
    """
    if not isinstance(raw, dict) or len(raw) != 1:
        raise SchemaError(f"expected a mapping with one version tag, got {raw!r}")

    tag, body = next(iter(raw.items()))
    if tag not in VERSION_TAGS:
        raise SchemaError(f"unknown version tag {tag!r}")
    if not isinstance(body, dict):
        raise SchemaError(f"expected a mapping, got {body!r}", tag=tag)

    if tag == "V1":
        return ColumnConfigV1(
            local_version_width=_required_width(body, "local_version_width", tag),
            remote_version_width=_required_width(body, "remote_version_width", tag),
            status_width=_required_width(body, "status_width", tag),
        )
    if tag == "V2":
        return ColumnConfigV2(columns=_required_columns(body, "columns", tag))
    return ColumnConfigV3(
        my_addons_columns=_required_columns(body, "my_addons_columns", tag),
        catalog_columns=_required_columns(body, "catalog_columns", tag),
        aura_columns=_optional_columns(body, "aura_columns", tag),
    )


def column_config_to_dict(layout: ColumnConfig) -> dict[str, Any]:
    """Serialize a layout into its persisted, version-tagged shape."""
    if isinstance(layout, ColumnConfigV1):
        return {
            "V1": {
                "local_version_width": layout.local_version_width,
                "remote_version_width": layout.remote_version_width,
                "status_width": layout.status_width,
            }
        }
    if isinstance(layout, ColumnConfigV2):
        return {"V2": {"columns": _columns_to_list(layout.columns)}}
    if isinstance(layout, ColumnConfigV3):
        return {
            "V3": {
                "my_addons_columns": _columns_to_list(layout.my_addons_columns),
                "catalog_columns": _columns_to_list(layout.catalog_columns),
                "aura_columns": _columns_to_list(layout.aura_columns),
            }
        }
    raise TypeError(f"Not a column layout: {layout!r}")


def upgrade_to_v3(layout: ColumnConfig) -> ColumnConfigV3:
    """Migrate a layout of any version to V3.

    V1 widths become the addon table columns keyed by V1_COLUMN_KEYS. V2
    columns become the addon table columns. Catalog and aura columns start
    empty so the UI fills in its own defaults.
    """
    if isinstance(layout, ColumnConfigV1):
        widths = (layout.local_version_width, layout.remote_version_width, layout.status_width)
        return ColumnConfigV3(
            my_addons_columns=tuple(
                ColumnSettings(key=key, width=width) for key, width in zip(V1_COLUMN_KEYS, widths)
            )
        )
    if isinstance(layout, ColumnConfigV2):
        return ColumnConfigV3(my_addons_columns=layout.columns)
    if isinstance(layout, ColumnConfigV3):
        return layout
    raise TypeError(f"Not a column layout: {layout!r}")


def _required_width(body: dict, field: str, tag: str) -> int:
    if field not in body:
        raise SchemaError(f"missing required field '{field}'", tag=tag)
    return _check_width(body[field], field, tag)


def _check_width(value: Any, field: str, tag: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U16_MAX:
        raise SchemaError(f"'{field}' must be an integer between 0 and {U16_MAX}, got {value!r}", tag=tag)
    return value


def _required_columns(body: dict, field: str, tag: str) -> tuple[ColumnSettings, ...]:
    if field not in body:
        raise SchemaError(f"missing required field '{field}'", tag=tag)
    return _parse_columns(body[field], field, tag)


def _optional_columns(body: dict, field: str, tag: str) -> tuple[ColumnSettings, ...]:
    if body.get(field) is None:
        return ()
    return _parse_columns(body[field], field, tag)


def _parse_columns(value: Any, field: str, tag: str) -> tuple[ColumnSettings, ...]:
    if not isinstance(value, list):
        raise SchemaError(f"'{field}' must be a list, got {value!r}", tag=tag)

    columns = []
    for index, entry in enumerate(value):
        location = f"{field}[{index}]"
        if not isinstance(entry, dict):
            raise SchemaError(f"'{location}' must be a mapping, got {entry!r}", tag=tag)
        if "key" not in entry or "hidden" not in entry:
            raise SchemaError(f"'{location}' requires 'key' and 'hidden'", tag=tag)
        if not isinstance(entry["key"], str):
            raise SchemaError(f"'{location}.key' must be a string, got {entry['key']!r}", tag=tag)
        if not isinstance(entry["hidden"], bool):
            raise SchemaError(f"'{location}.hidden' must be a boolean, got {entry['hidden']!r}", tag=tag)

        width = entry.get("width")
        if width is not None:
            width = _check_width(width, f"{location}.width", tag)
        columns.append(ColumnSettings(key=entry["key"], width=width, hidden=entry["hidden"]))
    return tuple(columns)


def _columns_to_list(columns: tuple[ColumnSettings, ...]) -> list[dict[str, Any]]:
    return [{"key": c.key, "width": c.width, "hidden": c.hidden} for c in columns]
