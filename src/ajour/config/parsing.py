"""Helpers turning loosely-typed YAML values into configuration fields.

Absent and null values yield the field's default. Values of the wrong type
raise ConfigParseError. Unknown enumeration values and unknown flavor keys
are logged and skipped so that files written by newer releases still load.
"""

from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

from ..errors import ConfigParseError
from ..logging_config import get_logger
from .enums import ConfigEnum, Flavor

logger = get_logger("parsing")

T = TypeVar("T")
E = TypeVar("E", bound=ConfigEnum)


def as_mapping(value: Any, key: str) -> dict:
    """Return ``value`` as a dict, treating None as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigParseError(key, f"expected a mapping, got {type(value).__name__}")
    return value


def parse_bool(data: dict, key: str, default: bool) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigParseError(key, f"expected a boolean, got {value!r}")
    return value


def parse_optional_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigParseError(key, f"expected a string, got {value!r}")
    return value


def parse_optional_path(data: dict, key: str) -> Optional[Path]:
    value = parse_optional_str(data, key)
    if value is None or not value.strip():
        return None
    return Path(value)


def parse_optional_float(data: dict, key: str) -> Optional[float]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigParseError(key, f"expected a number, got {value!r}")
    return float(value)


def parse_window_size(data: dict, key: str) -> Optional[tuple[int, int]]:
    """Parse a ``[width, height]`` pair of non-negative integers."""
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigParseError(key, f"expected [width, height], got {value!r}")
    for part in value:
        if isinstance(part, bool) or not isinstance(part, int) or part < 0:
            raise ConfigParseError(key, f"expected non-negative integers, got {value!r}")
    return int(value[0]), int(value[1])


def parse_enum(data: dict, key: str, enum_cls: type[E], default: E) -> E:
    """Parse an enumeration, falling back to ``default`` for unknown values."""
    value = data.get(key)
    if value is None:
        return default
    try:
        return enum_cls.from_value(value)
    except ValueError:
        logger.warning("Unknown %s %r for '%s', using %s", enum_cls.__name__, value, key, default.value)
        return default


def parse_flavor_map(data: dict, key: str, convert: Callable[[Any, str], T]) -> dict[Flavor, T]:
    """Parse a mapping keyed by flavor identifier.

    Args:
        data: Mapping holding ``key``
        key: Name of the field, used in error messages
        convert: Called with each value and its dotted key path

    Returns:
        Dict keyed by Flavor, without entries for unknown flavors
    """
    result: dict[Flavor, T] = {}
    for raw_flavor, value in as_mapping(data.get(key), key).items():
        try:
            flavor = Flavor.from_value(raw_flavor)
        except ValueError:
            logger.warning("Skipping unknown flavor %r in '%s'", raw_flavor, key)
            continue
        result[flavor] = convert(value, f"{key}.{raw_flavor}")
    return result


def flavor_map_to_dict(values: dict[Flavor, T], convert: Callable[[T], Any] = lambda v: v) -> dict[str, Any]:
    """Serialize a flavor-keyed dict, ordered by flavor declaration."""
    return {flavor.value: convert(values[flavor]) for flavor in Flavor if flavor in values}


def expect_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ConfigParseError(key, f"expected a string, got {value!r}")
    return value


def expect_path(value: Any, key: str) -> Path:
    return Path(expect_str(value, key))
