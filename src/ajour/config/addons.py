"""Per-flavor addon preferences: ignored addons and release channels"""

from dataclasses import dataclass, field
from typing import Any

from ..errors import ConfigParseError
from ..logging_config import get_logger
from .enums import Flavor, GlobalReleaseChannel, ReleaseChannel
from .parsing import as_mapping, expect_str, flavor_map_to_dict, parse_bool, parse_enum, parse_flavor_map

logger = get_logger("addons")


@dataclass
class Addons:
    """Addon preferences stored in the ``addons`` section of ajour.yml"""
    global_release_channel: GlobalReleaseChannel = GlobalReleaseChannel.STABLE
    ignored: dict[Flavor, list[str]] = field(default_factory=dict)
    release_channels: dict[Flavor, dict[str, ReleaseChannel]] = field(default_factory=dict)
    delete_saved_variables: bool = False

    def is_ignored(self, flavor: Flavor, addon_id: str) -> bool:
        return addon_id in self.ignored.get(flavor, [])

    def release_channel(self, flavor: Flavor, addon_id: str) -> ReleaseChannel:
        return self.release_channels.get(flavor, {}).get(addon_id, ReleaseChannel.DEFAULT)

    @classmethod
    def from_dict(cls, raw: Any) -> "Addons":
        data = as_mapping(raw, "addons")
        return cls(
            global_release_channel=parse_enum(
                data, "global_release_channel", GlobalReleaseChannel, GlobalReleaseChannel.STABLE
            ),
            ignored=parse_flavor_map(data, "ignored", _parse_ignored),
            release_channels=parse_flavor_map(data, "release_channels", _parse_release_channels),
            delete_saved_variables=parse_bool(data, "delete_saved_variables", False),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "global_release_channel": self.global_release_channel.value,
            "ignored": flavor_map_to_dict(self.ignored, list),
            "release_channels": flavor_map_to_dict(
                self.release_channels,
                lambda channels: {addon: channel.value for addon, channel in channels.items()},
            ),
            "delete_saved_variables": self.delete_saved_variables,
        }


def _parse_ignored(value: Any, key: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigParseError(key, f"expected a list, got {value!r}")
    return [expect_str(item, key) for item in value]


def _parse_release_channels(value: Any, key: str) -> dict[str, ReleaseChannel]:
    channels = {}
    for addon_id, raw_channel in as_mapping(value, key).items():
        addon_id = expect_str(addon_id, key)
        try:
            channels[addon_id] = ReleaseChannel.from_value(raw_channel)
        except ValueError:
            logger.warning("Unknown release channel %r for '%s' in '%s', using Default", raw_channel, addon_id, key)
            channels[addon_id] = ReleaseChannel.DEFAULT
    return channels
