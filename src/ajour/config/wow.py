"""WoW installation settings: the configured folder of each flavor"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .enums import Flavor
from .parsing import (
    as_mapping,
    expect_path,
    flavor_map_to_dict,
    parse_enum,
    parse_flavor_map,
    parse_optional_path,
)


@dataclass
class Wow:
    """Configured WoW flavors.

    ``directories`` maps each flavor to its flavor folder (``.../_retail_``).
    ``directory`` is the single WoW directory stored by old releases; see
    ``Config.migrate_legacy_wow_directory``.
    """
    directories: dict[Flavor, Path] = field(default_factory=dict)
    flavor: Flavor = Flavor.RETAIL
    directory: Optional[Path] = None

    @classmethod
    def from_dict(cls, raw: Any) -> "Wow":
        data = as_mapping(raw, "wow")
        return cls(
            directories=parse_flavor_map(data, "directories", expect_path),
            flavor=parse_enum(data, "flavor", Flavor, Flavor.RETAIL),
            directory=parse_optional_path(data, "directory"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "directories": flavor_map_to_dict(self.directories, str),
            "flavor": self.flavor.value,
        }
        if self.directory is not None:
            data["directory"] = str(self.directory)
        return data
