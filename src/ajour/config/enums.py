"""Closed value sets stored in the configuration.

Member values are the identifiers written to ajour.yml. They must never be
renamed or removed; new members may only be added.
"""

from enum import Enum
from typing import Any


class ConfigEnum(Enum):
    """Enum whose values are persisted identifiers."""

    @classmethod
    def from_value(cls, raw: Any) -> "ConfigEnum":
        """Parse a persisted identifier.

        Raises:
            ValueError: If ``raw`` is not a known identifier
        """
        if isinstance(raw, str):
            for member in cls:
                if member.value == raw:
                    return member
            alias = cls._legacy_aliases().get(raw)
            if alias is not None:
                return cls(alias)
        raise ValueError(f"{raw!r} is not a valid {cls.__name__}")

    @classmethod
    def _legacy_aliases(cls) -> dict[str, str]:
        return {}

    @classmethod
    def all(cls) -> list["ConfigEnum"]:
        return list(cls)

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.label


class Flavor(ConfigEnum):
    """Release channels of World of Warcraft, each with its own folder"""
    RETAIL = "Retail"
    RETAIL_PTR = "RetailPtr"
    RETAIL_BETA = "RetailBeta"
    CLASSIC_ERA = "ClassicEra"
    CLASSIC_TBC = "ClassicTbc"
    CLASSIC_PTR = "ClassicPtr"
    CLASSIC_BETA = "ClassicBeta"

    @classmethod
    def _legacy_aliases(cls) -> dict[str, str]:
        return _FLAVOR_ALIASES

    @property
    def folder_name(self) -> str:
        """Name of the flavor's folder inside the game directory (e.g. ``_retail_``)."""
        return _FLAVOR_FOLDERS[self]

    @property
    def label(self) -> str:
        return _FLAVOR_LABELS[self]

    def base_flavor(self) -> "Flavor":
        """Map test channels onto the flavor they are a test build of."""
        if self in (Flavor.RETAIL, Flavor.RETAIL_PTR, Flavor.RETAIL_BETA):
            return Flavor.RETAIL
        if self is Flavor.CLASSIC_ERA:
            return Flavor.CLASSIC_ERA
        return Flavor.CLASSIC_TBC


_FLAVOR_FOLDERS = {
    Flavor.RETAIL: "_retail_",
    Flavor.RETAIL_PTR: "_ptr_",
    Flavor.RETAIL_BETA: "_beta_",
    Flavor.CLASSIC_ERA: "_classic_era_",
    Flavor.CLASSIC_TBC: "_classic_",
    Flavor.CLASSIC_PTR: "_classic_ptr_",
    Flavor.CLASSIC_BETA: "_classic_beta_",
}

_FLAVOR_LABELS = {
    Flavor.RETAIL: "Retail",
    Flavor.RETAIL_PTR: "Retail PTR",
    Flavor.RETAIL_BETA: "Retail Beta",
    Flavor.CLASSIC_ERA: "Classic Era",
    Flavor.CLASSIC_TBC: "Classic TBC",
    Flavor.CLASSIC_PTR: "Classic PTR",
    Flavor.CLASSIC_BETA: "Classic Beta",
}

# Identifiers written by releases that predate the current flavor names
_FLAVOR_ALIASES = {
    "retail": "Retail",
    "wow_retail": "Retail",
    "Classic": "ClassicTbc",
    "classic": "ClassicTbc",
    "wow_classic": "ClassicTbc",
}


class Language(ConfigEnum):
    """UI languages with a translation shipped in the locale directory"""
    CZECH = "Czech"
    NORWEGIAN = "Norwegian"
    ENGLISH = "English"
    DANISH = "Danish"
    GERMAN = "German"
    FRENCH = "French"
    HUNGARIAN = "Hungarian"
    PORTUGUESE = "Portuguese"
    RUSSIAN = "Russian"
    SLOVAK = "Slovak"
    SWEDISH = "Swedish"
    SPANISH = "Spanish"
    TURKISH = "Turkish"
    UKRAINIAN = "Ukrainian"

    @classmethod
    def all(cls) -> list["Language"]:
        """All languages, in alphabetical order of their native name."""
        return list(_LANGUAGE_ORDER)

    @property
    def label(self) -> str:
        return _LANGUAGE_LABELS[self]

    @property
    def language_code(self) -> str:
        """Locale code naming the translation file (e.g. ``en_US``)."""
        return _LANGUAGE_CODES[self]


_LANGUAGE_LABELS = {
    Language.CZECH: "Čeština",
    Language.DANISH: "Dansk",
    Language.ENGLISH: "English",
    Language.FRENCH: "Français",
    Language.GERMAN: "Deutsch",
    Language.HUNGARIAN: "Magyar",
    Language.NORWEGIAN: "Norsk Bokmål",
    Language.PORTUGUESE: "Português",
    Language.RUSSIAN: "Pусский",
    Language.SLOVAK: "Slovenčina",
    Language.SPANISH: "Español",
    Language.SWEDISH: "Svenska",
    Language.TURKISH: "Türkçe",
    Language.UKRAINIAN: "Yкраїнська",
}

_LANGUAGE_ORDER = (
    Language.CZECH,
    Language.DANISH,
    Language.GERMAN,
    Language.ENGLISH,
    Language.SPANISH,
    Language.FRENCH,
    Language.HUNGARIAN,
    Language.NORWEGIAN,
    Language.PORTUGUESE,
    Language.RUSSIAN,
    Language.SLOVAK,
    Language.SWEDISH,
    Language.TURKISH,
    Language.UKRAINIAN,
)

# se_SE is the name of the shipped Swedish translation file
_LANGUAGE_CODES = {
    Language.CZECH: "cs_CZ",
    Language.ENGLISH: "en_US",
    Language.DANISH: "da_DK",
    Language.GERMAN: "de_DE",
    Language.FRENCH: "fr_FR",
    Language.RUSSIAN: "ru_RU",
    Language.SWEDISH: "se_SE",
    Language.SPANISH: "es_ES",
    Language.HUNGARIAN: "hu_HU",
    Language.NORWEGIAN: "nb_NO",
    Language.SLOVAK: "sk_SK",
    Language.TURKISH: "tr_TR",
    Language.PORTUGUESE: "pt_PT",
    Language.UKRAINIAN: "uk_UA",
}


class SelfUpdateChannel(ConfigEnum):
    """Which Ajour releases the self-updater follows"""
    STABLE = "Stable"
    BETA = "Beta"


class GlobalReleaseChannel(ConfigEnum):
    """Default release channel applied to every addon"""
    STABLE = "Stable"
    BETA = "Beta"
    ALPHA = "Alpha"


class ReleaseChannel(ConfigEnum):
    """Per-addon release channel; DEFAULT defers to the global channel"""
    DEFAULT = "Default"
    STABLE = "Stable"
    BETA = "Beta"
    ALPHA = "Alpha"
