"""Tests for the Config aggregate."""

import logging
from pathlib import Path

import pytest
import yaml

from ajour.config.addons import Addons
from ajour.config.columns import ColumnConfigV1, ColumnConfigV3, ColumnSettings
from ajour.config.enums import Flavor, GlobalReleaseChannel, Language, ReleaseChannel, SelfUpdateChannel
from ajour.config.schema import Config
from ajour.config.wow import Wow
from ajour.errors import ConfigParseError, SchemaError


@pytest.fixture
def full_config(tmp_path: Path) -> Config:
    return Config(
        wow=Wow(
            directories={
                Flavor.RETAIL: tmp_path / "wow" / "_retail_",
                Flavor.CLASSIC_ERA: tmp_path / "wow" / "_classic_era_",
            },
            flavor=Flavor.CLASSIC_ERA,
        ),
        addons=Addons(
            global_release_channel=GlobalReleaseChannel.BETA,
            ignored={Flavor.RETAIL: ["DBM-Core", "Details"]},
            release_channels={Flavor.RETAIL: {"12345": ReleaseChannel.ALPHA}},
            delete_saved_variables=True,
        ),
        theme="Dark",
        column_config=ColumnConfigV3(
            my_addons_columns=(ColumnSettings("title", 200, False),),
            catalog_columns=(ColumnSettings("source", None, True),),
        ),
        window_size=(1280, 720),
        scale=1.25,
        backup_directory=tmp_path / "backups",
        backup_addons=True,
        backup_wtf=True,
        hide_ignored_addons=True,
        self_update_channel=SelfUpdateChannel.BETA,
        weak_auras_account={Flavor.RETAIL: "ACCOUNT#1"},
        alternating_row_colors=False,
        language=Language.UKRAINIAN,
        catalog_source={"Custom": {"url": "https://example.org/catalog.json"}},
        auto_update=True,
    )


class TestDefaults:

    def test_empty_document(self):
        assert Config.from_dict({}) == Config()

    def test_null_document(self):
        assert Config.from_dict(None) == Config()

    def test_documented_defaults(self):
        config = Config()

        assert config.alternating_row_colors is True
        assert not any([config.backup_addons, config.backup_wtf, config.hide_ignored_addons, config.auto_update])
        assert config.theme is None and config.window_size is None and config.scale is None
        assert config.language is Language.ENGLISH
        assert config.self_update_channel is SelfUpdateChannel.STABLE
        assert config.column_config == ColumnConfigV1(150, 150, 85)
        assert config.wow.flavor is Flavor.RETAIL

    def test_default_round_trips_to_itself(self):
        document = yaml.safe_load(yaml.safe_dump(Config().to_dict(), sort_keys=False))

        assert Config.from_dict(document) == Config()
        assert Config.from_dict(document).to_dict() == Config().to_dict()

    def test_partial_document_fills_remaining_fields(self):
        config = Config.from_dict({"language": "French", "backup_wtf": True})

        assert config.language is Language.FRENCH
        assert config.backup_wtf is True
        assert config.alternating_row_colors is True
        assert config.column_config == ColumnConfigV1()


class TestRoundTrip:

    def test_full_config_round_trips_through_yaml(self, full_config):
        text = yaml.safe_dump(full_config.to_dict(), sort_keys=False, allow_unicode=True)

        assert Config.from_dict(yaml.safe_load(text)) == full_config

    def test_catalog_source_is_kept_verbatim(self, full_config):
        assert Config.from_dict(full_config.to_dict()).catalog_source == {
            "Custom": {"url": "https://example.org/catalog.json"}
        }

    def test_flavor_maps_use_persisted_identifiers(self, full_config):
        document = full_config.to_dict()

        assert list(document["wow"]["directories"]) == ["Retail", "ClassicEra"]
        assert document["addons"]["release_channels"] == {"Retail": {"12345": "Alpha"}}


class TestForwardCompatibility:

    def test_unknown_keys_are_ignored(self):
        assert Config.from_dict({"added_in_a_later_release": [1, 2, 3]}) == Config()

    def test_unknown_flavor_is_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ajour"):
            config = Config.from_dict({"wow": {"directories": {"Retail": "/wow/_retail_", "Plunderstorm": "/x"}}})

        assert config.wow.directories == {Flavor.RETAIL: Path("/wow/_retail_")}
        assert "Plunderstorm" in caplog.text

    def test_legacy_flavor_identifier(self):
        config = Config.from_dict({"wow": {"directories": {"wow_classic": "/wow/_classic_"}}})

        assert config.wow.directories == {Flavor.CLASSIC_TBC: Path("/wow/_classic_")}

    def test_unknown_language_falls_back_to_english(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ajour"):
            config = Config.from_dict({"language": "Klingon"})

        assert config.language is Language.ENGLISH
        assert "Klingon" in caplog.text


class TestInvalidDocuments:

    @pytest.mark.parametrize("document", [
        {"backup_addons": "sometimes"},
        {"window_size": [800]},
        {"scale": "big"},
        {"wow": ["not", "a", "mapping"]},
        {"addons": {"ignored": {"Retail": "DBM-Core"}}},
        ["not", "a", "mapping"],
    ])
    def test_wrong_types_raise(self, document):
        with pytest.raises(ConfigParseError):
            Config.from_dict(document)

    def test_invalid_column_config_raises_schema_error(self):
        with pytest.raises(SchemaError):
            Config.from_dict({"column_config": {"V9": {}}})


class TestDirectoryQueries:

    def test_queries_delegate_to_resolver(self, retail_dir):
        config = Config()
        config.set_flavor_directory(Flavor.RETAIL, retail_dir)

        assert config.get_addon_directory_for_flavor(Flavor.RETAIL) == retail_dir / "Interface" / "AddOns"
        assert config.get_wtf_directory_for_flavor(Flavor.RETAIL) == retail_dir / "WTF"
        assert config.get_download_directory_for_flavor(Flavor.RETAIL) == retail_dir
        assert config.get_root_directory_for_flavor(Flavor.RETAIL) == retail_dir.parent
        assert config.get_flavor_directory_for_flavor(Flavor.RETAIL, retail_dir.parent) == retail_dir

    def test_unconfigured_flavor(self):
        config = Config()

        assert config.get_addon_directory_for_flavor(Flavor.CLASSIC_PTR) is None
        assert config.get_download_directory_for_flavor(Flavor.CLASSIC_PTR) is None

    def test_results_follow_directory_changes(self, retail_dir, tmp_path):
        config = Config()
        config.set_flavor_directory(Flavor.RETAIL, retail_dir)
        first = config.get_wtf_directory_for_flavor(Flavor.RETAIL)

        other = tmp_path / "other" / "_retail_"
        config.set_flavor_directory(Flavor.RETAIL, other)

        assert first == retail_dir / "WTF"
        assert config.get_wtf_directory_for_flavor(Flavor.RETAIL) == other / "WTF"

    def test_set_rejects_filesystem_root(self, tmp_path):
        with pytest.raises(ValueError):
            Config().set_flavor_directory(Flavor.RETAIL, Path(tmp_path.anchor))

    def test_remove_flavor_directory(self, retail_dir):
        config = Config()
        config.set_flavor_directory(Flavor.RETAIL, retail_dir)

        assert config.remove_flavor_directory(Flavor.RETAIL) is True
        assert config.remove_flavor_directory(Flavor.RETAIL) is False
        assert config.get_configured_flavors() == []


class TestLegacyDirectoryMigration:

    def test_flavor_folders_are_recorded(self, tmp_path):
        wow_dir = tmp_path / "World of Warcraft"
        (wow_dir / "_retail_").mkdir(parents=True)
        (wow_dir / "_classic_").mkdir()
        config = Config.from_dict({"wow": {"directory": str(wow_dir)}})

        added = config.migrate_legacy_wow_directory()

        assert added == [Flavor.RETAIL, Flavor.CLASSIC_TBC]
        assert config.wow.directories == {
            Flavor.RETAIL: wow_dir / "_retail_",
            Flavor.CLASSIC_TBC: wow_dir / "_classic_",
        }
        assert config.wow.directory is None

    def test_existing_directories_win(self, tmp_path):
        wow_dir = tmp_path / "World of Warcraft"
        (wow_dir / "_retail_").mkdir(parents=True)
        elsewhere = tmp_path / "elsewhere" / "_retail_"
        config = Config(wow=Wow(directories={Flavor.RETAIL: elsewhere}, directory=wow_dir))

        assert config.migrate_legacy_wow_directory() == []
        assert config.wow.directories == {Flavor.RETAIL: elsewhere}

    def test_nothing_to_migrate(self):
        assert Config().migrate_legacy_wow_directory() == []

    def test_deserialization_does_not_migrate(self, tmp_path):
        (tmp_path / "_retail_").mkdir()

        config = Config.from_dict({"wow": {"directory": str(tmp_path)}})

        assert config.wow.directory == tmp_path
        assert config.wow.directories == {}
