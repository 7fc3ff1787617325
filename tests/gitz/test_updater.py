"""Tests for the two-state configuration updater."""

import dataclasses
import logging

import pytest

from gitz.config.loader import load_config
from gitz.config.models import VERSION, AnyScopes, ListScopes
from gitz.exceptions import (
    ConsumedUpdaterError,
    IncorrectVersion,
    NoConfigFileError,
    UnsupportedDevelopmentVersion,
    WriteError,
)
from gitz.migration import Ask, ConfigUpdater, DontAsk, UpdatedConfig, common, updater


@pytest.fixture
def v0_1_file(config_path, read_res):
    config_path.write_text(read_res("v0_1_doc-and-user-comments.toml"), encoding="utf-8")
    return config_path


class TestAskForTicket:
    def test_ask_carries_the_requirement(self):
        assert Ask(require=True).require is True
        assert Ask(require=True) == Ask(require=True)
        assert Ask(require=True) != Ask(require=False)

    def test_dont_ask_has_no_requirement(self):
        assert DontAsk() == DontAsk()
        assert not hasattr(DontAsk(), "require")

    def test_decisions_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Ask(require=True).require = False


class TestLoad:
    def test_load(self, v0_1_file):
        config_updater = ConfigUpdater.load(v0_1_file)

        assert config_updater.config_version == "0.1"
        assert not config_updater.is_up_to_date()
        assert config_updater.parsed_config.version == VERSION
        assert config_updater.parsed_config.scopes == ListScopes(list=["a", "b", "c"])

    def test_up_to_date(self, config_path, read_res):
        config_path.write_text(read_res("v0_2_doc.toml"), encoding="utf-8")
        assert ConfigUpdater.load(config_path).is_up_to_date()

    def test_no_config_file(self, config_path):
        with pytest.raises(NoConfigFileError) as exc_info:
            ConfigUpdater.load(config_path)
        assert exc_info.value.error_code == "IO_003"

    def test_path_defaults_to_repository_root(self, mocker, v0_1_file):
        mocker.patch.object(updater, "config_file", return_value=v0_1_file)
        assert ConfigUpdater.load().config_version == "0.1"

    def test_dotted_keys(self):
        config_updater = ConfigUpdater.from_toml('version = "0.2"\ntypes.feat = "x"\ntemplates.commit = "x"\n')

        assert config_updater.is_up_to_date()
        assert config_updater.parsed_config.types == {"feat": "x"}
        assert config_updater.parsed_config.templates.commit == "x"

    def test_withdrawn_development_version(self, read_res):
        with pytest.raises(UnsupportedDevelopmentVersion):
            ConfigUpdater.from_toml(read_res("v0_2-dev.0_doc-and-user-comments.toml"))


class TestUpdate:
    def test_update_and_save(self, v0_1_file, read_res, caplog):
        config_updater = ConfigUpdater.load(v0_1_file)

        updated = config_updater.update_from_v0_1(
            switch_scopes_to_any=False,
            ask_for_ticket=Ask(require=True),
            empty_prefix_to_hash=True,
        )
        assert isinstance(updated, UpdatedConfig)
        assert updated.save() == v0_1_file

        assert v0_1_file.read_text(encoding="utf-8") == read_res("v0_2_doc-and-user-comments.toml")
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
        assert any("from version 0.1" in message for message in messages)

    def test_update_twice_from_disk(self, v0_1_file):
        ConfigUpdater.load(v0_1_file).update_from_v0_1(False, Ask(require=True), True).save()

        with pytest.raises(IncorrectVersion) as exc_info:
            ConfigUpdater.load(v0_1_file).update_from_v0_1(False, Ask(require=True), True)

        assert exc_info.value.tried_from == "0.1"
        assert exc_info.value.actual == VERSION

    def test_wrong_method(self, v0_1_file):
        with pytest.raises(IncorrectVersion) as exc_info:
            ConfigUpdater.load(v0_1_file).update_from_v0_2_dev_3()
        assert exc_info.value.actual == "0.1"

    def test_updater_is_single_use(self, v0_1_file):
        config_updater = ConfigUpdater.load(v0_1_file)
        config_updater.update_from_v0_1(False, DontAsk(), False)

        with pytest.raises(ConsumedUpdaterError):
            config_updater.update_from_v0_1(False, DontAsk(), False)

    def test_wrong_method_does_not_consume(self, v0_1_file):
        config_updater = ConfigUpdater.load(v0_1_file)

        with pytest.raises(IncorrectVersion):
            config_updater.update_from_v0_2_dev_2(False)

        config_updater.update_from_v0_1(False, DontAsk(), False)

    def test_parsed_config_is_not_refreshed(self, v0_1_file):
        config_updater = ConfigUpdater.load(v0_1_file)

        config_updater.update_from_v0_1(True, Ask(require=True), True).save()

        assert config_updater.parsed_config.scopes == ListScopes(list=["a", "b", "c"])
        assert load_config(v0_1_file).scopes == AnyScopes()

    def test_nothing_written_before_save(self, v0_1_file, read_res):
        ConfigUpdater.load(v0_1_file).update_from_v0_1(False, Ask(require=True), True)
        assert v0_1_file.read_text(encoding="utf-8") == read_res("v0_1_doc-and-user-comments.toml")


class TestDevelopmentVersions:
    def test_dev_0(self, open_bridge, config_path, read_res):
        config_path.write_text(read_res("v0_2-dev.0_doc-and-user-comments.toml"), encoding="utf-8")

        ConfigUpdater.load(config_path).update_from_v0_2_dev_0(False, Ask(require=True), True).save()

        assert config_path.read_text(encoding="utf-8") == read_res(
            "v0_2_from-dev.0_doc-and-user-comments.toml"
        )

    def test_dev_1(self, open_bridge, config_path):
        text = (
            'version = "0.2-dev.1"\n'
            '[types]\nfeat = "x"\n'
            '[ticket]\nrequired = false\nprefixes = [""]\n'
            '[templates]\ncommit = "#{{ ticket }}"\n'
        )
        ConfigUpdater.from_toml(text, config_path).update_from_v0_2_dev_1(False, True).save()

        config = load_config(config_path)
        assert config.ticket.prefixes == ["#"]
        assert config.templates.commit == "{{ ticket }}"

    @pytest.mark.parametrize(
        "version, method, args",
        [
            ("0.2-dev.2", "update_from_v0_2_dev_2", (True,)),
            ("0.2-dev.3", "update_from_v0_2_dev_3", ()),
        ],
    )
    def test_later_versions(self, open_bridge, config_path, version, method, args):
        text = f'version = "{version}"\n[types]\nfeat = "x"\n[templates]\ncommit = "x"\n'

        getattr(ConfigUpdater.from_toml(text, config_path), method)(*args).save()

        assert ConfigUpdater.load(config_path).is_up_to_date()

    def test_dev_3_with_dotted_keys(self, open_bridge, config_path):
        text = (
            'version = "0.2-dev.3"\n'
            "\n"
            "# The available types of commits.\n"
            'types.feat = "x"\n'
            'types.fix = "y"\n'
            "\n"
            'scopes.accept = "list"\n'
            'scopes.list = ["a"]\n'
            "\n"
            'templates.commit = "x"  # short\n'
        )

        ConfigUpdater.from_toml(text, config_path).update_from_v0_2_dev_3().save()

        assert config_path.read_text(encoding="utf-8") == (
            'version = "0.2"\n'
            + common.NEW_TYPES_DOC
            + 'types.feat = "x"\ntypes.fix = "y"\n'
            + "\n"
            + common.SCOPES_ACCEPT_DOC
            + 'scopes.accept = "list"\nscopes.list = ["a"]\n'
            + common.TEMPLATES_DOC
            + 'templates.commit = "x"  # short\n'
        )
        assert load_config(config_path).scopes == ListScopes(list=["a"])


class TestSave:
    def test_save_without_path_uses_repository_root(self, mocker, config_path, read_res):
        mocker.patch.object(updater, "config_file", return_value=config_path)
        updated = ConfigUpdater.from_toml(read_res("v0_1_doc.toml")).update_from_v0_1(
            True, Ask(require=False), True
        )

        assert updated.save() == config_path
        assert config_path.read_text(encoding="utf-8") == read_res("v0_2_doc.toml")

    def test_write_error(self, tmp_path, read_res):
        updated = ConfigUpdater.from_toml(read_res("v0_1_doc.toml"), tmp_path).update_from_v0_1(
            True, Ask(require=False), True
        )

        with pytest.raises(WriteError) as exc_info:
            updated.save()
        assert exc_info.value.error_code == "IO_002"
        assert isinstance(exc_info.value.__cause__, OSError)
