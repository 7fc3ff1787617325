"""
Configuration updater.

Updating a configuration goes through two states, each with its own class:

1. :class:`ConfigUpdater` holds a loaded, not yet migrated configuration. It
   exposes the detected version and the typed configuration so the caller can
   ask the user the questions the migration needs, then runs exactly one
   ``update_from_*`` method.
2. :class:`UpdatedConfig` holds the migrated document. The only thing left to
   do is :meth:`UpdatedConfig.save`.

Example:
    >>> updater = ConfigUpdater.load()
    >>> if updater.config_version == "0.1":
    ...     updated = updater.update_from_v0_1(
    ...         switch_scopes_to_any=False,
    ...         ask_for_ticket=Ask(require=True),
    ...         empty_prefix_to_hash=True,
    ...     )
    ...     updated.save()
"""

from pathlib import Path
from typing import Callable, Optional, Union

from loguru import logger

from ..config.loader import config_from_toml, probe_version
from ..config.models import VERSION, Config
from ..config.repo import config_file
from ..exceptions import (
    ConsumedUpdaterError,
    IncorrectVersion,
    NoConfigFileError,
    ReadError,
    WriteError,
)
from . import from_v0_1, from_v0_2_dev_0, from_v0_2_dev_1, from_v0_2_dev_2, from_v0_2_dev_3
from .decisions import Ask, AskForTicket, DontAsk
from .document import ConfigDocument


class UpdatedConfig:
    """A migrated configuration, ready to be written back."""

    def __init__(self, document: ConfigDocument, path: Optional[Path] = None):
        self._document = document
        self._path = path

    def save(self) -> Path:
        """
        Overwrite the configuration file with the migrated document.

        The file is written at the path it was loaded from, or at
        ``git-z.toml`` in the current repository when it was loaded from text.

        Returns:
            The path written to

        Raises:
            ConfigFileError: If the path has to be resolved and Git fails
            WriteError: If the file cannot be written
        """
        path = self._path if self._path is not None else config_file()

        try:
            path.write_text(self._document.as_string(), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise WriteError(context={"path": path, "reason": str(e)}) from e

        logger.info(f"Saved the updated configuration to {path}")
        return path


class ConfigUpdater:
    """
    A loaded configuration waiting to be migrated.

    Attributes:
        config_version: The version written in the file
        parsed_config: The configuration converted to the current schema,
            as it was at load time
    """

    def __init__(
        self,
        config_version: str,
        parsed_config: Config,
        document: ConfigDocument,
        path: Optional[Path] = None,
    ):
        self._config_version = config_version
        self._parsed_config = parsed_config
        self._document = document
        self._path = path
        self._consumed = False

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "ConfigUpdater":
        """
        Load the configuration file for updating.

        Args:
            path: Configuration path; ``git-z.toml`` at the repository root
                when None

        Raises:
            ConfigFileError: If the repository root cannot be determined
            NoConfigFileError: If there is no configuration file
            ReadError: If the file cannot be read
            ParseError, DocumentError, UnsupportedVersion,
            UnsupportedDevelopmentVersion: See :meth:`from_toml`
        """
        config_path = Path(path) if path is not None else config_file()

        try:
            toml_text = config_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            logger.error(f"No configuration file at {config_path}")
            raise NoConfigFileError(context={"path": str(config_path)}) from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {config_path}: {e}")
            raise ReadError(context={"path": config_path, "reason": str(e)}) from e

        return cls.from_toml(toml_text, config_path)

    @classmethod
    def from_toml(cls, toml_text: str, path: Optional[Union[str, Path]] = None) -> "ConfigUpdater":
        """
        Prepare an update from the text of a configuration.

        The text is parsed twice: into the typed configuration, which checks
        it matches the schema of its version, and into the editable document
        the migration rewrites.

        Raises:
            ParseError: If the text is not TOML or does not match its version
            UnsupportedVersion: If the version is unknown
            UnsupportedDevelopmentVersion: If the version is a withdrawn
                development version
            DocumentError: If the text cannot be turned into an editable document
        """
        parsed_config = config_from_toml(toml_text)
        config_version = probe_version(toml_text)
        document = ConfigDocument.parse(toml_text)

        logger.debug(f"Loaded a version {config_version} configuration for updating")
        return cls(config_version, parsed_config, document, Path(path) if path is not None else None)

    @property
    def config_version(self) -> str:
        return self._config_version

    @property
    def parsed_config(self) -> Config:
        return self._parsed_config

    def is_up_to_date(self) -> bool:
        return self._config_version == VERSION

    def update_from_v0_1(
        self,
        switch_scopes_to_any: bool,
        ask_for_ticket: AskForTicket,
        empty_prefix_to_hash: bool,
    ) -> UpdatedConfig:
        """
        Update a 0.1 configuration.

        Args:
            switch_scopes_to_any: Accept any scope instead of the listed ones
            ask_for_ticket: Whether to keep asking for a ticket, and whether
                to require it
            empty_prefix_to_hash: Turn the empty ticket prefix into ``#``

        Raises:
            IncorrectVersion: If the configuration is not a 0.1 one
            DocumentError: If the document does not have the expected shape
        """
        return self._update(
            "0.1",
            lambda document: from_v0_1.update(
                document, switch_scopes_to_any, ask_for_ticket, empty_prefix_to_hash
            ),
        )

    def update_from_v0_2_dev_0(
        self,
        switch_scopes_to_any: bool,
        ask_for_ticket: AskForTicket,
        empty_prefix_to_hash: bool,
    ) -> UpdatedConfig:
        """Update a 0.2-dev.0 configuration. See :meth:`update_from_v0_1`."""
        return self._update(
            "0.2-dev.0",
            lambda document: from_v0_2_dev_0.update(
                document, switch_scopes_to_any, ask_for_ticket, empty_prefix_to_hash
            ),
        )

    def update_from_v0_2_dev_1(
        self,
        switch_scopes_to_any: bool,
        empty_prefix_to_hash: bool,
    ) -> UpdatedConfig:
        """Update a 0.2-dev.1 configuration."""
        return self._update(
            "0.2-dev.1",
            lambda document: from_v0_2_dev_1.update(
                document, switch_scopes_to_any, empty_prefix_to_hash
            ),
        )

    def update_from_v0_2_dev_2(self, switch_scopes_to_any: bool) -> UpdatedConfig:
        """Update a 0.2-dev.2 configuration."""
        return self._update(
            "0.2-dev.2",
            lambda document: from_v0_2_dev_2.update(document, switch_scopes_to_any),
        )

    def update_from_v0_2_dev_3(self) -> UpdatedConfig:
        """Update a 0.2-dev.3 configuration."""
        return self._update("0.2-dev.3", from_v0_2_dev_3.update)

    def _update(
        self, from_version: str, transform: Callable[[ConfigDocument], None]
    ) -> UpdatedConfig:
        if self._consumed:
            raise ConsumedUpdaterError()
        self._check_version(from_version)

        # A failed transform leaves the document half edited: never reuse it.
        self._consumed = True
        transform(self._document)

        logger.info(f"Updated the configuration from version {from_version} to {VERSION}")
        return UpdatedConfig(self._document, self._path)

    def _check_version(self, from_version: str) -> None:
        if self._config_version != from_version:
            logger.error(
                f"Tried to update from version {from_version}, "
                f"but the actual version is {self._config_version}"
            )
            raise IncorrectVersion(from_version, self._config_version)


__all__ = [
    "Ask",
    "DontAsk",
    "AskForTicket",
    "ConfigUpdater",
    "UpdatedConfig",
]
