"""
Loading of ``git-z.toml`` into the current configuration schema.

Loading happens in two steps. The version probe reads only the ``version``
field, so it succeeds whatever the rest of the file looks like. The version
then selects the snapshot model used to validate the whole file, and the
forward conversions bring that snapshot up to the current schema.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

import tomlkit
from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError
from tomlkit.exceptions import TOMLKitError

from ..exceptions import CONFIG_FILE_NAME, ParseError, ReadError
from .models import VERSION, Config
from .repo import config_file
from .versions import check_supported, upgrade_path

ModelT = TypeVar("ModelT", bound=BaseModel)


class VersionProbe(BaseModel):
    """Only the version field, so that any schema can be probed."""

    model_config = ConfigDict(extra="ignore")

    version: str


def parse_toml(toml_text: str) -> Dict[str, Any]:
    """
    Parse TOML text into plain Python values.

    Raises:
        ParseError: With code PARSE_001 if the text is not valid TOML
    """
    try:
        return tomlkit.parse(toml_text).unwrap()
    except TOMLKitError as e:
        logger.error(f"Invalid TOML in {CONFIG_FILE_NAME}: {e}")
        raise ParseError(
            f"Failed to parse {CONFIG_FILE_NAME}", "PARSE_001", {"reason": str(e)}
        ) from e


def _validate(model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(f"{CONFIG_FILE_NAME} does not match the {model.__name__} schema")
        raise ParseError(
            f"Failed to parse {CONFIG_FILE_NAME}",
            "PARSE_002",
            {"schema": model.__module__, "validation_errors": e.error_count()},
        ) from e


def probe_version(toml_text: str) -> str:
    """
    Return the version tag of a configuration without validating the rest.

    Raises:
        ParseError: If the text is not TOML or has no string ``version``
    """
    return _validate(VersionProbe, parse_toml(toml_text)).version


def config_from_toml(toml_text: str) -> Config:
    """
    Parse a configuration of any supported version into the current schema.

    This function never touches the filesystem. Conversion steps are logged
    at debug level; a failure is logged at error level before it is raised.

    Args:
        toml_text: The content of a configuration file

    Returns:
        The configuration in the current schema

    Raises:
        ParseError: If the text is not TOML or does not match its version
        UnsupportedVersion: If the version is unknown
        UnsupportedDevelopmentVersion: If the version is a withdrawn development version
    """
    data = parse_toml(toml_text)
    version = _validate(VersionProbe, data).version

    if version == VERSION:
        return _validate(Config, data)

    check_supported(version)

    path = upgrade_path(version)
    config = _validate(path[0].model, data)
    for snapshot in path:
        logger.debug(f"Upgrading configuration from {snapshot.version} to {snapshot.next_version}")
        config = snapshot.upgrade(config)
    return config


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load the configuration of the current repository.

    Falls back to :meth:`Config.default` when the file does not exist, and
    warns when the file was written by an older version of git-z.

    Args:
        path: Explicit configuration path; defaults to ``git-z.toml`` at the
            root of the current Git repository

    Raises:
        ConfigFileError: If the repository root cannot be determined
        ReadError: If the file exists but cannot be read
        ParseError, UnsupportedVersion, UnsupportedDevelopmentVersion: See
            :func:`config_from_toml`
    """
    config_path = Path(path) if path is not None else config_file()

    try:
        toml_text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"No configuration at {config_path}, using the default one")
        return Config.default()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {config_path}: {e}")
        raise ReadError(context={"path": config_path, "reason": str(e)}) from e

    config = config_from_toml(toml_text)

    version = probe_version(toml_text)
    if version != VERSION:
        logger.warning(
            f"The configuration is out of date (version {version}, current is {VERSION}). "
            "You can update it by running `git z update`."
        )

    return config


__all__ = [
    "VersionProbe",
    "parse_toml",
    "probe_version",
    "config_from_toml",
    "load_config",
]
