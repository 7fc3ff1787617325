"""
gitz exception hierarchy.

Every error raised by the package derives from :class:`GitzError`, which
carries a human-readable message, an error code for programmatic handling and
a context dictionary for debugging.

The hierarchy follows the places where things go wrong:

- ConfigFileError: the configuration file path cannot be resolved (Git repo root)
- ReadError / NoConfigFileError / WriteError: file I/O
- ParseError: the text is not TOML, or does not match the schema of its version
- DocumentError: the editable TOML document cannot be built or edited
- VersionError: the version tag is unknown, withdrawn, or not the expected one
- ConsumedUpdaterError: a loaded updater was reused after its migration

Usage Examples:
    >>> try:
    ...     config = load_config()
    ... except UnsupportedDevelopmentVersion as e:
    ...     print(f"Install git-z {e.bridging_release} to update this file")
    ... except ParseError as e:
    ...     if e.error_code == "PARSE_001":
    ...         print("git-z.toml is not valid TOML")
"""

from pathlib import Path
from typing import Any, Dict, Optional


CONFIG_FILE_NAME = "git-z.toml"


class GitzError(Exception):
    """
    Base exception class for all gitz errors.

    Attributes:
        message (str): Human-readable error description
        error_code (str): Unique identifier for programmatic error handling
        context (Dict[str, Any]): Additional context information for debugging
    """

    def __init__(
        self,
        message: str,
        error_code: str = "GITZ_001",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = dict(context) if context else {}

    def with_context(self, context: Dict[str, Any]) -> 'GitzError':
        """
        Add context to the exception and return self for chaining.

        Example:
            >>> raise ReadError("Failed to read git-z.toml").with_context({
            ...     "path": "/repo/git-z.toml",
            ... })
        """
        self.context.update(context)
        return self

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [Error Code: {self.error_code}, Context: {context_str}]"
        return f"{self.message} [Error Code: {self.error_code}]"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"context={self.context!r})"
        )


class ConfigFileError(GitzError):
    """
    The configuration file path could not be built.

    The path is the root of the current Git repository joined with
    ``git-z.toml``, so every failure comes from asking Git for that root.

    Error Codes:
        CONFIG_FILE_001: The git command could not be run
        CONFIG_FILE_002: Git reported an error (e.g. not inside a repository)
        CONFIG_FILE_003: The output of git is not valid UTF-8
    """

    def __init__(
        self,
        message: str = "Failed to get the config file path",
        error_code: str = "CONFIG_FILE_001",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code, context)


class ReadError(GitzError):
    """
    The configuration file exists but could not be read.

    Error Codes:
        IO_001: Generic read failure
        IO_003: The file does not exist (see NoConfigFileError)
    """

    def __init__(
        self,
        message: str = f"Failed to read {CONFIG_FILE_NAME}",
        error_code: str = "IO_001",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code, context)
        if 'path' in self.context and isinstance(self.context['path'], Path):
            self.context['path'] = str(self.context['path'])


class NoConfigFileError(ReadError):
    """There is no configuration file to update."""

    def __init__(
        self,
        message: str = "There is no configuration file to update",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, "IO_003", context)


class WriteError(GitzError):
    """
    The updated configuration could not be written.

    Error Codes:
        IO_002: Write failure
    """

    def __init__(
        self,
        message: str = f"Failed to write {CONFIG_FILE_NAME}",
        error_code: str = "IO_002",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code, context)
        if 'path' in self.context and isinstance(self.context['path'], Path):
            self.context['path'] = str(self.context['path'])


class ParseError(GitzError):
    """
    The configuration could not be parsed into its schema.

    The underlying tomlkit or pydantic error is chained as ``__cause__``.

    Error Codes:
        PARSE_001: The text is not valid TOML
        PARSE_002: The TOML does not match the schema of its version
    """

    def __init__(
        self,
        message: str = f"Failed to parse {CONFIG_FILE_NAME}",
        error_code: str = "PARSE_001",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code, context)


class DocumentError(GitzError):
    """
    The editable document could not be built or does not have the expected shape.

    Error Codes:
        DOCUMENT_001: The text could not be parsed as an editable TOML document
        DOCUMENT_002: An entry the migration needs is missing or has the wrong kind
    """

    def __init__(
        self,
        message: str,
        error_code: str = "DOCUMENT_001",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code, context)


class VersionError(GitzError):
    """
    Base class for version dispatch errors.

    Error Codes:
        VERSION_001: Unsupported configuration version
        VERSION_002: Withdrawn development configuration version
        VERSION_003: Update requested from the wrong version
    """


class UnsupportedVersion(VersionError):
    """The version tag is not a version this release knows about."""

    def __init__(self, version: str) -> None:
        super().__init__(
            f"unsupported configuration version {version}",
            "VERSION_001",
            {"version": version},
        )
        self.version = version


class UnsupportedDevelopmentVersion(VersionError):
    """
    The version tag is a development version no longer readable by this release.

    Development versions are only bridged by the release that shipped the
    first stable version after them; the message points the user at it.
    """

    def __init__(self, version: str, bridging_release: str) -> None:
        super().__init__(
            f"unsupported development configuration version {version}. "
            f"To update from this version, you can install git-z {bridging_release}",
            "VERSION_002",
            {"version": version, "bridging_release": bridging_release},
        )
        self.version = version
        self.bridging_release = bridging_release


class IncorrectVersion(VersionError):
    """An ``update_from_*`` method was called on a configuration of another version."""

    def __init__(self, tried_from: str, actual: str) -> None:
        super().__init__(
            f"Tried to update from version {tried_from}, but the actual version is {actual}.",
            "VERSION_003",
            {"tried_from": tried_from, "actual": actual},
        )
        self.tried_from = tried_from
        self.actual = actual


class ConsumedUpdaterError(GitzError):
    """
    A ConfigUpdater was used after it already produced an UpdatedConfig.

    Error Codes:
        UPDATER_001: The updater has already been consumed
    """

    def __init__(self, message: str = "This configuration updater has already been used") -> None:
        super().__init__(message, "UPDATER_001")


__all__ = [
    'CONFIG_FILE_NAME',
    'GitzError',
    'ConfigFileError',
    'ReadError',
    'NoConfigFileError',
    'WriteError',
    'ParseError',
    'DocumentError',
    'VersionError',
    'UnsupportedVersion',
    'UnsupportedDevelopmentVersion',
    'IncorrectVersion',
    'ConsumedUpdaterError',
]
