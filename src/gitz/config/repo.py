"""Location of the configuration file inside the current Git repository."""

import subprocess
from pathlib import Path

from loguru import logger

from ..exceptions import CONFIG_FILE_NAME, ConfigFileError


def repo_root() -> Path:
    """
    Return the root of the Git working tree containing the current directory.

    Raises:
        ConfigFileError: If git cannot be run, reports an error, or prints
            something that is not UTF-8
    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True,
            check=False,
        )
    except OSError as e:
        logger.error(f"Failed to run the git command: {e}")
        raise ConfigFileError(
            "Failed to run the git command", "CONFIG_FILE_001", {"reason": str(e)}
        ) from e

    try:
        if result.returncode != 0:
            git_error = result.stderr.decode("utf-8").strip()
            logger.error(f"Failed to get the Git repo root: {git_error}")
            raise ConfigFileError(git_error, "CONFIG_FILE_002", {"returncode": result.returncode})
        root = result.stdout.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise ConfigFileError(
            "The output of the git command is not proper UTF-8", "CONFIG_FILE_003"
        ) from e

    return Path(root)


def config_file() -> Path:
    """Return the path of ``git-z.toml`` at the repository root."""
    return repo_root() / CONFIG_FILE_NAME


__all__ = ["repo_root", "config_file"]
