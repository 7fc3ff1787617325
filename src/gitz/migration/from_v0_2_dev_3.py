"""Update a configuration from version 0.2-dev.3 to the current version."""

from loguru import logger

from . import common
from .document import ConfigDocument


def update(document: ConfigDocument) -> None:
    """Only the version and the documentation changed since 0.2-dev.3."""
    logger.debug("Updating the configuration from version 0.2-dev.3")

    common.update_version(document)
    common.update_docs(document)
