"""Update a configuration from version 0.2-dev.2 to the current version."""

from loguru import logger

from . import common
from .document import ConfigDocument


def update(document: ConfigDocument, switch_scopes_to_any: bool) -> None:
    logger.debug("Updating the configuration from version 0.2-dev.2")

    common.update_version(document)

    if switch_scopes_to_any:
        common.switch_scopes_to_any(document)
