"""Update a configuration from version 0.2-dev.1 to the current version."""

from loguru import logger

from . import common
from .document import ConfigDocument


def update(document: ConfigDocument, switch_scopes_to_any: bool, empty_prefix_to_hash: bool) -> None:
    """
    Apply the 0.2-dev.1 migration to ``document`` in memory.

    From 0.2-dev.2 on, ticket prefixes carry their own ``#``. With
    ``empty_prefix_to_hash``, the empty prefix becomes ``#`` and the commit
    template stops writing one before ``{{ ticket }}``.
    """
    logger.debug("Updating the configuration from version 0.2-dev.1")

    common.update_version(document)

    if switch_scopes_to_any:
        common.switch_scopes_to_any(document)

    if empty_prefix_to_hash:
        ticket = document.optional_section("ticket")
        if ticket is not None:
            common.empty_prefix_to_hash(ticket.entry("prefixes").array())

        commit = document.section("templates").entry("commit")
        commit.set_value(common.remove_hash_ticket_prefix_from_commit_template(commit.value))

    common.update_docs(document)
