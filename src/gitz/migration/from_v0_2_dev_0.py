"""Update a configuration from version 0.2-dev.0 to the current version."""

from loguru import logger

from . import common
from .decisions import Ask, AskForTicket
from .document import ConfigDocument


def update(
    document: ConfigDocument,
    switch_scopes_to_any: bool,
    ask_for_ticket: AskForTicket,
    empty_prefix_to_hash: bool,
) -> None:
    """
    Apply the 0.2-dev.0 migration to ``document`` in memory.

    0.2-dev.0 had no ``ticket.required``: asking for a ticket adds it, not
    asking removes the ``[ticket]`` table.
    """
    logger.debug("Updating the configuration from version 0.2-dev.0")

    common.update_version(document)

    if switch_scopes_to_any:
        common.switch_scopes_to_any(document)

    if isinstance(ask_for_ticket, Ask):
        _update_ticket(document, ask_for_ticket.require, empty_prefix_to_hash)
    else:
        document.remove("ticket")

    common.update_commit_template(document, empty_prefix_to_hash)
    common.update_docs(document)


def _update_ticket(document: ConfigDocument, required: bool, empty_prefix_to_hash: bool) -> None:
    ticket = document.optional_section("ticket")
    if ticket is None:
        logger.debug("No [ticket] table to update")
        return

    # Re-appending the prefixes after `required` keeps their documentation.
    prefixes = ticket.entry("prefixes")
    ticket.remove("prefixes")

    if empty_prefix_to_hash:
        common.empty_prefix_to_hash(prefixes.array())

    ticket.set("required", required)
    ticket.append(prefixes)
