"""
Update a configuration from version 0.1 to the current version.

0.1 kept everything at the top level: ``types`` and ``scopes`` were plain
lists, ``ticket_prefixes`` a list and ``template`` a string. Each of them
becomes a table at the same place in the file, carrying the user's comments.
"""

from loguru import logger

from ..config.conversions import split_type_and_doc
from . import common
from .decisions import Ask, AskForTicket
from .document import ConfigDocument, Entry, Section

# Documentation written by git-z 0.1, which differs from the one of the
# development versions of 0.2.
V0_1_TYPES_DOC = """
# The available types of commits.
#
# This is a list of types (1 word) and their description, separated by one or
# more spaces.
"""

V0_1_SCOPES_DOC = """
#The list of valid scopes.
"""


def update(
    document: ConfigDocument,
    switch_scopes_to_any: bool,
    ask_for_ticket: AskForTicket,
    empty_prefix_to_hash: bool,
) -> None:
    """
    Apply the 0.1 migration to ``document`` in memory.

    Args:
        document: The parsed 0.1 configuration
        switch_scopes_to_any: Accept any scope instead of the 0.1 list
        ask_for_ticket: ``Ask(require)`` to keep asking for a ticket, or ``DontAsk()``
        empty_prefix_to_hash: Replace the empty ticket prefix with ``#`` and
            drop the ``#`` the template wrote before ``{{ ticket }}``
    """
    logger.debug("Updating the configuration from version 0.1")

    common.update_version(document)
    _update_types(document)
    _update_scopes(document, switch_scopes_to_any)

    if isinstance(ask_for_ticket, Ask):
        _update_ticket(document, ask_for_ticket.require, empty_prefix_to_hash)
    else:
        document.remove("ticket_prefixes")

    _update_templates(document, empty_prefix_to_hash)


def _update_types(document: ConfigDocument) -> None:
    old = document.entry("types")
    entries = [
        Entry.new(type_name, doc)
        for type_name, doc in (split_type_and_doc(entry) for entry in old.value)
    ]
    decor = old.decor.replace(V0_1_TYPES_DOC, common.NEW_TYPES_DOC)
    document.replace("types", Section.new("types", entries, decor))


def _update_scopes(document: ConfigDocument, switch_scopes_to_any: bool) -> None:
    old = document.entry("scopes")

    if switch_scopes_to_any:
        entries = [Entry.new("accept", "any", common.SCOPES_ACCEPT_DOC)]
    else:
        entries = [
            Entry.new("accept", "list", common.SCOPES_ACCEPT_DOC),
            Entry.new("list", old.array()),
        ]

    decor = old.decor.replace(V0_1_SCOPES_DOC, common.NEW_SCOPES_DOC)
    document.replace("scopes", Section.new("scopes", entries, decor))


def _update_ticket(document: ConfigDocument, required: bool, empty_prefix_to_hash: bool) -> None:
    old = document.entry("ticket_prefixes")
    prefixes = old.array()
    if empty_prefix_to_hash:
        common.empty_prefix_to_hash(prefixes)

    prefixes_decor = old.decor.lstrip().replace(
        common.OLD_TICKET_PREFIXES_DOC, common.NEW_TICKET_PREFIXES_DOC
    )
    entries = [
        Entry.new("required", required, common.TICKET_REQUIRED_DOC),
        Entry.new("prefixes", prefixes, prefixes_decor),
    ]
    document.replace("ticket_prefixes", Section.new("ticket", entries, common.TICKET_DOC))


def _update_templates(document: ConfigDocument, empty_prefix_to_hash: bool) -> None:
    old = document.entry("template")

    template = common.add_ticket_condition_to_commit_template(old.value)
    if empty_prefix_to_hash:
        template = common.remove_hash_ticket_prefix_from_commit_template(template)

    commit_decor = old.decor.lstrip().replace(
        common.OLD_TEMPLATES_COMMIT_DOC, common.NEW_TEMPLATES_COMMIT_DOC
    )
    entries = [Entry.new("commit", template, commit_decor)]
    document.replace("template", Section.new("templates", entries, common.TEMPLATES_DOC))
