"""
Document-editing primitives shared by the migration transforms.

Documentation blocks are only rewritten when they still contain the exact
boilerplate an earlier version of git-z wrote, or when they are blank. Any
text the user wrote around the boilerplate is left where it was.
"""

import re
from typing import Dict

from loguru import logger
from tomlkit.items import Array

from ..config.models import VERSION
from .document import ConfigDocument

NEW_TYPES_DOC = """
# The available types of commits and their description.
#
# Types are shown in the dialog in the order they appear in this configuration.
"""

OLD_TYPES_DOC = """
# The available types of commits.
"""

NEW_SCOPES_DOC = """
# The accepted scopes.
#
# This table is optional: if omitted, no scope will be asked for.
"""

OLD_SCOPES_DOC = """
# The accepted scopes.
"""

SCOPES_ACCEPT_DOC = """\
# What kind of scope to accept.
#
# Can be one of: "any", "list". If it is "list", a `list` key containing a list
# of valid scopes is required.
"""

TICKET_DOC = """
# The ticket / issue reference configuration.
#
# This table is optional: if omitted, no ticket will be asked for.
"""

TICKET_REQUIRED_DOC = """\
# Set to true to require a ticket number.
# Set to false to ask for a ticket without requiring it.
"""

NEW_TICKET_PREFIXES_DOC = """\
# The list of valid ticket prefixes.
#
# Can be a `#` for GitHub / GitLab issues, or a Jira key for instance.
"""

OLD_TICKET_PREFIXES_DOC = """\
# The list of valid ticket prefixes.
"""

TEMPLATES_DOC = """
# Templates written with the Tera [1] templating engine.
#
# Each template is documented below, with its list of available variables.
# Variables marked as optional can be `None`, hence should be checked for
# presence in the template.
#
# [1] https://tera.netlify.app/
"""

NEW_TEMPLATES_COMMIT_DOC = """\
# The commit template.
#
# Available variables:
#
#   - type: the type of commit
#   - scope (optional): the scope of the commit
#   - description: the short description
#   - breaking_change (optional): the description of the breaking change
#   - ticket (optional): the ticket reference
"""

OLD_TEMPLATES_COMMIT_DOC = """\
# The commit message template, written with the Tera [1] templating engine.
# [1] https://tera.netlify.app/
"""

TICKET_PLACEHOLDER = "{{ ticket }}"

CURRENT_DOCS: Dict[str, str] = {
    "types": NEW_TYPES_DOC,
    "scopes": NEW_SCOPES_DOC,
    "scopes.accept": SCOPES_ACCEPT_DOC,
    "ticket": TICKET_DOC,
    "ticket.required": TICKET_REQUIRED_DOC,
    "ticket.prefixes": NEW_TICKET_PREFIXES_DOC,
    "templates": TEMPLATES_DOC,
    "templates.commit": NEW_TEMPLATES_COMMIT_DOC,
}


def current_doc(field: str) -> str:
    """
    Return the documentation git-z writes today above ``field``.

    Args:
        field: A top-level key or a ``table.key`` path, e.g. ``"ticket.prefixes"``

    Raises:
        KeyError: If the field has no standard documentation
    """
    return CURRENT_DOCS[field]


# --- Decor helpers ---

def replace_in_decor(node, old: str, new: str) -> None:
    """
    Replace every verbatim occurrence of ``old`` in the decor of ``node``.

    Nothing happens when the decor already holds ``new``: some new wordings
    start with the old one, and a second pass must not stack them.
    """
    if new in node.decor:
        return
    node.decor = node.decor.replace(old, new)


def set_decor_if_blank(node, doc: str) -> None:
    """Set the decor of ``node`` to ``doc`` unless the user wrote something there."""
    if not node.decor.strip():
        node.decor = doc


# --- Value helpers ---

def update_version(document: ConfigDocument) -> None:
    document.entry("version").set_value(VERSION)


def switch_scopes_to_any(document: ConfigDocument) -> None:
    """Make ``[scopes]`` accept any scope, dropping the list. No-op without scopes."""
    scopes = document.optional_section("scopes")
    if scopes is None:
        return
    scopes.set("accept", "any")
    scopes.remove("list")


def empty_prefix_to_hash(prefixes: Array) -> None:
    """Replace the first empty ticket prefix with ``#``, keeping the array layout."""
    for index, prefix in enumerate(prefixes):
        if prefix == "":
            prefixes[index] = "#"
            return


def wrap_line_containing(template: str, placeholder: str, before: str, after: str) -> str:
    """
    Surround the first line of ``template`` containing ``placeholder``.

    Only that line changes, even when neighbouring lines use the placeholder
    too.

    Example:
        >>> wrap_line_containing("a\\nRefs: {{ x }}\\n", "{{ x }}", "<", ">")
        'a\\n<Refs: {{ x }}>\\n'
    """
    pattern = re.compile("(.*" + re.escape(placeholder) + ".*)")
    return pattern.sub(lambda match: f"{before}{match.group(1)}{after}", template, count=1)


def add_ticket_condition_to_commit_template(template: str) -> str:
    """Only render the ticket line when a ticket has been given."""
    return wrap_line_containing(template, TICKET_PLACEHOLDER, "{% if ticket %}", "{% endif %}")


def remove_hash_ticket_prefix_from_commit_template(template: str) -> str:
    """Drop the ``#`` the template used to add, now that prefixes carry it."""
    return template.replace("#" + TICKET_PLACEHOLDER, TICKET_PLACEHOLDER)


def update_commit_template(document: ConfigDocument, remove_hash: bool) -> None:
    """Rewrite ``templates.commit`` in place for the optional ticket."""
    commit = document.section("templates").entry("commit")
    template = add_ticket_condition_to_commit_template(commit.value)
    if remove_hash:
        template = remove_hash_ticket_prefix_from_commit_template(template)
    commit.set_value(template)


# --- Documentation updates ---

def update_types_doc(document: ConfigDocument) -> None:
    replace_in_decor(document.section("types"), OLD_TYPES_DOC, NEW_TYPES_DOC)


def update_scopes_doc(document: ConfigDocument) -> None:
    scopes = document.optional_section("scopes")
    if scopes is None:
        return
    replace_in_decor(scopes, OLD_SCOPES_DOC, NEW_SCOPES_DOC)
    set_decor_if_blank(scopes.entry("accept"), SCOPES_ACCEPT_DOC)


def update_ticket_doc(document: ConfigDocument) -> None:
    ticket = document.optional_section("ticket")
    if ticket is None:
        return
    set_decor_if_blank(ticket, TICKET_DOC)
    set_decor_if_blank(ticket.entry("required"), TICKET_REQUIRED_DOC)
    replace_in_decor(ticket.entry("prefixes"), OLD_TICKET_PREFIXES_DOC, NEW_TICKET_PREFIXES_DOC)


def update_templates_doc(document: ConfigDocument) -> None:
    templates = document.section("templates")
    set_decor_if_blank(templates, TEMPLATES_DOC)
    replace_in_decor(templates.entry("commit"), OLD_TEMPLATES_COMMIT_DOC, NEW_TEMPLATES_COMMIT_DOC)


def update_docs(document: ConfigDocument) -> None:
    """Bring every documentation block to its current wording."""
    logger.debug("Updating the documentation comments")
    update_types_doc(document)
    update_scopes_doc(document)
    update_ticket_doc(document)
    update_templates_doc(document)
