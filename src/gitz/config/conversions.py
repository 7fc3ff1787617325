"""
Forward conversions between configuration snapshots.

Each function turns a snapshot of one version into the snapshot of the next
version it was followed by. Conversions are pure: the input snapshot is
frozen and a new object is returned. The loader chains them one hop at a
time until the current schema is reached.
"""

from typing import Tuple

from loguru import logger

from . import models
from .snapshots import v0_1, v0_2_dev_0, v0_2_dev_1, v0_2_dev_2, v0_2_dev_3


def split_type_and_doc(entry: str) -> Tuple[str, str]:
    """
    Split a 0.1 type entry into its name and its description.

    The name is everything up to the first space; the description is the
    rest with surrounding whitespace removed.

    Example:
        >>> split_type_and_doc("feat   introduces a new feature")
        ('feat', 'introduces a new feature')
    """
    type_name, _, doc = entry.partition(" ")
    return type_name, doc.strip()


def v0_1_to_v0_2(old: v0_1.Config) -> models.Config:
    """
    Convert a 0.1 configuration to the current schema.

    An empty scope list means no scope is asked for, and an empty prefix list
    means no ticket is asked for. When 0.1 asked for a ticket it was
    mandatory, hence ``required=True``.
    """
    logger.debug(f"Converting configuration from {v0_1.VERSION} to {models.VERSION}")

    scopes = models.ListScopes(list=list(old.scopes)) if old.scopes else None
    ticket = (
        models.Ticket(required=True, prefixes=list(old.ticket_prefixes))
        if old.ticket_prefixes
        else None
    )

    return models.Config(
        version=models.VERSION,
        types=dict(split_type_and_doc(entry) for entry in old.types),
        scopes=scopes,
        ticket=ticket,
        templates=models.Templates(commit=old.template),
    )


def v0_2_dev_0_to_v0_2_dev_1(old: v0_2_dev_0.Config) -> v0_2_dev_1.Config:
    """Add ``ticket.required``, which was implicitly true in 0.2-dev.0."""
    scopes = v0_2_dev_1.Scopes(accept="list", list=list(old.scopes.list)) if old.scopes else None
    ticket = (
        v0_2_dev_1.Ticket(required=True, prefixes=list(old.ticket.prefixes))
        if old.ticket
        else None
    )
    return v0_2_dev_1.Config(
        version=v0_2_dev_1.VERSION,
        types=dict(old.types),
        scopes=scopes,
        ticket=ticket,
        templates=v0_2_dev_1.Templates(commit=old.templates.commit),
    )


def v0_2_dev_1_to_v0_2_dev_2(old: v0_2_dev_1.Config) -> v0_2_dev_2.Config:
    scopes = v0_2_dev_2.Scopes(accept="list", list=list(old.scopes.list)) if old.scopes else None
    ticket = (
        v0_2_dev_2.Ticket(required=old.ticket.required, prefixes=list(old.ticket.prefixes))
        if old.ticket
        else None
    )
    return v0_2_dev_2.Config(
        version=v0_2_dev_2.VERSION,
        types=dict(old.types),
        scopes=scopes,
        ticket=ticket,
        templates=v0_2_dev_2.Templates(commit=old.templates.commit),
    )


def v0_2_dev_2_to_v0_2_dev_3(old: v0_2_dev_2.Config) -> v0_2_dev_3.Config:
    scopes = v0_2_dev_3.ListScopes(accept="list", list=list(old.scopes.list)) if old.scopes else None
    ticket = (
        v0_2_dev_3.Ticket(required=old.ticket.required, prefixes=list(old.ticket.prefixes))
        if old.ticket
        else None
    )
    return v0_2_dev_3.Config(
        version=v0_2_dev_3.VERSION,
        types=dict(old.types),
        scopes=scopes,
        ticket=ticket,
        templates=v0_2_dev_3.Templates(commit=old.templates.commit),
    )


def v0_2_dev_3_to_v0_2(old: v0_2_dev_3.Config) -> models.Config:
    """0.2-dev.3 already has the shape of 0.2; only the version changes."""
    if old.scopes is None:
        scopes = None
    elif isinstance(old.scopes, v0_2_dev_3.AnyScopes):
        scopes = models.AnyScopes()
    else:
        scopes = models.ListScopes(list=list(old.scopes.list))

    ticket = (
        models.Ticket(required=old.ticket.required, prefixes=list(old.ticket.prefixes))
        if old.ticket
        else None
    )
    return models.Config(
        version=models.VERSION,
        types=dict(old.types),
        scopes=scopes,
        ticket=ticket,
        templates=models.Templates(commit=old.templates.commit),
    )


__all__ = [
    "split_type_and_doc",
    "v0_1_to_v0_2",
    "v0_2_dev_0_to_v0_2_dev_1",
    "v0_2_dev_1_to_v0_2_dev_2",
    "v0_2_dev_2_to_v0_2_dev_3",
    "v0_2_dev_3_to_v0_2",
]
