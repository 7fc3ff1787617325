"""Answers the user gives before a migration, passed to the transforms as is."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Ask:
    """Keep asking for a ticket; ``require`` makes it mandatory."""

    require: bool


@dataclass(frozen=True)
class DontAsk:
    """Stop asking for a ticket."""


AskForTicket = Union[Ask, DontAsk]

__all__ = ["Ask", "DontAsk", "AskForTicket"]
