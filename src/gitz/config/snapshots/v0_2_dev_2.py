"""
Configuration for git-z, version 0.2-dev.2.

The shape is the one of 0.2-dev.1. What changed is the meaning of the ticket
prefixes: they now carry their own ``#`` instead of the commit template
adding it in front of ``{{ ticket }}``.
"""

# Never update the fields of the models defined in this file. Create a new
# snapshot instead.

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict

VERSION = "0.2-dev.2"

_FROZEN = ConfigDict(frozen=True, extra="ignore")


class Scopes(BaseModel):
    model_config = _FROZEN

    accept: Literal["list"]
    list: List[str]


class Ticket(BaseModel):
    model_config = _FROZEN

    required: bool
    prefixes: List[str]


class Templates(BaseModel):
    model_config = _FROZEN

    commit: str


class Config(BaseModel):
    """The git-z 0.2-dev.2 configuration."""

    model_config = _FROZEN

    version: str
    types: Dict[str, str]
    scopes: Optional[Scopes] = None
    ticket: Optional[Ticket] = None
    templates: Templates
