"""Configuration for git-z, version 0.2-dev.1."""

# Never update the fields of the models defined in this file. Create a new
# snapshot instead.

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict

VERSION = "0.2-dev.1"

_FROZEN = ConfigDict(frozen=True, extra="ignore")


class Scopes(BaseModel):
    model_config = _FROZEN

    accept: Literal["list"]
    list: List[str]


class Ticket(BaseModel):
    """Ticket reference configuration, now with ``required``."""

    model_config = _FROZEN

    required: bool
    prefixes: List[str]


class Templates(BaseModel):
    model_config = _FROZEN

    commit: str


class Config(BaseModel):
    """The git-z 0.2-dev.1 configuration."""

    model_config = _FROZEN

    version: str
    types: Dict[str, str]
    scopes: Optional[Scopes] = None
    ticket: Optional[Ticket] = None
    templates: Templates
