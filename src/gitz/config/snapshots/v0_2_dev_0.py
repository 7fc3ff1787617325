"""Configuration for git-z, version 0.2-dev.0."""

# Never update the fields of the models defined in this file. Create a new
# snapshot instead.

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict

VERSION = "0.2-dev.0"

_FROZEN = ConfigDict(frozen=True, extra="ignore")


class Scopes(BaseModel):
    """Only a list of scopes can be accepted in this version."""

    model_config = _FROZEN

    accept: Literal["list"]
    list: List[str]


class Ticket(BaseModel):
    model_config = _FROZEN

    prefixes: List[str]


class Templates(BaseModel):
    model_config = _FROZEN

    commit: str


class Config(BaseModel):
    """The git-z 0.2-dev.0 configuration."""

    model_config = _FROZEN

    version: str
    types: Dict[str, str]
    scopes: Optional[Scopes] = None
    ticket: Optional[Ticket] = None
    templates: Templates
