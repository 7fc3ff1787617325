"""Configuration for git-z, version 0.2-dev.3."""

# Never update the fields of the models defined in this file. Create a new
# snapshot instead.

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

VERSION = "0.2-dev.3"

_FROZEN = ConfigDict(frozen=True, extra="ignore")


class AnyScopes(BaseModel):
    model_config = _FROZEN

    accept: Literal["any"]


class ListScopes(BaseModel):
    model_config = _FROZEN

    accept: Literal["list"]
    list: List[str]


Scopes = Annotated[Union[AnyScopes, ListScopes], Field(discriminator="accept")]


class Ticket(BaseModel):
    model_config = _FROZEN

    required: bool
    prefixes: List[str]


class Templates(BaseModel):
    model_config = _FROZEN

    commit: str


class Config(BaseModel):
    """The git-z 0.2-dev.3 configuration, where scopes can accept anything."""

    model_config = _FROZEN

    version: str
    types: Dict[str, str]
    scopes: Optional[Scopes] = None
    ticket: Optional[Ticket] = None
    templates: Templates
