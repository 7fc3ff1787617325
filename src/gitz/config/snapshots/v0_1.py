"""Configuration for git-z, version 0.1."""

# Never update the fields of the models defined in this file. Create a new
# snapshot instead.

from typing import List

from pydantic import BaseModel, ConfigDict

VERSION = "0.1"


class Config(BaseModel):
    """
    The git-z 0.1 configuration.

    Attributes:
        version: The version of the configuration
        types: The valid commit types, each one word followed by its description
        scopes: The valid scopes
        template: The commit message template
        ticket_prefixes: The valid ticket prefixes
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    version: str
    types: List[str]
    scopes: List[str]
    template: str
    ticket_prefixes: List[str]
