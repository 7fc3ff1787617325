"""
Pydantic models for the current git-z configuration schema (version 0.2).

This is the only schema the rest of the program consumes. Older files are
parsed into their frozen snapshot (see :mod:`gitz.config.snapshots`) and
brought here through :mod:`gitz.config.conversions`.

Example configuration::

    version = "0.2"

    [types]
    feat = "introduces a new feature"
    fix = "patches a bug"

    [scopes]
    accept = "list"
    list = ["api", "cli"]

    [ticket]
    required = true
    prefixes = ["#"]

    [templates]
    commit = \"\"\"
    {{ type }}: {{ description }}
    \"\"\"
"""

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

VERSION = "0.2"

DEFAULT_COMMIT_TEMPLATE = """\
{{ type }}{% if scope %}({{ scope }}){% endif %}{% if breaking_change %}!{% endif %}: {{ description }}

# Feel free to enter a longer description here.

{% if ticket %}Refs: {{ ticket }}{% endif %}

{% if breaking_change %}BREAKING CHANGE: {{ breaking_change }}{% endif %}
"""

_FROZEN = ConfigDict(frozen=True, extra="ignore")


class AnyScopes(BaseModel):
    """Accept any arbitrary scope."""

    model_config = _FROZEN

    accept: Literal["any"] = "any"


class ListScopes(BaseModel):
    """Accept only the scopes in ``list``."""

    model_config = _FROZEN

    accept: Literal["list"] = "list"
    list: List[str] = Field(description="The valid scopes")


Scopes = Annotated[Union[AnyScopes, ListScopes], Field(discriminator="accept")]


class Ticket(BaseModel):
    """Ticket reference configuration."""

    model_config = _FROZEN

    required: bool = Field(description="Whether the ticket reference is required")
    prefixes: List[str] = Field(description="The valid ticket prefixes")


class Templates(BaseModel):
    model_config = _FROZEN

    commit: str = Field(description="The commit message template")


class Config(BaseModel):
    """
    The git-z configuration.

    Attributes:
        version: The version of the configuration, always ``VERSION``
        types: The valid commit types and their description, in dialog order
        scopes: The accepted scopes; None when no scope should be asked for
        ticket: The ticket reference configuration; None when no ticket is asked
        templates: The message templates
    """

    model_config = _FROZEN

    version: str
    types: Dict[str, str]
    scopes: Optional[Scopes] = None
    ticket: Optional[Ticket] = None
    templates: Templates

    @classmethod
    def default(cls) -> "Config":
        """Configuration used when the repository has no ``git-z.toml``."""
        return cls(
            version=VERSION,
            types={
                "feat": "introduces a new feature",
                "fix": "patches a bug",
            },
            templates=Templates(commit=DEFAULT_COMMIT_TEMPLATE),
        )


__all__ = [
    "VERSION",
    "DEFAULT_COMMIT_TEMPLATE",
    "AnyScopes",
    "ListScopes",
    "Scopes",
    "Ticket",
    "Templates",
    "Config",
]
