"""Typed configuration: current schema, historical snapshots and loading."""

from .loader import config_from_toml, load_config, probe_version
from .models import VERSION, AnyScopes, Config, ListScopes, Templates, Ticket
from .repo import config_file, repo_root

__all__ = [
    "VERSION",
    "Config",
    "AnyScopes",
    "ListScopes",
    "Ticket",
    "Templates",
    "config_from_toml",
    "load_config",
    "probe_version",
    "config_file",
    "repo_root",
]
