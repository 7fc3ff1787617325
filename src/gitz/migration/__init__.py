"""
Comment-preserving migration of configuration files to the current version.

The typed loader in :mod:`gitz.config` can read every supported version, but
only in memory. This package rewrites the file itself: it edits the TOML
document so that the user's comments and layout survive, and refreshes the
documentation comments git-z writes.
"""

from .document import ConfigDocument, Entry, Section
from .decisions import Ask, AskForTicket, DontAsk
from .updater import ConfigUpdater, UpdatedConfig

__all__ = [
    "Ask",
    "AskForTicket",
    "ConfigDocument",
    "ConfigUpdater",
    "DontAsk",
    "Entry",
    "Section",
    "UpdatedConfig",
]
