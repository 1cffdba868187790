"""Suiteplug plugin system — root hooks, global setup and global teardown.

Candidate modules export up to three plugin kinds.  The registry validates
each contribution's shape on load and merges everything on finalize; the
require loader turns file paths or module names into candidate modules.
"""

from suiteplug.plugins.loader import RequireError, RequireLoader
from suiteplug.plugins.registry import PluginRegistry
from suiteplug.plugins.validators import VALIDATORS, ShapeValidationError

__all__ = [
    "PluginRegistry",
    "ShapeValidationError",
    "VALIDATORS",
    "RequireLoader",
    "RequireError",
]
