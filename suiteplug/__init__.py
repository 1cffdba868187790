"""Suiteplug: plugin registration for test-running hosts.

Candidate modules contribute root hooks (``mochaHooks``), global setup
(``mochaGlobalSetup``) and global teardown (``mochaGlobalTeardown``).  The
``PluginRegistry`` validates every contribution as it is loaded and merges
them into a single result the host wires into its run lifecycle.
"""

__version__ = "0.1.0"
__description__ = "Plugin registration for test-running hosts"

from suiteplug.models.plugins import FinalizedPlugins, PluginKind
from suiteplug.plugins.loader import RequireError, RequireLoader
from suiteplug.plugins.registry import PluginRegistry
from suiteplug.plugins.validators import ShapeValidationError

__all__ = [
    "PluginRegistry",
    "PluginKind",
    "FinalizedPlugins",
    "ShapeValidationError",
    "RequireLoader",
    "RequireError",
    "__version__",
]
