"""Require loader — imports candidate modules and feeds them to the registry.

A *require spec* names one candidate module, either as a file path::

    tests/root_hooks.py
    ./support/setup.py

or as a dotted module name importable from ``sys.path``::

    myproject.testing.hooks

Specs are loaded in the order given; that order becomes the merge order of
the registry.
"""

from __future__ import annotations

import hashlib
import importlib
import importlib.util
import logging
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from suiteplug.plugins.registry import PluginRegistry

logger = logging.getLogger(__name__)


class RequireError(ImportError):
    """Raised when a require spec cannot be located or imported."""


class RequireLoader:
    """Resolves require specs and loads each module into a registry.

    Parameters
    ----------
    registry:
        The ``PluginRegistry`` receiving every required module.
    base_dir:
        Directory relative file specs are resolved against.

    Examples
    --------
    >>> loader = RequireLoader(PluginRegistry())
    >>> loader.loaded
    []
    """

    def __init__(
        self,
        registry: PluginRegistry,
        *,
        base_dir: Path = Path("."),
    ) -> None:
        self._registry = registry
        self._base_dir = base_dir
        self._loaded: list[str] = []

    @property
    def registry(self) -> PluginRegistry:
        return self._registry

    @property
    def loaded(self) -> list[str]:
        """Specs loaded so far, in load order."""
        return list(self._loaded)

    # -- Public API ---------------------------------------------------------

    def require(self, spec: str) -> ModuleType:
        """Import *spec* and load it into the registry.

        Raises
        ------
        RequireError
            If the spec cannot be located or importing it fails.
        ShapeValidationError
            If the module exports a malformed plugin.
        """
        module = self.resolve(spec)
        self._registry.load(module)
        self._loaded.append(spec)
        logger.info("Required %s", spec)
        return module

    def require_all(self, specs: Iterable[str]) -> list[ModuleType]:
        """Require every spec in order, stopping at the first failure."""
        return [self.require(spec) for spec in specs]

    def resolve(self, spec: str) -> ModuleType:
        """Import the module named by *spec* without loading it.

        Raises
        ------
        RequireError
            If the spec cannot be located or importing it fails.
        """
        if _is_path_spec(spec):
            return self._import_file(self._base_dir / spec)
        try:
            return importlib.import_module(spec)
        except Exception as exc:
            raise RequireError(f"Cannot import required module '{spec}': {exc}") from exc

    # -- Internal helpers ---------------------------------------------------

    def _import_file(self, path: Path) -> ModuleType:
        path = path.resolve()
        if not path.is_file():
            raise RequireError(f"Required file not found: {path}")

        digest = hashlib.sha256(str(path).encode("utf-8")).hexdigest()[:12]
        module_name = f"_suiteplug_required_{path.stem}_{digest}"
        existing = sys.modules.get(module_name)
        if existing is not None:
            return existing

        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise RequireError(f"Cannot create an import spec for {path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            del sys.modules[module_name]
            raise RequireError(f"Error while importing {path}: {exc}") from exc
        logger.debug("Imported %s as %s", path, module_name)
        return module


def _is_path_spec(spec: str) -> bool:
    return (
        spec.endswith(".py")
        or os.sep in spec
        or (os.altsep is not None and os.altsep in spec)
    )
