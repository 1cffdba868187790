"""Shared test fixtures for Suiteplug."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from suiteplug.plugins.registry import PluginRegistry


@pytest.fixture
def registry() -> PluginRegistry:
    """Provide a fresh, empty PluginRegistry."""
    return PluginRegistry.create()


@pytest.fixture
def make_candidate() -> Callable[..., SimpleNamespace]:
    """Factory fixture: build a module-like candidate from keyword exports."""

    def _factory(**exports: Any) -> SimpleNamespace:
        return SimpleNamespace(**exports)

    return _factory


@pytest.fixture
def hook_fns() -> SimpleNamespace:
    """Distinct named no-op callables, so list comparisons are by identity."""

    def _named(name: str) -> Callable[[], None]:
        def _fn() -> None:
            return None

        _fn.__name__ = name
        return _fn

    return SimpleNamespace(**{name: _named(name) for name in ("a", "b", "c", "d", "e")})


@pytest.fixture
def write_plugin(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory fixture: write a plugin module to the temp dir and return its path."""

    def _factory(filename: str, source: str) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _factory
