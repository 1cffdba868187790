"""Plugin registry — accumulates, validates and merges plugin contributions.

Lifecycle
---------
An external loader hands candidate modules to ``load()`` one at a time, in
the order they should contribute.  ``finalize()`` then produces a single
merged result for the host:

* root hooks from every contribution are concatenated slot by slot,
* global setup / teardown contributions are passed through as loaded.

The registry is always re-finalizable: ``load()`` may be called after
``finalize()`` and the next ``finalize()`` reflects the new state.  State is
append-only and owned exclusively by the registry; candidates are never
mutated.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Mapping
from typing import Any

from suiteplug.models.plugins import (
    RESULT_KEYS,
    CallableSequence,
    Contribution,
    FinalizedPlugins,
    HookFactory,
    HookMapping,
    PluginKind,
    RootHookSet,
    SingleCallable,
)
from suiteplug.plugins.validators import (
    VALIDATORS,
    ShapeValidationError,
    build_root_hook_set,
)

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (str, bytes, int, float, bool)


class PluginRegistry:
    """Collects root hooks, global setup and global teardown contributions.

    Examples
    --------
    >>> import asyncio
    >>> registry = PluginRegistry.create()
    >>> registry.load({"mochaGlobalSetup": print})
    >>> asyncio.run(registry.finalize())["globalSetup"] == [print]
    True
    """

    def __init__(self) -> None:
        self._contributions: dict[PluginKind, list[Contribution]] = {
            kind: [] for kind in PluginKind
        }

    @classmethod
    def create(cls) -> PluginRegistry:
        """Return a fresh, empty registry."""
        return cls()

    @property
    def kinds(self) -> tuple[PluginKind, ...]:
        return tuple(self._contributions)

    # -- Accumulation -------------------------------------------------------

    def load(self, candidate: Any) -> None:
        """Validate and accumulate whatever *candidate* contributes.

        *candidate* may be a module, any object exposing plugin attributes,
        or a mapping keyed by plugin kind names.  ``None`` and scalars are
        ignored, as are attributes unrelated to the three plugin kinds.
        Falsy exports are skipped, except that an empty ``mochaHooks``
        mapping still counts as a root hook contribution with no hooks.

        Kinds are processed in ``PluginKind`` order and the first invalid
        one aborts the call; kinds processed before it stay loaded.

        Raises
        ------
        ShapeValidationError
            If a contribution does not match its kind's required shape.
        """
        if candidate is None or isinstance(candidate, _SCALAR_TYPES):
            return

        for kind in PluginKind:
            value = _lookup(candidate, kind)
            if _is_absent(kind, value):
                continue
            contribution = VALIDATORS[kind](value)
            self._contributions[kind].append(contribution)
            logger.debug(
                "Accepted %s contribution from %r (%s).",
                kind.value,
                _describe(candidate),
                type(contribution).__name__,
            )

    def count(self, kind: PluginKind) -> int:
        """Return the number of contributions accumulated for *kind*."""
        return len(self._contributions[kind])

    def get_stats(self) -> dict[str, Any]:
        """Return summary statistics about accumulated contributions.

        Returns
        -------
        dict[str, Any]
            Keys: ``total`` and a ``by_kind`` dict mapping each
            ``PluginKind`` value to its contribution count.
        """
        by_kind = {kind.value: len(items) for kind, items in self._contributions.items()}
        return {"total": sum(by_kind.values()), "by_kind": by_kind}

    # -- Finalization -------------------------------------------------------

    async def finalize(self) -> FinalizedPlugins:
        """Resolve and merge all accumulated contributions.

        Root hook factories are invoked concurrently; their results are
        merged strictly in load order.  Kinds without contributions are
        absent from the result.

        Raises
        ------
        ShapeValidationError
            If a root hook factory produces something other than a mapping
            of hook callables.
        Exception
            Whatever a root hook factory raises, unchanged.
        """
        finalized: FinalizedPlugins = {}

        root_hooks = list(self._contributions[PluginKind.ROOT_HOOKS])
        if root_hooks:
            merged = await _aggregate_root_hooks(root_hooks)
            finalized["rootHooks"] = merged.as_dict()

        for kind in (PluginKind.GLOBAL_SETUP, PluginKind.GLOBAL_TEARDOWN):
            contributions = self._contributions[kind]
            if contributions:
                finalized[RESULT_KEYS[kind]] = [
                    _export(contribution) for contribution in contributions
                ]

        logger.info(
            "Finalized plugins: %s",
            ", ".join(
                f"{kind.value}={len(items)}"
                for kind, items in self._contributions.items()
            ),
        )
        return finalized

    def finalize_sync(self) -> FinalizedPlugins:
        """Run ``finalize()`` to completion for hosts without an event loop.

        Raises
        ------
        RuntimeError
            If called while an event loop is already running.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.finalize())
        raise RuntimeError(
            "finalize_sync() cannot be called from a running event loop; "
            "await finalize() instead"
        )

    def __repr__(self) -> str:
        counts = ", ".join(
            f"{kind.value}={len(items)}" for kind, items in self._contributions.items()
        )
        return f"PluginRegistry({counts})"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _lookup(candidate: Any, kind: PluginKind) -> Any:
    if isinstance(candidate, Mapping):
        return candidate.get(kind.value)
    return getattr(candidate, kind.value, None)


def _is_absent(kind: PluginKind, value: Any) -> bool:
    if isinstance(value, Mapping):
        return not value and kind is not PluginKind.ROOT_HOOKS
    return not value


def _describe(candidate: Any) -> str:
    return getattr(candidate, "__name__", type(candidate).__name__)


def _export(contribution: Contribution) -> Any:
    if isinstance(contribution, (SingleCallable, CallableSequence)):
        return contribution.export()
    raise TypeError(f"Not a setup/teardown contribution: {contribution!r}")


async def _resolve_root_hooks(contribution: Contribution) -> RootHookSet:
    if isinstance(contribution, HookMapping):
        return contribution.hooks
    if isinstance(contribution, HookFactory):
        result = contribution.factory()
        if inspect.isawaitable(result):
            result = await result
        return build_root_hook_set(result)
    raise TypeError(f"Not a root hook contribution: {contribution!r}")


async def _aggregate_root_hooks(contributions: list[Contribution]) -> RootHookSet:
    """Resolve every root hook contribution concurrently, merge in load order.

    ``asyncio.gather`` returns results by position, never by completion
    order.  On the first failure the remaining resolutions are cancelled and
    the error is re-raised unchanged once every sibling has settled.
    """
    tasks = [
        asyncio.ensure_future(_resolve_root_hooks(contribution))
        for contribution in contributions
    ]
    try:
        resolved = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return RootHookSet.merge(*resolved)


__all__ = ["PluginRegistry", "ShapeValidationError"]
