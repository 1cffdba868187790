"""Plugin models — extension kinds, normalized contributions, root hook sets.

A candidate module contributes to at most three fixed extension kinds.  Every
contribution is normalized at ``load`` time into one of the tagged variants
below so that ``finalize()`` never re-inspects raw shapes:

* root hooks   -> ``HookMapping`` | ``HookFactory``
* setup/teardown -> ``SingleCallable`` | ``CallableSequence``
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, TypedDict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------

class PluginKind(str, Enum):
    """The extension points a candidate module may contribute to.

    The value is the attribute (or mapping key) a candidate module exports:

    * ``mochaHooks`` — root hooks, a mapping or a factory returning one.
    * ``mochaGlobalSetup`` — callables run once before anything else.
    * ``mochaGlobalTeardown`` — callables run once after everything else.
    """

    ROOT_HOOKS = "mochaHooks"
    GLOBAL_SETUP = "mochaGlobalSetup"
    GLOBAL_TEARDOWN = "mochaGlobalTeardown"


class HookName(str, Enum):
    """Lifecycle slots of a root hook set."""

    BEFORE_ALL = "beforeAll"
    BEFORE_EACH = "beforeEach"
    AFTER_ALL = "afterAll"
    AFTER_EACH = "afterEach"


# Result keys of ``PluginRegistry.finalize()``
RESULT_KEYS: dict[PluginKind, str] = {
    PluginKind.ROOT_HOOKS: "rootHooks",
    PluginKind.GLOBAL_SETUP: "globalSetup",
    PluginKind.GLOBAL_TEARDOWN: "globalTeardown",
}


# ---------------------------------------------------------------------------
# Root hook set
# ---------------------------------------------------------------------------

HookTuple = tuple[Callable[..., Any], ...]


class RootHookSet(BaseModel):
    """Validated root hooks of a single contribution (or a merge of several).

    Fields are populated only from the camelCase lifecycle keys.  Each key may
    be absent, ``None``, a single callable or a list/tuple of callables.  Any
    other key, including the snake_case field names, is ignored.

    Examples
    --------
    >>> hooks = RootHookSet.model_validate({"beforeEach": print})
    >>> hooks.before_each == (print,)
    True
    >>> hooks.after_all
    ()
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    before_all: HookTuple = Field(default=(), alias=HookName.BEFORE_ALL.value)
    before_each: HookTuple = Field(default=(), alias=HookName.BEFORE_EACH.value)
    after_all: HookTuple = Field(default=(), alias=HookName.AFTER_ALL.value)
    after_each: HookTuple = Field(default=(), alias=HookName.AFTER_EACH.value)

    @field_validator("before_all", "before_each", "after_all", "after_each", mode="before")
    @classmethod
    def _cast_tuple(cls, value: Any) -> Any:
        if value is None:
            return ()
        if callable(value):
            return (value,)
        if isinstance(value, (list, tuple)):
            return tuple(value)
        raise ValueError("must be a function or an array of functions")

    @classmethod
    def merge(cls, *hook_sets: RootHookSet) -> RootHookSet:
        """Concatenate hook sets slot by slot, in argument order."""
        merged: dict[str, list[Callable[..., Any]]] = {
            name: [] for name in cls.model_fields
        }
        for hook_set in hook_sets:
            for name in merged:
                merged[name].extend(getattr(hook_set, name))
        return cls.model_validate(
            {cls.model_fields[name].alias: hooks for name, hooks in merged.items()}
        )

    def as_dict(self) -> dict[str, list[Callable[..., Any]]]:
        """Return the four lifecycle slots keyed by their camelCase names."""
        return {
            HookName.BEFORE_ALL.value: list(self.before_all),
            HookName.BEFORE_EACH.value: list(self.before_each),
            HookName.AFTER_ALL.value: list(self.after_all),
            HookName.AFTER_EACH.value: list(self.after_each),
        }

    @property
    def hook_count(self) -> int:
        return (
            len(self.before_all)
            + len(self.before_each)
            + len(self.after_all)
            + len(self.after_each)
        )


# ---------------------------------------------------------------------------
# Contribution variants
# ---------------------------------------------------------------------------

class HookMapping(BaseModel):
    """A root hook contribution given directly as a mapping."""

    model_config = ConfigDict(frozen=True)

    hooks: RootHookSet


class HookFactory(BaseModel):
    """A root hook contribution given as a zero-argument (async) factory."""

    model_config = ConfigDict(frozen=True)

    factory: Callable[[], Any]


class SingleCallable(BaseModel):
    """A setup/teardown contribution given as one callable."""

    model_config = ConfigDict(frozen=True)

    func: Callable[[], Any]

    def export(self) -> Callable[[], Any]:
        return self.func

    @property
    def callable_count(self) -> int:
        return 1


class CallableSequence(BaseModel):
    """A setup/teardown contribution given as a sequence of callables."""

    model_config = ConfigDict(frozen=True)

    funcs: tuple[Callable[[], Any], ...]

    def export(self) -> list[Callable[[], Any]]:
        return list(self.funcs)

    @property
    def callable_count(self) -> int:
        return len(self.funcs)


RootHookContribution = Union[HookMapping, HookFactory]
LifecycleContribution = Union[SingleCallable, CallableSequence]
Contribution = Union[RootHookContribution, LifecycleContribution]


# ---------------------------------------------------------------------------
# Finalized result
# ---------------------------------------------------------------------------

class FinalizedPlugins(TypedDict, total=False):
    """Merged result of ``PluginRegistry.finalize()``.

    A key is present only when at least one contribution of its kind was
    loaded, so ``"globalSetup" in result`` distinguishes "nothing registered"
    from "registered but empty".
    """

    rootHooks: dict[str, list[Callable[..., Any]]]
    globalSetup: list[Any]
    globalTeardown: list[Any]
