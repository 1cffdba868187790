"""Shape validators — one per plugin kind, resolved through ``VALIDATORS``.

Each validator takes the raw value a candidate module exported under a kind's
name and either returns the normalized contribution or raises
``ShapeValidationError``.  Validators never mutate the value they inspect.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from pydantic import ValidationError

from suiteplug.models.plugins import (
    CallableSequence,
    Contribution,
    HookFactory,
    HookMapping,
    PluginKind,
    RootHookSet,
    SingleCallable,
)


class ShapeValidationError(ValueError):
    """Raised when a contribution does not match its kind's required shape.

    Attributes
    ----------
    kind:
        The offending ``PluginKind``.
    expected:
        Human-readable description of the required shape.
    """

    code = "ERR_UNSUPPORTED"

    def __init__(self, kind: PluginKind, expected: str) -> None:
        self.kind = kind
        self.expected = expected
        super().__init__(f"{kind.value} {expected}")


ROOT_HOOKS_SHAPE = (
    "must be an object or a function returning (or fulfilling with) an object"
)
FUNCTION_ARRAY_SHAPE = "must be a function or an array of functions"


def build_root_hook_set(value: Any) -> RootHookSet:
    """Validate a root hook mapping into a ``RootHookSet``.

    Used both at load time (direct mappings) and at finalize time (values
    produced by factories).

    Raises
    ------
    ShapeValidationError
        If *value* is not a mapping, or one of its lifecycle slots is not a
        callable or a list/tuple of callables.
    """
    if not isinstance(value, Mapping):
        raise ShapeValidationError(PluginKind.ROOT_HOOKS, ROOT_HOOKS_SHAPE)
    try:
        return RootHookSet.model_validate(dict(value))
    except ValidationError as exc:
        slots = ", ".join(
            dict.fromkeys(str(err["loc"][0]) for err in exc.errors() if err.get("loc"))
        )
        raise ShapeValidationError(
            PluginKind.ROOT_HOOKS,
            f"hooks ({slots}) must each be a function or an array of functions",
        ) from exc


def validate_root_hooks(value: Any) -> Contribution:
    """Root hooks: a mapping, or a zero-argument factory returning one.

    Sequences are rejected even though their elements may be valid.
    """
    if isinstance(value, (list, tuple)):
        raise ShapeValidationError(PluginKind.ROOT_HOOKS, ROOT_HOOKS_SHAPE)
    if isinstance(value, Mapping):
        return HookMapping(hooks=build_root_hook_set(value))
    if callable(value):
        return HookFactory(factory=value)
    raise ShapeValidationError(PluginKind.ROOT_HOOKS, ROOT_HOOKS_SHAPE)


def _function_array_validator(kind: PluginKind) -> Callable[[Any], Contribution]:
    def _validate(value: Any) -> Contribution:
        if isinstance(value, (list, tuple)):
            if not all(callable(item) for item in value):
                raise ShapeValidationError(kind, FUNCTION_ARRAY_SHAPE)
            return CallableSequence(funcs=tuple(value))
        if callable(value):
            return SingleCallable(func=value)
        raise ShapeValidationError(kind, FUNCTION_ARRAY_SHAPE)

    _validate.__name__ = f"validate_{kind.name.lower()}"
    return _validate


VALIDATORS: dict[PluginKind, Callable[[Any], Contribution]] = {
    PluginKind.ROOT_HOOKS: validate_root_hooks,
    PluginKind.GLOBAL_SETUP: _function_array_validator(PluginKind.GLOBAL_SETUP),
    PluginKind.GLOBAL_TEARDOWN: _function_array_validator(PluginKind.GLOBAL_TEARDOWN),
}
