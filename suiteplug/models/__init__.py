"""Suiteplug data models — all Pydantic v2, all frozen (immutable)."""

from suiteplug.models.plugins import (
    RESULT_KEYS,
    CallableSequence,
    Contribution,
    FinalizedPlugins,
    HookFactory,
    HookMapping,
    HookName,
    LifecycleContribution,
    PluginKind,
    RootHookContribution,
    RootHookSet,
    SingleCallable,
)

__all__ = [
    # kinds
    "PluginKind",
    "HookName",
    "RESULT_KEYS",
    # root hooks
    "RootHookSet",
    "HookMapping",
    "HookFactory",
    "RootHookContribution",
    # setup / teardown
    "SingleCallable",
    "CallableSequence",
    "LifecycleContribution",
    # results
    "Contribution",
    "FinalizedPlugins",
]
