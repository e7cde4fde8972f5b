"""Functional interface to the environment chain.

These functions are the operations an embedding program calls at construct
boundaries and at each declaration, read or write site. They delegate to
Scope so that object-style and function-style callers share one code path.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from lexenv.core.models import BindingInfo, EnvironmentSnapshot, ScopeSnapshot
from lexenv.environment.closure import EnvironmentRef
from lexenv.environment.scope import Binding, Scope


def declare(scope: Scope, name: str, value: Any) -> Binding:
    """Declare ``name`` in ``scope``, shadowing any outer or earlier binding."""
    return scope.declare(name, value)


def lookup(scope: Scope, name: str) -> Any:
    """Resolve ``name`` from ``scope`` outward and return its value."""
    return scope.lookup(name)


def resolve(scope: Scope, name: str) -> Binding:
    """Resolve ``name`` from ``scope`` outward and return the Binding itself."""
    return scope.resolve(name)


def assign(scope: Scope, name: str, value: Any) -> Binding:
    """Update the existing binding of ``name`` visible from ``scope`` in place."""
    return scope.assign(name, value)


def capture(scope: Scope) -> EnvironmentRef:
    """Return a shared reference to ``scope`` for embedding in a closure."""
    return EnvironmentRef(scope)


def is_declared(scope: Scope, name: str, local: bool = False) -> bool:
    return scope.is_declared(name, local=local)


def chain(scope: Scope) -> Iterator[Scope]:
    """Iterate from ``scope`` to the root."""
    return scope.chain()


def _value_repr(value: Any, limit: int) -> str:
    try:
        text = repr(value)
    except Exception:
        return f"<{type(value).__name__}>"
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


def snapshot(scope: Scope) -> EnvironmentSnapshot:
    """Describe the chain from ``scope`` to the root.

    Returns:
        EnvironmentSnapshot with one ScopeSnapshot per scope on the chain.
    """
    limit = scope.config.value_repr_limit
    scopes: dict[str, ScopeSnapshot] = {}
    for node in scope.chain():
        bindings = node.binding_list()
        scopes[node.id] = ScopeSnapshot(
            id=node.id,
            kind=node.kind,
            label=node.label,
            depth=node.depth,
            parent_id=node.parent.id if node.parent is not None else None,
            bindings=[
                BindingInfo(
                    name=binding.name,
                    value_repr=_value_repr(binding.value, limit),
                    value_type=type(binding.value).__name__,
                )
                for binding in bindings
            ],
        )
    return EnvironmentSnapshot(current_id=scope.id, scopes=scopes)
