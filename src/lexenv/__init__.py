"""lexenv - lexical environment engine.

Nested scopes, shadowing and closures that capture their defining scope by
reference.
"""

from lexenv.core.errors import LexenvError, ResourceExhausted, UnresolvedIdentifier
from lexenv.core.models import ScopeKind
from lexenv.environment import (
    Binding,
    Closure,
    EnvironmentRef,
    Runtime,
    Scope,
    assign,
    capture,
    create_scope,
    declare,
    lookup,
    resolve,
    snapshot,
)

__version__ = "0.1.0"

__all__ = [
    "Binding",
    "Closure",
    "EnvironmentRef",
    "LexenvError",
    "ResourceExhausted",
    "Runtime",
    "Scope",
    "ScopeKind",
    "UnresolvedIdentifier",
    "assign",
    "capture",
    "create_scope",
    "declare",
    "lookup",
    "resolve",
    "snapshot",
]
