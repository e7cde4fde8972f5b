"""Lexical environment chain.

Scopes, bindings and closures, plus the function-style operations and the
Runtime helper used by embedding programs.
"""

from lexenv.environment.chain import (
    assign,
    capture,
    chain,
    declare,
    is_declared,
    lookup,
    resolve,
    snapshot,
)
from lexenv.environment.closure import Closure, EnvironmentRef
from lexenv.environment.runtime import Runtime
from lexenv.environment.scope import Binding, Scope, create_scope

__all__ = [
    "Binding",
    "Closure",
    "EnvironmentRef",
    "Runtime",
    "Scope",
    "assign",
    "capture",
    "chain",
    "create_scope",
    "declare",
    "is_declared",
    "lookup",
    "resolve",
    "snapshot",
]
