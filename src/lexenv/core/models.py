"""Inspection models for lexenv environment chains.

Live scopes hold arbitrary Python values and object references, so they are
not serializable. These models describe a chain at one point in time for
display, export and validation.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ScopeKind(str, Enum):
    """Construct that introduced a scope."""

    GLOBAL = "GLOBAL"
    FUNCTION = "FUNCTION"
    BLOCK = "BLOCK"
    LOOP = "LOOP"
    CLOSURE = "CLOSURE"


class BindingInfo(BaseModel):
    """A single binding as recorded in a snapshot."""

    name: str = Field(..., description="Bound identifier")
    value_repr: str = Field(..., description="repr() of the value, possibly truncated")
    value_type: str = Field(..., description="Python type name of the value")


class ScopeSnapshot(BaseModel):
    """One scope of a chain."""

    id: str = Field(..., description="Scope identifier")
    kind: ScopeKind
    label: str | None = Field(None, description="Human-readable scope name")
    depth: int = Field(..., ge=0, description="Number of ancestors")
    parent_id: str | None = Field(None, description="Enclosing scope ID")
    bindings: list[BindingInfo] = Field(default_factory=list)

    def get_binding(self, name: str) -> BindingInfo | None:
        """Find a binding by name."""
        for binding in self.bindings:
            if binding.name == name:
                return binding
        return None


class EnvironmentSnapshot(BaseModel):
    """A chain of scopes from a current scope up to the root.

    Scopes are keyed by ID; ``current_id`` names the scope the snapshot was
    taken from.
    """

    version: str = "1.0"
    current_id: str = Field(..., description="Scope the snapshot was taken from")
    scopes: dict[str, ScopeSnapshot] = Field(default_factory=dict)

    def ordered(self) -> list[ScopeSnapshot]:
        """Return scopes innermost first, following parent links.

        Stops at a missing parent or a repeated ID.
        """
        result: list[ScopeSnapshot] = []
        seen: set[str] = set()
        scope_id: str | None = self.current_id
        while scope_id is not None and scope_id not in seen:
            scope = self.scopes.get(scope_id)
            if scope is None:
                break
            seen.add(scope_id)
            result.append(scope)
            scope_id = scope.parent_id
        return result

    def visible(self) -> dict[str, BindingInfo]:
        """Return the bindings visible from the current scope.

        Inner bindings shadow outer ones with the same name.
        """
        visible: dict[str, BindingInfo] = {}
        for scope in self.ordered():
            for binding in scope.bindings:
                visible.setdefault(binding.name, binding)
        return visible
