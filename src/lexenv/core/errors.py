"""Error taxonomy for lexenv.

Resolution failures and resource limits are the only conditions the engine
reports. Both propagate unchanged to whatever embeds it.
"""

from __future__ import annotations


class LexenvError(Exception):
    """Base class for all lexenv errors."""


class UnresolvedIdentifier(LexenvError):
    """Raised when a name is not bound anywhere in a scope chain."""

    def __init__(self, name: str, scope_label: str | None = None) -> None:
        self.name = name
        self.scope_label = scope_label
        where = f" (from scope '{scope_label}')" if scope_label else ""
        super().__init__(f"Unresolved identifier: '{name}'{where}")


class ResourceExhausted(LexenvError):
    """Raised when a scope or binding cannot be allocated."""

    def __init__(self, resource: str, limit: int | None = None) -> None:
        self.resource = resource
        self.limit = limit
        detail = f" (limit {limit})" if limit is not None else ""
        super().__init__(f"Resource exhausted: {resource}{detail}")
