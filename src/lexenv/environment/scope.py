"""Scopes and bindings.

A Scope maps names to Binding objects and links to its enclosing scope.
Resolution walks the parent links innermost first. Scopes hold only ordinary
references, so a scope lives for as long as any construct, closure or child
scope still refers to it.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Iterator, Mapping
from contextlib import nullcontext
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from lexenv.core.config import LexenvConfig, get_config
from lexenv.core.errors import ResourceExhausted, UnresolvedIdentifier
from lexenv.core.models import ScopeKind

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Binding:
    """A named storage slot owned by exactly one scope.

    Bindings compare by identity: re-declaring a name creates a new Binding
    and leaves the previous object (and its value) untouched.
    """

    name: str
    value: Any
    declared_scope: Scope = field(repr=False)


def _check_name(name: str) -> None:
    if not isinstance(name, str):
        raise TypeError(f"Identifier must be a string, got {type(name).__name__}")
    if not name:
        raise ValueError("Identifier must not be empty")


class Scope:
    """A node in an environment chain.

    Children inherit the parent's configuration unless one is given. The
    per-scope lock serializes declare/assign; lookups never take it.
    """

    def __init__(
        self,
        parent: Scope | None = None,
        kind: ScopeKind | None = None,
        label: str | None = None,
        config: LexenvConfig | None = None,
    ) -> None:
        """Create a scope.

        Args:
            parent: Enclosing scope, or None for a root scope.
            kind: Construct that introduced the scope. Defaults to GLOBAL for
                a root and BLOCK otherwise.
            label: Optional human-readable name used in errors and snapshots.
            config: Resource limits; inherited from the parent when omitted.

        Raises:
            ResourceExhausted: If the scope would exceed the maximum depth.
        """
        if config is None:
            config = parent.config if parent is not None else get_config()
        depth = 0 if parent is None else parent.depth + 1
        if depth > config.max_scope_depth:
            raise ResourceExhausted("scope depth", config.max_scope_depth)

        self.parent = parent
        self.kind = kind or (ScopeKind.GLOBAL if parent is None else ScopeKind.BLOCK)
        self.label = label
        self.depth = depth
        self.config = config
        self.id = uuid.uuid4().hex[:16]
        self._bindings: dict[str, Binding] = {}
        self._lock = threading.Lock() if config.thread_safe else nullcontext()

    def __repr__(self) -> str:
        label = f" {self.label!r}" if self.label else ""
        return f"<Scope {self.kind.value}{label} depth={self.depth} id={self.id}>"

    @property
    def bindings(self) -> Mapping[str, Binding]:
        """Read-only view of the bindings declared directly in this scope."""
        return MappingProxyType(self._bindings)

    @property
    def display_name(self) -> str:
        """Label if set, otherwise kind and ID."""
        return self.label or f"{self.kind.value.lower()}:{self.id}"

    def chain(self) -> Iterator[Scope]:
        """Iterate from this scope up to the root."""
        scope: Scope | None = self
        while scope is not None:
            yield scope
            scope = scope.parent

    def declare(self, name: str, value: Any) -> Binding:
        """Bind ``name`` in this scope, replacing any binding of the same name.

        Raises:
            ResourceExhausted: If a new name would exceed the binding limit.
        """
        _check_name(name)
        with self._lock:
            previous = self._bindings.get(name)
            limit = self.config.max_bindings_per_scope
            if previous is None and len(self._bindings) >= limit:
                raise ResourceExhausted("bindings per scope", limit)
            try:
                binding = Binding(name=name, value=value, declared_scope=self)
            except MemoryError as e:
                raise ResourceExhausted("binding allocation") from e
            self._bindings[name] = binding

        if previous is not None:
            logger.debug(f"Redeclared '{name}' in {self.display_name}")
        return binding

    def resolve(self, name: str) -> Binding:
        """Find the innermost binding of ``name`` visible from this scope.

        Raises:
            UnresolvedIdentifier: If no scope in the chain binds ``name``.
        """
        for scope in self.chain():
            binding = scope._bindings.get(name)
            if binding is not None:
                return binding
        logger.debug(f"Unresolved identifier '{name}' from {self.display_name}")
        raise UnresolvedIdentifier(name, self.display_name)

    def lookup(self, name: str) -> Any:
        """Return the value of the innermost binding of ``name``."""
        return self.resolve(name).value

    def assign(self, name: str, value: Any) -> Binding:
        """Overwrite the value of the innermost existing binding of ``name``.

        The binding keeps its identity and owning scope. Nothing is declared
        when the name is unbound.

        Raises:
            UnresolvedIdentifier: If no scope in the chain binds ``name``.
        """
        binding = self.resolve(name)
        with binding.declared_scope._lock:
            binding.value = value
        return binding

    def is_declared(self, name: str, local: bool = False) -> bool:
        """Check whether ``name`` is bound here (or anywhere up the chain)."""
        if local:
            return name in self._bindings
        return any(name in scope._bindings for scope in self.chain())

    def binding_list(self) -> list[Binding]:
        """Copy of this scope's bindings, taken under the scope lock."""
        with self._lock:
            return list(self._bindings.values())


def create_scope(
    parent: Scope | None = None,
    kind: ScopeKind | None = None,
    label: str | None = None,
    config: LexenvConfig | None = None,
) -> Scope:
    """Create a scope nested in ``parent`` (or a new root).

    Raises:
        ResourceExhausted: If the depth limit is exceeded or allocation fails.
    """
    try:
        scope = Scope(parent, kind=kind, label=label, config=config)
    except MemoryError as e:
        raise ResourceExhausted("scope allocation") from e
    logger.debug(f"Created {scope!r}")
    return scope
