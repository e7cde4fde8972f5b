"""Embedding helper that tracks the current scope.

The environment chain itself has no notion of "where execution is". A host
program enters and leaves constructs; Runtime pairs each construct with a
fresh child scope and restores the enclosing scope when the construct exits.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any, TypeVar

from lexenv.core.config import LexenvConfig
from lexenv.core.models import EnvironmentSnapshot, ScopeKind
from lexenv.environment.chain import capture, snapshot
from lexenv.environment.closure import Closure
from lexenv.environment.scope import Binding, Scope, create_scope

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Runtime:
    """Current-scope tracker for a host program."""

    def __init__(
        self,
        root: Scope | None = None,
        *,
        config: LexenvConfig | None = None,
    ) -> None:
        """Create a runtime.

        Args:
            root: Existing root scope. A GLOBAL root is created when omitted.
            config: Configuration for a newly created root (ignored when
                ``root`` is given, which already carries its own).
        """
        self._root = root or create_scope(None, ScopeKind.GLOBAL, label="global", config=config)
        self._current = self._root

    @property
    def root(self) -> Scope:
        return self._root

    @property
    def current(self) -> Scope:
        """The innermost scope of the construct currently executing."""
        return self._current

    def declare(self, name: str, value: Any) -> Binding:
        return self._current.declare(name, value)

    def lookup(self, name: str) -> Any:
        return self._current.lookup(name)

    def resolve(self, name: str) -> Binding:
        return self._current.resolve(name)

    def assign(self, name: str, value: Any) -> Binding:
        return self._current.assign(name, value)

    def is_declared(self, name: str, local: bool = False) -> bool:
        return self._current.is_declared(name, local=local)

    @contextmanager
    def enter(self, kind: ScopeKind, label: str | None = None) -> Iterator[Scope]:
        """Run a construct body in a new child of the current scope.

        The previous scope is restored on exit, including exit by exception.
        """
        previous = self._current
        scope = create_scope(previous, kind, label=label)
        self._current = scope
        try:
            yield scope
        finally:
            self._current = previous

    def function_scope(self, label: str | None = None):
        """Scope for a function body."""
        return self.enter(ScopeKind.FUNCTION, label)

    def block_scope(self, label: str | None = None):
        """Scope for an if/switch/bare block body."""
        return self.enter(ScopeKind.BLOCK, label)

    @contextmanager
    def call_frame(self, closure: Closure) -> Iterator[Scope]:
        """Make the closure's captured scope current for the ``with`` body.

        Used to run host code "inside" a function value that was defined
        elsewhere, such as reading a captured variable from a returned closure.
        """
        previous = self._current
        self._current = closure.captured_scope
        try:
            yield self._current
        finally:
            self._current = previous

    @contextmanager
    def loop(
        self,
        items: Iterable[T],
        name: str | None = None,
        label: str | None = None,
    ) -> Iterator[Iterator[tuple[Scope, T]]]:
        """Run each loop iteration in its own fresh LOOP scope.

        The ``with`` body receives an iterator of ``(scope, item)`` pairs;
        ``scope`` is current while the caller handles the item. Leaving the
        ``with`` block restores the enclosing scope, whether the loop ran to
        completion, was broken out of or raised.

        Args:
            items: Values the loop walks over.
            name: Loop variable declared in each iteration scope, if given.
            label: Label for the iteration scopes.
        """
        enclosing = self._current

        def iterations() -> Iterator[tuple[Scope, T]]:
            for index, item in enumerate(items):
                self._current = enclosing
                iteration_label = f"{label or 'loop'}[{index}]"
                scope = create_scope(enclosing, ScopeKind.LOOP, label=iteration_label)
                if name is not None:
                    scope.declare(name, item)
                self._current = scope
                yield scope, item
            self._current = enclosing

        try:
            yield iterations()
        finally:
            self._current = enclosing

    def closure(
        self,
        body: Callable[[Scope], Any],
        params: Sequence[str] = (),
        label: str | None = None,
    ) -> Closure:
        """Create a closure over the current scope."""
        return Closure(body, capture(self._current), params=params, label=label)

    def snapshot(self) -> EnvironmentSnapshot:
        return snapshot(self._current)
