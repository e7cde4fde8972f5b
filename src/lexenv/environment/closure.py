"""Captured environments and closures.

A closure never copies bindings. It holds an EnvironmentRef, which is a strong
reference to the scope active when the closure was made, so the closure sees
every later declare/assign on that scope and keeps its whole parent chain
alive after the creating construct has finished.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from lexenv.core.models import ScopeKind
from lexenv.environment.scope import Binding, Scope, create_scope


class EnvironmentRef:
    """Shared handle on a captured scope."""

    def __init__(self, scope: Scope) -> None:
        self._scope = scope

    @property
    def scope(self) -> Scope:
        """The referenced scope itself (not a copy)."""
        return self._scope

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnvironmentRef):
            return NotImplemented
        return self._scope is other._scope

    def __hash__(self) -> int:
        return id(self._scope)

    def __repr__(self) -> str:
        return f"EnvironmentRef({self._scope!r})"

    def declare(self, name: str, value: Any) -> Binding:
        return self._scope.declare(name, value)

    def lookup(self, name: str) -> Any:
        return self._scope.lookup(name)

    def resolve(self, name: str) -> Binding:
        return self._scope.resolve(name)

    def assign(self, name: str, value: Any) -> Binding:
        return self._scope.assign(name, value)

    def is_declared(self, name: str, local: bool = False) -> bool:
        return self._scope.is_declared(name, local=local)

    def child(self, kind: ScopeKind = ScopeKind.CLOSURE, label: str | None = None) -> Scope:
        """Create a new scope nested in the captured one."""
        return create_scope(self._scope, kind=kind, label=label)


class Closure:
    """A callable paired with a captured environment.

    Each call runs ``body`` with a fresh CLOSURE scope nested in the captured
    scope. Positional arguments are declared there under ``params``; locals the
    body declares vanish with that scope unless something captures it.
    """

    def __init__(
        self,
        body: Callable[..., Any],
        env: EnvironmentRef,
        params: Sequence[str] = (),
        label: str | None = None,
    ) -> None:
        self.body = body
        self.env = env
        self.params = tuple(params)
        self.label = label or getattr(body, "__name__", None)

    @property
    def captured_scope(self) -> Scope:
        return self.env.scope

    def __repr__(self) -> str:
        return f"<Closure {self.label or 'anonymous'} over {self.env.scope!r}>"

    def __call__(self, *args: Any) -> Any:
        if len(args) != len(self.params):
            raise TypeError(
                f"{self.label or 'closure'}() takes {len(self.params)} "
                f"argument(s) but {len(args)} were given"
            )
        frame = self.env.child(ScopeKind.CLOSURE, label=self.label)
        for param, arg in zip(self.params, args):
            frame.declare(param, arg)
        return self.body(frame)
