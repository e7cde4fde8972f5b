"""Built-in demo scenarios.

Each scenario replays a small program's variable handling through a Runtime:
globals live in the root scope, function bodies, blocks and loop iterations
get their own scopes, and function values are Closures.
"""

from __future__ import annotations

from collections.abc import Callable

from lexenv.core.errors import UnresolvedIdentifier
from lexenv.core.models import ScopeKind
from lexenv.demos.base import Demo
from lexenv.environment import Closure, Runtime, Scope, capture, create_scope


class ScopeDemo(Demo):
    """Global, function, block, loop, anonymous-function and closure scopes."""

    @property
    def name(self) -> str:
        return "scope"

    @property
    def description(self) -> str:
        return "Variables declared in global, function, block, loop and closure scopes"

    def run(self, runtime: Runtime, emit: Callable[[str], None]) -> Scope | None:
        runtime.declare("globalVar", "I am a global variable")

        with runtime.function_scope("main") as main:
            runtime.declare("localVar", "I am a local variable")
            emit(runtime.lookup("globalVar"))
            emit(runtime.lookup("localVar"))

            with runtime.block_scope("if"):
                runtime.declare("blockVar", "I am a block variable")
                emit(runtime.lookup("blockVar"))
            emit(f"blockVar visible after block: {runtime.is_declared('blockVar')}")

            with runtime.loop(range(1), name="i", label="for") as iterations:
                for _ in iterations:
                    runtime.declare("loopVar", "I am a loop variable")
                    emit(runtime.lookup("loopVar"))
            emit(f"loopVar visible after loop: {runtime.is_declared('loopVar')}")

            def anon(frame: Scope) -> None:
                frame.declare("anonVar", "I am an anonymous function variable")
                emit(frame.lookup("anonVar"))

            runtime.closure(anon, label="anonFunc")()

            runtime.declare("closureVar", "I am a closure variable")
            closure_func = runtime.closure(
                lambda frame: emit(frame.lookup("closureVar")), label="closureFunc"
            )
            closure_func()

        return main


class ShadowingDemo(Demo):
    """Redeclaring a name in one scope, then shadowing it in a nested block."""

    @property
    def name(self) -> str:
        return "shadowing"

    @property
    def description(self) -> str:
        return "Redeclaration within a scope and shadowing from an inner block"

    def run(self, runtime: Runtime, emit: Callable[[str], None]) -> Scope | None:
        with runtime.function_scope("main") as main:
            first = runtime.declare("x", 10)
            emit(f"Value of x: {runtime.lookup('x')}")

            runtime.declare("x", 20)
            emit(f"Shadowed value of x: {runtime.lookup('x')}")

            with runtime.block_scope("block"):
                runtime.declare("x", 30)
                emit(f"Inner scope value of x: {runtime.lookup('x')}")

            emit(f"Outer scope value of x: {runtime.lookup('x')}")
            emit(f"First binding of x still holds: {first.value}")

        return main


class InternalMemoryDemo(Demo):
    """A global read from inside a function whose locals die with its frame."""

    @property
    def name(self) -> str:
        return "internal-memory"

    @property
    def description(self) -> str:
        return "Function locals versus a package-level variable"

    def run(self, runtime: Runtime, emit: Callable[[str], None]) -> Scope | None:
        runtime.declare("globalVar", 10)

        def add_body(frame: Scope) -> int:
            frame.declare("sum", frame.lookup("a") + frame.lookup("b"))
            return frame.lookup("sum")

        add = runtime.closure(add_body, params=("a", "b"), label="add")

        with runtime.function_scope("main") as main:
            runtime.declare("result", add(5, 15))
            runtime.declare("result2", add(runtime.lookup("globalVar"), 10))
            emit(f"Result2: {runtime.lookup('result2')}")
            emit(f"Result: {runtime.lookup('result')}")
            emit(f"sum visible in main: {runtime.is_declared('sum')}")

        return main


class GreeterDemo(Demo):
    """A function returning a closure over its own parameter."""

    @property
    def name(self) -> str:
        return "greeter"

    @property
    def description(self) -> str:
        return "Returned closures keep the exited call's scope alive"

    def run(self, runtime: Runtime, emit: Callable[[str], None]) -> Scope | None:
        def greeter_body(frame: Scope) -> Closure:
            return Closure(
                lambda inner: "Hello, " + inner.lookup("name"),
                capture(frame),
                label="greet",
            )

        greeter = runtime.closure(greeter_body, params=("name",), label="greeter")

        say_hi = greeter("GoLang")
        say_bye = greeter("Scopes")
        emit(f"Return function: {say_hi()}")
        emit(f"Second closure: {say_bye()}")

        # The greeter call has returned, but its scope is still reachable.
        say_hi.env.assign("name", "World")
        emit(f"After assigning through the captured scope: {say_hi()}")
        emit(f"Other closure unaffected: {say_bye()}")

        return say_hi.captured_scope


class CounterDemo(Demo):
    """A closure that increments a variable owned by an outer scope."""

    invocations = 3

    @property
    def name(self) -> str:
        return "counter"

    @property
    def description(self) -> str:
        return "Assignments through a closure reach the declaring scope"

    def run(self, runtime: Runtime, emit: Callable[[str], None]) -> Scope | None:
        runtime.declare("counter", 0)

        with runtime.block_scope("child") as child:
            increment = runtime.closure(
                lambda frame: frame.assign("counter", frame.lookup("counter") + 1).value,
                label="increment",
            )

        for _ in range(self.invocations):
            emit(f"increment() -> {increment()}")
        emit(f"counter = {runtime.lookup('counter')}")

        return child


class LoopCaptureDemo(Demo):
    """Closures created in separate iterations versus one shared variable."""

    iterations = 3

    @property
    def name(self) -> str:
        return "loop-capture"

    @property
    def description(self) -> str:
        return "Per-iteration scopes give each closure its own loop variable"

    def run(self, runtime: Runtime, emit: Callable[[str], None]) -> Scope | None:
        with runtime.function_scope("main") as main:
            per_iteration: list[Closure] = []
            with runtime.loop(range(self.iterations), name="i", label="for") as iterations:
                for _ in iterations:
                    per_iteration.append(
                        runtime.closure(lambda frame: frame.lookup("i"), label="get_i")
                    )
            emit(f"per-iteration: {[f() for f in per_iteration]}")

            runtime.declare("j", None)
            shared: list[Closure] = []
            for value in range(self.iterations):
                runtime.assign("j", value)
                shared.append(runtime.closure(lambda frame: frame.lookup("j"), label="get_j"))
            emit(f"shared: {[f() for f in shared]}")

        return per_iteration[-1].captured_scope


class SiblingsDemo(Demo):
    """Two sibling scopes declaring the same name."""

    @property
    def name(self) -> str:
        return "siblings"

    @property
    def description(self) -> str:
        return "Sibling scopes never see each other's bindings"

    def run(self, runtime: Runtime, emit: Callable[[str], None]) -> Scope | None:
        runtime.declare("x", "root")
        first = create_scope(runtime.root, ScopeKind.BLOCK, label="first")
        second = create_scope(runtime.root, ScopeKind.BLOCK, label="second")
        first.declare("x", 1)
        second.declare("x", 2)
        first.declare("only_first", True)

        emit(f"first x = {first.lookup('x')}")
        emit(f"second x = {second.lookup('x')}")
        emit(f"root x = {runtime.lookup('x')}")
        try:
            second.lookup("only_first")
        except UnresolvedIdentifier as e:
            emit(f"second cannot see only_first: {e}")

        return second
