"""Property tests for closures, loop capture and snapshots."""

from __future__ import annotations

from contextlib import ExitStack

from hypothesis import given, settings, strategies as st

from lexenv.core.config import LexenvConfig
from lexenv.core.validator import validate_snapshot
from lexenv.environment import Closure, Runtime, capture, create_scope, declare, lookup

CONFIG = LexenvConfig(_env_file=None)


@given(invocations=st.integers(min_value=0, max_value=50), depth=st.integers(1, 5))
@settings(max_examples=50)
def test_counter_closure_reaches_root(invocations: int, depth: int) -> None:
    """
    **Property: assignment through a closure reaches the declaring scope**

    A closure captured below the root that increments ``counter`` N times
    SHALL leave lookup(root, "counter") == N.
    """
    root = create_scope(config=CONFIG)
    declare(root, "counter", 0)
    scope = root
    for _ in range(depth):
        scope = create_scope(scope)
    increment = Closure(
        lambda s: s.assign("counter", s.lookup("counter") + 1), capture(scope)
    )
    for _ in range(invocations):
        increment()
    assert lookup(root, "counter") == invocations


@given(items=st.lists(st.integers(), max_size=20))
@settings(max_examples=50)
def test_per_iteration_closures_are_independent(items: list[int]) -> None:
    """
    **Property: per-iteration capture**

    Closures created in different loop iterations SHALL each see their own
    iteration's value, even after the loop has finished.
    """
    runtime = Runtime(config=CONFIG)
    with runtime.loop(items, name="item") as iterations:
        closures = [runtime.closure(lambda s: s.lookup("item")) for _ in iterations]
    assert [closure() for closure in closures] == items


@given(items=st.lists(st.integers(), min_size=1, max_size=20))
@settings(max_examples=50)
def test_mutating_one_iteration_leaves_others(items: list[int]) -> None:
    """
    **Property: iteration scopes do not share state**

    Assigning through one iteration's captured scope SHALL not change what
    closures from other iterations observe.
    """
    runtime = Runtime(config=CONFIG)
    with runtime.loop(items, name="item") as iterations:
        closures = [runtime.closure(lambda s: s.lookup("item")) for _ in iterations]
    closures[0].env.assign("item", "changed")
    assert closures[0]() == "changed"
    assert [closure() for closure in closures[1:]] == items[1:]


@given(
    labels=st.lists(st.text(min_size=1, max_size=10), max_size=6),
    value=st.integers(),
)
@settings(max_examples=50)
def test_runtime_snapshots_are_valid(labels: list[str], value: int) -> None:
    """
    **Property: snapshots of live chains validate**

    For any nesting of function scopes, the snapshot of the innermost scope
    SHALL pass validation and list every scope innermost first.
    """
    runtime = Runtime(config=CONFIG)
    with ExitStack() as stack:
        for label in labels:
            stack.enter_context(runtime.function_scope(label))
            runtime.declare("v", value)
        snap = runtime.snapshot()

    assert validate_snapshot(snap).is_valid
    assert [s.label for s in snap.ordered()] == list(reversed(labels)) + ["global"]
    assert runtime.current is runtime.root
