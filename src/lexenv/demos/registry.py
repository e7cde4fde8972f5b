"""Demo registry and lookup."""

from __future__ import annotations

from lexenv.core.config import LexenvConfig
from lexenv.demos.base import Demo, DemoNotFoundError, DemoResult
from lexenv.demos.scenarios import (
    CounterDemo,
    GreeterDemo,
    InternalMemoryDemo,
    LoopCaptureDemo,
    ScopeDemo,
    ShadowingDemo,
    SiblingsDemo,
)


def get_default_demos() -> list[Demo]:
    """Return built-in demos shipped with lexenv."""
    return [
        ScopeDemo(),
        ShadowingDemo(),
        InternalMemoryDemo(),
        GreeterDemo(),
        CounterDemo(),
        LoopCaptureDemo(),
        SiblingsDemo(),
    ]


def get_demo(name: str) -> Demo:
    """Find a built-in demo by name.

    Raises:
        DemoNotFoundError: If no demo has that name.
    """
    for demo in get_default_demos():
        if demo.name == name:
            return demo
    raise DemoNotFoundError(name)


def run_demo(name: str, config: LexenvConfig | None = None) -> DemoResult:
    """Run a built-in demo against a fresh runtime."""
    return get_demo(name).execute(config)
