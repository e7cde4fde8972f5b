"""Demo scenarios.

Small programs replayed through the environment engine to show how scopes,
shadowing and closures resolve names.
"""

from lexenv.demos.base import Demo, DemoNotFoundError, DemoResult
from lexenv.demos.registry import get_default_demos, get_demo, run_demo

__all__ = [
    "Demo",
    "DemoNotFoundError",
    "DemoResult",
    "get_default_demos",
    "get_demo",
    "run_demo",
]
