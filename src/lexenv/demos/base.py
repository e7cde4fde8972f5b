"""Base interface for demo scenarios."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from pydantic import BaseModel, Field

from lexenv.core.config import LexenvConfig
from lexenv.core.models import EnvironmentSnapshot
from lexenv.environment import Runtime, Scope, snapshot


class DemoResult(BaseModel):
    """Outcome of running one demo."""

    name: str = Field(..., description="Demo name")
    description: str = Field(..., description="What the demo shows")
    outputs: list[str] = Field(default_factory=list, description="Lines the demo emitted")
    snapshot: EnvironmentSnapshot = Field(..., description="Chain of the demo's focus scope")


class DemoNotFoundError(Exception):
    """Raised when a demo name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Demo not found: {name}")


class Demo(ABC):
    """A scenario that drives a Runtime the way a host program would."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique demo name."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line summary."""

    @abstractmethod
    def run(self, runtime: Runtime, emit: Callable[[str], None]) -> Scope | None:
        """Run the scenario and return the scope whose chain is worth showing.

        Returning None shows the runtime's current scope.
        """

    def execute(self, config: LexenvConfig | None = None) -> DemoResult:
        """Run against a fresh runtime and collect the result."""
        runtime = Runtime(config=config)
        outputs: list[str] = []
        focus = self.run(runtime, outputs.append) or runtime.current
        return DemoResult(
            name=self.name,
            description=self.description,
            outputs=outputs,
            snapshot=snapshot(focus),
        )
