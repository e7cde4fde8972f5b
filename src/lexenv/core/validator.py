"""Snapshot validation module.

Checks that a (possibly hand-edited or deserialized) EnvironmentSnapshot
describes a well-formed chain: every parent exists, depths agree with parent
links and no scope is its own ancestor.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from lexenv.core.models import EnvironmentSnapshot


class ValidationErrorType(str, Enum):
    """Types of validation errors."""

    DANGLING_PARENT_REF = "dangling_parent_reference"
    MISSING_CURRENT_SCOPE = "missing_current_scope"
    DEPTH_MISMATCH = "depth_mismatch"
    PARENT_CYCLE = "parent_cycle"
    KEY_MISMATCH = "key_mismatch"
    DUPLICATE_BINDING = "duplicate_binding"


@dataclass
class ValidationError:
    """A single validation error."""

    error_type: ValidationErrorType
    scope_id: str
    message: str


@dataclass
class ValidationResult:
    """Result of snapshot validation."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    def add_error(self, error_type: ValidationErrorType, scope_id: str, message: str) -> None:
        """Add a validation error."""
        self.errors.append(
            ValidationError(error_type=error_type, scope_id=scope_id, message=message)
        )
        self.is_valid = False


def validate_snapshot(snapshot: EnvironmentSnapshot) -> ValidationResult:
    """Validate a snapshot for chain integrity.

    Args:
        snapshot: The snapshot to validate.

    Returns:
        ValidationResult containing validation status and any errors found.
    """
    result = ValidationResult(is_valid=True)
    scopes = snapshot.scopes

    if snapshot.current_id not in scopes:
        result.add_error(
            error_type=ValidationErrorType.MISSING_CURRENT_SCOPE,
            scope_id=snapshot.current_id,
            message=f"Current scope '{snapshot.current_id}' is not part of the snapshot",
        )

    for scope_id, scope in scopes.items():
        if scope.id != scope_id:
            result.add_error(
                error_type=ValidationErrorType.KEY_MISMATCH,
                scope_id=scope_id,
                message=f"Scope keyed as '{scope_id}' declares id '{scope.id}'",
            )

        counts = Counter(binding.name for binding in scope.bindings)
        for name in sorted(n for n, count in counts.items() if count > 1):
            result.add_error(
                error_type=ValidationErrorType.DUPLICATE_BINDING,
                scope_id=scope_id,
                message=f"Scope '{scope_id}' binds '{name}' more than once",
            )

        if scope.parent_id is None:
            if scope.depth != 0:
                result.add_error(
                    error_type=ValidationErrorType.DEPTH_MISMATCH,
                    scope_id=scope_id,
                    message=f"Root scope '{scope_id}' has depth {scope.depth}, expected 0",
                )
            continue

        parent = scopes.get(scope.parent_id)
        if parent is None:
            result.add_error(
                error_type=ValidationErrorType.DANGLING_PARENT_REF,
                scope_id=scope_id,
                message=f"Scope '{scope_id}' references non-existent parent '{scope.parent_id}'",
            )
        elif scope.depth != parent.depth + 1:
            result.add_error(
                error_type=ValidationErrorType.DEPTH_MISMATCH,
                scope_id=scope_id,
                message=f"Scope '{scope_id}' has depth {scope.depth}, "
                f"expected {parent.depth + 1}",
            )

    return _validate_cycles(snapshot, result)


def _validate_cycles(snapshot: EnvironmentSnapshot, result: ValidationResult) -> ValidationResult:
    """Flag scopes whose parent chain loops back on itself."""
    reported: set[str] = set()
    for start_id in snapshot.scopes:
        seen: set[str] = set()
        scope_id: str | None = start_id
        while scope_id is not None and scope_id in snapshot.scopes:
            if scope_id in seen:
                if scope_id not in reported:
                    reported.add(scope_id)
                    result.add_error(
                        error_type=ValidationErrorType.PARENT_CYCLE,
                        scope_id=scope_id,
                        message=f"Scope '{scope_id}' is its own ancestor",
                    )
                break
            seen.add(scope_id)
            scope_id = snapshot.scopes[scope_id].parent_id
    return result
