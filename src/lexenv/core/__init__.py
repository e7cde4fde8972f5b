"""Core module containing configuration, errors, snapshot models, serializer and validator."""

from lexenv.core.config import LexenvConfig, get_config, reload_config
from lexenv.core.errors import LexenvError, ResourceExhausted, UnresolvedIdentifier
from lexenv.core.models import (
    BindingInfo,
    EnvironmentSnapshot,
    ScopeKind,
    ScopeSnapshot,
)
from lexenv.core.serializer import (
    SerializationError,
    deserialize,
    deserialize_from_dict,
    serialize,
    serialize_to_dict,
)
from lexenv.core.validator import (
    ValidationError,
    ValidationErrorType,
    ValidationResult,
    validate_snapshot,
)

__all__ = [
    "BindingInfo",
    "EnvironmentSnapshot",
    "LexenvConfig",
    "LexenvError",
    "ResourceExhausted",
    "ScopeKind",
    "ScopeSnapshot",
    "SerializationError",
    "UnresolvedIdentifier",
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
    "deserialize",
    "deserialize_from_dict",
    "get_config",
    "reload_config",
    "serialize",
    "serialize_to_dict",
    "validate_snapshot",
]
