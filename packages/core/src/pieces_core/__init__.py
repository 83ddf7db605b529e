"""pieces-core — Foundation package for the automation pieces toolkit.

Declares the host contract (properties, auth, actions, triggers, pieces),
the exception hierarchy and validation helpers shared by every piece.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemoryStore
from .correlation import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

# ── Framework ───────────────────────────────────────────────────
from .framework import (
    Action,
    ActionContext,
    AuthValidation,
    CustomAuth,
    DropdownOption,
    DropdownState,
    Piece,
    PieceAuth,
    Property,
    PropertyDefinition,
    PropertyType,
    RunInfo,
    SecretTextAuth,
    Trigger,
    TriggerContext,
    TriggerStrategy,
    WebhookPayload,
    check_props,
    create_action,
    create_piece,
    create_trigger,
    validate_props,
)

# ── Ports ───────────────────────────────────────────────────────
from .ports import IStore

# ── Primitives ──────────────────────────────────────────────────
from .primitives.exceptions import (
    ActionNotFoundError,
    AuthenticationError,
    InfrastructureError,
    NotFoundError,
    PersistenceError,
    PieceRegistrationError,
    PiecesError,
    RegistrationError,
    TriggerNotFoundError,
    ValidationError,
)

# ── Validation ──────────────────────────────────────────────────
from .validation import ValidationResult, errors_from_pydantic, validate_model

__all__ = [
    # Adapters
    "InMemoryStore",
    # Correlation
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    # Framework
    "Action",
    "ActionContext",
    "AuthValidation",
    "CustomAuth",
    "DropdownOption",
    "DropdownState",
    "Piece",
    "PieceAuth",
    "Property",
    "PropertyDefinition",
    "PropertyType",
    "RunInfo",
    "SecretTextAuth",
    "Trigger",
    "TriggerContext",
    "TriggerStrategy",
    "WebhookPayload",
    "check_props",
    "create_action",
    "create_piece",
    "create_trigger",
    "validate_props",
    # Ports
    "IStore",
    # Primitives
    "ActionNotFoundError",
    "AuthenticationError",
    "InfrastructureError",
    "NotFoundError",
    "PersistenceError",
    "PieceRegistrationError",
    "PiecesError",
    "RegistrationError",
    "TriggerNotFoundError",
    "ValidationError",
    # Validation
    "ValidationResult",
    "errors_from_pydantic",
    "validate_model",
]
