from .exceptions import (
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

__all__ = [
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
]
