"""Framework and infrastructure exceptions for pieces-core."""

from __future__ import annotations


class PiecesError(Exception):
    """Root exception for the entire pieces toolkit."""


class NotFoundError(PiecesError):
    """Raised when an action, trigger or resource is not found."""


class ActionNotFoundError(NotFoundError):
    """Raised when a piece has no action registered under a name."""

    def __init__(self, piece_name: str, action_name: str) -> None:
        self.piece_name = piece_name
        self.action_name = action_name
        super().__init__(f"Piece {piece_name!r} has no action {action_name!r}")


class TriggerNotFoundError(NotFoundError):
    """Raised when a piece has no trigger registered under a name."""

    def __init__(self, piece_name: str, trigger_name: str) -> None:
        self.piece_name = piece_name
        self.trigger_name = trigger_name
        super().__init__(f"Piece {piece_name!r} has no trigger {trigger_name!r}")


class ValidationError(PiecesError):
    """Raised when input validation fails.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class AuthenticationError(PiecesError):
    """Raised when an action requires auth and none (or an invalid one) is given."""


class InfrastructureError(PiecesError):
    """Base class for all infrastructure-related errors."""


class PersistenceError(InfrastructureError):
    """Base class for all persistence-related errors."""


class RegistrationError(PiecesError):
    """Base class for piece registration errors."""


class PieceRegistrationError(RegistrationError):
    """Raised when a piece declares two actions or triggers with the same name."""
