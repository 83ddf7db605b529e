from .action import Action, ActionRunner, create_action
from .auth import AuthValidation, CustomAuth, PieceAuth, SecretTextAuth
from .context import ActionContext, RunInfo, TriggerContext, WebhookPayload
from .piece import Piece, create_piece
from .property import (
    DropdownOption,
    DropdownState,
    Property,
    PropertyDefinition,
    PropertyType,
    check_props,
    validate_props,
)
from .trigger import Trigger, TriggerStrategy, create_trigger

__all__ = [
    "Action",
    "ActionContext",
    "ActionRunner",
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
]
