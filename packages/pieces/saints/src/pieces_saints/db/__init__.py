from .models import Base, MessageContentModel, UserModel, messages_table
from .repository import MessageContentRepository, MessageRepository, UserRepository

__all__ = [
    "Base",
    "MessageContentModel",
    "MessageContentRepository",
    "MessageRepository",
    "UserModel",
    "UserRepository",
    "messages_table",
]
