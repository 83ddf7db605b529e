from .store import InMemoryStore

__all__ = ["InMemoryStore"]
