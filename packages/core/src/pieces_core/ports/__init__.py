from .store import IStore

__all__ = ["IStore"]
