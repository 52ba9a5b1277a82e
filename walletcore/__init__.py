"""Wallet domain core: entities, gateway interfaces, SQLite repositories and use cases."""

__version__ = "0.1.0"
__all__ = ["entity", "gateway", "repository", "usecases"]