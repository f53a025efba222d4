from .in_memory_repository import InMemoryAccountRepository

__all__ = ["InMemoryAccountRepository"]
