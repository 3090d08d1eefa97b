"""Persistence adapters."""
from .in_memory import (
    InMemoryBuyerRepository,
    InMemoryOrderRepository,
    InMemoryStore,
    InMemoryUnitOfWork,
)

__all__ = [
    "InMemoryBuyerRepository",
    "InMemoryOrderRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
]
