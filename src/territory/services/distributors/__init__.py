"""Distributor service helpers."""

from .service import AccessAnswer, DistributorService
from .store import DistributorStore, ReadWriteLock

__all__ = [
    "DistributorService",
    "DistributorStore",
    "ReadWriteLock",
    "AccessAnswer",
]
