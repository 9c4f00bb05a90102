"""In-memory distributor store guarded by a reader/writer lock."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from ...errors import AlreadyExists, NotFound
from ...models.domain import Distributor


class ReadWriteLock:
    """Shared/exclusive lock that lets queued writers go before new readers."""

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._condition:
            while self._writer or self._waiting_writers:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if not self._readers:
                    self._condition.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._condition:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._condition.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._condition:
                self._writer = False
                self._condition.notify_all()


class DistributorStore:
    """Name to distributor mapping.

    ``create``, ``get`` and ``find`` do not lock on their own; callers hold
    ``read()`` or ``write()`` around them so that a multi-step operation
    (validate against a parent, build, install) is atomic as a whole.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._distributors: dict[str, Distributor] = {}

    def read(self):
        return self._lock.read()

    def write(self):
        return self._lock.write()

    def find(self, name: str) -> Optional[Distributor]:
        return self._distributors.get(name)

    def get(self, name: str) -> Distributor:
        distributor = self._distributors.get(name)
        if distributor is None:
            raise NotFound(name)
        return distributor

    def create(self, distributor: Distributor) -> None:
        if distributor.name in self._distributors:
            raise AlreadyExists(distributor.name)
        self._distributors[distributor.name] = distributor

    def __contains__(self, name: object) -> bool:
        return name in self._distributors

    def __len__(self) -> int:
        return len(self._distributors)
