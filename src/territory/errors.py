"""Error taxonomy for the territory permission engine.

Every error is a deterministic input-validation failure: it carries the HTTP
status the transport layer should answer with, a machine-readable kind and a
human-readable reason.
"""

from __future__ import annotations

from typing import Any

from fastapi import status


class TerritoryError(Exception):
    """Base class for all permission engine errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    @property
    def error_code(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a response payload."""
        return {"error": self.error_code, "reason": self.reason}


class InvalidFormat(TerritoryError):
    """Malformed region path or missing required field."""


class EmptyIncludeSet(TerritoryError):
    """A distributor was submitted without any granted region."""

    def __init__(self, reason: str = "Distributor doesn't have access to any region to start with") -> None:
        super().__init__(reason)


class UnknownRegion(TerritoryError):
    """An include path does not resolve in the location registry."""


class OutOfParentScope(TerritoryError):
    """A path is not contained in the parent distributor's authorized regions."""

    def __init__(self, path: str, parent: str, *, excluded: bool = False) -> None:
        label = "Excluded region" if excluded else "Region"
        super().__init__(f"{label} {path} is outside the authorized area of parent distributor {parent}")
        self.path = path
        self.parent = parent


class AlreadyExists(TerritoryError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, name: str) -> None:
        super().__init__(f"Distributor {name} already exists")
        self.name = name


class NotFound(TerritoryError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, name: str, *, role: str = "Distributor") -> None:
        super().__init__(f"{role} {name} not found")
        self.name = name
