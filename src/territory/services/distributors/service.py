"""High-level orchestration for distributor requests."""

from __future__ import annotations

import logging
from typing import Literal, Optional, Sequence

from ...data.locations_repository import LocationRegistry
from ...errors import AlreadyExists, InvalidFormat, NotFound, TerritoryError
from ...models.domain import Distributor
from ..permissions import (
    build_region_tree,
    canonicalize,
    is_authorized,
    parse_region_path,
    parse_region_paths,
    validate_within_parent,
)
from .store import DistributorStore

AccessAnswer = Literal["YES", "NO"]


def _required_name(value: Optional[str], reason: str) -> str:
    name = canonicalize(value or "")
    if not name:
        raise InvalidFormat(reason)
    return name


class DistributorService:
    """Creates distributors and answers access queries.

    The registry and store are passed in explicitly; the service keeps no
    other state.
    """

    def __init__(self, registry: LocationRegistry, store: DistributorStore) -> None:
        self.registry = registry
        self.store = store

    def create(
        self,
        name: str,
        include: Sequence[str],
        exclude: Sequence[str] = (),
        parent: Optional[str] = None,
    ) -> Distributor:
        name = _required_name(name, "Invalid name")
        if parent is not None:
            parent = _required_name(parent, "Invalid parent name")

        include_paths = parse_region_paths(list(include))
        exclude_paths = parse_region_paths(list(exclude))

        try:
            with self.store.write():
                if name in self.store:
                    raise AlreadyExists(name)

                parent_distributor = None
                if parent is not None:
                    parent_distributor = self.store.find(parent)
                    if parent_distributor is None:
                        raise NotFound(parent, role="Parent distributor")
                    validate_within_parent(include_paths, exclude_paths, parent_distributor.regions, parent)

                distributor = Distributor(
                    name=name,
                    include=list(include),
                    exclude=list(exclude),
                    parent=parent,
                    regions=build_region_tree(
                        include_paths,
                        exclude_paths,
                        self.registry,
                        parent=parent_distributor.regions if parent_distributor else None,
                    ),
                )
                self.store.create(distributor)
        except TerritoryError as exc:
            logging.warning(f"Rejected distributor '{name}': {exc.error_code}: {exc.reason}")
            raise

        logging.info(
            f"Created distributor '{name}' (parent={parent}) with {len(distributor.regions)} countries"
        )
        return distributor

    def get(self, name: str) -> Distributor:
        name = canonicalize(name)
        with self.store.read():
            return self.store.get(name)

    def check_access(self, name: str, region: str) -> AccessAnswer:
        name = canonicalize(name)
        with self.store.read():
            distributor = self.store.get(name)
            path = parse_region_path(region)
            return "YES" if is_authorized(distributor.regions, path) else "NO"
