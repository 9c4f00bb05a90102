"""Subset check of a child distributor's paths against its parent's regions."""

from __future__ import annotations

from typing import Sequence

from ...errors import OutOfParentScope
from ...models.domain import RegionPath, RegionTree
from .query import is_authorized


def validate_within_parent(
    include: Sequence[RegionPath],
    exclude: Sequence[RegionPath],
    parent_tree: RegionTree,
    parent_name: str,
) -> None:
    """Raise :class:`OutOfParentScope` for the first path the parent does not hold.

    Evaluated once against the parent's tree as it is now.
    """
    for path in include:
        if not is_authorized(parent_tree, path):
            raise OutOfParentScope(str(path), parent_name)
    for path in exclude:
        if not is_authorized(parent_tree, path):
            raise OutOfParentScope(str(path), parent_name, excluded=True)
