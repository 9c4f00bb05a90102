"""Prefix-presence membership queries against an authorized-region tree."""

from __future__ import annotations

from ...models.domain import RegionPath, RegionTree


def is_authorized(tree: RegionTree, path: RegionPath) -> bool:
    """Return True when every key named by ``path`` is present in ``tree``.

    Only key presence is checked: a country or province whose children were
    all excluded still answers True at its own level.
    """
    country = tree.get(path.country)
    if country is None:
        return False
    if path.province is None:
        return True

    province = country.provinces.get(path.province)
    if province is None:
        return False
    if path.city is None:
        return True

    return path.city in province.cities
