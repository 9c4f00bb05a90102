"""Expansion of include/exclude region lists into an authorized-region tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from ...errors import EmptyIncludeSet, UnknownRegion
from ...models.domain import Country, Province, RegionPath, RegionTree

if TYPE_CHECKING:
    from ...data.locations_repository import LocationRegistry


def _ensure_country(tree: RegionTree, name: str, source: Country) -> Country:
    country = tree.get(name)
    if country is None:
        country = Country(code=source.code)
        tree[name] = country
    return country


def _ensure_province(country: Country, name: str, source: Province) -> Province:
    province = country.provinces.get(name)
    if province is None:
        province = Province(code=source.code)
        country.provinces[name] = province
    return province


def _merge_include(tree: RegionTree, path: RegionPath, registry: "LocationRegistry") -> None:
    source_country = registry.country(path.country)
    if source_country is None:
        raise UnknownRegion(f"Country {path.country} not found")
    country = _ensure_country(tree, path.country, source_country)

    if path.province is None:
        for province_name, source_province in source_country.provinces.items():
            province = _ensure_province(country, province_name, source_province)
            province.cities.update(source_province.cities)
        return

    source_province = source_country.provinces.get(path.province)
    if source_province is None:
        raise UnknownRegion(f"Province {path.province} not found in country {path.country}")
    province = _ensure_province(country, path.province, source_province)

    if path.city is None:
        province.cities.update(source_province.cities)
        return

    city = source_province.cities.get(path.city)
    if city is None:
        raise UnknownRegion(
            f"City {path.city} not found in province {path.province}, country {path.country}"
        )
    province.cities[path.city] = city


def _remove_exclude(tree: RegionTree, path: RegionPath) -> None:
    if path.province is None:
        tree.pop(path.country, None)
        return

    country = tree.get(path.country)
    if country is None:
        return
    if path.city is None:
        country.provinces.pop(path.province, None)
        return

    province = country.provinces.get(path.province)
    if province is None:
        return
    province.cities.pop(path.city, None)


def _restrict_to(tree: RegionTree, parent: RegionTree) -> None:
    for country_name in list(tree):
        parent_country = parent.get(country_name)
        if parent_country is None:
            del tree[country_name]
            continue
        country = tree[country_name]
        for province_name in list(country.provinces):
            parent_province = parent_country.provinces.get(province_name)
            if parent_province is None:
                del country.provinces[province_name]
                continue
            cities = country.provinces[province_name].cities
            for city_name in list(cities):
                if city_name not in parent_province.cities:
                    del cities[city_name]


def build_region_tree(
    include: Sequence[RegionPath],
    exclude: Sequence[RegionPath],
    registry: "LocationRegistry",
    parent: Optional[RegionTree] = None,
) -> RegionTree:
    """Build a fresh authorized-region tree for one distributor.

    Includes are resolved against the registry and merged additively; a
    country or province include snapshots everything currently beneath it.
    Excludes are then removed from the result built so far, never checked
    against the registry, so excluding something absent is a no-op. Removing
    a province or city leaves its ancestors in place even when they end up
    empty.

    When a parent tree is given, includes are still resolved against the
    registry but the merged result is cut down to what the parent holds, so
    a broad include never brings back regions the parent was denied.

    Country and province containers are new per tree; city values are shared
    with the registry.
    """
    if not include:
        raise EmptyIncludeSet()

    tree: RegionTree = {}
    for path in include:
        _merge_include(tree, path, registry)
    if parent is not None:
        _restrict_to(tree, parent)
    for path in exclude:
        _remove_exclude(tree, path)
    return tree
