"""Domain models for the location hierarchy and distributor permissions."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True, frozen=True)
class City:
    """Leaf of the location hierarchy. Shared read-only between trees."""

    code: str


@dataclass(slots=True)
class Province:
    code: str
    cities: dict[str, City] = field(default_factory=dict)


@dataclass(slots=True)
class Country:
    code: str
    provinces: dict[str, Province] = field(default_factory=dict)


# Materialized authorized regions of a single distributor, keyed by country name.
RegionTree = dict[str, Country]


@dataclass(slots=True, frozen=True)
class RegionPath:
    """Canonical country/province/city selector; unspecified levels are None."""

    country: str
    province: Optional[str] = None
    city: Optional[str] = None

    @property
    def depth(self) -> int:
        if self.city is not None:
            return 3
        if self.province is not None:
            return 2
        return 1

    def __str__(self) -> str:
        segments = [self.city, self.province, self.country]
        return "-".join(segment for segment in segments if segment is not None)


@dataclass(slots=True)
class Distributor:
    """A distributor and the regions it was granted at creation time."""

    name: str
    include: list[str]
    exclude: list[str] = field(default_factory=list)
    parent: Optional[str] = None
    regions: RegionTree = field(default_factory=dict)
