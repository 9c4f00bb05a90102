"""Parsing of hyphen-delimited region paths."""

from __future__ import annotations

from ...errors import InvalidFormat
from ...models.domain import RegionPath

PATH_SEPARATOR = "-"


def canonicalize(value: str) -> str:
    """Trim surrounding whitespace and upper-case. Idempotent."""
    return value.strip().upper()


def parse_region_path(raw: str) -> RegionPath:
    """Parse ``CITY-PROVINCE-COUNTRY``, ``PROVINCE-COUNTRY`` or ``COUNTRY``.

    Segments are given most-specific first and canonicalized independently.
    Only the shape is checked here; whether the regions exist is decided by
    the caller against a registry or a tree.
    """
    if raw is None or not raw.strip():
        raise InvalidFormat("Invalid region format: region is empty")

    segments = [canonicalize(segment) for segment in raw.split(PATH_SEPARATOR)]
    if not 1 <= len(segments) <= 3:
        raise InvalidFormat(f"Invalid region format: '{raw}'")
    if any(not segment for segment in segments):
        raise InvalidFormat(f"Invalid region format: '{raw}' has an empty segment")

    match segments:
        case [city, province, country]:
            return RegionPath(country=country, province=province, city=city)
        case [province, country]:
            return RegionPath(country=country, province=province)
        case [country]:
            return RegionPath(country=country)
    raise InvalidFormat(f"Invalid region format: '{raw}'")


def parse_region_paths(raw_paths: list[str]) -> list[RegionPath]:
    return [parse_region_path(raw) for raw in raw_paths]
