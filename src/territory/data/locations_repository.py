"""Loader for the reference country/province/city hierarchy."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

from openpyxl import load_workbook

from ..config import settings
from ..models.domain import City, Country, Province
from ..services.permissions.paths import canonicalize

EXPECTED_FIELDS = 6


class LocationRegistry:
    """Read-only hierarchy of countries, provinces and cities keyed by name.

    Populated once by :func:`load_locations` and never mutated afterwards, so
    it is safe to share across request threads without locking.
    """

    def __init__(self, countries: dict[str, Country] | None = None) -> None:
        self._countries: dict[str, Country] = countries or {}

    def country(self, name: str) -> Optional[Country]:
        return self._countries.get(name)

    def province(self, country: str, province: str) -> Optional[Province]:
        country_node = self._countries.get(country)
        if country_node is None:
            return None
        return country_node.provinces.get(province)

    def city(self, country: str, province: str, city: str) -> Optional[City]:
        province_node = self.province(country, province)
        if province_node is None:
            return None
        return province_node.cities.get(city)

    def __contains__(self, name: object) -> bool:
        return name in self._countries

    def __len__(self) -> int:
        return len(self._countries)

    def _add(
        self,
        *,
        city_code: str,
        province_code: str,
        country_code: str,
        city: str,
        province: str,
        country: str,
    ) -> None:
        country_node = self._countries.get(country)
        if country_node is None:
            country_node = Country(code=country_code)
            self._countries[country] = country_node

        province_node = country_node.provinces.get(province)
        if province_node is None:
            province_node = Province(code=province_code)
            country_node.provinces[province] = province_node

        province_node.cities.setdefault(city, City(code=city_code))


def build_registry(rows: Iterable[Sequence[object]]) -> LocationRegistry:
    """Build a registry from data rows (header already consumed).

    Each row carries city code, province code, country code, city name,
    province name and country name. Rows with a different field count are
    logged and skipped, as are rows with a blank city, province or country
    name. Entirely blank lines are ignored.
    """
    registry = LocationRegistry()
    skipped = 0
    for line_number, row in enumerate(rows, start=2):
        if not row:
            continue
        if len(row) != EXPECTED_FIELDS:
            logging.warning(f"Invalid number of fields in row {line_number}: {list(row)}")
            skipped += 1
            continue
        city_code, province_code, country_code, city, province, country = (
            canonicalize("" if value is None else str(value)) for value in row
        )
        if not (city and province and country):
            logging.warning(f"Blank location name in row {line_number}: {list(row)}")
            skipped += 1
            continue
        registry._add(
            city_code=city_code,
            province_code=province_code,
            country_code=country_code,
            city=city,
            province=province,
            country=country,
        )
    logging.info(f"Loaded {len(registry)} countries into the location registry ({skipped} rows skipped)")
    return registry


def _iter_csv_rows(path: Path) -> Iterator[list[str]]:
    with path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.reader(handle)
        header = next(reader, None)
        if header is None:
            raise ValueError(f"Locations file '{path}' is missing a header row.")
        yield from reader


def _iter_xlsx_rows(path: Path) -> Iterator[tuple]:
    wb = load_workbook(path, data_only=True, read_only=True)
    try:
        rows = wb.active.iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None:
            raise ValueError(f"Locations workbook '{path}' is empty.")
        for row in rows:
            # read-only sheets pad short rows with trailing Nones
            values = list(row)
            while values and values[-1] is None:
                values.pop()
            yield tuple(values)
    finally:
        wb.close()


def load_locations(source: Path | None = None) -> LocationRegistry:
    """Load the location registry from the configured CSV or XLSX file."""

    path = source or settings.locations_file
    if not path.exists():
        raise FileNotFoundError(f"Locations file not found: {path}")

    if path.suffix.lower() == ".xlsx":
        return build_registry(_iter_xlsx_rows(path))
    return build_registry(_iter_csv_rows(path))
