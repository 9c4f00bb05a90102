"""Pydantic request/response models for distributor endpoints."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from ..models.domain import Distributor, RegionTree


class CityModel(BaseModel):
    code: str


class ProvinceModel(BaseModel):
    code: str
    cities: dict[str, CityModel]


class CountryModel(BaseModel):
    code: str
    provinces: dict[str, ProvinceModel]


class DistributorRequest(BaseModel):
    name: str = Field(..., description="Unique distributor name (case-insensitive).")
    parent: Optional[str] = Field(default=None, description="Name of the parent distributor, if any.")
    include: list[str] = Field(
        default_factory=list,
        description="Granted regions as CITY-PROVINCE-COUNTRY, PROVINCE-COUNTRY or COUNTRY.",
    )
    exclude: list[str] = Field(default_factory=list, description="Regions carved out of the grant.")


class DistributorResponse(BaseModel):
    name: str
    parent: Optional[str] = None
    locations: dict[str, CountryModel]

    @classmethod
    def from_distributor(cls, distributor: Distributor) -> "DistributorResponse":
        return cls(
            name=distributor.name,
            parent=distributor.parent,
            locations=serialize_region_tree(distributor.regions),
        )


class AccessResponse(BaseModel):
    name: str
    region: str
    access: Literal["YES", "NO"]


def serialize_region_tree(tree: RegionTree) -> dict[str, CountryModel]:
    return {
        country_name: CountryModel(
            code=country.code,
            provinces={
                province_name: ProvinceModel(
                    code=province.code,
                    cities={city_name: CityModel(code=city.code) for city_name, city in province.cities.items()},
                )
                for province_name, province in country.provinces.items()
            },
        )
        for country_name, country in tree.items()
    }
