"""Distributor creation, lookup and access-check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, status

from ...errors import TerritoryError
from ...schemas.distributors import AccessResponse, DistributorRequest, DistributorResponse
from ...services.distributors import DistributorService
from ...services.permissions import canonicalize, parse_region_path

router = APIRouter(prefix="/distributors", tags=["distributors"])


def get_distributor_service(request: Request) -> DistributorService:
    return request.app.state.distributor_service


def _http_error(exc: TerritoryError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.to_dict())


@router.post("", response_model=DistributorResponse, status_code=status.HTTP_201_CREATED)
def create_distributor(
    payload: DistributorRequest,
    service: DistributorService = Depends(get_distributor_service),
) -> DistributorResponse:
    try:
        distributor = service.create(
            payload.name,
            include=payload.include,
            exclude=payload.exclude,
            parent=payload.parent,
        )
    except TerritoryError as exc:
        raise _http_error(exc) from exc
    return DistributorResponse.from_distributor(distributor)


@router.get("/{name}", response_model=DistributorResponse, status_code=status.HTTP_200_OK)
def get_distributor(
    name: str = Path(..., description="Distributor name"),
    service: DistributorService = Depends(get_distributor_service),
) -> DistributorResponse:
    try:
        distributor = service.get(name)
    except TerritoryError as exc:
        raise _http_error(exc) from exc
    return DistributorResponse.from_distributor(distributor)


@router.get("/{name}/permission", response_model=AccessResponse, status_code=status.HTTP_200_OK)
def check_permission(
    name: str = Path(..., description="Distributor name"),
    region: str = Query(..., description="Region as CITY-PROVINCE-COUNTRY, PROVINCE-COUNTRY or COUNTRY"),
    service: DistributorService = Depends(get_distributor_service),
) -> AccessResponse:
    try:
        access = service.check_access(name, region)
    except TerritoryError as exc:
        raise _http_error(exc) from exc
    return AccessResponse(name=canonicalize(name), region=str(parse_region_path(region)), access=access)
