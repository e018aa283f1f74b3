"""Tariff grid endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from application.services import TariffGridService
from domain.enums import W2wVariation
from presentation.schemas import (
    DeleteResponse,
    TariffGridRequest,
    TariffGridResponse,
    TariffGridUpdateRequest,
)
from presentation.api.v1.dependencies import get_tariff_grid_service

router = APIRouter(prefix="/tariff-grids", tags=["tariff-grids"])


@router.get("", response_model=list[TariffGridResponse])
async def list_tariff_grids(service: TariffGridService = Depends(get_tariff_grid_service)):
    return [TariffGridResponse.model_validate(t) for t in await service.get_all()]


@router.get("/lookup", response_model=TariffGridResponse)
async def find_tariff_grid(
    weight: float = Query(..., gt=0, description="Parcel weight in kilograms"),
    length: float = Query(..., gt=0, description="Parcel length in centimetres"),
    w2w_variation: W2wVariation = Query(..., description="Distance zone"),
    service: TariffGridService = Depends(get_tariff_grid_service),
):
    """Find the smallest row of a zone covering the given parcel size."""
    tariff = await service.get_by_dimension(weight, length, w2w_variation)
    if tariff is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No {w2w_variation} tariff covers weight {weight} and length {length}",
        )
    return TariffGridResponse.model_validate(tariff)


@router.get("/last/{w2w_variation}", response_model=TariffGridResponse)
async def get_last_tariff_grid(
    w2w_variation: W2wVariation,
    service: TariffGridService = Depends(get_tariff_grid_service),
):
    """Get the heaviest row of a zone."""
    tariff = await service.get_last(w2w_variation)
    if tariff is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No {w2w_variation} tariff")
    return TariffGridResponse.model_validate(tariff)


@router.get("/{tariff_id}", response_model=TariffGridResponse)
async def get_tariff_grid(tariff_id: int, service: TariffGridService = Depends(get_tariff_grid_service)):
    tariff = await service.get_by_id(tariff_id)
    if tariff is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Tariff grid {tariff_id} not found")
    return TariffGridResponse.model_validate(tariff)


@router.post("", response_model=TariffGridResponse, status_code=status.HTTP_201_CREATED)
async def create_tariff_grid(
    request: TariffGridRequest,
    service: TariffGridService = Depends(get_tariff_grid_service),
):
    return TariffGridResponse.model_validate(await service.save(request.to_entity()))


@router.put("/{tariff_id}", response_model=TariffGridResponse)
async def update_tariff_grid(
    tariff_id: int,
    request: TariffGridUpdateRequest,
    service: TariffGridService = Depends(get_tariff_grid_service),
):
    tariff = await service.update(tariff_id, request.to_changes())
    if tariff is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Tariff grid {tariff_id} not found")
    return TariffGridResponse.model_validate(tariff)


@router.delete("/{tariff_id}", response_model=DeleteResponse)
async def delete_tariff_grid(tariff_id: int, service: TariffGridService = Depends(get_tariff_grid_service)):
    if not await service.delete(tariff_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Tariff grid {tariff_id} not found")
    return DeleteResponse(id=tariff_id)
