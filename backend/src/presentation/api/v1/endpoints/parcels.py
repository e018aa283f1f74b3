"""Parcel read endpoints; parcels change through their shipment."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from application.services import ParcelService
from presentation.schemas import ParcelResponse
from presentation.api.v1.dependencies import get_parcel_service

router = APIRouter(prefix="/parcels", tags=["parcels"])


@router.get("", response_model=list[ParcelResponse])
async def list_parcels(
    shipment_id: Optional[int] = Query(None, description="Only parcels of this shipment"),
    service: ParcelService = Depends(get_parcel_service),
):
    parcels = await service.get_all() if shipment_id is None else await service.get_by_shipment(shipment_id)
    return [ParcelResponse.model_validate(p) for p in parcels]


@router.get("/{parcel_id}", response_model=ParcelResponse)
async def get_parcel(parcel_id: int, service: ParcelService = Depends(get_parcel_service)):
    parcel = await service.get_by_id(parcel_id)
    if parcel is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Parcel {parcel_id} not found")
    return ParcelResponse.model_validate(parcel)
