"""Shipment tracking endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from application.services import ShipmentTrackingDetailService
from presentation.schemas import (
    DeleteResponse,
    ShipmentTrackingDetailRequest,
    ShipmentTrackingDetailResponse,
    ShipmentTrackingDetailUpdateRequest,
)
from presentation.api.v1.dependencies import get_shipment_tracking_detail_service

router = APIRouter(prefix="/shipment-tracking", tags=["shipment-tracking"])


@router.get("", response_model=list[ShipmentTrackingDetailResponse])
async def list_tracking_details(
    service: ShipmentTrackingDetailService = Depends(get_shipment_tracking_detail_service),
):
    return [ShipmentTrackingDetailResponse.model_validate(d) for d in await service.get_all()]


@router.get("/{detail_id}", response_model=ShipmentTrackingDetailResponse)
async def get_tracking_detail(
    detail_id: int,
    service: ShipmentTrackingDetailService = Depends(get_shipment_tracking_detail_service),
):
    detail = await service.get_by_id(detail_id)
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Tracking detail {detail_id} not found")
    return ShipmentTrackingDetailResponse.model_validate(detail)


@router.post("", response_model=ShipmentTrackingDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_tracking_detail(
    request: ShipmentTrackingDetailRequest,
    service: ShipmentTrackingDetailService = Depends(get_shipment_tracking_detail_service),
):
    detail = await service.save(request.to_entity())
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shipment or post office not found")
    return ShipmentTrackingDetailResponse.model_validate(detail)


@router.put("/{detail_id}", response_model=ShipmentTrackingDetailResponse)
async def update_tracking_detail(
    detail_id: int,
    request: ShipmentTrackingDetailUpdateRequest,
    service: ShipmentTrackingDetailService = Depends(get_shipment_tracking_detail_service),
):
    detail = await service.update(detail_id, request.to_changes())
    if detail is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tracking detail {detail_id} or its post office not found",
        )
    return ShipmentTrackingDetailResponse.model_validate(detail)


@router.delete("/{detail_id}", response_model=DeleteResponse)
async def delete_tracking_detail(
    detail_id: int,
    service: ShipmentTrackingDetailService = Depends(get_shipment_tracking_detail_service),
):
    if not await service.delete(detail_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Tracking detail {detail_id} not found")
    return DeleteResponse(id=detail_id)
