"""Shipment endpoints, including parcels, labels and tracking of one shipment."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from application.services import ParcelService, ShipmentService, ShipmentTrackingDetailService
from infrastructure.config import get_logger
from infrastructure.reporting import ShipmentLabelGenerator
from presentation.schemas import (
    DeleteResponse,
    ParcelRequest,
    ParcelResponse,
    ShipmentRequest,
    ShipmentResponse,
    ShipmentTrackingDetailResponse,
    ShipmentUpdateRequest,
)
from presentation.api.v1.dependencies import (
    get_label_generator,
    get_parcel_service,
    get_shipment_service,
    get_shipment_tracking_detail_service,
)

router = APIRouter(prefix="/shipments", tags=["shipments"])
logger = get_logger(__name__)


def _shipment_not_found(shipment_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Shipment {shipment_id} not found")


@router.get("", response_model=list[ShipmentResponse])
async def list_shipments(service: ShipmentService = Depends(get_shipment_service)):
    return [ShipmentResponse.model_validate(s) for s in await service.get_all()]


@router.get("/{shipment_id}", response_model=ShipmentResponse)
async def get_shipment(shipment_id: int, service: ShipmentService = Depends(get_shipment_service)):
    shipment = await service.get_by_id(shipment_id)
    if shipment is None:
        raise _shipment_not_found(shipment_id)
    return ShipmentResponse.model_validate(shipment)


@router.post("", response_model=ShipmentResponse, status_code=status.HTTP_201_CREATED)
async def create_shipment(request: ShipmentRequest, service: ShipmentService = Depends(get_shipment_service)):
    """
    Create a shipment.
    
    A barcode is issued from the sender's counterparty pool and every
    parcel is priced from the tariff grid.
    """
    shipment = await service.save(request.to_entity())
    if shipment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Sender, recipient or the sender's postcode pool not found",
        )
    logger.info(f"Shipment {shipment.id} created with tracking code {shipment.tracking_code}")
    return ShipmentResponse.model_validate(shipment)


@router.put("/{shipment_id}", response_model=ShipmentResponse)
async def update_shipment(
    shipment_id: int,
    request: ShipmentUpdateRequest,
    service: ShipmentService = Depends(get_shipment_service),
):
    shipment = await service.update(shipment_id, request.to_changes())
    if shipment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Shipment {shipment_id}, its sender or recipient not found",
        )
    return ShipmentResponse.model_validate(shipment)


@router.delete("/{shipment_id}", response_model=DeleteResponse)
async def delete_shipment(shipment_id: int, service: ShipmentService = Depends(get_shipment_service)):
    if not await service.delete(shipment_id):
        raise _shipment_not_found(shipment_id)
    return DeleteResponse(id=shipment_id)


@router.get("/{shipment_id}/parcels", response_model=list[ParcelResponse])
async def list_shipment_parcels(
    shipment_id: int,
    shipment_service: ShipmentService = Depends(get_shipment_service),
    parcel_service: ParcelService = Depends(get_parcel_service),
):
    if await shipment_service.get_by_id(shipment_id) is None:
        raise _shipment_not_found(shipment_id)
    return [ParcelResponse.model_validate(p) for p in await parcel_service.get_by_shipment(shipment_id)]


@router.post("/{shipment_id}/parcels", response_model=ShipmentResponse)
async def add_shipment_parcels(
    shipment_id: int,
    request: list[ParcelRequest],
    service: ShipmentService = Depends(get_shipment_service),
):
    """Add parcels in front of the shipment's parcels and reprice it."""
    if not await service.add_parcels(shipment_id, [p.to_entity() for p in request]):
        raise _shipment_not_found(shipment_id)
    return ShipmentResponse.model_validate(await service.get_by_id(shipment_id))


@router.delete("/{shipment_id}/parcels/{parcel_id}", response_model=ShipmentResponse)
async def remove_shipment_parcel(
    shipment_id: int,
    parcel_id: int,
    service: ShipmentService = Depends(get_shipment_service),
):
    if not await service.remove_parcel(shipment_id, parcel_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Parcel {parcel_id} not found in shipment {shipment_id}",
        )
    return ShipmentResponse.model_validate(await service.get_by_id(shipment_id))


@router.get("/{shipment_id}/tracking", response_model=list[ShipmentTrackingDetailResponse])
async def list_shipment_tracking(
    shipment_id: int,
    service: ShipmentTrackingDetailService = Depends(get_shipment_tracking_detail_service),
):
    """Get the status history of a shipment, oldest first."""
    details = await service.get_all_by_shipment_id(shipment_id)
    if details is None:
        raise _shipment_not_found(shipment_id)
    return [ShipmentTrackingDetailResponse.model_validate(d) for d in details]


@router.get(
    "/{shipment_id}/label",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def get_shipment_label(
    shipment_id: int,
    service: ShipmentService = Depends(get_shipment_service),
    generator: ShipmentLabelGenerator = Depends(get_label_generator),
):
    """Download the printable shipping label as PDF."""
    shipment = await service.get_by_id(shipment_id)
    if shipment is None:
        raise _shipment_not_found(shipment_id)
    
    pdf = generator.generate(shipment)
    filename = f"label_{shipment.tracking_code or shipment.id}.pdf"
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
