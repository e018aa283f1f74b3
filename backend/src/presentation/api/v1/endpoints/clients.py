"""Client endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from application.services import ClientService, ShipmentService
from presentation.schemas import (
    ClientRequest,
    ClientResponse,
    ClientUpdateRequest,
    DeleteResponse,
    ShipmentResponse,
)
from presentation.api.v1.dependencies import get_client_service, get_shipment_service

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("", response_model=list[ClientResponse])
async def list_clients(service: ClientService = Depends(get_client_service)):
    return [ClientResponse.model_validate(c) for c in await service.get_all()]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(client_id: int, service: ClientService = Depends(get_client_service)):
    client = await service.get_by_id(client_id)
    if client is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Client {client_id} not found")
    return ClientResponse.model_validate(client)


@router.get("/{client_id}/shipments", response_model=list[ShipmentResponse])
async def list_client_shipments(client_id: int, service: ShipmentService = Depends(get_shipment_service)):
    """List the shipments sent by a client."""
    shipments = await service.get_all_by_client_id(client_id)
    if shipments is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Client {client_id} not found")
    return [ShipmentResponse.model_validate(s) for s in shipments]


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(request: ClientRequest, service: ClientService = Depends(get_client_service)):
    client = await service.save(request.to_entity())
    if client is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Address or counterparty not found")
    return ClientResponse.model_validate(client)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    request: ClientUpdateRequest,
    service: ClientService = Depends(get_client_service),
):
    client = await service.update(client_id, request.to_changes())
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Client {client_id}, its address or counterparty not found",
        )
    return ClientResponse.model_validate(client)


@router.delete("/{client_id}", response_model=DeleteResponse)
async def delete_client(client_id: int, service: ClientService = Depends(get_client_service)):
    if not await service.delete(client_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Client {client_id} not found")
    return DeleteResponse(id=client_id)
