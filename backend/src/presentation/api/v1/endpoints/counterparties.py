"""Counterparty endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from application.services import ClientService, CounterpartyService
from presentation.schemas import (
    ClientResponse,
    CounterpartyRequest,
    CounterpartyResponse,
    CounterpartyUpdateRequest,
    DeleteResponse,
)
from presentation.api.v1.dependencies import get_client_service, get_counterparty_service

router = APIRouter(prefix="/counterparties", tags=["counterparties"])


@router.get("", response_model=list[CounterpartyResponse])
async def list_counterparties(service: CounterpartyService = Depends(get_counterparty_service)):
    return [CounterpartyResponse.model_validate(c) for c in await service.get_all()]


@router.get("/{counterparty_id}", response_model=CounterpartyResponse)
async def get_counterparty(
    counterparty_id: int,
    service: CounterpartyService = Depends(get_counterparty_service),
):
    counterparty = await service.get_by_id(counterparty_id)
    if counterparty is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Counterparty {counterparty_id} not found")
    return CounterpartyResponse.model_validate(counterparty)


@router.get("/{counterparty_id}/clients", response_model=list[ClientResponse])
async def list_counterparty_clients(
    counterparty_id: int,
    service: ClientService = Depends(get_client_service),
):
    clients = await service.get_all_by_counterparty_id(counterparty_id)
    if clients is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Counterparty {counterparty_id} not found")
    return [ClientResponse.model_validate(c) for c in clients]


@router.post("", response_model=CounterpartyResponse, status_code=status.HTTP_201_CREATED)
async def create_counterparty(
    request: CounterpartyRequest,
    service: CounterpartyService = Depends(get_counterparty_service),
):
    counterparty = await service.save(request.to_entity())
    if counterparty is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Postcode pool {request.postcode_pool_id} not found",
        )
    return CounterpartyResponse.model_validate(counterparty)


@router.put("/{counterparty_id}", response_model=CounterpartyResponse)
async def update_counterparty(
    counterparty_id: int,
    request: CounterpartyUpdateRequest,
    service: CounterpartyService = Depends(get_counterparty_service),
):
    counterparty = await service.update(counterparty_id, request.to_changes())
    if counterparty is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Counterparty {counterparty_id} or its postcode pool not found",
        )
    return CounterpartyResponse.model_validate(counterparty)


@router.delete("/{counterparty_id}", response_model=DeleteResponse)
async def delete_counterparty(
    counterparty_id: int,
    service: CounterpartyService = Depends(get_counterparty_service),
):
    if not await service.delete(counterparty_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Counterparty {counterparty_id} not found")
    return DeleteResponse(id=counterparty_id)
