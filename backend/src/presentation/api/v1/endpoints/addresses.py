"""Address endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from application.services import AddressService
from presentation.schemas import (
    AddressRequest,
    AddressResponse,
    AddressUpdateRequest,
    DeleteResponse,
)
from presentation.api.v1.dependencies import get_address_service

router = APIRouter(prefix="/addresses", tags=["addresses"])


@router.get("", response_model=list[AddressResponse])
async def list_addresses(service: AddressService = Depends(get_address_service)):
    return [AddressResponse.model_validate(a) for a in await service.get_all()]


@router.get("/{address_id}", response_model=AddressResponse)
async def get_address(address_id: int, service: AddressService = Depends(get_address_service)):
    address = await service.get_by_id(address_id)
    if address is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Address {address_id} not found")
    return AddressResponse.model_validate(address)


@router.post("", response_model=AddressResponse, status_code=status.HTTP_201_CREATED)
async def create_address(request: AddressRequest, service: AddressService = Depends(get_address_service)):
    address = await service.save(request.to_entity())
    return AddressResponse.model_validate(address)


@router.put("/{address_id}", response_model=AddressResponse)
async def update_address(
    address_id: int,
    request: AddressUpdateRequest,
    service: AddressService = Depends(get_address_service),
):
    address = await service.update(address_id, request.to_changes())
    if address is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Address {address_id} not found")
    return AddressResponse.model_validate(address)


@router.delete("/{address_id}", response_model=DeleteResponse)
async def delete_address(address_id: int, service: AddressService = Depends(get_address_service)):
    if not await service.delete(address_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Address {address_id} not found")
    return DeleteResponse(id=address_id)
