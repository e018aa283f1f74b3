"""Post office endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from application.services import PostOfficeService
from presentation.schemas import (
    DeleteResponse,
    PostOfficeRequest,
    PostOfficeResponse,
    PostOfficeUpdateRequest,
)
from presentation.api.v1.dependencies import get_post_office_service

router = APIRouter(prefix="/post-offices", tags=["post-offices"])


@router.get("", response_model=list[PostOfficeResponse])
async def list_post_offices(service: PostOfficeService = Depends(get_post_office_service)):
    return [PostOfficeResponse.model_validate(p) for p in await service.get_all()]


@router.get("/{post_office_id}", response_model=PostOfficeResponse)
async def get_post_office(post_office_id: int, service: PostOfficeService = Depends(get_post_office_service)):
    post_office = await service.get_by_id(post_office_id)
    if post_office is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Post office {post_office_id} not found")
    return PostOfficeResponse.model_validate(post_office)


@router.post("", response_model=PostOfficeResponse, status_code=status.HTTP_201_CREATED)
async def create_post_office(
    request: PostOfficeRequest,
    service: PostOfficeService = Depends(get_post_office_service),
):
    post_office = await service.save(request.to_entity())
    if post_office is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Address or postcode pool not found")
    return PostOfficeResponse.model_validate(post_office)


@router.put("/{post_office_id}", response_model=PostOfficeResponse)
async def update_post_office(
    post_office_id: int,
    request: PostOfficeUpdateRequest,
    service: PostOfficeService = Depends(get_post_office_service),
):
    post_office = await service.update(post_office_id, request.to_changes())
    if post_office is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Post office {post_office_id}, its address or postcode pool not found",
        )
    return PostOfficeResponse.model_validate(post_office)


@router.delete("/{post_office_id}", response_model=DeleteResponse)
async def delete_post_office(post_office_id: int, service: PostOfficeService = Depends(get_post_office_service)):
    if not await service.delete(post_office_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Post office {post_office_id} not found")
    return DeleteResponse(id=post_office_id)
