"""Postcode pool and barcode endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from application.services import BarcodeInnerNumberService, PostcodePoolService
from presentation.schemas import (
    BarcodeInnerNumberRequest,
    BarcodeInnerNumberResponse,
    BarcodeInnerNumberUpdateRequest,
    DeleteResponse,
    PostcodePoolRequest,
    PostcodePoolResponse,
    PostcodePoolUpdateRequest,
)
from presentation.api.v1.dependencies import (
    get_barcode_inner_number_service,
    get_postcode_pool_service,
)
from infrastructure.config import get_logger

router = APIRouter(prefix="/postcode-pools", tags=["postcode-pools"])
barcode_router = APIRouter(prefix="/barcodes", tags=["postcode-pools"])
logger = get_logger(__name__)


def _pool_not_found(pool_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Postcode pool {pool_id} not found")


def _barcode_not_found(barcode_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Barcode {barcode_id} not found")


@router.get("", response_model=list[PostcodePoolResponse])
async def list_postcode_pools(service: PostcodePoolService = Depends(get_postcode_pool_service)):
    return [PostcodePoolResponse.model_validate(p) for p in await service.get_all()]


@router.get("/{pool_id}", response_model=PostcodePoolResponse)
async def get_postcode_pool(pool_id: int, service: PostcodePoolService = Depends(get_postcode_pool_service)):
    pool = await service.get_by_id(pool_id)
    if pool is None:
        raise _pool_not_found(pool_id)
    return PostcodePoolResponse.model_validate(pool)


@router.post("", response_model=PostcodePoolResponse, status_code=status.HTTP_201_CREATED)
async def create_postcode_pool(
    request: PostcodePoolRequest,
    service: PostcodePoolService = Depends(get_postcode_pool_service),
):
    return PostcodePoolResponse.model_validate(await service.save(request.to_entity()))


@router.put("/{pool_id}", response_model=PostcodePoolResponse)
async def update_postcode_pool(
    pool_id: int,
    request: PostcodePoolUpdateRequest,
    service: PostcodePoolService = Depends(get_postcode_pool_service),
):
    pool = await service.update(pool_id, request.to_changes())
    if pool is None:
        raise _pool_not_found(pool_id)
    return PostcodePoolResponse.model_validate(pool)


@router.delete("/{pool_id}", response_model=DeleteResponse)
async def delete_postcode_pool(pool_id: int, service: PostcodePoolService = Depends(get_postcode_pool_service)):
    if not await service.delete(pool_id):
        raise _pool_not_found(pool_id)
    return DeleteResponse(id=pool_id)


@router.get("/{pool_id}/barcodes", response_model=list[BarcodeInnerNumberResponse])
async def list_barcodes(
    pool_id: int,
    service: BarcodeInnerNumberService = Depends(get_barcode_inner_number_service),
):
    barcodes = await service.get_all(pool_id)
    if barcodes is None:
        raise _pool_not_found(pool_id)
    return [BarcodeInnerNumberResponse.model_validate(b) for b in barcodes]


@router.post(
    "/{pool_id}/barcodes",
    response_model=PostcodePoolResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_barcodes(
    pool_id: int,
    request: list[BarcodeInnerNumberRequest],
    service: PostcodePoolService = Depends(get_postcode_pool_service),
):
    """Register already issued barcode numbers in a pool."""
    pool = await service.add_barcode_inner_numbers(pool_id, [b.to_entity() for b in request])
    if pool is None:
        raise _pool_not_found(pool_id)
    return PostcodePoolResponse.model_validate(pool)


@router.post(
    "/{pool_id}/barcodes/generate",
    response_model=BarcodeInnerNumberResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_barcode(
    pool_id: int,
    pool_service: PostcodePoolService = Depends(get_postcode_pool_service),
    barcode_service: BarcodeInnerNumberService = Depends(get_barcode_inner_number_service),
):
    """Issue the next free barcode number of a pool."""
    pool = await pool_service.get_by_id(pool_id)
    if pool is None:
        raise _pool_not_found(pool_id)
    barcode = await barcode_service.generate_barcode_inner_number(pool)
    logger.info(f"Barcode {barcode.inner_number} issued from pool {pool.postcode}")
    return BarcodeInnerNumberResponse.model_validate(barcode)


@barcode_router.get("/{barcode_id}", response_model=BarcodeInnerNumberResponse)
async def get_barcode(
    barcode_id: int,
    service: BarcodeInnerNumberService = Depends(get_barcode_inner_number_service),
):
    barcode = await service.get_by_id(barcode_id)
    if barcode is None:
        raise _barcode_not_found(barcode_id)
    return BarcodeInnerNumberResponse.model_validate(barcode)


@barcode_router.put("/{barcode_id}", response_model=BarcodeInnerNumberResponse)
async def update_barcode(
    barcode_id: int,
    request: BarcodeInnerNumberUpdateRequest,
    service: BarcodeInnerNumberService = Depends(get_barcode_inner_number_service),
):
    barcode = await service.update(barcode_id, request.to_changes())
    if barcode is None:
        raise _barcode_not_found(barcode_id)
    return BarcodeInnerNumberResponse.model_validate(barcode)


@barcode_router.delete("/{barcode_id}", response_model=DeleteResponse)
async def delete_barcode(
    barcode_id: int,
    service: BarcodeInnerNumberService = Depends(get_barcode_inner_number_service),
):
    if not await service.delete(barcode_id):
        raise _barcode_not_found(barcode_id)
    return DeleteResponse(id=barcode_id)
