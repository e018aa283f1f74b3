"""Pydantic schemas for request/response validation."""

from .common_schemas import HealthResponse, ErrorResponse, DeleteResponse, UpdateRequest
from .address_schemas import AddressRequest, AddressUpdateRequest, AddressResponse
from .postcode_pool_schemas import (
    BarcodeInnerNumberRequest,
    BarcodeInnerNumberUpdateRequest,
    BarcodeInnerNumberResponse,
    PostcodePoolRequest,
    PostcodePoolUpdateRequest,
    PostcodePoolResponse,
)
from .client_schemas import (
    CounterpartyRequest,
    CounterpartyUpdateRequest,
    CounterpartyResponse,
    ClientRequest,
    ClientUpdateRequest,
    ClientResponse,
)
from .post_office_schemas import PostOfficeRequest, PostOfficeUpdateRequest, PostOfficeResponse
from .tariff_grid_schemas import TariffGridRequest, TariffGridUpdateRequest, TariffGridResponse
from .shipment_schemas import (
    ParcelItemRequest,
    ParcelRequest,
    ShipmentRequest,
    ShipmentUpdateRequest,
    ParcelItemResponse,
    ParcelResponse,
    ShipmentResponse,
)
from .tracking_schemas import (
    ShipmentTrackingDetailRequest,
    ShipmentTrackingDetailUpdateRequest,
    ShipmentTrackingDetailResponse,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "DeleteResponse",
    "UpdateRequest",
    "AddressRequest",
    "AddressUpdateRequest",
    "AddressResponse",
    "BarcodeInnerNumberRequest",
    "BarcodeInnerNumberUpdateRequest",
    "BarcodeInnerNumberResponse",
    "PostcodePoolRequest",
    "PostcodePoolUpdateRequest",
    "PostcodePoolResponse",
    "CounterpartyRequest",
    "CounterpartyUpdateRequest",
    "CounterpartyResponse",
    "ClientRequest",
    "ClientUpdateRequest",
    "ClientResponse",
    "PostOfficeRequest",
    "PostOfficeUpdateRequest",
    "PostOfficeResponse",
    "TariffGridRequest",
    "TariffGridUpdateRequest",
    "TariffGridResponse",
    "ParcelItemRequest",
    "ParcelRequest",
    "ShipmentRequest",
    "ShipmentUpdateRequest",
    "ParcelItemResponse",
    "ParcelResponse",
    "ShipmentResponse",
    "ShipmentTrackingDetailRequest",
    "ShipmentTrackingDetailUpdateRequest",
    "ShipmentTrackingDetailResponse",
]
