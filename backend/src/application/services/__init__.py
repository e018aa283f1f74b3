"""Application services orchestrating repositories."""

from .base import CrudService, copy_properties
from .address_service import AddressService
from .client_service import ClientService, CounterpartyService
from .postcode_pool_service import PostcodePoolService, BarcodeInnerNumberService
from .post_office_service import PostOfficeService
from .tariff_grid_service import TariffGridService
from .parcel_service import ParcelService
from .shipment_service import ShipmentService
from .shipment_tracking_detail_service import ShipmentTrackingDetailService

__all__ = [
    "CrudService",
    "copy_properties",
    "AddressService",
    "ClientService",
    "CounterpartyService",
    "PostcodePoolService",
    "BarcodeInnerNumberService",
    "PostOfficeService",
    "TariffGridService",
    "ParcelService",
    "ShipmentService",
    "ShipmentTrackingDetailService",
]
