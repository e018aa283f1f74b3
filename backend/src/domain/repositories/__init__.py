"""Domain Repository Interfaces - Abstract definitions."""

from .base import ICrudRepository
from .address_repository import IAddressRepository
from .client_repository import IClientRepository, ICounterpartyRepository
from .postcode_pool_repository import IPostcodePoolRepository, IBarcodeInnerNumberRepository
from .post_office_repository import IPostOfficeRepository
from .tariff_grid_repository import ITariffGridRepository
from .parcel_repository import IParcelRepository
from .shipment_repository import IShipmentRepository
from .shipment_tracking_detail_repository import IShipmentTrackingDetailRepository

__all__ = [
    "ICrudRepository",
    "IAddressRepository",
    "IClientRepository",
    "ICounterpartyRepository",
    "IPostcodePoolRepository",
    "IBarcodeInnerNumberRepository",
    "IPostOfficeRepository",
    "ITariffGridRepository",
    "IParcelRepository",
    "IShipmentRepository",
    "IShipmentTrackingDetailRepository",
]
