"""Repository implementations."""

from .sqlalchemy_address_repository import SQLAlchemyAddressRepository
from .sqlalchemy_client_repository import SQLAlchemyClientRepository, SQLAlchemyCounterpartyRepository
from .sqlalchemy_postcode_pool_repository import (
    SQLAlchemyPostcodePoolRepository,
    SQLAlchemyBarcodeInnerNumberRepository,
)
from .sqlalchemy_post_office_repository import SQLAlchemyPostOfficeRepository
from .sqlalchemy_tariff_grid_repository import SQLAlchemyTariffGridRepository
from .sqlalchemy_parcel_repository import SQLAlchemyParcelRepository
from .sqlalchemy_shipment_repository import SQLAlchemyShipmentRepository
from .sqlalchemy_shipment_tracking_detail_repository import SQLAlchemyShipmentTrackingDetailRepository

__all__ = [
    "SQLAlchemyAddressRepository",
    "SQLAlchemyClientRepository",
    "SQLAlchemyCounterpartyRepository",
    "SQLAlchemyPostcodePoolRepository",
    "SQLAlchemyBarcodeInnerNumberRepository",
    "SQLAlchemyPostOfficeRepository",
    "SQLAlchemyTariffGridRepository",
    "SQLAlchemyParcelRepository",
    "SQLAlchemyShipmentRepository",
    "SQLAlchemyShipmentTrackingDetailRepository",
]
