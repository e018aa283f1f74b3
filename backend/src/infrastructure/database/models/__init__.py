"""SQLAlchemy ORM models."""

from .address_model import AddressModel
from .postcode_pool_model import PostcodePoolModel, BarcodeInnerNumberModel
from .client_model import ClientModel, CounterpartyModel
from .post_office_model import PostOfficeModel
from .tariff_grid_model import TariffGridModel
from .shipment_model import ShipmentModel, ParcelModel, ParcelItemModel
from .shipment_tracking_detail_model import ShipmentTrackingDetailModel

__all__ = [
    "AddressModel",
    "PostcodePoolModel",
    "BarcodeInnerNumberModel",
    "ClientModel",
    "CounterpartyModel",
    "PostOfficeModel",
    "TariffGridModel",
    "ShipmentModel",
    "ParcelModel",
    "ParcelItemModel",
    "ShipmentTrackingDetailModel",
]
