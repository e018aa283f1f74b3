"""FastAPI dependency injection setup."""

from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.config import get_settings
from infrastructure.database import get_session
from infrastructure.database.repositories import (
    SQLAlchemyAddressRepository,
    SQLAlchemyBarcodeInnerNumberRepository,
    SQLAlchemyClientRepository,
    SQLAlchemyCounterpartyRepository,
    SQLAlchemyParcelRepository,
    SQLAlchemyPostcodePoolRepository,
    SQLAlchemyPostOfficeRepository,
    SQLAlchemyShipmentRepository,
    SQLAlchemyShipmentTrackingDetailRepository,
    SQLAlchemyTariffGridRepository,
)
from infrastructure.reporting import ShipmentLabelGenerator
from application.services import (
    AddressService,
    BarcodeInnerNumberService,
    ClientService,
    CounterpartyService,
    ParcelService,
    PostcodePoolService,
    PostOfficeService,
    ShipmentService,
    ShipmentTrackingDetailService,
    TariffGridService,
)
from application.use_cases import InitDbUseCase


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


# Service dependencies; FastAPI caches get_db_session per request, so all
# services of one request share a transaction.
def get_address_service(session: AsyncSession = Depends(get_db_session)) -> AddressService:
    return AddressService(SQLAlchemyAddressRepository(session))


def get_postcode_pool_service(session: AsyncSession = Depends(get_db_session)) -> PostcodePoolService:
    return PostcodePoolService(SQLAlchemyPostcodePoolRepository(session))


def get_barcode_inner_number_service(
    session: AsyncSession = Depends(get_db_session),
) -> BarcodeInnerNumberService:
    return BarcodeInnerNumberService(
        SQLAlchemyBarcodeInnerNumberRepository(session),
        SQLAlchemyPostcodePoolRepository(session),
    )


def get_counterparty_service(session: AsyncSession = Depends(get_db_session)) -> CounterpartyService:
    return CounterpartyService(
        SQLAlchemyCounterpartyRepository(session),
        SQLAlchemyPostcodePoolRepository(session),
    )


def get_client_service(session: AsyncSession = Depends(get_db_session)) -> ClientService:
    return ClientService(
        SQLAlchemyClientRepository(session),
        SQLAlchemyAddressRepository(session),
        SQLAlchemyCounterpartyRepository(session),
    )


def get_post_office_service(session: AsyncSession = Depends(get_db_session)) -> PostOfficeService:
    return PostOfficeService(
        SQLAlchemyPostOfficeRepository(session),
        SQLAlchemyAddressRepository(session),
        SQLAlchemyPostcodePoolRepository(session),
    )


def get_tariff_grid_service(session: AsyncSession = Depends(get_db_session)) -> TariffGridService:
    return TariffGridService(SQLAlchemyTariffGridRepository(session))


def get_parcel_service(session: AsyncSession = Depends(get_db_session)) -> ParcelService:
    return ParcelService(
        SQLAlchemyParcelRepository(session),
        SQLAlchemyTariffGridRepository(session),
        AddressService(SQLAlchemyAddressRepository(session)),
    )


def get_shipment_service(session: AsyncSession = Depends(get_db_session)) -> ShipmentService:
    return build_shipment_service(session)


def get_shipment_tracking_detail_service(
    session: AsyncSession = Depends(get_db_session),
) -> ShipmentTrackingDetailService:
    return ShipmentTrackingDetailService(
        SQLAlchemyShipmentTrackingDetailRepository(session),
        SQLAlchemyShipmentRepository(session),
        SQLAlchemyPostOfficeRepository(session),
    )


def get_label_generator() -> ShipmentLabelGenerator:
    """Get shipping label generator dependency."""
    return ShipmentLabelGenerator(page_size=get_settings().label_page_size)


def build_shipment_service(session: AsyncSession) -> ShipmentService:
    return ShipmentService(
        shipment_repository=SQLAlchemyShipmentRepository(session),
        client_repository=SQLAlchemyClientRepository(session),
        barcode_inner_number_service=BarcodeInnerNumberService(
            SQLAlchemyBarcodeInnerNumberRepository(session),
            SQLAlchemyPostcodePoolRepository(session),
        ),
        parcel_service=ParcelService(
            SQLAlchemyParcelRepository(session),
            SQLAlchemyTariffGridRepository(session),
            AddressService(SQLAlchemyAddressRepository(session)),
        ),
    )


def build_init_db_use_case(session: AsyncSession) -> InitDbUseCase:
    """Wire the seeding use case outside of a request."""
    address_repo = SQLAlchemyAddressRepository(session)
    pool_repo = SQLAlchemyPostcodePoolRepository(session)
    counterparty_repo = SQLAlchemyCounterpartyRepository(session)
    shipment_repo = SQLAlchemyShipmentRepository(session)
    post_office_repo = SQLAlchemyPostOfficeRepository(session)
    
    return InitDbUseCase(
        tariff_grid_service=TariffGridService(SQLAlchemyTariffGridRepository(session)),
        postcode_pool_service=PostcodePoolService(pool_repo),
        address_service=AddressService(address_repo),
        counterparty_service=CounterpartyService(counterparty_repo, pool_repo),
        client_service=ClientService(SQLAlchemyClientRepository(session), address_repo, counterparty_repo),
        shipment_service=build_shipment_service(session),
        post_office_service=PostOfficeService(post_office_repo, address_repo, pool_repo),
        shipment_tracking_detail_service=ShipmentTrackingDetailService(
            SQLAlchemyShipmentTrackingDetailRepository(session),
            shipment_repo,
            post_office_repo,
        ),
    )
