"""Shipment tracking detail SQLAlchemy model."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.session import Base


class ShipmentTrackingDetailModel(Base):
    """SQLAlchemy model for shipment tracking records."""
    
    __tablename__ = "shipment_tracking_details"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    shipment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("shipments.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    post_office_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("post_offices.id"),
        nullable=True
    )
    shipment_status: Mapped[str] = mapped_column(String(20), nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True
    )
    
    post_office: Mapped[Optional["PostOfficeModel"]] = relationship("PostOfficeModel")
    
    def __repr__(self) -> str:
        return (
            f"<ShipmentTrackingDetailModel(id={self.id}, shipment_id={self.shipment_id}, "
            f"status={self.shipment_status})>"
        )
