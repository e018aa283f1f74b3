"""Shipment, parcel and parcel item SQLAlchemy models."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Float, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.session import Base


class ShipmentModel(Base):
    """SQLAlchemy model for shipments."""
    
    __tablename__ = "shipments"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    # Parties
    sender_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("clients.id"),
        nullable=False,
        index=True
    )
    recipient_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("clients.id"),
        nullable=False,
        index=True
    )
    
    # Tracking
    barcode_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("barcode_inner_numbers.id"),
        nullable=True,
        unique=True
    )
    
    delivery_type: Mapped[str] = mapped_column(String(10), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    post_pay: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    
    sender: Mapped["ClientModel"] = relationship("ClientModel", foreign_keys=[sender_id])
    recipient: Mapped["ClientModel"] = relationship("ClientModel", foreign_keys=[recipient_id])
    barcode: Mapped[Optional["BarcodeInnerNumberModel"]] = relationship("BarcodeInnerNumberModel")
    
    parcels: Mapped[list["ParcelModel"]] = relationship(
        "ParcelModel",
        back_populates="shipment",
        cascade="all, delete-orphan",
        order_by="ParcelModel.position"
    )
    
    def __repr__(self) -> str:
        return f"<ShipmentModel(id={self.id}, delivery_type={self.delivery_type})>"


class ParcelModel(Base):
    """SQLAlchemy model for parcels within shipments."""
    
    __tablename__ = "parcels"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    shipment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("shipments.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    
    # Order of the parcel within its shipment
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    length: Mapped[float] = mapped_column(Float, nullable=False)
    width: Mapped[float] = mapped_column(Float, nullable=False)
    height: Mapped[float] = mapped_column(Float, nullable=False)
    declared_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    
    shipment: Mapped["ShipmentModel"] = relationship("ShipmentModel", back_populates="parcels")
    parcel_items: Mapped[list["ParcelItemModel"]] = relationship(
        "ParcelItemModel",
        back_populates="parcel",
        cascade="all, delete-orphan",
        order_by="ParcelItemModel.id"
    )
    
    def __repr__(self) -> str:
        return f"<ParcelModel(id={self.id}, shipment_id={self.shipment_id})>"


class ParcelItemModel(Base):
    """SQLAlchemy model for items packed into parcels."""
    
    __tablename__ = "parcel_items"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    parcel_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("parcels.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    
    parcel: Mapped["ParcelModel"] = relationship("ParcelModel", back_populates="parcel_items")
    
    def __repr__(self) -> str:
        return f"<ParcelItemModel(id={self.id}, name={self.name})>"
