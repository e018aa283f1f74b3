"""Postcode pool and barcode SQLAlchemy models."""

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.session import Base


class PostcodePoolModel(Base):
    """SQLAlchemy model for postcode pools."""
    
    __tablename__ = "postcode_pools"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    postcode: Mapped[str] = mapped_column(String(5), nullable=False, index=True)
    closed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    
    # Issued barcodes
    barcode_inner_numbers: Mapped[list["BarcodeInnerNumberModel"]] = relationship(
        "BarcodeInnerNumberModel",
        back_populates="postcode_pool",
        cascade="all, delete-orphan",
        order_by="BarcodeInnerNumberModel.inner_number"
    )
    
    def __repr__(self) -> str:
        return f"<PostcodePoolModel(id={self.id}, postcode={self.postcode})>"


class BarcodeInnerNumberModel(Base):
    """SQLAlchemy model for barcode inner numbers issued from a pool."""
    
    __tablename__ = "barcode_inner_numbers"
    __table_args__ = (
        UniqueConstraint("postcode_pool_id", "inner_number", name="uq_barcode_pool_number"),
    )
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    postcode_pool_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("postcode_pools.id", ondelete="CASCADE"),
        nullable=True,
        index=True
    )
    inner_number: Mapped[str] = mapped_column(String(7), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    
    postcode_pool: Mapped["PostcodePoolModel"] = relationship(
        "PostcodePoolModel",
        back_populates="barcode_inner_numbers"
    )
    
    def __repr__(self) -> str:
        return f"<BarcodeInnerNumberModel(id={self.id}, inner_number={self.inner_number})>"
