"""Post office SQLAlchemy model."""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.session import Base


class PostOfficeModel(Base):
    """SQLAlchemy model for post offices."""
    
    __tablename__ = "post_offices"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("addresses.id"), nullable=True)
    postcode_pool_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("postcode_pools.id"),
        nullable=True
    )
    
    address: Mapped[Optional["AddressModel"]] = relationship("AddressModel")
    postcode_pool: Mapped[Optional["PostcodePoolModel"]] = relationship("PostcodePoolModel")
    
    def __repr__(self) -> str:
        return f"<PostOfficeModel(id={self.id}, name={self.name})>"
