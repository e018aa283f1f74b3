"""Client and counterparty SQLAlchemy models."""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.session import Base


class CounterpartyModel(Base):
    """SQLAlchemy model for counterparties."""
    
    __tablename__ = "counterparties"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    postcode_pool_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("postcode_pools.id"),
        nullable=True
    )
    
    postcode_pool: Mapped[Optional["PostcodePoolModel"]] = relationship("PostcodePoolModel")
    
    def __repr__(self) -> str:
        return f"<CounterpartyModel(id={self.id}, name={self.name})>"


class ClientModel(Base):
    """SQLAlchemy model for clients."""
    
    __tablename__ = "clients"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    uniq_registration_number: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    
    # Foreign keys
    address_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("addresses.id"),
        nullable=True
    )
    counterparty_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("counterparties.id"),
        nullable=True,
        index=True
    )
    
    address: Mapped[Optional["AddressModel"]] = relationship("AddressModel")
    counterparty: Mapped[Optional["CounterpartyModel"]] = relationship("CounterpartyModel")
    
    def __repr__(self) -> str:
        return f"<ClientModel(id={self.id}, name={self.name})>"
