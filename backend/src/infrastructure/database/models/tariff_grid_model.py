"""Tariff grid SQLAlchemy model."""

from decimal import Decimal

from sqlalchemy import Float, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class TariffGridModel(Base):
    """SQLAlchemy model for tariff grid rows."""
    
    __tablename__ = "tariff_grids"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    length: Mapped[float] = mapped_column(Float, nullable=False)
    w2w_variation: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    
    def __repr__(self) -> str:
        return (
            f"<TariffGridModel(id={self.id}, weight={self.weight}, "
            f"variation={self.w2w_variation}, price={self.price})>"
        )
