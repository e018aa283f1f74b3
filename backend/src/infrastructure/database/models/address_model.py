"""Address SQLAlchemy model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class AddressModel(Base):
    """SQLAlchemy model for postal addresses."""
    
    __tablename__ = "addresses"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    postcode: Mapped[str] = mapped_column(String(5), nullable=False, index=True)
    region: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    district: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    city: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    street: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    house_number: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    apartment_number: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    
    def __repr__(self) -> str:
        return f"<AddressModel(id={self.id}, postcode={self.postcode}, city={self.city})>"
