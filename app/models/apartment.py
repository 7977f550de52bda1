from sqlalchemy import (
    Column, Integer, String, Float, DateTime, Text, ForeignKey, Boolean, JSON, Table, Index
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


apartment_amenities = Table(
    "apartment_amenities",
    Base.metadata,
    Column("apartment_id", Integer, ForeignKey("apartments.id", ondelete="CASCADE"), primary_key=True),
    Column("amenity_id", Integer, ForeignKey("amenities.id", ondelete="CASCADE"), primary_key=True),
)

# Favorites relation: composite primary key keeps membership a set
apartment_favorites = Table(
    "apartment_favorites",
    Base.metadata,
    Column("apartment_id", Integer, ForeignKey("apartments.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True),
)


class Apartment(Base):
    """
    Apartment listing for rent or sale.
    Owned by the agent that created it, belongs to one developer and one compound.
    """
    __tablename__ = "apartments"
    __table_args__ = (
        Index("ix_apartments_available_created", "is_available", "created_at"),
        Index("ix_apartments_agent_created", "agent_id", "created_at"),
        Index("ix_apartments_compound_available", "compound_id", "is_available"),
        Index("ix_apartments_developer_available", "developer_id", "is_available"),
    )

    id = Column(Integer, primary_key=True, index=True)

    unit_name = Column(String(100), nullable=False)
    unit_number = Column(String(20), nullable=False)
    project = Column(String(200), nullable=False)

    address = Column(String(500), nullable=False)
    city = Column(String(100), nullable=False, index=True)
    state = Column(String(100), nullable=True)

    price = Column(Float, nullable=False, index=True)
    listing_type = Column(String(10), nullable=False, default="rent", index=True)  # rent, sale

    bedrooms = Column(Integer, nullable=False)
    bathrooms = Column(Integer, nullable=False)
    square_feet = Column(Float, nullable=False)

    description = Column(Text, nullable=False)
    images = Column(JSON, nullable=False, default=list)

    is_available = Column(Boolean, nullable=False, default=True)

    agent_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    developer_id = Column(Integer, ForeignKey("developers.id"), nullable=False)
    compound_id = Column(Integer, ForeignKey("compounds.id"), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    agent = relationship("User")
    developer = relationship("Developer", back_populates="apartments")
    compound = relationship("Compound", back_populates="apartments")
    amenities = relationship("Amenity", secondary=apartment_amenities, order_by="Amenity.name")
    favorited_by = relationship("User", secondary=apartment_favorites)

    @property
    def full_address(self) -> str:
        return f"{self.address}, {self.city}"

    @property
    def price_formatted(self) -> str:
        return f"${self.price:,.2f}"

    @property
    def title(self) -> str:
        return f"{self.unit_name} - {self.project}"

    @property
    def favorite_ids(self) -> list:
        return sorted(user.id for user in self.favorited_by)

    def __repr__(self):
        return f"<Apartment(id={self.id}, unit={self.unit_name} {self.unit_number}, project={self.project})>"
