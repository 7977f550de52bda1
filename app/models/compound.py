from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Compound(Base):
    """
    Residential compound (project site).
    Groups apartments that share location and facilities.
    """
    __tablename__ = "compounds"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), unique=True, nullable=False, index=True)
    location = Column(String(500), nullable=True)
    description = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    apartments = relationship("Apartment", back_populates="compound", passive_deletes=True)

    def __repr__(self):
        return f"<Compound(id={self.id}, name={self.name})>"
