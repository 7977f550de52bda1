from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Developer(Base):
    """Real-estate developer that builds compounds"""
    __tablename__ = "developers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    website = Column(String(500), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    apartments = relationship("Apartment", back_populates="developer", passive_deletes=True)

    def __repr__(self):
        return f"<Developer(id={self.id}, name={self.name})>"
