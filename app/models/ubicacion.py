import uuid
from sqlalchemy import Column, Text, TIMESTAMP
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.sql import func

from app.core.database import Base


class PickupLocation(Base):
    __tablename__ = "pickup_locations"
    id            = Column(PGUUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name          = Column(Text, nullable=False)
    address       = Column(Text, nullable=False)
    schedule      = Column(Text)
    zone          = Column(Text)           # Norte / Sur
    delivery_days = Column(Text)
    created_at    = Column(TIMESTAMP(timezone=True), server_default=func.now())
