import uuid
from sqlalchemy import Column, Text, Integer, Numeric, Boolean, TIMESTAMP, ForeignKey
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.constants import EXTRAS_NO, HUACAL_PENDIENTE
from app.core.database import Base


class Huacal(Base):
    __tablename__ = "huacales"
    id                 = Column(PGUUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    customer_id        = Column(PGUUID(as_uuid=True), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False)
    pickup_location_id = Column(PGUUID(as_uuid=True), ForeignKey("pickup_locations.id", ondelete="SET NULL"))
    cantidad           = Column(Integer, nullable=False, default=1)
    tipo               = Column(Text)
    extras             = Column(Text, nullable=False, default=EXTRAS_NO)
    extra_item         = Column(Text)
    extra_price        = Column(Numeric(10, 2))
    delivery_time      = Column(Text)
    transport_type     = Column(Text, nullable=False, default="Huacal")
    returned_huacals   = Column(Integer, nullable=False, default=0)
    payment_method     = Column(Text)
    cash_payment       = Column(Boolean, nullable=False, default=False)
    status             = Column(Text, nullable=False, default=HUACAL_PENDIENTE)
    domicilio          = Column(Text)
    created_at         = Column(TIMESTAMP(timezone=True), server_default=func.now())

    customer        = relationship("Customer")
    pickup_location = relationship("PickupLocation")
