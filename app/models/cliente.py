import uuid
from sqlalchemy import Column, Text, Date, Boolean, TIMESTAMP, ForeignKey, Integer, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.constants import ESTADO_PENDIENTE, ESTADOS_CLIENTE
from app.core.database import Base


class Customer(Base):
    __tablename__ = "customers"
    __table_args__ = (
        CheckConstraint(
            "status IN (%s)" % ", ".join(f"'{e}'" for e in ESTADOS_CLIENTE),
            name="ck_customers_status",
        ),
        CheckConstraint("end_date IS NULL OR start_date IS NULL OR end_date >= start_date", name="ck_customers_fechas"),
    )
    id                 = Column(PGUUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name               = Column(Text, nullable=False)
    email              = Column(Text, nullable=False, unique=True)
    phone              = Column(Text)
    password_hash      = Column(Text, nullable=False)
    membership_code    = Column(Text, nullable=False, unique=True, index=True)
    status             = Column(Text, nullable=False, default=ESTADO_PENDIENTE)
    membership_plan_id = Column(Integer, ForeignKey("membership_plans.id"), nullable=False)
    start_date         = Column(Date)
    end_date           = Column(Date)
    pickup_location_id = Column(PGUUID(as_uuid=True), ForeignKey("pickup_locations.id", ondelete="SET NULL"))
    delivered          = Column(Boolean, nullable=False, default=False)
    delivered_at       = Column(TIMESTAMP(timezone=True))
    created_at         = Column(TIMESTAMP(timezone=True), server_default=func.now())

    membership_plan = relationship("MembershipPlan")
    pickup_location = relationship("PickupLocation")
    renewals        = relationship("MembershipRenewal", back_populates="customer", cascade="all, delete-orphan", passive_deletes=True)
