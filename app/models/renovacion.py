import uuid
from sqlalchemy import Column, Text, Numeric, TIMESTAMP, ForeignKey, Integer
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class MembershipRenewal(Base):
    """Bitácora de renovaciones; las filas nunca se actualizan ni se borran."""
    __tablename__ = "membership_renewals"
    id                 = Column(PGUUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    customer_id        = Column(PGUUID(as_uuid=True), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False)
    membership_plan_id = Column(Integer, ForeignKey("membership_plans.id"), nullable=False)
    renewal_date       = Column(TIMESTAMP(timezone=True), nullable=False)
    concept            = Column(Text, nullable=False)
    amount             = Column(Numeric(10, 2), nullable=False, default=0)
    method_of_payment  = Column(Text)
    received_by        = Column(Text)
    created_at         = Column(TIMESTAMP(timezone=True), server_default=func.now())

    customer        = relationship("Customer", back_populates="renewals")
    membership_plan = relationship("MembershipPlan")
