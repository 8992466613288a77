from sqlalchemy import Column, Integer, Text, Numeric, TIMESTAMP
from sqlalchemy.sql import func

from app.core.database import Base


class MembershipPlan(Base):
    __tablename__ = "membership_plans"
    id               = Column(Integer, primary_key=True, index=True)
    name             = Column(Text, nullable=False)
    description      = Column(Text)
    price            = Column(Numeric(10, 2), nullable=False, default=0)
    duration_months  = Column(Integer, nullable=False, default=1)
    free_months      = Column(Integer, nullable=False, default=0)
    subscription_fee = Column(Numeric(10, 2), nullable=False, default=0)
    created_at       = Column(TIMESTAMP(timezone=True), server_default=func.now())

    @property
    def total_months(self) -> int:
        return (self.duration_months or 0) + (self.free_months or 0)
