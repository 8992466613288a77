from pydantic import BaseModel, Field, condecimal
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from app.schemas.plan import PlanResumen

class RenovacionCreate(BaseModel):
    # Opcionales para responder con el mensaje de negocio en lugar de un 422
    customer_id: Optional[UUID] = None
    membership_plan_id: Optional[int] = None
    concept: str = "Renovación mensual"
    amount: condecimal(max_digits=10, decimal_places=2, ge=0) = 0
    method_of_payment: Optional[str] = None
    received_by: Optional[str] = None

class ClienteRenovacion(BaseModel):
    id: UUID
    name: str
    email: str
    status: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    model_config = {"from_attributes": True}

class RenovacionOut(BaseModel):
    id: UUID
    customer_id: UUID
    membership_plan_id: int
    renewal_date: datetime
    concept: str
    amount: condecimal(max_digits=10, decimal_places=2)
    method_of_payment: Optional[str] = None
    received_by: Optional[str] = None
    created_at: Optional[datetime] = None
    customer: Optional[ClienteRenovacion] = None
    membership_plan: Optional[PlanResumen] = None

    model_config = {"from_attributes": True}

class CancelacionOut(BaseModel):
    id: UUID
    status: str
    message: str = Field("Membresía cancelada")
