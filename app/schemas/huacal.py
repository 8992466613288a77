from pydantic import BaseModel, Field, condecimal
from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

class HuacalCreate(BaseModel):
    customer_id: UUID
    pickup_location_id: Optional[UUID] = None
    cantidad: int = Field(1, ge=1)
    tipo: Optional[str] = None
    extras: Literal["Sí", "No"] = "No"
    extra_item: Optional[str] = None
    extra_price: Optional[condecimal(max_digits=10, decimal_places=2, ge=0)] = None
    delivery_time: Optional[str] = None
    transport_type: str = "Huacal"
    returned_huacals: int = Field(0, ge=0)
    payment_method: Optional[str] = None
    cash_payment: bool = False
    status: str = "Pendiente"
    domicilio: Optional[str] = None

class HuacalOut(HuacalCreate):
    id: UUID
    created_at: Optional[datetime] = None
    cliente: Optional[str] = None
    direccion: Optional[str] = None

    model_config = {"from_attributes": True}
