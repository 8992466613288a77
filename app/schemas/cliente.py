from datetime import date, datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, model_validator

from app.core.constants import ESTADOS_CLIENTE
from app.schemas.plan import PlanResumen
from app.schemas.ubicacion import UbicacionOut

EstadoCliente = Literal[ESTADOS_CLIENTE]


class ClienteRegistro(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    password: str = Field(..., min_length=1)
    membership_plan_id: int


class ClienteRegistroOut(BaseModel):
    id: UUID
    membership_code: str
    message: str


# membership_code no se puede modificar: no aparece en este esquema
class ClienteUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    status: Optional[EstadoCliente] = None
    membership_plan_id: Optional[int] = None
    pickup_location_id: Optional[UUID] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @model_validator(mode="after")
    def _check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date debe ser posterior o igual a start_date")
        return self


class UbicacionSeleccion(BaseModel):
    pickup_location_id: Optional[UUID] = None


class EstadoMembresiaOut(BaseModel):
    end_date: Optional[date] = None
    end_date_calculada: bool = False
    days_remaining: Optional[int] = None
    label: str
    bucket: str
    color: str


class ClienteOut(BaseModel):
    id: UUID
    name: str
    email: EmailStr
    phone: Optional[str] = None
    membership_code: str
    status: EstadoCliente
    membership_plan_id: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    pickup_location_id: Optional[UUID] = None
    delivered: bool = False
    delivered_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ClienteDetalleOut(ClienteOut):
    membership_plan: Optional[PlanResumen] = None
    pickup_location: Optional[UbicacionOut] = None
    membresia: EstadoMembresiaOut


class MiMembresiaOut(BaseModel):
    name: str
    email: EmailStr
    membership_code: str
    status: EstadoCliente
    plan: Optional[str] = None
    start_date: Optional[date] = None
    pickup_location: Optional[UbicacionOut] = None
    membresia: EstadoMembresiaOut


class ConsultaCodigoOut(BaseModel):
    name: str
    membership_code: str
    status: EstadoCliente
    plan: Optional[str] = None
    membresia: EstadoMembresiaOut
