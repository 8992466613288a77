from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional
from uuid import UUID

class ClienteEntrega(BaseModel):
    id: UUID
    name: str
    email: str
    membership_code: str
    plan: Optional[str] = None
    delivered: bool = False
    delivered_at: Optional[datetime] = None

class GrupoUbicacion(BaseModel):
    location_id: Optional[UUID] = None
    key: str
    name: str
    address: Optional[str] = None
    schedule: Optional[str] = None
    zone: Optional[str] = None
    total: int
    entregados: int
    pendientes: int
    clientes: List[ClienteEntrega]

class CalendarioOut(BaseModel):
    total_clientes: int
    grupos: List[GrupoUbicacion]
