from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from uuid import UUID

class UbicacionBase(BaseModel):
    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    schedule: Optional[str] = None
    zone: Optional[str] = None
    delivery_days: Optional[str] = None

class UbicacionCreate(UbicacionBase):
    pass

class UbicacionUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = Field(None, min_length=1)
    schedule: Optional[str] = None
    zone: Optional[str] = None
    delivery_days: Optional[str] = None

class UbicacionOut(UbicacionBase):
    id: UUID
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
