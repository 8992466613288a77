from pydantic import BaseModel, Field, condecimal
from datetime import datetime
from typing import Optional

class PlanBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: condecimal(max_digits=10, decimal_places=2, ge=0) = 0
    duration_months: int = Field(1, ge=1)
    free_months: int = Field(0, ge=0)
    subscription_fee: condecimal(max_digits=10, decimal_places=2, ge=0) = 0

class PlanCreate(PlanBase):
    pass

class PlanUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[condecimal(max_digits=10, decimal_places=2, ge=0)] = None
    duration_months: Optional[int] = Field(None, ge=1)
    free_months: Optional[int] = Field(None, ge=0)
    subscription_fee: Optional[condecimal(max_digits=10, decimal_places=2, ge=0)] = None

class PlanOut(PlanBase):
    id: int
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

class PlanResumen(BaseModel):
    id: int
    name: str
    duration_months: int
    free_months: int

    model_config = {"from_attributes": True}
