from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime
from uuid import UUID

class AdminCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)

class AdminOut(BaseModel):
    id: UUID
    email: EmailStr
    activo: bool
    creado_en: Optional[datetime] = None
    model_config = {"from_attributes": True}


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

class TokenData(BaseModel):
    sub: Optional[str]
    role: Optional[str]
    email: Optional[str] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class SessionOut(BaseModel):
    email: EmailStr
    rol: str
    allowed: bool
