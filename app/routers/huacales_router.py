from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import get_admin_user
from app.schemas.huacal import HuacalCreate, HuacalOut
from app.services.huacales_service import create_huacal, list_huacales, serialize_huacal

router = APIRouter(
    prefix="/huacales",
    tags=["Huacales"],
    dependencies=[Depends(get_admin_user)]
)


@router.get("", response_model=List[HuacalOut])
def list_huacales_endpoint(zona: Optional[str] = None, db: Session = Depends(get_db)):
    return [serialize_huacal(h) for h in list_huacales(db, zona)]


@router.post("", response_model=HuacalOut, status_code=status.HTTP_201_CREATED)
def create_huacal_endpoint(payload: HuacalCreate, db: Session = Depends(get_db)):
    huacal = create_huacal(db, payload)
    return serialize_huacal(huacal)
