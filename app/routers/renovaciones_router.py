from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import get_admin_user
from app.schemas.auth import TokenData
from app.schemas.renovacion import RenovacionCreate, RenovacionOut
from app.services.export_service import XLSX_MEDIA_TYPE, renovaciones_xlsx
from app.services.renovaciones_service import create_renovacion, list_renovaciones

router = APIRouter(
    prefix="/renovaciones",
    tags=["Renovaciones"],
    dependencies=[Depends(get_admin_user)]
)


@router.get("", response_model=list[RenovacionOut])
def list_renovaciones_endpoint(customer_id: Optional[UUID] = None, db: Session = Depends(get_db)):
    return list_renovaciones(db, customer_id)


@router.post("", response_model=RenovacionOut, status_code=status.HTTP_201_CREATED)
def create_renovacion_endpoint(
    payload: RenovacionCreate,
    token_data: TokenData = Depends(get_admin_user),
    db: Session = Depends(get_db)
):
    return create_renovacion(db, payload, received_by=token_data.email)


@router.get("/export.xlsx")
def export_renovaciones(db: Session = Depends(get_db)):
    buf = renovaciones_xlsx(list_renovaciones(db))
    headers = {"Content-Disposition": 'attachment; filename="renovaciones.xlsx"'}
    return StreamingResponse(buf, media_type=XLSX_MEDIA_TYPE, headers=headers)
