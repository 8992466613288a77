from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import get_admin_user
from app.schemas.cliente import ClienteOut
from app.schemas.entregas import CalendarioOut
from app.services import entregas_service as svc
from app.services.export_service import XLSX_MEDIA_TYPE, calendario_pdf, calendario_xlsx

router = APIRouter(
    prefix="/entregas",
    tags=["Entregas"],
    dependencies=[Depends(get_admin_user)]
)


@router.get("/calendario", response_model=CalendarioOut)
def calendario(zona: Optional[str] = None, db: Session = Depends(get_db)):
    grupos = svc.get_calendario(db, zona)
    return {
        "total_clientes": sum(g.total for g in grupos),
        "grupos": [svc.serialize_group(g) for g in grupos],
    }


@router.get("/calendario.xlsx")
def calendario_excel(zona: Optional[str] = None, db: Session = Depends(get_db)):
    buf = calendario_xlsx(svc.get_calendario(db, zona))
    headers = {"Content-Disposition": 'attachment; filename="calendario_recogidas.xlsx"'}
    return StreamingResponse(buf, media_type=XLSX_MEDIA_TYPE, headers=headers)


@router.get("/calendario.pdf")
def calendario_pdf_endpoint(zona: Optional[str] = None, db: Session = Depends(get_db)):
    buf = calendario_pdf(svc.get_calendario(db, zona))
    headers = {"Content-Disposition": 'attachment; filename="calendario_recogidas.pdf"'}
    return StreamingResponse(buf, media_type="application/pdf", headers=headers)


@router.post("/clientes/{customer_id}/entregado", response_model=ClienteOut)
def marcar_entregado(customer_id: UUID, db: Session = Depends(get_db)):
    return svc.mark_delivered(db, customer_id)
