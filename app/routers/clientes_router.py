from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import get_admin_user
from app.schemas.cliente import (
    ClienteRegistro, ClienteRegistroOut, ClienteUpdate, ClienteOut, ClienteDetalleOut,
)
from app.schemas.renovacion import CancelacionOut
from app.services import clientes_service as svc
from app.services.export_service import XLSX_MEDIA_TYPE, clientes_xlsx

router = APIRouter(prefix="/clientes", tags=["Clientes"])


@router.post(
    "/registro",
    response_model=ClienteRegistroOut,
    status_code=status.HTTP_201_CREATED
)
def registro(payload: ClienteRegistro, db: Session = Depends(get_db)):
    customer = svc.register_customer(db, payload)
    return ClienteRegistroOut(
        id=customer.id,
        membership_code=customer.membership_code,
        message=f"¡Registro exitoso! Tu código de membresía es: {customer.membership_code}",
    )


@router.get(
    "",
    response_model=list[ClienteDetalleOut],
    dependencies=[Depends(get_admin_user)]
)
def list_clientes_endpoint(q: Optional[str] = None, db: Session = Depends(get_db)):
    return [svc.with_membership_status(c) for c in svc.list_clientes(db, q)]


@router.get("/export.xlsx", dependencies=[Depends(get_admin_user)])
def export_clientes(q: Optional[str] = None, db: Session = Depends(get_db)):
    buf = clientes_xlsx(svc.list_clientes(db, q))
    headers = {"Content-Disposition": 'attachment; filename="clientes.xlsx"'}
    return StreamingResponse(buf, media_type=XLSX_MEDIA_TYPE, headers=headers)


@router.get(
    "/{customer_id}",
    response_model=ClienteDetalleOut,
    dependencies=[Depends(get_admin_user)]
)
def get_cliente_endpoint(customer_id: UUID, db: Session = Depends(get_db)):
    return svc.with_membership_status(svc.get_cliente_or_404(db, customer_id))


@router.put(
    "/{customer_id}",
    response_model=ClienteOut,
    dependencies=[Depends(get_admin_user)]
)
def update_cliente_endpoint(customer_id: UUID, payload: ClienteUpdate, db: Session = Depends(get_db)):
    return svc.update_cliente(db, customer_id, payload)


@router.post(
    "/{customer_id}/cancelar",
    response_model=CancelacionOut,
    dependencies=[Depends(get_admin_user)]
)
def cancelar_membresia(customer_id: UUID, db: Session = Depends(get_db)):
    customer = svc.cancel_membership(db, customer_id)
    return CancelacionOut(id=customer.id, status=customer.status)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_admin_user)]
)
def delete_cliente_endpoint(customer_id: UUID, db: Session = Depends(get_db)):
    svc.delete_cliente(db, customer_id)
