from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import get_current_customer
from app.models.cliente import Customer
from app.schemas.cliente import ConsultaCodigoOut, MiMembresiaOut, UbicacionSeleccion
from app.services import clientes_service as svc
from app.services.export_service import tarjeta_pdf
from app.services.membresia_service import status_for_customer

router = APIRouter(prefix="/mi-membresia", tags=["Mi membresía"])


def _mi_membresia(customer: Customer) -> dict:
    estado = status_for_customer(customer, date.today())
    return {
        "name": customer.name,
        "email": customer.email,
        "membership_code": customer.membership_code,
        "status": customer.status,
        "plan": svc.plan_name(customer),
        "start_date": customer.start_date,
        "pickup_location": customer.pickup_location,
        "membresia": asdict(estado),
    }


@router.get("", response_model=MiMembresiaOut)
def mi_membresia(customer: Customer = Depends(get_current_customer)):
    return _mi_membresia(customer)


@router.put("/ubicacion", response_model=MiMembresiaOut)
def guardar_ubicacion(
    payload: UbicacionSeleccion,
    customer: Customer = Depends(get_current_customer),
    db: Session = Depends(get_db),
):
    customer = svc.set_pickup_location(db, customer, payload.pickup_location_id)
    return _mi_membresia(customer)


@router.get("/tarjeta.pdf")
def tarjeta(customer: Customer = Depends(get_current_customer)):
    buf = tarjeta_pdf(customer)
    headers = {"Content-Disposition": f'attachment; filename="{customer.membership_code}.pdf"'}
    return StreamingResponse(buf, media_type="application/pdf", headers=headers)


@router.get("/codigo/{membership_code}", response_model=ConsultaCodigoOut)
def consulta_por_codigo(membership_code: str, db: Session = Depends(get_db)):
    customer = svc.get_cliente_by_code(db, membership_code)
    if not customer:
        raise HTTPException(status_code=404, detail="Código de membresía no encontrado")
    estado = status_for_customer(customer, date.today())
    return {
        "name": customer.name,
        "membership_code": customer.membership_code,
        "status": customer.status,
        "plan": svc.plan_name(customer),
        "membresia": asdict(estado),
    }
