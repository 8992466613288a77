# app/services/renovaciones_service.py
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.models.cliente import Customer
from app.models.plan import MembershipPlan
from app.models.renovacion import MembershipRenewal
from app.schemas.renovacion import RenovacionCreate
from app.services.membresia_service import compute_renewal

logger = logging.getLogger(__name__)


def list_renovaciones(db: Session, customer_id: Optional[UUID] = None) -> List[MembershipRenewal]:
    q = db.query(MembershipRenewal).options(
        joinedload(MembershipRenewal.customer),
        joinedload(MembershipRenewal.membership_plan),
    )
    if customer_id:
        q = q.filter(MembershipRenewal.customer_id == customer_id)
    return q.order_by(MembershipRenewal.created_at.desc(), MembershipRenewal.renewal_date.desc()).all()


def create_renovacion(
    db: Session,
    payload: RenovacionCreate,
    received_by: Optional[str] = None,
    today: Optional[date] = None,
    now: Optional[datetime] = None,
) -> MembershipRenewal:
    """
    Registra el pago de una renovación y extiende la membresía del cliente.

    La fila de la bitácora y las nuevas fechas del cliente se guardan en la
    misma transacción: si cualquiera de las dos escrituras falla no queda
    ninguna.
    """
    if not payload.customer_id or not payload.membership_plan_id:
        raise HTTPException(status_code=400, detail="Selecciona un cliente y un plan.")

    customer = db.get(Customer, payload.customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Cliente no encontrado")
    plan = db.get(MembershipPlan, payload.membership_plan_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Plan no encontrado")

    now = now or datetime.utcnow()
    # Misma fecha local que usan las vistas de estado
    today = today or date.today()

    fechas = compute_renewal(
        customer.status,
        customer.start_date,
        customer.end_date,
        plan.duration_months,
        plan.free_months,
        today,
    )

    renovacion = MembershipRenewal(
        customer_id=customer.id,
        membership_plan_id=plan.id,
        renewal_date=now,
        concept=payload.concept,
        amount=payload.amount,
        method_of_payment=payload.method_of_payment,
        received_by=payload.received_by or received_by,
    )

    try:
        db.add(renovacion)
        customer.start_date = fechas.start_date
        customer.end_date = fechas.end_date
        customer.status = fechas.status
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        mensaje = str(getattr(e, "orig", None) or e)
        logger.error("Error registrando renovación de %s: %s", payload.customer_id, mensaje)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=mensaje)

    db.refresh(renovacion)
    logger.info(
        "Renovación %s: cliente %s extendido de %s a %s",
        renovacion.id, customer.membership_code, fechas.extension_start, fechas.end_date,
    )
    return renovacion
