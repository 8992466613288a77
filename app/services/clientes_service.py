# app/services/clientes_service.py
from __future__ import annotations

import logging
import time
from dataclasses import asdict
from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.core.config import settings
from app.core.constants import ESTADO_CANCELADO, ESTADO_PENDIENTE
from app.core.security import hash_password, verify_password
from app.models.cliente import Customer
from app.models.plan import MembershipPlan
from app.schemas.cliente import ClienteRegistro, ClienteUpdate
from app.services.membresia_service import status_for_customer
from app.services.planes_service import get_plan_or_404
from app.services.ubicaciones_service import get_ubicacion_or_404

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# CÓDIGO DE MEMBRESÍA
# --------------------------------------------------------------------------- #


def generate_membership_code() -> str:
    return f"{settings.MEMBERSHIP_CODE_PREFIX}-{int(time.time() * 1000)}"


def _unique_membership_code(db: Session) -> str:
    code = generate_membership_code()
    # Dos registros en el mismo milisegundo generan el mismo código
    while db.query(Customer.id).filter(Customer.membership_code == code).first():
        time.sleep(0.001)
        code = generate_membership_code()
    return code


# --------------------------------------------------------------------------- #
# CONSULTAS
# --------------------------------------------------------------------------- #


def _base_query(db: Session):
    return db.query(Customer).options(
        joinedload(Customer.membership_plan),
        joinedload(Customer.pickup_location),
    )


def get_cliente(db: Session, customer_id: UUID) -> Optional[Customer]:
    return _base_query(db).filter(Customer.id == customer_id).first()


def get_cliente_or_404(db: Session, customer_id: UUID) -> Customer:
    customer = get_cliente(db, customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Cliente no encontrado")
    return customer


def get_cliente_by_code(db: Session, membership_code: str) -> Optional[Customer]:
    return _base_query(db).filter(Customer.membership_code == membership_code).first()


def list_clientes(db: Session, search: Optional[str] = None) -> List[Customer]:
    q = _base_query(db)
    if search:
        q = q.filter(Customer.name.ilike(f"%{search.strip()}%"))
    return q.order_by(Customer.name).all()


def with_membership_status(customer: Customer, today: Optional[date] = None) -> dict:
    """Serializa el cliente con los días restantes calculados al vuelo."""
    estado = status_for_customer(customer, today or date.today())
    return {
        **{c.name: getattr(customer, c.name) for c in Customer.__table__.columns if c.name != "password_hash"},
        "membership_plan": customer.membership_plan,
        "pickup_location": customer.pickup_location,
        "membresia": asdict(estado),
    }


# --------------------------------------------------------------------------- #
# REGISTRO Y LOGIN
# --------------------------------------------------------------------------- #


def normalize_email(email: str) -> str:
    return email.strip().lower()



def register_customer(db: Session, payload: ClienteRegistro) -> Customer:
    if not payload.name.strip():
        raise HTTPException(status_code=400, detail="Por favor completa nombre y email.")
    if not payload.password:
        raise HTTPException(status_code=400, detail="Por favor ingresa una contraseña.")
    get_plan_or_404(db, payload.membership_plan_id)

    email = normalize_email(payload.email)
    if db.query(Customer.id).filter(func.lower(Customer.email) == email).first():
        raise HTTPException(status_code=400, detail="El email ya está registrado")

    customer = Customer(
        name=payload.name.strip(),
        email=email,
        phone=payload.phone,
        password_hash=hash_password(payload.password),
        membership_plan_id=payload.membership_plan_id,
        membership_code=_unique_membership_code(db),
        status=ESTADO_PENDIENTE,
    )
    db.add(customer)
    db.commit()
    db.refresh(customer)
    logger.info("Cliente registrado %s con código %s", customer.email, customer.membership_code)
    return customer


def authenticate_customer(db: Session, email: str, password: str) -> Customer:
    customer = db.query(Customer).filter(func.lower(Customer.email) == normalize_email(email)).first()
    if not customer or not verify_password(password, customer.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales inválidas",
        )
    return customer


# --------------------------------------------------------------------------- #
# ADMINISTRACIÓN
# --------------------------------------------------------------------------- #


def update_cliente(db: Session, customer_id: UUID, payload: ClienteUpdate) -> Customer:
    customer = get_cliente_or_404(db, customer_id)
    data = payload.model_dump(exclude_unset=True)

    if data.get("membership_plan_id") is not None:
        get_plan_or_404(db, data["membership_plan_id"])
    if data.get("pickup_location_id") is not None:
        get_ubicacion_or_404(db, data["pickup_location_id"])
    if data.get("email"):
        data["email"] = normalize_email(data["email"])
    if data.get("email") and data["email"] != customer.email:
        if db.query(Customer.id).filter(func.lower(Customer.email) == data["email"]).first():
            raise HTTPException(status_code=400, detail="El email ya está registrado")

    for field in ("name", "email", "status", "membership_plan_id"):
        if field in data and data[field] is None:
            data.pop(field)

    start = data.get("start_date", customer.start_date)
    end = data.get("end_date", customer.end_date)
    if start and end and end < start:
        raise HTTPException(status_code=400, detail="La fecha de fin no puede ser anterior a la de inicio")

    for field, value in data.items():
        setattr(customer, field, value)
    db.commit()
    db.refresh(customer)
    return customer


def cancel_membership(db: Session, customer_id: UUID) -> Customer:
    customer = get_cliente_or_404(db, customer_id)
    customer.status = ESTADO_CANCELADO
    db.commit()
    db.refresh(customer)
    logger.info("Membresía cancelada para %s", customer.membership_code)
    return customer


def delete_cliente(db: Session, customer_id: UUID) -> None:
    customer = get_cliente_or_404(db, customer_id)
    db.delete(customer)
    db.commit()
    logger.info("Cliente eliminado: %s (%s)", customer.name, customer_id)


def set_pickup_location(db: Session, customer: Customer, location_id: Optional[UUID]) -> Customer:
    if location_id is not None:
        get_ubicacion_or_404(db, location_id)
    customer.pickup_location_id = location_id
    db.commit()
    db.refresh(customer)
    return customer


def plan_name(customer: Customer) -> Optional[str]:
    plan: Optional[MembershipPlan] = customer.membership_plan
    return plan.name if plan else None
