# app/services/dashboard_service.py
from __future__ import annotations

from collections import Counter
from datetime import date
from decimal import Decimal
from typing import Dict, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.core.constants import ESTADO_ACTIVO, ESTADO_CANCELADO, ESTADO_PENDIENTE
from app.models.cliente import Customer
from app.models.plan import MembershipPlan
from app.models.renovacion import MembershipRenewal
from app.services.membresia_service import BUCKET_COLORS, status_for_customer


def _count_status(db: Session, estado: str) -> int:
    return db.query(func.count(Customer.id)).filter(Customer.status == estado).scalar() or 0


def bucket_distribution(db: Session, today: date) -> Dict[str, int]:
    customers = db.query(Customer).options(joinedload(Customer.membership_plan)).all()
    counts = Counter(status_for_customer(c, today).bucket for c in customers)
    return {bucket: counts.get(bucket, 0) for bucket in BUCKET_COLORS}


def get_resumen(db: Session, today: Optional[date] = None) -> dict:
    ingresos = db.query(func.coalesce(func.sum(MembershipRenewal.amount), 0)).scalar()
    return {
        "plans": db.query(func.count(MembershipPlan.id)).scalar() or 0,
        "customers": db.query(func.count(Customer.id)).scalar() or 0,
        "active": _count_status(db, ESTADO_ACTIVO),
        "cancelled": _count_status(db, ESTADO_CANCELADO),
        "pending": _count_status(db, ESTADO_PENDIENTE),
        "por_vencimiento": bucket_distribution(db, today or date.today()),
        "ingresos_renovaciones": Decimal(str(ingresos or 0)),
    }
