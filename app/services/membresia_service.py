# app/services/membresia_service.py
"""
Cálculo de fechas de membresía.

Todo es aritmética de calendario sin acceso a la base de datos: la fecha
"de hoy" se recibe como parámetro para poder probar cada caso con fechas
fijas.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from app.core.constants import ESTADO_ACTIVO

# --------------------------------------------------------------------------- #
# TABLA DE VENCIMIENTO
# --------------------------------------------------------------------------- #

BUCKET_SIN_FECHA = "unknown"
BUCKET_VENCIDA = "expired"
BUCKET_VIGENTE = "fresh"
BUCKET_AVISO = "warning"
BUCKET_PRECAUCION = "caution"
BUCKET_CRITICA = "critical"

BUCKET_COLORS = {
    BUCKET_SIN_FECHA: "gray",
    BUCKET_VENCIDA: "gray",
    BUCKET_VIGENTE: "green",
    BUCKET_AVISO: "yellow",
    BUCKET_PRECAUCION: "orange",
    BUCKET_CRITICA: "red",
}

LABEL_VENCIDA = "Vencida"
LABEL_SIN_FECHA = "Sin fecha"


@dataclass(frozen=True)
class RenewalComputation:
    extension_start: date       # fecha desde la que se suman los meses
    start_date: date            # fecha de inicio que se guarda en el cliente
    end_date: date
    status: str = ESTADO_ACTIVO


@dataclass(frozen=True)
class MembershipStatus:
    end_date: Optional[date]
    end_date_calculada: bool
    days_remaining: Optional[int]
    label: str
    bucket: str
    color: str


def add_months(start: date, months: int) -> date:
    """
    Suma meses de calendario. Si el día no existe en el mes destino se usa
    el último día del mes (31-ene + 1 mes = 28/29-feb).
    """
    return start + relativedelta(months=months)


def compute_renewal(
    status: Optional[str],
    start_date: Optional[date],
    end_date: Optional[date],
    duration_months: int,
    free_months: int,
    today: date,
) -> RenewalComputation:
    total_months = (duration_months or 0) + (free_months or 0)

    # Membresía activa con vencimiento futuro: se extiende desde su fin
    if status == ESTADO_ACTIVO and end_date is not None and end_date > today:
        extension_start = end_date
    else:
        extension_start = today

    # Solo se reinicia start_date si no estaba activa o no tenía fin
    if status != ESTADO_ACTIVO or end_date is None or start_date is None:
        new_start = today
    else:
        new_start = start_date

    return RenewalComputation(
        extension_start=extension_start,
        start_date=new_start,
        end_date=add_months(extension_start, total_months),
    )


def calculated_end_date(
    start_date: Optional[date],
    end_date: Optional[date],
    duration_months: Optional[int],
    free_months: Optional[int],
) -> Optional[date]:
    if end_date is not None:
        return end_date
    total_months = (duration_months or 0) + (free_months or 0)
    if start_date is None or total_months <= 0:
        return None
    return add_months(start_date, total_months)


def days_remaining(end_date: Optional[date], today: date) -> Optional[int]:
    if end_date is None:
        return None
    # Con fechas sin hora la diferencia ya es el techo de los días restantes
    return (end_date - today).days


def classify_days(days: Optional[int]) -> str:
    if days is None:
        return BUCKET_SIN_FECHA
    if days < 0:
        return BUCKET_VENCIDA
    if days > 30:
        return BUCKET_VIGENTE
    if days >= 15:
        return BUCKET_AVISO
    if days >= 5:
        return BUCKET_PRECAUCION
    return BUCKET_CRITICA


def days_label(days: Optional[int]) -> str:
    if days is None:
        return LABEL_SIN_FECHA
    if days < 0:
        return LABEL_VENCIDA
    return str(days)


def derive_membership_status(
    start_date: Optional[date],
    end_date: Optional[date],
    duration_months: Optional[int],
    free_months: Optional[int],
    today: date,
) -> MembershipStatus:
    effective_end = calculated_end_date(start_date, end_date, duration_months, free_months)
    days = days_remaining(effective_end, today)
    bucket = classify_days(days)
    return MembershipStatus(
        end_date=effective_end,
        end_date_calculada=end_date is None and effective_end is not None,
        days_remaining=days,
        label=days_label(days),
        bucket=bucket,
        color=BUCKET_COLORS[bucket],
    )


def status_for_customer(customer, today: date) -> MembershipStatus:
    plan = customer.membership_plan
    return derive_membership_status(
        customer.start_date,
        customer.end_date,
        plan.duration_months if plan else None,
        plan.free_months if plan else None,
        today,
    )
