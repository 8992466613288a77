# app/services/entregas_service.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from app.core.constants import SIN_UBICACION, SIN_UBICACION_NOMBRE
from app.models.cliente import Customer
from app.models.ubicacion import PickupLocation
from app.services.clientes_service import get_cliente_or_404

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# AGRUPACIÓN POR PUNTO DE RECOGIDA
# --------------------------------------------------------------------------- #


@dataclass
class LocationGroup:
    key: str
    name: str
    location: Optional[PickupLocation] = None
    customers: List[Customer] = field(default_factory=list)

    @property
    def is_unassigned(self) -> bool:
        return self.key == SIN_UBICACION

    @property
    def total(self) -> int:
        return len(self.customers)

    @property
    def entregados(self) -> int:
        return sum(1 for c in self.customers if c.delivered)

    @property
    def pendientes(self) -> int:
        return self.total - self.entregados


def group_by_location(customers: Iterable[Customer]) -> List[LocationGroup]:
    """
    Reparte a los clientes por punto de recogida. Cada cliente cae en un solo
    grupo; los que no tienen ubicación van al grupo SIN_UBICACION, que
    siempre queda al final.
    """
    groups: Dict[str, LocationGroup] = {}
    for customer in customers:
        if customer.pickup_location_id is None:
            key = SIN_UBICACION
        else:
            key = str(customer.pickup_location_id)

        if key not in groups:
            location = customer.pickup_location if key != SIN_UBICACION else None
            name = location.name if location is not None else SIN_UBICACION_NOMBRE
            groups[key] = LocationGroup(key=key, name=name, location=location)
        groups[key].customers.append(customer)

    for group in groups.values():
        group.customers.sort(key=lambda c: (c.name or "").lower())

    return sorted(groups.values(), key=lambda g: (g.is_unassigned, (g.name or "").lower(), g.key))


def _matches_zone(customer: Customer, zona: str) -> bool:
    loc = customer.pickup_location
    if loc is None:
        return False
    zona = zona.strip().lower()
    return (loc.zone or "").lower() == zona or (loc.name or "").lower() == zona


def get_calendario(db: Session, zona: Optional[str] = None) -> List[LocationGroup]:
    customers = (
        db.query(Customer)
        .options(
            joinedload(Customer.membership_plan),
            joinedload(Customer.pickup_location),
        )
        .all()
    )
    if zona:
        customers = [c for c in customers if _matches_zone(c, zona)]
    return group_by_location(customers)


def serialize_group(group: LocationGroup) -> dict:
    loc = group.location
    return {
        "location_id": loc.id if loc is not None else None,
        "key": group.key,
        "name": group.name,
        "address": loc.address if loc is not None else None,
        "schedule": loc.schedule if loc is not None else None,
        "zone": loc.zone if loc is not None else None,
        "total": group.total,
        "entregados": group.entregados,
        "pendientes": group.pendientes,
        "clientes": [
            {
                "id": c.id,
                "name": c.name,
                "email": c.email,
                "membership_code": c.membership_code,
                "plan": c.membership_plan.name if c.membership_plan else None,
                "delivered": bool(c.delivered),
                "delivered_at": c.delivered_at,
            }
            for c in group.customers
        ],
    }


# --------------------------------------------------------------------------- #
# CAMBIOS DE ESTADO
# --------------------------------------------------------------------------- #


def mark_delivered(db: Session, customer_id: UUID, now: Optional[datetime] = None) -> Customer:
    customer = get_cliente_or_404(db, customer_id)
    if customer.delivered:
        # Ya entregado: se conserva la fecha original
        return customer
    customer.delivered = True
    customer.delivered_at = now or datetime.utcnow()
    db.commit()
    db.refresh(customer)
    logger.info("Cliente %s marcado como entregado", customer.membership_code)
    return customer
