import logging
from typing import List
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.models.cliente import Customer
from app.models.huacal import Huacal
from app.models.ubicacion import PickupLocation
from app.schemas.ubicacion import UbicacionCreate, UbicacionUpdate

logger = logging.getLogger(__name__)


def get_ubicacion(db: Session, location_id: UUID) -> PickupLocation | None:
    return db.get(PickupLocation, location_id)

def get_ubicacion_or_404(db: Session, location_id: UUID) -> PickupLocation:
    loc = get_ubicacion(db, location_id)
    if not loc:
        raise HTTPException(status_code=404, detail="Ubicación no encontrada")
    return loc

def list_ubicaciones(db: Session) -> List[PickupLocation]:
    return (
        db.query(PickupLocation)
        .order_by(PickupLocation.created_at.desc(), PickupLocation.name)
        .all()
    )

def create_ubicacion(db: Session, payload: UbicacionCreate) -> PickupLocation:
    if not payload.name.strip() or not payload.address.strip():
        raise HTTPException(status_code=400, detail="Favor de llenar nombre y dirección")
    loc = PickupLocation(**payload.model_dump())
    db.add(loc)
    db.commit()
    db.refresh(loc)
    logger.info("Ubicación creada: %s", loc.name)
    return loc

def update_ubicacion(db: Session, location_id: UUID, payload: UbicacionUpdate) -> PickupLocation:
    loc = get_ubicacion_or_404(db, location_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        if v is None and k in ("name", "address"):
            continue
        setattr(loc, k, v)
    db.commit()
    db.refresh(loc)
    return loc

def delete_ubicacion(db: Session, location_id: UUID) -> None:
    loc = get_ubicacion_or_404(db, location_id)
    # Los clientes de esta ubicación quedan sin asignar
    db.query(Customer).filter(Customer.pickup_location_id == loc.id).update(
        {Customer.pickup_location_id: None}, synchronize_session=False
    )
    db.query(Huacal).filter(Huacal.pickup_location_id == loc.id).update(
        {Huacal.pickup_location_id: None}, synchronize_session=False
    )
    db.delete(loc)
    db.commit()
    logger.info("Ubicación eliminada: %s", location_id)
