import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.core.constants import EXTRAS_SI
from app.models.huacal import Huacal
from app.models.ubicacion import PickupLocation
from app.schemas.huacal import HuacalCreate
from app.services.clientes_service import get_cliente_or_404
from app.services.ubicaciones_service import get_ubicacion_or_404

logger = logging.getLogger(__name__)


def create_huacal(db: Session, payload: HuacalCreate) -> Huacal:
    customer = get_cliente_or_404(db, payload.customer_id)
    data = payload.model_dump()

    # Artículo y precio extra solo aplican cuando hay extras
    if data["extras"] != EXTRAS_SI:
        data["extra_item"] = None
        data["extra_price"] = None

    if data["pickup_location_id"] is None:
        data["pickup_location_id"] = customer.pickup_location_id
    else:
        get_ubicacion_or_404(db, data["pickup_location_id"])

    huacal = Huacal(**data)
    db.add(huacal)
    db.commit()
    db.refresh(huacal)
    logger.info("Entrega de %s huacal(es) registrada para %s", huacal.cantidad, customer.membership_code)
    return huacal


def list_huacales(db: Session, zona: Optional[str] = None) -> List[Huacal]:
    q = db.query(Huacal).options(
        joinedload(Huacal.customer),
        joinedload(Huacal.pickup_location),
    )
    if zona:
        zona = zona.strip().lower()
        q = q.join(PickupLocation, Huacal.pickup_location_id == PickupLocation.id).filter(
            (func.lower(PickupLocation.zone) == zona) | (func.lower(PickupLocation.name) == zona)
        )
    return q.order_by(Huacal.created_at.desc()).all()


def serialize_huacal(huacal: Huacal) -> dict:
    data = {c.name: getattr(huacal, c.name) for c in Huacal.__table__.columns}
    data["cliente"] = huacal.customer.name if huacal.customer else "Desconocido"
    data["direccion"] = huacal.pickup_location.address if huacal.pickup_location else "Sin dirección"
    return data
