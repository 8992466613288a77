from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import get_admin_user
from app.schemas.ubicacion import UbicacionCreate, UbicacionOut, UbicacionUpdate
from app.services.ubicaciones_service import (
    list_ubicaciones, get_ubicacion_or_404, create_ubicacion,
    update_ubicacion, delete_ubicacion,
)

router = APIRouter(
    prefix="/ubicaciones",
    tags=["Puntos de recogida"]
)


@router.get("", response_model=list[UbicacionOut])
def list_ubicaciones_endpoint(db: Session = Depends(get_db)):
    return list_ubicaciones(db)

@router.post(
    "",
    response_model=UbicacionOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_admin_user)]
)
def create_ubicacion_endpoint(payload: UbicacionCreate, db: Session = Depends(get_db)):
    return create_ubicacion(db, payload)

@router.get("/{location_id}", response_model=UbicacionOut)
def get_ubicacion_endpoint(location_id: UUID, db: Session = Depends(get_db)):
    return get_ubicacion_or_404(db, location_id)

@router.put(
    "/{location_id}",
    response_model=UbicacionOut,
    dependencies=[Depends(get_admin_user)]
)
def update_ubicacion_endpoint(location_id: UUID, payload: UbicacionUpdate, db: Session = Depends(get_db)):
    return update_ubicacion(db, location_id, payload)

@router.delete(
    "/{location_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_admin_user)]
)
def delete_ubicacion_endpoint(location_id: UUID, db: Session = Depends(get_db)):
    delete_ubicacion(db, location_id)
