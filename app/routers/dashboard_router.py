from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import get_admin_user
from app.schemas.dashboard import ResumenOut
from app.services.dashboard_service import get_resumen

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
    dependencies=[Depends(get_admin_user)]
)


@router.get("/resumen", response_model=ResumenOut)
def resumen(db: Session = Depends(get_db)):
    """Conteo de planes y clientes por estatus y por días restantes."""
    return get_resumen(db)
