from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import get_admin_user
from app.schemas.plan import PlanCreate, PlanOut, PlanUpdate
from app.services.planes_service import (
    list_planes, get_plan_or_404, create_plan, update_plan, delete_plan,
)

router = APIRouter(
    prefix="/planes",
    tags=["Planes de membresía"]
)


@router.get("", response_model=list[PlanOut])
def list_planes_endpoint(db: Session = Depends(get_db)):
    return list_planes(db)

@router.post(
    "",
    response_model=PlanOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_admin_user)]
)
def create_plan_endpoint(payload: PlanCreate, db: Session = Depends(get_db)):
    return create_plan(db, payload)

@router.get("/{plan_id}", response_model=PlanOut)
def get_plan_endpoint(plan_id: int, db: Session = Depends(get_db)):
    return get_plan_or_404(db, plan_id)

@router.put(
    "/{plan_id}",
    response_model=PlanOut,
    dependencies=[Depends(get_admin_user)]
)
def update_plan_endpoint(plan_id: int, payload: PlanUpdate, db: Session = Depends(get_db)):
    return update_plan(db, plan_id, payload)

@router.delete(
    "/{plan_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_admin_user)]
)
def delete_plan_endpoint(plan_id: int, db: Session = Depends(get_db)):
    delete_plan(db, plan_id)
