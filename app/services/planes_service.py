import logging
from typing import List

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.models.cliente import Customer
from app.models.plan import MembershipPlan
from app.schemas.plan import PlanCreate, PlanUpdate

logger = logging.getLogger(__name__)


def get_plan(db: Session, plan_id: int) -> MembershipPlan | None:
    return db.get(MembershipPlan, plan_id)

def get_plan_or_404(db: Session, plan_id: int) -> MembershipPlan:
    plan = get_plan(db, plan_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Plan no encontrado")
    return plan

def list_planes(db: Session) -> List[MembershipPlan]:
    return db.query(MembershipPlan).order_by(MembershipPlan.name).all()

def create_plan(db: Session, payload: PlanCreate) -> MembershipPlan:
    plan = MembershipPlan(**payload.model_dump())
    db.add(plan)
    db.commit()
    db.refresh(plan)
    logger.info("Plan creado: %s (%s meses + %s gratis)", plan.name, plan.duration_months, plan.free_months)
    return plan

def update_plan(db: Session, plan_id: int, payload: PlanUpdate) -> MembershipPlan:
    plan = get_plan_or_404(db, plan_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        if v is None and k != "description":
            continue
        setattr(plan, k, v)
    db.commit()
    db.refresh(plan)
    return plan

def delete_plan(db: Session, plan_id: int) -> None:
    plan = get_plan_or_404(db, plan_id)
    en_uso = db.query(Customer.id).filter(Customer.membership_plan_id == plan.id).first()
    if en_uso:
        raise HTTPException(status_code=409, detail="El plan está asignado a clientes y no se puede eliminar")
    db.delete(plan)
    db.commit()
    logger.info("Plan eliminado: %s", plan_id)
