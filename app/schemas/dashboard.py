from decimal import Decimal
from typing import Dict

from pydantic import BaseModel


class ResumenOut(BaseModel):
    plans: int
    customers: int
    active: int
    cancelled: int
    pending: int
    por_vencimiento: Dict[str, int]
    ingresos_renovaciones: Decimal
