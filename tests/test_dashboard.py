from datetime import date, datetime, timedelta
from decimal import Decimal

from app.core.constants import ESTADO_ACTIVO, ESTADO_CANCELADO
from app.models.renovacion import MembershipRenewal
from app.services.dashboard_service import get_resumen

HOY = date(2024, 6, 1)


def test_resumen(db, plan, make_customer):
    make_customer(status=ESTADO_ACTIVO, start_date=HOY, end_date=HOY + timedelta(days=40))
    make_customer(status=ESTADO_ACTIVO, start_date=HOY, end_date=HOY + timedelta(days=20))
    make_customer(status=ESTADO_ACTIVO, start_date=HOY, end_date=HOY + timedelta(days=3))
    make_customer(status=ESTADO_CANCELADO, start_date=date(2024, 1, 1), end_date=date(2024, 2, 1))
    pendiente = make_customer()

    db.add(MembershipRenewal(
        customer_id=pendiente.id,
        membership_plan_id=plan.id,
        renewal_date=datetime(2024, 6, 1, 10, 0),
        concept="Renovación mensual",
        amount=Decimal("250.00"),
    ))
    db.commit()

    resumen = get_resumen(db, today=HOY)
    assert resumen["plans"] == 1
    assert resumen["customers"] == 5
    assert (resumen["active"], resumen["cancelled"], resumen["pending"]) == (3, 1, 1)
    assert resumen["por_vencimiento"] == {
        "unknown": 1,
        "expired": 1,
        "fresh": 1,
        "warning": 1,
        "caution": 0,
        "critical": 1,
    }
    assert resumen["ingresos_renovaciones"] == Decimal("250")


def test_resumen_api(client, admin_headers):
    resp = client.get("/dashboard/resumen", headers=admin_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["customers"] == 0
    assert sum(body["por_vencimiento"].values()) == 0
