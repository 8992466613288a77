import re
from typing import get_args
from datetime import date

from app.core.constants import ESTADO_ACTIVO, ESTADO_CANCELADO, ESTADO_PENDIENTE, ESTADOS_CLIENTE
from app.models.cliente import Customer
from app.models.renovacion import MembershipRenewal
from app.schemas.cliente import EstadoCliente
from app.services.clientes_service import generate_membership_code


def _registro(client, plan, **kwargs):
    payload = {
        "name": "Ana López",
        "email": "ana@example.com",
        "phone": "5512345678",
        "password": "ana12345",
        "membership_plan_id": plan.id,
    }
    payload.update(kwargs)
    return client.post("/clientes/registro", json=payload)


def test_codigo_de_membresia_tiene_prefijo():
    assert re.fullmatch(r"OC-\d+", generate_membership_code())


def test_registro_crea_cliente_pendiente(client, db, plan):
    resp = _registro(client, plan)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert re.fullmatch(r"OC-\d+", body["membership_code"])
    assert body["membership_code"] in body["message"]

    customer = db.query(Customer).filter_by(email="ana@example.com").one()
    assert customer.status == ESTADO_PENDIENTE
    assert customer.start_date is None
    assert customer.end_date is None
    assert customer.password_hash != "ana12345"


def test_registro_con_email_repetido(client, plan):
    assert _registro(client, plan).status_code == 201
    resp = _registro(client, plan, name="Otra Ana")
    assert resp.status_code == 400


def test_registro_con_plan_inexistente(client, plan):
    resp = _registro(client, plan, membership_plan_id=999)
    assert resp.status_code == 404


def test_registro_sin_nombre(client, plan):
    resp = _registro(client, plan, name="   ")
    assert resp.status_code == 400


def test_registros_seguidos_tienen_codigos_distintos(client, plan):
    codigos = {
        _registro(client, plan, email=f"c{i}@example.com").json()["membership_code"]
        for i in range(3)
    }
    assert len(codigos) == 3


def test_login_de_cliente(client, plan):
    _registro(client, plan)
    resp = client.post("/auth/clientes/login", json={"email": "ana@example.com", "password": "ana12345"})
    assert resp.status_code == 200
    resp = client.post("/auth/clientes/login", json={"email": "ana@example.com", "password": "mala"})
    assert resp.status_code == 401


def test_listado_incluye_dias_restantes(client, admin_headers, make_customer):
    make_customer(name="Beto", start_date=date(2020, 1, 1), end_date=date(2020, 2, 1))
    make_customer(name="Alma")

    resp = client.get("/clientes", headers=admin_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert [c["name"] for c in data] == ["Alma", "Beto"]
    assert "password_hash" not in data[0]
    assert data[0]["membresia"]["bucket"] == "unknown"
    assert data[1]["membresia"]["label"] == "Vencida"
    assert data[1]["membership_plan"]["name"] == "Mensual"


def test_busqueda_por_nombre(client, admin_headers, make_customer):
    make_customer(name="Carla Ruiz")
    make_customer(name="Daniel Mora")
    resp = client.get("/clientes", params={"q": "carla"}, headers=admin_headers)
    assert [c["name"] for c in resp.json()] == ["Carla Ruiz"]


def test_actualizar_no_cambia_el_codigo(client, admin_headers, make_customer):
    customer = make_customer()
    resp = client.put(
        f"/clientes/{customer.id}",
        json={"name": "Nuevo Nombre", "membership_code": "OC-1", "status": ESTADO_ACTIVO},
        headers=admin_headers,
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["name"] == "Nuevo Nombre"
    assert body["status"] == ESTADO_ACTIVO
    assert body["membership_code"] == customer.membership_code


def test_actualizar_con_fechas_invertidas(client, admin_headers, make_customer):
    customer = make_customer()
    resp = client.put(
        f"/clientes/{customer.id}",
        json={"start_date": "2024-03-01", "end_date": "2024-02-01"},
        headers=admin_headers,
    )
    assert resp.status_code == 422


def test_actualizar_fin_antes_del_inicio_guardado(client, admin_headers, make_customer):
    customer = make_customer(start_date=date(2024, 3, 1), end_date=date(2024, 4, 1))
    resp = client.put(
        f"/clientes/{customer.id}",
        json={"end_date": "2024-02-01"},
        headers=admin_headers,
    )
    assert resp.status_code == 400


def test_actualizar_estado_invalido(client, admin_headers, make_customer):
    customer = make_customer()
    resp = client.put(f"/clientes/{customer.id}", json={"status": "PAUSED"}, headers=admin_headers)
    assert resp.status_code == 422


def test_cancelar_membresia(client, admin_headers, make_customer):
    customer = make_customer(status=ESTADO_ACTIVO)
    resp = client.post(f"/clientes/{customer.id}/cancelar", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == ESTADO_CANCELADO


def test_eliminar_cliente_borra_su_bitacora(client, db, admin_headers, make_customer, plan):
    customer = make_customer()
    customer_id = customer.id
    client.post(
        "/renovaciones",
        json={"customer_id": str(customer.id), "membership_plan_id": plan.id, "amount": "500"},
        headers=admin_headers,
    )
    resp = client.delete(f"/clientes/{customer_id}", headers=admin_headers)
    assert resp.status_code == 204

    db.expire_all()
    assert db.get(Customer, customer_id) is None
    assert db.query(MembershipRenewal).count() == 0
    assert client.get(f"/clientes/{customer_id}", headers=admin_headers).status_code == 404


def test_estados_salen_de_las_constantes():
    assert get_args(EstadoCliente) == ESTADOS_CLIENTE
    (check,) = [c for c in Customer.__table__.constraints if c.name == "ck_customers_status"]
    for estado in ESTADOS_CLIENTE:
        assert f"'{estado}'" in str(check.sqltext)


def test_email_no_distingue_mayusculas(client, db, plan):
    assert _registro(client, plan, email="Ana@Example.com").status_code == 201
    assert db.query(Customer).one().email == "ana@example.com"

    resp = _registro(client, plan, email="ana@example.com")
    assert resp.status_code == 400

    resp = client.post("/auth/clientes/login", json={"email": "ANA@example.com", "password": "ana12345"})
    assert resp.status_code == 200


def test_actualizar_email_repetido_con_mayusculas(client, admin_headers, make_customer):
    make_customer(email="beto@example.com")
    otro = make_customer()
    resp = client.put(f"/clientes/{otro.id}", json={"email": "Beto@example.com"}, headers=admin_headers)
    assert resp.status_code == 400
