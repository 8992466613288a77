import uuid
from types import SimpleNamespace

from app.core.constants import SIN_UBICACION
from app.services.entregas_service import group_by_location


def _loc(name):
    return SimpleNamespace(id=uuid.uuid4(), name=name, address=f"Calle {name}", schedule=None, zone=None)


def _cust(name, loc=None, delivered=False):
    return SimpleNamespace(
        name=name,
        pickup_location=loc,
        pickup_location_id=loc.id if loc else None,
        delivered=delivered,
    )


def test_cada_cliente_cae_en_un_solo_grupo():
    norte, centro = _loc("Norte"), _loc("Centro")
    clientes = [
        _cust("Zoe", norte),
        _cust("Ana", centro, delivered=True),
        _cust("Luis"),
        _cust("Beto", centro),
    ]

    grupos = group_by_location(clientes)

    assert [g.name for g in grupos] == ["Centro", "Norte", "Sin ubicación asignada"]
    assert grupos[-1].key == SIN_UBICACION
    assert sum(g.total for g in grupos) == len(clientes)
    vistos = [id(c) for g in grupos for c in g.customers]
    assert len(vistos) == len(set(vistos)) == len(clientes)
    assert [c.name for c in grupos[0].customers] == ["Ana", "Beto"]
    assert (grupos[0].entregados, grupos[0].pendientes) == (1, 1)


def test_sin_clientes_no_hay_grupos():
    assert group_by_location([]) == []


def test_solo_clientes_sin_ubicacion():
    grupos = group_by_location([_cust("Ana"), _cust("Beto")])
    assert len(grupos) == 1
    assert grupos[0].is_unassigned
    assert grupos[0].location is None


def test_calendario(client, admin_headers, make_customer, location):
    make_customer(name="Ana", pickup_location_id=location.id)
    make_customer(name="Beto")

    resp = client.get("/entregas/calendario", headers=admin_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_clientes"] == 2
    assert [g["key"] for g in body["grupos"]] == [str(location.id), SIN_UBICACION]
    assert body["grupos"][0]["address"] == "Av. Juárez 10"
    assert body["grupos"][0]["clientes"][0]["plan"] == "Mensual"


def test_calendario_por_zona(client, admin_headers, make_customer, location):
    make_customer(name="Ana", pickup_location_id=location.id)
    make_customer(name="Beto")

    resp = client.get("/entregas/calendario", params={"zona": "norte"}, headers=admin_headers)
    body = resp.json()
    assert body["total_clientes"] == 1
    assert body["grupos"][0]["name"] == "Centro"

    resp = client.get("/entregas/calendario", params={"zona": "Sur"}, headers=admin_headers)
    assert resp.json() == {"total_clientes": 0, "grupos": []}


def test_marcar_entregado_dos_veces(client, admin_headers, make_customer):
    customer = make_customer()
    primera = client.post(f"/entregas/clientes/{customer.id}/entregado", headers=admin_headers)
    assert primera.status_code == 200
    assert primera.json()["delivered"] is True
    assert primera.json()["delivered_at"] is not None

    segunda = client.post(f"/entregas/clientes/{customer.id}/entregado", headers=admin_headers)
    assert segunda.json() == primera.json()


def test_marcar_entregado_cliente_inexistente(client, admin_headers):
    resp = client.post(f"/entregas/clientes/{uuid.uuid4()}/entregado", headers=admin_headers)
    assert resp.status_code == 404
