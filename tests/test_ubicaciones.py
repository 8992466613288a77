from app.models.cliente import Customer


def test_crear_y_listar(client, admin_headers):
    resp = client.post(
        "/ubicaciones",
        json={"name": "Mercado", "address": "Calle 5", "schedule": "Lunes 8 a 12", "zone": "Sur"},
        headers=admin_headers,
    )
    assert resp.status_code == 201, resp.text

    listado = client.get("/ubicaciones").json()
    assert [u["name"] for u in listado] == ["Mercado"]


def test_nombre_y_direccion_obligatorios(client, admin_headers):
    resp = client.post("/ubicaciones", json={"name": " ", "address": " "}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Favor de llenar nombre y dirección"


def test_crear_requiere_admin(client):
    assert client.post("/ubicaciones", json={"name": "X", "address": "Y"}).status_code == 401


def test_actualizar(client, admin_headers, location):
    resp = client.put(
        f"/ubicaciones/{location.id}", json={"schedule": "Domingos"}, headers=admin_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["schedule"] == "Domingos"
    assert resp.json()["name"] == "Centro"


def test_borrar_deja_clientes_sin_asignar(client, db, admin_headers, location, make_customer):
    customer = make_customer(pickup_location_id=location.id)
    customer_id, location_id = customer.id, location.id
    resp = client.delete(f"/ubicaciones/{location_id}", headers=admin_headers)
    assert resp.status_code == 204

    db.expire_all()
    assert db.get(Customer, customer_id).pickup_location_id is None
    assert client.get(f"/ubicaciones/{location_id}").status_code == 404
