import io
from datetime import date

import pandas as pd

from app.services.export_service import XLSX_MEDIA_TYPE


def test_exportar_clientes(client, admin_headers, make_customer, location):
    make_customer(name="Ana", pickup_location_id=location.id, start_date=date(2024, 1, 1))
    make_customer(name="Beto")

    resp = client.get("/clientes/export.xlsx", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == XLSX_MEDIA_TYPE
    assert "clientes.xlsx" in resp.headers["content-disposition"]

    df = pd.read_excel(io.BytesIO(resp.content))
    assert list(df["Nombre"]) == ["Ana", "Beto"]
    assert "Centro - Av. Juárez 10" in list(df["Ubicacion"])
    assert not any("password" in col.lower() for col in df.columns)


def test_exportar_renovaciones(client, admin_headers, plan, customer):
    client.post(
        "/renovaciones",
        json={"customer_id": str(customer.id), "membership_plan_id": plan.id, "amount": "500"},
        headers=admin_headers,
    )
    resp = client.get("/renovaciones/export.xlsx", headers=admin_headers)
    assert resp.status_code == 200
    df = pd.read_excel(io.BytesIO(resp.content))
    assert len(df) == 1
    assert df.loc[0, "Cliente"] == customer.name
    assert df.loc[0, "RecibidoPor"] == "admin@example.com"


def test_exportar_calendario_xlsx(client, admin_headers, make_customer, location):
    make_customer(name="Ana", pickup_location_id=location.id)
    make_customer(name="Beto")
    resp = client.get("/entregas/calendario.xlsx", headers=admin_headers)
    df = pd.read_excel(io.BytesIO(resp.content))
    assert list(df["Ubicacion"]) == ["Centro", "Sin ubicación asignada"]
    assert list(df["Entregado"]) == ["No", "No"]


def test_exportar_calendario_pdf(client, admin_headers, make_customer, location):
    for i in range(60):
        make_customer(name=f"Cliente {i:02d}", pickup_location_id=location.id)
    resp = client.get("/entregas/calendario.pdf", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.content.startswith(b"%PDF")


def test_exportar_requiere_admin(client):
    assert client.get("/clientes/export.xlsx").status_code == 401
    assert client.get("/entregas/calendario.pdf").status_code == 401
