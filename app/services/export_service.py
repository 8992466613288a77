# app/services/export_service.py
from __future__ import annotations

import io
from datetime import date
from typing import List, Optional

import pandas as pd
import qrcode
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen.canvas import Canvas

from app.models.cliente import Customer
from app.models.renovacion import MembershipRenewal
from app.services.entregas_service import LocationGroup
from app.services.membresia_service import status_for_customer

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

PAGE_W, PAGE_H = A4
TOP_MARGIN      = 20 * mm
BOTTOM_MARGIN   = 20 * mm
LEFT_MARGIN     = 15 * mm
LINE_HEIGHT     = 6  * mm
QR_SIZE         = 45 * mm
TEXT_SIZE       = 9
SUBTITLE_SIZE   = 12
TITLE_SIZE      = 14


def _fmt(value) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _to_xlsx(rows: List[dict], sheet_name: str, columns: List[str]) -> io.BytesIO:
    df = pd.DataFrame(rows, columns=columns)
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    buf.seek(0)
    return buf


# --------------------------------------------------------------------------- #
# HOJAS DE CÁLCULO
# --------------------------------------------------------------------------- #

CLIENTES_COLUMNS = [
    "Nombre", "Email", "Telefono", "CodigoMembresia", "Plan", "Estatus",
    "Ubicacion", "Horario", "FechaInicio", "FechaFin", "DiasRestantes", "Vencimiento",
]


def clientes_rows(customers: List[Customer], today: date) -> List[dict]:
    rows = []
    for c in customers:
        estado = status_for_customer(c, today)
        loc = c.pickup_location
        rows.append({
            "Nombre": c.name,
            "Email": c.email,
            "Telefono": c.phone or "",
            "CodigoMembresia": c.membership_code,
            "Plan": c.membership_plan.name if c.membership_plan else "",
            "Estatus": c.status,
            "Ubicacion": f"{loc.name} - {loc.address}" if loc else "",
            "Horario": (loc.schedule or "") if loc else "",
            "FechaInicio": _fmt(c.start_date),
            "FechaFin": _fmt(estado.end_date),
            "DiasRestantes": estado.label,
            "Vencimiento": estado.bucket,
        })
    return rows


def clientes_xlsx(customers: List[Customer], today: Optional[date] = None) -> io.BytesIO:
    return _to_xlsx(clientes_rows(customers, today or date.today()), "Clientes", CLIENTES_COLUMNS)


RENOVACIONES_COLUMNS = [
    "Fecha", "Cliente", "Email", "Plan", "Concepto", "Monto", "MetodoPago", "RecibidoPor",
]


def renovaciones_xlsx(renewals: List[MembershipRenewal]) -> io.BytesIO:
    rows = [
        {
            "Fecha": _fmt(r.renewal_date),
            "Cliente": r.customer.name if r.customer else "",
            "Email": r.customer.email if r.customer else "",
            "Plan": r.membership_plan.name if r.membership_plan else "",
            "Concepto": r.concept,
            "Monto": float(r.amount or 0),
            "MetodoPago": r.method_of_payment or "",
            "RecibidoPor": r.received_by or "",
        }
        for r in renewals
    ]
    return _to_xlsx(rows, "Renovaciones", RENOVACIONES_COLUMNS)


CALENDARIO_COLUMNS = [
    "Ubicacion", "Direccion", "Horario", "Cliente", "Email", "Codigo", "Plan", "Entregado", "EntregadoEl",
]


def calendario_rows(groups: List[LocationGroup]) -> List[dict]:
    rows = []
    for g in groups:
        loc = g.location
        for c in g.customers:
            rows.append({
                "Ubicacion": g.name,
                "Direccion": (loc.address or "") if loc else "",
                "Horario": (loc.schedule or "") if loc else "",
                "Cliente": c.name,
                "Email": c.email,
                "Codigo": c.membership_code,
                "Plan": c.membership_plan.name if c.membership_plan else "",
                "Entregado": "Sí" if c.delivered else "No",
                "EntregadoEl": _fmt(c.delivered_at),
            })
    return rows


def calendario_xlsx(groups: List[LocationGroup]) -> io.BytesIO:
    return _to_xlsx(calendario_rows(groups), "CalendarioRecogidas", CALENDARIO_COLUMNS)


# --------------------------------------------------------------------------- #
# PDF
# --------------------------------------------------------------------------- #


def calendario_pdf(groups: List[LocationGroup]) -> io.BytesIO:
    buf = io.BytesIO()
    c = Canvas(buf, pagesize=A4)
    y = PAGE_H - TOP_MARGIN

    c.setFont("Helvetica-Bold", TITLE_SIZE)
    c.drawString(LEFT_MARGIN, y, "Calendario de Recogidas")
    y -= LINE_HEIGHT * 2

    for g in groups:
        if y < BOTTOM_MARGIN + LINE_HEIGHT * 3:
            c.showPage()
            y = PAGE_H - TOP_MARGIN

        c.setFont("Helvetica-Bold", SUBTITLE_SIZE)
        c.drawString(LEFT_MARGIN, y, f"Ubicación: {g.name} ({g.entregados}/{g.total} entregados)")
        y -= LINE_HEIGHT
        if g.location is not None:
            c.setFont("Helvetica", TEXT_SIZE)
            c.drawString(
                LEFT_MARGIN, y,
                f"Dirección: {g.location.address or ''} - Horario: {g.location.schedule or 'N/A'}",
            )
            y -= LINE_HEIGHT

        c.setFont("Helvetica", TEXT_SIZE)
        for cust in g.customers:
            plan = cust.membership_plan.name if cust.membership_plan else ""
            entregado = "Sí" if cust.delivered else "No"
            c.drawString(
                LEFT_MARGIN + 3 * mm, y,
                f"- {cust.name} | {cust.email} | Cod: {cust.membership_code} | Plan: {plan} | Entregado: {entregado}",
            )
            y -= LINE_HEIGHT
            if y < BOTTOM_MARGIN:
                c.showPage()
                c.setFont("Helvetica", TEXT_SIZE)
                y = PAGE_H - TOP_MARGIN

        y -= LINE_HEIGHT

    c.save()
    buf.seek(0)
    return buf


def tarjeta_pdf(customer: Customer, today: Optional[date] = None) -> io.BytesIO:
    """Tarjeta de membresía con el código en QR para identificar al cliente."""
    estado = status_for_customer(customer, today or date.today())

    buf = io.BytesIO()
    c = Canvas(buf, pagesize=A4)
    y = PAGE_H - TOP_MARGIN

    qr_img = qrcode.make(customer.membership_code)
    qr_buf = io.BytesIO()
    qr_img.save(qr_buf, format="PNG")
    qr_buf.seek(0)
    c.drawImage(ImageReader(qr_buf), (PAGE_W - QR_SIZE) / 2, y - QR_SIZE, QR_SIZE, QR_SIZE)
    y -= QR_SIZE + 8 * mm

    c.setFont("Helvetica-Bold", TITLE_SIZE)
    c.drawCentredString(PAGE_W / 2, y, customer.name)
    y -= LINE_HEIGHT * 1.5

    c.setFont("Helvetica", SUBTITLE_SIZE)
    lineas = [
        f"Código de Membresía: {customer.membership_code}",
        f"Plan: {customer.membership_plan.name if customer.membership_plan else ''}",
        f"Estatus: {customer.status}",
        f"Vence: {_fmt(estado.end_date) or 'Sin fecha'}",
        f"Días restantes: {estado.label}",
    ]
    for linea in lineas:
        c.drawCentredString(PAGE_W / 2, y, linea)
        y -= LINE_HEIGHT

    c.save()
    buf.seek(0)
    return buf
