"""PDF generation for rental receipts."""

from __future__ import annotations

import html
from datetime import datetime
from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from car_rental.config import DEFAULT_CURRENCY_SYMBOL, RECEIPT_ISSUER, ReceiptIssuerInfo
from car_rental.domain.models import RentalReceipt
from car_rental.utils.formatting import format_currency

RECEIPT_TITLE = "RENTAL RECEIPT"
RECEIPT_TERMS = (
    "The customer is responsible for the vehicle during the rental period and "
    "must return it on the agreed date. The total shown is the daily rate "
    "multiplied by the number of rental days."
)


def build_receipt_filename(receipt: RentalReceipt) -> str:
    return f"{receipt.customer_id}_{receipt.vehicle_id}.pdf"


def generate_receipt_pdf(
    receipt: RentalReceipt,
    output_path: Path,
    *,
    issuer: ReceiptIssuerInfo = RECEIPT_ISSUER,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> Path:
    """Generate a one-page PDF receipt for a committed rental."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        rightMargin=20 * mm,
        leftMargin=20 * mm,
        topMargin=18 * mm,
        bottomMargin=18 * mm,
        title=RECEIPT_TITLE,
        author=issuer.name,
    )

    styles = getSampleStyleSheet()
    styles.add(
        ParagraphStyle(
            name="SectionTitle",
            parent=styles["Heading3"],
            spaceBefore=12,
            spaceAfter=6,
        )
    )
    styles.add(
        ParagraphStyle(
            name="SmallText",
            parent=styles["Normal"],
            fontSize=9,
            leading=12,
        )
    )

    customer_name = html.escape(receipt.customer_name)
    elements: list[object] = []
    elements.append(Paragraph(f"<b>{customer_name}</b>", styles["Title"]))
    elements.append(Paragraph(RECEIPT_TITLE, styles["Heading2"]))
    elements.append(Spacer(1, 8))

    issuer_lines = [
        f"<b>Issued by:</b> {issuer.name}",
        f"<b>Phone:</b> {issuer.phone}",
        f"<b>Address:</b> {issuer.address}",
    ]
    elements.append(Paragraph("<br/>".join(issuer_lines), styles["Normal"]))
    elements.append(Spacer(1, 10))

    customer_lines = [
        "<b>Customer</b>",
        f"ID: {receipt.customer_id}",
        f"Name: {customer_name}",
    ]
    elements.append(Paragraph("<br/>".join(customer_lines), styles["Normal"]))
    elements.append(Spacer(1, 10))

    rental_table = Table(
        [
            ["Car ID", "Car", "Daily rate", "Days", "Total"],
            [
                receipt.vehicle_id,
                receipt.vehicle_name,
                format_currency(receipt.daily_rate, currency_symbol),
                str(receipt.days),
                format_currency(receipt.total_price, currency_symbol),
            ],
        ],
        colWidths=[25 * mm, 55 * mm, 30 * mm, 18 * mm, 40 * mm],
    )
    rental_table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ("ALIGN", (2, 1), (-1, -1), "CENTER"),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ]
        )
    )
    elements.append(Paragraph("Rental", styles["SectionTitle"]))
    elements.append(rental_table)
    elements.append(Spacer(1, 12))

    elements.append(Paragraph("Terms", styles["SectionTitle"]))
    elements.append(Paragraph(RECEIPT_TERMS, styles["SmallText"]))
    elements.append(Spacer(1, 18))

    footer = f"{issuer.name} - generated on {datetime.now().strftime('%Y-%m-%d %H:%M')}"
    elements.append(Paragraph(footer, styles["SmallText"]))

    doc.build(elements)
    return output_path
