"""ReportLab PDF Generation Service Implementation

Renders issued invoices as a Dutch "FACTUUR" using ReportLab.
"""

from datetime import date
from decimal import Decimal
from io import BytesIO
from xml.sax.saxutils import escape
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.contractor import Contractor
from src.domain.invoice import Invoice
from src.domain.iso_week import week_date_range
from src.domain.money import line_total
from src.domain.statement import Statement
from src.domain.tenant import Tenant
from src.domain.work_entry import WorkEntry

DESCRIPTION_MAX_LENGTH = 40

CURRENCY_SYMBOLS = {"EUR": "€", "USD": "$", "GBP": "£"}


def format_currency(amount: Decimal, currency: str = "EUR") -> str:
    """Dutch notation: € 1.234,56"""
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    formatted = f"{Decimal(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{symbol} {formatted}"


def format_date(value: date) -> str:
    return value.strftime("%d-%m-%Y")


def format_quantity(quantity: Decimal) -> str:
    text = f"{Decimal(quantity):f}"
    return text.rstrip("0").rstrip(".") if "." in text else text


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Amounts in the totals block come from the invoice snapshot; the line
    table only lists the period's work entries.
    """

    def generate_invoice(
        self,
        invoice: Invoice,
        statement: Statement,
        tenant: Tenant,
        contractor: Contractor,
        work_entries: List[WorkEntry],
        vat_rate_label: str = "21%",
    ) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=f"Factuur {invoice.invoice_number}",
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=24,
            alignment=2,
            textColor=colors.HexColor("#2C3E50"),
        )
        right_style = ParagraphStyle(
            "RightStyle",
            parent=styles["Normal"],
            fontSize=11,
            alignment=2,
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=10,
        )
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
        )
        cell_style = ParagraphStyle(
            "CellStyle",
            parent=styles["Normal"],
            fontSize=9,
        )

        # Header
        elements.append(Paragraph("FACTUUR", title_style))
        elements.append(Paragraph(f"Factuurnummer: {escape(invoice.invoice_number)}", right_style))
        elements.append(
            Paragraph(f"Factuurdatum: {format_date(invoice.created_at.date())}", right_style)
        )
        elements.append(Spacer(1, 10 * mm))

        # Van: the billed company
        elements.append(Paragraph("Van:", bold_style))
        elements.append(Paragraph(escape(tenant.name), normal_style))
        if tenant.kvk_number:
            elements.append(Paragraph(f"KVK: {escape(tenant.kvk_number)}", normal_style))
        if tenant.btw_number:
            elements.append(Paragraph(f"BTW: {escape(tenant.btw_number)}", normal_style))
        if tenant.email:
            elements.append(Paragraph(f"E-mail: {escape(tenant.email)}", normal_style))
        if tenant.phone:
            elements.append(Paragraph(f"Telefoon: {escape(tenant.phone)}", normal_style))
        elements.append(Spacer(1, 5 * mm))

        # Aan: the contractor
        elements.append(Paragraph("Aan:", bold_style))
        elements.append(Paragraph(escape(contractor.full_name), normal_style))
        if contractor.email:
            elements.append(Paragraph(f"E-mail: {escape(contractor.email)}", normal_style))
        if contractor.phone:
            elements.append(Paragraph(f"Telefoon: {escape(contractor.phone)}", normal_style))
        if contractor.external_ref:
            elements.append(Paragraph(f"Referentie: {escape(contractor.external_ref)}", normal_style))
        elements.append(Spacer(1, 5 * mm))

        # Periode
        period = week_date_range(statement.year, statement.week_number)
        elements.append(Paragraph("Periode:", bold_style))
        elements.append(
            Paragraph(f"Week {statement.week_number}, {statement.year}", normal_style)
        )
        elements.append(
            Paragraph(
                f"{format_date(period.start_date)} - {format_date(period.end_date)}",
                normal_style,
            )
        )
        elements.append(Spacer(1, 10 * mm))

        # Line items
        line_data = [["Omschrijving", "Type", "Aantal", "Prijs", "Totaal"]]
        for entry in work_entries:
            description = entry.notes or f"Werk {format_date(entry.work_date)}"
            line_data.append(
                [
                    Paragraph(escape(description[:DESCRIPTION_MAX_LENGTH]), cell_style),
                    entry.tariff_type.value,
                    format_quantity(entry.quantity),
                    format_currency(entry.unit_price, invoice.currency),
                    format_currency(line_total(entry.quantity, entry.unit_price), invoice.currency),
                ]
            )

        line_table = Table(
            line_data,
            colWidths=[65 * mm, 25 * mm, 20 * mm, 30 * mm, 30 * mm],
            repeatRows=1,
        )
        line_table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (2, 1), (-1, -1), "RIGHT"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )

        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        # Totals
        total_data = [
            ["", "Subtotaal:", format_currency(invoice.subtotal, invoice.currency)],
            ["", f"BTW ({vat_rate_label}):", format_currency(invoice.tax_amount, invoice.currency)],
            ["", "Totaal:", format_currency(invoice.total_amount, invoice.currency)],
        ]
        total_table = Table(total_data, colWidths=[110 * mm, 30 * mm, 30 * mm])
        total_table.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                    ("FONTNAME", (1, 2), (-1, 2), "Helvetica-Bold"),
                    ("LINEABOVE", (1, 2), (-1, 2), 1.5, colors.HexColor("#2C3E50")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )

        elements.append(total_table)
        elements.append(Spacer(1, 15 * mm))

        elements.append(
            Paragraph(
                "<i>Dit is een automatisch gegenereerde factuur.</i>",
                ParagraphStyle(
                    "FooterNote",
                    parent=styles["Normal"],
                    fontSize=8,
                    alignment=1,
                    textColor=colors.HexColor("#95A5A6"),
                ),
            )
        )

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
