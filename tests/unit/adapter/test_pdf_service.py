"""Unit tests for ReportLabPdfService"""

from datetime import datetime
from decimal import Decimal

from src.adapter.services.pdf_service import (
    ReportLabPdfService,
    format_currency,
    format_date,
    format_quantity,
)
from src.domain.contractor import Contractor
from src.domain.invoice import Invoice
from src.domain.statement import StatementStatus
from src.domain.tenant import Tenant


class TestFormatting:
    def test_currency_uses_dutch_separators(self):
        assert format_currency(Decimal("1234.5")) == "€ 1.234,50"
        assert format_currency(Decimal("726.00")) == "€ 726,00"

    def test_unknown_currency_falls_back_to_code(self):
        assert format_currency(Decimal("10"), "CHF") == "CHF 10,00"

    def test_date(self):
        assert format_date(datetime(2024, 11, 25).date()) == "25-11-2024"

    def test_quantity_strips_trailing_zeros(self):
        assert format_quantity(Decimal("8.000")) == "8"
        assert format_quantity(Decimal("2.50")) == "2.5"
        assert format_quantity(Decimal("12")) == "12"


class TestReportLabPdfService:
    def test_generates_pdf_document(self, make_statement, make_entry, sample_contractor):
        invoice = Invoice(
            id="inv_1",
            statement_id="stmt_1",
            invoice_number="FACT-2025-0001",
            subtotal=Decimal("600.00"),
            tax_amount=Decimal("126.00"),
            total_amount=Decimal("726.00"),
            currency="EUR",
            created_at=datetime(2025, 1, 6, 9, 0),
        )
        tenant = Tenant(id="tenant_a", name="Bezorg & Co BV", kvk_number="12345678")
        entries = [
            make_entry(notes="Bezorgroute Utrecht-Noord"),
            make_entry(id="entry_2", quantity="3", unit_price="12.50"),
        ]

        pdf_bytes = ReportLabPdfService().generate_invoice(
            invoice=invoice,
            statement=make_statement(status=StatementStatus.INVOICED),
            tenant=tenant,
            contractor=sample_contractor,
            work_entries=entries,
        )

        assert pdf_bytes.startswith(b"%PDF")
        assert len(pdf_bytes) > 1000

    def test_empty_period_still_renders(self, make_statement, sample_contractor):
        invoice = Invoice(
            statement_id="stmt_1",
            invoice_number="FACT-2025-0002",
            subtotal=Decimal("0.00"),
            tax_amount=Decimal("0.00"),
            total_amount=Decimal("0.00"),
        )

        pdf_bytes = ReportLabPdfService().generate_invoice(
            invoice=invoice,
            statement=make_statement(total=Decimal("0.00")),
            tenant=Tenant(id="tenant_a", name="Bezorg BV"),
            contractor=sample_contractor,
            work_entries=[],
            vat_rate_label="9%",
        )

        assert pdf_bytes.startswith(b"%PDF")

    def test_markup_in_user_fields_is_rendered_as_text(self, make_statement, make_entry):
        invoice = Invoice(
            statement_id="stmt_1",
            invoice_number="FACT-2025-0003",
            subtotal=Decimal("600.00"),
            tax_amount=Decimal("126.00"),
            total_amount=Decimal("726.00"),
        )
        tenant = Tenant(
            id="tenant_a",
            name="Bezorg <BV>",
            kvk_number="<12345678>",
            btw_number="NL001<b>B01",
            email="facturen&co@bezorg.nl",
            phone="<para>010</para>",
        )
        contractor = Contractor(
            id="contractor_1",
            tenant_id="tenant_a",
            full_name="Jan & Piet",
            email="jan<at>vries.nl",
            phone="06 & 12",
            external_ref="<ZZP-001>",
        )

        pdf_bytes = ReportLabPdfService().generate_invoice(
            invoice=invoice,
            statement=make_statement(status=StatementStatus.INVOICED),
            tenant=tenant,
            contractor=contractor,
            work_entries=[make_entry(notes="Route <A> & B</i>")],
        )

        assert pdf_bytes.startswith(b"%PDF")
