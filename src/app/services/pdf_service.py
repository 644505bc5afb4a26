"""PDF Generation Service Interface

Defines the contract for rendering issued invoices.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.contractor import Contractor
from src.domain.invoice import Invoice
from src.domain.statement import Statement
from src.domain.tenant import Tenant
from src.domain.work_entry import WorkEntry


class PdfService(ABC):
    """
    Service interface for PDF generation

    Rendering is a presentation concern: it reads the invoice snapshot and
    never changes amounts or numbering.
    """

    @abstractmethod
    def generate_invoice(
        self,
        invoice: Invoice,
        statement: Statement,
        tenant: Tenant,
        contractor: Contractor,
        work_entries: List[WorkEntry],
        vat_rate_label: str = "21%",
    ) -> bytes:
        """
        Render an issued invoice as PDF

        Args:
            invoice: Issued invoice (number and amount snapshot)
            statement: Invoiced statement (period)
            tenant: Billed company
            contractor: Issuing contractor
            work_entries: Entries of the statement period, in date order
            vat_rate_label: Human-readable BTW rate

        Returns:
            PDF document as bytes
        """
        pass
