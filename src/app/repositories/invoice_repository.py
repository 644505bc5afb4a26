"""Invoice Repository Interface

Defines the contract for invoice persistence and legal number allocation.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Both statement_id and invoice_number are unique in the store; the insert
    is the serialization point for concurrent issuance.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Insert a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice

        Raises:
            IntegrityError: If the statement already has an invoice or the
                invoice number is taken
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        pass

    @abstractmethod
    async def get_by_statement_id(self, statement_id: str) -> Optional[Invoice]:
        """
        Retrieve the invoice issued for a statement

        Args:
            statement_id: Statement ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        pass

    @abstractmethod
    async def lock_number_sequence(self, prefix: str, year: int) -> None:
        """
        Serialize number allocation for a year within the current transaction

        Implementations use a transaction-scoped database lock where the
        dialect offers one and are a no-op otherwise.
        """
        pass

    @abstractmethod
    async def next_invoice_number(self, prefix: str, year: int) -> str:
        """
        Derive the next legal invoice number for a year

        Format: {prefix}-{year}-{sequence:04d} (e.g., FACT-2025-0007).
        The sequence is one past the numerically highest existing number
        for the year, or 1 if none exists.

        Args:
            prefix: Invoice number prefix (e.g., "FACT")
            year: Calendar year of issuance

        Returns:
            Next invoice number string
        """
        pass
