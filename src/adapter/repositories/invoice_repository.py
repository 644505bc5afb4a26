"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence and year-scoped legal number allocation.
"""

from typing import Optional
from sqlalchemy import text
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice, format_invoice_number, parse_invoice_sequence


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Number allocation reads the current maximum for the year inside the
    caller's transaction. On PostgreSQL a transaction-scoped advisory lock
    keyed on "{prefix}-{year}" serializes concurrent allocators; the unique
    constraint on invoice_number is the backstop on every dialect.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _dialect_name(self) -> str:
        bind = getattr(self.session, "bind", None)
        return bind.dialect.name if bind is not None else ""

    async def create(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_statement_id(self, statement_id: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.statement_id == statement_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.invoice_number == invoice_number)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def lock_number_sequence(self, prefix: str, year: int) -> None:
        if self._dialect_name() != "postgresql":
            return
        await self.session.execute(
            text("SELECT pg_advisory_xact_lock(hashtext(:sequence_key))"),
            {"sequence_key": f"{prefix}-{year}"},
        )

    async def next_invoice_number(self, prefix: str, year: int) -> str:
        year_prefix = f"{prefix}-{year}-"

        # Longest first, then lexicographic: FACT-2025-10000 > FACT-2025-9999
        statement = (
            select(Invoice.invoice_number)
            .where(Invoice.invoice_number.like(f"{year_prefix}%"))
            .order_by(func.length(Invoice.invoice_number).desc(), Invoice.invoice_number.desc())
            .limit(1)
        )
        result = await self.session.execute(statement)
        max_number = result.scalar_one_or_none()

        if max_number:
            sequence = parse_invoice_sequence(max_number) + 1
        else:
            sequence = 1

        return format_invoice_number(prefix, year, sequence)
