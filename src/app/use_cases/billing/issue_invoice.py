"""IssueInvoice Use Case

Issues the legally numbered invoice for a statement, exactly once.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional
from sqlalchemy.exc import IntegrityError
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.security.tenant_guard import authorize, require_principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.statement_repository import StatementRepository
from src.app.repositories.work_entry_repository import WorkEntryRepository
from src.domain.invoice import Invoice
from src.domain.iso_week import week_date_range
from src.domain.money import DEFAULT_VAT_RATE, vat_breakdown
from src.domain.principal import Principal
from src.domain.statement import StatementStatus
from src.domain.statement_lifecycle import StatementLifecycle
from .dtos import InvoiceResponseDTO, IssueInvoiceCommandDTO
from .mappers import invoice_to_dto
from .sum_for_period import SumForPeriod

logger = logging.getLogger(__name__)


def current_utc_year() -> int:
    return datetime.utcnow().year


class IssueInvoice:
    """
    Use Case: Issue invoice for a statement

    Business Rules:
    1. One invoice per statement; a repeat request returns the existing
       invoice with is_existing=True
    2. Number format FACT-YYYY-NNNN where YYYY is the UTC year of issuance
    3. Sequence is one past the numeric maximum of the year, never reused
    4. Amounts (subtotal, BTW, total) are snapshotted on the invoice
    5. Open or approved statements advance to invoiced
    6. The period's entries must share the statement's currency; otherwise
       MIXED_CURRENCIES and no number is allocated

    Concurrency:
    - UNIQUE(statement_id) makes the insert the serialization point; a
      losing request rolls back and returns the winner's invoice
    - Number allocation is serialized per year by the repository lock where
      the database supports it. A duplicate number means that lock was not
      effective, so it is logged as an invariant violation and retried with
      a fresh number, up to max_attempts

    Flow:
    1. Authenticate, load statement, authorize against its scope
    2. Return existing invoice if present
    3. Compute amounts from the statement's period entries, checking currency
    4. Lock sequence, derive next number, insert
    5. Advance statement status
    6. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        statement_repo: StatementRepository,
        invoice_repo: InvoiceRepository,
        work_entry_repo: WorkEntryRepository,
        vat_rate: Decimal = DEFAULT_VAT_RATE,
        number_prefix: str = "FACT",
        max_attempts: int = 5,
        clock_year: Callable[[], int] = current_utc_year,
    ):
        self.uow = uow
        self.statement_repo = statement_repo
        self.invoice_repo = invoice_repo
        self.work_entry_repo = work_entry_repo
        self.vat_rate = Decimal(str(vat_rate))
        self.number_prefix = number_prefix
        self.max_attempts = max_attempts
        self.clock_year = clock_year

    async def execute(
        self, command: IssueInvoiceCommandDTO, principal: Optional[Principal]
    ) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice issuance

        Args:
            command: IssueInvoiceCommandDTO with statement_id
            principal: Authenticated caller (company role or the statement's contractor)

        Returns:
            Result[InvoiceResponseDTO]: invoice details, is_existing tells new from replayed
        """
        statement_id = command.statement_id
        try:
            # Step 1: Authenticate, load, authorize
            authenticated = require_principal(principal)
            if authenticated.is_err():
                return authenticated

            statement = await self.statement_repo.get_by_id(statement_id)
            if not statement:
                return Return.err(errors.statement_not_found(statement_id))

            access = authorize(principal, statement.tenant_id, statement.contractor_id)
            if access.is_err():
                return access

            # Step 2: Idempotent replay
            existing_invoice = await self.invoice_repo.get_by_statement_id(statement_id)
            if existing_invoice:
                logger.info(
                    f"Invoice {existing_invoice.invoice_number} already issued for statement {statement_id}"
                )
                return Return.ok(invoice_to_dto(existing_invoice, statement, is_existing=True))

            # Step 3: Compute amounts, one currency matching the statement
            period = week_date_range(statement.year, statement.week_number)
            sums_result = await SumForPeriod(self.work_entry_repo).execute(
                tenant_id=statement.tenant_id,
                start_date=period.start_date,
                end_date=period.end_date,
                contractor_id=statement.contractor_id,
            )
            if sums_result.is_err():
                logger.warning(f"Refusing to invoice statement {statement_id}: {sums_result.error.reason}")
                return sums_result

            currency = statement.currency
            subtotal = Decimal("0.00")
            if sums_result.value:
                period_sum = sums_result.value[0]
                if period_sum.currency != currency:
                    logger.warning(
                        f"Refusing to invoice statement {statement_id}: entries in "
                        f"{period_sum.currency}, statement in {currency}"
                    )
                    return Return.err(
                        Error(
                            code=errors.MIXED_CURRENCIES,
                            message=f"Work entries are in {period_sum.currency} but statement "
                                    f"{statement_id} is in {currency}; regenerate the statement first",
                            reason=f"{period_sum.currency} and {currency}",
                        )
                    )
                subtotal = period_sum.total

            amounts = vat_breakdown(subtotal, self.vat_rate)

            if amounts.subtotal != statement.total_amount:
                logger.warning(
                    f"Statement {statement_id} total {statement.total_amount} differs from "
                    f"current entries {amounts.subtotal}; invoicing current entries"
                )

            year = self.clock_year()

            # Step 4: Allocate number and insert
            for attempt in range(1, self.max_attempts + 1):
                await self.invoice_repo.lock_number_sequence(self.number_prefix, year)
                invoice_number = await self.invoice_repo.next_invoice_number(self.number_prefix, year)

                invoice = Invoice(
                    statement_id=statement_id,
                    invoice_number=invoice_number,
                    subtotal=amounts.subtotal,
                    tax_amount=amounts.tax,
                    total_amount=amounts.total,
                    currency=currency,
                )

                try:
                    created_invoice = await self.invoice_repo.create(invoice)
                except IntegrityError as e:
                    await self.uow.rollback()

                    winner = await self.invoice_repo.get_by_statement_id(statement_id)
                    if winner:
                        logger.warning(
                            f"Concurrent issuance for statement {statement_id}; "
                            f"returning {winner.invoice_number}"
                        )
                        statement = await self.statement_repo.get_by_id(statement_id)
                        return Return.ok(invoice_to_dto(winner, statement, is_existing=True))

                    logger.error(
                        f"{errors.INVARIANT_VIOLATION}: invoice number {invoice_number} already taken "
                        f"(attempt {attempt}/{self.max_attempts}): {e}"
                    )
                    continue

                # Step 5: Advance statement status
                statement = await self.statement_repo.get_by_id(statement_id, for_update=True)
                if StatementLifecycle.can_transition(statement.status, StatementStatus.INVOICED):
                    statement.status = StatementStatus.INVOICED
                    statement = await self.statement_repo.update(statement)

                # Step 6: Commit transaction
                await self.uow.commit()

                logger.info(
                    f"Issued invoice {created_invoice.invoice_number} for statement {statement_id}: "
                    f"{created_invoice.total_amount} {created_invoice.currency}"
                )

                return Return.ok(invoice_to_dto(created_invoice, statement, is_existing=False))

            return Return.err(
                Error(
                    code=errors.INVOICE_NUMBER_ALLOCATION_FAILED,
                    message="Failed to allocate an invoice number",
                    reason=f"{self.max_attempts} attempts collided for {self.number_prefix}-{year}",
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice issuance failed for statement {statement_id}: {e}")
            return Return.err(
                Error(
                    code="ISSUE_INVOICE_FAILED",
                    message="Failed to issue invoice",
                    reason=str(e),
                )
            )
