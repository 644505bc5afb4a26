"""Unit tests for IssueInvoice use case

Tests cover:
- First issuance numbers, snapshots amounts and advances status
- Idempotent replay returns the stored invoice
- Losing a concurrent issuance returns the winner's invoice
- Invoice number collisions are retried and bounded
- Scope checks before any write
- Entries in another or several currencies block issuance
"""

import logging
import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import IntegrityError

from src.app.use_cases.billing.issue_invoice import IssueInvoice
from src.app.use_cases.billing.dtos import IssueInvoiceCommandDTO
from src.domain.invoice import Invoice
from src.domain.statement import StatementStatus


def integrity_error(detail: str) -> IntegrityError:
    return IntegrityError("INSERT INTO invoices", {}, Exception(detail))


def echo(entity):
    return entity


@pytest.fixture
def mock_statement_repo():
    return MagicMock()


@pytest.fixture
def mock_invoice_repo():
    repo = MagicMock()
    repo.lock_number_sequence = AsyncMock()
    return repo


@pytest.fixture
def mock_work_entry_repo():
    return MagicMock()


@pytest.fixture
def issue_use_case(mock_uow, mock_statement_repo, mock_invoice_repo, mock_work_entry_repo):
    return IssueInvoice(
        uow=mock_uow,
        statement_repo=mock_statement_repo,
        invoice_repo=mock_invoice_repo,
        work_entry_repo=mock_work_entry_repo,
        vat_rate=Decimal("0.21"),
        number_prefix="FACT",
        max_attempts=3,
        clock_year=lambda: 2025,
    )


@pytest.fixture
def command():
    return IssueInvoiceCommandDTO(statement_id="stmt_1")


@pytest.fixture
def existing_invoice():
    return Invoice(
        id="inv_1",
        statement_id="stmt_1",
        invoice_number="FACT-2025-0001",
        subtotal=Decimal("600.00"),
        tax_amount=Decimal("126.00"),
        total_amount=Decimal("726.00"),
        currency="EUR",
        created_at=datetime.utcnow(),
    )


@pytest.mark.asyncio
class TestIssueInvoiceSuccess:
    async def test_issues_first_invoice_of_the_year(
        self, issue_use_case, mock_uow, mock_statement_repo, mock_invoice_repo,
        mock_work_entry_repo, command, company_admin, make_statement, make_entry
    ):
        """
        Given: Open statement for 8 h x 75.00 in week 48/2024, no invoices yet
        When: issue is called
        Then: FACT-2025-0001 with 600.00 / 126.00 / 726.00, statement invoiced
        """
        # Arrange
        statement = make_statement()
        mock_statement_repo.get_by_id = AsyncMock(return_value=statement)
        mock_statement_repo.update = AsyncMock(side_effect=echo)
        mock_invoice_repo.get_by_statement_id = AsyncMock(return_value=None)
        mock_invoice_repo.next_invoice_number = AsyncMock(return_value="FACT-2025-0001")
        mock_invoice_repo.create = AsyncMock(side_effect=echo)
        mock_work_entry_repo.list_for_period = AsyncMock(return_value=[make_entry("8", "75.00")])

        # Act
        result = await issue_use_case.execute(command, company_admin)

        # Assert
        assert result.is_ok()
        invoice = result.value
        assert invoice.invoice_number == "FACT-2025-0001"
        assert invoice.is_existing is False
        assert invoice.statement_id == "stmt_1"
        assert invoice.year == 2024
        assert invoice.week_number == 48
        assert invoice.subtotal == Decimal("600.00")
        assert invoice.tax == Decimal("126.00")
        assert invoice.total == Decimal("726.00")
        assert invoice.currency == "EUR"

        assert statement.status == StatementStatus.INVOICED
        mock_invoice_repo.lock_number_sequence.assert_called_once_with("FACT", 2025)
        mock_invoice_repo.next_invoice_number.assert_called_once_with("FACT", 2025)
        mock_statement_repo.update.assert_called_once()
        mock_uow.commit.assert_called_once()
        mock_uow.rollback.assert_not_called()

    async def test_contractor_may_issue_own_statement(
        self, issue_use_case, mock_statement_repo, mock_invoice_repo,
        mock_work_entry_repo, command, contractor_principal, make_statement
    ):
        mock_statement_repo.get_by_id = AsyncMock(return_value=make_statement(total=Decimal("0.00")))
        mock_statement_repo.update = AsyncMock(side_effect=echo)
        mock_invoice_repo.get_by_statement_id = AsyncMock(return_value=None)
        mock_invoice_repo.next_invoice_number = AsyncMock(return_value="FACT-2025-0002")
        mock_invoice_repo.create = AsyncMock(side_effect=echo)
        mock_work_entry_repo.list_for_period = AsyncMock(return_value=[])

        result = await issue_use_case.execute(command, contractor_principal)

        assert result.is_ok()
        assert result.value.invoice_number == "FACT-2025-0002"
        assert result.value.total == Decimal("0.00")

    async def test_paid_statement_keeps_status(
        self, issue_use_case, mock_statement_repo, mock_invoice_repo,
        mock_work_entry_repo, command, company_admin, make_statement, make_entry
    ):
        statement = make_statement(status=StatementStatus.PAID)
        mock_statement_repo.get_by_id = AsyncMock(return_value=statement)
        mock_statement_repo.update = AsyncMock(side_effect=echo)
        mock_invoice_repo.get_by_statement_id = AsyncMock(return_value=None)
        mock_invoice_repo.next_invoice_number = AsyncMock(return_value="FACT-2025-0003")
        mock_invoice_repo.create = AsyncMock(side_effect=echo)
        mock_work_entry_repo.list_for_period = AsyncMock(return_value=[make_entry()])

        result = await issue_use_case.execute(command, company_admin)

        assert result.is_ok()
        assert statement.status == StatementStatus.PAID
        mock_statement_repo.update.assert_not_called()


@pytest.mark.asyncio
class TestIssueInvoiceIdempotency:
    async def test_existing_invoice_is_returned_unchanged(
        self, issue_use_case, mock_uow, mock_statement_repo, mock_invoice_repo,
        command, company_admin, make_statement, existing_invoice
    ):
        """
        Given: Statement already has an invoice
        When: issue is called again
        Then: Same number with is_existing=True, nothing written
        """
        # Arrange
        mock_statement_repo.get_by_id = AsyncMock(return_value=make_statement(status=StatementStatus.INVOICED))
        mock_invoice_repo.get_by_statement_id = AsyncMock(return_value=existing_invoice)
        mock_invoice_repo.create = AsyncMock()

        # Act
        result = await issue_use_case.execute(command, company_admin)

        # Assert
        assert result.is_ok()
        assert result.value.invoice_number == "FACT-2025-0001"
        assert result.value.is_existing is True
        assert result.value.total == Decimal("726.00")
        mock_invoice_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_lost_race_returns_winner(
        self, issue_use_case, mock_uow, mock_statement_repo, mock_invoice_repo,
        mock_work_entry_repo, command, company_admin, make_statement, make_entry, existing_invoice
    ):
        """
        Given: A concurrent request inserts the statement's invoice first
        When: Our insert hits UNIQUE(statement_id)
        Then: Rolled back, winner returned with is_existing=True
        """
        # Arrange
        mock_statement_repo.get_by_id = AsyncMock(return_value=make_statement())
        mock_invoice_repo.get_by_statement_id = AsyncMock(side_effect=[None, existing_invoice])
        mock_invoice_repo.next_invoice_number = AsyncMock(return_value="FACT-2025-0002")
        mock_invoice_repo.create = AsyncMock(
            side_effect=integrity_error("UNIQUE constraint failed: invoices.statement_id")
        )
        mock_work_entry_repo.list_for_period = AsyncMock(return_value=[make_entry()])

        # Act
        result = await issue_use_case.execute(command, company_admin)

        # Assert
        assert result.is_ok()
        assert result.value.invoice_number == "FACT-2025-0001"
        assert result.value.is_existing is True
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestIssueInvoiceNumberCollision:
    async def test_collision_is_logged_and_retried(
        self, issue_use_case, mock_uow, mock_statement_repo, mock_invoice_repo,
        mock_work_entry_repo, command, company_admin, make_statement, make_entry, caplog
    ):
        """
        Given: The first derived number is taken by another statement
        When: issue is called
        Then: INVARIANT_VIOLATION logged at ERROR, next number used
        """
        # Arrange
        retried_invoice = Invoice(
            id="inv_2",
            statement_id="stmt_1",
            invoice_number="FACT-2025-0004",
            subtotal=Decimal("600.00"),
            tax_amount=Decimal("126.00"),
            total_amount=Decimal("726.00"),
            currency="EUR",
            created_at=datetime.utcnow(),
        )
        mock_statement_repo.get_by_id = AsyncMock(return_value=make_statement())
        mock_statement_repo.update = AsyncMock(side_effect=echo)
        mock_invoice_repo.get_by_statement_id = AsyncMock(return_value=None)
        mock_invoice_repo.next_invoice_number = AsyncMock(
            side_effect=["FACT-2025-0003", "FACT-2025-0004"]
        )
        mock_invoice_repo.create = AsyncMock(
            side_effect=[
                integrity_error("UNIQUE constraint failed: invoices.invoice_number"),
                retried_invoice,
            ]
        )
        mock_work_entry_repo.list_for_period = AsyncMock(return_value=[make_entry()])

        # Act
        with caplog.at_level(logging.ERROR):
            result = await issue_use_case.execute(command, company_admin)

        # Assert
        assert result.is_ok()
        assert result.value.invoice_number == "FACT-2025-0004"
        assert result.value.is_existing is False
        assert mock_invoice_repo.lock_number_sequence.call_count == 2
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_called_once()
        assert any(
            "INVARIANT_VIOLATION" in record.getMessage() and record.levelno == logging.ERROR
            for record in caplog.records
        )

    async def test_allocation_gives_up_after_max_attempts(
        self, issue_use_case, mock_uow, mock_statement_repo, mock_invoice_repo,
        mock_work_entry_repo, command, company_admin, make_statement, make_entry
    ):
        mock_statement_repo.get_by_id = AsyncMock(return_value=make_statement())
        mock_invoice_repo.get_by_statement_id = AsyncMock(return_value=None)
        mock_invoice_repo.next_invoice_number = AsyncMock(return_value="FACT-2025-0003")
        mock_invoice_repo.create = AsyncMock(
            side_effect=integrity_error("UNIQUE constraint failed: invoices.invoice_number")
        )
        mock_work_entry_repo.list_for_period = AsyncMock(return_value=[make_entry()])

        result = await issue_use_case.execute(command, company_admin)

        assert result.is_err()
        assert result.error.code == "INVOICE_NUMBER_ALLOCATION_FAILED"
        assert mock_invoice_repo.create.call_count == 3
        assert mock_uow.rollback.call_count == 3
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestIssueInvoiceErrors:
    async def test_statement_not_found(
        self, issue_use_case, mock_statement_repo, mock_invoice_repo, command, company_admin
    ):
        mock_statement_repo.get_by_id = AsyncMock(return_value=None)
        mock_invoice_repo.get_by_statement_id = AsyncMock()

        result = await issue_use_case.execute(command, company_admin)

        assert result.is_err()
        assert result.error.code == "STATEMENT_NOT_FOUND"
        mock_invoice_repo.get_by_statement_id.assert_not_called()

    async def test_no_principal_is_unauthorized(self, issue_use_case, mock_statement_repo, command):
        mock_statement_repo.get_by_id = AsyncMock()

        result = await issue_use_case.execute(command, None)

        assert result.error.code == "UNAUTHORIZED"
        mock_statement_repo.get_by_id.assert_not_called()

    async def test_other_tenant_is_forbidden(
        self, issue_use_case, mock_statement_repo, mock_invoice_repo, command,
        other_tenant_admin, make_statement
    ):
        mock_statement_repo.get_by_id = AsyncMock(return_value=make_statement())
        mock_invoice_repo.get_by_statement_id = AsyncMock()

        result = await issue_use_case.execute(command, other_tenant_admin)

        assert result.error.code == "FORBIDDEN"
        mock_invoice_repo.get_by_statement_id.assert_not_called()

    async def test_other_contractor_is_forbidden(
        self, issue_use_case, mock_statement_repo, command, contractor_principal, make_statement
    ):
        mock_statement_repo.get_by_id = AsyncMock(
            return_value=make_statement(contractor_id="contractor_2")
        )

        result = await issue_use_case.execute(command, contractor_principal)

        assert result.error.code == "FORBIDDEN"

    async def test_unexpected_error_rolls_back(
        self, issue_use_case, mock_uow, mock_statement_repo, command, company_admin
    ):
        mock_statement_repo.get_by_id = AsyncMock(side_effect=RuntimeError("connection lost"))

        result = await issue_use_case.execute(command, company_admin)

        assert result.is_err()
        assert result.error.code == "ISSUE_INVOICE_FAILED"
        assert result.error.reason == "connection lost"
        mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
class TestIssueInvoiceCurrency:
    async def test_mixed_entry_currencies_are_refused(
        self, issue_use_case, mock_uow, mock_statement_repo, mock_invoice_repo,
        mock_work_entry_repo, command, company_admin, make_statement, make_entry
    ):
        """
        Given: EUR statement whose week now holds one EUR and one USD entry
        When: issue is called
        Then: MIXED_CURRENCIES, no number allocated, nothing written
        """
        mock_statement_repo.get_by_id = AsyncMock(return_value=make_statement())
        mock_statement_repo.update = AsyncMock()
        mock_invoice_repo.get_by_statement_id = AsyncMock(return_value=None)
        mock_invoice_repo.next_invoice_number = AsyncMock()
        mock_invoice_repo.create = AsyncMock()
        mock_work_entry_repo.list_for_period = AsyncMock(return_value=[
            make_entry("8", "75.00"),
            make_entry("1", "100.00", id="entry_2", currency="USD"),
        ])

        result = await issue_use_case.execute(command, company_admin)

        assert result.is_err()
        assert result.error.code == "MIXED_CURRENCIES"
        mock_invoice_repo.next_invoice_number.assert_not_called()
        mock_invoice_repo.create.assert_not_called()
        mock_statement_repo.update.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_entries_in_other_currency_than_statement_are_refused(
        self, issue_use_case, mock_statement_repo, mock_invoice_repo,
        mock_work_entry_repo, command, company_admin, make_statement, make_entry
    ):
        """
        Given: EUR statement whose week only holds USD entries
        When: issue is called
        Then: MIXED_CURRENCIES naming both currencies
        """
        mock_statement_repo.get_by_id = AsyncMock(return_value=make_statement())
        mock_invoice_repo.get_by_statement_id = AsyncMock(return_value=None)
        mock_invoice_repo.next_invoice_number = AsyncMock()
        mock_invoice_repo.create = AsyncMock()
        mock_work_entry_repo.list_for_period = AsyncMock(
            return_value=[make_entry("8", "75.00", currency="USD")]
        )

        result = await issue_use_case.execute(command, company_admin)

        assert result.is_err()
        assert result.error.code == "MIXED_CURRENCIES"
        assert "USD" in result.error.reason
        assert "EUR" in result.error.reason
        mock_invoice_repo.next_invoice_number.assert_not_called()
        mock_invoice_repo.create.assert_not_called()
