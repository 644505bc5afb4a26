"""Unit tests for ListStatements and GetStatement use cases"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.billing.list_statements import ListStatements
from src.app.use_cases.billing.get_statement import GetStatement
from src.domain.statement import StatementStatus


@pytest.fixture
def mock_statement_repo():
    return MagicMock()


@pytest.mark.asyncio
class TestListStatements:
    async def test_company_lists_tenant(self, mock_statement_repo, company_staff, make_statement):
        mock_statement_repo.list = AsyncMock(return_value=[make_statement()])

        result = await ListStatements(mock_statement_repo).execute(
            company_staff, tenant_id="tenant_a", status="open", year=2024
        )

        assert result.is_ok()
        assert len(result.value.statements) == 1
        mock_statement_repo.list.assert_called_once_with(
            tenant_id="tenant_a",
            contractor_id=None,
            status=StatementStatus.OPEN,
            year=2024,
            week_number=None,
            limit=100,
            offset=0,
        )

    async def test_contractor_scoped_to_own_tenant(self, mock_statement_repo, contractor_principal):
        mock_statement_repo.list = AsyncMock(return_value=[])

        result = await ListStatements(mock_statement_repo).execute(
            contractor_principal, tenant_id=None, contractor_id="contractor_1"
        )

        assert result.is_ok()
        kwargs = mock_statement_repo.list.call_args.kwargs
        assert kwargs["tenant_id"] == "tenant_a"
        assert kwargs["contractor_id"] == "contractor_1"

    async def test_contractor_without_contractor_id(self, mock_statement_repo, contractor_principal):
        mock_statement_repo.list = AsyncMock()

        result = await ListStatements(mock_statement_repo).execute(contractor_principal, tenant_id="tenant_a")

        assert result.error.code == "BAD_REQUEST"
        mock_statement_repo.list.assert_not_called()

    async def test_contractor_cannot_list_others(self, mock_statement_repo, contractor_principal):
        result = await ListStatements(mock_statement_repo).execute(
            contractor_principal, tenant_id="tenant_a", contractor_id="contractor_2"
        )

        assert result.error.code == "FORBIDDEN"

    async def test_other_tenant(self, mock_statement_repo, other_tenant_admin):
        result = await ListStatements(mock_statement_repo).execute(other_tenant_admin, tenant_id="tenant_a")

        assert result.error.code == "FORBIDDEN"

    async def test_unknown_status_filter(self, mock_statement_repo, company_admin):
        result = await ListStatements(mock_statement_repo).execute(
            company_admin, tenant_id="tenant_a", status="draft"
        )

        assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
class TestGetStatement:
    async def test_contractor_reads_own(self, mock_statement_repo, contractor_principal, make_statement):
        mock_statement_repo.get_by_id = AsyncMock(return_value=make_statement())

        result = await GetStatement(mock_statement_repo).execute("stmt_1", contractor_principal)

        assert result.value.id == "stmt_1"

    async def test_contractor_cannot_read_other(self, mock_statement_repo, contractor_principal, make_statement):
        mock_statement_repo.get_by_id = AsyncMock(return_value=make_statement(contractor_id="contractor_2"))

        result = await GetStatement(mock_statement_repo).execute("stmt_1", contractor_principal)

        assert result.error.code == "FORBIDDEN"

    async def test_not_found(self, mock_statement_repo, company_admin):
        mock_statement_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetStatement(mock_statement_repo).execute("missing", company_admin)

        assert result.error.code == "STATEMENT_NOT_FOUND"

    async def test_unauthenticated(self, mock_statement_repo):
        mock_statement_repo.get_by_id = AsyncMock()

        result = await GetStatement(mock_statement_repo).execute("stmt_1", None)

        assert result.error.code == "UNAUTHORIZED"
        mock_statement_repo.get_by_id.assert_not_called()
