"""Unit tests for RegisterContractor and ListContractors use cases"""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.billing.register_contractor import RegisterContractor
from src.app.use_cases.billing.list_contractors import ListContractors
from src.app.use_cases.billing.dtos import RegisterContractorCommandDTO
from src.domain.tenant import Tenant


def stamp(contractor):
    contractor.created_at = datetime.utcnow()
    return contractor


@pytest.fixture
def mock_tenant_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Tenant(id="tenant_a", name="Bezorg BV"))
    return repo


@pytest.fixture
def mock_contractor_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=stamp)
    return repo


@pytest.fixture
def command():
    return RegisterContractorCommandDTO(tenant_id="tenant_a", full_name="  Jan de Vries ", email="jan@example.nl")


@pytest.mark.asyncio
class TestRegisterContractor:
    async def test_admin_registers(self, mock_uow, mock_tenant_repo, mock_contractor_repo, command, company_admin):
        result = await RegisterContractor(mock_uow, mock_tenant_repo, mock_contractor_repo).execute(
            command, company_admin
        )

        assert result.is_ok()
        assert result.value.full_name == "Jan de Vries"
        assert result.value.tenant_id == "tenant_a"
        mock_uow.commit.assert_called_once()

    async def test_staff_forbidden(self, mock_uow, mock_tenant_repo, mock_contractor_repo, command, company_staff):
        result = await RegisterContractor(mock_uow, mock_tenant_repo, mock_contractor_repo).execute(
            command, company_staff
        )

        assert result.error.code == "FORBIDDEN"
        mock_contractor_repo.create.assert_not_called()

    async def test_unknown_tenant(self, mock_uow, mock_tenant_repo, mock_contractor_repo, command, company_admin):
        mock_tenant_repo.get_by_id = AsyncMock(return_value=None)

        result = await RegisterContractor(mock_uow, mock_tenant_repo, mock_contractor_repo).execute(
            command, company_admin
        )

        assert result.error.code == "TENANT_NOT_FOUND"


@pytest.mark.asyncio
class TestListContractors:
    async def test_lists_tenant(self, mock_contractor_repo, company_staff, sample_contractor):
        mock_contractor_repo.list_by_tenant = AsyncMock(return_value=[sample_contractor])

        result = await ListContractors(mock_contractor_repo).execute(company_staff, "tenant_a")

        assert [c.id for c in result.value.contractors] == ["contractor_1"]
        mock_contractor_repo.list_by_tenant.assert_called_once_with("tenant_a")

    async def test_contractor_forbidden(self, mock_contractor_repo, contractor_principal):
        result = await ListContractors(mock_contractor_repo).execute(contractor_principal, "tenant_a")

        assert result.error.code == "FORBIDDEN"
