"""Unit tests for RegisterTenant and GetTenant use cases"""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.billing.register_tenant import RegisterTenant
from src.app.use_cases.billing.get_tenant import GetTenant
from src.app.use_cases.billing.dtos import RegisterTenantCommandDTO
from src.domain.tenant import Tenant


def stamp(tenant):
    tenant.id = "tenant_new"
    tenant.created_at = datetime.utcnow()
    return tenant


@pytest.fixture
def mock_tenant_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=stamp)
    repo.get_by_id = AsyncMock(
        return_value=Tenant(id="tenant_a", name="Bezorg BV", kvk_number="12345678", created_at=datetime.utcnow())
    )
    return repo


@pytest.mark.asyncio
class TestRegisterTenant:
    async def test_registers_with_trimmed_fields(self, mock_uow, mock_tenant_repo):
        """
        Given: A sign-up with padded name and a blank phone
        When: register is called
        Then: Tenant stored trimmed, blank phone as null, committed
        """
        command = RegisterTenantCommandDTO(
            name="  Bezorg BV ", kvk_number="12345678", btw_number="NL001234567B01", phone="  "
        )

        result = await RegisterTenant(mock_uow, mock_tenant_repo).execute(command)

        assert result.is_ok()
        assert result.value.id == "tenant_new"
        assert result.value.name == "Bezorg BV"
        assert result.value.btw_number == "NL001234567B01"
        assert result.value.phone is None
        mock_uow.commit.assert_called_once()

    async def test_blank_name_rejected(self, mock_uow, mock_tenant_repo):
        result = await RegisterTenant(mock_uow, mock_tenant_repo).execute(
            RegisterTenantCommandDTO(name="   ")
        )

        assert result.error.code == "VALIDATION_ERROR"
        mock_tenant_repo.create.assert_not_called()

    async def test_store_failure_rolls_back(self, mock_uow, mock_tenant_repo):
        mock_tenant_repo.create = AsyncMock(side_effect=RuntimeError("disk full"))

        result = await RegisterTenant(mock_uow, mock_tenant_repo).execute(
            RegisterTenantCommandDTO(name="Bezorg BV")
        )

        assert result.error.code == "REGISTER_TENANT_FAILED"
        assert result.error.reason == "disk full"
        mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
class TestGetTenant:
    async def test_company_reads_own_tenant(self, mock_tenant_repo, company_staff):
        result = await GetTenant(mock_tenant_repo).execute(company_staff, "tenant_a")

        assert result.is_ok()
        assert result.value.kvk_number == "12345678"
        mock_tenant_repo.get_by_id.assert_called_once_with("tenant_a")

    async def test_contractor_reads_own_tenant(self, mock_tenant_repo, contractor_principal):
        result = await GetTenant(mock_tenant_repo).execute(contractor_principal, "tenant_a")

        assert result.is_ok()
        assert result.value.name == "Bezorg BV"

    async def test_other_tenant_forbidden(self, mock_tenant_repo, other_tenant_admin, contractor_principal):
        company = await GetTenant(mock_tenant_repo).execute(other_tenant_admin, "tenant_a")
        contractor = await GetTenant(mock_tenant_repo).execute(contractor_principal, "tenant_b")

        assert company.error.code == "FORBIDDEN"
        assert contractor.error.code == "FORBIDDEN"
        mock_tenant_repo.get_by_id.assert_not_called()

    async def test_no_principal(self, mock_tenant_repo):
        result = await GetTenant(mock_tenant_repo).execute(None, "tenant_a")

        assert result.error.code == "UNAUTHORIZED"

    async def test_missing_tenant(self, mock_tenant_repo, company_admin):
        mock_tenant_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetTenant(mock_tenant_repo).execute(company_admin, "tenant_a")

        assert result.error.code == "TENANT_NOT_FOUND"
