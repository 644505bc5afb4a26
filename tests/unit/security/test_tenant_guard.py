"""Unit tests for the tenant authorization guard"""

import pytest
from src.app.security.tenant_guard import authorize, require_company_role, require_principal
from src.domain.principal import Principal, Role


class TestAuthorizeCompanyRoles:
    @pytest.mark.parametrize("role", [Role.COMPANY_ADMIN, Role.COMPANY_STAFF])
    def test_own_tenant_allowed(self, role):
        principal = Principal(role=role, tenant_id="tenant_a")

        result = authorize(principal, "tenant_a")

        assert result.is_ok()
        assert result.value is principal

    def test_other_tenant_forbidden(self, company_admin):
        result = authorize(company_admin, "tenant_b")

        assert result.is_err()
        assert result.error.code == "FORBIDDEN"

    def test_missing_tenant_is_bad_request(self, company_admin):
        result = authorize(company_admin, None)

        assert result.error.code == "BAD_REQUEST"

    def test_contractor_id_does_not_widen_company_scope(self, company_admin):
        result = authorize(company_admin, "tenant_b", "contractor_1")

        assert result.error.code == "FORBIDDEN"


class TestAuthorizeContractor:
    def test_own_contractor_allowed(self, contractor_principal):
        assert authorize(contractor_principal, "tenant_a", "contractor_1").is_ok()

    def test_own_contractor_without_tenant_allowed(self, contractor_principal):
        assert authorize(contractor_principal, None, "contractor_1").is_ok()

    def test_other_contractor_forbidden(self, contractor_principal):
        result = authorize(contractor_principal, "tenant_a", "contractor_2")

        assert result.error.code == "FORBIDDEN"

    def test_other_tenant_forbidden(self, contractor_principal):
        result = authorize(contractor_principal, "tenant_b", "contractor_1")

        assert result.error.code == "FORBIDDEN"

    def test_missing_contractor_is_bad_request(self, contractor_principal):
        result = authorize(contractor_principal, "tenant_a")

        assert result.error.code == "BAD_REQUEST"


class TestUnauthenticated:
    def test_no_principal_is_unauthorized_before_scope_checks(self):
        result = authorize(None, None)

        assert result.error.code == "UNAUTHORIZED"

    def test_require_principal(self, company_staff):
        assert require_principal(None).error.code == "UNAUTHORIZED"
        assert require_principal(company_staff).is_ok()


class TestRequireCompanyRole:
    def test_contractor_rejected(self, contractor_principal):
        assert require_company_role(contractor_principal).error.code == "FORBIDDEN"

    def test_staff_allowed_unless_admin_only(self, company_staff):
        assert require_company_role(company_staff).is_ok()
        assert require_company_role(company_staff, admin_only=True).error.code == "FORBIDDEN"

    def test_admin_allowed(self, company_admin):
        assert require_company_role(company_admin, admin_only=True).is_ok()

    def test_no_principal(self):
        assert require_company_role(None).error.code == "UNAUTHORIZED"
