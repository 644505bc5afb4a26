"""Tenant Authorization Guard

Single decision point for tenant and contractor scoping. Every read and
write path touching work entries, statements or invoices goes through
authorize() before any store access.

Decision order:
1. No principal → UNAUTHORIZED (before any scope check)
2. Missing target id → BAD_REQUEST
3. Scope mismatch → FORBIDDEN
"""

from typing import Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.domain.principal import Principal, Role


def _unauthorized() -> Result:
    return Return.err(
        Error(
            code=errors.UNAUTHORIZED,
            message="Authentication required",
            reason="No valid principal on request",
        )
    )


def _forbidden(reason: str) -> Result:
    return Return.err(
        Error(
            code=errors.FORBIDDEN,
            message="Access to this resource is not allowed",
            reason=reason,
        )
    )


def _bad_request(message: str) -> Result:
    return Return.err(
        Error(code=errors.BAD_REQUEST, message=message, reason="Missing scope identifier")
    )


def require_principal(principal: Optional[Principal]) -> Result[Principal]:
    if principal is None:
        return _unauthorized()
    return Return.ok(principal)


def authorize(
    principal: Optional[Principal],
    tenant_id: Optional[str],
    contractor_id: Optional[str] = None,
) -> Result[Principal]:
    """
    Decide whether principal may act on the given tenant/contractor scope

    Args:
        principal: Authenticated caller, None if unauthenticated
        tenant_id: Tenant owning the resource
        contractor_id: Contractor owning the resource (required for contractor principals)

    Returns:
        Result[Principal]: the principal on success, or UNAUTHORIZED / BAD_REQUEST / FORBIDDEN
    """
    if principal is None:
        return _unauthorized()

    if principal.role.is_company:
        if not tenant_id:
            return _bad_request("tenant_id is required")
        if principal.tenant_id != tenant_id:
            return _forbidden(
                f"principal tenant {principal.tenant_id} != target tenant {tenant_id}"
            )
        return Return.ok(principal)

    if principal.role == Role.CONTRACTOR:
        if not contractor_id:
            return _bad_request("contractor_id is required")
        if principal.contractor_id != contractor_id:
            return _forbidden(
                f"principal contractor {principal.contractor_id} != target contractor {contractor_id}"
            )
        if tenant_id and principal.tenant_id != tenant_id:
            return _forbidden(
                f"principal tenant {principal.tenant_id} != target tenant {tenant_id}"
            )
        return Return.ok(principal)

    return _forbidden(f"unknown role {principal.role!r}")


def require_company_role(
    principal: Optional[Principal], admin_only: bool = False
) -> Result[Principal]:
    """Reject contractor principals (and staff when admin_only)."""
    if principal is None:
        return _unauthorized()
    if not principal.role.is_company:
        return _forbidden(f"role {principal.role.value} may not perform company actions")
    if admin_only and principal.role != Role.COMPANY_ADMIN:
        return _forbidden(f"role {principal.role.value} is not company_admin")
    return Return.ok(principal)
