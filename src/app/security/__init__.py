from .tenant_guard import authorize, require_company_role, require_principal

__all__ = ["authorize", "require_company_role", "require_principal"]
