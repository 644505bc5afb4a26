"""
List Statements Use Case

Retrieves statements of a tenant with optional filters and pagination.
"""
from typing import Optional
from src.libs.result import Result, Return
from src.app import errors
from src.app.security.tenant_guard import authorize
from src.app.repositories.statement_repository import StatementRepository
from src.domain.principal import Principal, Role
from src.domain.statement import StatementStatus
from .dtos import ListStatementsResponseDTO
from .mappers import statement_to_dto


class ListStatements:
    """
    Use case: List statements

    Company roles list their tenant's statements. Contractors must pass
    their own contractor_id and only ever see their own statements.
    Statements are ordered by created_at DESC (most recent first).
    """

    def __init__(self, statement_repo: StatementRepository):
        self.statement_repo = statement_repo

    async def execute(
        self,
        principal: Optional[Principal],
        tenant_id: Optional[str],
        contractor_id: Optional[str] = None,
        status: Optional[str] = None,
        year: Optional[int] = None,
        week_number: Optional[int] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> Result[ListStatementsResponseDTO]:
        """
        List statements visible to the principal.

        Args:
            principal: Authenticated caller
            tenant_id: Tenant identifier (optional for contractors)
            contractor_id: Contractor filter (required for contractors)
            status: Optional status filter
            year: Optional ISO year filter
            week_number: Optional ISO week filter
            limit: Maximum number of statements to return
            offset: Number of statements to skip

        Returns:
            Result[ListStatementsResponseDTO]: Paginated statement list
        """
        access = authorize(principal, tenant_id, contractor_id)
        if access.is_err():
            return access

        if principal.role == Role.CONTRACTOR and not tenant_id:
            tenant_id = principal.tenant_id

        status_filter = None
        if status:
            try:
                status_filter = StatementStatus(status)
            except ValueError:
                return Return.err(
                    errors.validation_error(
                        f"Unknown statement status '{status}'",
                        reason=f"status={status!r}",
                    )
                )

        statements = await self.statement_repo.list(
            tenant_id=tenant_id,
            contractor_id=contractor_id,
            status=status_filter,
            year=year,
            week_number=week_number,
            limit=limit,
            offset=offset,
        )

        return Return.ok(
            ListStatementsResponseDTO(
                statements=[statement_to_dto(s) for s in statements],
                limit=limit,
                offset=offset,
            )
        )
