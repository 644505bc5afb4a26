"""GetStatement Use Case"""

from typing import Optional
from src.libs.result import Result, Return
from src.app import errors
from src.app.security.tenant_guard import authorize, require_principal
from src.app.repositories.statement_repository import StatementRepository
from src.domain.principal import Principal
from .dtos import StatementDTO
from .mappers import statement_to_dto


class GetStatement:
    def __init__(self, statement_repo: StatementRepository):
        self.statement_repo = statement_repo

    async def execute(
        self, statement_id: str, principal: Optional[Principal]
    ) -> Result[StatementDTO]:
        authenticated = require_principal(principal)
        if authenticated.is_err():
            return authenticated

        statement = await self.statement_repo.get_by_id(statement_id)
        if not statement:
            return Return.err(errors.statement_not_found(statement_id))

        access = authorize(principal, statement.tenant_id, statement.contractor_id)
        if access.is_err():
            return access

        return Return.ok(statement_to_dto(statement))
