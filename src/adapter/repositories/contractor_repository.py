"""SQLAlchemy Contractor Repository Implementation"""

from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.contractor_repository import ContractorRepository
from src.domain.contractor import Contractor


class SqlAlchemyContractorRepository(ContractorRepository):
    """SQLAlchemy implementation of ContractorRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, contractor: Contractor) -> Contractor:
        self.session.add(contractor)
        await self.session.flush()
        await self.session.refresh(contractor)
        return contractor

    async def get_by_id(self, contractor_id: str) -> Optional[Contractor]:
        statement = select(Contractor).where(Contractor.id == contractor_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_tenant(self, tenant_id: str) -> List[Contractor]:
        statement = (
            select(Contractor)
            .where(Contractor.tenant_id == tenant_id)
            .order_by(Contractor.created_at.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
