"""SQLAlchemy Tenant Repository Implementation"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.tenant_repository import TenantRepository
from src.domain.tenant import Tenant


class SqlAlchemyTenantRepository(TenantRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, tenant: Tenant) -> Tenant:
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant

    async def get_by_id(self, tenant_id: str) -> Optional[Tenant]:
        statement = select(Tenant).where(Tenant.id == tenant_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()
