import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
import src.domain  # noqa: F401
from src.depends import get_session
from src.domain.contractor import Contractor
from src.domain.tenant import Tenant


@pytest_asyncio.fixture(scope="function")
async def engine():
    """In-memory SQLite engine, one fresh schema per test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def tenant(db_session):
    tenant = Tenant(name="Bezorg BV", kvk_number="12345678", btw_number="NL001234567B01")
    db_session.add(tenant)
    await db_session.commit()
    return tenant


@pytest_asyncio.fixture
async def other_tenant(db_session):
    tenant = Tenant(name="Andere Logistiek BV")
    db_session.add(tenant)
    await db_session.commit()
    return tenant


@pytest_asyncio.fixture
async def contractor(db_session, tenant):
    contractor = Contractor(tenant_id=tenant.id, full_name="Jan de Vries", email="jan@example.nl")
    db_session.add(contractor)
    await db_session.commit()
    return contractor


@pytest_asyncio.fixture
async def second_contractor(db_session, tenant):
    contractor = Contractor(tenant_id=tenant.id, full_name="Fatima el Amrani")
    db_session.add(contractor)
    await db_session.commit()
    return contractor


@pytest_asyncio.fixture
def admin_headers(tenant):
    return {"X-Principal-Role": "company_admin", "X-Tenant-Id": tenant.id}


@pytest_asyncio.fixture
def staff_headers(tenant):
    return {"X-Principal-Role": "company_staff", "X-Tenant-Id": tenant.id}


@pytest_asyncio.fixture
def contractor_headers(tenant, contractor):
    return {
        "X-Principal-Role": "contractor",
        "X-Tenant-Id": tenant.id,
        "X-Contractor-Id": contractor.id,
    }


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
