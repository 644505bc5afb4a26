import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.domain.contractor import Contractor
from src.domain.principal import Principal, Role
from src.domain.statement import Statement, StatementStatus
from src.domain.work_entry import TariffType, WorkEntry

TENANT_ID = "tenant_a"
OTHER_TENANT_ID = "tenant_b"
CONTRACTOR_ID = "contractor_1"


@pytest.fixture
def mock_uow():
    """Mock unit of work with async commit/rollback"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def company_admin():
    return Principal(role=Role.COMPANY_ADMIN, tenant_id=TENANT_ID)


@pytest.fixture
def company_staff():
    return Principal(role=Role.COMPANY_STAFF, tenant_id=TENANT_ID)


@pytest.fixture
def other_tenant_admin():
    return Principal(role=Role.COMPANY_ADMIN, tenant_id=OTHER_TENANT_ID)


@pytest.fixture
def contractor_principal():
    return Principal(role=Role.CONTRACTOR, tenant_id=TENANT_ID, contractor_id=CONTRACTOR_ID)


@pytest.fixture
def sample_contractor():
    return Contractor(
        id=CONTRACTOR_ID,
        tenant_id=TENANT_ID,
        full_name="Jan de Vries",
        created_at=datetime.utcnow(),
    )


@pytest.fixture
def make_statement():
    """Factory for statements in ISO week 48 of 2024"""

    def _make(status=StatementStatus.OPEN, total=Decimal("600.00"), **overrides):
        data = dict(
            id="stmt_1",
            tenant_id=TENANT_ID,
            contractor_id=CONTRACTOR_ID,
            year=2024,
            week_number=48,
            total_amount=total,
            currency="EUR",
            status=status,
            created_at=datetime.utcnow(),
            updated_at=datetime.utcnow(),
        )
        data.update(overrides)
        return Statement(**data)

    return _make


@pytest.fixture
def make_entry():
    """Factory for work entries"""

    def _make(quantity="8", unit_price="75.00", **overrides):
        data = dict(
            id="entry_1",
            tenant_id=TENANT_ID,
            contractor_id=CONTRACTOR_ID,
            work_date=date(2024, 11, 25),
            tariff_type=TariffType.HOUR,
            quantity=Decimal(quantity),
            unit_price=Decimal(unit_price),
            currency="EUR",
            created_at=datetime.utcnow(),
        )
        data.update(overrides)
        return WorkEntry(**data)

    return _make
