"""Helpers shared by the statement aggregation use cases"""

import logging
from decimal import Decimal
from typing import Optional, Tuple
from sqlalchemy.exc import IntegrityError
from src.libs.result import Result, Return
from src.app import errors
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.statement_repository import StatementRepository
from src.domain.iso_week import WeekInfo, WeekRange, current_week_info, week_date_range
from src.domain.statement import Statement, StatementStatus
from src.domain.statement_lifecycle import StatementLifecycle

logger = logging.getLogger(__name__)


def resolve_period(
    year: Optional[int], week_number: Optional[int]
) -> Result[Tuple[WeekInfo, WeekRange]]:
    """Fill a missing year or week from the current ISO week and validate the pair"""
    current = current_week_info()
    week = WeekInfo(
        year=year if year is not None else current.year,
        week_number=week_number if week_number is not None else current.week_number,
    )
    try:
        period = week_date_range(week.year, week.week_number)
    except ValueError as e:
        return Return.err(
            errors.validation_error(
                f"Week {week.week_number} does not exist in ISO year {week.year}",
                reason=str(e),
            )
        )
    return Return.ok((week, period))


async def upsert_period_statement(
    uow: UnitOfWork,
    statement_repo: StatementRepository,
    tenant_id: str,
    contractor_id: str,
    year: int,
    week_number: int,
    total_amount: Decimal,
    currency: Optional[str],
    default_currency: str = "EUR",
) -> Tuple[Statement, bool]:
    """
    Create or refresh the statement for one (tenant, contractor, week)

    Returns (statement, locked). A locked statement (invoiced or paid) is
    returned unchanged. Otherwise the total is rewritten, the status reset
    to open and the change committed.

    A currency of None means the period has no entries: a new row takes
    default_currency and an existing row keeps its own.

    A concurrent insert of the same period loses on the unique constraint;
    it is rolled back and applied as an update of the winner's row.
    """
    existing = await statement_repo.get_by_period(
        tenant_id, contractor_id, year, week_number, for_update=True
    )

    if existing is None:
        statement = Statement(
            tenant_id=tenant_id,
            contractor_id=contractor_id,
            year=year,
            week_number=week_number,
            total_amount=total_amount,
            currency=currency or default_currency,
            status=StatementStatus.OPEN,
        )
        try:
            created = await statement_repo.create(statement)
            await uow.commit()
            return created, False
        except IntegrityError:
            await uow.rollback()
            logger.warning(
                f"Concurrent statement insert for tenant {tenant_id}, contractor {contractor_id}, "
                f"{year}-W{week_number:02d}; retrying as update"
            )

        existing = await statement_repo.get_by_period(
            tenant_id, contractor_id, year, week_number, for_update=True
        )
        if existing is None:
            raise RuntimeError(
                f"Statement for {tenant_id}/{contractor_id}/{year}-W{week_number} "
                f"rejected on insert but not readable afterwards"
            )

    if not StatementLifecycle.can_reaggregate(existing.status):
        # Nothing changed; ends the transaction holding the row lock
        await uow.commit()
        return existing, True

    existing.total_amount = total_amount
    if currency is not None:
        existing.currency = currency
    existing.status = StatementStatus.OPEN
    updated = await statement_repo.update(existing)
    await uow.commit()
    return updated, False
