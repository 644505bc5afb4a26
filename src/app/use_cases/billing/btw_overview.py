"""BtwOverview Use Case

BTW (Dutch VAT) position of a tenant, or one contractor, over a month,
quarter or year.
"""

import logging
from decimal import Decimal
from typing import Iterable, Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.security.tenant_guard import authorize
from src.app.repositories.expense_repository import ExpenseRepository
from src.app.repositories.work_entry_repository import WorkEntryRepository
from src.domain.money import DEFAULT_VAT_RATE, line_total, round_money, tax, vat_breakdown
from src.domain.principal import Principal, Role
from src.domain.tax_period import PeriodType, tax_period_range
from .dtos import BtwOverviewDTO

logger = logging.getLogger(__name__)


def _single_currency(currencies: Iterable[str]) -> Optional[str]:
    found = sorted(set(currencies))
    if len(found) > 1:
        raise ValueError(" and ".join(found))
    return found[0] if found else None


class BtwOverview:
    """
    Use Case: BTW overview for a period

    Business Rules:
    1. Company roles see their tenant, optionally narrowed to one contractor;
       contractors see only themselves
    2. Revenue is the sum of cent-rounded work entry line totals in the range
    3. btw is the tax on that revenue, net = revenue + btw
    4. For one contractor, expenses in the range give btw_paid (tax per
       expense, summed) and btw_balance = btw - btw_paid
    5. Every amount in the overview shares one currency (MIXED_CURRENCIES)
    """

    def __init__(
        self,
        work_entry_repo: WorkEntryRepository,
        expense_repo: ExpenseRepository,
        vat_rate: Decimal = DEFAULT_VAT_RATE,
        default_currency: str = "EUR",
    ):
        self.work_entry_repo = work_entry_repo
        self.expense_repo = expense_repo
        self.vat_rate = vat_rate
        self.default_currency = default_currency

    async def execute(
        self,
        principal: Optional[Principal],
        tenant_id: Optional[str],
        period: str,
        year: int,
        value: Optional[int] = None,
        contractor_id: Optional[str] = None,
    ) -> Result[BtwOverviewDTO]:
        # Step 1: Authorize
        access = authorize(principal, tenant_id, contractor_id)
        if access.is_err():
            return access

        if principal.role == Role.CONTRACTOR and not tenant_id:
            tenant_id = principal.tenant_id

        # Step 2: Resolve period
        try:
            period_range = tax_period_range(period, year, value)
        except ValueError as e:
            return Return.err(errors.validation_error(f"Invalid BTW period: {e}", reason=str(e)))

        # Step 3: Revenue
        entries = await self.work_entry_repo.list_for_period(
            tenant_id=tenant_id,
            start_date=period_range.start_date,
            end_date=period_range.end_date,
            contractor_id=contractor_id,
        )
        expenses = []
        if contractor_id:
            expenses = await self.expense_repo.list(
                tenant_id=tenant_id,
                contractor_id=contractor_id,
                start_date=period_range.start_date,
                end_date=period_range.end_date,
            )

        try:
            currency = _single_currency(
                [e.currency for e in entries] + [x.currency for x in expenses]
            )
        except ValueError as e:
            logger.warning(
                f"BTW overview for tenant {tenant_id} {period} {year}/{value} spans {e}"
            )
            return Return.err(
                Error(
                    code=errors.MIXED_CURRENCIES,
                    message=f"Entries and expenses between {period_range.start_date} and "
                            f"{period_range.end_date} are in more than one currency",
                    reason=str(e),
                )
            )

        subtotal = sum((line_total(e.quantity, e.unit_price) for e in entries), Decimal("0"))
        amounts = vat_breakdown(subtotal, self.vat_rate)

        overview = BtwOverviewDTO(
            tenant_id=tenant_id,
            contractor_id=contractor_id,
            period=period,
            year=year,
            value=None if period == PeriodType.YEAR.value else value,
            start_date=period_range.start_date,
            end_date=period_range.end_date,
            currency=currency or self.default_currency,
            subtotal=amounts.subtotal,
            btw=amounts.tax,
            net=amounts.total,
        )

        # Step 4: Expenses offset BTW for one contractor
        if contractor_id:
            expense_total = round_money(sum((x.amount for x in expenses), Decimal("0")))
            btw_paid = round_money(
                sum((tax(x.amount, self.vat_rate) for x in expenses), Decimal("0"))
            )
            overview.expense_total = expense_total
            overview.btw_paid = btw_paid
            overview.btw_balance = round_money(amounts.tax - btw_paid)

        return Return.ok(overview)
