"""SumForPeriod Use Case

Sums work entries per contractor over an inclusive date range. This is the
read side the statement aggregator builds on.
"""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.repositories.work_entry_repository import WorkEntryRepository
from src.domain.money import line_total, round_money
from .dtos import PeriodSumDTO


class SumForPeriod:
    """
    Use case: Sum work entries for a period

    Business Rules:
    1. One result per contractor that has entries (none are fabricated)
    2. Each line is rounded to cents before summing
    3. All entries of one contractor in the period share one currency,
       otherwise MIXED_CURRENCIES
    """

    def __init__(self, work_entry_repo: WorkEntryRepository):
        self.work_entry_repo = work_entry_repo

    async def execute(
        self,
        tenant_id: str,
        start_date: date,
        end_date: date,
        contractor_id: Optional[str] = None,
    ) -> Result[List[PeriodSumDTO]]:
        entries = await self.work_entry_repo.list_for_period(
            tenant_id=tenant_id,
            start_date=start_date,
            end_date=end_date,
            contractor_id=contractor_id,
        )

        sums: Dict[str, dict] = {}
        for entry in entries:
            bucket = sums.setdefault(
                entry.contractor_id,
                {"total": Decimal("0"), "currency": entry.currency, "entry_count": 0},
            )
            if bucket["currency"] != entry.currency:
                return Return.err(
                    Error(
                        code=errors.MIXED_CURRENCIES,
                        message=f"Contractor {entry.contractor_id} has entries in more than one "
                                f"currency between {start_date} and {end_date}",
                        reason=f"{bucket['currency']} and {entry.currency}",
                    )
                )
            bucket["total"] += line_total(entry.quantity, entry.unit_price)
            bucket["entry_count"] += 1

        return Return.ok(
            [
                PeriodSumDTO(
                    contractor_id=cid,
                    total=round_money(bucket["total"]),
                    currency=bucket["currency"],
                    entry_count=bucket["entry_count"],
                )
                for cid, bucket in sums.items()
            ]
        )
