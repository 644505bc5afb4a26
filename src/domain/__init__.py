from .base import BaseModel, generate_uuid
from .tenant import Tenant
from .contractor import Contractor
from .work_entry import WorkEntry, TariffType
from .statement import Statement, StatementStatus
from .invoice import Invoice
from .expense import Expense
from .principal import Principal, Role

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Tenant",
    "Contractor",
    "WorkEntry",
    "TariffType",
    "Statement",
    "StatementStatus",
    "Invoice",
    "Expense",
    "Principal",
    "Role",
]
