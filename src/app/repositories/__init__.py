from .tenant_repository import TenantRepository
from .contractor_repository import ContractorRepository
from .work_entry_repository import WorkEntryRepository
from .statement_repository import StatementRepository
from .invoice_repository import InvoiceRepository
from .expense_repository import ExpenseRepository

__all__ = [
    "TenantRepository",
    "ContractorRepository",
    "WorkEntryRepository",
    "StatementRepository",
    "InvoiceRepository",
    "ExpenseRepository",
]
