from .tenant_repository import SqlAlchemyTenantRepository
from .contractor_repository import SqlAlchemyContractorRepository
from .work_entry_repository import SqlAlchemyWorkEntryRepository
from .statement_repository import SqlAlchemyStatementRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .expense_repository import SqlAlchemyExpenseRepository

__all__ = [
    "SqlAlchemyTenantRepository",
    "SqlAlchemyContractorRepository",
    "SqlAlchemyWorkEntryRepository",
    "SqlAlchemyStatementRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyExpenseRepository",
]
