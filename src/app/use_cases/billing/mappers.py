"""Entity to DTO conversions shared by billing use cases"""

from src.domain.contractor import Contractor
from src.domain.expense import Expense
from src.domain.invoice import Invoice
from src.domain.money import line_total
from src.domain.statement import Statement
from src.domain.tenant import Tenant
from src.domain.work_entry import WorkEntry
from .dtos import (
    ContractorDTO,
    ExpenseDTO,
    InvoiceResponseDTO,
    StatementDTO,
    TenantDTO,
    WorkEntryDTO,
)


def _enum_value(value) -> str:
    return value.value if hasattr(value, "value") else value


def work_entry_to_dto(entry: WorkEntry) -> WorkEntryDTO:
    return WorkEntryDTO(
        id=entry.id,
        tenant_id=entry.tenant_id,
        contractor_id=entry.contractor_id,
        work_date=entry.work_date,
        tariff_type=_enum_value(entry.tariff_type),
        quantity=entry.quantity,
        unit_price=entry.unit_price,
        line_total=line_total(entry.quantity, entry.unit_price),
        currency=entry.currency,
        notes=entry.notes,
        created_at=entry.created_at,
    )


def statement_to_dto(statement: Statement) -> StatementDTO:
    return StatementDTO(
        id=statement.id,
        tenant_id=statement.tenant_id,
        contractor_id=statement.contractor_id,
        year=statement.year,
        week_number=statement.week_number,
        total_amount=statement.total_amount,
        currency=statement.currency,
        status=_enum_value(statement.status),
        created_at=statement.created_at,
        updated_at=statement.updated_at,
    )


def invoice_to_dto(invoice: Invoice, statement: Statement, is_existing: bool) -> InvoiceResponseDTO:
    return InvoiceResponseDTO(
        invoice_id=invoice.id,
        invoice_number=invoice.invoice_number,
        is_existing=is_existing,
        statement_id=invoice.statement_id,
        year=statement.year,
        week_number=statement.week_number,
        subtotal=invoice.subtotal,
        tax=invoice.tax_amount,
        total=invoice.total_amount,
        currency=invoice.currency,
        created_at=invoice.created_at,
    )


def contractor_to_dto(contractor: Contractor) -> ContractorDTO:
    return ContractorDTO(
        id=contractor.id,
        tenant_id=contractor.tenant_id,
        full_name=contractor.full_name,
        email=contractor.email,
        phone=contractor.phone,
        external_ref=contractor.external_ref,
        created_at=contractor.created_at,
    )


def tenant_to_dto(tenant: Tenant) -> TenantDTO:
    return TenantDTO(
        id=tenant.id,
        name=tenant.name,
        kvk_number=tenant.kvk_number,
        btw_number=tenant.btw_number,
        email=tenant.email,
        phone=tenant.phone,
        created_at=tenant.created_at,
    )


def expense_to_dto(expense: Expense) -> ExpenseDTO:
    return ExpenseDTO(
        id=expense.id,
        tenant_id=expense.tenant_id,
        contractor_id=expense.contractor_id,
        expense_date=expense.expense_date,
        category=expense.category,
        amount=expense.amount,
        currency=expense.currency,
        notes=expense.notes,
        created_at=expense.created_at,
    )
