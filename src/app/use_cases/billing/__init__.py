"""Billing domain use cases"""
from .record_work_entry import RecordWorkEntry
from .list_work_entries import ListWorkEntries
from .sum_for_period import SumForPeriod
from .generate_statement import GenerateStatement
from .generate_tenant_statements import GenerateTenantStatements
from .list_statements import ListStatements
from .get_statement import GetStatement
from .update_statement_status import UpdateStatementStatus
from .delete_statement import DeleteStatement
from .issue_invoice import IssueInvoice
from .get_invoice_for_statement import GetInvoiceForStatement
from .render_invoice_pdf import RenderInvoicePdf
from .register_contractor import RegisterContractor
from .list_contractors import ListContractors
from .register_tenant import RegisterTenant
from .get_tenant import GetTenant
from .record_expense import RecordExpense
from .list_expenses import ListExpenses
from .delete_expense import DeleteExpense
from .btw_overview import BtwOverview
from .dtos import (
    RecordWorkEntryCommandDTO,
    WorkEntryDTO,
    ListWorkEntriesResponseDTO,
    PeriodSumDTO,
    GenerateStatementCommandDTO,
    StatementDTO,
    TenantStatementsResponseDTO,
    ListStatementsResponseDTO,
    UpdateStatementStatusCommandDTO,
    IssueInvoiceCommandDTO,
    InvoiceResponseDTO,
    InvoicePdfDTO,
    RegisterContractorCommandDTO,
    ContractorDTO,
    ListContractorsResponseDTO,
    RegisterTenantCommandDTO,
    TenantDTO,
    RecordExpenseCommandDTO,
    ExpenseDTO,
    ListExpensesResponseDTO,
    BtwOverviewDTO,
)

__all__ = [
    "RecordWorkEntry",
    "ListWorkEntries",
    "SumForPeriod",
    "GenerateStatement",
    "GenerateTenantStatements",
    "ListStatements",
    "GetStatement",
    "UpdateStatementStatus",
    "DeleteStatement",
    "IssueInvoice",
    "GetInvoiceForStatement",
    "RenderInvoicePdf",
    "RegisterContractor",
    "ListContractors",
    "RegisterTenant",
    "GetTenant",
    "RecordExpense",
    "ListExpenses",
    "DeleteExpense",
    "BtwOverview",
    "RecordWorkEntryCommandDTO",
    "WorkEntryDTO",
    "ListWorkEntriesResponseDTO",
    "PeriodSumDTO",
    "GenerateStatementCommandDTO",
    "StatementDTO",
    "TenantStatementsResponseDTO",
    "ListStatementsResponseDTO",
    "UpdateStatementStatusCommandDTO",
    "IssueInvoiceCommandDTO",
    "InvoiceResponseDTO",
    "InvoicePdfDTO",
    "RegisterContractorCommandDTO",
    "ContractorDTO",
    "ListContractorsResponseDTO",
    "RegisterTenantCommandDTO",
    "TenantDTO",
    "RecordExpenseCommandDTO",
    "ExpenseDTO",
    "ListExpensesResponseDTO",
    "BtwOverviewDTO",
]
