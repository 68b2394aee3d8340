"""
Document number generation for sales orders and invoices.
"""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.db.repositories.counter_repository import CounterRepository

ORDER_SERIES = "sales_order"
INVOICE_SERIES = "invoice"

_PREFIXES = {
    ORDER_SERIES: "SO",
    INVOICE_SERIES: "INV",
}


def format_document_number(prefix: str, on_date: date, sequence: int) -> str:
    """'{prefix}{yy}{mm}{dd}-{sequence:03d}', e.g. SO240115-007."""
    return f"{prefix}{on_date:%y%m%d}-{sequence:03d}"


async def next_document_number(session: AsyncSession, series: str, on_date: date = None) -> str:
    """Draw the next sequence value for a series and format it."""
    on_date = on_date or date.today()
    sequence = await CounterRepository(session).next_value(series)
    return format_document_number(_PREFIXES[series], on_date, sequence)
