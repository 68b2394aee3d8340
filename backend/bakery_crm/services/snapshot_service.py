"""
Snapshot service: export every collection as one document and load it back.

A collection that fails validation on import is logged and reset to empty,
while the other collections load normally.
"""

import logging
from typing import Any, Callable, Dict, List, Type
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.db.repositories.base_repository import BaseRepository
from bakery_crm.db.repositories.client_repository import ClientRepository
from bakery_crm.db.repositories.counter_repository import CounterRepository
from bakery_crm.db.repositories.invoice_repository import InvoiceRepository
from bakery_crm.db.repositories.lead_repository import LeadRepository
from bakery_crm.db.repositories.product_repository import ProductRepository
from bakery_crm.db.repositories.sale_repository import SaleRepository
from bakery_crm.db.repositories.sales_order_repository import SalesOrderRepository
from bakery_crm.models import Client, Invoice, InvoiceItem, Lead, Product, Sale, SalesOrder, SalesOrderItem
from bakery_crm.schemas.client import ClientResponse
from bakery_crm.schemas.invoice import InvoiceResponse
from bakery_crm.schemas.lead import LeadResponse
from bakery_crm.schemas.product import ProductResponse
from bakery_crm.schemas.sale import SaleResponse
from bakery_crm.schemas.sales_order import SalesOrderResponse
from bakery_crm.schemas.snapshot import SnapshotImportResult
from bakery_crm.services.base_service import BaseService
from bakery_crm.utils.numbering import INVOICE_SERIES, ORDER_SERIES

logger = logging.getLogger(__name__)


def _build_lead(record: LeadResponse) -> Lead:
    return Lead(**record.model_dump())


def _build_client(record: ClientResponse) -> Client:
    return Client(**record.model_dump())


def _build_product(record: ProductResponse) -> Product:
    product_dict = record.model_dump()
    product_dict["pricing_tiers"] = [tier.model_dump(mode="json") for tier in record.pricing_tiers]
    return Product(**product_dict)


def _build_sale(record: SaleResponse) -> Sale:
    return Sale(**record.model_dump())


def _build_sales_order(record: SalesOrderResponse) -> SalesOrder:
    order_dict = record.model_dump(exclude={"items"})
    order_dict["notes"] = order_dict["notes"] or ""
    return SalesOrder(
        **order_dict,
        items=[SalesOrderItem(**item.model_dump()) for item in record.items],
    )


def _build_invoice(record: InvoiceResponse) -> Invoice:
    invoice_dict = record.model_dump(exclude={"items"})
    return Invoice(
        **invoice_dict,
        items=[InvoiceItem(**item.model_dump()) for item in record.items],
    )


class _Collection:
    """How one snapshot key maps onto a table."""
    
    def __init__(
        self,
        key: str,
        repository: Type[BaseRepository],
        schema: Type[BaseModel],
        build: Callable[[Any], Any],
        unique_fields: tuple = ("id",),
    ):
        self.key = key
        self.repository = repository
        self.schema = schema
        self.build = build
        self.unique_fields = unique_fields


COLLECTIONS = (
    _Collection("leads", LeadRepository, LeadResponse, _build_lead),
    _Collection("clients", ClientRepository, ClientResponse, _build_client),
    _Collection("salesOrders", SalesOrderRepository, SalesOrderResponse, _build_sales_order, ("id", "order_number")),
    _Collection(
        "invoices",
        InvoiceRepository,
        InvoiceResponse,
        _build_invoice,
        ("id", "invoice_number", "sales_order_id"),
    ),
    _Collection("products", ProductRepository, ProductResponse, _build_product),
    _Collection("sales", SaleRepository, SaleResponse, _build_sale),
)


def _sequence_of(document_number: str) -> int:
    """Trailing sequence of 'SO240115-007' style numbers; 0 when it does not parse."""
    try:
        return int(document_number.rsplit("-", 1)[1])
    except (IndexError, ValueError):
        return 0


class SnapshotService(BaseService):
    """Service for whole-store export and import."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.counter_repo = CounterRepository(session)
    
    async def export_snapshot(self) -> Dict[str, List[Dict[str, Any]]]:
        """Every collection as a list of JSON-ready records."""
        snapshot = {}
        for collection in COLLECTIONS:
            records = await collection.repository(self.session).list_all()
            snapshot[collection.key] = [
                collection.schema.model_validate(record).model_dump(mode="json")
                for record in records
            ]
        return snapshot
    
    async def import_snapshot(self, payload: Dict[str, Any]) -> SnapshotImportResult:
        """
        Replace each collection present in the payload wholesale.
        
        Collections missing from the payload are left untouched. A collection that
        is not a list, holds an invalid record, repeats a unique value or is
        rejected by the database is reset to empty.
        """
        imported: Dict[str, int] = {}
        reset: List[str] = []
        
        for collection in COLLECTIONS:
            if collection.key not in payload:
                continue
            repository = collection.repository(self.session)
            await repository.delete_all()
            
            try:
                records = self._validate(collection, payload[collection.key])
                # Rows the database still rejects are undone without touching earlier collections
                async with self.session.begin_nested():
                    for record in records:
                        self.session.add(collection.build(record))
                    await self.session.flush()
            except (ValidationError, TypeError, ValueError, IntegrityError) as e:
                logger.warning(
                    f"Discarding malformed collection '{collection.key}'",
                    extra={"collection": collection.key, "error": str(e)},
                )
                reset.append(collection.key)
                imported[collection.key] = 0
                continue
            
            imported[collection.key] = len(records)
            
            if collection.key == "salesOrders":
                await self._advance_counter(ORDER_SERIES, [r.order_number for r in records])
            elif collection.key == "invoices":
                await self._advance_counter(INVOICE_SERIES, [r.invoice_number for r in records])
        
        await self.session.commit()
        logger.info("Snapshot imported", extra={"imported": imported, "reset": reset})
        return SnapshotImportResult(imported=imported, reset=reset)
    
    @staticmethod
    def _validate(collection: _Collection, raw: Any) -> List[BaseModel]:
        if not isinstance(raw, list):
            raise TypeError(f"expected a list, got {type(raw).__name__}")
        records = [collection.schema.model_validate(item) for item in raw]
        for field in collection.unique_fields:
            values = [getattr(record, field) for record in records]
            if len(values) != len(set(values)):
                raise ValueError(f"duplicate {field}")
        item_ids = [item.id for record in records for item in getattr(record, "items", [])]
        if len(item_ids) != len(set(item_ids)):
            raise ValueError("duplicate item id")
        return records
    
    async def _advance_counter(self, series: str, numbers: List[str]) -> None:
        if numbers:
            await self.counter_repo.ensure_at_least(series, max(_sequence_of(n) for n in numbers))
