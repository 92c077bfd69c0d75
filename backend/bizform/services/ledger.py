"""
往来对账

借方为对方开出的单据金额，贷方为对该对象的收付款流水：
- manufacturer: 工厂发票 grandTotal
- transporter: 运输发票 totalPayable
- supplier / pallet: 供应商发票 grandTotal
- client: 形式发票 grandTotal，收款流水为 type=debit
余额 = 借方合计 - 贷方合计
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, NamedTuple, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bizform import crud
from bizform.models import ManuBill, PerformaInvoice, SupplyBill, TransBill, Transaction
from bizform.schemas.ledger import LedgerEntry, PartyLedger
from bizform.services.parties import PARTY_TABLES, get_party
from bizform.services.totals import money, to_decimal

logger = logging.getLogger(__name__)


class DebitSource(NamedTuple):
    source: str
    model: type
    party_column: str
    amount_column: str
    date_column: str = "invoice_date"
    reference_column: str = "invoice_number"
    currency_column: Optional[str] = None


DEBIT_SOURCES: Dict[str, DebitSource] = {
    "manufacturer": DebitSource("manu_bill", ManuBill, "manufacturer_id", "grand_total"),
    "transporter": DebitSource("trans_bill", TransBill, "transporter_id", "total_payable"),
    "supplier": DebitSource("supply_bill", SupplyBill, "supplier_id", "grand_total"),
    "pallet": DebitSource("supply_bill", SupplyBill, "supplier_id", "grand_total"),
    "client": DebitSource(
        "performa_invoice", PerformaInvoice, "client_id", "grand_total",
        currency_column="currency_type",
    ),
}

# 客户的收款记为 debit，其余对象的付款记为 credit
PAYMENT_TYPES: Dict[str, str] = {"client": "debit"}


async def _debit_entries(db: AsyncSession, source: DebitSource, party_id: str) -> List[LedgerEntry]:
    model = source.model
    stmt = select(model).where(
        model.is_deleted.is_(False),
        getattr(model, source.party_column) == party_id,
    )
    rows = (await db.execute(stmt)).scalars().all()
    return [
        LedgerEntry(
            id=row.id,
            source=source.source,
            date=getattr(row, source.date_column),
            reference=getattr(row, source.reference_column),
            currency=getattr(row, source.currency_column) if source.currency_column else None,
            debit=money(to_decimal(getattr(row, source.amount_column))),
        )
        for row in rows
    ]


async def _credit_entries(db: AsyncSession, party_type: str, party_id: str) -> List[LedgerEntry]:
    stmt = crud.transaction.active().where(
        Transaction.party_type == party_type,
        Transaction.party_id == party_id,
        Transaction.type == PAYMENT_TYPES.get(party_type, "credit"),
    )
    rows = (await db.execute(stmt)).scalars().all()
    return [
        LedgerEntry(
            id=row.id,
            source="transaction",
            date=row.date,
            reference=row.description,
            currency=row.currency,
            credit=money(to_decimal(row.amount)),
        )
        for row in rows
    ]


async def build_party_ledger(db: AsyncSession, party_type: str, party_id: str) -> Optional[PartyLedger]:
    """生成对账单；对象不存在时返回 None"""
    record = await get_party(db, party_type, party_id)
    if record is None:
        return None

    key = str(record.id)
    entries = await _debit_entries(db, DEBIT_SOURCES[party_type], key)
    entries += await _credit_entries(db, party_type, key)
    entries.sort(key=lambda e: e.date or datetime.min, reverse=True)

    total_debit = sum((to_decimal(e.debit) for e in entries), Decimal("0"))
    total_credit = sum((to_decimal(e.credit) for e in entries), Decimal("0"))
    logger.debug(f"对账 {party_type} {key}: {len(entries)} 条")

    response_schema = PARTY_TABLES[party_type][1]
    return PartyLedger(
        party_type=party_type,
        party_id=key,
        party=response_schema.model_validate(record).model_dump(by_alias=True, mode="json"),
        entries=entries,
        total_debit=money(total_debit),
        total_credit=money(total_credit),
        balance=money(total_debit - total_credit),
    )
