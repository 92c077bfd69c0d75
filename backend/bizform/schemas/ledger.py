"""往来对账 Schema"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from bizform.schemas.common import CamelModel, IdStr


class LedgerEntry(CamelModel):
    id: IdStr
    source: str = Field(..., description="来源：manu_bill / supply_bill / trans_bill / performa_invoice / transaction")
    date: Optional[datetime] = None
    reference: Optional[str] = None
    currency: Optional[str] = None
    debit: float = 0.0
    credit: float = 0.0


class PartyLedger(CamelModel):
    party_type: str
    party_id: IdStr
    party: Dict[str, Any]
    entries: List[LedgerEntry] = []
    total_debit: float = 0.0
    total_credit: float = 0.0
    balance: float = 0.0
