from datetime import datetime
from typing import Any, Dict, List, Optional

from bizform.schemas.common import (
    CamelModel, IdStr, LineItem, OptionalNumber, RecordResponse, Timestamp
)


class PerformaInvoiceItem(LineItem):
    """形式发票明细；quantitySqmt / amount 由前端算好后冗余保存"""
    size_id: Optional[IdStr] = None
    product_id: Optional[IdStr] = None
    boxes: OptionalNumber = None
    rate_per_sqmt: OptionalNumber = None
    commission: OptionalNumber = None
    quantity_sqmt: OptionalNumber = None
    amount: OptionalNumber = None


class PerformaInvoiceBase(CamelModel):
    exporter_id: IdStr
    client_id: IdStr
    selected_bank_id: Optional[IdStr] = None
    invoice_number: str
    final_destination: Optional[str] = None
    total_container: Optional[int] = None
    container_size: Optional[str] = None
    currency_type: Optional[str] = None
    total_gross_weight: Optional[IdStr] = None
    freight: OptionalNumber = None
    discount: OptionalNumber = None
    notify_party_line1: Optional[str] = None
    notify_party_line2: Optional[str] = None
    terms_and_conditions: Optional[str] = None
    note: Optional[str] = None
    sub_total: OptionalNumber = None
    grand_total: OptionalNumber = None


class PerformaInvoiceCreate(PerformaInvoiceBase):
    invoice_date: Timestamp
    items: List[PerformaInvoiceItem] = []


class PerformaInvoiceResponse(PerformaInvoiceBase, RecordResponse):
    invoice_date: datetime
    items: List[Dict[str, Any]] = []
