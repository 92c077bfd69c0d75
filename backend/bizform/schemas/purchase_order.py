from datetime import datetime
from typing import Any, Dict, List, Optional

from bizform.schemas.common import (
    BlankStr, CamelModel, IdStr, LineItem, OptionalNumber, RecordResponse, Timestamp
)


class PurchaseOrderItem(LineItem):
    """采购明细"""
    product_id: Optional[IdStr] = None
    design_image: Optional[str] = None
    weight_per_box: OptionalNumber = None
    boxes: OptionalNumber = None
    thickness: Optional[str] = None


class PurchaseOrderBase(CamelModel):
    source_pi_id: Optional[IdStr] = None
    exporter_id: IdStr
    manufacturer_id: IdStr
    po_number: str
    size_id: Optional[IdStr] = None
    number_of_containers: Optional[int] = None
    terms_and_conditions: BlankStr = ""


class PurchaseOrderCreate(PurchaseOrderBase):
    po_date: Timestamp
    items: List[PurchaseOrderItem] = []


class PurchaseOrderResponse(PurchaseOrderBase, RecordResponse):
    po_date: datetime
    items: List[Dict[str, Any]] = []
