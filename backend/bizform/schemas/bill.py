"""账单 Schema：工厂发票、供应商发票、运输发票"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from bizform.schemas.common import (
    CamelModel, IdStr, LineItem, OptionalNumber, OptionalTimestamp, RecordResponse, Timestamp
)


class GoodsBillItem(LineItem):
    """货物发票明细（工厂 / 供应商）"""
    description: Optional[str] = None
    grade: Optional[str] = None
    hsn_code: Optional[str] = None
    quantity: OptionalNumber = None
    unit: Optional[str] = None
    rate: OptionalNumber = None
    discount_percentage: OptionalNumber = None
    taxable_amount: OptionalNumber = None


class TransBillItem(LineItem):
    description: Optional[str] = None
    hsn_sac: Optional[str] = None
    quantity: OptionalNumber = None
    rate: OptionalNumber = None
    gst_rate: OptionalNumber = None
    amount: OptionalNumber = None


class GoodsBillFields(CamelModel):
    export_document_id: Optional[IdStr] = None
    invoice_number: str
    ack_no: Optional[str] = None
    remarks: Optional[str] = None
    sub_total: OptionalNumber = None
    discount_amount: OptionalNumber = None
    insurance_amount: OptionalNumber = None
    freight_amount: OptionalNumber = None
    final_sub_total: OptionalNumber = None
    central_tax_rate: OptionalNumber = None
    central_tax_amount: OptionalNumber = None
    state_tax_rate: OptionalNumber = None
    state_tax_amount: OptionalNumber = None
    round_off: OptionalNumber = None
    grand_total: OptionalNumber = None
    bill_document_uri: Optional[str] = None
    eway_bill_document_uri: Optional[str] = None


class GoodsBillInput(GoodsBillFields):
    invoice_date: Timestamp
    ack_date: OptionalTimestamp = None
    items: List[GoodsBillItem] = []


class GoodsBillOutput(GoodsBillFields, RecordResponse):
    invoice_date: datetime
    ack_date: Optional[datetime] = None
    items: List[Dict[str, Any]] = []


class ManuBillExtra(CamelModel):
    manufacturer_id: IdStr
    transporter_id: Optional[IdStr] = None
    eway_bill_number: Optional[str] = None
    irn_no: Optional[str] = None
    lr_no: Optional[str] = None
    vehicle_no: Optional[str] = None


class ManuBillCreate(ManuBillExtra, GoodsBillInput):
    lr_date: OptionalTimestamp = None


class ManuBillResponse(ManuBillExtra, GoodsBillOutput):
    lr_date: Optional[datetime] = None


class SupplyBillCreate(GoodsBillInput):
    supplier_id: IdStr


class SupplyBillResponse(GoodsBillOutput):
    supplier_id: IdStr


class TransBillBase(CamelModel):
    export_document_id: Optional[IdStr] = None
    transporter_id: IdStr
    invoice_number: str
    job_no: Optional[str] = None
    shipping_line: Optional[str] = None
    port_of_loading: Optional[str] = None
    port_of_discharge: Optional[str] = None
    shipment_type: Optional[str] = None
    container_no: Optional[str] = None
    shipping_bill_no: Optional[str] = None
    remarks: Optional[str] = None
    sub_total: OptionalNumber = None
    cgst_rate: OptionalNumber = None
    cgst_amount: OptionalNumber = None
    sgst_rate: OptionalNumber = None
    sgst_amount: OptionalNumber = None
    total_tax: OptionalNumber = None
    total_after_tax: OptionalNumber = None
    round_off: OptionalNumber = None
    total_payable: OptionalNumber = None
    bill_document_uri: Optional[str] = None
    lr_document_uri: Optional[str] = None


class TransBillCreate(TransBillBase):
    invoice_date: Timestamp
    job_date: OptionalTimestamp = None
    items: List[TransBillItem] = []


class TransBillResponse(TransBillBase, RecordResponse):
    invoice_date: datetime
    job_date: Optional[datetime] = None
    items: List[Dict[str, Any]] = []
