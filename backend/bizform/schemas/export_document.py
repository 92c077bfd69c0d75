"""
出口单据 Schema

新建时校验必填项；更新是部分更新，只写请求体里出现的字段。
"""
from datetime import datetime
from typing import Optional

from bizform.schemas.common import (
    CamelModel, IdStr, JsonList, OptionalNumber, OptionalTimestamp, RecordResponse, Timestamp
)


class ExportDocumentFields(CamelModel):
    performa_invoice_id: Optional[IdStr] = None
    purchase_order_id: Optional[IdStr] = None
    transporter_id: Optional[IdStr] = None
    manufacturer_id: Optional[IdStr] = None
    country_of_origin: Optional[str] = None
    country_of_final_destination: Optional[str] = None
    vessel_flight_no: Optional[str] = None
    port_of_loading: Optional[str] = None
    port_of_discharge: Optional[str] = None
    final_destination: Optional[str] = None
    terms_of_delivery_and_payment: Optional[str] = None
    conversation_rate: OptionalNumber = None
    exchange_notification: Optional[str] = None
    freight: OptionalNumber = None
    gst: Optional[str] = None
    discount: OptionalNumber = None
    total_invoice_value: OptionalNumber = None
    eway_bill_number: Optional[str] = None
    eway_bill_document: Optional[str] = None
    shipping_bill_number: Optional[str] = None
    shipping_bill_document: Optional[str] = None
    bl_number: Optional[str] = None
    bl_document: Optional[str] = None
    brc_document: Optional[str] = None
    container_items: JsonList = []
    manufacturer_details: JsonList = []
    photo_tab_images: JsonList = []
    qc_photos: JsonList = []
    sample_photos: JsonList = []


class ExportDocumentCreate(ExportDocumentFields):
    exporter_id: IdStr
    client_id: IdStr
    export_invoice_number: str
    export_invoice_date: Timestamp
    exchange_date: OptionalTimestamp = None
    eway_bill_date: OptionalTimestamp = None
    shipping_bill_date: OptionalTimestamp = None
    bl_date: OptionalTimestamp = None


class ExportDocumentUpdate(ExportDocumentFields):
    """部分更新：所有字段可选"""
    exporter_id: Optional[IdStr] = None
    client_id: Optional[IdStr] = None
    export_invoice_number: Optional[str] = None
    export_invoice_date: OptionalTimestamp = None
    exchange_date: OptionalTimestamp = None
    eway_bill_date: OptionalTimestamp = None
    shipping_bill_date: OptionalTimestamp = None
    bl_date: OptionalTimestamp = None


class ExportDocumentResponse(ExportDocumentFields, RecordResponse):
    exporter_id: IdStr
    client_id: IdStr
    export_invoice_number: str
    export_invoice_date: datetime
    exchange_date: Optional[datetime] = None
    eway_bill_date: Optional[datetime] = None
    shipping_bill_date: Optional[datetime] = None
    bl_date: Optional[datetime] = None
