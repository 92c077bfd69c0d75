"""
单据接口：采购订单、工厂发票、供应商发票、运输发票、形式发票

明细整体存为一列 JSON，日期写库前统一格式；写操作在事务内完成，失败回滚。
"""

from bizform import crud
from bizform.api.api_v2.endpoints.resource import ResourceSpec, build_resource_router
from bizform.schemas.bill import (
    ManuBillCreate, ManuBillResponse, SupplyBillCreate, SupplyBillResponse,
    TransBillCreate, TransBillResponse,
)
from bizform.schemas.performa_invoice import PerformaInvoiceCreate, PerformaInvoiceResponse
from bizform.schemas.purchase_order import PurchaseOrderCreate, PurchaseOrderResponse

purchase_order_spec = ResourceSpec(
    crud=crud.purchase_order,
    create_schema=PurchaseOrderCreate,
    response_schema=PurchaseOrderResponse,
    label="Purchase Order",
    singular="purchase order",
    plural="purchase orders",
    required=("exporterId", "manufacturerId", "poNumber", "poDate"),
)

manu_bill_spec = ResourceSpec(
    crud=crud.manu_bill,
    create_schema=ManuBillCreate,
    response_schema=ManuBillResponse,
    label="Bill",
    singular="manufacturer bill",
    plural="manufacturer bills",
    required=("manufacturerId", "invoiceNumber", "invoiceDate"),
)

supply_bill_spec = ResourceSpec(
    crud=crud.supply_bill,
    create_schema=SupplyBillCreate,
    response_schema=SupplyBillResponse,
    label="Bill",
    singular="supply bill",
    plural="supply bills",
    required=("supplierId", "invoiceNumber", "invoiceDate"),
)

trans_bill_spec = ResourceSpec(
    crud=crud.trans_bill,
    create_schema=TransBillCreate,
    response_schema=TransBillResponse,
    label="Bill",
    singular="transporter bill",
    plural="transporter bills",
    required=("transporterId", "invoiceNumber", "invoiceDate"),
)

performa_invoice_spec = ResourceSpec(
    crud=crud.performa_invoice,
    create_schema=PerformaInvoiceCreate,
    response_schema=PerformaInvoiceResponse,
    label="Performa Invoice",
    id_label="Invoice",
    singular="performa invoice",
    plural="performa invoices",
    required=("exporterId", "clientId", "invoiceNumber", "invoiceDate"),
)

purchase_order_router = build_resource_router(purchase_order_spec)
manu_bill_router = build_resource_router(manu_bill_spec)
supply_bill_router = build_resource_router(supply_bill_spec)
trans_bill_router = build_resource_router(trans_bill_spec)
performa_invoice_router = build_resource_router(performa_invoice_spec)
