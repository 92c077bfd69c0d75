"""V2 API 路由聚合"""
from fastapi import APIRouter

from bizform.api.api_v2.endpoints import (
    documents, export_documents, ledger, masters, products, transactions, upload
)

api_router = APIRouter()

# 主数据
api_router.include_router(masters.exporter_router, prefix="/exporter-data", tags=["出口商"])
api_router.include_router(masters.bank_router, prefix="/bank-data", tags=["银行"])
api_router.include_router(masters.client_router, prefix="/client-data", tags=["客户"])
api_router.include_router(masters.manufacturer_router, prefix="/manufacturer-data", tags=["工厂"])
api_router.include_router(masters.supplier_router, prefix="/supplier-data", tags=["供应商"])
api_router.include_router(masters.transporter_router, prefix="/transporter-data", tags=["运输商"])
api_router.include_router(masters.pallet_router, prefix="/pallet-data", tags=["托盘供应商"])
api_router.include_router(masters.size_router, prefix="/size-data", tags=["规格"])
api_router.include_router(products.router, prefix="/product-data", tags=["产品"])

# 单据
api_router.include_router(documents.purchase_order_router, prefix="/purchase-order-data", tags=["采购订单"])
api_router.include_router(documents.manu_bill_router, prefix="/manu-bill-data", tags=["工厂发票"])
api_router.include_router(documents.supply_bill_router, prefix="/supply-bill-data", tags=["供应商发票"])
api_router.include_router(documents.trans_bill_router, prefix="/trans-bill-data", tags=["运输发票"])
api_router.include_router(documents.performa_invoice_router, prefix="/performa-invoice-data", tags=["形式发票"])
api_router.include_router(export_documents.router, prefix="/export-document-data", tags=["出口单据"])

# 财务
api_router.include_router(transactions.router, prefix="/transaction-data", tags=["收付款流水"])
api_router.include_router(ledger.router, prefix="/party-ledger", tags=["往来对账"])

# 文件
api_router.include_router(upload.router, prefix="/upload", tags=["文件上传"])
