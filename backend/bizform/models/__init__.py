# models包初始化文件

from bizform.models.party import (
    Company, Bank, Client, Manufacturer, Supplier, Transporter, Pallet
)
from bizform.models.catalog import Size, Product
from bizform.models.purchase_order import PurchaseOrder
from bizform.models.bill import ManuBill, SupplyBill, TransBill
from bizform.models.performa_invoice import PerformaInvoice
from bizform.models.transaction import Transaction
from bizform.models.export_document import ExportDocument

__all__ = [
    "Company",
    "Bank",
    "Client",
    "Manufacturer",
    "Supplier",
    "Transporter",
    "Pallet",
    "Size",
    "Product",
    "PurchaseOrder",
    "ManuBill",
    "SupplyBill",
    "TransBill",
    "PerformaInvoice",
    "Transaction",
    "ExportDocument",
]
