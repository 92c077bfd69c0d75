# 每张表一个数据访问对象

from bizform.crud.base import CRUDSoftDelete
from bizform.models import (
    Company, Bank, Client, Manufacturer, Supplier, Transporter, Pallet,
    Size, Product, PurchaseOrder, ManuBill, SupplyBill, TransBill,
    PerformaInvoice, Transaction, ExportDocument,
)

company = CRUDSoftDelete(Company)
bank = CRUDSoftDelete(Bank)
client = CRUDSoftDelete(Client)
manufacturer = CRUDSoftDelete(Manufacturer)
supplier = CRUDSoftDelete(Supplier)
transporter = CRUDSoftDelete(Transporter)
pallet = CRUDSoftDelete(Pallet)
size = CRUDSoftDelete(Size)
product = CRUDSoftDelete(Product)

purchase_order = CRUDSoftDelete(PurchaseOrder)
manu_bill = CRUDSoftDelete(ManuBill)
supply_bill = CRUDSoftDelete(SupplyBill)
trans_bill = CRUDSoftDelete(TransBill)
performa_invoice = CRUDSoftDelete(PerformaInvoice)
export_document = CRUDSoftDelete(ExportDocument)
# 流水按业务日期倒序
transaction = CRUDSoftDelete(
    Transaction,
    order_by=[Transaction.date.desc(), Transaction.created_at.desc(), Transaction.id.desc()],
)
