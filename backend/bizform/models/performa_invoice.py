from sqlalchemy import Column, Integer, String, Text, DECIMAL

from bizform.db.base import Base, SoftDeleteMixin
from bizform.db.types import DbTimestamp, LineItems


class PerformaInvoice(SoftDeleteMixin, Base):
    """形式发票（报给客户），明细含规格、产品、箱数、单价"""
    __tablename__ = "performa_invoices"

    exporter_id = Column(String(36), nullable=False, index=True, comment="出口商ID")
    client_id = Column(String(36), nullable=False, index=True, comment="客户ID")
    selected_bank_id = Column(String(36), index=True, comment="收款银行ID")
    invoice_number = Column(String(100), nullable=False, comment="发票号")
    invoice_date = Column(DbTimestamp, nullable=False, comment="发票日期")
    final_destination = Column(String(200), comment="目的地")
    total_container = Column(Integer, comment="柜数")
    container_size = Column(String(20), comment="柜型 20 ft / 40 ft")
    currency_type = Column(String(10), comment="币种")
    total_gross_weight = Column(String(50), comment="总毛重（可为 NA）")
    freight = Column(DECIMAL(14, 2), comment="运费")
    discount = Column(DECIMAL(14, 2), comment="折扣")
    notify_party_line1 = Column(String(200), comment="通知方第一行")
    notify_party_line2 = Column(String(200), comment="通知方第二行")
    terms_and_conditions = Column(Text, comment="条款")
    note = Column(Text, comment="备注")
    items = Column("items_json", LineItems, comment="明细")
    sub_total = Column(DECIMAL(14, 2), comment="明细合计")
    grand_total = Column(DECIMAL(14, 2), comment="总计")
