"""
采购类账单

- ManuBill: 工厂开给我们的货物发票
- SupplyBill: 供应商 / 托盘供应商发票（supplier_id 可指向两张表之一）
- TransBill: 运输商发票
金额由前端计算后冗余存储，服务端不重算。
"""

from sqlalchemy import Column, String, Text, DECIMAL

from bizform.db.base import Base, SoftDeleteMixin
from bizform.db.types import DbTimestamp, LineItems


class GstBillMixin:
    """货物发票的公共字段（含中央税 / 邦税）"""
    export_document_id = Column(String(36), comment="关联出口单据ID")
    invoice_number = Column(String(100), nullable=False, comment="发票号")
    invoice_date = Column(DbTimestamp, nullable=False, comment="发票日期")
    ack_no = Column(String(100), comment="确认号")
    ack_date = Column(DbTimestamp, comment="确认日期")
    items = Column("items_json", LineItems, comment="明细")
    remarks = Column(Text, comment="备注")

    sub_total = Column(DECIMAL(14, 2), comment="明细合计")
    discount_amount = Column(DECIMAL(14, 2), comment="整单折扣")
    insurance_amount = Column(DECIMAL(14, 2), comment="保险费")
    freight_amount = Column(DECIMAL(14, 2), comment="运费")
    final_sub_total = Column(DECIMAL(14, 2), comment="调整后合计")
    central_tax_rate = Column(DECIMAL(6, 2), comment="中央税率 %")
    central_tax_amount = Column(DECIMAL(14, 2), comment="中央税额")
    state_tax_rate = Column(DECIMAL(6, 2), comment="邦税率 %")
    state_tax_amount = Column(DECIMAL(14, 2), comment="邦税额")
    round_off = Column(DECIMAL(10, 2), comment="抹零")
    grand_total = Column(DECIMAL(14, 2), comment="价税合计")

    bill_document_uri = Column(String(500), comment="发票文件")
    eway_bill_document_uri = Column(String(500), comment="电子运单文件")


class ManuBill(GstBillMixin, SoftDeleteMixin, Base):
    __tablename__ = "manu_bills"

    manufacturer_id = Column(String(36), nullable=False, index=True, comment="工厂ID")
    transporter_id = Column(String(36), index=True, comment="运输商ID")
    eway_bill_number = Column(String(100), comment="电子运单号")
    irn_no = Column(String(100), comment="IRN")
    lr_no = Column(String(100), comment="货运单号")
    lr_date = Column(DbTimestamp, comment="货运单日期")
    vehicle_no = Column(String(50), comment="车牌号")


class SupplyBill(GstBillMixin, SoftDeleteMixin, Base):
    __tablename__ = "supply_bills"

    supplier_id = Column(String(36), nullable=False, index=True, comment="供应商或托盘供应商ID")


class TransBill(SoftDeleteMixin, Base):
    __tablename__ = "trans_bills"

    export_document_id = Column(String(36), comment="关联出口单据ID")
    transporter_id = Column(String(36), nullable=False, index=True, comment="运输商ID")
    invoice_number = Column(String(100), nullable=False, comment="发票号")
    invoice_date = Column(DbTimestamp, nullable=False, comment="发票日期")
    job_no = Column(String(100), comment="作业号")
    job_date = Column(DbTimestamp, comment="作业日期")
    shipping_line = Column(String(100), comment="船公司")
    port_of_loading = Column(String(100), comment="装货港")
    port_of_discharge = Column(String(100), comment="卸货港")
    shipment_type = Column(String(50), comment="运输方式")
    container_no = Column(String(100), comment="柜号")
    shipping_bill_no = Column(String(100), comment="报关单号")
    items = Column("items_json", LineItems, comment="明细")
    remarks = Column(Text, comment="备注")

    sub_total = Column(DECIMAL(14, 2), comment="明细合计")
    cgst_rate = Column(DECIMAL(6, 2), comment="CGST 税率 %")
    cgst_amount = Column(DECIMAL(14, 2), comment="CGST 税额")
    sgst_rate = Column(DECIMAL(6, 2), comment="SGST 税率 %")
    sgst_amount = Column(DECIMAL(14, 2), comment="SGST 税额")
    total_tax = Column(DECIMAL(14, 2), comment="税额合计")
    total_after_tax = Column(DECIMAL(14, 2), comment="含税合计")
    round_off = Column(DECIMAL(10, 2), comment="抹零")
    total_payable = Column(DECIMAL(14, 2), comment="应付金额")

    bill_document_uri = Column(String(500), comment="发票文件")
    lr_document_uri = Column(String(500), comment="货运单文件")
