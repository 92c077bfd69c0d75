from sqlalchemy import Column, String, Text, DECIMAL

from bizform.db.base import Base, SoftDeleteMixin
from bizform.db.types import DbTimestamp, LineItems


class ExportDocument(SoftDeleteMixin, Base):
    """出口单据：发票、装箱、报关、提单等信息汇总在一条记录里"""
    __tablename__ = "export_documents"

    exporter_id = Column(String(36), nullable=False, index=True, comment="出口商ID")
    client_id = Column(String(36), nullable=False, index=True, comment="客户ID")
    performa_invoice_id = Column(String(36), comment="形式发票ID")
    purchase_order_id = Column(String(36), comment="采购订单ID")
    transporter_id = Column(String(36), comment="运输商ID")
    manufacturer_id = Column(String(36), comment="工厂ID（旧数据）")
    export_invoice_number = Column(String(100), nullable=False, comment="出口发票号")
    export_invoice_date = Column(DbTimestamp, nullable=False, comment="出口发票日期")

    manufacturer_details = Column("manufacturer_details_json", LineItems, comment="工厂发票信息")
    container_items = Column("container_items_json", LineItems, comment="装柜明细")
    photo_tab_images = Column("photo_tab_images_json", LineItems, comment="照片页图片")

    country_of_origin = Column(String(100), comment="原产国")
    country_of_final_destination = Column(String(100), comment="最终目的国")
    vessel_flight_no = Column(String(100), comment="船名航次")
    port_of_loading = Column(String(100), comment="装货港")
    port_of_discharge = Column(String(100), comment="卸货港")
    final_destination = Column(String(200), comment="目的地")
    terms_of_delivery_and_payment = Column(Text, comment="交货及付款条款")
    conversation_rate = Column(DECIMAL(12, 4), comment="汇率")
    exchange_notification = Column(String(200), comment="汇率公告")
    exchange_date = Column(DbTimestamp, comment="汇率日期")
    freight = Column(DECIMAL(14, 2), comment="运费")
    gst = Column(String(50), comment="GST")
    discount = Column(DECIMAL(14, 2), comment="折扣")
    total_invoice_value = Column(DECIMAL(14, 2), comment="发票总额")

    eway_bill_number = Column(String(100), comment="电子运单号")
    eway_bill_date = Column(DbTimestamp, comment="电子运单日期")
    eway_bill_document = Column(String(500), comment="电子运单文件")
    shipping_bill_number = Column(String(100), comment="报关单号")
    shipping_bill_date = Column(DbTimestamp, comment="报关日期")
    shipping_bill_document = Column(String(500), comment="报关单文件")
    bl_number = Column(String(100), comment="提单号")
    bl_date = Column(DbTimestamp, comment="提单日期")
    bl_document = Column(String(500), comment="提单文件")
    brc_document = Column(String(500), comment="BRC 文件")

    qc_photos = Column("qc_photos_json", LineItems, comment="质检照片")
    sample_photos = Column("sample_photos_json", LineItems, comment="样品照片")
