from sqlalchemy import Column, Integer, String, Text

from bizform.db.base import Base, SoftDeleteMixin
from bizform.db.types import DbTimestamp, LineItems


class PurchaseOrder(SoftDeleteMixin, Base):
    """采购订单（下给工厂），明细存于 items_json"""
    __tablename__ = "purchase_orders"

    source_pi_id = Column(String(36), comment="来源形式发票ID")
    exporter_id = Column(String(36), nullable=False, index=True, comment="出口商ID")
    manufacturer_id = Column(String(36), nullable=False, index=True, comment="工厂ID")
    po_number = Column(String(100), nullable=False, comment="订单号")
    po_date = Column(DbTimestamp, nullable=False, comment="订单日期")
    size_id = Column(String(36), comment="规格ID")
    number_of_containers = Column(Integer, comment="柜数")
    items = Column("items_json", LineItems, comment="明细（产品、每箱重量、箱数、厚度）")
    terms_and_conditions = Column(Text, nullable=False, default="", comment="条款")
