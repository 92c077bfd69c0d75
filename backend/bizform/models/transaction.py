from sqlalchemy import Column, String, Text, DECIMAL

from bizform.db.base import Base, SoftDeleteMixin
from bizform.db.types import DbTimestamp, LineItems


class Transaction(SoftDeleteMixin, Base):
    """
    收付款流水

    party_type + party_id 指向一张主数据表；gst / duty_drawback / road_tp
    属于法定款项，不对应主数据记录。
    """
    __tablename__ = "transactions"

    date = Column(DbTimestamp, nullable=False, index=True, comment="日期")
    type = Column(String(10), nullable=False, comment="credit / debit")
    party_type = Column(String(20), nullable=False, index=True, comment="交易对象类型")
    party_id = Column(String(36), index=True, comment="交易对象ID")
    currency = Column(String(3), nullable=False, default="INR", comment="币种")
    amount = Column(DECIMAL(14, 2), nullable=False, comment="金额")
    description = Column(Text, comment="说明")
    related_invoices = Column("related_invoices_json", LineItems, comment="关联发票")
