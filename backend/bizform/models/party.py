"""
往来方主数据

出口商（公司）、银行、客户、工厂、供应商、运输商、托盘供应商。
每张表一类实体，字段扁平，全部软删除。
"""

from sqlalchemy import Column, String, Text

from bizform.db.base import Base, SoftDeleteMixin
from bizform.db.types import DbDate


class Company(SoftDeleteMixin, Base):
    """出口商（本公司抬头）"""
    __tablename__ = "companies"

    company_name = Column(String(200), nullable=False, comment="公司名称")
    contact_person = Column(String(100), nullable=False, comment="联系人")
    address = Column(Text, nullable=False, comment="地址")
    phone_number = Column(String(50), nullable=False, comment="电话")
    iec_number = Column(String(50), nullable=False, comment="进出口编码 IEC")
    gst_number = Column(String(50), nullable=False, comment="GST 税号")


class Bank(SoftDeleteMixin, Base):
    """收款银行"""
    __tablename__ = "banks"

    bank_name = Column(String(200), nullable=False, comment="银行名称")
    bank_address = Column(Text, nullable=False, comment="银行地址")
    account_number = Column(String(50), nullable=False, comment="账号")
    swift_code = Column(String(20), nullable=False, comment="SWIFT")
    ifsc_code = Column(String(20), nullable=False, comment="IFSC")


class Client(SoftDeleteMixin, Base):
    """海外客户"""
    __tablename__ = "clients"

    company_name = Column(String(200), nullable=False, comment="公司名称")
    person = Column(String(100), nullable=False, comment="联系人")
    contact_number = Column(String(50), nullable=False, comment="联系电话")
    address = Column(Text, nullable=False, comment="地址")
    city = Column(String(100), nullable=False, comment="城市")
    country = Column(String(100), nullable=False, comment="国家")
    pin_code = Column(String(20), nullable=False, comment="邮编")


class Manufacturer(SoftDeleteMixin, Base):
    """工厂（生产商）"""
    __tablename__ = "manufacturers"

    company_name = Column(String(200), nullable=False, comment="公司名称")
    contact_person = Column(String(100), nullable=False, comment="联系人")
    address = Column(Text, nullable=False, comment="地址")
    gst_number = Column(String(50), nullable=False, comment="GST 税号")
    stuffing_permission_number = Column(String(100), nullable=False, comment="装箱许可编号")
    stuffing_permission_date = Column(DbDate, nullable=False, comment="装箱许可日期")
    pin_code = Column(String(20), nullable=False, comment="邮编")


class ContactPartyMixin:
    """供应商、运输商、托盘供应商共用的四个字段"""
    company_name = Column(String(200), nullable=False, comment="公司名称")
    gst_number = Column(String(50), nullable=False, comment="GST 税号")
    contact_person = Column(String(100), nullable=False, comment="联系人")
    contact_number = Column(String(50), nullable=False, comment="联系电话")


class Supplier(ContactPartyMixin, SoftDeleteMixin, Base):
    __tablename__ = "suppliers"


class Transporter(ContactPartyMixin, SoftDeleteMixin, Base):
    __tablename__ = "transporters"


class Pallet(ContactPartyMixin, SoftDeleteMixin, Base):
    """托盘供应商"""
    __tablename__ = "pallets"
