"""规格与产品"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey, DECIMAL

from bizform.db.base import Base, SoftDeleteMixin


class Size(SoftDeleteMixin, Base):
    """瓷砖规格"""
    __tablename__ = "sizes"

    size = Column(String(100), nullable=False, comment="规格名称，如 600x1200")
    sqm_per_box = Column(DECIMAL(10, 4), nullable=False, comment="每箱平方米")
    box_weight = Column(DECIMAL(10, 2), nullable=False, comment="每箱重量 kg")
    purchase_price = Column(DECIMAL(12, 2), nullable=False, comment="采购价")
    sales_price = Column(DECIMAL(12, 2), nullable=False, comment="销售价")
    hsn_code = Column(String(20), nullable=False, comment="HSN 编码")
    pallet_details = Column(Text, nullable=False, comment="托盘说明")


class Product(SoftDeleteMixin, Base):
    """产品（某规格下的一个花色）"""
    __tablename__ = "products"

    size_id = Column(Integer, ForeignKey("sizes.id"), nullable=False, index=True, comment="规格ID")
    design_name = Column(String(200), nullable=False, comment="花色名称")
    sales_price = Column(DECIMAL(12, 2), comment="销售价")
    box_weight = Column(DECIMAL(10, 2), comment="每箱重量 kg")
    image_url = Column(String(500), comment="图片地址")
