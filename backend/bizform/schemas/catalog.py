"""规格 / 产品 Schema"""
from typing import List, Optional

from pydantic import Field

from bizform.schemas.common import CamelModel, IdStr, Number, OptionalNumber, RecordResponse


class SizeBase(CamelModel):
    size: str
    sqm_per_box: float
    box_weight: float
    purchase_price: float
    sales_price: float
    hsn_code: str
    pallet_details: str


class SizeCreate(SizeBase):
    pass


class SizeResponse(SizeBase, RecordResponse):
    pass


class ProductCreate(CamelModel):
    size_id: int
    design_name: str
    sales_price: OptionalNumber = None
    box_weight: OptionalNumber = None
    image_url: Optional[str] = None


class ProductResponse(RecordResponse):
    size_id: IdStr
    design_name: str
    sales_price: Optional[float] = None
    box_weight: Optional[float] = None
    image_url: Optional[str] = None
    size_name: Optional[str] = Field(None, description="规格名称（联表）")


class ProductBulkResponse(CamelModel):
    message: str
    data: List[ProductResponse]
