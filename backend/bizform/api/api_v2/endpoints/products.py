"""产品接口：列表联表带出规格名称，支持按逗号批量新建花色"""
import logging
from typing import Any, Dict, List

from fastapi import Body, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bizform import crud
from bizform.api.api_v2.endpoints.resource import (
    ResourceSpec, build_resource_router, ensure_required, parse_payload
)
from bizform.core.deps import get_db
from bizform.core.exceptions import persistence_errors
from bizform.crud.base import to_pk
from bizform.models import Product, Size
from bizform.schemas.catalog import ProductBulkResponse, ProductCreate, ProductResponse

logger = logging.getLogger(__name__)


async def ensure_size_exists(db: AsyncSession, data: ProductCreate) -> None:
    pk = to_pk(data.size_id)
    if pk is None or await crud.size.get_active(db, pk) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown size")


product_spec = ResourceSpec(
    crud=crud.product,
    create_schema=ProductCreate,
    response_schema=ProductResponse,
    label="Product",
    singular="product",
    plural="products",
    required=("sizeId", "designName"),
    present=("salesPrice", "boxWeight"),
    check=ensure_size_exists,
)

router = build_resource_router(product_spec, methods=("POST", "PUT", "DELETE"))


@router.get("", response_model=List[ProductResponse])
async def list_products(db: AsyncSession = Depends(get_db)) -> Any:
    """获取产品列表（带规格名称）"""
    stmt = (
        select(Product, Size.size)
        .join(Size, Product.size_id == Size.id)
        .where(Product.is_deleted.is_(False))
        .order_by(Product.created_at.desc(), Product.id.desc())
    )
    async with persistence_errors("Error fetching products"):
        rows = (await db.execute(stmt)).all()
        products = []
        for product, size_name in rows:
            item = ProductResponse.model_validate(product)
            item.size_name = size_name
            products.append(item)
        return products


@router.post("/bulk", response_model=ProductBulkResponse, status_code=status.HTTP_201_CREATED)
async def create_products_bulk(
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
) -> Any:
    """
    批量新建产品

    designName 可用逗号分隔多个花色，每个花色一条记录，规格与价格相同，同一事务写入。
    """
    ensure_required(payload, product_spec.required, product_spec.present)
    raw_names = payload["designName"]
    if not isinstance(raw_names, str):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid product data")

    names = [name.strip() for name in raw_names.split(",") if name.strip()]
    if not names:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No valid design names provided")

    rows = [
        parse_payload(ProductCreate, {**payload, "designName": name}, "product")
        for name in names
    ]
    async with persistence_errors("Error creating products"):
        await ensure_size_exists(db, rows[0])
        created = await crud.product.create_many(db, [row.to_values() for row in rows])
        logger.info(f"批量新建产品 {len(created)} 个")
        return ProductBulkResponse(
            message=f"{len(created)} products created successfully.",
            data=[ProductResponse.model_validate(p) for p in created],
        )
