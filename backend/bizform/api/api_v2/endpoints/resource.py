"""
通用资源路由

主数据和单据的接口形态一致：
- GET            未删除记录列表，新建在前
- POST           校验必填项后新建，返回 201 和新记录
- PUT ?id=       整体更新，不校验记录是否存在，返回提交内容加 id
- DELETE ?id=    软删除
"""
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple, Type

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from bizform.core.deps import get_db
from bizform.core.exceptions import persistence_errors
from bizform.crud.base import CRUDSoftDelete, to_pk
from bizform.schemas.common import CamelModel, MessageResponse

logger = logging.getLogger(__name__)

ALL_METHODS = ("GET", "POST", "PUT", "DELETE")


@dataclass
class ResourceSpec:
    """
    一个资源的配置

    label / id_label 用于 "<label> marked as deleted"、"<id_label> ID is required"；
    singular / plural 用于 "Error creating <singular>"、"Error fetching <plural>"。
    required 为 camelCase 字段名，值为假时拒绝；present 只要求字段存在（允许 0）。
    check 在写库前执行，可抛 HTTPException。
    """
    crud: CRUDSoftDelete
    create_schema: Type[CamelModel]
    response_schema: Type[CamelModel]
    label: str
    singular: str
    plural: str
    required: Tuple[str, ...] = ()
    present: Tuple[str, ...] = ()
    id_label: Optional[str] = None
    check: Optional[Callable[[AsyncSession, Any], Awaitable[None]]] = None

    @property
    def id_message(self) -> str:
        return f"{self.id_label or self.label} ID is required"


def ensure_required(payload: Dict[str, Any], required: Sequence[str], present: Sequence[str] = ()) -> None:
    missing = [key for key in required if not payload.get(key)]
    missing += [key for key in present if key not in payload]
    if missing:
        logger.info(f"缺少必填字段: {missing}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required fields")


def parse_payload(schema: Type[CamelModel], payload: Dict[str, Any], singular: str) -> CamelModel:
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        logger.info(f"{singular} 数据校验失败: {e.errors()}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid {singular} data")


def coerce_id(raw: str) -> Optional[int]:
    """查询参数里的 id 转为主键；非数字或越界的 id 不会匹配任何记录"""
    return to_pk(raw)


def validate_payload(spec: ResourceSpec, payload: Dict[str, Any]) -> CamelModel:
    ensure_required(payload, spec.required, spec.present)
    return parse_payload(spec.create_schema, payload, spec.singular)


def build_resource_router(spec: ResourceSpec, methods: Sequence[str] = ALL_METHODS) -> APIRouter:
    router = APIRouter()

    if "GET" in methods:
        @router.get("", response_model=List[spec.response_schema])
        async def list_records(db: AsyncSession = Depends(get_db)) -> Any:
            async with persistence_errors(f"Error fetching {spec.plural}"):
                rows = await spec.crud.list_active(db)
                return [spec.response_schema.model_validate(row) for row in rows]

    if "POST" in methods:
        @router.post("", response_model=spec.response_schema, status_code=status.HTTP_201_CREATED)
        async def create_record(
            payload: Dict[str, Any] = Body(...),
            db: AsyncSession = Depends(get_db),
        ) -> Any:
            data = validate_payload(spec, payload)
            async with persistence_errors(f"Error creating {spec.singular}"):
                if spec.check:
                    await spec.check(db, data)
                record = await spec.crud.create(db, data.to_values())
                logger.info(f"新建 {spec.singular} {record.id}")
                return spec.response_schema.model_validate(record)

    if "PUT" in methods:
        @router.put("")
        async def update_record(
            id: Optional[str] = Query(None),
            payload: Dict[str, Any] = Body(...),
            db: AsyncSession = Depends(get_db),
        ) -> Any:
            if not id:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=spec.id_message)
            data = validate_payload(spec, payload)
            async with persistence_errors(f"Error updating {spec.singular}"):
                if spec.check:
                    await spec.check(db, data)
                pk = coerce_id(id)
                if pk is not None:
                    count = await spec.crud.update(db, pk, data.to_values())
                    logger.info(f"更新 {spec.singular} {id}，影响 {count} 行")
            return {**payload, "id": id}

    if "DELETE" in methods:
        @router.delete("", response_model=MessageResponse)
        async def delete_record(
            id: Optional[str] = Query(None),
            db: AsyncSession = Depends(get_db),
        ) -> Any:
            if not id:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=spec.id_message)
            async with persistence_errors(f"Error deleting {spec.singular}"):
                pk = coerce_id(id)
                if pk is not None:
                    await spec.crud.soft_delete(db, pk)
                    logger.info(f"软删除 {spec.singular} {id}")
            return {"message": f"{spec.label} marked as deleted"}

    return router
