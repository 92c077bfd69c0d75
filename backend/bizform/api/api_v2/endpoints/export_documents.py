"""
出口单据接口

GET 支持 ?id= 读取单条；PUT 为部分更新，只写请求体中出现的字段。
"""
import logging
from typing import Any, Dict, Optional

from fastapi import Body, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from bizform import crud
from bizform.api.api_v2.endpoints.resource import (
    ResourceSpec, build_resource_router, coerce_id, parse_payload
)
from bizform.core.deps import get_db
from bizform.core.exceptions import persistence_errors
from bizform.schemas.export_document import (
    ExportDocumentCreate, ExportDocumentResponse, ExportDocumentUpdate
)

logger = logging.getLogger(__name__)

export_document_spec = ResourceSpec(
    crud=crud.export_document,
    create_schema=ExportDocumentCreate,
    response_schema=ExportDocumentResponse,
    label="Document",
    singular="export document",
    plural="export documents",
    required=("exporterId", "clientId", "exportInvoiceNumber", "exportInvoiceDate"),
)

router = build_resource_router(export_document_spec, methods=("POST", "DELETE"))


@router.get("")
async def read_export_documents(
    id: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> Any:
    """获取出口单据列表，或按 id 获取单条"""
    async with persistence_errors("Error fetching export documents"):
        if id:
            pk = coerce_id(id)
            document = await crud.export_document.get_active(db, pk) if pk is not None else None
            if document is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
            return ExportDocumentResponse.model_validate(document)

        rows = await crud.export_document.list_active(db)
        return [ExportDocumentResponse.model_validate(row) for row in rows]


@router.put("")
async def update_export_document(
    id: Optional[str] = Query(None),
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
) -> Any:
    """部分更新出口单据；id、isDeleted、createdAt 不会被写入"""
    if not id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=export_document_spec.id_message)
    data = parse_payload(ExportDocumentUpdate, payload, export_document_spec.singular)
    values = data.to_values(exclude_unset=True)
    if not values:
        return {"message": "No fields to update", "id": id}

    async with persistence_errors("Error updating export document"):
        pk = coerce_id(id)
        if pk is not None:
            count = await crud.export_document.update(db, pk, values)
            logger.info(f"更新出口单据 {id}: {sorted(values)}，影响 {count} 行")
    return {**payload, "id": id}
