"""
异常定义与全局异常处理

HTTP 错误统一输出 {"message": ...}。
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BizformError(Exception):
    """业务层异常基类"""


class RecordInUseError(BizformError):
    """记录仍被其他单据引用，不能删除"""

    def __init__(self, entity: str, record_id: str, referenced_by: str, field: str):
        self.entity = entity
        self.record_id = record_id
        self.referenced_by = referenced_by
        self.field = field
        super().__init__(
            f"{entity} {record_id} is used by a {referenced_by} ({field}) and cannot be deleted"
        )


class UnknownPartyError(BizformError):
    """交易对象不存在或已删除"""

    def __init__(self, party_type: str, party_id: str = None):
        self.party_type = party_type
        self.party_id = party_id
        super().__init__(f"Unknown {party_type} party")


@asynccontextmanager
async def persistence_errors(message: str) -> AsyncIterator[None]:
    """
    把持久化过程中的任意异常收敛为 500

    底层错误只写日志，不返回给调用方；已经是 HTTPException 的直接抛出。
    """
    try:
        yield
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"{message}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message) from e


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求体不是 JSON 对象等情况，按客户端输入错误处理"""
    logger.info(f"请求参数无效 {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request body"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"未处理的异常 {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )
