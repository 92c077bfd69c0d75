from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from bizform.api.api_v2.api import api_router as api_v2_router
from bizform.core.config import settings
from bizform.core.exceptions import (
    http_exception_handler, unhandled_exception_handler, validation_exception_handler
)
from bizform.core.logging_config import setup_logging, get_logger
from bizform.db.init_db import ensure_tables_exist
from bizform.db.session import dispose_engine

# 初始化日志系统
setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    # 启动时
    logger.info("🚀 应用启动中...")

    # 确保数据库表存在
    try:
        await ensure_tables_exist()
        logger.info("📊 数据库表已就绪")
    except Exception as e:
        logger.warning(f"数据库表初始化警告: {e}")

    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    yield
    # 关闭时
    logger.info("🛑 应用关闭中...")
    await dispose_engine()

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V2_STR}/openapi.json",
    description="出口业务记录管理 - 主数据、单据、收付款",
    lifespan=lifespan
)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# CORS配置
if settings.BACKEND_CORS_ORIGINS:
    logger.info(f"配置CORS，允许的源: {settings.BACKEND_CORS_ORIGINS}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

logger.info(f"注册API v2路由，前缀: {settings.API_V2_STR}")
app.include_router(api_v2_router, prefix=settings.API_V2_STR)

# 上传文件的公开访问路径
app.mount(
    settings.UPLOAD_URL_PREFIX,
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="uploads",
)


@app.get("/")
async def root():
    return {"message": "BizForm 出口业务记录管理"}


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000, log_level="info")
