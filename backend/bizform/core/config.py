from typing import List, Union
import logging

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

class Settings(BaseSettings):
    PROJECT_NAME: str = "BizForm ERP"
    API_V2_STR: str = "/api/v2"

    # CORS配置
    BACKEND_CORS_ORIGINS: List[Union[str, AnyHttpUrl]] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:9002",
        "http://127.0.0.1:9002"
    ]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # 数据库配置（异步驱动）
    DATABASE_URI: str = "sqlite+aiosqlite:///./bizform.db"
    DB_POOL_SIZE: int = Field(default=10, description="连接池大小")
    DB_MAX_OVERFLOW: int = Field(default=0, description="连接池溢出上限")
    DB_POOL_RECYCLE: int = Field(default=3600, description="连接回收时间（秒）")
    SQL_DEBUG: bool = False

    # 文件上传
    UPLOAD_DIR: str = "./public/uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"

    # 本地键值存储（替代浏览器 localStorage）
    LOCAL_STORE_PATH: str = "./local_store.json"

    # 日志
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
logger.info(f"加载配置: API_V2_STR={settings.API_V2_STR}, DATABASE_URI={settings.DATABASE_URI}")
