from typing import Optional
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bizform.core.config import settings


def create_engine_for(database_uri: str) -> AsyncEngine:
    """
    创建异步引擎（自带连接池）

    内存 SQLite 只能有一个连接，使用 StaticPool；其余按配置建连接池。
    """
    if database_uri.startswith("sqlite") and ":memory:" in database_uri:
        return create_async_engine(
            database_uri,
            echo=settings.SQL_DEBUG,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(
        database_uri,
        echo=settings.SQL_DEBUG,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE,
    )


def create_session_factory(bind: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


engine = create_engine_for(settings.DATABASE_URI)
SessionLocal = create_session_factory(engine)


def configure_database(database_uri: Optional[str] = None) -> AsyncEngine:
    """
    按新的数据库地址重建引擎和会话工厂

    旧引擎不在这里释放（它可能属于另一个事件循环），调用方需要时自行 dispose。
    """
    global engine, SessionLocal

    engine = create_engine_for(database_uri or settings.DATABASE_URI)
    SessionLocal = create_session_factory(engine)
    return engine


async def dispose_engine() -> None:
    """应用关闭时释放连接池"""
    await engine.dispose()
