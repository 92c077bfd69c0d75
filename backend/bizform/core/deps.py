"""依赖注入"""
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession

from bizform.db import session as db_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    获取数据库会话依赖

    每个请求独占一个会话，请求结束时（包括异常和提前返回）连接归还连接池。
    """
    async with db_session.SessionLocal() as session:
        yield session
