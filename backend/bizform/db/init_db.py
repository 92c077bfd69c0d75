import asyncio

from bizform.db import session as db_session
from bizform.db.base import Base

# 导入所有模型，确保表能被创建
import bizform.models  # noqa: F401


async def ensure_tables_exist() -> None:
    """
    确保数据库表存在（应用启动时调用）
    """
    async with db_session.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_db() -> None:
    """
    初始化数据库 - 创建所有表
    """
    await ensure_tables_exist()


if __name__ == "__main__":
    asyncio.run(init_db())
