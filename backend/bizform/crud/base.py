"""
软删除表的通用数据访问

列表与单条读取只返回 is_deleted = False 的记录；
写操作提交失败时回滚后原样抛出，由接口层统一转换为 500。
"""
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

ModelType = TypeVar("ModelType")

# SQLite INTEGER 为 64 位有符号整数
PK_MIN = -(2 ** 63)
PK_MAX = 2 ** 63 - 1


def to_pk(value: Any) -> Optional[int]:
    """外部传入的 id 转为主键；非数字或超出整数范围时返回 None，按不存在处理"""
    try:
        pk = int(value)
    except (TypeError, ValueError):
        return None
    return pk if PK_MIN <= pk <= PK_MAX else None


class CRUDSoftDelete(Generic[ModelType]):
    def __init__(self, model: Type[ModelType], order_by: Optional[Sequence[Any]] = None):
        self.model = model
        self.order_by = list(order_by) if order_by else [model.created_at.desc(), model.id.desc()]

    def active(self):
        """未删除记录的查询"""
        return select(self.model).where(self.model.is_deleted.is_(False))

    async def list_active(self, db: AsyncSession) -> List[ModelType]:
        result = await db.execute(self.active().order_by(*self.order_by))
        return list(result.scalars().all())

    async def get_active(self, db: AsyncSession, id: int) -> Optional[ModelType]:
        result = await db.execute(self.active().where(self.model.id == id))
        return result.scalar_one_or_none()

    async def create(self, db: AsyncSession, values: Dict[str, Any]) -> ModelType:
        db_obj = self.model(**values)
        db.add(db_obj)
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        await db.refresh(db_obj)
        return db_obj

    async def create_many(self, db: AsyncSession, rows: List[Dict[str, Any]]) -> List[ModelType]:
        """同一事务内批量插入"""
        db_objs = [self.model(**values) for values in rows]
        db.add_all(db_objs)
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        for db_obj in db_objs:
            await db.refresh(db_obj)
        return db_objs

    async def update(self, db: AsyncSession, id: int, values: Dict[str, Any]) -> int:
        """
        按 ID 整体更新，返回受影响行数

        不校验记录是否存在，不存在时影响 0 行。
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values({getattr(self.model, key): value for key, value in values.items()})
            .execution_options(synchronize_session=False)
        )
        try:
            result = await db.execute(stmt)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return result.rowcount

    async def soft_delete(self, db: AsyncSession, id: int) -> int:
        return await self.update(db, id, {"is_deleted": True})
