"""ORM 基类与公共字段"""
from datetime import datetime
from sqlalchemy import Column, Integer, Boolean, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class SoftDeleteMixin:
    """
    所有业务表的公共字段

    - id: 自增主键，对外以字符串输出
    - is_deleted: 软删除标记，列表查询一律过滤
    - created_at: 创建时间，列表默认按它倒序
    """
    id = Column(Integer, primary_key=True, index=True)
    is_deleted = Column(Boolean, nullable=False, default=False, index=True, comment="软删除标记")
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow, comment="创建时间")

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.id}{' (deleted)' if self.is_deleted else ''}>"
