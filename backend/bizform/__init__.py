"""BizForm 出口业务记录管理 - 后端"""

__version__ = "2.0.0"
