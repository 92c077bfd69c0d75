"""
前端本地数据层

浏览器 localStorage 版本的主数据页面，改为显式的键值存储接口实现，
另有调用 v2 接口的服务端版本页面。
"""
from bizform.local.integrity import (
    LOCAL_DEPENDENCIES, SERVER_DEPENDENCIES, Reference, ensure_deletable, find_references
)
from bizform.local.pages import LocalMasterPage, Notification, PageState
from bizform.local.performa import LocalPerformaInvoiceBook
from bizform.local.remote import ApiError, HttpApiClient, RemoteMasterPage
from bizform.local.store import STORAGE_KEYS, LocalStore, open_default_store

__all__ = [
    "LOCAL_DEPENDENCIES",
    "SERVER_DEPENDENCIES",
    "Reference",
    "ensure_deletable",
    "find_references",
    "LocalMasterPage",
    "Notification",
    "PageState",
    "LocalPerformaInvoiceBook",
    "ApiError",
    "HttpApiClient",
    "RemoteMasterPage",
    "STORAGE_KEYS",
    "LocalStore",
    "open_default_store",
]
