"""
服务端版本的主数据页面

每个操作都调用 v2 接口；写操作成功后总是重新拉取整个列表，不做本地合并。
删除前按 SERVER_DEPENDENCIES 从各引用方接口读取数据做引用检查。
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

import requests

from bizform.core.config import settings
from bizform.core.exceptions import BizformError, RecordInUseError
from bizform.local.integrity import SERVER_DEPENDENCIES, ensure_deletable
from bizform.local.pages import Notification

logger = logging.getLogger(__name__)

RESOURCE_PATHS: Dict[str, str] = {
    "exporter": "/exporter-data",
    "bank": "/bank-data",
    "client": "/client-data",
    "manufacturer": "/manufacturer-data",
    "supplier": "/supplier-data",
    "transporter": "/transporter-data",
    "pallet": "/pallet-data",
    "size": "/size-data",
    "product": "/product-data",
    "purchase_order": "/purchase-order-data",
    "manu_bill": "/manu-bill-data",
    "supply_bill": "/supply-bill-data",
    "trans_bill": "/trans-bill-data",
    "performa_invoice": "/performa-invoice-data",
    "export_document": "/export-document-data",
    "transaction": "/transaction-data",
}


class ApiError(BizformError):
    """接口返回 4xx / 5xx"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


# 接口报错和网络故障（连接失败、超时）都按请求失败处理
REQUEST_ERRORS = (ApiError, requests.RequestException)


def error_message(e: Exception) -> str:
    return e.message if isinstance(e, ApiError) else str(e)


class HttpApiClient:
    """基于 requests 的接口客户端，方法签名与 FastAPI TestClient 一致"""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def request(self, method: str, path: str, **kwargs) -> requests.Response:
        return self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> requests.Response:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None, params: Optional[Mapping[str, Any]] = None) -> requests.Response:
        return self.request("POST", path, json=json, params=params)

    def put(self, path: str, json: Any = None, params: Optional[Mapping[str, Any]] = None) -> requests.Response:
        return self.request("PUT", path, json=json, params=params)

    def delete(self, path: str, params: Optional[Mapping[str, Any]] = None) -> requests.Response:
        return self.request("DELETE", path, params=params)


class RemoteMasterPage:
    def __init__(self, client: Any, resource: str, label: Optional[str] = None, api_prefix: Optional[str] = None):
        if resource not in SERVER_DEPENDENCIES:
            raise ValueError(f"{resource} 不是主数据资源")
        self.client = client
        self.resource = resource
        self.label = label or resource.replace("_", " ").title()
        self.api_prefix = settings.API_V2_STR if api_prefix is None else api_prefix
        self.is_loading = False
        self.records: List[Dict[str, Any]] = []
        self.editing: Optional[Dict[str, Any]] = None
        self.notifications: List[Notification] = []

    def _path(self, resource: str) -> str:
        return f"{self.api_prefix}{RESOURCE_PATHS[resource]}"

    def notify(self, title: str, description: str, variant: str = "default") -> None:
        self.notifications.append(Notification(title, description, variant))

    @staticmethod
    def _result(response: Any) -> Any:
        if response.status_code >= 400:
            try:
                message = response.json().get("message")
            except ValueError:
                message = None
            raise ApiError(response.status_code, message or response.text)
        return response.json()

    def _fetch(self, resource: str) -> List[Dict[str, Any]]:
        return self._result(self.client.get(self._path(resource)))

    def load(self) -> List[Dict[str, Any]]:
        """拉取列表"""
        self.is_loading = True
        try:
            self.records = self._fetch(self.resource)
        except REQUEST_ERRORS as e:
            logger.error(f"获取 {self.resource} 列表失败: {e}")
            self.notify("Error", f"Could not load {self.label.lower()} data: {error_message(e)}", "destructive")
            raise
        finally:
            self.is_loading = False
        return self.records

    def save(self, values: Mapping[str, Any]) -> Any:
        """values 带 id 或处于编辑状态时 PUT，否则 POST；成功后重新拉取列表"""
        payload = dict(values)
        record_id = payload.pop("id", None) or (self.editing or {}).get("id")
        path = self._path(self.resource)

        self.is_loading = True
        try:
            if record_id:
                result = self._result(self.client.put(path, params={"id": record_id}, json=payload))
            else:
                result = self._result(self.client.post(path, json=payload))
        except REQUEST_ERRORS as e:
            logger.error(f"保存 {self.resource} 失败: {e}")
            self.notify("Error", error_message(e), "destructive")
            raise
        finally:
            self.is_loading = False

        self.editing = None
        self.notify(
            f"{self.label} {'Updated' if record_id else 'Saved'}",
            f"{self.label} has been successfully {'updated' if record_id else 'saved'}.",
        )
        self.load()
        return result

    def start_edit(self, record_id: Any) -> Optional[Dict[str, Any]]:
        self.editing = next((r for r in self.records if str(r.get("id")) == str(record_id)), None)
        return self.editing

    def cancel_edit(self) -> None:
        self.editing = None

    def delete(self, record_id: Any) -> bool:
        """引用检查通过后软删除并重新拉取列表；被引用时只记录提示"""
        self.is_loading = True
        try:
            ensure_deletable(self.resource, record_id, self._fetch, SERVER_DEPENDENCIES)
            self._result(self.client.delete(self._path(self.resource), params={"id": record_id}))
        except RecordInUseError as e:
            self.notify(
                "Deletion Failed",
                f"This {self.label.lower()} is being used in a {e.referenced_by}. "
                f"Please remove its references before deleting.",
                variant="destructive",
            )
            return False
        except REQUEST_ERRORS as e:
            logger.error(f"删除 {self.resource} {record_id} 失败: {e}")
            self.notify("Error", error_message(e), "destructive")
            raise
        finally:
            self.is_loading = False

        if self.editing and str(self.editing.get("id")) == str(record_id):
            self.editing = None
        self.notify(f"{self.label} Deleted", f"The {self.label.lower()} has been marked as deleted.")
        self.load()
        return True
