"""
本地键值存储

每个键对应一个记录数组，整体以一个 JSON 文件保存。
update() 在锁内完成"读取-修改-写回"，写文件用临时文件加 os.replace 原子替换。
锁只在单进程内有效。
"""
import copy
import json
import logging
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Union

from bizform.core.config import settings

logger = logging.getLogger(__name__)

STORAGE_KEYS: Dict[str, str] = {
    "exporter": "bizform_companies",
    "bank": "bizform_banks",
    "client": "bizform_clients",
    "manufacturer": "bizform_manufacturers",
    "supplier": "bizform_suppliers",
    "transporter": "bizform_transporters",
    "pallet": "bizform_pallets",
    "size": "bizform_sizes",
    "product": "bizform_products",
    "performa_invoice": "bizform_performa_invoices",
    "purchase_order": "bizform_purchase_orders",
    "export_document": "bizform_export_documents_v2",
    "manu_bill": "bizform_manu_bills",
    "supply_bill": "bizform_supply_bills",
    "trans_bill": "bizform_trans_bills",
    "transaction": "bizform_transactions",
}

Records = List[Dict[str, Any]]


class LocalStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator["LocalStore"]:
        """在一个锁内完成多次读写（可重入）"""
        with self._lock:
            yield self

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"本地存储读取失败，按空处理: {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"本地存储格式异常，按空处理: {self.path}")
            return {}
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2, default=str), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def get(self, key: str) -> Records:
        """读取一个集合；不存在或格式不对时返回空列表"""
        with self._lock:
            value = self._read_all().get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            logger.warning(f"本地存储 {key} 不是数组，按空处理")
            return []
        return value

    def set(self, key: str, records: Records) -> None:
        with self._lock:
            data = self._read_all()
            data[key] = list(records)
            self._write_all(data)

    def update(self, key: str, fn: Callable[[Records], Records]) -> Records:
        """
        原子地修改一个集合

        fn 接收当前集合的副本，返回新的集合；fn 抛异常时不写入。
        """
        with self._lock:
            data = self._read_all()
            current = data.get(key)
            if not isinstance(current, list):
                current = []
            updated = list(fn(copy.deepcopy(current)))
            data[key] = updated
            self._write_all(data)
            return updated


def open_default_store() -> LocalStore:
    """按配置 LOCAL_STORE_PATH 打开本地存储"""
    return LocalStore(settings.LOCAL_STORE_PATH)
