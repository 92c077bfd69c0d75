"""
本地主数据页面

状态：loading -> ready（hydrate 之后）。
保存时总是从存储重新读取整个集合再修改，不依赖内存中的列表。
"""
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from bizform.core.exceptions import RecordInUseError
from bizform.local.integrity import LOCAL_DEPENDENCIES, ensure_deletable
from bizform.local.store import STORAGE_KEYS, LocalStore, Records, open_default_store

logger = logging.getLogger(__name__)


class PageState(str, Enum):
    LOADING = "loading"
    READY = "ready"


@dataclass
class Notification:
    """页面提示"""
    title: str
    description: str
    variant: str = "default"


def active_records(records: Records) -> Records:
    return [r for r in records if not r.get("isDeleted")]


class LocalMasterPage:
    def __init__(
        self,
        store: Optional[LocalStore],
        entity: str,
        label: Optional[str] = None,
        clock: Callable[[], float] = time.time,
    ):
        if entity not in STORAGE_KEYS:
            raise ValueError(f"未知实体: {entity}")
        if entity not in LOCAL_DEPENDENCIES:
            raise ValueError(f"实体 {entity} 未声明删除依赖，不能作为本地页面使用")
        # 不传存储时按配置打开默认文件
        self.store = store if store is not None else open_default_store()
        self.entity = entity
        self.label = label or entity.replace("_", " ").title()
        self.storage_key = STORAGE_KEYS[entity]
        self.state = PageState.LOADING
        self.records: Records = []
        self.editing: Optional[Dict[str, Any]] = None
        self.notifications: List[Notification] = []
        self._clock = clock

    def hydrate(self) -> Records:
        """读取存储并进入 ready 状态"""
        self.records = active_records(self.store.get(self.storage_key))
        self.state = PageState.READY
        return self.records

    def notify(self, title: str, description: str, variant: str = "default") -> None:
        self.notifications.append(Notification(title, description, variant))

    def prepare(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """保存前加工表单数据，子类可覆盖"""
        return dict(values)

    def _next_id(self, records: Records) -> str:
        """id 取当前毫秒时间戳，与已有 id 冲突时顺延"""
        existing = {str(r.get("id")) for r in records}
        candidate = int(self._clock() * 1000)
        while str(candidate) in existing:
            candidate += 1
        return str(candidate)

    def save(self, values: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """
        新建或更新

        values 带 id 或当前处于编辑状态时为更新，否则新建。
        更新的 id 不存在时不做修改，返回 None。
        """
        data = self.prepare(values)
        record_id = data.pop("id", None) or (self.editing or {}).get("id")
        saved: Dict[str, Any] = {}

        def apply(records: Records) -> Records:
            if record_id is None:
                new_record = {**data, "id": self._next_id(records)}
                saved.update(new_record)
                return records + [new_record]
            result = []
            for record in records:
                if str(record.get("id")) == str(record_id):
                    record = {**record, **data, "id": record.get("id")}
                    saved.update(record)
                result.append(record)
            return result

        self.records = active_records(self.store.update(self.storage_key, apply))
        self.editing = None

        if not saved:
            logger.warning(f"{self.entity} {record_id} 不存在，未保存")
            return None
        if record_id is None:
            self.notify(f"{self.label} Saved", f"{self.label} has been successfully saved.")
        else:
            self.notify(f"{self.label} Updated", f"{self.label} has been successfully updated.")
        return saved

    def start_edit(self, record_id: Any) -> Optional[Dict[str, Any]]:
        """把选中的记录放入表单"""
        self.editing = next((r for r in self.records if str(r.get("id")) == str(record_id)), None)
        return self.editing

    def cancel_edit(self) -> None:
        self.editing = None

    def delete(self, record_id: Any) -> bool:
        """
        软删除

        被其他未删除单据引用时不做任何修改，只记录提示，返回 False。
        记录不存在或已删除时同样不做修改，返回 False。
        """
        target = str(record_id)
        with self.store.locked():
            current = active_records(self.store.get(self.storage_key))
            if not any(str(r.get("id")) == target for r in current):
                logger.warning(f"{self.entity} {target} 不存在，未删除")
                return False
            try:
                ensure_deletable(self.entity, target, self._load_collection)
            except RecordInUseError as e:
                self.notify(
                    "Deletion Failed",
                    f"This {self.label.lower()} is being used in a {e.referenced_by}. "
                    f"Please remove its references before deleting.",
                    variant="destructive",
                )
                return False

            all_records = self.store.update(
                self.storage_key,
                lambda records: [
                    {**r, "isDeleted": True} if str(r.get("id")) == target else r
                    for r in records
                ],
            )
        self.records = active_records(all_records)
        if self.editing and str(self.editing.get("id")) == target:
            self.editing = None
        self.notify(f"{self.label} Deleted", f"The {self.label.lower()} has been marked as deleted.")
        return True

    def _load_collection(self, collection: str) -> Records:
        return self.store.get(STORAGE_KEYS[collection])
