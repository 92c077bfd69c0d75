"""本地形式发票：保存时按规格计算数量、金额和合计"""
import time
from typing import Any, Callable, Dict, Mapping, Optional

from bizform.local.pages import LocalMasterPage, active_records
from bizform.local.store import STORAGE_KEYS, LocalStore
from bizform.services.totals import performa_invoice_totals


class LocalPerformaInvoiceBook(LocalMasterPage):
    def __init__(self, store: Optional[LocalStore] = None, clock: Callable[[], float] = time.time):
        super().__init__(store, "performa_invoice", label="Performa Invoice", clock=clock)

    def sizes(self) -> Dict[str, Mapping[str, Any]]:
        return {
            str(size.get("id")): size
            for size in active_records(self.store.get(STORAGE_KEYS["size"]))
        }

    def prepare(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        return performa_invoice_totals(values, self.sizes())
