"""
删除前的引用检查

依赖关系统一声明在表里：实体 -> [(引用方集合, 外键字段)]。
只统计未删除的引用记录。
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Tuple

from bizform.core.exceptions import RecordInUseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reference:
    collection: str
    field: str
    label: str


Dependencies = Mapping[str, Tuple[Reference, ...]]
Loader = Callable[[str], Iterable[Mapping[str, Any]]]

_PI_EXPORTER = Reference("performa_invoice", "exporterId", "Performa Invoice")
_PO_EXPORTER = Reference("purchase_order", "exporterId", "Purchase Order")
_DOC_EXPORTER = Reference("export_document", "exporterId", "Export Document")
_PI_BANK = Reference("performa_invoice", "selectedBankId", "Performa Invoice")
_PI_CLIENT = Reference("performa_invoice", "clientId", "Performa Invoice")

# 浏览器本地页面
LOCAL_DEPENDENCIES: Dict[str, Tuple[Reference, ...]] = {
    "exporter": (_PI_EXPORTER, _PO_EXPORTER, _DOC_EXPORTER),
    "bank": (_PI_BANK,),
    "client": (_PI_CLIENT,),
    "performa_invoice": (Reference("purchase_order", "sourcePiId", "Purchase Order"),),
    # 本地没有引用托盘供应商、供应商的单据
    "pallet": (),
    "supplier": (),
}

# 服务端版本页面，引用方集合从对应的 v2 接口读取
SERVER_DEPENDENCIES: Dict[str, Tuple[Reference, ...]] = {
    "exporter": (_PI_EXPORTER, _PO_EXPORTER, _DOC_EXPORTER),
    "bank": (_PI_BANK,),
    "client": (_PI_CLIENT, Reference("export_document", "clientId", "Export Document")),
    "manufacturer": (
        Reference("purchase_order", "manufacturerId", "Purchase Order"),
        Reference("manu_bill", "manufacturerId", "Manufacturer Bill"),
    ),
    "transporter": (
        Reference("trans_bill", "transporterId", "Transporter Bill"),
        Reference("manu_bill", "transporterId", "Manufacturer Bill"),
    ),
    # supply bill 的 supplierId 可能指向供应商或托盘供应商
    "supplier": (Reference("supply_bill", "supplierId", "Supply Bill"),),
    "pallet": (Reference("supply_bill", "supplierId", "Supply Bill"),),
    "size": (
        Reference("product", "sizeId", "Product"),
        Reference("purchase_order", "sizeId", "Purchase Order"),
    ),
    # 产品只出现在单据明细里，不做检查
    "product": (),
}


def find_references(
    entity: str,
    record_id: Any,
    loader: Loader,
    dependencies: Dependencies = LOCAL_DEPENDENCIES,
) -> List[Tuple[Reference, Mapping[str, Any]]]:
    """返回所有引用了该记录的未删除记录"""
    if entity not in dependencies:
        raise KeyError(f"未声明依赖关系的实体: {entity}")

    target = str(record_id)
    found = []
    for ref in dependencies[entity]:
        for record in loader(ref.collection):
            if record.get("isDeleted"):
                continue
            value = record.get(ref.field)
            if value is not None and str(value) == target:
                found.append((ref, record))
    return found


def ensure_deletable(
    entity: str,
    record_id: Any,
    loader: Loader,
    dependencies: Dependencies = LOCAL_DEPENDENCIES,
) -> None:
    """存在引用时抛出 RecordInUseError"""
    found = find_references(entity, record_id, loader, dependencies)
    if found:
        ref, record = found[0]
        logger.info(f"{entity} {record_id} 被 {ref.label} {record.get('id')} 引用，禁止删除")
        raise RecordInUseError(entity, str(record_id), ref.label, ref.field)
