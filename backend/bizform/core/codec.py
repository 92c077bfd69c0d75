"""
明细行编码

明细以 JSON 文本存放在父表的一列中，格式带版本号：
    {"version": 1, "items": [...]}
读取时兼容旧数据（裸 JSON 数组）；NULL、空串、损坏的 JSON、未知版本一律视为空列表。
"""

import json
import logging
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

LINE_ITEMS_VERSION = 1


def encode_line_items(items: Optional[List[Any]]) -> str:
    """编码明细列表"""
    return json.dumps(
        {"version": LINE_ITEMS_VERSION, "items": list(items or [])},
        ensure_ascii=False,
        default=str,
    )


def decode_line_items(raw: Optional[str]) -> List[Any]:
    """解码明细列表，失败时返回空列表"""
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning(f"明细数据解析失败，按空列表处理: {e}")
        return []

    # 旧格式：裸数组
    if isinstance(data, list):
        return data

    if isinstance(data, dict):
        version = data.get("version")
        if version != LINE_ITEMS_VERSION:
            logger.warning(f"未知的明细编码版本 {version}，按空列表处理")
            return []
        items = data.get("items")
        return items if isinstance(items, list) else []

    logger.warning(f"明细数据格式异常（{type(data).__name__}），按空列表处理")
    return []
