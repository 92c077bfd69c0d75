"""
公共 Schema 组件

- 对外字段统一为 camelCase（bankName、poDate、isDeleted），Python 内部为 snake_case
- ID 一律以字符串输出
- 日期入参去掉时区、截断到秒，与库内存储格式一致
- 明细行只做校验，保存的是调用方提交的原始内容
"""
from datetime import date, datetime
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, PrivateAttr, model_validator
from pydantic.alias_generators import to_camel

from bizform.core.dates import normalize_date, normalize_timestamp


def _id_to_str(value: Any) -> Any:
    if value is None or isinstance(value, str):
        return value
    return str(value)


def _none_to_blank(value: Any) -> Any:
    return "" if value is None else value


def _none_to_list(value: Any) -> Any:
    return [] if value is None else value


def _blank_to_none(value: Any) -> Any:
    return None if value == "" else value


IdStr = Annotated[str, BeforeValidator(_id_to_str)]
Number = Union[int, float]

Timestamp = Annotated[datetime, BeforeValidator(normalize_timestamp)]
OptionalTimestamp = Annotated[Optional[datetime], BeforeValidator(normalize_timestamp)]
FlexibleDate = Annotated[date, BeforeValidator(normalize_date)]
OptionalNumber = Annotated[Optional[Number], BeforeValidator(_blank_to_none)]
BlankStr = Annotated[str, BeforeValidator(_none_to_blank)]
JsonList = Annotated[List[Any], BeforeValidator(_none_to_list)]


def _dump(value: Any) -> Any:
    if isinstance(value, LineItem):
        return value.stored_value()
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_unset=True, mode="json")
    if isinstance(value, list):
        return [_dump(v) for v in value]
    return value


class CamelModel(BaseModel):
    """camelCase 入参 / 出参的基类"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

    def to_values(self, exclude_unset: bool = False) -> Dict[str, Any]:
        """
        转为写库用的 {属性名: 值}

        明细等嵌套对象按 camelCase 原样保存，保证读回时结构不变。
        """
        fields = self.model_fields_set if exclude_unset else type(self).model_fields.keys()
        return {name: _dump(getattr(self, name)) for name in fields}


class LineItem(CamelModel):
    """
    明细行

    已声明字段只做类型校验（不合法时整单 400），写库时保存提交的原始字典，
    空串、数字字符串等取值读回时保持不变。
    """
    id: Optional[IdStr] = None
    _submitted: Dict[str, Any] = PrivateAttr(default_factory=dict)

    class Config:
        extra = "allow"

    @model_validator(mode="wrap")
    @classmethod
    def keep_submitted(cls, data: Any, handler: Any) -> "LineItem":
        item = handler(data)
        if isinstance(data, dict):
            item._submitted = dict(data)
        return item

    def stored_value(self) -> Dict[str, Any]:
        if self._submitted:
            return dict(self._submitted)
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class RecordResponse(CamelModel):
    """所有记录的公共输出字段"""
    id: IdStr
    is_deleted: bool = False
    created_at: Optional[datetime] = None


class MessageResponse(BaseModel):
    message: str
