"""
收付款流水 Schema

交易对象是一个带标签的联合类型：
- TableParty: client / manufacturer / transporter / supplier / pallet，partyId 必须指向对应主数据表
- StatutoryParty: gst / duty_drawback / road_tp，法定款项，不需要主数据记录
"""
from datetime import datetime
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import Field, TypeAdapter, model_validator

from bizform.schemas.common import CamelModel, IdStr, JsonList, Number, RecordResponse, Timestamp

TablePartyType = Literal["client", "manufacturer", "transporter", "supplier", "pallet"]
StatutoryPartyType = Literal["gst", "duty_drawback", "road_tp"]
PartyType = Literal[
    "client", "manufacturer", "transporter", "supplier", "pallet",
    "gst", "duty_drawback", "road_tp",
]


class TableParty(CamelModel):
    party_type: TablePartyType
    party_id: IdStr = Field(..., min_length=1)


class StatutoryParty(CamelModel):
    party_type: StatutoryPartyType
    party_id: Optional[IdStr] = None


PartyRef = Annotated[Union[TableParty, StatutoryParty], Field(discriminator="party_type")]
party_adapter = TypeAdapter(PartyRef)


class TransactionBase(CamelModel):
    type: Literal["credit", "debit"]
    party_type: PartyType
    party_id: Optional[IdStr] = None
    currency: Literal["USD", "EUR", "INR"] = "INR"
    amount: Number
    description: Optional[str] = None


class TransactionCreate(TransactionBase):
    date: Timestamp
    related_invoices: JsonList = []

    @model_validator(mode="after")
    def check_party(self) -> "TransactionCreate":
        # 主数据类对象必须带 partyId
        party_adapter.validate_python(self._party_fields())
        return self

    def _party_fields(self) -> Dict[str, Any]:
        return {"partyType": self.party_type, "partyId": self.party_id}

    @property
    def party(self) -> Union[TableParty, StatutoryParty]:
        return party_adapter.validate_python(self._party_fields())


class TransactionResponse(TransactionBase, RecordResponse):
    date: datetime
    amount: float
    related_invoices: JsonList = []
