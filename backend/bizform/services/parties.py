"""
交易对象解析

partyType 为主数据类时，partyId 必须指向对应表中未删除的记录。
"""
import logging
from typing import Dict, Optional, Tuple, Type, Union

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from bizform import crud
from bizform.core.exceptions import UnknownPartyError
from bizform.crud.base import CRUDSoftDelete, to_pk
from bizform.schemas.party import ClientResponse, ContactPartyResponse, ManufacturerResponse
from bizform.schemas.transaction import StatutoryParty, TableParty

logger = logging.getLogger(__name__)

# partyType -> (数据访问对象, 输出 Schema)
PARTY_TABLES: Dict[str, Tuple[CRUDSoftDelete, Type[BaseModel]]] = {
    "client": (crud.client, ClientResponse),
    "manufacturer": (crud.manufacturer, ManufacturerResponse),
    "transporter": (crud.transporter, ContactPartyResponse),
    "supplier": (crud.supplier, ContactPartyResponse),
    "pallet": (crud.pallet, ContactPartyResponse),
}


def parse_party_id(party_id: Optional[str]) -> Optional[int]:
    return to_pk(party_id)


async def get_party(db: AsyncSession, party_type: str, party_id: Optional[str]):
    """读取主数据类交易对象，不存在或已删除时返回 None"""
    entry = PARTY_TABLES.get(party_type)
    pk = parse_party_id(party_id)
    if entry is None or pk is None:
        return None
    return await entry[0].get_active(db, pk)


async def resolve_party(db: AsyncSession, party: Union[TableParty, StatutoryParty]):
    """
    校验交易对象

    法定款项直接返回 None；主数据类对象找不到时抛出 UnknownPartyError。
    """
    if isinstance(party, StatutoryParty):
        return None
    record = await get_party(db, party.party_type, party.party_id)
    if record is None:
        logger.info(f"交易对象不存在: {party.party_type} {party.party_id}")
        raise UnknownPartyError(party.party_type, party.party_id)
    return record
