"""往来对账接口"""
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from bizform.core.deps import get_db
from bizform.core.exceptions import persistence_errors
from bizform.schemas.ledger import PartyLedger
from bizform.services.ledger import build_party_ledger

router = APIRouter()


@router.get("/{party_type}/{party_id}", response_model=PartyLedger)
async def read_party_ledger(
    party_type: str,
    party_id: str,
    db: AsyncSession = Depends(get_db),
) -> Any:
    """获取某个往来对象的单据与收付款明细及余额"""
    async with persistence_errors("Error fetching party ledger"):
        ledger = await build_party_ledger(db, party_type, party_id)
        if ledger is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Party not found")
        return ledger
