"""收付款流水接口"""
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from bizform import crud
from bizform.api.api_v2.endpoints.resource import ResourceSpec, build_resource_router
from bizform.core.exceptions import UnknownPartyError
from bizform.schemas.transaction import TransactionCreate, TransactionResponse
from bizform.services.parties import resolve_party


async def ensure_party_exists(db: AsyncSession, data: TransactionCreate) -> None:
    try:
        await resolve_party(db, data.party)
    except UnknownPartyError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


transaction_spec = ResourceSpec(
    crud=crud.transaction,
    create_schema=TransactionCreate,
    response_schema=TransactionResponse,
    label="Transaction",
    singular="transaction",
    plural="transactions",
    required=("date", "type", "partyType", "amount"),
    check=ensure_party_exists,
)

router = build_resource_router(transaction_spec)
