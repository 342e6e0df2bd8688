"""
잔액 라우트

GET /api/balance - 현재 잔액 조회
"""

from fastapi import APIRouter, Depends

from web.dependencies import get_transaction_service
from web.models.responses import BalanceResponse
from web.services.transaction_service import TransactionService

router = APIRouter(prefix="/api", tags=["Balance"])


@router.get("/balance", response_model=BalanceResponse, summary="View balance")
async def get_balance(
    service: TransactionService = Depends(get_transaction_service),
):
    """현재 잔액 조회 (양수, 0, 음수 모두 가능)"""
    return service.get_balance()
