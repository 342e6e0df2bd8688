"""
거래 내역 라우트

거래 기록 및 기간별 조회 API
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from web.dependencies import get_transaction_service
from web.models.requests import TransactionCreateRequest
from web.models.responses import ErrorResponse, TransactionResponse
from web.services.transaction_service import TransactionService

router = APIRouter(prefix="/api", tags=["Transactions"])


@router.get(
    "/transactions",
    response_model=list[TransactionResponse],
    responses={400: {"model": ErrorResponse}},
    summary="Fetch transactions",
)
async def get_transactions(
    start: datetime | None = Query(default=None, alias="from", description="시작 시각 (포함)"),
    end: datetime | None = Query(default=None, alias="to", description="종료 시각 (포함)"),
    service: TransactionService = Depends(get_transaction_service),
):
    """거래 내역 조회

    from/to로 필터링하고 최신순으로 정렬한다.
    둘 다 지정한 경우 from은 to보다 이전이어야 한다.
    """
    return service.list_transactions(start, end)


@router.post(
    "/transactions",
    response_model=TransactionResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Create a new transaction",
)
async def create_transaction(
    request: TransactionCreateRequest,
    service: TransactionService = Depends(get_transaction_service),
):
    """입금 또는 출금 기록

    금액은 양수여야 하며 소수점 2자리로 반올림된다.
    발생 시각을 생략하면 현재 UTC 시각을 사용한다.
    """
    return service.record_transaction(request)
