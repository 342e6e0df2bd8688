"""
헬스 체크 엔드포인트

GET /health - 서버 상태 확인
"""

from fastapi import APIRouter, Depends

from core.constants import APP_VERSION
from core.ledger.service import LedgerService
from web.dependencies import get_ledger_service
from web.models.responses import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    ledger: LedgerService = Depends(get_ledger_service),
) -> HealthResponse:
    """서버 상태 확인

    Returns:
        HealthResponse: status, version, 저장된 거래 수
    """
    return HealthResponse(
        status="ok",
        version=APP_VERSION,
        transaction_count=len(ledger.store),
    )
