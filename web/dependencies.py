"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

import logging

from fastapi import Depends

from core.config.loader import Settings, get_settings
from core.ledger.service import LedgerService
from core.ledger.store import TransactionStore
from core.utils.timezone import Clock, now_utc
from web.services.transaction_service import TransactionService

logger = logging.getLogger(__name__)


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


# =========================================================================
# Ledger (프로세스 전역)
# =========================================================================

# 프로세스 수명 동안 유지되는 단일 계좌 원장
_store = TransactionStore()
_ledger = LedgerService(_store)


def get_ledger_service() -> LedgerService:
    """Ledger 서비스 반환"""
    return _ledger


def get_clock() -> Clock:
    """현재 시각 제공자 반환

    테스트에서는 app.dependency_overrides로 고정 시계를 주입.
    """
    return now_utc


def get_transaction_service(
    ledger: LedgerService = Depends(get_ledger_service),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_app_settings),
) -> TransactionService:
    """거래 내역 서비스 반환"""
    return TransactionService(ledger, clock=clock, currency=settings.currency)


def reset_ledger() -> None:
    """원장 초기화 (테스트용)

    기존 거래를 모두 버리고 빈 저장소로 교체.
    """
    global _store, _ledger
    _store = TransactionStore()
    _ledger = LedgerService(_store)
    logger.debug("Ledger reset")
