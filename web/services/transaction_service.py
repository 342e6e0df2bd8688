"""
거래 내역 서비스

HTTP 경계 계층. 파싱된 요청 값을 LedgerService 호출로 변환한다.
- 조회 범위 검증 (from < to)
- 시계 주입 (현재 시각)
- 도메인 객체 → 응답 모델 변환
"""

from datetime import datetime

from core.constants import Defaults
from core.ledger.errors import InvalidRange
from core.ledger.service import LedgerService
from core.ledger.types import TimeRange
from core.utils.timezone import Clock, ensure_utc, now_utc
from web.models.requests import TransactionCreateRequest
from web.models.responses import BalanceResponse, TransactionResponse


def build_time_range(
    start: datetime | None,
    end: datetime | None,
) -> TimeRange:
    """쿼리 파라미터로 조회 범위 생성

    Args:
        start: 시작 시각 (포함, 선택)
        end: 종료 시각 (포함, 선택)

    Returns:
        UTC로 정규화된 TimeRange

    Raises:
        InvalidRange: 둘 다 지정되었고 start >= end 인 경우
    """
    start_utc = ensure_utc(start) if start is not None else None
    end_utc = ensure_utc(end) if end is not None else None

    if start_utc is not None and end_utc is not None and start_utc >= end_utc:
        raise InvalidRange("'from' must be before 'to'")

    return TimeRange(start=start_utc, end=end_utc)


class TransactionService:
    """거래 내역 서비스

    Args:
        ledger: Ledger 도메인 서비스
        clock: 현재 시각 제공자 (기본: 시스템 UTC)
        currency: 잔액 응답에 표시할 통화 코드
    """

    def __init__(
        self,
        ledger: LedgerService,
        clock: Clock = now_utc,
        currency: str = Defaults.CURRENCY,
    ):
        self.ledger = ledger
        self.clock = clock
        self.currency = currency

    def record_transaction(self, request: TransactionCreateRequest) -> TransactionResponse:
        """거래 기록

        Raises:
            InvalidTransaction: 비즈니스 규칙 위반
        """
        transaction = self.ledger.record(
            transaction_type=request.type,
            description=request.description,
            amount=request.amount,
            occurred_at=request.occurred_at,
            now=self.clock(),
        )
        return TransactionResponse.from_transaction(transaction)

    def list_transactions(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[TransactionResponse]:
        """기간 내 거래 목록 조회 (최신순)

        Raises:
            InvalidRange: start >= end
        """
        time_range = build_time_range(start, end)
        return [
            TransactionResponse.from_transaction(t)
            for t in self.ledger.list(time_range)
        ]

    def get_balance(self) -> BalanceResponse:
        """현재 잔액 조회"""
        return BalanceResponse(balance=self.ledger.balance(), currency=self.currency)
