"""
Ledger 서비스

거래 기록, 기간별 조회, 잔액 계산 등 비즈니스 규칙 담당
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal, localcontext

from core.constants import Money
from core.ledger.errors import InvalidTransaction
from core.ledger.store import TransactionStore
from core.ledger.transaction import Transaction
from core.ledger.types import TimeRange, TransactionType
from core.utils.timezone import ensure_utc

logger = logging.getLogger(__name__)


class LedgerService:
    """Ledger 서비스

    저장소에 대한 모든 읽기/쓰기를 중개한다.
    현재 시각은 항상 호출자가 now로 전달한다 (시계 주입).

    Args:
        store: 거래 저장소
    """

    def __init__(self, store: TransactionStore):
        self.store = store

    def record(
        self,
        transaction_type: TransactionType,
        description: str,
        amount: Decimal,
        occurred_at: datetime | None,
        now: datetime,
    ) -> Transaction:
        """거래 기록

        검증 순서: 설명 → 금액(반올림 후) → 발생 시각.
        첫 번째 위반에서 InvalidTransaction 발생, 저장소는 변경되지 않음.

        Args:
            transaction_type: DEPOSIT 또는 WITHDRAWAL
            description: 거래 설명
            amount: 금액 (양수, 소수점 2자리로 반올림)
            occurred_at: 발생 시각 (None이면 now 사용)
            now: 현재 시각

        Returns:
            저장된 Transaction

        Raises:
            InvalidTransaction: 비즈니스 규칙 위반
            DuplicateIdentity: id 충돌 (내부 오류)
        """
        now = ensure_utc(now)
        effective_at = ensure_utc(occurred_at) if occurred_at is not None else now

        try:
            transaction = Transaction.create(
                transaction_type=transaction_type,
                description=description,
                amount=amount,
                occurred_at=effective_at,
            )
            if transaction.occurred_at > now:
                raise InvalidTransaction("transaction can not occur in the future")
        except InvalidTransaction as e:
            logger.info(f"Rejected transaction: {e.reason}")
            raise

        self.store.add(transaction)
        logger.info(
            f"Recorded {transaction.transaction_type.value} {transaction.amount} "
            f"at {transaction.occurred_at.isoformat()} (id={transaction.id})"
        )
        return transaction

    def list(self, time_range: TimeRange) -> list[Transaction]:
        """기간 내 거래 목록 조회 (최신순)

        동일 시각의 거래는 id 역순으로 정렬되어 반복 호출 시 순서가 같다.
        범위 경계 순서는 검증하지 않는다.

        Args:
            time_range: 조회 범위 (경계 포함)

        Returns:
            occurred_at 내림차순 거래 목록
        """
        matched = [t for t in self.store.all() if time_range.contains(t.occurred_at)]
        return sorted(matched, key=lambda t: (t.occurred_at, t.id), reverse=True)

    def balance(self) -> Decimal:
        """현재 잔액 계산

        입금은 더하고 출금은 뺀다. 음수 가능.

        Returns:
            잔액 (거래가 없으면 0)
        """
        amounts = [t.signed_amount for t in self.store.all()]
        if not amounts:
            return Money.ZERO

        # 합계가 기본 정밀도(28자리)에서 반올림되지 않도록 자리수만큼 확장
        largest = max(amount.adjusted() for amount in amounts)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, largest + Money.SCALE + len(str(len(amounts))) + 2)
            return sum(amounts, Money.ZERO)
