"""
Transaction 도메인 모델

한 번의 입금/출금을 나타내는 불변 기록
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from uuid import UUID, uuid4

from core.constants import Money
from core.ledger.errors import InvalidTransaction
from core.ledger.types import TransactionType


def normalize_amount(value: Decimal | int | str) -> Decimal:
    """금액을 소수점 2자리로 반올림 (ROUND_HALF_UP)

    부호 검증은 하지 않는다. NaN/Infinity는 그대로 반환하고
    Transaction 생성 시 거부된다.

    Args:
        value: 원 금액

    Returns:
        소수점 2자리 Decimal

    Raises:
        InvalidTransaction: 숫자로 해석할 수 없는 경우

    Example:
        >>> normalize_amount(Decimal("2.345"))
        Decimal('2.35')
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        if not amount.is_finite():
            return amount
        # 기본 정밀도(28자리)를 넘는 큰 금액도 반올림 결과가 잘리지 않도록 정밀도 확장
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, amount.adjusted() + Money.SCALE + 2)
            return amount.quantize(Money.QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise InvalidTransaction(f"transaction amount is not a valid number: {value!r}") from e


def _check_description(description: str) -> None:
    if not description or not description.strip():
        raise InvalidTransaction("transaction description can not be empty")


@dataclass(frozen=True, eq=False)
class Transaction:
    """거래 (불변)

    amount는 항상 양수이며 부호는 transaction_type으로 결정된다.
    동일한 id를 가진 Transaction은 같은 거래로 취급한다.
    """

    id: UUID
    transaction_type: TransactionType
    description: str
    amount: Decimal
    occurred_at: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.transaction_type, TransactionType):
            raise InvalidTransaction(
                f"transaction type must be one of {[t.value for t in TransactionType]}"
            )
        _check_description(self.description)
        if not self.amount.is_finite() or self.amount <= Money.ZERO:
            raise InvalidTransaction("transaction amount must be positive")
        if self.occurred_at.tzinfo is None:
            raise InvalidTransaction("transaction occurred_at must be timezone-aware")

    @staticmethod
    def create(
        transaction_type: TransactionType,
        description: str,
        amount: Decimal,
        occurred_at: datetime,
    ) -> "Transaction":
        """새 거래 생성

        새 uuid4를 할당하고 금액을 소수점 2자리로 반올림한다.

        Args:
            transaction_type: DEPOSIT 또는 WITHDRAWAL
            description: 거래 설명
            amount: 금액 (양수)
            occurred_at: 발생 시각 (UTC)

        Returns:
            새 Transaction 인스턴스

        Raises:
            InvalidTransaction: 설명이 비었거나 금액이 0 이하인 경우
        """
        # 설명 검증이 금액 해석보다 먼저
        _check_description(description)
        return Transaction(
            id=uuid4(),
            transaction_type=transaction_type,
            description=description,
            amount=normalize_amount(amount),
            occurred_at=occurred_at,
        )

    @property
    def signed_amount(self) -> Decimal:
        """잔액 계산용 부호 있는 금액 (입금 +, 출금 -)"""
        if self.transaction_type == TransactionType.DEPOSIT:
            return self.amount
        return self.amount.copy_negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

