"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from core.ledger.transaction import Transaction
from core.ledger.types import TransactionType


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    version: str = Field(..., description="API 버전")
    transaction_count: int = Field(..., description="저장된 거래 수")


class TransactionResponse(BaseModel):
    """거래 응답"""

    id: UUID = Field(..., description="거래 ID")
    type: TransactionType = Field(..., description="거래 유형")
    description: str = Field(..., description="거래 설명")
    amount: Decimal = Field(..., description="금액 (항상 양수)")
    occurred_at: datetime = Field(..., description="발생 시각 (UTC)")

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionResponse":
        """도메인 Transaction → 응답 모델 변환"""
        return cls(
            id=transaction.id,
            type=transaction.transaction_type,
            description=transaction.description,
            amount=transaction.amount,
            occurred_at=transaction.occurred_at,
        )


class BalanceResponse(BaseModel):
    """잔액 응답"""

    balance: Decimal = Field(..., description="현재 잔액 (음수 가능)")
    currency: str = Field(..., description="통화 코드")


class ErrorResponse(BaseModel):
    """오류 응답"""

    detail: str = Field(..., description="오류 사유")
