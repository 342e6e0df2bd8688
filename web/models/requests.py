"""
요청 스키마 (Pydantic)

Web API 요청 데이터 파싱

금액 부호, 설명 공백, 미래 시각 등 비즈니스 규칙은 LedgerService에서 검증한다.
여기서는 타입 변환만 담당.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from core.ledger.types import TransactionType


class TransactionCreateRequest(BaseModel):
    """거래 기록 요청

    occurred_at을 생략하면 서버의 현재 UTC 시각을 사용.
    """

    type: TransactionType = Field(..., description="거래 유형 (DEPOSIT/WITHDRAWAL)")
    description: str = Field(..., description="거래 설명 (예: Groceries)")
    amount: Decimal = Field(..., description="금액 (양수, 소수점 2자리로 반올림)")
    occurred_at: datetime | None = Field(
        default=None,
        description="발생 시각 (ISO-8601, 생략 시 현재 시각)",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "type": "DEPOSIT",
                    "description": "Salary",
                    "amount": "35.50",
                    "occurred_at": "2025-08-20T10:00:00Z",
                },
                {
                    "type": "WITHDRAWAL",
                    "description": "Groceries",
                    "amount": "15.50",
                },
            ]
        }
    }
