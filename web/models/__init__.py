"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import TransactionCreateRequest
from web.models.responses import (
    BalanceResponse,
    ErrorResponse,
    HealthResponse,
    TransactionResponse,
)

__all__ = [
    # Requests
    "TransactionCreateRequest",
    # Responses
    "BalanceResponse",
    "ErrorResponse",
    "HealthResponse",
    "TransactionResponse",
]
