"""
Ledger (입출금 원장) 시스템

단일 계좌의 입금/출금 내역을 기록하고 잔액을 계산하는 인메모리 원장.

사용 예시:
```python
from core.ledger import LedgerService, TimeRange, TransactionStore, TransactionType
from core.utils.timezone import now_utc

service = LedgerService(TransactionStore())

# 거래 기록
service.record(TransactionType.DEPOSIT, "Salary", Decimal("35.50"), None, now_utc())

# 기간 조회 (최신순)
transactions = service.list(TimeRange(start=now_utc() - timedelta(days=1)))

# 잔액 조회
balance = service.balance()
```
"""

from core.ledger.errors import (
    DuplicateIdentity,
    InvalidRange,
    InvalidTransaction,
    LedgerError,
)
from core.ledger.service import LedgerService
from core.ledger.store import TransactionStore
from core.ledger.transaction import Transaction, normalize_amount
from core.ledger.types import TimeRange, TransactionType

__all__ = [
    # 핵심 클래스
    "LedgerService",
    "TransactionStore",
    "Transaction",
    # 타입
    "TransactionType",
    "TimeRange",
    # 예외
    "LedgerError",
    "InvalidTransaction",
    "InvalidRange",
    "DuplicateIdentity",
    # 유틸
    "normalize_amount",
]
