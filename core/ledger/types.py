"""
Ledger 타입 정의

TransactionType, TimeRange 등 Ledger에서 사용하는 타입 정의
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from core.utils.timezone import ensure_utc


class TransactionType(str, Enum):
    """거래 유형

    str을 상속하여 JSON 직렬화 가능.
    """

    DEPOSIT = "DEPOSIT"  # 입금 (잔액 증가)
    WITHDRAWAL = "WITHDRAWAL"  # 출금 (잔액 감소)


@dataclass(frozen=True)
class TimeRange:
    """거래 시각 필터 범위 (불변)

    start/end 모두 선택 사항이며 지정된 경계는 양쪽 모두 포함(inclusive).
    - 둘 다 None: 전체 기간
    - start만: start 이후
    - end만: end 이전
    - 둘 다: start ~ end (start == end 이면 해당 시각만)

    naive 경계는 UTC로 간주하고, 오프셋이 있는 경계는 UTC로 변환해 저장한다.
    경계 순서(start < end)는 호출하는 쪽에서 검증한다.
    """

    start: datetime | None = None
    end: datetime | None = None

    def __post_init__(self) -> None:
        if self.start is not None:
            object.__setattr__(self, "start", ensure_utc(self.start))
        if self.end is not None:
            object.__setattr__(self, "end", ensure_utc(self.end))

    @classmethod
    def unbounded(cls) -> "TimeRange":
        """전체 기간 범위"""
        return cls()

    def contains(self, ts: datetime) -> bool:
        """ts가 범위 안에 있는지 확인

        Args:
            ts: 확인할 시각 (UTC)

        Returns:
            범위 포함 여부
        """
        if self.start is not None and ts < self.start:
            return False
        if self.end is not None and ts > self.end:
            return False
        return True
