"""
타임존 유틸리티

내부 저장/비교는 모두 UTC 원칙을 지키기 위한 헬퍼 함수
"""

from datetime import datetime, timezone
from typing import Callable

# 현재 시각을 반환하는 시계 (테스트에서 고정 시계로 교체)
Clock = Callable[[], datetime]


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)

    datetime.now(timezone.utc)의 축약형.

    Returns:
        현재 UTC 시간 (tzinfo=timezone.utc)
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """datetime을 UTC 기준으로 정규화

    Args:
        dt: datetime 객체 (naive면 UTC로 간주)

    Returns:
        tzinfo=timezone.utc 인 datetime

    Example:
        >>> ensure_utc(datetime(2025, 8, 22, 12, 0, tzinfo=timezone(timedelta(hours=2))))
        datetime(2025, 8, 22, 10, 0, tzinfo=timezone.utc)
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def fixed_clock(instant: datetime) -> Clock:
    """항상 같은 시각을 반환하는 시계 생성

    Args:
        instant: 고정할 시각 (naive면 UTC로 간주)

    Returns:
        호출 시 instant를 반환하는 Clock
    """
    fixed = ensure_utc(instant)
    return lambda: fixed
