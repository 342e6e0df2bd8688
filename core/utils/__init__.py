"""
유틸리티 패키지

타임존 처리, 시계 주입 등 공통 유틸리티
"""

from core.utils.timezone import (
    Clock,
    ensure_utc,
    fixed_clock,
    now_utc,
)

__all__ = [
    "Clock",
    "ensure_utc",
    "fixed_clock",
    "now_utc",
]
