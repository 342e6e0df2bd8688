"""
Web 서비스 패키지

요청 파싱 결과를 Ledger 도메인 호출로 연결
"""

from web.services.transaction_service import TransactionService, build_time_range

__all__ = [
    "TransactionService",
    "build_time_range",
]
