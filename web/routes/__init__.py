"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- transactions: 거래 기록 및 내역 조회
- balance: 잔액 조회
"""
