"""
Ledger 예외 정의

- InvalidTransaction: 비즈니스 규칙 위반 (사용자 입력 오류)
- InvalidRange: 조회 범위 경계 오류 (from >= to)
- DuplicateIdentity: 동일 ID 중복 저장 (내부 불변식 위반)
"""


class LedgerError(Exception):
    """Ledger 예외 기본 클래스"""

    pass


class InvalidTransaction(LedgerError):
    """거래 기록 요청이 비즈니스 규칙을 위반한 경우

    설명 누락, 0 이하 금액, 미래 시각 등.
    재시도 대상 아님. 실패 시 저장소 상태는 변경되지 않는다.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class InvalidRange(LedgerError):
    """조회 범위의 시작이 끝보다 늦거나 같은 경우"""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class DuplicateIdentity(LedgerError):
    """이미 존재하는 ID로 거래를 저장하려는 경우

    ID는 uuid4로 생성되므로 정상 동작 중에는 발생하지 않는다.
    발생 시 내부 오류로 취급.
    """

    def __init__(self, transaction_id: object):
        super().__init__(f"transaction with id {transaction_id} already exists")
        self.transaction_id = transaction_id
