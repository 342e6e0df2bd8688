"""
Transaction 저장소

프로세스 수명 동안 거래를 메모리에 보관 (재시작 시 소멸)
"""

import logging
import threading
from uuid import UUID

from core.ledger.errors import DuplicateIdentity
from core.ledger.transaction import Transaction

logger = logging.getLogger(__name__)


class TransactionStore:
    """인메모리 거래 저장소

    추가 전용(append-only). 수정/삭제 없음.
    중복 확인과 삽입은 하나의 락 안에서 원자적으로 수행된다.
    """

    def __init__(self) -> None:
        self._transactions: dict[UUID, Transaction] = {}
        self._lock = threading.Lock()

    def add(self, transaction: Transaction) -> Transaction:
        """거래 저장

        Args:
            transaction: 저장할 거래

        Returns:
            저장된 거래 (입력과 동일 객체)

        Raises:
            DuplicateIdentity: 같은 id의 거래가 이미 있는 경우
        """
        with self._lock:
            if transaction.id in self._transactions:
                raise DuplicateIdentity(transaction.id)
            self._transactions[transaction.id] = transaction
            size = len(self._transactions)

        logger.debug(f"Stored transaction: {transaction.id} (size={size})")
        return transaction

    def all(self) -> list[Transaction]:
        """전체 거래 스냅샷 반환

        순서는 보장하지 않는다. 반환된 리스트를 수정해도 저장소에는 영향 없음.

        Returns:
            거래 목록 (비어 있으면 빈 리스트)
        """
        with self._lock:
            return list(self._transactions.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)
