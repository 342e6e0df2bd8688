"""
pytest 공통 fixture 정의

고정 시계 기준 시각과 Ledger 구성 요소, 설정 파일 fixture
"""

import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

from core.config.loader import Settings
from core.ledger.service import LedgerService
from core.ledger.store import TransactionStore

# 모든 시간 의존 테스트의 기준 시각
NOW = datetime(2025, 8, 22, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """고정 현재 시각 (UTC)"""
    return NOW


@pytest.fixture
def store() -> TransactionStore:
    """빈 인메모리 저장소"""
    return TransactionStore()


@pytest.fixture
def ledger(store: TransactionStore) -> LedgerService:
    """실제 저장소를 사용하는 LedgerService (mock 아님)"""
    return LedgerService(store)


@pytest.fixture(autouse=True)
def reset_settings():
    """Settings 싱글턴 초기화 (테스트 간 격리)"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성"""
    settings_content = """# 테스트용 settings.yaml
web:
  host: "0.0.0.0"
  port: 9090

logging:
  level: debug

ledger:
  currency: chf
"""
    settings_path = temp_dir / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_invalid_port(temp_dir: Path) -> Path:
    """잘못된 포트의 settings.yaml 파일 생성"""
    settings_content = """web:
  port: "eighty"
"""
    settings_path = temp_dir / "settings_invalid_port.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path
