"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from decimal import Decimal
from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → tiny-ledger/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent

APP_TITLE: str = "Tiny Ledger API"
APP_VERSION: str = "1.0.0"


class Defaults:
    """기본값 상수 (settings.yaml 미설정 시 사용)"""

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "INFO"
    CURRENCY: str = "EUR"


class Money:
    """금액 처리 상수"""

    SCALE: int = 2  # 소수점 자리수 (통화 최소 단위)
    QUANTUM: Decimal = Decimal("0.01")
    ZERO: Decimal = Decimal("0")


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"
