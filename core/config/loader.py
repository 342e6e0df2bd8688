"""
설정 로더

settings.yaml 로드 및 검증
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.constants import Defaults, Paths

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LedgerConfig:
    """애플리케이션 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    web_host: str = Defaults.WEB_HOST
    web_port: int = Defaults.WEB_PORT
    log_level: str = Defaults.LOG_LEVEL
    currency: str = Defaults.CURRENCY


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """최상위 섹션 반환 (없으면 빈 dict)"""
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigLoadError(f"settings.yaml의 '{name}' 섹션은 매핑이어야 합니다")
    return section


def load_config(path: Path | None = None) -> LedgerConfig:
    """settings.yaml 파일 로드

    파일이 없으면 기본값을 사용한다.

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        LedgerConfig 인스턴스

    Raises:
        ConfigLoadError: 형식이 잘못되었거나 값이 유효하지 않은 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        logger.info(f"settings.yaml 없음, 기본 설정 사용: {path}")
        return LedgerConfig()

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        return LedgerConfig()

    if not isinstance(data, dict):
        raise ConfigLoadError("settings.yaml의 최상위는 매핑이어야 합니다")

    web = _section(data, "web")
    log = _section(data, "logging")
    ledger = _section(data, "ledger")

    # port 검증
    port = web.get("port", Defaults.WEB_PORT)
    if isinstance(port, bool) or not isinstance(port, int) or not (0 < port < 65536):
        raise ConfigLoadError(f"유효하지 않은 web.port입니다: {port!r}")

    # log level 검증
    level = str(log.get("level", Defaults.LOG_LEVEL)).upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigLoadError(
            f"유효하지 않은 logging.level입니다: '{level}'. "
            f"유효한 값: {list(VALID_LOG_LEVELS)}"
        )

    currency = str(ledger.get("currency", Defaults.CURRENCY)).strip().upper()
    if len(currency) != 3:
        raise ConfigLoadError(f"ledger.currency는 3자리 통화 코드여야 합니다: '{currency}'")

    return LedgerConfig(
        web_host=str(web.get("host", Defaults.WEB_HOST)),
        web_port=port,
        log_level=level,
        currency=currency,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: LedgerConfig | None = None

    def __new__(cls, config_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config_path: Path | None = None) -> None:
        if self._config is None:
            type(self)._config = load_config(config_path)

    @property
    def web_host(self) -> str:
        """Web 바인드 호스트"""
        assert self._config is not None
        return self._config.web_host

    @property
    def web_port(self) -> int:
        """Web 바인드 포트"""
        assert self._config is not None
        return self._config.web_port

    @property
    def log_level(self) -> int:
        """로그 레벨 (logging 모듈 상수)"""
        assert self._config is not None
        return logging.getLevelName(self._config.log_level)

    @property
    def currency(self) -> str:
        """표시용 통화 코드"""
        assert self._config is not None
        return self._config.currency

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(config_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        config_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(config_path)
