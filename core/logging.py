"""
로깅 설정

Web 프로세스 시작 시 루트 로거에 콘솔/파일 핸들러를 붙인다.
파일은 자정마다 새로 만들고 최근 7일치만 남긴다.
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "ledger.log"
LOG_FILE_BACKUP_COUNT = 7

# 요청/연결마다 로그를 남기는 라이브러리 로거
NOISY_LOGGERS = ["uvicorn.access", "httpcore", "httpx", "asyncio"]


def setup_logging(level: int, log_dir: Path) -> logging.Logger:
    """루트 로거 초기화

    반복 호출하면 이전 핸들러를 닫고 새로 구성한다.

    Args:
        level: 콘솔/파일 공통 로그 레벨
        log_dir: 로그 파일 디렉토리 (없으면 생성)

    Returns:
        루트 Logger
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.suffix = "%Y-%m-%d"  # ledger.log.2025-08-22
    for handler in (console_handler, file_handler):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.info(f"로깅 초기화: {log_file} ({logging.getLevelName(level)})")
    return root_logger
