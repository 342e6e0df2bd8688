"""
FastAPI 애플리케이션

라우터 등록, 예외 → HTTP 상태 매핑 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.config.loader import get_settings
from core.constants import APP_TITLE, APP_VERSION, Paths
from core.ledger.errors import DuplicateIdentity, InvalidRange, InvalidTransaction
from core.logging import setup_logging
from web.routes import balance, health, transactions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    settings = get_settings()

    # 로깅 설정 (콘솔 + 파일)
    setup_logging(settings.log_level, Paths.WEB_LOGS_DIR)
    logger.info(f"Web: {APP_TITLE} {APP_VERSION} 시작 (currency={settings.currency})")

    yield

    logger.info("Web: 종료 (인메모리 거래 내역은 보존되지 않음)")


app = FastAPI(
    title=APP_TITLE,
    description=(
        "A small REST API to record deposits and withdrawals, "
        "view transaction history, and check balance."
    ),
    version=APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# =========================================================================
# 예외 핸들러 (도메인 예외 → HTTP 상태)
# =========================================================================


@app.exception_handler(InvalidTransaction)
async def invalid_transaction_handler(request: Request, exc: InvalidTransaction):
    """비즈니스 규칙 위반 → 400"""
    return JSONResponse(status_code=400, content={"detail": exc.reason})


@app.exception_handler(InvalidRange)
async def invalid_range_handler(request: Request, exc: InvalidRange):
    """조회 범위 오류 → 400"""
    logger.info(f"Rejected range: {exc.reason} ({request.url.query})")
    return JSONResponse(status_code=400, content={"detail": exc.reason})


@app.exception_handler(DuplicateIdentity)
async def duplicate_identity_handler(request: Request, exc: DuplicateIdentity):
    """ID 충돌 (내부 오류) → 500"""
    logger.error(f"Duplicate transaction id: {exc.transaction_id}")
    return JSONResponse(status_code=500, content={"detail": "internal error"})


# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(transactions.router)
app.include_router(balance.router)
