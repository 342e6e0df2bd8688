"""
Web API 라우트 테스트

ASGI 트랜스포트로 실제 앱을 호출. 시계는 고정값으로 교체한다.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import AsyncGenerator
from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from web.app import app
from web.dependencies import get_clock, reset_ledger

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def client(now: datetime) -> AsyncGenerator[AsyncClient, None]:
    """빈 원장과 고정 시계를 사용하는 테스트 클라이언트"""
    reset_ledger()
    app.dependency_overrides[get_clock] = lambda: (lambda: now)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    reset_ledger()


async def _post(client: AsyncClient, **body) -> dict:
    response = await client.post("/api/transactions", json=body)
    assert response.status_code == 200, response.text
    return response.json()


class TestHealth:
    """GET /health"""

    async def test_health(self, client: AsyncClient) -> None:
        """상태 및 거래 수"""
        await _post(client, type="DEPOSIT", description="a", amount="1")

        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["transaction_count"] == 1


class TestCreateTransaction:
    """POST /api/transactions"""

    async def test_create(self, client: AsyncClient, now: datetime) -> None:
        """정상 기록"""
        data = await _post(
            client,
            type="DEPOSIT",
            description="Salary",
            amount="35.505",
            occurred_at="2025-08-21T10:00:00Z",
        )

        UUID(data["id"])
        assert data["type"] == "DEPOSIT"
        assert data["description"] == "Salary"
        assert Decimal(str(data["amount"])) == Decimal("35.51")
        assert datetime.fromisoformat(data["occurred_at"].replace("Z", "+00:00")) == now - timedelta(days=1)

    async def test_defaults_to_clock(self, client: AsyncClient, now: datetime) -> None:
        """occurred_at 생략 시 주입된 현재 시각"""
        data = await _post(client, type="WITHDRAWAL", description="Groceries", amount=15.5)

        assert datetime.fromisoformat(data["occurred_at"].replace("Z", "+00:00")) == now

    async def test_large_amount(self, client: AsyncClient) -> None:
        """기본 Decimal 정밀도를 넘는 금액도 400 없이 기록"""
        data = await _post(client, type="DEPOSIT", description="big", amount="1E+27")

        assert Decimal(str(data["amount"])) == Decimal("1000000000000000000000000000.00")

    async def test_empty_description_reported_first(self, client: AsyncClient) -> None:
        """빈 설명과 큰 금액이 함께 오면 설명 오류"""
        response = await client.post(
            "/api/transactions", json={"type": "DEPOSIT", "description": "", "amount": "1E+40"}
        )

        assert response.status_code == 400
        assert "description" in response.json()["detail"]

    @pytest.mark.parametrize(
        ("body", "reason"),
        [
            ({"type": "DEPOSIT", "description": "", "amount": "1"}, "description"),
            ({"type": "DEPOSIT", "description": "a", "amount": "0"}, "positive"),
            ({"type": "DEPOSIT", "description": "a", "amount": "-3"}, "positive"),
            (
                {"type": "DEPOSIT", "description": "a", "amount": "1", "occurred_at": "2025-08-23T10:00:00Z"},
                "future",
            ),
        ],
    )
    async def test_business_rule_violation_is_400(
        self, client: AsyncClient, body: dict, reason: str
    ) -> None:
        """비즈니스 규칙 위반 → 400, 저장 안 됨"""
        response = await client.post("/api/transactions", json=body)

        assert response.status_code == 400
        assert reason in response.json()["detail"]
        assert (await client.get("/api/transactions")).json() == []

    @pytest.mark.parametrize(
        "body",
        [
            {"type": "TRANSFER", "description": "a", "amount": "1"},
            {"type": "DEPOSIT", "description": "a", "amount": "lots"},
            {"type": "DEPOSIT", "amount": "1"},
            {"type": "DEPOSIT", "description": "a", "amount": "1", "occurred_at": "yesterday"},
        ],
    )
    async def test_malformed_input_is_422(self, client: AsyncClient, body: dict) -> None:
        """파싱 불가 입력 → 422"""
        response = await client.post("/api/transactions", json=body)

        assert response.status_code == 422


@pytest_asyncio.fixture
async def history(client: AsyncClient) -> list[str]:
    """now-2d, now-1d, now 거래 (설명 반환)"""
    await _post(client, type="DEPOSIT", description="t1", amount="35.50", occurred_at="2025-08-20T10:00:00Z")
    await _post(client, type="WITHDRAWAL", description="t2", amount="15.50", occurred_at="2025-08-21T10:00:00Z")
    await _post(client, type="DEPOSIT", description="t3", amount="2.35", occurred_at="2025-08-22T10:00:00Z")
    return ["t1", "t2", "t3"]


class TestGetTransactions:
    """GET /api/transactions"""

    async def test_all_newest_first(self, client: AsyncClient, history) -> None:
        """전체 조회 최신순"""
        response = await client.get("/api/transactions")

        assert response.status_code == 200
        assert [t["description"] for t in response.json()] == ["t3", "t2", "t1"]

    async def test_from(self, client: AsyncClient, history) -> None:
        """from = now-30h"""
        response = await client.get("/api/transactions", params={"from": "2025-08-21T04:00:00Z"})

        assert [t["description"] for t in response.json()] == ["t3", "t2"]

    async def test_to(self, client: AsyncClient, history) -> None:
        """to = now-30h"""
        response = await client.get("/api/transactions", params={"to": "2025-08-21T04:00:00Z"})

        assert [t["description"] for t in response.json()] == ["t1"]

    async def test_from_to(self, client: AsyncClient, history) -> None:
        """[now-30h, now-20h]"""
        response = await client.get(
            "/api/transactions",
            params={"from": "2025-08-21T04:00:00Z", "to": "2025-08-21T14:00:00Z"},
        )

        assert [t["description"] for t in response.json()] == ["t2"]

    async def test_offset_bounds(self, client: AsyncClient, history) -> None:
        """오프셋 포함 경계는 UTC로 변환되어 비교"""
        response = await client.get("/api/transactions", params={"from": "2025-08-21T12:00:00+02:00"})

        assert [t["description"] for t in response.json()] == ["t3", "t2"]

    @pytest.mark.parametrize(
        "params",
        [
            {"from": "2025-08-21T10:00:00Z", "to": "2025-08-21T10:00:00Z"},
            {"from": "2025-08-22T10:00:00Z", "to": "2025-08-21T10:00:00Z"},
        ],
    )
    async def test_invalid_range_is_400(self, client: AsyncClient, params: dict) -> None:
        """from >= to → 400"""
        response = await client.get("/api/transactions", params=params)

        assert response.status_code == 400
        assert response.json()["detail"] == "'from' must be before 'to'"


class TestBalance:
    """GET /api/balance"""

    async def test_empty(self, client: AsyncClient) -> None:
        """거래 없음 → 0"""
        response = await client.get("/api/balance")

        assert response.status_code == 200
        assert Decimal(str(response.json()["balance"])) == Decimal("0")

    async def test_sum(self, client: AsyncClient) -> None:
        """입금 - 출금"""
        await _post(client, type="DEPOSIT", description="d1", amount="35.50")
        await _post(client, type="WITHDRAWAL", description="w1", amount="15.50")
        await _post(client, type="DEPOSIT", description="d2", amount="2.35")

        data = (await client.get("/api/balance")).json()

        assert Decimal(str(data["balance"])) == Decimal("22.35")
        assert data["currency"] == "EUR"

    async def test_negative(self, client: AsyncClient) -> None:
        """음수 잔액"""
        await _post(client, type="DEPOSIT", description="d1", amount="35.50")
        await _post(client, type="WITHDRAWAL", description="w1", amount="15.50")
        await _post(client, type="WITHDRAWAL", description="w2", amount="30")

        data = (await client.get("/api/balance")).json()

        assert Decimal(str(data["balance"])) == Decimal("-10.00")
