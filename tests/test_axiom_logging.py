"""Axiom 로깅 미들웨어 테스트 — 마스킹, 본문 파싱, 이벤트 구성, 전송.

Axiom logging middleware tests — Masking, body parsing, event building,
and ingestion through a recording client in place of axiom_py.Client.
"""

from typing import Any

import pytest
from fastapi import FastAPI, Form
from httpx import ASGITransport, AsyncClient

from app.config import settings
from app.middleware import axiom_logging
from app.middleware.axiom_logging import (
    AxiomLoggingMiddleware,
    _error_detail,
    _mask_dict,
    _parse_body,
    build_log_event,
)
from app.utils.exceptions import NotFoundError


class RecordingClient:
    """ingest_events 호출을 기록하는 Axiom 클라이언트 대역."""

    def __init__(self, token: str) -> None:
        self.token = token
        self.events: list[tuple[str, list[dict[str, Any]]]] = []

    def ingest_events(self, dataset: str, events: list[dict[str, Any]]) -> None:
        self.events.append((dataset, events))


class FailingClient(RecordingClient):
    """전송이 항상 실패하는 Axiom 클라이언트 대역."""

    def ingest_events(self, dataset: str, events: list[dict[str, Any]]) -> None:
        raise RuntimeError("axiom down")


def _make_app() -> FastAPI:
    test_app = FastAPI()
    test_app.add_middleware(AxiomLoggingMiddleware)

    @test_app.post("/echo")
    async def echo(payload: dict[str, Any]) -> dict[str, Any]:
        return payload

    @test_app.post("/form")
    async def form(name: str = Form(...)) -> dict[str, str]:
        return {"name": name}

    @test_app.get("/missing/{thing_id}")
    async def missing(thing_id: str) -> dict[str, str]:
        raise NotFoundError("Order not found")

    @test_app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return test_app


@pytest.fixture
def axiom_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "AXIOM_API_TOKEN", "test-token")
    monkeypatch.setattr(settings, "AXIOM_DATASET", "shop-logs")


def _client_for(test_app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test")


class TestHelpers:
    """로깅 헬퍼 함수 테스트."""

    def test_mask_dict(self):
        """민감 필드는 중첩되어도 마스킹."""
        masked = _mask_dict({"name": "kim", "password": "pw", "nested": {"api_key": "k", "city": "서울"}})
        assert masked == {"name": "kim", "password": "***", "nested": {"api_key": "***", "city": "서울"}}

    def test_parse_json_body(self):
        """JSON 본문은 마스킹된 dict."""
        assert _parse_body(b'{"name": "kim", "token": "t"}', "application/json") == {"name": "kim", "token": "***"}

    def test_parse_form_body(self):
        """폼 본문도 dict로 기록, 빈 값 유지."""
        parsed = _parse_body(b"name=kim&city=&secret=s", "application/x-www-form-urlencoded")
        assert parsed == {"name": "kim", "city": "", "secret": "***"}

    def test_parse_other_body(self):
        """해석할 수 없는 본문은 요약 문자열, 빈 본문은 None."""
        assert _parse_body(b"not json", "text/plain") == "(non-json body)"
        assert _parse_body(b"", "application/json") is None

    def test_error_detail(self):
        """에러 본문에서 detail 추출."""
        assert _error_detail(b'{"detail": "need more stock"}') == "need more stock"
        assert _error_detail(b"<html>oops</html>") == "<html>oops</html>"
        assert '"loc"' in _error_detail(b'{"detail": [{"loc": ["body", "name"]}]}')

    def test_build_log_event(self):
        """빈 선택 항목은 생략, 경로 파라미터는 문자열."""
        event = build_log_event("GET", "/orders", 200, 1.5)
        assert event == {
            "service": settings.APP_NAME,
            "method": "GET",
            "path": "/orders",
            "status_code": 200,
            "duration_ms": 1.5,
        }

        event = build_log_event(
            "POST", "/orders/1/cancel", 400, 2.0,
            query_params={"token": "t"}, path_params={"order_id": 1},
            request_body={"count": 11}, error="need more stock",
        )
        assert event["query_params"] == {"token": "***"}
        assert event["path_params"] == {"order_id": "1"}
        assert event["request_body"] == {"count": 11}
        assert event["error"] == "need more stock"


class TestMiddleware:
    """미들웨어 전송 테스트."""

    async def test_pass_through_when_not_configured(self, monkeypatch: pytest.MonkeyPatch):
        """Axiom 미설정이면 클라이언트를 만들지 않음."""
        monkeypatch.setattr(settings, "AXIOM_API_TOKEN", "")
        created: list[RecordingClient] = []
        monkeypatch.setattr(axiom_logging, "AxiomClient", lambda token: created.append(RecordingClient(token)))

        async with _client_for(_make_app()) as ac:
            res = await ac.post("/echo", json={"a": 1})
        assert res.status_code == 200
        assert created == []

    async def test_logs_request(self, monkeypatch: pytest.MonkeyPatch, axiom_enabled: None):
        """요청 하나당 이벤트 하나, 본문은 마스킹."""
        clients: list[RecordingClient] = []

        def _factory(token: str) -> RecordingClient:
            clients.append(RecordingClient(token))
            return clients[-1]

        monkeypatch.setattr(axiom_logging, "AxiomClient", _factory)

        async with _client_for(_make_app()) as ac:
            res = await ac.post("/echo", json={"name": "kim", "password": "pw"})
        assert res.json() == {"name": "kim", "password": "pw"}

        assert clients[0].token == "test-token"
        dataset, events = clients[0].events[0]
        assert dataset == "shop-logs"
        assert events[0]["method"] == "POST"
        assert events[0]["path"] == "/echo"
        assert events[0]["status_code"] == 200
        assert events[0]["request_body"] == {"name": "kim", "password": "***"}
        assert "error" not in events[0]

    async def test_logs_form_post(self, monkeypatch: pytest.MonkeyPatch, axiom_enabled: None):
        """폼 요청 본문 기록, 핸들러는 폼을 그대로 받음."""
        client = RecordingClient("test-token")
        monkeypatch.setattr(axiom_logging, "AxiomClient", lambda token: client)

        async with _client_for(_make_app()) as ac:
            res = await ac.post("/form", data={"name": "userA"})
        assert res.json() == {"name": "userA"}
        assert client.events[0][1][0]["request_body"] == {"name": "userA"}

    async def test_logs_error_detail(self, monkeypatch: pytest.MonkeyPatch, axiom_enabled: None):
        """에러 응답은 사유를 기록하고 본문을 그대로 돌려줌."""
        client = RecordingClient("test-token")
        monkeypatch.setattr(axiom_logging, "AxiomClient", lambda token: client)

        async with _client_for(_make_app()) as ac:
            res = await ac.get("/missing/abc", params={"q": "x"})
        assert res.status_code == 404
        assert res.json() == {"detail": "Order not found"}

        event = client.events[0][1][0]
        assert event["error"] == "Order not found"
        assert event["query_params"] == {"q": "x"}

    async def test_skips_health(self, monkeypatch: pytest.MonkeyPatch, axiom_enabled: None):
        """헬스 체크는 기록하지 않음."""
        client = RecordingClient("test-token")
        monkeypatch.setattr(axiom_logging, "AxiomClient", lambda token: client)

        async with _client_for(_make_app()) as ac:
            await ac.get("/health")
        assert client.events == []

    async def test_ingest_failure_does_not_break_request(self, monkeypatch: pytest.MonkeyPatch, axiom_enabled: None):
        """전송 실패해도 응답은 정상."""
        monkeypatch.setattr(axiom_logging, "AxiomClient", FailingClient)

        async with _client_for(_make_app()) as ac:
            res = await ac.post("/echo", json={"a": 1})
        assert res.status_code == 200
