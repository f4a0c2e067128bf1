"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data for REST and page requests and sends one
structured event per request to Axiom: method, path, params, JSON or form
body, status code, duration, and error reason for failed requests.
Sensitive fields (password, token, secret) are automatically masked.
"""

import json
import re
import time
from typing import Any
from urllib.parse import parse_qsl

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from axiom_py import Client as AxiomClient

from app.config import settings

# 마스킹 대상 필드 패턴 — Fields to mask in request/response bodies
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}

# 본문을 기록할 메서드 — Methods whose body is captured
_BODY_METHODS = ("POST", "PUT", "PATCH")


def _mask_dict(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else _mask_dict(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask_dict(item, depth + 1) for item in data[:20]]
    return data


def _truncate(value: Any, max_len: int = 2000) -> Any:
    """로그 크기 제한 — Truncate large values to prevent oversized logs."""
    if isinstance(value, str) and len(value) > max_len:
        return value[:max_len] + "...(truncated)"
    return value


def _parse_body(body_bytes: bytes, content_type: str) -> Any:
    """요청 본문을 로그용 값으로 변환합니다.

    Decode a request body for logging: JSON bodies and HTML form posts
    become masked dicts; anything else is summarized.
    """
    if not body_bytes:
        return None
    try:
        if content_type.startswith("application/x-www-form-urlencoded"):
            parsed: Any = dict(parse_qsl(body_bytes.decode("utf-8"), keep_blank_values=True))
        else:
            parsed = json.loads(body_bytes)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"
    return _truncate(_mask_dict(parsed))


def _error_detail(resp_body: bytes) -> str:
    """에러 응답 본문에서 사유를 추출합니다 (Extract the reason from an error body)."""
    try:
        error_data = json.loads(resp_body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return resp_body.decode("utf-8", errors="replace")[:500]

    detail = error_data.get("detail", str(error_data)) if isinstance(error_data, dict) else str(error_data)
    if not isinstance(detail, str):
        detail = json.dumps(detail, ensure_ascii=False, default=str)
    if len(detail) > 500:
        detail = detail[:500] + "..."
    return detail


def build_log_event(
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    query_params: dict[str, str] | None = None,
    path_params: dict[str, Any] | None = None,
    request_body: Any = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Axiom 로그 이벤트를 구성합니다.

    Build the Axiom event for one request. Optional parts are omitted
    when empty; query params are masked.
    """
    log_event: dict[str, Any] = {
        "service": settings.APP_NAME,
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }
    if query_params:
        log_event["query_params"] = _mask_dict(query_params)
    if path_params:
        log_event["path_params"] = {k: str(v) for k, v in path_params.items()}
    if request_body is not None:
        log_event["request_body"] = request_body
    if error:
        log_event["error"] = error
    return log_event


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API/화면 요청과 응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs every API and page request to Axiom.
    Acts as a pass-through when Axiom is not configured.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 또는 Axiom 미설정 — Skip excluded paths or when Axiom is off
        if request.url.path in _SKIP_PATHS or not self._client:
            return await call_next(request)

        start_time = time.time()
        method = request.method

        request_body: Any = None
        if method in _BODY_METHODS:
            request_body = _parse_body(
                await request.body(), request.headers.get("content-type", "")
            )

        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출 — Extract error detail from error responses
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error_detail = _error_detail(resp_body)

                # 소비한 body를 다시 응답으로 반환 — Re-wrap consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            log_event = build_log_event(
                method=method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.time() - start_time) * 1000, 2),
                query_params=dict(request.query_params) or None,
                path_params=dict(request.path_params) or None,
                request_body=request_body,
                error=error_detail,
            )
            try:
                self._client.ingest_events(self._dataset, [log_event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break request on log failure

        return response
