"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the shop's error
taxonomy. Raised from services and domain methods and mapped to HTTP
responses by FastAPI's default exception handler.

Usage:
    from app.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("Member not found")
    raise DuplicateError("Member already exists")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (member, item, order) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when attempting to create a resource that already exists
    (e.g. signing up a member whose name is taken).

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request is invalid beyond what Pydantic validation catches
    (business rule failures, invalid state transitions).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotEnoughStockError(BadRequestError):
    """재고 부족 예외 — 주문 수량이 남은 재고보다 많을 때 사용.

    Raised by Item.remove_stock when the requested quantity exceeds stock.
    """

    def __init__(self, detail: str = "need more stock") -> None:
        super().__init__(detail=detail)


class IllegalStateError(BadRequestError):
    """상태 전이 불가 예외 — 취소할 수 없는 주문을 취소할 때 사용.

    Raised when a domain object cannot make the requested state transition
    (e.g. cancelling a delivered or already-cancelled order).
    """

    def __init__(self, detail: str = "Illegal state transition") -> None:
        super().__init__(detail=detail)
