"""인자 변환 에러 계층

- UnsupportedType: 어떤 핸들러도 처리하지 않는 타입 (호출 측 설정 누락)
- ParseError: 숫자/열거형/복합 리터럴 형식 오류
- ReferenceNotFound: 월드, 네임스페이스 항목 등 참조 대상 없음
"""

from __future__ import annotations

from typing import Any, Optional


class CoercionError(Exception):
    """변환 실패 기반 클래스.

    Args:
        message: 사람이 읽을 수 있는 설명
        token: 문제가 된 원본 문자열
        descriptor: 대상 타입 기술자
        cause: 하위 파싱 에러 (있으면)

    배치 변환 중 실패하면 index 가 채워진다.
    """

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        descriptor: Any = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.descriptor = descriptor
        self.cause = cause
        self.index: Optional[int] = None

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.kind,
            "message": self.message,
            "index": self.index,
            "token": self.token,
            "type": str(self.descriptor) if self.descriptor is not None else None,
        }

    def __str__(self) -> str:
        where = f" at index {self.index}" if self.index is not None else ""
        return f"{self.message}{where}"


class UnsupportedType(CoercionError):
    pass


class ParseError(CoercionError):
    pass


class ReferenceNotFound(CoercionError):
    pass
