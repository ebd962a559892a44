"""예외 계층

모든 실패는 호출자에게 전파된다. 세션 토큰 부재(지연 로그인)만이
내부에서 처리되는 유일한 조건이다.
"""

from __future__ import annotations

from typing import Optional


class ItaloError(Exception):
    """클라이언트 예외 기본 클래스"""


class TransportError(ItaloError):
    """네트워크/HTTP 계층 오류 (재시도하지 않음)"""

    def __init__(
        self,
        message: str,
        url: str = "",
        status: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class SessionInitFailed(ItaloError):
    """로그인 호출 실패. 토큰은 저장되지 않는다."""


class MarkerNotFound(ItaloError):
    """문서에서 기대한 경계 문자열을 찾지 못함 (상위 문서 포맷 변경 신호)"""

    def __init__(self, marker: str) -> None:
        super().__init__(f"marker not found: {marker!r}")
        self.marker = marker


class MalformedJSON(ItaloError):
    """추출 영역 또는 응답 본문이 JSON으로 파싱되지 않음"""

    def __init__(self, region: str, detail: str) -> None:
        super().__init__(f"malformed JSON in {region}: {detail}")
        self.region = region
        self.detail = detail


class ResponseShapeError(ItaloError):
    """JSON은 유효하지만 기대한 구조가 아님 (필수 키 누락 등)"""


class MalformedTimestamp(ItaloError):
    """/Date(...)/ 형식이 아닌 타임스탬프 문자열"""

    def __init__(self, operation: str, value: str) -> None:
        super().__init__(f"{operation}: malformed timestamp {value!r}")
        self.operation = operation
        self.value = value


class InvalidRoundTrip(ItaloError, ValueError):
    """왕복 플래그가 True인데 날짜 하나가 빠짐"""

    def __init__(self, start: Optional[object], end: Optional[object]) -> None:
        super().__init__(
            f"round trip requires both dates, got start={start!r} end={end!r}"
        )
        self.start = start
        self.end = end


class IncompleteJourneyRequest(ItaloError, ValueError):
    """필수 필드가 설정되지 않은 여정 요청"""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"journey request missing: {', '.join(missing)}")
        self.missing = tuple(missing)
