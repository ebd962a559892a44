"""타임스탬프 코덱 스킬

서비스 고유의 `/Date(<epoch><offset>)/` 문자열과 datetime 간 변환.
요청 파라미터 인코딩과 응답 필드 디코딩 양쪽에서 사용한다.

주의:
- 송신 값은 항상 오프셋 `+0000`으로 인코딩한다.
- 디코딩 시 오프셋은 무시한다 (알려진 단순화).
- 응답의 시간 필드는 밀리초 epoch, 기본 encode/decode는 초 단위.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Literal

from italo.errors import MalformedTimestamp

Unit = Literal["s", "ms"]

SECONDS: Unit = "s"
MILLISECONDS: Unit = "ms"

PREFIX = "/Date("
SUFFIX = ")/"
UTC_OFFSET = "+0000"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_UNIT_DELTA: dict[str, timedelta] = {
    SECONDS: timedelta(seconds=1),
    MILLISECONDS: timedelta(milliseconds=1),
}


def _unit_delta(unit: str) -> timedelta:
    try:
        return _UNIT_DELTA[unit]
    except KeyError:
        raise ValueError(f"unknown timestamp unit: {unit!r}") from None


def to_utc(value: datetime) -> datetime:
    """naive 값은 UTC로 간주, aware 값은 UTC로 변환"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def encode(value: datetime, unit: Unit = SECONDS) -> str:
    """datetime → `/Date(<epoch>+0000)/`

    epoch은 단위 미만을 버림(floor)한다. 로케일에 의존하지 않는다.
    """
    epoch = (to_utc(value) - _EPOCH) // _unit_delta(unit)
    return f"{PREFIX}{epoch}{UTC_OFFSET}{SUFFIX}"


def _epoch_digits(value: str, operation: str) -> int:
    # 첫 '(' 이후, 그 다음 첫 '+' 이전. 선택적 '-' 하나 + ASCII 숫자열만 허용
    if not isinstance(value, str):
        raise MalformedTimestamp(operation, repr(value))
    _, paren, rest = value.partition("(")
    if not paren:
        raise MalformedTimestamp(operation, value)
    digits, plus, _ = rest.partition("+")
    if not plus:
        raise MalformedTimestamp(operation, value)
    body = digits[1:] if digits.startswith("-") else digits
    if not body or not (body.isascii() and body.isdigit()):
        raise MalformedTimestamp(operation, digits)
    return int(digits)


def _from_epoch(epoch: int, unit: Unit, operation: str, raw: str) -> datetime:
    try:
        return _EPOCH + epoch * _unit_delta(unit)
    except OverflowError:
        raise MalformedTimestamp(operation, raw) from None


def decode(value: str, unit: Unit = SECONDS) -> datetime:
    """`/Date(<epoch><offset>)/` → UTC datetime. 실패 시 MalformedTimestamp."""
    epoch = _epoch_digits(value, "decode")
    return _from_epoch(epoch, unit, "decode", value)


def decode_millis(value: str) -> datetime:
    """응답 시간 필드용 (밀리초 epoch)"""
    epoch = _epoch_digits(value, "decode_millis")
    return _from_epoch(epoch, MILLISECONDS, "decode_millis", value)


def decode_date(value: str) -> date:
    """날짜 필드용 (밀리초 epoch의 UTC 달력 날짜)"""
    epoch = _epoch_digits(value, "decode_date")
    return _from_epoch(epoch, MILLISECONDS, "decode_date", value).date()
