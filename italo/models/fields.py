"""응답 딕셔너리 필드 접근 헬퍼"""

from __future__ import annotations

from typing import Any, Mapping

from italo.errors import ResponseShapeError


def as_mapping(data: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ResponseShapeError(
            f"{context}: expected object, got {type(data).__name__}"
        )
    return data


def as_list(data: Any, context: str) -> list[Any]:
    if not isinstance(data, list):
        raise ResponseShapeError(
            f"{context}: expected array, got {type(data).__name__}"
        )
    return data


def require(data: Mapping[str, Any], key: str, context: str) -> Any:
    """필수 키. 없거나 null이면 ResponseShapeError (기본값으로 대체하지 않음)"""
    value = data.get(key)
    if value is None:
        raise ResponseShapeError(f"{context}: missing required field {key!r}")
    return value


def _text(value: Any, key: str, context: str) -> str:
    # 문자열, 그리고 번호 필드에 오는 정수만 허용 (bool은 int지만 제외)
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise ResponseShapeError(
        f"{context}: field {key!r} is not a string: {type(value).__name__}"
    )


def require_str(data: Mapping[str, Any], key: str, context: str) -> str:
    return _text(require(data, key, context), key, context)


def require_bool(data: Mapping[str, Any], key: str, context: str) -> bool:
    """JSON true/false만 허용 ("false" 같은 문자열은 거부)"""
    value = require(data, key, context)
    if not isinstance(value, bool):
        raise ResponseShapeError(
            f"{context}: field {key!r} is not a boolean: {value!r}"
        )
    return value


def optional_str(data: Mapping[str, Any], key: str, context: str = "") -> str:
    """선택 필드. 없거나 null이면 빈 문자열"""
    value = data.get(key)
    return "" if value is None else _text(value, key, context or key)
