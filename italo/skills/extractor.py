"""임베디드 데이터 추출 스킬

HTML/JS 문서에서 고정 마커 사이에 들어있는 JSON 조각을 잘라낸다.
문자열 슬라이싱(extract_between)과 JSON 파싱(parse_json_region)을 분리해
문서 포맷 변경(MarkerNotFound)과 페이로드 포맷 변경(MalformedJSON)을
구분할 수 있게 한다.
"""

from __future__ import annotations

import json
from typing import Any

from italo.errors import MalformedJSON, MarkerNotFound

STATEMENT_TERMINATOR = ";"


def trim_statement(region: str) -> str:
    """뒤쪽 공백과 문장 종결자(;) 하나 제거"""
    region = region.rstrip()
    if region.endswith(STATEMENT_TERMINATOR):
        region = region[: -len(STATEMENT_TERMINATOR)]
    return region


def strip_tail(region: str, tail: str) -> str:
    """영역 끝의 tail(다음 문장의 네임스페이스 접두어 등)을 정확히 한 번 제거.

    tail이 비었거나 영역이 tail로 끝나지 않으면 그대로 둔다.
    """
    if tail and region.endswith(tail):
        return trim_statement(region[: -len(tail)])
    return region


def extract_between(text: str, start_marker: str, end_marker: str) -> str:
    """첫 start_marker와 그 뒤 첫 end_marker 사이의 텍스트.

    뒤쪽 공백과 문장 종결자(;) 하나를 제거한다. 항상 왼쪽부터 첫 매치를 쓴다.
    """
    start = text.find(start_marker)
    if start < 0:
        raise MarkerNotFound(start_marker)
    start += len(start_marker)

    end = text.find(end_marker, start)
    if end < 0:
        raise MarkerNotFound(end_marker)

    return trim_statement(text[start:end])


def parse_json_region(text: str, region: str) -> Any:
    """추출한 영역 전체를 JSON으로 파싱. 실패 시 MalformedJSON."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedJSON(region, str(e)) from e
