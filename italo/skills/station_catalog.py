"""역 카탈로그 스킬

역 목록 페이지(HTML)에 JS 변수로 들어있는 두 목록을 잘라내어 결합한다.

    ItaloInViaggio.Resources.stationList = [{"value": ..., "label": ...}];
    ItaloInViaggio.Resources.stationCoding = [{"code": ..., "urlCoding": ...}];
    ItaloInViaggio.Resources.localizzation = ...

- 라벨 영역: stationList 마커 ~ stationCoding 마커
- 코드 영역: stationCoding 마커 ~ localization 마커 (라벨 마커 이후에서 검색)
- 각 영역은 끝의 네임스페이스 접두어를 한 번 떼어낸 뒤 전체를 엄격하게 파싱
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from italo.models.fields import as_list
from italo.models.station import Station, StationCode, StationLabel
from italo.skills.extractor import extract_between, parse_json_region, strip_tail

logger = logging.getLogger("italo.skill.catalog")


@dataclass(frozen=True, slots=True)
class CatalogMarkers:
    """영역 경계 문자열"""

    label_list: str = "stationList = "
    code_list: str = "stationCoding = "
    # 페이지 철자는 "localizzation". 두 철자 모두 매치하도록 앞부분만 사용
    boundary: str = "localiz"
    # 짧은 마커를 쓰면 각 영역 끝에 다음 문장의 접두어가 남는다
    namespace: str = "ItaloInViaggio.Resources."


DEFAULT_MARKERS = CatalogMarkers()


def parse_labels(text: str) -> list[StationLabel]:
    data = as_list(parse_json_region(text, "stationList"), "stationList")
    return [StationLabel.from_dict(item) for item in data]


def parse_codes(text: str) -> list[StationCode]:
    data = as_list(parse_json_region(text, "stationCoding"), "stationCoding")
    return [StationCode.from_dict(item) for item in data]


def label_map(labels: Iterable[StationLabel]) -> dict[str, str]:
    """value → label. 중복 키는 마지막 값이 이긴다."""
    mapping: dict[str, str] = {}
    duplicates = 0
    for item in labels:
        if item.value in mapping:
            duplicates += 1
        mapping[item.value] = item.label
    if duplicates:
        logger.debug("라벨 중복 키 %d개 (마지막 값 사용)", duplicates)
    return mapping


def build_catalog(
    document: str,
    markers: CatalogMarkers = DEFAULT_MARKERS,
) -> list[Station]:
    """역 목록 페이지 → Station 목록 (코드 목록 순서 유지, 이름 없는 역 제외)"""
    label_text = strip_tail(
        extract_between(document, markers.label_list, markers.code_list),
        markers.namespace,
    )
    # 코드 영역은 라벨 마커 이후에서만 찾는다
    tail = document[document.find(markers.label_list):]
    code_text = strip_tail(
        extract_between(tail, markers.code_list, markers.boundary),
        markers.namespace,
    )

    names = label_map(parse_labels(label_text))
    stations = [
        Station(
            code=item.code,
            url_coding=item.url_coding,
            name=names.get(item.code, ""),
        )
        for item in parse_codes(code_text)
    ]
    catalog = [s for s in stations if s.name]
    logger.info(
        "역 카탈로그 구성: %d개 (이름 없는 역 %d개 제외)",
        len(catalog), len(stations) - len(catalog),
    )
    return catalog


def find_station(stations: Iterable[Station], query: str) -> Optional[Station]:
    """코드 정확 일치 우선, 다음으로 이름/URL 조각 대소문자 무시 일치"""
    query = query.strip()
    candidates = list(stations)
    for s in candidates:
        if s.code == query:
            return s
    lowered = query.lower()
    for s in candidates:
        if s.name.lower() == lowered or s.url_coding.lower() == lowered:
            return s
    return None


def search_stations(stations: Iterable[Station], text: str) -> list[Station]:
    """이름 부분 일치 검색"""
    lowered = text.strip().lower()
    return [s for s in stations if lowered in s.name.lower()]
