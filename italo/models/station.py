"""데이터 모델: 역 메타데이터, 역 실시간 전광판

모든 모델은 frozen=True + slots=True로 불변성을 보장한다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from italo.models.fields import (
    as_list,
    as_mapping,
    optional_str,
    require,
    require_str,
)


@dataclass(frozen=True, slots=True)
class StationCode:
    """역 코드 레코드 (stationCoding 영역, camelCase)"""

    code: str
    url_coding: str

    @classmethod
    def from_dict(cls, data: Any) -> StationCode:
        data = as_mapping(data, "StationCode")
        return cls(
            code=require_str(data, "code", "StationCode"),
            url_coding=require_str(data, "urlCoding", "StationCode"),
        )


@dataclass(frozen=True, slots=True)
class StationLabel:
    """역 라벨 레코드 (stationList 영역)"""

    value: str
    label: str

    @classmethod
    def from_dict(cls, data: Any) -> StationLabel:
        data = as_mapping(data, "StationLabel")
        return cls(
            value=require_str(data, "value", "StationLabel"),
            label=require_str(data, "label", "StationLabel"),
        )


@dataclass(frozen=True, slots=True)
class Station:
    """역 메타데이터

    code: 서비스 내부 ID (station_realtime, 여정 검색에 사용)
    url_coding: 역 페이지 URL 조각
    name: 사람이 읽는 역 이름
    """

    code: str
    url_coding: str
    name: str

    def display(self) -> str:
        return f"{self.name} [{self.code}]"


@dataclass(frozen=True, slots=True)
class StationTrainRealtime:
    """역 정차 중인 열차 정보"""

    number: str
    destination: str
    scheduled_time: str
    forecast_time: str
    platform: str
    description: str

    @classmethod
    def from_dict(cls, data: Any) -> StationTrainRealtime:
        ctx = "StationTrainRealtime"
        data = as_mapping(data, ctx)
        return cls(
            number=require_str(data, "Numero", ctx),
            destination=require_str(data, "DescrizioneLocalita", ctx),
            scheduled_time=require_str(data, "OraPassaggio", ctx),
            forecast_time=optional_str(data, "NuovoOrario", ctx),
            platform=optional_str(data, "Binario", ctx),
            description=optional_str(data, "Descrizione", ctx),
        )

    @property
    def is_delayed(self) -> bool:
        return bool(self.forecast_time) and self.forecast_time != self.scheduled_time

    def display(self) -> str:
        time_part = self.scheduled_time
        if self.is_delayed:
            time_part += f" ({self.forecast_time})"
        platform = f" binario {self.platform}" if self.platform else ""
        return f"{time_part} {self.number} → {self.destination}{platform}"


@dataclass(frozen=True, slots=True)
class StationRealtime:
    """역 도착/출발 전광판"""

    arrival_board: tuple[StationTrainRealtime, ...]
    departure_board: tuple[StationTrainRealtime, ...]

    @classmethod
    def from_dict(cls, data: Any) -> StationRealtime:
        ctx = "StationRealtime"
        data = as_mapping(data, ctx)
        arrivals = as_list(require(data, "ListaTreniArrivo", ctx), "ListaTreniArrivo")
        departures = as_list(require(data, "ListaTreniPartenza", ctx), "ListaTreniPartenza")
        return cls(
            arrival_board=tuple(StationTrainRealtime.from_dict(t) for t in arrivals),
            departure_board=tuple(StationTrainRealtime.from_dict(t) for t in departures),
        )
