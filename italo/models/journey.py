"""데이터 모델: 여정 검색 결과

JourneyResults → JourneysSolution → Journey → JourneySegment → Stop

시간 필드는 원본 문자열(`/Date(...)/`)로 보관하고 접근 시점에 디코딩한다.
타임스탬프 하나가 깨져도 전체 파싱은 실패하지 않으며, 해당 속성에
접근할 때만 MalformedTimestamp가 발생한다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from italo.errors import ResponseShapeError
from italo.models.fields import as_list, as_mapping, require, require_bool, require_str
from italo.skills.timestamp import decode_date, decode_millis


@dataclass(frozen=True, slots=True)
class Stop:
    """열차 정차 구간"""

    raw_departure_time: str
    raw_arrival_time: str
    departure_station: str
    arrival_station: str

    @classmethod
    def from_dict(cls, data: Any) -> Stop:
        ctx = "Stop"
        data = as_mapping(data, ctx)
        return cls(
            raw_departure_time=require_str(data, "STD", ctx),
            raw_arrival_time=require_str(data, "STA", ctx),
            departure_station=require_str(data, "DepartureStation", ctx),
            arrival_station=require_str(data, "ArrivalStation", ctx),
        )

    @property
    def departure_time(self) -> datetime:
        return decode_millis(self.raw_departure_time)

    @property
    def arrival_time(self) -> datetime:
        return decode_millis(self.raw_arrival_time)


@dataclass(frozen=True, slots=True)
class JourneySegment:
    """단일 열차 구간"""

    raw_departure_time: str
    raw_arrival_time: str
    train_number: str
    no_stop_train: bool  # 직행 여부
    stops: tuple[Stop, ...]

    @classmethod
    def from_dict(cls, data: Any) -> JourneySegment:
        ctx = "JourneySegment"
        data = as_mapping(data, ctx)
        legs = as_list(require(data, "Legs", ctx), "Legs")
        return cls(
            raw_departure_time=require_str(data, "STD", ctx),
            raw_arrival_time=require_str(data, "STA", ctx),
            train_number=require_str(data, "TrainNumber", ctx),
            no_stop_train=require_bool(data, "NoStopTrain", ctx),
            stops=tuple(Stop.from_dict(leg) for leg in legs),
        )

    @property
    def departure_time(self) -> datetime:
        return decode_millis(self.raw_departure_time)

    @property
    def arrival_time(self) -> datetime:
        return decode_millis(self.raw_arrival_time)


@dataclass(frozen=True, slots=True)
class Journey:
    """한 대 이상의 열차로 구성된 여정"""

    segments: tuple[JourneySegment, ...]

    @classmethod
    def from_dict(cls, data: Any) -> Journey:
        data = as_mapping(data, "Journey")
        segments = as_list(require(data, "Segments", "Journey"), "Segments")
        return cls(segments=tuple(JourneySegment.from_dict(s) for s in segments))

    def _require_segments(self) -> tuple[JourneySegment, ...]:
        if not self.segments:
            raise ResponseShapeError("Journey: no segments")
        return self.segments

    @property
    def departure_time(self) -> datetime:
        return self._require_segments()[0].departure_time

    @property
    def arrival_time(self) -> datetime:
        return self._require_segments()[-1].arrival_time

    @property
    def changes(self) -> int:
        return max(len(self.segments) - 1, 0)

    def display(self) -> str:
        trains = "+".join(s.train_number for s in self.segments)
        return (
            f"{self.departure_time:%H:%M}→{self.arrival_time:%H:%M} "
            f"Italo {trains} (환승 {self.changes}회)"
        )


@dataclass(frozen=True, slots=True)
class JourneysSolution:
    """특정 날짜의 여정 목록"""

    raw_departure_date: str
    journeys: tuple[Journey, ...]

    @classmethod
    def from_dict(cls, data: Any) -> JourneysSolution:
        ctx = "JourneysSolution"
        data = as_mapping(data, ctx)
        journeys = as_list(require(data, "Journeys", ctx), "Journeys")
        return cls(
            raw_departure_date=require_str(data, "DepartureDate", ctx),
            journeys=tuple(Journey.from_dict(j) for j in journeys),
        )

    @property
    def departure_date(self) -> date:
        # 날짜 필드도 밀리초 epoch으로 내려온다
        return decode_date(self.raw_departure_date)


@dataclass(frozen=True, slots=True)
class JourneyResults:
    """여정 검색 결과 (날짜별 대안 목록)"""

    solutions: tuple[JourneysSolution, ...]

    @classmethod
    def from_dict(cls, data: Any) -> JourneyResults:
        data = as_mapping(data, "JourneyResults")
        markets = as_list(
            require(data, "JourneyDateMarkets", "JourneyResults"),
            "JourneyDateMarkets",
        )
        return cls(solutions=tuple(JourneysSolution.from_dict(m) for m in markets))

    @property
    def journey_count(self) -> int:
        return sum(len(s.journeys) for s in self.solutions)
