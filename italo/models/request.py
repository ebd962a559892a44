"""여정 검색 요청 빌더

기본값으로 생성 후 fluent setter로 필드를 하나씩 채운다.
각 setter는 자기 필드의 제약만 검사하고, 왕복 일관성은
set_round_trip 한 곳에서 검사한다.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from italo.errors import IncompleteJourneyRequest, InvalidRoundTrip
from italo.models.station import Station
from italo.skills.timestamp import encode

DEFAULT_CURRENCY = "EUR"
DEFAULT_SOURCE_SYSTEM = 1


def _validate_count(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name}는 정수여야 합니다: {value!r}")
    if value < 0:
        raise ValueError(f"{name}는 0 이상이어야 합니다: {value}")
    return value


class JourneyRequest:
    """여정 검색 요청 (find_journeys 입력)"""

    __slots__ = (
        "departure_station", "arrival_station",
        "interval_start_date_time", "interval_end_date_time",
        "adult_number", "child_number", "infant_number", "senior_number",
        "override_interval_time_restriction",
        "currency_code", "is_guest", "round_trip",
        "round_trip_interval_start_date_time",
        "round_trip_interval_end_date_time",
    )

    def __init__(self) -> None:
        self.departure_station = ""
        self.arrival_station = ""
        self.interval_start_date_time = ""
        self.interval_end_date_time = ""
        self.adult_number = 1
        self.child_number = 0
        self.infant_number = 0
        self.senior_number = 0
        self.override_interval_time_restriction = False
        self.currency_code = DEFAULT_CURRENCY
        self.is_guest = True
        self.round_trip = False
        self.round_trip_interval_start_date_time: Optional[str] = None
        self.round_trip_interval_end_date_time: Optional[str] = None

    # ── 역 ────────────────────────────────────────────────────────

    def set_departure_station(self, station: Station) -> JourneyRequest:
        self.departure_station = station.code
        return self

    def set_arrival_station(self, station: Station) -> JourneyRequest:
        self.arrival_station = station.code
        return self

    # ── 검색 구간 ────────────────────────────────────────────────

    def set_interval_start_date_time(self, value: datetime) -> JourneyRequest:
        """여정 검색 시작 시각"""
        self.interval_start_date_time = encode(value)
        return self

    def set_interval_end_date_time(self, value: datetime) -> JourneyRequest:
        """여정 검색 종료 시각"""
        self.interval_end_date_time = encode(value)
        return self

    def set_override_interval_time_restriction(self, value: bool) -> JourneyRequest:
        """검색 구간 시각 제한 무시"""
        self.override_interval_time_restriction = bool(value)
        return self

    # ── 승객 ────────────────────────────────────────────────────

    def set_adult_number(self, value: int) -> JourneyRequest:
        self.adult_number = _validate_count("adult_number", value)
        return self

    def set_child_number(self, value: int) -> JourneyRequest:
        self.child_number = _validate_count("child_number", value)
        return self

    def set_infant_number(self, value: int) -> JourneyRequest:
        self.infant_number = _validate_count("infant_number", value)
        return self

    def set_senior_number(self, value: int) -> JourneyRequest:
        self.senior_number = _validate_count("senior_number", value)
        return self

    def set_currency_code(self, value: str) -> JourneyRequest:
        """금액 통화 (기본 EUR)"""
        value = value.strip().upper()
        if not value:
            raise ValueError("통화 코드가 비어 있습니다")
        self.currency_code = value
        return self

    # ── 왕복 ────────────────────────────────────────────────────

    def set_round_trip(
        self,
        round_trip: bool,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> JourneyRequest:
        """왕복 검색 설정

        round_trip=False면 start/end 인자와 무관하게 두 필드를 모두 지운다.
        round_trip=True면 start/end 둘 다 필요하며, 하나라도 없으면
        InvalidRoundTrip. 실패 시 기존 상태는 그대로 유지된다.
        """
        if not round_trip:
            self.round_trip = False
            self.round_trip_interval_start_date_time = None
            self.round_trip_interval_end_date_time = None
            return self

        if start is None or end is None:
            raise InvalidRoundTrip(start, end)

        self.round_trip = True
        self.round_trip_interval_start_date_time = encode(start)
        self.round_trip_interval_end_date_time = encode(end)
        return self

    # ── 직렬화 ──────────────────────────────────────────────────

    def missing_fields(self) -> list[str]:
        required = (
            ("DepartureStation", self.departure_station),
            ("ArrivalStation", self.arrival_station),
            ("IntervalStartDateTime", self.interval_start_date_time),
            ("IntervalEndDateTime", self.interval_end_date_time),
        )
        return [name for name, value in required if not value]

    def to_payload(self) -> dict[str, Any]:
        """GetAvailableTrains 본문. 왕복 필드는 설정된 경우에만 포함한다."""
        missing = self.missing_fields()
        if missing:
            raise IncompleteJourneyRequest(missing)

        payload: dict[str, Any] = {
            "DepartureStation": self.departure_station,
            "ArrivalStation": self.arrival_station,
            "IntervalStartDateTime": self.interval_start_date_time,
            "IntervalEndDateTime": self.interval_end_date_time,
            "AdultNumber": self.adult_number,
            "ChildNumber": self.child_number,
            "InfantNumber": self.infant_number,
            "SeniorNumber": self.senior_number,
            "OverrideIntervalTimeRestriction": self.override_interval_time_restriction,
            "CurrencyCode": self.currency_code,
            "IsGuest": self.is_guest,
            "RoundTrip": self.round_trip,
        }
        if self.round_trip_interval_start_date_time is not None:
            payload["RoundTripIntervalStartDateTime"] = (
                self.round_trip_interval_start_date_time
            )
        if self.round_trip_interval_end_date_time is not None:
            payload["RoundTripIntervalEndDateTime"] = (
                self.round_trip_interval_end_date_time
            )
        return payload

    def serialize(
        self,
        signature: str,
        source_system: int = DEFAULT_SOURCE_SYSTEM,
    ) -> dict[str, Any]:
        """세션 서명과 source system ID를 포함한 전송 봉투"""
        return {
            "Signature": signature,
            "SourceSystem": source_system,
            "GetAvailableTrains": self.to_payload(),
        }

    def summary(self) -> str:
        parts = [
            f"{self.departure_station}→{self.arrival_station}",
            f"성인 {self.adult_number}",
        ]
        for label, count in (
            ("어린이", self.child_number),
            ("유아", self.infant_number),
            ("경로", self.senior_number),
        ):
            if count:
                parts.append(f"{label} {count}")
        if self.round_trip:
            parts.append("왕복")
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"JourneyRequest({self.summary()})"
