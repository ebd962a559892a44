"""데이터 모델: 운행 중 열차 실시간 정보"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from italo.errors import ResponseShapeError
from italo.models.fields import (
    as_list,
    as_mapping,
    optional_str,
    require,
    require_bool,
    require_str,
)


def _as_int(data: Mapping[str, Any], key: str, context: str) -> int:
    value = require(data, key, context)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ResponseShapeError(
            f"{context}: field {key!r} is not an integer: {value!r}"
        ) from None


@dataclass(frozen=True, slots=True)
class Disruption:
    """운행 장애 정보"""

    delay_amount: int  # 지연(분)
    location_code: str
    warning: bool
    running_state: int

    @classmethod
    def from_dict(cls, data: Any) -> Disruption:
        ctx = "Disruption"
        data = as_mapping(data, ctx)
        return cls(
            delay_amount=_as_int(data, "DelayAmount", ctx),
            location_code=require_str(data, "LocationCode", ctx),
            warning=require_bool(data, "Warning", ctx),
            running_state=_as_int(data, "RunningState", ctx),
        )


@dataclass(frozen=True, slots=True)
class TrainStation:
    """열차 운행 정보가 붙은 역"""

    location_code: str
    location_description: str
    rfi_location_code: str
    estimated_departure_time: str
    actual_departure_time: str
    estimated_arrival_time: str
    actual_arrival_time: str
    platform: Optional[str]
    sequence: int  # 운행 계획상 역 순번

    @classmethod
    def from_dict(cls, data: Any) -> TrainStation:
        ctx = "TrainStation"
        data = as_mapping(data, ctx)
        platform = data.get("ActualArrivalPlatform")
        return cls(
            location_code=require_str(data, "LocationCode", ctx),
            location_description=require_str(data, "LocationDescription", ctx),
            rfi_location_code=require_str(data, "RfiLocationCode", ctx),
            estimated_departure_time=require_str(data, "EstimatedDepartureTime", ctx),
            actual_departure_time=require_str(data, "ActualDepartureTime", ctx),
            estimated_arrival_time=require_str(data, "EstimatedArrivalTime", ctx),
            actual_arrival_time=require_str(data, "ActualArrivalTime", ctx),
            platform=None if platform is None else optional_str(data, "ActualArrivalPlatform", ctx),
            sequence=_as_int(data, "StationNumber", ctx),
        )


@dataclass(frozen=True, slots=True)
class TrainSchedule:
    """열차 운행 계획"""

    train_number: str
    rfi_train_number: str
    departure_time: str
    departure_station_name: str
    arrival_time: str
    arrival_station_name: str
    disruption: Disruption
    departure_station: TrainStation
    stations_with_stop: tuple[TrainStation, ...]      # 이미 정차한 역
    stations_with_transit: tuple[TrainStation, ...]   # 앞으로 정차할 역

    @classmethod
    def from_dict(cls, data: Any) -> TrainSchedule:
        ctx = "TrainSchedule"
        data = as_mapping(data, ctx)
        stopped = as_list(require(data, "StazioniFerme", ctx), "StazioniFerme")
        upcoming = as_list(require(data, "StazioniNonFerme", ctx), "StazioniNonFerme")
        return cls(
            train_number=require_str(data, "TrainNumber", ctx),
            rfi_train_number=require_str(data, "RfiTrainNumber", ctx),
            departure_time=require_str(data, "DepartureDate", ctx),
            departure_station_name=require_str(data, "DepartureStationDescription", ctx),
            arrival_time=require_str(data, "ArrivalDate", ctx),
            arrival_station_name=require_str(data, "ArrivalStationDescription", ctx),
            # 서비스 측 철자 그대로
            disruption=Disruption.from_dict(require(data, "Distruption", ctx)),
            departure_station=TrainStation.from_dict(
                require(data, "StazionePartenza", ctx)
            ),
            stations_with_stop=tuple(TrainStation.from_dict(s) for s in stopped),
            stations_with_transit=tuple(TrainStation.from_dict(s) for s in upcoming),
        )


@dataclass(frozen=True, slots=True)
class TrainRealtime:
    """운행 중 열차 실시간 데이터"""

    last_update: str
    train_schedule: TrainSchedule

    @classmethod
    def from_dict(cls, data: Any) -> TrainRealtime:
        ctx = "TrainRealtime"
        data = as_mapping(data, ctx)
        return cls(
            last_update=require_str(data, "LastUpdate", ctx),
            train_schedule=TrainSchedule.from_dict(require(data, "TrainSchedule", ctx)),
        )

    def summary(self) -> str:
        s = self.train_schedule
        delay = s.disruption.delay_amount
        status = f"+{delay}분" if delay > 0 else "정시"
        return (
            f"Italo {s.train_number} "
            f"{s.departure_station_name} {s.departure_time} → "
            f"{s.arrival_station_name} {s.arrival_time} ({status})"
        )
