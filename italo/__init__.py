"""Italo 열차 정보 클라이언트

구성:
  ItaloApi          - HTTP 호출 (역 목록, 실시간 전광판/열차, 여정 검색)
  JourneyRequest    - 여정 검색 요청 빌더
  build_catalog     - 역 목록 페이지 → Station 목록
  timestamp         - /Date(...)/ 타임스탬프 코덱
"""

from italo.client import ItaloApi
from italo.errors import (
    IncompleteJourneyRequest,
    InvalidRoundTrip,
    ItaloError,
    MalformedJSON,
    MalformedTimestamp,
    MarkerNotFound,
    ResponseShapeError,
    SessionInitFailed,
    TransportError,
)
from italo.models.config import ClientConfig
from italo.models.journey import (
    Journey,
    JourneyResults,
    JourneySegment,
    JourneysSolution,
    Stop,
)
from italo.models.request import JourneyRequest
from italo.models.station import Station, StationRealtime, StationTrainRealtime
from italo.models.train import Disruption, TrainRealtime, TrainSchedule, TrainStation
from italo.skills.station_catalog import build_catalog

__version__ = "0.3.0"

__all__ = [
    "ItaloApi",
    "ClientConfig",
    "JourneyRequest",
    "build_catalog",
    "Station",
    "StationRealtime",
    "StationTrainRealtime",
    "TrainRealtime",
    "TrainSchedule",
    "TrainStation",
    "Disruption",
    "JourneyResults",
    "JourneysSolution",
    "Journey",
    "JourneySegment",
    "Stop",
    "ItaloError",
    "TransportError",
    "SessionInitFailed",
    "MarkerNotFound",
    "MalformedJSON",
    "MalformedTimestamp",
    "ResponseShapeError",
    "InvalidRoundTrip",
    "IncompleteJourneyRequest",
]
