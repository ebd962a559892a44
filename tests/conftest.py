"""pytest 공통 픽스처

모든 테스트에서 공유하는 샘플 문서/응답과 Station 객체를 제공한다.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from italo.models.station import Station

# 2023-11-14T22:13:20Z
EPOCH_S = 1700000000
EPOCH_MS = EPOCH_S * 1000


@pytest.fixture
def milano() -> Station:
    return Station(code="MC_", url_coding="milano-centrale", name="Milano Centrale")


@pytest.fixture
def roma() -> Station:
    return Station(code="RMT", url_coding="roma-termini", name="Roma Termini")


@pytest.fixture
def departure_time() -> datetime:
    return datetime(2026, 11, 2, 7, 0, tzinfo=timezone.utc)


@pytest.fixture
def station_page() -> str:
    """역 목록 페이지 (실제 페이지와 같은 네임스페이스/철자)"""
    return """<!DOCTYPE html>
<html><head><title>Italo in viaggio</title></head>
<body>
<script type="text/javascript">
    var ItaloInViaggio = ItaloInViaggio || {};
    ItaloInViaggio.Resources = {};
    ItaloInViaggio.Resources.stationList = [{"value":"MC_","label":"Milano Centrale"},{"value":"RMT","label":"Roma Termini"},{"value":"NAC","label":"Napoli Centrale"},{"value":"XXX","label":"Stazione Fantasma"}];
    ItaloInViaggio.Resources.stationCoding = [{"code":"RMT","urlCoding":"roma-termini"},{"code":"MC_","urlCoding":"milano-centrale"},{"code":"ZZZ","urlCoding":"senza-nome"},{"code":"NAC","urlCoding":"napoli-centrale"}];
    ItaloInViaggio.Resources.localizzation = {"it":{"partenze":"Partenze"}};
</script>
</body></html>
"""


@pytest.fixture
def board_response() -> dict:  # type: ignore[type-arg]
    """역 전광판 응답 mock"""
    return {
        "ListaTreniArrivo": [
            {
                "Numero": "9911",
                "DescrizioneLocalita": "Torino Porta Nuova",
                "OraPassaggio": "10:05",
                "NuovoOrario": "10:12",
                "Binario": "14",
                "Descrizione": "Treno Italo",
            },
        ],
        "ListaTreniPartenza": [
            {
                "Numero": "8158",
                "DescrizioneLocalita": "Roma Termini",
                "OraPassaggio": "10:20",
                "NuovoOrario": "10:20",
                "Binario": None,
                "Descrizione": "Treno Italo",
            },
            {
                "Numero": "8922",
                "DescrizioneLocalita": "Napoli Centrale",
                "OraPassaggio": "10:35",
                "NuovoOrario": "",
                "Binario": "7",
                "Descrizione": "",
            },
        ],
    }


def _train_station(code: str, name: str, number: int, platform: object) -> dict:  # type: ignore[type-arg]
    return {
        "LocationCode": code,
        "LocationDescription": name,
        "RfiLocationCode": f"S0{number}",
        "EstimatedDepartureTime": "10:20",
        "ActualDepartureTime": "10:22",
        "EstimatedArrivalTime": "10:15",
        "ActualArrivalTime": "10:16",
        "ActualArrivalPlatform": platform,
        "StationNumber": number,
    }


@pytest.fixture
def train_response() -> dict:  # type: ignore[type-arg]
    """열차 실시간 응답 mock"""
    return {
        "LastUpdate": "10:25",
        "TrainSchedule": {
            "TrainNumber": "8158",
            "RfiTrainNumber": "9558",
            "DepartureDate": "08:15",
            "DepartureStationDescription": "Milano Centrale",
            "ArrivalDate": "11:29",
            "ArrivalStationDescription": "Roma Termini",
            "Distruption": {
                "DelayAmount": 7,
                "LocationCode": "BO_",
                "Warning": False,
                "RunningState": 1,
            },
            "StazionePartenza": _train_station("MC_", "Milano Centrale", 0, "11"),
            "StazioniFerme": [
                _train_station("BO_", "Bologna Centrale", 1, "16"),
            ],
            "StazioniNonFerme": [
                _train_station("FIR", "Firenze S.M.N.", 2, None),
                _train_station("RMT", "Roma Termini", 3, "9"),
            ],
        },
    }


def _stop(dep_ms: int, arr_ms: int, frm: str, to: str) -> dict:  # type: ignore[type-arg]
    return {
        "STD": f"/Date({dep_ms}+0100)/",
        "STA": f"/Date({arr_ms}+0100)/",
        "DepartureStation": frm,
        "ArrivalStation": to,
    }


@pytest.fixture
def journey_response() -> dict:  # type: ignore[type-arg]
    """여정 검색 응답 mock (직행 1개 + 환승 1개)"""
    hour = 3_600_000
    return {
        "JourneyDateMarkets": [
            {
                "DepartureDate": f"/Date({EPOCH_MS}+0100)/",
                "Journeys": [
                    {
                        "Segments": [
                            {
                                "STD": f"/Date({EPOCH_MS}+0100)/",
                                "STA": f"/Date({EPOCH_MS + 3 * hour}+0100)/",
                                "TrainNumber": "8158",
                                "NoStopTrain": True,
                                "Legs": [
                                    _stop(EPOCH_MS, EPOCH_MS + 3 * hour, "MC_", "RMT"),
                                ],
                            },
                        ],
                    },
                    {
                        "Segments": [
                            {
                                "STD": f"/Date({EPOCH_MS + hour}+0100)/",
                                "STA": f"/Date({EPOCH_MS + 2 * hour}+0100)/",
                                "TrainNumber": "9911",
                                "NoStopTrain": False,
                                "Legs": [
                                    _stop(EPOCH_MS + hour, EPOCH_MS + 2 * hour, "MC_", "BO_"),
                                ],
                            },
                            {
                                "STD": f"/Date({EPOCH_MS + 2 * hour + 900_000}+0100)/",
                                "STA": "garbage",
                                "TrainNumber": "8922",
                                "NoStopTrain": False,
                                "Legs": [],
                            },
                        ],
                    },
                ],
            },
        ],
    }
