"""CLI 진입점 테스트"""

from __future__ import annotations

import argparse
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from italo.errors import InvalidRoundTrip, MarkerNotFound
from italo.main import (
    build_journey_request,
    build_parser,
    cli_entry,
    cmd_board,
    cmd_journeys,
    cmd_stations,
    main,
    parse_count,
    parse_datetime,
)
from italo.models.journey import JourneyResults
from italo.models.station import StationRealtime


class TestParseHelpers:
    def test_datetime_naive_is_utc(self):
        assert parse_datetime("2026-11-02T07:30") == datetime(
            2026, 11, 2, 7, 30, tzinfo=timezone.utc
        )

    def test_date_only(self):
        assert parse_datetime("2026-11-02") == datetime(2026, 11, 2, tzinfo=timezone.utc)

    def test_keeps_offset(self):
        value = parse_datetime("2026-11-02T07:30+01:00")
        assert value.utcoffset() == timedelta(hours=1)

    def test_invalid_datetime(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_datetime("02/11/2026")

    def test_count(self):
        assert parse_count("3") == 3
        with pytest.raises(argparse.ArgumentTypeError):
            parse_count("-1")
        with pytest.raises(argparse.ArgumentTypeError):
            parse_count("due")


class TestBuildJourneyRequest:
    def _args(self, *extra: str) -> argparse.Namespace:
        return build_parser().parse_args(
            ["journeys", "-d", "MC_", "-a", "RMT", "--start", "2026-11-02T07:00", *extra]
        )

    def test_default_end_is_six_hours(self, milano, roma):
        r = build_journey_request(self._args(), milano, roma)
        start = datetime(2026, 11, 2, 7, tzinfo=timezone.utc)
        assert r.interval_end_date_time == f"/Date({int((start + timedelta(hours=6)).timestamp())}+0000)/"
        assert r.round_trip is False

    def test_passengers(self, milano, roma):
        r = build_journey_request(
            self._args("--adults", "2", "--children", "1", "--seniors", "1"),
            milano, roma,
        )
        assert (r.adult_number, r.child_number, r.senior_number) == (2, 1, 1)

    def test_round_trip(self, milano, roma):
        r = build_journey_request(
            self._args(
                "--return-start", "2026-11-05T16:00",
                "--return-end", "2026-11-05T22:00",
            ),
            milano, roma,
        )
        assert r.round_trip is True
        assert r.round_trip_interval_start_date_time is not None

    def test_half_round_trip_rejected(self, milano, roma):
        with pytest.raises(InvalidRoundTrip):
            build_journey_request(
                self._args("--return-start", "2026-11-05T16:00"), milano, roma,
            )


class TestCommands:
    @pytest.mark.asyncio
    async def test_stations_search(self, milano, roma, capsys) -> None:
        api = MagicMock()
        api.station_list = AsyncMock(return_value=[milano, roma])
        args = build_parser().parse_args(["stations", "--search", "roma"])
        await cmd_stations(api, args)
        out = capsys.readouterr().out
        assert "Roma Termini" in out
        assert "Milano Centrale" not in out

    @pytest.mark.asyncio
    async def test_board_unknown_station(self, milano) -> None:
        api = MagicMock()
        api.station_list = AsyncMock(return_value=[milano])
        args = build_parser().parse_args(["board", "Venezia"])
        with pytest.raises(ValueError, match="Venezia"):
            await cmd_board(api, args)

    @pytest.mark.asyncio
    async def test_board_departures(self, milano, board_response, capsys) -> None:
        api = MagicMock()
        api.station_list = AsyncMock(return_value=[milano])
        api.station_realtime = AsyncMock(return_value=StationRealtime.from_dict(board_response))
        await cmd_board(api, build_parser().parse_args(["board", "MC_"]))
        out = capsys.readouterr().out
        assert "8158" in out
        assert "9911" not in out

    @pytest.mark.asyncio
    async def test_journeys(self, milano, roma, journey_response, capsys) -> None:
        api = MagicMock()
        api.station_list = AsyncMock(return_value=[milano, roma])
        api.find_journeys = AsyncMock(return_value=JourneyResults.from_dict(journey_response))
        args = build_parser().parse_args(
            ["journeys", "-d", "Milano Centrale", "-a", "roma-termini", "--start", "2026-11-02"]
        )
        await cmd_journeys(api, args)
        request = api.find_journeys.call_args.args[0]
        assert request.departure_station == "MC_"
        assert request.arrival_station == "RMT"
        out = capsys.readouterr().out
        assert "[2023-11-14]" in out
        assert "Italo 8158" in out
        assert "Italo 9911+8922 (시각 해석 실패" in out


class TestMain:
    def test_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_success(self):
        with patch("italo.main.run", new_callable=AsyncMock) as mock_run, \
                patch("italo.main.setup_logging"):
            assert main(["train", "8158"]) == 0
        assert mock_run.call_args.args[0].number == "8158"

    def test_cli_entry_exits_with_main_status(self):
        with patch("italo.main.main", return_value=1):
            with pytest.raises(SystemExit) as exc:
                cli_entry()
        assert exc.value.code == 1

    def test_error_exit_code(self, capsys):
        with patch(
            "italo.main.run", new_callable=AsyncMock,
            side_effect=MarkerNotFound("stationList = "),
        ), patch("italo.main.setup_logging"):
            assert main(["stations"]) == 1
        assert "stationList" in capsys.readouterr().err
