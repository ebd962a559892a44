"""Italo 열차 정보 CLI 진입점

사용 예시:
    italo stations --search milano
    italo board MC_
    italo train 8158
    italo journeys -d "Milano Centrale" -a "Roma Termini" \
        --start 2026-11-02T07:00 --end 2026-11-02T12:00
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from italo.client import ItaloApi
from italo.errors import ItaloError
from italo.models.config import ClientConfig
from italo.models.request import JourneyRequest
from italo.models.station import Station
from italo.skills.station_catalog import find_station, search_stations
from italo.utils.logging_config import setup_logging


def parse_datetime(s: str) -> datetime:
    """YYYY-MM-DD[THH:MM] 형식 (시간대 없으면 UTC)"""
    s = s.strip()
    try:
        if len(s) == 10:
            value = datetime.combine(date.fromisoformat(s), time(0, 0))
        else:
            value = datetime.fromisoformat(s)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"날짜 형식이 올바르지 않습니다: '{s}' (YYYY-MM-DDTHH:MM)"
        ) from None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def parse_count(s: str) -> int:
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"정수가 아닙니다: '{s}'") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"0 이상이어야 합니다: {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="italo",
        description="Italo 열차 정보 조회 (역, 실시간 전광판, 여정 검색)",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    p.add_argument("--log-file", default=None, help="로그 파일 경로")

    sub = p.add_subparsers(dest="command", required=True)

    st = sub.add_parser("stations", help="역 목록")
    st.add_argument("--search", default=None, help="역 이름 부분 검색")

    bd = sub.add_parser("board", help="역 실시간 전광판")
    bd.add_argument("station", help="역 코드 또는 이름")
    bd.add_argument(
        "--arrivals", action="store_true", help="도착 전광판 (기본: 출발)"
    )

    tr = sub.add_parser("train", help="열차 실시간 정보")
    tr.add_argument("number", help="열차 번호")

    jr = sub.add_parser("journeys", help="여정 검색")
    jr.add_argument("-d", "--departure", required=True, help="출발역 (코드 또는 이름)")
    jr.add_argument("-a", "--arrival", required=True, help="도착역 (코드 또는 이름)")
    jr.add_argument("--start", type=parse_datetime, required=True, help="검색 시작")
    jr.add_argument("--end", type=parse_datetime, default=None, help="검색 종료 (기본: 시작+6시간)")
    jr.add_argument("--return-start", type=parse_datetime, default=None, help="복편 검색 시작")
    jr.add_argument("--return-end", type=parse_datetime, default=None, help="복편 검색 종료")
    jr.add_argument("--adults", type=parse_count, default=1)
    jr.add_argument("--children", type=parse_count, default=0)
    jr.add_argument("--infants", type=parse_count, default=0)
    jr.add_argument("--seniors", type=parse_count, default=0)
    jr.add_argument("--currency", default="EUR")
    jr.add_argument(
        "--override-interval",
        action="store_true",
        help="검색 구간 시각 제한 무시",
    )
    return p


async def resolve_station(api: ItaloApi, query: str) -> Station:
    """역 코드/이름 → Station (카탈로그 조회)"""
    station = find_station(await api.station_list(), query)
    if station is None:
        raise ValueError(f"'{query}' 역을 찾을 수 없습니다")
    return station


def build_journey_request(
    args: argparse.Namespace,
    departure: Station,
    arrival: Station,
) -> JourneyRequest:
    """CLI 인자로부터 JourneyRequest 생성"""
    end = args.end or args.start + timedelta(hours=6)
    request = (
        JourneyRequest()
        .set_departure_station(departure)
        .set_arrival_station(arrival)
        .set_interval_start_date_time(args.start)
        .set_interval_end_date_time(end)
        .set_adult_number(args.adults)
        .set_child_number(args.children)
        .set_infant_number(args.infants)
        .set_senior_number(args.seniors)
        .set_currency_code(args.currency)
        .set_override_interval_time_restriction(args.override_interval)
    )
    round_trip = args.return_start is not None or args.return_end is not None
    return request.set_round_trip(round_trip, args.return_start, args.return_end)


async def cmd_stations(api: ItaloApi, args: argparse.Namespace) -> None:
    stations = await api.station_list()
    if args.search:
        stations = search_stations(stations, args.search)
    for s in stations:
        print(f"  {s.code:<6} {s.name} ({s.url_coding})")
    print(f"\n  {len(stations)}개 역")


async def cmd_board(api: ItaloApi, args: argparse.Namespace) -> None:
    station = await resolve_station(api, args.station)
    board = await api.station_realtime(station)
    trains = board.arrival_board if args.arrivals else board.departure_board
    title = "도착" if args.arrivals else "출발"
    print(f"  {station.display()} {title} 전광판\n")
    for t in trains:
        print(f"  {t.display()}")
    if not trains:
        print("  (열차 없음)")


async def cmd_train(api: ItaloApi, args: argparse.Namespace) -> None:
    info = await api.train_realtime(args.number)
    print(f"  {info.summary()}")
    print(f"  마지막 갱신: {info.last_update}")
    for st in info.train_schedule.stations_with_transit:
        platform = f" binario {st.platform}" if st.platform else ""
        print(
            f"  {st.sequence:>2}. {st.location_description} "
            f"{st.estimated_arrival_time}{platform}"
        )


async def cmd_journeys(api: ItaloApi, args: argparse.Namespace) -> None:
    stations = await api.station_list()
    departure = find_station(stations, args.departure)
    arrival = find_station(stations, args.arrival)
    if departure is None or arrival is None:
        missing = args.departure if departure is None else args.arrival
        raise ValueError(f"'{missing}' 역을 찾을 수 없습니다")

    request = build_journey_request(args, departure, arrival)
    results = await api.find_journeys(request)
    for solution in results.solutions:
        try:
            day = f"{solution.departure_date:%Y-%m-%d}"
        except ItaloError:
            day = solution.raw_departure_date
        print(f"  [{day}]")
        for journey in solution.journeys:
            try:
                line = journey.display()
            except ItaloError as e:
                trains = "+".join(s.train_number for s in journey.segments)
                line = f"Italo {trains} (시각 해석 실패: {e})"
            print(f"    {line}")
    if results.journey_count == 0:
        print("  검색 결과 없음")


COMMANDS = {
    "stations": cmd_stations,
    "board": cmd_board,
    "train": cmd_train,
    "journeys": cmd_journeys,
}


async def run(args: argparse.Namespace, config: Optional[ClientConfig] = None) -> None:
    async with ItaloApi(config or ClientConfig.from_env()) as api:
        await COMMANDS[args.command](api, args)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        asyncio.run(run(args))
    except (ItaloError, ValueError) as e:
        print(f"  [오류] {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n  프로그램 종료")
        return 130
    return 0


def cli_entry() -> None:
    """CLI 진입점 (pyproject.toml scripts에서 호출)"""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
