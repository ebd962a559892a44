"""Italo API 클라이언트

역 카탈로그, 역/열차 실시간 정보, 여정 검색을 제공한다.
여정 검색은 세션 서명이 필요하며 첫 호출 시 자동으로 로그인한다.
재시도와 캐싱은 하지 않는다 (호출자가 타임아웃/재시도 정책을 적용).
"""

from __future__ import annotations

import asyncio
import logging
from time import monotonic
from types import TracebackType
from typing import Any, ClassVar, Optional, Union
from urllib.parse import quote

import aiohttp

from italo.errors import TransportError
from italo.models.config import ClientConfig
from italo.models.fields import as_mapping, require_str
from italo.models.journey import JourneyResults
from italo.models.request import JourneyRequest
from italo.models.station import Station, StationRealtime
from italo.models.train import TrainRealtime
from italo.skills.extractor import parse_json_region
from italo.skills.session import SessionGate
from italo.skills.station_catalog import build_catalog

logger = logging.getLogger("italo.client")


class ItaloApi:
    """Italo 정보 서비스 접근 인터페이스

    사용 예:
        async with ItaloApi() as api:
            stations = await api.station_list()
    """

    HEADERS: ClassVar[dict[str, str]] = {
        "Accept": "application/json, text/html;q=0.9, */*;q=0.8",
        "Accept-Language": "it-IT,it;q=0.9",
    }

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._session = session
        self._owns_session = session is None
        self._gate = SessionGate(self.login)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._gate.is_initialized

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(
                total=self._config.request_timeout,
                connect=self._config.connect_timeout,
            )
            connector = aiohttp.TCPConnector(
                limit=self._config.max_connections,
                ttl_dns_cache=300,
                enable_cleanup_closed=True,
            )
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                connector=connector,
                headers={**self.HEADERS, "User-Agent": self._config.user_agent},
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> ItaloApi:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()

    # ── 전송 ────────────────────────────────────────────────────

    async def _request_text(self, method: str, url: str, **kwargs: Any) -> str:
        """HTTP 호출 → 본문 텍스트. 네트워크/HTTP 오류는 TransportError."""
        session = await self._get_session()
        t0 = monotonic()
        try:
            async with session.request(method, url, **kwargs) as resp:
                # JSON API도 Content-Type을 신뢰할 수 없어 텍스트로 받는다
                body = await resp.text()
                if resp.status >= 400:
                    snippet = body.strip().replace("\n", " ")[:500]
                    raise TransportError(
                        f"HTTP {resp.status} | endpoint={url} | response_body={snippet}",
                        url=url,
                        status=resp.status,
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{method} {url} 실패: {e!r}", url=url) from e

        logger.debug(
            "%s %s → %d bytes (%.0fms)",
            method, url, len(body), (monotonic() - t0) * 1000,
        )
        return body

    async def _request_json(self, method: str, url: str, **kwargs: Any) -> Any:
        body = await self._request_text(method, url, **kwargs)
        return parse_json_region(body, url)

    # ── 세션 ────────────────────────────────────────────────────

    async def login(self) -> str:
        """익명 계정 로그인 → 세션 서명(signature)"""
        cfg = self._config
        body = {
            "Login": {
                "Domain": cfg.login_domain,
                "Password": cfg.login_password,
                "Username": cfg.login_username,
            },
            "SourceSystem": cfg.source_system,
        }
        data = await self._request_json("POST", cfg.login_endpoint, json=body)
        return require_str(as_mapping(data, "LoginResponse"), "Signature", "LoginResponse")

    async def init(self) -> None:
        """세션이 없으면 로그인 (있으면 아무것도 하지 않음)"""
        await self._gate.ensure_session()

    def reset_session(self) -> None:
        self._gate.reset()

    # ── 조회 ────────────────────────────────────────────────────

    async def station_list(self) -> list[Station]:
        """서비스가 인식하는 역 목록 (station_realtime에 쓰는 내부 ID 포함)"""
        document = await self._request_text(
            "GET", self._config.station_list_endpoint
        )
        return build_catalog(document)

    async def station_realtime(self, station: Union[Station, str]) -> StationRealtime:
        """역 도착/출발 전광판"""
        code = station.code if isinstance(station, Station) else station
        url = self._config.station_realtime_endpoint + quote(code, safe="")
        data = await self._request_json("GET", url)
        return StationRealtime.from_dict(data)

    async def train_realtime(self, train_number: str) -> TrainRealtime:
        """운행 중 열차 실시간 정보"""
        url = self._config.train_realtime_endpoint + quote(train_number.strip(), safe="")
        data = await self._request_json("GET", url)
        return TrainRealtime.from_dict(data)

    async def find_journeys(self, request: JourneyRequest) -> JourneyResults:
        """여정 검색. 요청이 불완전하면 로그인 전에 IncompleteJourneyRequest."""
        request.to_payload()
        signature = await self._gate.ensure_session()
        payload = request.serialize(signature, self._config.source_system)
        logger.info("여정 검색: %s", request.summary())
        data = await self._request_json(
            "POST", self._config.journey_endpoint, json=payload
        )
        results = JourneyResults.from_dict(data)
        logger.info(
            "여정 검색 완료: 날짜 %d개, 여정 %d개",
            len(results.solutions), results.journey_count,
        )
        return results
