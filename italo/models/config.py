"""클라이언트 설정 모델"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional


@dataclass
class ClientConfig:
    """클라이언트 설정 - 엔드포인트/인증/HTTP 튜닝 파라미터"""

    # 엔드포인트
    login_endpoint: str = (
        "https://big.ntvspa.it/BIG/v7/Rest/SessionManager.svc/Login"
    )
    journey_endpoint: str = (
        "https://big.ntvspa.it/BIG/v7/Rest/BookingManager.svc/GetAvailableTrains"
    )
    station_list_endpoint: str = "https://italoinviaggio.italotreno.it/it/stazione"
    station_realtime_endpoint: str = (
        "https://italoinviaggio.italotreno.it/api/RicercaStazioneService?&CodiceStazione="
    )
    train_realtime_endpoint: str = (
        "https://italoinviaggio.italotreno.it/api/RicercaTrenoService?&TrainNumber="
    )

    # 익명 로그인 계정 (웹사이트 공용)
    login_domain: str = "WWW"
    login_username: str = "WWW_Anonymous"
    login_password: str = "Accenture$1"
    source_system: int = 1

    # HTTP 설정
    request_timeout: float = 15.0
    connect_timeout: float = 5.0
    max_connections: int = 3
    user_agent: str = "Mozilla/5.0 (X11; Linux x86_64) italo-treno-client"

    def __post_init__(self) -> None:
        if self.request_timeout <= 0 or self.connect_timeout <= 0:
            raise ValueError("타임아웃은 0보다 커야 합니다")
        if self.max_connections < 1:
            raise ValueError("max_connections는 1 이상이어야 합니다")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
        """ITALO_<FIELD> 환경 변수로 기본값 덮어쓰기"""
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        for f in fields(cls):
            raw = env.get(f"ITALO_{f.name.upper()}", "").strip()
            if not raw:
                continue
            if f.type in ("int", int):
                overrides[f.name] = int(raw)
            elif f.type in ("float", float):
                overrides[f.name] = float(raw)
            else:
                overrides[f.name] = raw
        return cls(**overrides)  # type: ignore[arg-type]
