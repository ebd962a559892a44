"""세션 게이트 스킬

첫 권한 호출 전에 로그인 토큰(signature)을 지연 발급받고 이후 재사용한다.
동시에 여러 호출이 첫 사용을 시도해도 asyncio.Lock으로 로그인은 한 번만
수행한다. 만료된 토큰은 자동 갱신하지 않으며 reset()으로만 교체된다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from italo.errors import SessionInitFailed

logger = logging.getLogger("italo.skill.session")

LoginFn = Callable[[], Awaitable[str]]


class SessionGate:
    """지연 초기화 세션 토큰 보관소"""

    __slots__ = ("_login", "_token", "_lock")

    def __init__(self, login: LoginFn) -> None:
        self._login = login
        self._token: Optional[str] = None
        self._lock = asyncio.Lock()

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_initialized(self) -> bool:
        return self._token is not None

    async def ensure_session(self) -> str:
        """토큰이 없으면 로그인, 있으면 그대로 반환"""
        if self._token is not None:
            return self._token

        async with self._lock:
            # 대기하는 동안 다른 호출이 로그인을 끝냈을 수 있음
            if self._token is not None:
                return self._token

            logger.debug("세션 토큰 없음 → 로그인 시도")
            try:
                token = await self._login()
            except Exception as e:
                logger.warning("로그인 실패: %s", e)
                raise SessionInitFailed(f"login failed: {e}") from e

            if not isinstance(token, str) or not token:
                raise SessionInitFailed(f"login returned no token: {token!r}")

            self._token = token
            logger.info("세션 초기화 완료")
            return token

    def reset(self) -> None:
        """토큰 폐기. 다음 ensure_session에서 다시 로그인한다."""
        self._token = None
