"""SessionGate 단위 테스트"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from italo.errors import SessionInitFailed, TransportError
from italo.skills.session import SessionGate


class TestEnsureSession:
    @pytest.mark.asyncio
    async def test_lazy_login_once(self) -> None:
        login = AsyncMock(return_value="sig-1")
        gate = SessionGate(login)
        assert not gate.is_initialized
        login.assert_not_called()

        assert await gate.ensure_session() == "sig-1"
        assert await gate.ensure_session() == "sig-1"

        login.assert_awaited_once()
        assert gate.token == "sig-1"
        assert gate.is_initialized

    @pytest.mark.asyncio
    async def test_concurrent_first_use_single_login(self) -> None:
        calls = 0

        async def slow_login() -> str:
            nonlocal calls
            calls += 1
            await asyncio.sleep(0.01)
            return f"sig-{calls}"

        gate = SessionGate(slow_login)
        tokens = await asyncio.gather(*(gate.ensure_session() for _ in range(5)))

        assert calls == 1
        assert set(tokens) == {"sig-1"}

    @pytest.mark.asyncio
    async def test_failure_leaves_no_token(self) -> None:
        login = AsyncMock(side_effect=TransportError("connessione rifiutata"))
        gate = SessionGate(login)

        with pytest.raises(SessionInitFailed) as exc:
            await gate.ensure_session()

        assert isinstance(exc.value.__cause__, TransportError)
        assert gate.token is None

    @pytest.mark.asyncio
    async def test_retry_after_failure_starts_fresh(self) -> None:
        login = AsyncMock(side_effect=[RuntimeError("down"), "sig-2"])
        gate = SessionGate(login)

        with pytest.raises(SessionInitFailed):
            await gate.ensure_session()
        assert await gate.ensure_session() == "sig-2"
        assert login.await_count == 2

    @pytest.mark.asyncio
    async def test_empty_token_rejected(self) -> None:
        gate = SessionGate(AsyncMock(return_value=""))
        with pytest.raises(SessionInitFailed):
            await gate.ensure_session()
        assert not gate.is_initialized

    @pytest.mark.asyncio
    async def test_reset_forces_new_login(self) -> None:
        login = AsyncMock(side_effect=["sig-1", "sig-2"])
        gate = SessionGate(login)

        await gate.ensure_session()
        gate.reset()
        assert gate.token is None
        assert await gate.ensure_session() == "sig-2"
