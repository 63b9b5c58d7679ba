from __future__ import annotations

import time
import asyncio

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

import audio_relay.server as server
from audio_relay.state import RuntimeDeps
from audio_relay.errors import UpstreamConnectionError
from audio_relay.realtime.events import UpstreamEvent
from audio_relay.config.websocket import HEALTH_TEXT
from audio_relay.realtime.signals import SignalKind, UpstreamSignal


class _EchoUpstream:
    """Answers every audio chunk with one short model turn carrying the same audio."""

    def __init__(self) -> None:
        self.sent: list[str] = []
        self.close_calls = 0
        self._signals: asyncio.Queue[UpstreamSignal] = asyncio.Queue()
        self._signals.put_nowait(UpstreamSignal.opened())

    async def send(self, audio_b64: str, mime_type: str) -> None:
        self.sent.append(audio_b64)
        self._signals.put_nowait(UpstreamSignal.message(UpstreamEvent(model_turn_started=True)))
        self._signals.put_nowait(UpstreamSignal.message(UpstreamEvent(model_turn_started=True, audio=b"ABC")))
        self._signals.put_nowait(UpstreamSignal.message(UpstreamEvent(turn_complete=True)))

    async def signals(self):
        while True:
            signal = await self._signals.get()
            yield signal
            if signal.kind is SignalKind.CLOSE:
                return

    async def close(self) -> None:
        self.close_calls += 1


class _FakeBridge:
    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.sessions: list[_EchoUpstream] = []
        self.closed = False

    async def open_session(self) -> _EchoUpstream:
        if self.fail:
            raise UpstreamConnectionError("GEMINI_API_KEY is not configured")
        upstream = _EchoUpstream()
        self.sessions.append(upstream)
        return upstream

    async def aclose(self) -> None:
        self.closed = True


def _wait_until(predicate, timeout: float = 2.0) -> None:
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not met before timeout")
        time.sleep(0.01)


def _install_bridge(monkeypatch: pytest.MonkeyPatch, bridge: _FakeBridge) -> None:
    async def _build(settings=None) -> RuntimeDeps:
        return RuntimeDeps(live_bridge=bridge, settings=settings or server.settings)

    monkeypatch.setattr(server, "build_runtime_deps", _build)


def test_health_endpoints(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_bridge(monkeypatch, _FakeBridge())
    with TestClient(server.app) as client:
        root = client.get("/")
        assert root.status_code == 200
        assert root.text == HEALTH_TEXT
        assert client.get("/health").json() == {"status": "ok"}
        assert client.get("/healthz").json() == {"status": "ok"}


def test_audio_round_trip_through_relay(monkeypatch: pytest.MonkeyPatch) -> None:
    bridge = _FakeBridge()
    _install_bridge(monkeypatch, bridge)
    with TestClient(server.app) as client:
        with client.websocket_connect(server.settings.websocket.endpoint_path) as ws:
            assert ws.receive_json() == {"type": "status", "message": "Session opened"}
            ws.send_bytes(b"ABC")

            start = ws.receive_json()
            assert start["type"] == "generation_start"
            assert isinstance(start["turnId"], str)
            assert ws.receive_json() == {"type": "audio", "data": "QUJD"}

            upstream = bridge.sessions[0]
            ws.close(1000)
            _wait_until(lambda: upstream.close_calls == 1)

        assert upstream.sent == ["QUJD"]
    assert bridge.closed is True


def test_text_frames_are_relayed_as_utf8(monkeypatch: pytest.MonkeyPatch) -> None:
    bridge = _FakeBridge()
    _install_bridge(monkeypatch, bridge)
    with TestClient(server.app) as client:
        with client.websocket_connect(server.settings.websocket.endpoint_path) as ws:
            ws.receive_json()
            ws.send_text("ABC")
            assert ws.receive_json()["type"] == "generation_start"
            ws.receive_json()
            ws.close(1000)
            _wait_until(lambda: bridge.sessions[0].close_calls == 1)
        assert bridge.sessions[0].sent == ["QUJD"]


def test_open_failure_reports_error_and_closes(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_bridge(monkeypatch, _FakeBridge(fail=True))
    with TestClient(server.app) as client:
        with client.websocket_connect(server.settings.websocket.endpoint_path) as ws:
            assert ws.receive_json() == {"type": "error", "message": "GEMINI_API_KEY is not configured"}
            with pytest.raises(WebSocketDisconnect) as exc:
                ws.receive_json()
            assert exc.value.code == 1011
