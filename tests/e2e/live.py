#!/usr/bin/env python3
"""Stream a raw PCM16 file through the relay and print what comes back (manual debugging)."""

from __future__ import annotations

import os
import json
import base64
import asyncio
import argparse
import contextlib
from pathlib import Path

import websockets

SAMPLE_RATE = 16000
BYTES_PER_SAMPLE = 2


def derive_default_server() -> str:
    host = os.getenv("RELAY_HOST", "localhost")
    port = os.getenv("PORT", "5050")
    return f"{host}:{port}"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream PCM16 audio through the GenAI audio relay")
    p.add_argument("--server", default=derive_default_server())
    p.add_argument("--path", default=os.getenv("WS_ENDPOINT_PATH", "/api/genai-audio"))
    p.add_argument("--secure", action="store_true")
    p.add_argument("--file", required=True, help="raw PCM16 mono 16kHz audio")
    p.add_argument("--chunk-ms", type=int, default=100)
    p.add_argument("--tail-s", type=float, default=8.0, help="seconds to keep listening after the file ends")
    p.add_argument("--out", default="", help="write received 24kHz PCM16 audio here")
    return p.parse_args()


def iter_chunks(pcm: bytes, chunk_ms: int):
    step = max(1, SAMPLE_RATE * BYTES_PER_SAMPLE * chunk_ms // 1000)
    for i in range(0, len(pcm), step):
        yield pcm[i : i + step]


async def _recv_printer(ws, received: bytearray) -> None:
    async for raw in ws:
        msg = json.loads(raw)
        if msg.get("type") == "audio":
            chunk = base64.b64decode(msg.get("data") or "")
            received.extend(chunk)
            print(f"<< audio {len(chunk)} bytes")
        else:
            print(f"<< {raw}")


async def run(args: argparse.Namespace) -> int:
    pcm = Path(args.file).read_bytes()
    scheme = "wss" if args.secure else "ws"
    ws_url = f"{scheme}://{args.server}{args.path}"
    print(f"ws: {ws_url} ({len(pcm)} bytes)")

    received = bytearray()
    async with websockets.connect(ws_url, max_size=None) as ws:
        task = asyncio.create_task(_recv_printer(ws, received))
        try:
            for chunk in iter_chunks(pcm, args.chunk_ms):
                await ws.send(chunk)
                await asyncio.sleep(args.chunk_ms / 1000.0)
            await asyncio.sleep(args.tail_s)
        finally:
            task.cancel()
            with contextlib.suppress(BaseException):
                await task

    if args.out:
        Path(args.out).write_bytes(bytes(received))
        print(f"wrote {len(received)} bytes to {args.out}")
    return 0


def main() -> None:
    raise SystemExit(asyncio.run(run(parse_args())))


if __name__ == "__main__":
    main()
