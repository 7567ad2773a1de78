#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging
from typing import Any, Dict

import websockets

logging.basicConfig(level=logging.INFO)

# Read-only terminal viewer for the simulator's spectator feed.


def format_event(payload: Dict[str, Any]) -> str:
    return f"#{payload.get('seq', '?'):>4} [{payload.get('kind', '?')}] {payload.get('text', '')}"


async def watch(url: str) -> None:
    async with websockets.connect(url) as ws:
        async for raw in ws:
            msg = json.loads(raw)
            msg_type = msg.get("type")
            if msg_type == "spectator/history":
                events = msg.get("events", [])
                if events:
                    print(f"--- {len(events)} earlier events ---")
                for payload in events:
                    print(format_event(payload))
            elif msg_type == "spectator/event":
                print(format_event(msg))
            else:
                logging.debug("Ignoring message type %s", msg_type)


def main() -> None:
    parser = argparse.ArgumentParser(description="Watch a running hold'em table")
    parser.add_argument("--url", default="ws://localhost:8765")
    args = parser.parse_args()
    try:
        asyncio.run(watch(args.url))
    except KeyboardInterrupt:
        pass
    except websockets.ConnectionClosed:
        print("Table closed the connection.")


if __name__ == "__main__":
    main()
