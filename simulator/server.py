from __future__ import annotations

import asyncio
import json
import logging
from collections import deque
from datetime import datetime, timezone
from typing import Deque, Dict, Optional, Set

import websockets
from websockets.asyncio.server import ServerConnection

from holdem.events import EventChannel
from holdem.game import Game
from holdem.models import Event

LOGGER = logging.getLogger("holdem_spectator")

# SpectatorFeed mirrors table announcements to WebSocket watchers. The game loop
# stays synchronous in a worker thread; events hop onto the asyncio loop through
# call_soon_threadsafe so publishing never waits on a socket.


class SpectatorFeed:
    def __init__(self, history_limit: int = 50) -> None:
        self.spectators: Set[ServerConnection] = set()
        self.history: Deque[Dict[str, object]] = deque(maxlen=history_limit)
        self.seq = 0
        self._queue: Optional[asyncio.Queue] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def attach(self, channel: EventChannel, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop
        self._queue = asyncio.Queue()
        channel.subscribe(self._on_event)

    def _on_event(self, event: Event) -> None:
        if self._loop is None or self._queue is None:
            return
        self._loop.call_soon_threadsafe(self._queue.put_nowait, event)

    def close(self) -> None:
        if self._loop is not None and self._queue is not None:
            self._loop.call_soon_threadsafe(self._queue.put_nowait, None)

    async def pump(self) -> None:
        """Broadcast queued events until ``close`` is called."""
        if self._queue is None:
            raise RuntimeError("SpectatorFeed is not attached to a channel")
        while True:
            event = await self._queue.get()
            if event is None:
                break
            payload = self._event_payload(event)
            self.history.append(payload)
            await self._broadcast("spectator/event", payload)

    async def handle_connection(self, websocket: ServerConnection) -> None:
        LOGGER.info("Spectator connected")
        self.spectators.add(websocket)
        await self._send_json(websocket, "spectator/history", {"events": list(self.history)})
        try:
            async for _ in websocket:
                # Watchers are read-only; anything they send is ignored.
                continue
        except websockets.ConnectionClosed:
            pass
        finally:
            self.spectators.discard(websocket)
            LOGGER.info("Spectator disconnected")

    def _event_payload(self, event: Event) -> Dict[str, object]:
        self.seq += 1
        return {"seq": self.seq, "kind": event.kind.value, "text": event.text}

    async def _broadcast(self, msg_type: str, payload: Dict[str, object]) -> None:
        targets = list(self.spectators)
        if not targets:
            return
        message = self._envelope(msg_type, payload)
        await asyncio.gather(*(socket.send(message) for socket in targets), return_exceptions=True)

    async def _send_json(self, websocket: ServerConnection, msg_type: str, payload: Dict[str, object]) -> None:
        try:
            await websocket.send(self._envelope(msg_type, payload))
        except websockets.ConnectionClosed:
            pass

    def _envelope(self, msg_type: str, payload: Dict[str, object]) -> str:
        body: Dict[str, object] = {"type": msg_type, "v": 1, "ts": datetime.now(timezone.utc).isoformat()}
        body.update(payload)
        return json.dumps(body)


async def run_with_spectators(
    game: Game,
    channel: EventChannel,
    host: str = "0.0.0.0",
    port: int = 8765,
    max_hands: Optional[int] = None,
) -> None:
    feed = SpectatorFeed()
    feed.attach(channel, asyncio.get_running_loop())
    pump = asyncio.create_task(feed.pump())
    async with websockets.serve(feed.handle_connection, host, port):
        LOGGER.info("Spectator feed listening on %s:%s", host, port)
        try:
            await asyncio.to_thread(game.play, max_hands)
        finally:
            feed.close()
            await pump
