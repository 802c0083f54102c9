# transport/websocket_view.py
import asyncio
import threading
from typing import Set, Optional, Tuple

from absl import logging as absl_logging
from websockets.asyncio.server import serve, ServerConnection

from mvc.model import WeatherStation
from mvc.view import StationView
from payload.adapter import IPayloadAdapter


class WebSocketView(StationView):
    """
    Observer View that publishes the latest measurements to all WebSocket clients.
    - Thread-safe: station updates may come from a controller thread.
    - Uses Adapter to convert the station -> JSON text.
    """
    def __init__(self, adapter: IPayloadAdapter, name: str = "WebSocket View",
                 host: str = "127.0.0.1", port: int = 8765, hz: float = 30.0) -> None:
        super().__init__(name)
        self.adapter = adapter
        self.host = host
        self.port = port
        self.hz = hz

        self._latest_text: Optional[str] = None
        self._lock = threading.Lock()
        self._clients: Set[ServerConnection] = set()

    # ---- Observer API ----
    def pull(self, station: WeatherStation) -> None:
        text = self.adapter.to_text(station)
        with self._lock:
            self._latest_text = text

    def render(self) -> Optional[str]:
        # pushed to clients by the broadcast loop, not printed
        return None

    @property
    def latest_text(self) -> Optional[str]:
        with self._lock:
            return self._latest_text

    # ---- WebSocket server ----
    @property
    def clients(self) -> Tuple[ServerConnection, ...]:
        return tuple(self._clients)

    def add_client(self, ws: ServerConnection) -> None:
        self._clients.add(ws)

    def remove_client(self, ws: ServerConnection) -> None:
        self._clients.discard(ws)

    async def _handler(self, ws: ServerConnection) -> None:
        self.add_client(ws)
        absl_logging.info("[WS] client connected (%d total)", len(self._clients))
        try:
            # inbound messages are ignored
            async for _ in ws:
                pass
        finally:
            self.remove_client(ws)
            absl_logging.info("[WS] client disconnected (%d total)", len(self._clients))

    async def broadcast_once(self) -> int:
        text = self.latest_text
        clients = list(self._clients)
        if not text or not clients:
            return 0
        results = await asyncio.gather(
            *(c.send(text) for c in clients),
            return_exceptions=True
        )
        for client, result in zip(clients, results):
            if isinstance(result, Exception):
                absl_logging.warning("[WS] send to %r failed: %s", client, result)
        return len(clients)

    async def _broadcast_loop(self) -> None:
        period = 1.0 / self.hz
        while True:
            await self.broadcast_once()
            await asyncio.sleep(period)

    async def run(self) -> None:
        absl_logging.info("[WS] Listening on ws://%s:%d", self.host, self.port)
        async with serve(self._handler, self.host, self.port):
            await self._broadcast_loop()
