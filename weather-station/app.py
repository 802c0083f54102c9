# app.py
import asyncio
from typing import Sequence

from absl import app, flags
from absl import logging as absl_logging

from mvc.model import WeatherStation
from mvc.view import CurrentConditionsDisplay, StatisticsDisplay, ForecastDisplay, JsonPrintView
from mvc.controller import ReplayController, Reading
from payload.adapter import WeatherJsonAdapter
from transport.websocket_view import WebSocketView

HOST = "127.0.0.1"
PORT = 8765
BROADCAST_HZ = 30.0

READINGS: Sequence[Reading] = (
    (25.0, 65.0, 30.4),
    (27.0, 70.0, 29.2),
    (22.0, 90.0, 29.2),
    (28.0, 60.0, 30.8),
)
DETACH_AFTER = 3

FLAGS = flags.FLAGS
flags.DEFINE_enum("mode", "console", ["console", "json", "websocket"],
                  "console: print displays; json: also print JSON payloads; "
                  "websocket: serve the JSON feed to WebSocket clients.")
flags.DEFINE_string("host", HOST, "WebSocket bind address.")
flags.DEFINE_integer("port", PORT, "WebSocket port.", lower_bound=1, upper_bound=65535)
flags.DEFINE_float("hz", BROADCAST_HZ, "WebSocket broadcast rate.")
flags.DEFINE_float("interval", None, "Seconds between replayed readings "
                   "(default 0, or 1 in websocket mode).", lower_bound=0.0)
flags.DEFINE_integer("round_ndigits", 2, "Digits kept in JSON payload values.")

flags.register_validator("hz", lambda v: v > 0, message="--hz must be positive")


def run_demo(station: WeatherStation,
             current_display: CurrentConditionsDisplay,
             readings: Sequence[Reading] = READINGS,
             detach_after: int = DETACH_AFTER,
             interval: float = 0.0) -> None:
    """Weather station walkthrough: N readings, detach current conditions, the rest."""
    print("=== Observer Pattern Implementation ===")
    print("Weather Station Example")

    ReplayController(station, readings[:detach_after], interval=interval).replay()

    print(f"\n--- Detaching {current_display.name} ---")
    station.detach(current_display)

    ReplayController(station, readings[detach_after:], interval=interval).replay()


async def serve_feed(station: WeatherStation, interval: float) -> None:
    ws_view = WebSocketView(
        adapter=WeatherJsonAdapter(round_ndigits=FLAGS.round_ndigits),
        host=FLAGS.host, port=FLAGS.port, hz=FLAGS.hz
    )
    station.attach(ws_view)

    ctrl = ReplayController(station, READINGS, interval=interval, loop=True)
    absl_logging.info("[APP] Starting controller...")
    ctrl.start()
    try:
        # blocks until cancelled
        await ws_view.run()
    finally:
        ctrl.stop()
        absl_logging.info("[APP] Stopped.")


def replay_interval() -> float:
    if FLAGS.interval is not None:
        return FLAGS.interval
    return 1.0 if FLAGS.mode == "websocket" else 0.0


def main(argv):
    del argv  # unused
    station = WeatherStation()

    current_display = CurrentConditionsDisplay("Current Conditions Display")
    station.attach(current_display)
    station.attach(StatisticsDisplay("Statistics Display"))
    station.attach(ForecastDisplay("Forecast Display"))

    if FLAGS.mode == "websocket":
        try:
            asyncio.run(serve_feed(station, replay_interval()))
        except KeyboardInterrupt:
            pass
        return

    if FLAGS.mode == "json":
        station.attach(JsonPrintView(WeatherJsonAdapter(round_ndigits=FLAGS.round_ndigits)))
    run_demo(station, current_display, interval=replay_interval())


def run():
    app.run(main)


if __name__ == "__main__":
    run()
