import threading
from typing import Iterable, Optional, Sequence, Tuple

from absl import logging as absl_logging

from mvc.model import WeatherStation

Reading = Tuple[float, float, float]


class ReplayController:
    """
    Controller:
      - replays (temperature, humidity, pressure) readings
      - writes each one to the Model, which notifies its views
      - optionally paces readings and loops, for long-running feeds
    """
    def __init__(self,
                 model: WeatherStation,
                 readings: Iterable[Reading],
                 interval: float = 0.0,
                 loop: bool = False) -> None:
        self.model = model
        self.readings: Sequence[Reading] = list(readings)
        self.interval = interval
        self.loop = loop

        self._stop = threading.Event()
        self._th: Optional[threading.Thread] = None

    def start(self) -> None:
        self._stop.clear()
        self._th = threading.Thread(target=self.replay, daemon=True)
        self._th.start()

    @property
    def is_running(self) -> bool:
        return self._th is not None and self._th.is_alive()

    def stop(self) -> None:
        self._stop.set()
        if self._th:
            self._th.join(timeout=2.0)

    def replay(self) -> int:
        """Apply readings in order; returns how many were applied."""
        applied = 0
        while True:
            for temperature, humidity, pressure in self.readings:
                if self._stop.is_set():
                    return applied
                self.model.set_measurements(temperature, humidity, pressure)
                applied += 1
                if self.interval > 0:
                    # wakes early on stop()
                    self._stop.wait(self.interval)
            if not self.loop or not self.readings:
                absl_logging.info("Controller: replayed %d reading(s).", applied)
                return applied
