# mvc/view.py
from abc import abstractmethod
from typing import List, Optional, Tuple

import numpy as np
from absl import logging as absl_logging

from mvc.model import WeatherStation
from notifier.observer import IObserver, ISubject
from payload.adapter import IPayloadAdapter

IMPROVING = "Improving weather on the way!"
UNCHANGED = "More of the same"
WORSENING = "Watch out for cooler, rainy weather"


class StationView(IObserver):
    """Named observer that only reacts to WeatherStation subjects."""
    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def update(self, subject: ISubject) -> None:
        if not isinstance(subject, WeatherStation):
            absl_logging.debug("[%s] ignoring update from %r", self._name, subject)
            return
        self.pull(subject)
        self.display()

    @abstractmethod
    def pull(self, station: WeatherStation) -> None:
        """Copy what this view needs from the station."""

    @abstractmethod
    def render(self) -> Optional[str]:
        """Return the display line, or None if there is nothing to show yet."""

    def display(self) -> Optional[str]:
        text = self.render()
        if text is not None:
            print(f"[{self._name}] {text}")
        return text


class CurrentConditionsDisplay(StationView):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.temperature: Optional[float] = None
        self.humidity: Optional[float] = None

    def pull(self, station: WeatherStation) -> None:
        self.temperature = station.temperature
        self.humidity = station.humidity

    def render(self) -> Optional[str]:
        if self.temperature is None:
            return None
        return f"Current conditions: {self.temperature:g}°C and {self.humidity:g}% humidity"


class StatisticsDisplay(StationView):
    """Keeps every temperature seen; avg/max/min are recomputed over all of it."""
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.temperatures: List[float] = []

    def pull(self, station: WeatherStation) -> None:
        self.temperatures.append(station.temperature)

    def stats(self) -> Optional[Tuple[float, float, float]]:
        if not self.temperatures:
            return None
        arr = np.asarray(self.temperatures, dtype=np.float64)
        return float(arr.mean()), float(arr.max()), float(arr.min())

    def render(self) -> Optional[str]:
        stats = self.stats()
        if stats is None:
            return None
        avg, hi, lo = stats
        return f"Avg/Max/Min temperature: {avg:g}/{hi:g}/{lo:g}°C"


class ForecastDisplay(StationView):
    def __init__(self, name: str, initial_pressure: float = 29.92) -> None:
        super().__init__(name)
        self.current_pressure = initial_pressure
        self.last_pressure = initial_pressure

    def pull(self, station: WeatherStation) -> None:
        self.last_pressure = self.current_pressure
        self.current_pressure = station.pressure

    def forecast(self) -> str:
        if self.current_pressure > self.last_pressure:
            return IMPROVING
        if self.current_pressure == self.last_pressure:
            return UNCHANGED
        return WORSENING

    def render(self) -> str:
        return f"Forecast: {self.forecast()}"


class JsonPrintView(StationView):
    """Observer that converts the station to JSON via Adapter, then prints it."""
    def __init__(self, adapter: IPayloadAdapter, name: str = "JSON View", preview_chars: int = 160) -> None:
        super().__init__(name)
        self.adapter = adapter
        self.preview_chars = preview_chars
        self.text: Optional[str] = None

    def pull(self, station: WeatherStation) -> None:
        self.text = self.adapter.to_text(station)

    def render(self) -> Optional[str]:
        if self.text is None:
            return None
        return self.text[: self.preview_chars] + ("..." if len(self.text) > self.preview_chars else "")
