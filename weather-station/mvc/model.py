import numpy as np
from absl import logging as absl_logging

from notifier.subject import Subject

TEMPERATURE, HUMIDITY, PRESSURE = 0, 1, 2


class WeatherStation(Subject):
    """Observable data model holding the latest temperature/humidity/pressure."""
    def __init__(self) -> None:
        super().__init__()
        self._arr = np.zeros(3, dtype=np.float64)

    def set_measurements(self, temperature: float, humidity: float, pressure: float) -> None:
        absl_logging.info("WeatherStation: new measurements received.")
        self._arr = np.array([temperature, humidity, pressure], dtype=np.float64)
        self.measurements_changed()

    def measurements_changed(self) -> None:
        self.notify()

    @property
    def temperature(self) -> float:
        return float(self._arr[TEMPERATURE])

    @property
    def humidity(self) -> float:
        return float(self._arr[HUMIDITY])

    @property
    def pressure(self) -> float:
        return float(self._arr[PRESSURE])

    def get(self) -> np.ndarray:
        return self._arr

    def get_state(self) -> str:
        return (f"Temperature: {self.temperature}°C, "
                f"Humidity: {self.humidity}%, "
                f"Pressure: {self.pressure} hPa")
